"""Package initializer for `app`.

The FastAPI instance lives in the top-level `app.py`, which the `app` package
shadows on import. Load that file explicitly and expose its `app` symbol so
`from app import app` and `uvicorn app:app` both work.
"""
from importlib import util
import os
import sys

_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_app_py = os.path.join(_root, "app.py")

if os.path.exists(_app_py):
	spec = util.spec_from_file_location("_mrt_app_module", _app_py)
	module = util.module_from_spec(spec)
	sys.modules[spec.name] = module
	spec.loader.exec_module(module)
	app = module.app
else:
	app = None

__all__ = ["app"]
