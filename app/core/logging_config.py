import logging
import logging.handlers
from typing import List, Optional

from app.config.settings import settings

# marks handlers we attached, so a second setup call is a no-op
_HANDLER_FLAG = "_mrt_handler"


def _build_handlers(config) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    if config.LOG_TO_CONSOLE:
        handlers.append(logging.StreamHandler())
    if config.LOG_FILE:
        handlers.append(
            logging.handlers.RotatingFileHandler(
                config.LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
            )
        )
    return handlers


def setup_logging(config=settings, target: Optional[logging.Logger] = None) -> None:
    """Attach console/file handlers to `target` (the root logger by default).

    Level and format come from `LOG_LEVEL` / `LOG_FORMAT`; the `mrt` loggers get
    the same level, uvicorn's own loggers are kept at WARNING since requests are
    logged by the app middleware.
    """
    target = target or logging.getLogger()
    if any(getattr(h, _HANDLER_FLAG, False) for h in target.handlers):
        return

    level = getattr(logging, config.LOG_LEVEL.upper(), logging.INFO)
    formatter = logging.Formatter(config.LOG_FORMAT)
    target.setLevel(level)
    for handler in _build_handlers(config):
        setattr(handler, _HANDLER_FLAG, True)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        target.addHandler(handler)

    logging.getLogger("mrt").setLevel(level)
    for name in ("uvicorn.access", "uvicorn.error"):
        logging.getLogger(name).setLevel(logging.WARNING)
