from typing import Optional

from fastapi import Header, HTTPException, status
from app.config.settings import settings


def api_key_required(x_api_key: Optional[str] = Header(None)):
    """Check the `X-API-Key` header against `settings.API_KEY`.

    With no `API_KEY` configured the API is open.
    """
    expected = settings.API_KEY
    if not expected:
        return True
    if x_api_key != expected:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or missing API Key")
    return True
