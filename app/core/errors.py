from typing import Optional


class MRTError(Exception):
    """Base class for errors surfaced to API clients as a 400 envelope."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FetchError(MRTError):
    """Upstream request failed: network error, timeout or non-2xx status."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class DecodeError(MRTError):
    """Upstream payload is not the JSON shape we expect."""


class NotFoundError(MRTError):
    pass


class FormatError(MRTError):
    pass
