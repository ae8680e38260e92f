from typing import Any, Dict


def success_response(message: str, data: Any) -> Dict:
    """Standard success envelope.

    {
      "success": true,
      "message": "...",
      "data": ...
    }
    """
    return {"success": True, "message": message, "data": data}


def error_response(message: str) -> Dict:
    """Standard error envelope: `success` false, the error text and no data."""
    return {"success": False, "message": message, "data": None}
