from fastapi.responses import JSONResponse

from .base import serialize


def raw_response(data=None):
    """Send the result as-is; ``None`` goes out as JSON ``null``."""
    return JSONResponse(content=serialize(data), status_code=200)


def success_flag_response():
    return raw_response({"success": True})
