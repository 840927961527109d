from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from typing import Optional, Any
from bson import ObjectId


def serialize(data: Any) -> Any:
    # Store identifiers go over the wire as plain strings
    return jsonable_encoder(data, custom_encoder={ObjectId: str})


def build_response(
    status_code: int,
    status: str = None,
    message: str = None,
    error: Optional[str] = None,
) -> JSONResponse:
    response = {}

    if status is not None:
        response["status"] = status

    if message is not None:
        response["message"] = message

    if error is not None:
        response["error"] = error

    return JSONResponse(
        content=response,
        status_code=status_code,
        media_type="application/json"
    )
