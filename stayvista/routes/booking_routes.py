import logging

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool

from stayvista.database.init import Store, get_store
from stayvista.services.booking_service import BookingService
from stayvista.utils.dependencies import (
    MalformedBodyError,
    get_current_user,
    read_json_object,
)
from stayvista.responses.success import raw_response
from stayvista.responses.error import bad_request_error, internal_server_error

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Bookings"])
booking_service = BookingService()


@router.post("/bookings")
async def create_booking(
    request: Request,
    store: Store = Depends(get_store),
    current_user: dict = Depends(get_current_user),
):
    try:
        booking = await read_json_object(request)
    except MalformedBodyError as e:
        return bad_request_error(str(e))

    try:
        result = await run_in_threadpool(booking_service.create, store, booking)
        return raw_response(result)
    except Exception as e:
        logger.exception("Failed to save booking for %s", current_user.get("email"))
        return internal_server_error(str(e))
