import logging

from fastapi import APIRouter, Body, Depends

from stayvista.database.init import Store, get_store
from stayvista.schemas.room_schema import RoomStatusUpdate
from stayvista.services.room_service import RoomService, InvalidRoomIdError
from stayvista.responses.success import raw_response
from stayvista.responses.error import bad_request_error, internal_server_error

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Rooms"])
room_service = RoomService()


@router.get("/rooms")
def get_rooms(store: Store = Depends(get_store)):
    try:
        return raw_response(room_service.get_all(store))
    except Exception as e:
        logger.exception("Failed to list rooms")
        return internal_server_error(str(e))


@router.get("/rooms/{email}")
def get_host_rooms(email: str, store: Store = Depends(get_store)):
    try:
        return raw_response(room_service.get_by_host_email(store, email))
    except Exception as e:
        logger.exception("Failed to list rooms for host %s", email)
        return internal_server_error(str(e))


@router.get("/room/{room_id}")
def get_room(room_id: str, store: Store = Depends(get_store)):
    """A malformed id is treated the same as an absent room: the body is null."""
    try:
        return raw_response(room_service.get_by_id(store, room_id))
    except Exception as e:
        logger.exception("Failed to fetch room %s", room_id)
        return internal_server_error(str(e))


@router.post("/room")
def create_room(room: dict = Body(...), store: Store = Depends(get_store)):
    try:
        return raw_response(room_service.create(store, room))
    except Exception as e:
        logger.exception("Failed to create room")
        return internal_server_error(str(e))


@router.patch("/rooms/status/{room_id}")
def update_room_status(
    room_id: str,
    payload: RoomStatusUpdate,
    store: Store = Depends(get_store),
):
    try:
        return raw_response(
            room_service.update_booked_status(store, room_id, payload.status)
        )
    except InvalidRoomIdError as e:
        return bad_request_error(str(e))
    except Exception as e:
        logger.exception("Failed to update status of room %s", room_id)
        return internal_server_error(str(e))
