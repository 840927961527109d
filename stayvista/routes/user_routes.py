import logging

from fastapi import APIRouter, Body, Depends

from stayvista.database.init import Store, get_store
from stayvista.services.user_service import UserService
from stayvista.responses.success import raw_response
from stayvista.responses.error import internal_server_error

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Users"])
user_service = UserService()


@router.get("/users")
def get_users(store: Store = Depends(get_store)):
    try:
        return raw_response(user_service.get_all(store))
    except Exception as e:
        logger.exception("Failed to list users")
        return internal_server_error(str(e))


@router.get("/user/{email}")
def get_user(email: str, store: Store = Depends(get_store)):
    try:
        return raw_response(user_service.get_by_email(store, email))
    except Exception as e:
        logger.exception("Failed to fetch user %s", email)
        return internal_server_error(str(e))


@router.put("/users/{email}")
def save_user(email: str, user: dict = Body(...), store: Store = Depends(get_store)):
    """Save a user on first login; an already stored user is returned untouched."""
    try:
        return raw_response(user_service.upsert_by_email(store, email, user))
    except Exception as e:
        logger.exception("Failed to save user %s", email)
        return internal_server_error(str(e))
