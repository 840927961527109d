import logging

from fastapi import APIRouter, Body

from stayvista.config import TOKEN_COOKIE_NAME, cookie_options
from stayvista.utils.dependencies import create_access_token
from stayvista.responses.success import success_flag_response
from stayvista.responses.error import internal_server_error

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])


@router.post("/jwt")
def issue_token(user: dict = Body(...)):
    """Sign the posted user claims and hand them back as an HTTP-only cookie."""
    try:
        token = create_access_token(user)
        response = success_flag_response()
        response.set_cookie(TOKEN_COOKIE_NAME, token, **cookie_options())
        return response
    except Exception as e:
        logger.exception("Failed to issue token")
        return internal_server_error(str(e))


@router.get("/logout")
def logout():
    try:
        response = success_flag_response()
        response.delete_cookie(TOKEN_COOKIE_NAME, **cookie_options())
        return response
    except Exception as e:
        logger.exception("Failed to clear token cookie")
        return internal_server_error(str(e))
