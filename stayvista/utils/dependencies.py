from fastapi import Cookie, HTTPException, Request
from jose import jwt, JWTError
from datetime import datetime, timedelta, timezone
from typing import Optional

from stayvista.config import (
    ALGORITHM,
    SECRET_KEY,
    ACCESS_TOKEN_EXPIRE_DAYS,
    TOKEN_COOKIE_NAME,
)


class InvalidTokenError(Exception):
    """Raised when a token is missing, malformed, expired or wrongly signed."""


def create_access_token(
    data: dict,
    expires_delta: Optional[timedelta] = None,
    secret_key: str = SECRET_KEY,
) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(days=ACCESS_TOKEN_EXPIRE_DAYS)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, secret_key, algorithm=ALGORITHM)


def decode_access_token(token: Optional[str], secret_key: str = SECRET_KEY) -> dict:
    if not token:
        raise InvalidTokenError("Token is missing")
    try:
        return jwt.decode(token, secret_key, algorithms=[ALGORITHM])
    except JWTError as e:
        raise InvalidTokenError(str(e)) from e


def get_current_user(
    request: Request,
    token: Optional[str] = Cookie(None, alias=TOKEN_COOKIE_NAME),
) -> dict:
    """Claims of the cookie token; any token problem is a 401."""
    try:
        claims = decode_access_token(token)
    except InvalidTokenError:
        raise HTTPException(status_code=401, detail="unauthorized access")

    request.state.user = claims
    return claims


class MalformedBodyError(ValueError):
    pass


async def read_json_object(request: Request) -> dict:
    """Parse the request body as a JSON object.

    Routes behind ``get_current_user`` read their body this way so the token
    check runs before any body parsing.
    """
    try:
        body = await request.json()
    except ValueError as e:
        raise MalformedBodyError("Request body must be valid JSON") from e
    if not isinstance(body, dict):
        raise MalformedBodyError("Request body must be a JSON object")
    return body
