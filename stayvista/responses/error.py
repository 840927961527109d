from fastapi import status
from .base import build_response


def bad_request_error(error: str = "Bad request"):
    return build_response(
        status.HTTP_400_BAD_REQUEST,
        "failure",
        error="bad_request",
        message=error,
    )


def not_found_error(error: str = "Resource not found"):
    return build_response(
        status.HTTP_404_NOT_FOUND,
        "failure",
        error="not_found",
        message=error,
    )


def unauthorized_error(error: str = "unauthorized access"):
    return build_response(
        status.HTTP_401_UNAUTHORIZED,
        "failure",
        error="unauthorized",
        message=error,
    )


def method_not_allowed_error(error: str = "Method not allowed"):
    return build_response(
        status.HTTP_405_METHOD_NOT_ALLOWED,
        "failure",
        error="method_not_allowed",
        message=error,
    )


def internal_server_error(error: str = "Internal server error"):
    return build_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "failure",
        error="internal_server_error",
        message=error,
    )


ERRORS_BY_STATUS = {
    status.HTTP_400_BAD_REQUEST: bad_request_error,
    status.HTTP_401_UNAUTHORIZED: unauthorized_error,
    status.HTTP_404_NOT_FOUND: not_found_error,
    status.HTTP_405_METHOD_NOT_ALLOWED: method_not_allowed_error,
}
