import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from stayvista.config import APP_HOST, APP_PORT, CORS_ORIGINS, DEBUG, LOG_LEVEL
from stayvista.database.init import Store, create_client
from stayvista.services.payment_service import PaymentService
from stayvista.responses.base import build_response
from stayvista.responses.error import ERRORS_BY_STATUS, bad_request_error
from stayvista.routes import (
    auth_routes,
    user_routes,
    room_routes,
    booking_routes,
    payment_routes,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    client = None
    if app.state.store is None:
        try:
            client = create_client()
            app.state.store = Store.from_client(client)
            app.state.store.ping()
        except PyMongoError:
            # Handlers answer with a 500 until the store is reachable
            logger.exception("Could not reach MongoDB, serving anyway")
    yield
    if client is not None:
        client.close()


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    error = ERRORS_BY_STATUS.get(exc.status_code)
    if error is not None:
        return error(str(exc.detail))
    return build_response(exc.status_code, "failure", message=str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    messages = [f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in exc.errors()]
    return bad_request_error("; ".join(messages) or "Malformed request")


def create_app(
    store: Optional[Store] = None,
    payment_service: Optional[PaymentService] = None,
) -> FastAPI:
    """Build the API. Without a store one is connected on startup."""
    app = FastAPI(title="StayVista API", lifespan=lifespan)
    app.state.store = store
    app.state.payment_service = payment_service or PaymentService()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(auth_routes.router)
    app.include_router(user_routes.router)
    app.include_router(room_routes.router)
    app.include_router(booking_routes.router)
    app.include_router(payment_routes.router)

    @app.get("/", response_class=PlainTextResponse)
    def read_root():
        return "Hello from StayVista Server.."

    return app


app = create_app()


def run():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("StayVista is running on port %s", APP_PORT)
    uvicorn.run("stayvista.main:app", host=APP_HOST, port=APP_PORT, reload=DEBUG)


if __name__ == "__main__":
    run()
