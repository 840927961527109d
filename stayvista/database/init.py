import logging

from fastapi import Request
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.server_api import ServerApi

from stayvista.config import DB_NAME, MONGO_URI

logger = logging.getLogger(__name__)


def create_client(uri: str = MONGO_URI) -> MongoClient:
    return MongoClient(
        uri,
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
    )


class Store:
    """Handles to the three collections the API reads and writes."""

    def __init__(self, database: Database):
        self.database = database
        self.users = database["users"]
        self.rooms = database["rooms"]
        self.bookings = database["bookings"]

    @classmethod
    def from_client(cls, client: MongoClient, name: str = DB_NAME) -> "Store":
        return cls(client[name])

    def ping(self):
        self.database.client.admin.command("ping")
        logger.info("Pinged your deployment. You successfully connected to MongoDB!")


def get_store(request: Request) -> Store:
    return request.app.state.store
