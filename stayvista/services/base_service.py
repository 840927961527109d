from typing import List, Optional

from bson import ObjectId
from pymongo.collection import Collection
from pymongo.results import InsertOneResult, UpdateResult

from stayvista.database.init import Store


def parse_object_id(value: str) -> Optional[ObjectId]:
    """Return the ObjectId for ``value`` or None when it is not a valid id."""
    if not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


def insert_ack(result: InsertOneResult) -> dict:
    return {
        "acknowledged": result.acknowledged,
        "insertedId": result.inserted_id,
    }


def update_ack(result: UpdateResult) -> dict:
    return {
        "acknowledged": result.acknowledged,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
        "upsertedCount": 1 if result.upserted_id is not None else 0,
        "upsertedId": result.upserted_id,
    }


class BaseService:
    def __init__(self, collection_name: str):
        self.collection_name = collection_name

    def collection(self, store: Store) -> Collection:
        return getattr(store, self.collection_name)

    def get_all(self, store: Store, query: Optional[dict] = None) -> List[dict]:
        return list(self.collection(store).find(query or {}))

    def create(self, store: Store, document: dict) -> dict:
        """
        Insert a new record exactly as given.

        Args:
            store: Store handle
            document: Arbitrary JSON object from the request body

        Returns:
            The insert acknowledgement
        """
        # insert_one writes the generated _id back into the dict it is given
        result = self.collection(store).insert_one(dict(document))
        return insert_ack(result)
