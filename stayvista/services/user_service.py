import time
from typing import Optional

from stayvista.database.init import Store
from stayvista.services.base_service import BaseService, update_ack


class UserService(BaseService):
    def __init__(self):
        super().__init__("users")

    def get_by_email(self, store: Store, email: str) -> Optional[dict]:
        return self.collection(store).find_one({"email": email})

    def upsert_by_email(self, store: Store, email: str, payload: dict) -> dict:
        """Return the stored user if one exists, otherwise insert ``payload``.

        An existing record is never modified; the first write wins.
        """
        query = {"email": email}
        existing = self.collection(store).find_one(query)
        if existing:
            return existing

        result = self.collection(store).update_one(
            query,
            {"$set": {**payload, "timestamp": int(time.time() * 1000)}},
            upsert=True,
        )
        return update_ack(result)
