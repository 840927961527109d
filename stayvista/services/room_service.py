from typing import List, Optional, Union

from stayvista.database.init import Store
from stayvista.services.base_service import BaseService, parse_object_id, update_ack


class InvalidRoomIdError(ValueError):
    pass


class RoomService(BaseService):
    def __init__(self):
        super().__init__("rooms")

    def get_by_host_email(self, store: Store, email: str) -> List[dict]:
        return self.get_all(store, {"host.email": email})

    def get_by_id(self, store: Store, room_id: str) -> Optional[dict]:
        object_id = parse_object_id(room_id)
        if object_id is None:
            return None
        return self.collection(store).find_one({"_id": object_id})

    def update_booked_status(
        self, store: Store, room_id: str, status: Union[bool, str, None]
    ) -> dict:
        object_id = parse_object_id(room_id)
        if object_id is None:
            raise InvalidRoomIdError(f"Invalid room id: {room_id}")

        result = self.collection(store).update_one(
            {"_id": object_id}, {"$set": {"booked": status}}
        )
        return update_ack(result)
