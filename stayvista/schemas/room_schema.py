from pydantic import BaseModel
from typing import Optional, Union


class RoomStatusUpdate(BaseModel):
    # Stored as sent; the client sends a boolean
    status: Optional[Union[bool, str]] = None
