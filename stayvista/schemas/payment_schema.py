from pydantic import BaseModel
from typing import Optional, Union


class PaymentIntentCreate(BaseModel):
    price: Optional[Union[float, str]] = None


class PaymentIntentResponse(BaseModel):
    clientSecret: str
