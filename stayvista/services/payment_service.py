import logging
from typing import Any, Optional

import stripe
from fastapi import Request

from stayvista.config import PAYMENT_CURRENCY, PAYMENT_SECRET_KEY

logger = logging.getLogger(__name__)


class InvalidAmountError(ValueError):
    pass


def price_to_amount(price: Any) -> int:
    """Convert a major-unit price into whole minor units, truncating.

    Raises InvalidAmountError for a missing, non-numeric or sub-cent price.
    """
    if not price:
        raise InvalidAmountError("Price is required")
    try:
        amount = int(float(price) * 100)
    except (TypeError, ValueError, OverflowError):
        raise InvalidAmountError(f"Invalid price: {price!r}")
    if amount < 1:
        raise InvalidAmountError("Amount must be at least 1")
    return amount


class PaymentService:
    def __init__(self, api_key: Optional[str] = PAYMENT_SECRET_KEY):
        self.api_key = api_key

    def create_payment_intent(self, amount: int) -> str:
        """Create a card-only payment intent and return its client secret."""
        intent = stripe.PaymentIntent.create(
            amount=amount,
            currency=PAYMENT_CURRENCY,
            payment_method_types=["card"],
            api_key=self.api_key,
        )
        logger.info("Created payment intent %s for %s %s", intent.id, amount, PAYMENT_CURRENCY)
        return intent.client_secret


def get_payment_service(request: Request) -> PaymentService:
    return request.app.state.payment_service
