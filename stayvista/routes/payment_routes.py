import logging

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError

from stayvista.schemas.payment_schema import PaymentIntentCreate, PaymentIntentResponse
from stayvista.services.payment_service import (
    PaymentService,
    InvalidAmountError,
    get_payment_service,
    price_to_amount,
)
from stayvista.utils.dependencies import (
    MalformedBodyError,
    get_current_user,
    read_json_object,
)
from stayvista.responses.success import raw_response
from stayvista.responses.error import bad_request_error, internal_server_error

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Payments"])


@router.post("/payment-intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    request: Request,
    payment_service: PaymentService = Depends(get_payment_service),
    current_user: dict = Depends(get_current_user),
):
    try:
        payment_in = PaymentIntentCreate.model_validate(await read_json_object(request))
        amount = price_to_amount(payment_in.price)
    except (MalformedBodyError, ValidationError, InvalidAmountError) as e:
        return bad_request_error(str(e))

    try:
        client_secret = await run_in_threadpool(
            payment_service.create_payment_intent, amount
        )
        return raw_response({"clientSecret": client_secret})
    except Exception as e:
        logger.exception("Failed to create payment intent of %s", amount)
        return internal_server_error(str(e))
