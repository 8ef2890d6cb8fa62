from fastapi import APIRouter, Depends, Request, Response

from commerce_api.api.deps import get_payment_service
from commerce_api.application.mappers import to_entity, to_response, to_responses
from commerce_api.application.schemas import PaymentCreate, PaymentRead, PaymentUpdate
from commerce_api.application.services import PaymentService
from commerce_api.core.errors import not_found
from commerce_api.domain.models import Payment

router = APIRouter(prefix="/api/payments", tags=["payments"])

@router.get("", response_model=list[PaymentRead], response_model_exclude_none=True)
def list_payments(service: PaymentService = Depends(get_payment_service)):
    return to_responses(service.get_all(), PaymentRead)

@router.get("/order/{order_id}", response_model=list[PaymentRead], response_model_exclude_none=True)
def list_payments_for_order(order_id: int, service: PaymentService = Depends(get_payment_service)):
    return to_responses(service.get_by_order_id(order_id), PaymentRead)

@router.get("/{payment_id}", response_model=PaymentRead, response_model_exclude_none=True)
def get_payment(payment_id: int, service: PaymentService = Depends(get_payment_service)):
    payment = service.get_by_id(payment_id)
    if payment is None:
        raise not_found("Payment", payment_id)
    return to_response(payment, PaymentRead)

@router.post("", response_model=PaymentRead, response_model_exclude_none=True, status_code=201)
def create_payment(
    payload: PaymentCreate,
    request: Request,
    response: Response,
    service: PaymentService = Depends(get_payment_service),
):
    payment = service.create(to_entity(payload, Payment))
    response.headers["Location"] = str(request.url_for("get_payment", payment_id=payment.id))
    return to_response(payment, PaymentRead)

@router.put("/{payment_id}", response_model=PaymentRead, response_model_exclude_none=True)
def update_payment(
    payment_id: int,
    payload: PaymentUpdate,
    service: PaymentService = Depends(get_payment_service),
):
    if not service.update(payment_id, to_entity(payload, Payment)):
        raise not_found("Payment", payment_id)
    return to_response(service.get_by_id(payment_id), PaymentRead)

@router.delete("/{payment_id}", status_code=204)
def delete_payment(payment_id: int, service: PaymentService = Depends(get_payment_service)):
    if not service.delete(payment_id):
        raise not_found("Payment", payment_id)
    return Response(status_code=204)
