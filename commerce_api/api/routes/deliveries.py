from fastapi import APIRouter, Depends, Request, Response

from commerce_api.api.deps import get_delivery_service
from commerce_api.application.mappers import to_entity, to_response, to_responses
from commerce_api.application.schemas import DeliveryCreate, DeliveryRead, DeliveryUpdate
from commerce_api.application.services import DeliveryService
from commerce_api.core.errors import not_found
from commerce_api.domain.models import Delivery

router = APIRouter(prefix="/api/deliveries", tags=["deliveries"])

@router.get("", response_model=list[DeliveryRead], response_model_exclude_none=True)
def list_deliveries(service: DeliveryService = Depends(get_delivery_service)):
    return to_responses(service.get_all(), DeliveryRead)

@router.get("/order/{order_id}", response_model=list[DeliveryRead], response_model_exclude_none=True)
def list_deliveries_for_order(order_id: int, service: DeliveryService = Depends(get_delivery_service)):
    return to_responses(service.get_by_order_id(order_id), DeliveryRead)

@router.get("/{delivery_id}", response_model=DeliveryRead, response_model_exclude_none=True)
def get_delivery(delivery_id: int, service: DeliveryService = Depends(get_delivery_service)):
    delivery = service.get_by_id(delivery_id)
    if delivery is None:
        raise not_found("Delivery", delivery_id)
    return to_response(delivery, DeliveryRead)

@router.post("", response_model=DeliveryRead, response_model_exclude_none=True, status_code=201)
def create_delivery(
    payload: DeliveryCreate,
    request: Request,
    response: Response,
    service: DeliveryService = Depends(get_delivery_service),
):
    delivery = service.create(to_entity(payload, Delivery))
    response.headers["Location"] = str(request.url_for("get_delivery", delivery_id=delivery.id))
    return to_response(delivery, DeliveryRead)

@router.put("/{delivery_id}", response_model=DeliveryRead, response_model_exclude_none=True)
def update_delivery(
    delivery_id: int,
    payload: DeliveryUpdate,
    service: DeliveryService = Depends(get_delivery_service),
):
    if not service.update(delivery_id, to_entity(payload, Delivery)):
        raise not_found("Delivery", delivery_id)
    return to_response(service.get_by_id(delivery_id), DeliveryRead)

@router.delete("/{delivery_id}", status_code=204)
def delete_delivery(delivery_id: int, service: DeliveryService = Depends(get_delivery_service)):
    if not service.delete(delivery_id):
        raise not_found("Delivery", delivery_id)
    return Response(status_code=204)
