from fastapi import APIRouter, Depends, Request, Response

from commerce_api.api.deps import get_order_service
from commerce_api.application.mappers import order_from_create, order_from_update, order_to_response
from commerce_api.application.schemas import OrderCreate, OrderRead, OrderUpdate
from commerce_api.application.services import OrderService
from commerce_api.core.errors import not_found

router = APIRouter(prefix="/api/orders", tags=["orders"])

@router.get("", response_model=list[OrderRead], response_model_exclude_none=True)
def list_orders(service: OrderService = Depends(get_order_service)):
    return [order_to_response(order) for order in service.get_all()]

@router.get("/{order_id}", response_model=OrderRead, response_model_exclude_none=True)
def get_order(order_id: int, service: OrderService = Depends(get_order_service)):
    order = service.get_by_id(order_id)
    if order is None:
        raise not_found("Order", order_id)
    return order_to_response(order)

@router.post("", response_model=OrderRead, response_model_exclude_none=True, status_code=201)
def create_order(
    payload: OrderCreate,
    request: Request,
    response: Response,
    service: OrderService = Depends(get_order_service),
):
    order = service.create(order_from_create(payload))
    response.headers["Location"] = str(request.url_for("get_order", order_id=order.id))
    return order_to_response(order)

@router.put("/{order_id}", response_model=OrderRead, response_model_exclude_none=True)
def update_order(
    order_id: int,
    payload: OrderUpdate,
    service: OrderService = Depends(get_order_service),
):
    if not service.update(order_id, order_from_update(payload)):
        raise not_found("Order", order_id)
    return order_to_response(service.get_by_id(order_id))

@router.delete("/{order_id}", status_code=204)
def delete_order(order_id: int, service: OrderService = Depends(get_order_service)):
    if not service.delete(order_id):
        raise not_found("Order", order_id)
    return Response(status_code=204)
