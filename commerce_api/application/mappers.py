"""
Conversions between wire DTOs and entity records.

Pure field-by-field copies. Nothing here validates or coerces beyond what the
pydantic schemas already did; the services own every business rule.
"""

from typing import Type, TypeVar

from pydantic import BaseModel

from commerce_api.domain.models import Base, Order, OrderItem
from .schemas import OrderCreate, OrderItemRead, OrderRead, OrderUpdate

T = TypeVar("T", bound=Base)
S = TypeVar("S", bound=BaseModel)


def to_entity(dto: BaseModel, model: Type[T]) -> T:
    """Copy every field of a create/update DTO onto a new, unsaved ``model``."""
    return model(**dto.model_dump())


def to_response(entity: Base, schema: Type[S]) -> S:
    return schema.model_validate(entity)


def to_responses(entities, schema: Type[S]) -> list[S]:
    return [to_response(entity, schema) for entity in entities]


def order_from_create(dto: OrderCreate) -> Order:
    order = Order(**dto.model_dump(exclude={"order_items"}))
    order.items = [OrderItem(**item.model_dump()) for item in dto.order_items]
    return order


def order_from_update(dto: OrderUpdate) -> Order:
    return to_entity(dto, Order)


def order_to_response(order: Order) -> OrderRead:
    return OrderRead(
        id=order.id,
        order_number=order.order_number,
        order_date=order.order_date,
        customer_email=order.customer_email,
        customer_name=order.customer_name,
        total_amount=order.total_amount,
        status=order.status,
        shipping_address=order.shipping_address,
        shipped_date=order.shipped_date,
        delivered_date=order.delivered_date,
        order_items=to_responses(order.items, OrderItemRead),
    )
