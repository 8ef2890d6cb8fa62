from decimal import Decimal

from commerce_api.core.errors import InvalidArgumentError, not_found
from commerce_api.domain.enums import OrderStatus, values
from commerce_api.domain.models import Order, Product, utcnow
from commerce_api.infrastructure.stores import EntityStore
from commerce_api.application.reference_codes import ORDER_PREFIX, generate_reference_code
from commerce_api.application.validation import (
    MAX_AMOUNT,
    MAX_QUANTITY,
    check_in_range,
    greater_than_zero,
    one_of,
    required_text,
)
from .base import EntityService


def _money(value) -> Decimal:
    return Decimal(str(value)).quantize(Decimal("0.01"))


def _valid_items(order: Order) -> None:
    for position, item in enumerate(order.items, start=1):
        if item.product_id is None or item.product_id <= 0:
            raise InvalidArgumentError("Order item product ID is required", details=f"Item: {position}")
        if item.quantity is None or item.quantity <= 0:
            raise InvalidArgumentError("Order item quantity must be greater than 0", details=f"Item: {position}")
        if item.unit_price is None or item.unit_price < 0:
            raise InvalidArgumentError("Order item unit price cannot be negative", details=f"Item: {position}")
        check_in_range(item.quantity, "Order item quantity", "quantity", MAX_QUANTITY)
        check_in_range(item.unit_price, "Order item unit price", "unit_price", MAX_AMOUNT)


class OrderService(EntityService[Order]):
    entity_name = "Order"
    rules = (
        required_text("customer_email", "Customer email", max_length=255),
        required_text("customer_name", "Customer name", max_length=200),
        required_text("shipping_address", "Shipping address", max_length=500),
        _valid_items,
        greater_than_zero("total_amount", "Total amount"),
        one_of("status", "Order status", values(OrderStatus)),
    )
    carried_on_update = (
        "order_number",
        "order_date",
        "customer_email",
        "customer_name",
        "total_amount",
        "shipped_date",
        "delivered_date",
    )

    def __init__(self, store: EntityStore[Order], products: EntityStore[Product]):
        super().__init__(store)
        self.products = products

    def prepare_create(self, order: Order) -> None:
        # Items are checked before any Decimal arithmetic on them
        _valid_items(order)
        total = Decimal("0.00")
        for item in order.items:
            if item.quantity is not None and item.unit_price is not None:
                item.line_total = _money(item.quantity * _money(item.unit_price))
                total += item.line_total
            item.created_at = order.created_at
        order.total_amount = total
        order.order_number = generate_reference_code(ORDER_PREFIX)
        order.order_date = utcnow()
        order.status = OrderStatus.PENDING.value

    def prepare_update(self, existing: Order, order: Order) -> None:
        now = utcnow()
        if order.status == OrderStatus.SHIPPED.value and order.shipped_date is None:
            order.shipped_date = now
        if order.status == OrderStatus.DELIVERED.value and order.delivered_date is None:
            order.delivered_date = now

    def check_references(self, order: Order) -> None:
        for item in order.items:
            if self.products.get_by_id(item.product_id) is None:
                raise not_found("Product", item.product_id)
