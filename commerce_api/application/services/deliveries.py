from commerce_api.domain.enums import DeliveryStatus, values
from commerce_api.domain.models import Delivery, Order, utcnow
from commerce_api.infrastructure.stores import EntityStore
from commerce_api.application.reference_codes import TRACKING_PREFIX, generate_reference_code
from commerce_api.application.validation import (
    one_of,
    optional_text,
    reference_id,
    require_positive_id,
    required_text,
)
from .base import EntityService, Reference

SHIPPED_STATUSES = (
    DeliveryStatus.IN_TRANSIT.value,
    DeliveryStatus.OUT_FOR_DELIVERY.value,
    DeliveryStatus.DELIVERED.value,
)

class DeliveryService(EntityService[Delivery]):
    entity_name = "Delivery"
    rules = (
        reference_id("order_id", "Order ID is required"),
        required_text("carrier_name", "Carrier name", max_length=100),
        required_text("delivery_address", "Delivery address", max_length=500),
        one_of("status", "Delivery status", values(DeliveryStatus)),
        optional_text("signed_by", "Signed by", 200),
    )
    carried_on_update = (
        "order_id",
        "tracking_number",
        "carrier_name",
        "delivery_address",
        "shipped_date",
    )

    def __init__(self, store: EntityStore[Delivery], orders: EntityStore[Order]):
        super().__init__(store, references=[Reference("order_id", "Order", orders)])

    def get_by_order_id(self, order_id: int) -> list[Delivery]:
        require_positive_id(order_id, label="Order ID", field="order_id")
        return self.find(lambda delivery: delivery.order_id == order_id)

    def prepare_create(self, delivery: Delivery) -> None:
        delivery.tracking_number = generate_reference_code(TRACKING_PREFIX)
        delivery.status = DeliveryStatus.PENDING.value

    def prepare_update(self, existing: Delivery, delivery: Delivery) -> None:
        now = utcnow()
        if delivery.status in SHIPPED_STATUSES and delivery.shipped_date is None:
            delivery.shipped_date = now
        if delivery.status == DeliveryStatus.DELIVERED.value and delivery.delivered_date is None:
            delivery.delivered_date = now
