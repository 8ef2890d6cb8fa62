from commerce_api.domain.enums import PaymentStatus, values
from commerce_api.domain.models import Order, Payment, utcnow
from commerce_api.infrastructure.stores import EntityStore
from commerce_api.application.validation import (
    greater_than_zero,
    one_of,
    optional_text,
    reference_id,
    require_positive_id,
    required_text,
)
from .base import EntityService, Reference

class PaymentService(EntityService[Payment]):
    entity_name = "Payment"
    rules = (
        reference_id("order_id", "Order ID is required"),
        greater_than_zero("amount", "Payment amount"),
        required_text("payment_method", "Payment method", max_length=50),
        required_text("transaction_id", "Transaction ID", max_length=100),
        optional_text("reference", "Reference", 100),
        one_of("status", "Payment status", values(PaymentStatus)),
    )
    carried_on_update = (
        "order_id",
        "amount",
        "payment_method",
        "transaction_id",
        "reference",
        "payment_date",
        "refund_date",
    )

    def __init__(self, store: EntityStore[Payment], orders: EntityStore[Order]):
        super().__init__(store, references=[Reference("order_id", "Order", orders)])

    def get_by_order_id(self, order_id: int) -> list[Payment]:
        require_positive_id(order_id, label="Order ID", field="order_id")
        return self.find(lambda payment: payment.order_id == order_id)

    def prepare_create(self, payment: Payment) -> None:
        payment.payment_date = utcnow()
        payment.status = PaymentStatus.PENDING.value

    def prepare_update(self, existing: Payment, payment: Payment) -> None:
        if payment.status == PaymentStatus.REFUNDED.value and payment.refund_date is None:
            payment.refund_date = utcnow()
