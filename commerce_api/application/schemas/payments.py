from datetime import datetime
from typing import Optional

from commerce_api.core.schema_base import CamelModel

class PaymentCreate(CamelModel):
    order_id: int
    amount: float
    payment_method: str
    transaction_id: str
    reference: Optional[str] = None

class PaymentUpdate(CamelModel):
    status: str
    refund_reason: Optional[str] = None

class PaymentRead(CamelModel):
    id: int
    order_id: int
    amount: float
    payment_method: str
    status: str
    transaction_id: str
    reference: Optional[str] = None
    payment_date: datetime
    refund_date: Optional[datetime] = None
    refund_reason: Optional[str] = None
