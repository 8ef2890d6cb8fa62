from datetime import datetime
from typing import Optional

from commerce_api.core.schema_base import CamelModel

class DeliveryCreate(CamelModel):
    order_id: int
    carrier_name: str
    delivery_address: str
    delivery_notes: Optional[str] = None

class DeliveryUpdate(CamelModel):
    status: str
    delivery_notes: Optional[str] = None
    signed_by: Optional[str] = None
    delivered_date: Optional[datetime] = None

class DeliveryRead(CamelModel):
    id: int
    order_id: int
    tracking_number: str
    carrier_name: str
    status: str
    shipped_date: Optional[datetime] = None
    delivered_date: Optional[datetime] = None
    delivery_address: str
    delivery_notes: Optional[str] = None
    signed_by: Optional[str] = None
