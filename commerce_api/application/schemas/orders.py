from datetime import datetime
from typing import Optional

from commerce_api.core.schema_base import CamelModel

class OrderItemCreate(CamelModel):
    product_id: int
    quantity: int
    unit_price: float

class OrderItemRead(CamelModel):
    product_id: int
    quantity: int
    unit_price: float
    line_total: float

class OrderCreate(CamelModel):
    customer_email: str
    customer_name: str
    shipping_address: str
    order_items: list[OrderItemCreate] = []

class OrderUpdate(CamelModel):
    status: str
    shipping_address: str

class OrderRead(CamelModel):
    id: int
    order_number: str
    order_date: datetime
    customer_email: str
    customer_name: str
    total_amount: float
    status: str
    shipping_address: str
    shipped_date: Optional[datetime] = None
    delivered_date: Optional[datetime] = None
    order_items: list[OrderItemRead] = []
