from typing import Optional

from commerce_api.core.schema_base import CamelModel

class ProductCreate(CamelModel):
    name: str
    description: Optional[str] = None
    price: float
    quantity: int
    category_id: int
    supplier_id: int

class ProductUpdate(ProductCreate):
    pass

class ProductRead(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    price: float
    quantity: int
    category_id: int
    supplier_id: int
