from typing import Optional

from commerce_api.core.schema_base import CamelModel

class SupplierCreate(CamelModel):
    name: str
    contact_email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None

class SupplierUpdate(SupplierCreate):
    pass

class SupplierRead(CamelModel):
    id: int
    name: str
    contact_email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
