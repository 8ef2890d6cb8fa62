from typing import Optional

from commerce_api.core.schema_base import CamelModel

class CategoryCreate(CamelModel):
    name: str
    description: Optional[str] = None

class CategoryUpdate(CamelModel):
    name: str
    description: Optional[str] = None

class CategoryRead(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
