from commerce_api.core.schema_base import CamelModel

class InventoryCreate(CamelModel):
    product_id: int
    quantity_on_hand: int
    quantity_reserved: int = 0
    reorder_level: int = 0
    reorder_quantity: int = 0
    warehouse_location: str

class InventoryUpdate(CamelModel):
    quantity_on_hand: int
    quantity_reserved: int = 0
    reorder_level: int = 0
    reorder_quantity: int = 0
    warehouse_location: str

class InventoryRead(CamelModel):
    id: int
    product_id: int
    quantity_on_hand: int
    quantity_reserved: int
    quantity_available: int
    reorder_level: int
    reorder_quantity: int
    warehouse_location: str
