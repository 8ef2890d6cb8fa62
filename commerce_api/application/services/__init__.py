from .base import EntityService, Reference
from .categories import CategoryService
from .suppliers import SupplierService
from .products import ProductService
from .orders import OrderService
from .deliveries import DeliveryService
from .inventory import InventoryService
from .payments import PaymentService
from .request_logs import RequestLogService

__all__ = [
    "EntityService",
    "Reference",
    "CategoryService",
    "SupplierService",
    "ProductService",
    "OrderService",
    "DeliveryService",
    "InventoryService",
    "PaymentService",
    "RequestLogService",
]
