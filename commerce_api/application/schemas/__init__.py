from .categories import CategoryCreate, CategoryUpdate, CategoryRead
from .suppliers import SupplierCreate, SupplierUpdate, SupplierRead
from .products import ProductCreate, ProductUpdate, ProductRead
from .orders import OrderItemCreate, OrderItemRead, OrderCreate, OrderUpdate, OrderRead
from .deliveries import DeliveryCreate, DeliveryUpdate, DeliveryRead
from .inventory import InventoryCreate, InventoryUpdate, InventoryRead
from .payments import PaymentCreate, PaymentUpdate, PaymentRead
from .request_logs import RequestLogRead
