from .categories import router as categories_router
from .suppliers import router as suppliers_router
from .products import router as products_router
from .orders import router as orders_router
from .deliveries import router as deliveries_router
from .inventory import router as inventory_router
from .payments import router as payments_router
from .request_logs import router as request_logs_router

routers = [
    categories_router,
    suppliers_router,
    products_router,
    orders_router,
    deliveries_router,
    inventory_router,
    payments_router,
    request_logs_router,
]
