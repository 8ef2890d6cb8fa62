"""FastAPI dependencies: one store bundle per request, services built on top of it."""

from typing import Iterator

from fastapi import Depends, Request

from commerce_api.application.services import (
    CategoryService,
    DeliveryService,
    InventoryService,
    OrderService,
    PaymentService,
    ProductService,
    RequestLogService,
    SupplierService,
)
from commerce_api.infrastructure.providers import Stores


def get_stores(request: Request) -> Iterator[Stores]:
    with request.app.state.store_provider() as stores:
        yield stores


def get_category_service(stores: Stores = Depends(get_stores)) -> CategoryService:
    return CategoryService(stores.categories)


def get_supplier_service(stores: Stores = Depends(get_stores)) -> SupplierService:
    return SupplierService(stores.suppliers)


def get_product_service(stores: Stores = Depends(get_stores)) -> ProductService:
    return ProductService(stores.products, stores.categories, stores.suppliers)


def get_order_service(stores: Stores = Depends(get_stores)) -> OrderService:
    return OrderService(stores.orders, stores.products)


def get_delivery_service(stores: Stores = Depends(get_stores)) -> DeliveryService:
    return DeliveryService(stores.deliveries, stores.orders)


def get_inventory_service(stores: Stores = Depends(get_stores)) -> InventoryService:
    return InventoryService(stores.inventory, stores.products)


def get_payment_service(stores: Stores = Depends(get_stores)) -> PaymentService:
    return PaymentService(stores.payments, stores.orders)


def get_request_log_service(stores: Stores = Depends(get_stores)) -> RequestLogService:
    return RequestLogService(stores.request_logs)
