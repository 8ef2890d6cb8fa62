import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from commerce_api.application.services import (
    CategoryService,
    OrderService,
    ProductService,
    SupplierService,
)
from commerce_api.domain.models import Base, Category, Order, OrderItem, Product, Supplier
from commerce_api.infrastructure.providers import InMemoryStoreProvider, SqlStoreProvider, Stores
from commerce_api.main import create_app


@pytest.fixture
def stores():
    return Stores.in_memory()


@pytest.fixture
def provider(stores):
    return InMemoryStoreProvider(stores)


@pytest.fixture
def client(provider):
    return TestClient(create_app(provider))


@pytest.fixture
def seeded(stores):
    """One category, supplier, product and order, all with ID 1."""
    category = CategoryService(stores.categories).create(Category(name="Electronics"))
    supplier = SupplierService(stores.suppliers).create(Supplier(name="Acme Supply"))
    product = ProductService(stores.products, stores.categories, stores.suppliers).create(
        Product(name="Laptop", price=999.99, quantity=10, category_id=category.id, supplier_id=supplier.id)
    )
    order = Order(customer_email="ada@example.com", customer_name="Ada", shipping_address="1 Main St")
    order.items = [OrderItem(product_id=product.id, quantity=2, unit_price=999.99)]
    order = OrderService(stores.orders, stores.products).create(order)
    return {"category": category, "supplier": supplier, "product": product, "order": order}


@pytest.fixture
def sqlite_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sqlite_session_factory(sqlite_engine):
    return sessionmaker(bind=sqlite_engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def sqlite_provider(sqlite_engine, sqlite_session_factory):
    return SqlStoreProvider(session_factory=sqlite_session_factory, engine_factory=lambda: sqlite_engine)
