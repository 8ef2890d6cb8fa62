"""Store bundles handed to services, one bundle per unit of work (request)."""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from commerce_api.domain.models import (
    Category,
    Delivery,
    Inventory,
    Order,
    Payment,
    Product,
    RequestLog,
    Supplier,
)
from .stores import EntityStore, InMemoryEntityStore, SqlAlchemyEntityStore
from . import db

STORE_MODELS = {
    "categories": Category,
    "suppliers": Supplier,
    "products": Product,
    "orders": Order,
    "deliveries": Delivery,
    "inventory": Inventory,
    "payments": Payment,
    "request_logs": RequestLog,
}

@dataclass
class Stores:
    categories: EntityStore[Category]
    suppliers: EntityStore[Supplier]
    products: EntityStore[Product]
    orders: EntityStore[Order]
    deliveries: EntityStore[Delivery]
    inventory: EntityStore[Inventory]
    payments: EntityStore[Payment]
    request_logs: EntityStore[RequestLog]

    @classmethod
    def for_session(cls, session: Session) -> "Stores":
        return cls(**{name: SqlAlchemyEntityStore(session, model) for name, model in STORE_MODELS.items()})

    @classmethod
    def in_memory(cls) -> "Stores":
        return cls(**{name: InMemoryEntityStore(model) for name, model in STORE_MODELS.items()})


class SqlStoreProvider:
    """Opens one session per unit of work and closes it afterwards."""

    def __init__(
        self,
        session_factory: Optional[sessionmaker] = None,
        engine_factory: Callable[[], Engine] = db.get_engine,
    ):
        self._session_factory = session_factory
        self._engine_factory = engine_factory

    @property
    def engine(self) -> Engine:
        return self._engine_factory()

    @contextmanager
    def __call__(self) -> Iterator[Stores]:
        factory = self._session_factory or db.get_session_factory()
        session = factory()
        try:
            yield Stores.for_session(session)
        finally:
            session.close()

    def initialize(self, run_migrations: bool = True) -> None:
        if run_migrations:
            db.run_migrations()
        db.init_models(self.engine)

    def ping(self) -> None:
        db.ping(self.engine)


class InMemoryStoreProvider:
    """Shares one set of in-process stores across every unit of work."""

    def __init__(self, stores: Optional[Stores] = None):
        self.stores = stores or Stores.in_memory()

    @contextmanager
    def __call__(self) -> Iterator[Stores]:
        yield self.stores

    def initialize(self, run_migrations: bool = True) -> None:
        return None

    def ping(self) -> None:
        return None
