"""
Entity stores: key-indexed persistence for one record type.

The services only ever talk to the ``EntityStore`` contract. Two adapters
implement it:

- ``InMemoryEntityStore`` keeps records in a dict keyed by id. Used by the
  test-suite and for local demos without a database.
- ``SqlAlchemyEntityStore`` maps every call onto a SQLAlchemy session and
  commits per call.

Stores never validate. Whatever reaches them has already been checked by the
owning service. ``update`` replaces every column of the stored record with the
incoming record's value (identity excepted); relationships are left alone.
"""

import threading
from abc import ABC, abstractmethod
from typing import Generic, Optional, Type, TypeVar

from sqlalchemy import inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from commerce_api.domain.models import Base

T = TypeVar("T", bound=Base)


def column_names(model: Type[Base]) -> list[str]:
    return [attr.key for attr in inspect(model).column_attrs]


def column_values(entity: Base, exclude: tuple[str, ...] = ()) -> dict:
    return {
        name: getattr(entity, name)
        for name in column_names(type(entity))
        if name not in exclude
    }


def copy_columns(source: Base, target: Base, exclude: tuple[str, ...] = ("id",)) -> None:
    for name, value in column_values(source, exclude).items():
        setattr(target, name, value)


class EntityStore(ABC, Generic[T]):
    """Minimal CRUD capability set over one entity type with integer identity."""

    model: Type[T]

    @abstractmethod
    def get_by_id(self, entity_id: int) -> Optional[T]:
        ...

    @abstractmethod
    def get_all(self) -> list[T]:
        ...

    @abstractmethod
    def add(self, entity: T) -> T:
        """Persist ``entity`` and return it with its identity assigned."""

    @abstractmethod
    def update(self, entity_id: int, entity: T) -> bool:
        """Replace the record stored under ``entity_id``. False if there is none."""

    @abstractmethod
    def delete(self, entity_id: int) -> bool:
        ...


class InMemoryEntityStore(EntityStore[T]):

    def __init__(self, model: Type[T]):
        self.model = model
        self._rows: dict[int, T] = {}
        # Never reused, even after the highest id is deleted
        self._next_id = 1
        self._lock = threading.Lock()

    def get_by_id(self, entity_id: int) -> Optional[T]:
        with self._lock:
            return self._rows.get(entity_id)

    def get_all(self) -> list[T]:
        with self._lock:
            return [self._rows[key] for key in sorted(self._rows)]

    def add(self, entity: T) -> T:
        with self._lock:
            entity.id = self._next_id
            self._next_id += 1
            self._rows[entity.id] = entity
            return entity

    def update(self, entity_id: int, entity: T) -> bool:
        with self._lock:
            stored = self._rows.get(entity_id)
            if stored is None:
                return False
            copy_columns(entity, stored)
            return True

    def delete(self, entity_id: int) -> bool:
        with self._lock:
            return self._rows.pop(entity_id, None) is not None

    def __len__(self) -> int:
        return len(self._rows)


class SqlAlchemyEntityStore(EntityStore[T]):

    def __init__(self, session: Session, model: Type[T]):
        self.session = session
        self.model = model

    def get_by_id(self, entity_id: int) -> Optional[T]:
        return self.session.get(self.model, entity_id)

    def get_all(self) -> list[T]:
        return list(self.session.scalars(select(self.model).order_by(self.model.id)))

    def add(self, entity: T) -> T:
        self.session.add(entity)
        self._commit()
        self.session.refresh(entity)
        return entity

    def update(self, entity_id: int, entity: T) -> bool:
        stored = self.session.get(self.model, entity_id)
        if stored is None:
            return False
        copy_columns(entity, stored)
        self._commit()
        self.session.refresh(stored)
        return True

    def delete(self, entity_id: int) -> bool:
        stored = self.session.get(self.model, entity_id)
        if stored is None:
            return False
        self.session.delete(stored)
        self._commit()
        return True

    def _commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
