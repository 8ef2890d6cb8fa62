"""
Shared validation pipeline for the entity services.

Every entity service runs the same steps and differs only in its rules and
hooks:

    create:  prepare_create -> validate -> check_references -> store.add
    update:  id check -> load existing (InvalidOperation if missing)
             -> carry non-writable fields -> prepare_update -> validate
             -> check_references -> store.update
    delete:  id check -> store.delete (False when nothing was removed)

All checks run on the incoming, not-yet-stored record, so a failed call never
leaves a partial write behind.
"""

from typing import Callable, Generic, Optional, TypeVar

from commerce_api.core.errors import not_found
from commerce_api.core.logging_config import get_logger
from commerce_api.domain.models import Base, utcnow
from commerce_api.infrastructure.stores import EntityStore
from commerce_api.application.validation import Rule, require_positive_id, run_rules

T = TypeVar("T", bound=Base)

logger = get_logger(__name__)


class Reference:
    """A foreign-key field whose target must exist in another store."""

    def __init__(self, field: str, entity_name: str, store: EntityStore):
        self.field = field
        self.entity_name = entity_name
        self.store = store

    def check(self, entity) -> None:
        value = getattr(entity, self.field)
        if self.store.get_by_id(value) is None:
            raise not_found(self.entity_name, value)


class EntityService(Generic[T]):
    entity_name: str = "Entity"
    rules: tuple[Rule, ...] = ()
    # Columns the update shape does not expose; copied from the stored record
    carried_on_update: tuple[str, ...] = ()

    def __init__(self, store: EntityStore[T], references: Optional[list[Reference]] = None):
        self.store = store
        self.references = references or []

    def get_all(self) -> list[T]:
        return self.store.get_all()

    def get_by_id(self, entity_id: int) -> Optional[T]:
        require_positive_id(entity_id)
        return self.store.get_by_id(entity_id)

    def find(self, predicate: Callable[[T], bool]) -> list[T]:
        """Full scan filtered by ``predicate``. There is no indexed query path."""
        return [entity for entity in self.store.get_all() if predicate(entity)]

    def create(self, entity: T) -> T:
        entity.created_at = utcnow()
        self.prepare_create(entity)
        self.validate(entity)
        self.check_references(entity)
        created = self.store.add(entity)
        logger.info(
            f"{self.entity_name} created",
            extra={'extra_fields': {'entity': self.entity_name, 'id': created.id}}
        )
        return created

    def update(self, entity_id: int, entity: T) -> bool:
        require_positive_id(entity_id)
        existing = self.store.get_by_id(entity_id)
        if existing is None:
            logger.warning(f"{self.entity_name} with ID {entity_id} not found for update")
            raise not_found(self.entity_name, entity_id)

        for field in ("created_at",) + self.carried_on_update:
            setattr(entity, field, getattr(existing, field))
        self.prepare_update(existing, entity)
        self.validate(entity)
        self.check_references(entity)

        entity.id = entity_id
        entity.updated_at = utcnow()
        updated = self.store.update(entity_id, entity)
        logger.info(
            f"{self.entity_name} updated",
            extra={'extra_fields': {'entity': self.entity_name, 'id': entity_id}}
        )
        return updated

    def delete(self, entity_id: int) -> bool:
        require_positive_id(entity_id)
        deleted = self.store.delete(entity_id)
        if deleted:
            logger.info(
                f"{self.entity_name} deleted",
                extra={'extra_fields': {'entity': self.entity_name, 'id': entity_id}}
            )
        else:
            logger.warning(f"{self.entity_name} with ID {entity_id} not found for deletion")
        return deleted

    def validate(self, entity: T) -> None:
        run_rules(entity, self.rules)

    def check_references(self, entity: T) -> None:
        for reference in self.references:
            reference.check(entity)

    def prepare_create(self, entity: T) -> None:
        """Assign server-owned and derived fields before validation."""

    def prepare_update(self, existing: T, entity: T) -> None:
        """Recompute derived fields on the replacement record."""
