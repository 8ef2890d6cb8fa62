from typing import Optional

from commerce_api.core.errors import InvalidOperationError, not_found
from commerce_api.core.logging_config import get_logger
from commerce_api.domain.models import Inventory, Product, utcnow
from commerce_api.infrastructure.stores import EntityStore, column_values
from commerce_api.application.validation import (
    MAX_QUANTITY,
    check_in_range,
    non_negative,
    reference_id,
    require_positive_id,
    required_text,
)
from .base import EntityService, Reference

logger = get_logger(__name__)


def _recompute_available(inventory: Inventory) -> None:
    if inventory.quantity_on_hand is not None and inventory.quantity_reserved is not None:
        inventory.quantity_available = inventory.quantity_on_hand - inventory.quantity_reserved


class InventoryService(EntityService[Inventory]):
    entity_name = "Inventory"
    rules = (
        reference_id("product_id", "Product ID is required"),
        non_negative("quantity_on_hand", "Quantity on hand", maximum=MAX_QUANTITY),
        non_negative("quantity_reserved", "Quantity reserved", maximum=MAX_QUANTITY),
        non_negative("reorder_level", "Reorder level", maximum=MAX_QUANTITY),
        non_negative("reorder_quantity", "Reorder quantity", maximum=MAX_QUANTITY),
        required_text("warehouse_location", "Warehouse location", max_length=100),
    )
    carried_on_update = ("product_id",)

    def __init__(self, store: EntityStore[Inventory], products: EntityStore[Product]):
        super().__init__(store, references=[Reference("product_id", "Product", products)])

    def get_by_product_id(self, product_id: int) -> Optional[Inventory]:
        require_positive_id(product_id, label="Product ID", field="product_id")
        matches = self.find(lambda inventory: inventory.product_id == product_id)
        return matches[0] if matches else None

    def prepare_create(self, inventory: Inventory) -> None:
        _recompute_available(inventory)

    def prepare_update(self, existing: Inventory, inventory: Inventory) -> None:
        _recompute_available(inventory)

    def update_quantity(self, inventory_id: int, quantity_change: int) -> bool:
        """Apply a signed delta to the on-hand quantity.

        The stored record is left untouched when the result would go negative.
        """
        require_positive_id(inventory_id)
        existing = self.store.get_by_id(inventory_id)
        if existing is None:
            logger.warning(f"Inventory with ID {inventory_id} not found for quantity update")
            raise not_found(self.entity_name, inventory_id)

        on_hand = existing.quantity_on_hand + quantity_change
        check_in_range(on_hand, "Quantity on hand", "quantity_on_hand", MAX_QUANTITY)
        if on_hand < 0:
            raise InvalidOperationError(
                "Quantity cannot be negative",
                details=f"On hand {existing.quantity_on_hand}, change {quantity_change}",
            )

        replacement = Inventory(**column_values(existing, exclude=("id",)))
        replacement.quantity_on_hand = on_hand
        _recompute_available(replacement)
        replacement.updated_at = utcnow()

        updated = self.store.update(inventory_id, replacement)
        logger.info(
            "Inventory quantity updated",
            extra={'extra_fields': {'id': inventory_id, 'change': quantity_change, 'on_hand': on_hand}}
        )
        return updated
