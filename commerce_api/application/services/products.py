from commerce_api.domain.models import Category, Product, Supplier
from commerce_api.infrastructure.stores import EntityStore
from commerce_api.application.validation import MAX_QUANTITY, non_negative, reference_id, required_text
from .base import EntityService, Reference

class ProductService(EntityService[Product]):
    """Products must point at an existing category and supplier."""

    entity_name = "Product"
    rules = (
        required_text("name", "Product name", max_length=200),
        non_negative("price", "Price"),
        non_negative("quantity", "Quantity", maximum=MAX_QUANTITY),
        reference_id("category_id", "Valid category is required"),
        reference_id("supplier_id", "Valid supplier is required"),
    )

    def __init__(
        self,
        store: EntityStore[Product],
        categories: EntityStore[Category],
        suppliers: EntityStore[Supplier],
    ):
        super().__init__(store, references=[
            Reference("category_id", "Category", categories),
            Reference("supplier_id", "Supplier", suppliers),
        ])
