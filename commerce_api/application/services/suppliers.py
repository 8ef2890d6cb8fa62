from commerce_api.domain.models import Supplier
from commerce_api.application.validation import optional_text, required_text
from .base import EntityService

class SupplierService(EntityService[Supplier]):
    entity_name = "Supplier"
    rules = (
        required_text("name", "Supplier name", max_length=200),
        optional_text("contact_email", "Contact email", 255),
        optional_text("phone", "Phone", 20),
        optional_text("address", "Address", 500),
    )
