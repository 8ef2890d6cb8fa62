from commerce_api.domain.models import Category
from commerce_api.application.validation import required_text
from .base import EntityService

class CategoryService(EntityService[Category]):
    entity_name = "Category"
    rules = (
        required_text("name", "Category name", max_length=100),
    )
