from fastapi import APIRouter, Depends, Request, Response

from commerce_api.api.deps import get_category_service
from commerce_api.application.mappers import to_entity, to_response, to_responses
from commerce_api.application.schemas import CategoryCreate, CategoryRead, CategoryUpdate
from commerce_api.application.services import CategoryService
from commerce_api.core.errors import not_found
from commerce_api.domain.models import Category

router = APIRouter(prefix="/api/categories", tags=["categories"])

@router.get("", response_model=list[CategoryRead], response_model_exclude_none=True)
def list_categories(service: CategoryService = Depends(get_category_service)):
    return to_responses(service.get_all(), CategoryRead)

@router.get("/{category_id}", response_model=CategoryRead, response_model_exclude_none=True)
def get_category(category_id: int, service: CategoryService = Depends(get_category_service)):
    category = service.get_by_id(category_id)
    if category is None:
        raise not_found("Category", category_id)
    return to_response(category, CategoryRead)

@router.post("", response_model=CategoryRead, response_model_exclude_none=True, status_code=201)
def create_category(
    payload: CategoryCreate,
    request: Request,
    response: Response,
    service: CategoryService = Depends(get_category_service),
):
    category = service.create(to_entity(payload, Category))
    response.headers["Location"] = str(request.url_for("get_category", category_id=category.id))
    return to_response(category, CategoryRead)

@router.put("/{category_id}", response_model=CategoryRead, response_model_exclude_none=True)
def update_category(
    category_id: int,
    payload: CategoryUpdate,
    service: CategoryService = Depends(get_category_service),
):
    if not service.update(category_id, to_entity(payload, Category)):
        raise not_found("Category", category_id)
    return to_response(service.get_by_id(category_id), CategoryRead)

@router.delete("/{category_id}", status_code=204)
def delete_category(category_id: int, service: CategoryService = Depends(get_category_service)):
    if not service.delete(category_id):
        raise not_found("Category", category_id)
    return Response(status_code=204)
