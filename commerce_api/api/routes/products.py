from fastapi import APIRouter, Depends, Request, Response

from commerce_api.api.deps import get_product_service
from commerce_api.application.mappers import to_entity, to_response, to_responses
from commerce_api.application.schemas import ProductCreate, ProductRead, ProductUpdate
from commerce_api.application.services import ProductService
from commerce_api.core.errors import not_found
from commerce_api.domain.models import Product

router = APIRouter(prefix="/api/products", tags=["products"])

@router.get("", response_model=list[ProductRead], response_model_exclude_none=True)
def list_products(service: ProductService = Depends(get_product_service)):
    return to_responses(service.get_all(), ProductRead)

@router.get("/{product_id}", response_model=ProductRead, response_model_exclude_none=True)
def get_product(product_id: int, service: ProductService = Depends(get_product_service)):
    product = service.get_by_id(product_id)
    if product is None:
        raise not_found("Product", product_id)
    return to_response(product, ProductRead)

@router.post("", response_model=ProductRead, response_model_exclude_none=True, status_code=201)
def create_product(
    payload: ProductCreate,
    request: Request,
    response: Response,
    service: ProductService = Depends(get_product_service),
):
    product = service.create(to_entity(payload, Product))
    response.headers["Location"] = str(request.url_for("get_product", product_id=product.id))
    return to_response(product, ProductRead)

@router.put("/{product_id}", response_model=ProductRead, response_model_exclude_none=True)
def update_product(
    product_id: int,
    payload: ProductUpdate,
    service: ProductService = Depends(get_product_service),
):
    if not service.update(product_id, to_entity(payload, Product)):
        raise not_found("Product", product_id)
    return to_response(service.get_by_id(product_id), ProductRead)

@router.delete("/{product_id}", status_code=204)
def delete_product(product_id: int, service: ProductService = Depends(get_product_service)):
    if not service.delete(product_id):
        raise not_found("Product", product_id)
    return Response(status_code=204)
