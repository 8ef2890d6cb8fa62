from fastapi import APIRouter, Depends, Request, Response

from commerce_api.api.deps import get_supplier_service
from commerce_api.application.mappers import to_entity, to_response, to_responses
from commerce_api.application.schemas import SupplierCreate, SupplierRead, SupplierUpdate
from commerce_api.application.services import SupplierService
from commerce_api.core.errors import not_found
from commerce_api.domain.models import Supplier

router = APIRouter(prefix="/api/suppliers", tags=["suppliers"])

@router.get("", response_model=list[SupplierRead], response_model_exclude_none=True)
def list_suppliers(service: SupplierService = Depends(get_supplier_service)):
    return to_responses(service.get_all(), SupplierRead)

@router.get("/{supplier_id}", response_model=SupplierRead, response_model_exclude_none=True)
def get_supplier(supplier_id: int, service: SupplierService = Depends(get_supplier_service)):
    supplier = service.get_by_id(supplier_id)
    if supplier is None:
        raise not_found("Supplier", supplier_id)
    return to_response(supplier, SupplierRead)

@router.post("", response_model=SupplierRead, response_model_exclude_none=True, status_code=201)
def create_supplier(
    payload: SupplierCreate,
    request: Request,
    response: Response,
    service: SupplierService = Depends(get_supplier_service),
):
    supplier = service.create(to_entity(payload, Supplier))
    response.headers["Location"] = str(request.url_for("get_supplier", supplier_id=supplier.id))
    return to_response(supplier, SupplierRead)

@router.put("/{supplier_id}", response_model=SupplierRead, response_model_exclude_none=True)
def update_supplier(
    supplier_id: int,
    payload: SupplierUpdate,
    service: SupplierService = Depends(get_supplier_service),
):
    if not service.update(supplier_id, to_entity(payload, Supplier)):
        raise not_found("Supplier", supplier_id)
    return to_response(service.get_by_id(supplier_id), SupplierRead)

@router.delete("/{supplier_id}", status_code=204)
def delete_supplier(supplier_id: int, service: SupplierService = Depends(get_supplier_service)):
    if not service.delete(supplier_id):
        raise not_found("Supplier", supplier_id)
    return Response(status_code=204)
