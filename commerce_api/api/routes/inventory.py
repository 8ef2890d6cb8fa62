from fastapi import APIRouter, Body, Depends, Request, Response

from commerce_api.api.deps import get_inventory_service
from commerce_api.application.mappers import to_entity, to_response, to_responses
from commerce_api.application.schemas import InventoryCreate, InventoryRead, InventoryUpdate
from commerce_api.application.services import InventoryService
from commerce_api.core.errors import not_found
from commerce_api.domain.models import Inventory

router = APIRouter(prefix="/api/inventory", tags=["inventory"])

@router.get("", response_model=list[InventoryRead])
def list_inventory(service: InventoryService = Depends(get_inventory_service)):
    return to_responses(service.get_all(), InventoryRead)

@router.get("/product/{product_id}", response_model=InventoryRead)
def get_inventory_for_product(product_id: int, service: InventoryService = Depends(get_inventory_service)):
    inventory = service.get_by_product_id(product_id)
    if inventory is None:
        raise not_found("Inventory for product", product_id)
    return to_response(inventory, InventoryRead)

@router.get("/{inventory_id}", response_model=InventoryRead)
def get_inventory(inventory_id: int, service: InventoryService = Depends(get_inventory_service)):
    inventory = service.get_by_id(inventory_id)
    if inventory is None:
        raise not_found("Inventory", inventory_id)
    return to_response(inventory, InventoryRead)

@router.post("", response_model=InventoryRead, status_code=201)
def create_inventory(
    payload: InventoryCreate,
    request: Request,
    response: Response,
    service: InventoryService = Depends(get_inventory_service),
):
    inventory = service.create(to_entity(payload, Inventory))
    response.headers["Location"] = str(request.url_for("get_inventory", inventory_id=inventory.id))
    return to_response(inventory, InventoryRead)

@router.put("/{inventory_id}", response_model=InventoryRead)
def update_inventory(
    inventory_id: int,
    payload: InventoryUpdate,
    service: InventoryService = Depends(get_inventory_service),
):
    if not service.update(inventory_id, to_entity(payload, Inventory)):
        raise not_found("Inventory", inventory_id)
    return to_response(service.get_by_id(inventory_id), InventoryRead)

@router.patch("/{inventory_id}/quantity", response_model=InventoryRead)
def update_inventory_quantity(
    inventory_id: int,
    quantity_change: int = Body(..., description="Signed change applied to the on-hand quantity"),
    service: InventoryService = Depends(get_inventory_service),
):
    if not service.update_quantity(inventory_id, quantity_change):
        raise not_found("Inventory", inventory_id)
    return to_response(service.get_by_id(inventory_id), InventoryRead)

@router.delete("/{inventory_id}", status_code=204)
def delete_inventory(inventory_id: int, service: InventoryService = Depends(get_inventory_service)):
    if not service.delete(inventory_id):
        raise not_found("Inventory", inventory_id)
    return Response(status_code=204)
