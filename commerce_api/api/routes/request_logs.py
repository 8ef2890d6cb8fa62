"""Read-only view over the request audit trail."""

from fastapi import APIRouter, Depends

from commerce_api.api.deps import get_request_log_service
from commerce_api.application.mappers import to_response, to_responses
from commerce_api.application.schemas import RequestLogRead
from commerce_api.application.services import RequestLogService
from commerce_api.core.errors import not_found

router = APIRouter(prefix="/api/requestlogs", tags=["request-logs"])

@router.get("", response_model=list[RequestLogRead])
def list_request_logs(service: RequestLogService = Depends(get_request_log_service)):
    return to_responses(service.get_all(), RequestLogRead)

@router.get("/{log_id}", response_model=RequestLogRead)
def get_request_log(log_id: int, service: RequestLogService = Depends(get_request_log_service)):
    entry = service.get_by_id(log_id)
    if entry is None:
        raise not_found("Request log", log_id)
    return to_response(entry, RequestLogRead)
