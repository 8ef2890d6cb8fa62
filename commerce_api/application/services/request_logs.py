from typing import Optional

from commerce_api.domain.models import RequestLog, utcnow
from commerce_api.infrastructure.stores import EntityStore
from commerce_api.application.validation import require_positive_id

class RequestLogService:
    """Append-only audit trail of handled requests."""

    def __init__(self, store: EntityStore[RequestLog]):
        self.store = store

    def log_request(
        self,
        method: str,
        path: str,
        status_code: Optional[int],
        elapsed_milliseconds: int,
    ) -> RequestLog:
        return self.store.add(RequestLog(
            request_method=method,
            request_path=path,
            status_code=status_code,
            elapsed_milliseconds=max(0, elapsed_milliseconds),
            requested_at=utcnow(),
        ))

    def get_all(self) -> list[RequestLog]:
        return self.store.get_all()

    def get_by_id(self, log_id: int) -> Optional[RequestLog]:
        require_positive_id(log_id)
        return self.store.get_by_id(log_id)
