from datetime import datetime
from typing import Optional

from commerce_api.core.schema_base import CamelModel

class RequestLogRead(CamelModel):
    id: int
    request_method: str
    request_path: str
    status_code: Optional[int] = None
    elapsed_milliseconds: int
    requested_at: datetime
