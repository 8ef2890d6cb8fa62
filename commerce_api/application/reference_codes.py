import re
import uuid
from datetime import datetime, timezone
from typing import Optional

ORDER_PREFIX = "ORD"
TRACKING_PREFIX = "TRK"

REFERENCE_CODE_PATTERN = re.compile(r"^[A-Z]+-\d{8}-[0-9A-F]{8}$")

def generate_reference_code(prefix: str, now: Optional[datetime] = None) -> str:
    """Build ``PREFIX-yyyyMMdd-XXXXXXXX``.

    The 8-character token is cut from a uuid4, so codes are short and readable
    but not guaranteed unique; the unique index on the column is the backstop.
    """
    now = now or datetime.now(timezone.utc)
    token = uuid.uuid4().hex[:8].upper()
    return f"{prefix}-{now:%Y%m%d}-{token}"
