from datetime import datetime, timezone

from commerce_api.application.reference_codes import (
    ORDER_PREFIX,
    REFERENCE_CODE_PATTERN,
    TRACKING_PREFIX,
    generate_reference_code,
)


def test_format_uses_prefix_and_date():
    code = generate_reference_code(ORDER_PREFIX, now=datetime(2024, 3, 9, tzinfo=timezone.utc))
    assert code.startswith("ORD-20240309-")
    assert REFERENCE_CODE_PATTERN.match(code)


def test_token_is_eight_uppercase_hex_characters():
    token = generate_reference_code(TRACKING_PREFIX).rsplit("-", 1)[1]
    assert len(token) == 8
    assert token == token.upper()
