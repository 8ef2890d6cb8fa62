"""
Field rules used by the entity services.

Each factory returns a ``Rule``: a callable taking the entity and raising
``InvalidArgumentError`` when the field is out of range. Services list their
rules declaratively and the shared pipeline runs them in order, so the first
broken rule decides the error message.
"""

import math
from decimal import Decimal
from typing import Any, Callable, Iterable, Optional

from pydantic.alias_generators import to_camel

from commerce_api.core.errors import InvalidArgumentError

Rule = Callable[[Any], None]

# Largest values the Numeric(18, 2) and Integer columns can hold
MAX_AMOUNT = Decimal("9999999999999999.99")
MAX_QUANTITY = 2 ** 31 - 1


def _fail(message: str, field: str) -> InvalidArgumentError:
    return InvalidArgumentError(message, details=f"Field: {to_camel(field)}")


def require_positive_id(value: Optional[int], label: str = "Id", field: str = "id") -> None:
    if value is None or value <= 0:
        raise _fail(f"{label} must be greater than 0", field)


def required_text(field: str, label: str, max_length: Optional[int] = None) -> Rule:
    def rule(entity) -> None:
        value = getattr(entity, field)
        if value is None or not str(value).strip():
            raise _fail(f"{label} is required", field)
        if max_length is not None and len(value) > max_length:
            raise _fail(f"{label} cannot exceed {max_length} characters", field)
    return rule


def optional_text(field: str, label: str, max_length: int) -> Rule:
    def rule(entity) -> None:
        value = getattr(entity, field)
        if value is not None and len(value) > max_length:
            raise _fail(f"{label} cannot exceed {max_length} characters", field)
    return rule


def check_in_range(value, label: str, field: str, maximum=MAX_AMOUNT) -> None:
    """Finite and no larger than ``maximum``. NaN compares false both ways, so it is tested first."""
    if not math.isfinite(value):
        raise _fail(f"{label} must be a finite number", field)
    if value > maximum:
        raise _fail(f"{label} cannot exceed {maximum}", field)


def non_negative(field: str, label: str, maximum=MAX_AMOUNT) -> Rule:
    def rule(entity) -> None:
        value = getattr(entity, field)
        if value is None:
            raise _fail(f"{label} is required", field)
        check_in_range(value, label, field, maximum)
        if value < 0:
            raise _fail(f"{label} cannot be negative", field)
    return rule


def greater_than_zero(field: str, label: str, maximum=MAX_AMOUNT) -> Rule:
    def rule(entity) -> None:
        value = getattr(entity, field)
        if value is None:
            raise _fail(f"{label} must be greater than 0", field)
        check_in_range(value, label, field, maximum)
        if value <= 0:
            raise _fail(f"{label} must be greater than 0", field)
    return rule


def reference_id(field: str, message: str) -> Rule:
    """Foreign-key shaped field: present and > 0. Existence is checked separately."""
    def rule(entity) -> None:
        value = getattr(entity, field)
        if value is None or value <= 0:
            raise _fail(message, field)
    return rule


def one_of(field: str, label: str, allowed: Iterable[str]) -> Rule:
    allowed = list(allowed)

    def rule(entity) -> None:
        value = getattr(entity, field)
        if value not in allowed:
            raise _fail(f"{label} must be one of: {', '.join(allowed)}", field)
    return rule


def run_rules(entity, rules: Iterable[Rule]) -> None:
    for rule in rules:
        rule(entity)
