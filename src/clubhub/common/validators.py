from __future__ import annotations

from ..core.constants import MEMBER_DELIMITER
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_no_delimiter(value: str, field_name: str) -> str:
    if MEMBER_DELIMITER in value:
        raise ValidationError(f"{field_name} must not contain '{MEMBER_DELIMITER}'")
    return value


def require_no_whitespace(value: str, field_name: str) -> str:
    if any(ch.isspace() for ch in value):
        raise ValidationError(f"{field_name} must not contain spaces")
    return value
