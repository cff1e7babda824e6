from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_string(value: Any, message: str) -> str:
    if not value or not isinstance(value, str):
        raise ValidationError(message)
    return value


def require_non_empty(value: str, message: str) -> str:
    if not value or not value.strip():
        raise ValidationError(message)
    return value.strip()
