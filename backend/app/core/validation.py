"""Field validation helpers for signup and login payloads."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional

USERNAME_PATTERN = re.compile(r"[a-zA-Z0-9_]+")
USERNAME_CHARSET_ERROR = "Username can only contain letters, numbers, and underscores"


@dataclass(frozen=True)
class FieldResult:
    """Outcome of validating one field: either a normalized value or an error."""

    value: Optional[str] = None
    error: Optional[str] = None

    @property
    def valid(self) -> bool:
        return self.error is None


def validate_field(value: Any, label: str, min_length: int, max_length: int) -> FieldResult:
    if not isinstance(value, str) or not value.strip():
        return FieldResult(error=f"{label} is required")
    trimmed = value.strip()
    if len(trimmed) < min_length:
        return FieldResult(error=f"{label} must be at least {min_length} characters long")
    if len(trimmed) > max_length:
        return FieldResult(error=f"{label} must be at most {max_length} characters long")
    return FieldResult(value=trimmed)


def validate_username_charset(username: str) -> FieldResult:
    if not USERNAME_PATTERN.fullmatch(username):
        return FieldResult(error=USERNAME_CHARSET_ERROR)
    return FieldResult(value=username)
