from __future__ import annotations

import re
from typing import Any, Mapping, Sequence

from ..core.constants import MAX_YEAR, MIN_YEAR
from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_URL_RE = re.compile(r"^https?://\S+$", re.IGNORECASE)


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_fields(data: Mapping[str, Any], fields: Sequence[str], message: str = "All fields are required!") -> None:
    """Reject the payload if any of ``fields`` is missing or blank."""
    for name in fields:
        value = data.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(message)


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_email(value: Any) -> str:
    email = require_non_empty(value, "Email").lower()
    if not _EMAIL_RE.match(email):
        raise ValidationError("Email is not valid")
    return email


def require_url(value: Any, field_name: str = "URL") -> str:
    url = require_non_empty(value, field_name)
    if not _URL_RE.match(url):
        raise ValidationError(f"{field_name} must start with http:// or https://")
    return url


def parse_id(value: Any, field_name: str) -> int:
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} is not valid")
    if parsed <= 0:
        raise ValidationError(f"{field_name} is not valid")
    return parsed


def parse_year(value: Any) -> int:
    """Academic years arrive as ints or strings ("2") from select boxes."""
    try:
        year = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError("Year is not valid")
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValidationError(f"Year must be between {MIN_YEAR} and {MAX_YEAR}")
    return year


def unique_in_order(values):
    seen = set()
    out = []
    for v in values:
        if v in seen:
            continue
        seen.add(v)
        out.append(v)
    return out
