"""Small input-normalisation helpers shared by the services."""

from typing import Dict, Iterable, List, Optional

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import URLValidator

_url_validator = URLValidator(schemes=["http", "https"])


def split_comma_list(raw) -> List[str]:
    """
    Split a comma-separated string into trimmed, non-empty, unique items.

    Lists are accepted too (each element is trimmed the same way). Order of
    first appearance is kept.
    """
    if not raw:
        return []
    if isinstance(raw, str):
        parts: Iterable = raw.split(",")
    elif isinstance(raw, (list, tuple)):
        parts = raw
    else:
        return []
    seen = set()
    result = []
    for part in parts:
        item = str(part).strip()
        if item and item not in seen:
            seen.add(item)
            result.append(item)
    return result


def is_valid_url(value: Optional[str]) -> bool:
    """Return True for a syntactically valid http(s) URL."""
    if not value:
        return False
    try:
        _url_validator(value)
    except DjangoValidationError:
        return False
    return True


def field_error(field: str, msg: str) -> Dict[str, str]:
    """Build one entry of a ValidationError's `errors` list."""
    return {"param": field, "msg": msg}
