"""Small helpers shared by the model from_dict() constructors."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple


# .NET timestamps carry up to 7 fractional digits; datetime takes 6.
_FRACTION_RE = re.compile(r"(\.\d{6})\d+")


def parse_datetime(value: Any) -> Optional[datetime]:
    """
    Parse an ISO 8601 timestamp from the service.

    Naive timestamps are assumed to be UTC. None and "" mean "not set".

    Raises:
        ValueError: If a non-empty value is not an ISO 8601 timestamp
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    text = _FRACTION_RE.sub(r"\1", str(value).replace("Z", "+00:00"))
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise ValueError(f"Invalid timestamp: {value!r}") from None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def as_str(value: Any) -> Optional[str]:
    """Identifiers arrive as numbers or strings; keep them as strings."""
    if value is None:
        return None
    return str(value)


def string_tuple(values: Any) -> Tuple[str, ...]:
    return tuple(str(v) for v in (values or []))


def string_mapping(values: Any) -> Dict[str, str]:
    return {str(k): str(v) for k, v in (values or {}).items()}


def compact(data: Dict[str, Any]) -> Dict[str, Any]:
    """Drop keys whose value is None (optional fields left unset)."""
    return {key: value for key, value in data.items() if value is not None}
