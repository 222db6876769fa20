"""Shared plumbing for the resource services."""

from __future__ import annotations

from typing import Any, Callable, List, TypeVar
from urllib.parse import quote

from ..core.api_client import ApiDispatcher
from ..core.exceptions import ResponseDecodeError


API_PREFIX = "/v3.0"

T = TypeVar("T")


def path_segment(value: Any) -> str:
    """Quote an identifier as a single path segment."""
    return quote(str(value), safe="")


class ResourceService:
    """Base for services that share one ApiDispatcher."""

    def __init__(self, dispatcher: ApiDispatcher):
        self._dispatcher = dispatcher

    def _expect_object(self, data: Any, path: str) -> dict:
        if not isinstance(data, dict):
            raise ResponseDecodeError(
                f"Expected a JSON object from {path}, got {type(data).__name__}",
                path=path,
                payload=data,
            )
        return data

    def _unwrap_list(self, data: Any, field: str, path: str) -> List[Any]:
        """
        Pull a list out of an envelope such as {"items": [...]}.

        Raises:
            ResponseDecodeError: If the field is missing or not a list
        """
        envelope = self._expect_object(data, path)
        items = envelope.get(field)
        if not isinstance(items, list):
            raise ResponseDecodeError(
                f"Response from {path} has no '{field}' list",
                path=path,
                payload=data,
            )
        return items

    def _decode(self, factory: Callable[[dict], T], data: Any, path: str) -> T:
        """
        Build a model from one JSON object.

        Raises:
            ResponseDecodeError: If data is not an object or a nested field
                has the wrong shape
        """
        obj = self._expect_object(data, path)
        try:
            return factory(obj)
        except (TypeError, ValueError, AttributeError) as e:
            raise ResponseDecodeError(
                f"Could not decode response from {path}: {e}",
                path=path,
                payload=data,
            ) from e

    def _build_list(self, items: List[Any], factory: Callable[[dict], T], path: str) -> List[T]:
        return [self._decode(factory, item, path) for item in items]
