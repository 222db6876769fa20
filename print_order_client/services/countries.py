"""Countries resource service: supported destination countries."""

from __future__ import annotations

from typing import Any, List

from ..core.exceptions import ResponseDecodeError
from ..models.catalog import Country
from .base import API_PREFIX, ResourceService


class CountriesService(ResourceService):

    async def list(self) -> List[Country]:
        """Fetch the full list of supported countries (no pagination)."""
        path = f"{API_PREFIX}/countries"
        data: Any = await self._dispatcher.request(path)
        if not isinstance(data, list):
            raise ResponseDecodeError(f"Expected a JSON array from {path}", path=path, payload=data)
        return self._build_list(data, Country.from_dict, path)
