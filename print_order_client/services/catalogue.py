"""
Catalogue resource service: product prices per destination.

Prices are quotes for one country/SKU combination and are not cached.
SKUs the service does not recognize are simply missing from the result,
so always match results to requests by SKU, never by position:

    items = await client.catalogue.prices("US", ["SKU1", "SKU2", "UNKNOWN"])
    missing = CatalogueService.missing_skus(["SKU1", "SKU2", "UNKNOWN"], items)
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from ..logging_config import get_logger
from ..models.catalog import CatalogItem
from .base import API_PREFIX, ResourceService, path_segment


logger = get_logger(__name__)

CATALOGUE_NAME = "prodigi direct"


class CatalogueService(ResourceService):

    async def prices(self, country_code: str, skus: Sequence[str]) -> List[CatalogItem]:
        """
        Price a list of SKUs for a destination country.

        Args:
            country_code: Two-letter destination country code
            skus: Product codes to price

        Returns:
            One CatalogItem per recognized SKU
        """
        path = (
            f"{API_PREFIX}/catalogue/{path_segment(CATALOGUE_NAME)}"
            f"/destination/{path_segment(country_code)}/prices"
        )
        data = await self._dispatcher.request(path, method="POST", body=list(skus))
        items = self._build_list(self._unwrap_list(data, "prices", path), CatalogItem.from_dict, path)

        if len(items) < len(skus):
            logger.debug(f"{len(skus) - len(items)} of {len(skus)} SKUs not priced for {country_code}")
        return items

    @staticmethod
    def missing_skus(requested: Iterable[str], items: Iterable[CatalogItem]) -> List[str]:
        """Requested SKUs with no price in the result, in request order."""
        priced = {item.sku for item in items}
        return [sku for sku in requested if sku not in priced]
