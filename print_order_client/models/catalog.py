"""
Reference and pricing models.

Country is a lookup entry; CatalogItem is a price quote valid only for the
country/SKU combination it was requested for. Neither is cached.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class Country:
    """A destination country supported by the service."""

    country_code: str
    """Two-letter country code."""

    name: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Country":
        return cls(
            country_code=data.get("countryCode") or "",
            name=data.get("name") or "",
        )


@dataclass(frozen=True)
class CatalogItem:
    """Price of one product for one destination."""

    sku: str
    price: int
    """What the service charges for the product (minor units)."""

    currency: str
    """Currency code the price is expressed in."""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CatalogItem":
        return cls(
            sku=data.get("sku") or "",
            price=int(data.get("price") or 0),
            currency=data.get("currency") or "",
        )
