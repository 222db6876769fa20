"""
Resource services for print_order_client.

Each service is a thin facade over the shared ApiDispatcher:
- OrdersService: orders, images, validation, submission
- CountriesService: supported destination countries
- CatalogueService: product prices per destination

Concurrency:
    Services hold no mutable state. Any number of calls may run
    concurrently (e.g. with asyncio.gather).
"""

from .orders import OrdersService
from .countries import CountriesService
from .catalogue import CatalogueService

__all__ = [
    "OrdersService",
    "CountriesService",
    "CatalogueService",
]
