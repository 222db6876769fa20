"""
PrintOrderClient - entry point of the library.

Resolves settings once, builds one ApiDispatcher, and exposes the three
resource services on top of it.

Usage:
    # Credentials and environment from PWINTY_* variables / .env
    client = PrintOrderClient()

    # Or explicitly, sharing a connection pool
    async with httpx.AsyncClient() as http:
        client = PrintOrderClient(
            merchant_id="...",
            api_key="...",
            base_url="https://sandbox.pwinty.com",
            http_client=http,
        )
        countries = await client.countries.list()
"""

from __future__ import annotations

from typing import Optional

import httpx

from .config import ClientSettings
from .core.api_client import ApiDispatcher
from .logging_config import get_logger
from .services import CatalogueService, CountriesService, OrdersService


logger = get_logger(__name__)


class PrintOrderClient:
    """
    Client for the print-fulfillment API.

    Attributes:
        settings: Settings captured at construction (immutable)
        orders: OrdersService
        countries: CountriesService
        catalogue: CatalogueService
    """

    def __init__(
        self,
        settings: Optional[ClientSettings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        *,
        base_url: Optional[str] = None,
        merchant_id: Optional[str] = None,
        api_key: Optional[str] = None,
    ):
        """
        Initialize the client.

        Explicit keyword values win over settings; settings default to
        ClientSettings.from_env(). Missing credentials are only reported
        when the first request is made.

        Args:
            settings: Pre-built settings (default: read from environment)
            http_client: Optional caller-owned httpx.AsyncClient
            base_url: Host override
            merchant_id: Merchant ID override
            api_key: API key override
        """
        settings = settings or ClientSettings.from_env()
        self.settings = settings.with_overrides(
            base_url=base_url,
            merchant_id=merchant_id,
            api_key=api_key,
        )

        self._dispatcher = ApiDispatcher(self.settings, http_client=http_client)
        self.orders = OrdersService(self._dispatcher)
        self.countries = CountriesService(self._dispatcher)
        self.catalogue = CatalogueService(self._dispatcher)

        logger.debug(
            f"Client ready for {self.settings.base_url} ({self.settings.environment})"
        )

    def __repr__(self) -> str:
        return f"PrintOrderClient(base_url={self.settings.base_url!r})"
