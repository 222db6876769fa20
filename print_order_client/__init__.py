"""
print_order_client - async client for a remote print-fulfillment API.

Create orders, attach images, validate and submit them for production,
track shipments, and look up countries and prices. All printing and
shipping happen on the remote service.

Quick start:
    from print_order_client import PrintOrderClient, OrderParameters, ShippingMethod

    client = PrintOrderClient()
    order = await client.orders.create(OrderParameters(
        recipient_name="Jane Doe",
        country_code="GB",
        preferred_shipping_method=ShippingMethod.STANDARD,
    ))
"""

import logging

from .client import PrintOrderClient
from .config import ClientSettings, PRODUCTION_API_URL, SANDBOX_API_URL
from .core import (
    PrintOrderClientError,
    ConfigurationError,
    RequestFailedError,
    ResponseDecodeError,
)
from .logging_config import LOGGER_NAMESPACE
from .models import (
    Carrier,
    CatalogItem,
    Country,
    Image,
    ImageParameters,
    ImageStatus,
    Order,
    OrderPage,
    OrderParameters,
    OrderStatus,
    OrderValidation,
    PaymentType,
    ResizingType,
    Shipment,
    ShipmentStatus,
    ShippingMethod,
    WebhookPayload,
    merge_shipments,
)

logging.getLogger(LOGGER_NAMESPACE).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    # Client
    "PrintOrderClient",
    "ClientSettings",
    "PRODUCTION_API_URL",
    "SANDBOX_API_URL",
    # Errors
    "PrintOrderClientError",
    "ConfigurationError",
    "RequestFailedError",
    "ResponseDecodeError",
    # Models
    "Carrier",
    "CatalogItem",
    "Country",
    "Image",
    "ImageParameters",
    "ImageStatus",
    "Order",
    "OrderPage",
    "OrderParameters",
    "OrderStatus",
    "OrderValidation",
    "PaymentType",
    "ResizingType",
    "Shipment",
    "ShipmentStatus",
    "ShippingMethod",
    "WebhookPayload",
    "merge_shipments",
]
