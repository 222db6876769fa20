"""
Data models for print_order_client.

All models are frozen dataclasses built from service responses:
- Order, ShippingInfo, Shipment, OrderPage: orders and their shipments
- Image: image line items
- Country, CatalogItem: reference and pricing data
- OrderValidation, ImageValidation: submission check report
- WebhookPayload, WebhookShipment: inbound notifications

Request bodies:
- OrderParameters: create/update an order
- ImageParameters: add an image
"""

from .enums import (
    Carrier,
    GeneralError,
    ImageError,
    ImageStatus,
    ImageWarning,
    OrderStatus,
    PaymentType,
    ResizingType,
    ShipmentStatus,
    ShippingMethod,
    WebhookEnvironment,
)
from .order import Order, OrderPage, OrderParameters, Shipment, ShippingInfo
from .image import Image, ImageParameters
from .catalog import CatalogItem, Country
from .validation import ImageValidation, OrderValidation
from .webhook import WebhookPayload, WebhookShipment, merge_shipments

__all__ = [
    # Vocabularies
    "Carrier",
    "GeneralError",
    "ImageError",
    "ImageStatus",
    "ImageWarning",
    "OrderStatus",
    "PaymentType",
    "ResizingType",
    "ShipmentStatus",
    "ShippingMethod",
    "WebhookEnvironment",
    # Order models
    "Order",
    "OrderPage",
    "OrderParameters",
    "Shipment",
    "ShippingInfo",
    # Image models
    "Image",
    "ImageParameters",
    # Reference models
    "CatalogItem",
    "Country",
    # Validation
    "ImageValidation",
    "OrderValidation",
    # Webhooks
    "WebhookPayload",
    "WebhookShipment",
    "merge_shipments",
]
