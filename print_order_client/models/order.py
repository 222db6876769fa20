"""
Order data models.

These models represent an order as reported by the fulfillment service,
plus the parameter set the client sends to create or update one.

Lifecycle:
    - Order, ShippingInfo and Shipment are only ever built by from_dict()
      from a service response. They are frozen value objects.
    - "Updating" an order means sending OrderParameters and using the
      fresh Order the service returns.
    - Shipments are never created locally; they appear once the service
      allocates them after submission.

Round-trip:
    OrderParameters.from_order(order) keeps only the fields the service
    accepts on update. Server-computed fields (id, status, capability
    flags, timestamps, prices, images, shipments) are never sent back.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Dict, Any, Optional, Tuple

from ..logging_config import get_logger
from .enums import Carrier, OrderStatus, PaymentType, ShippingMethod
from .image import Image
from .parsing import as_str, compact, parse_datetime, string_tuple


logger = get_logger(__name__)


@dataclass(frozen=True)
class Shipment:
    """
    A physical parcel. One order may fan out into several shipments,
    grouped by product type.
    """

    shipment_id: Optional[str]
    """None until the order is submitted and shipments are allocated."""

    is_tracked: bool = False

    tracking_number: Optional[str] = None
    """Available once dispatched."""

    tracking_url: Optional[str] = None
    """Available once dispatched."""

    earliest_estimated_arrival_date: Optional[datetime] = None
    latest_estimated_arrival_date: Optional[datetime] = None

    shipped_on: Optional[datetime] = None
    """None until the shipment has been shipped."""

    carrier: Optional[Carrier] = None
    """Set once dispatched."""

    photo_ids: Tuple[str, ...] = ()
    """IDs of the images (in Order.images) packed in this shipment."""

    @property
    def is_shipped(self) -> bool:
        """True once the service has reported a ship date."""
        return self.shipped_on is not None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Shipment":
        return cls(
            shipment_id=as_str(data.get("shipmentId")),
            is_tracked=bool(data.get("isTracked", False)),
            tracking_number=data.get("trackingNumber"),
            tracking_url=data.get("trackingUrl"),
            earliest_estimated_arrival_date=parse_datetime(data.get("earliestEstimatedArrivalDate")),
            latest_estimated_arrival_date=parse_datetime(data.get("latestEstimatedArrivalDate")),
            shipped_on=parse_datetime(data.get("shippedOn")),
            carrier=Carrier.parse(data.get("carrier")),
            photo_ids=string_tuple(data.get("photoIds")),
        )


@dataclass(frozen=True)
class ShippingInfo:
    """How the order will be shipped: total price plus each shipment."""

    price: int = 0
    """Cost of shipping the entire order (minor units)."""

    shipments: Tuple[Shipment, ...] = ()
    """Empty before submission."""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ShippingInfo":
        data = data or {}
        return cls(
            price=int(data.get("price") or 0),
            shipments=tuple(Shipment.from_dict(s) for s in data.get("shipments") or []),
        )


@dataclass(frozen=True)
class Order:
    """
    A print/ship order, as decoded from the service.

    The capability flags (can_cancel, can_hold, can_update_shipping,
    can_update_images) are computed by the service from its own state and
    the fulfillment partner. Treat them as opaque; do not infer them from
    status.
    """

    id: str
    """Service-assigned order ID."""

    status: OrderStatus

    recipient_name: str
    country_code: str
    """Two-letter country code of the recipient."""

    preferred_shipping_method: ShippingMethod

    address1: str = ""
    address2: str = ""
    address_town_or_city: str = ""
    state_or_county: str = ""
    postal_or_zip_code: str = ""
    mobile_telephone: str = ""

    price: int = 0
    """What the service charges for the order (minor units)."""

    shipping_info: ShippingInfo = field(default_factory=ShippingInfo)

    payment: PaymentType = PaymentType.INVOICE_ME

    payment_url: Optional[str] = None
    """Where the recipient pays. Only set when payment is InvoiceRecipient."""

    images: Tuple[Image, ...] = ()
    """Image line items, in order."""

    merchant_order_id: str = ""
    """Merchant's own order reference."""

    created: Optional[datetime] = None
    last_updated: Optional[datetime] = None

    # Only required for some destinations (e.g. Middle East)
    invoice_amount_net: Optional[int] = None
    invoice_tax: Optional[int] = None
    invoice_currency: Optional[str] = None

    can_cancel: bool = False
    can_hold: bool = False
    can_update_shipping: bool = False
    can_update_images: bool = False

    @property
    def shipments(self) -> Tuple[Shipment, ...]:
        return self.shipping_info.shipments

    def image_by_id(self, image_id: str) -> Optional[Image]:
        """Find an image line item by its ID (e.g. from Shipment.photo_ids)."""
        for image in self.images:
            if image.id == str(image_id):
                return image
        return None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Order":
        """
        Create Order from a service response object.

        A paymentUrl sent with any payment mode other than InvoiceRecipient
        is dropped.
        """
        payment = PaymentType.parse(data.get("payment"), PaymentType.INVOICE_ME)
        payment_url = data.get("paymentUrl") or None
        if payment_url and payment is not PaymentType.INVOICE_RECIPIENT:
            logger.warning(
                f"Order {data.get('id')}: ignoring paymentUrl for payment={payment.value}"
            )
            payment_url = None

        return cls(
            id=as_str(data.get("id")) or "",
            status=OrderStatus.parse(data.get("status"), OrderStatus.NOT_YET_SUBMITTED),
            recipient_name=data.get("recipientName") or "",
            country_code=data.get("countryCode") or "",
            preferred_shipping_method=ShippingMethod.parse(
                data.get("preferredShippingMethod"), ShippingMethod.STANDARD
            ),
            address1=data.get("address1") or "",
            address2=data.get("address2") or "",
            address_town_or_city=data.get("addressTownOrCity") or "",
            state_or_county=data.get("stateOrCounty") or "",
            postal_or_zip_code=data.get("postalOrZipCode") or "",
            mobile_telephone=data.get("mobileTelephone") or "",
            price=int(data.get("price") or 0),
            shipping_info=ShippingInfo.from_dict(data.get("shippingInfo")),
            payment=payment,
            payment_url=payment_url,
            images=tuple(Image.from_dict(i) for i in data.get("images") or []),
            merchant_order_id=data.get("merchantOrderId") or "",
            created=parse_datetime(data.get("created")),
            last_updated=parse_datetime(data.get("lastUpdated")),
            invoice_amount_net=data.get("invoiceAmountNet"),
            invoice_tax=data.get("invoiceTax"),
            invoice_currency=as_str(data.get("invoiceCurrency")),
            can_cancel=bool(data.get("canCancel", False)),
            can_hold=bool(data.get("canHold", False)),
            can_update_shipping=bool(data.get("canUpdateShipping", False)),
            can_update_images=bool(data.get("canUpdateImages", False)),
        )


@dataclass(frozen=True)
class OrderPage:
    """One page of orders. The client does not fetch further pages itself."""

    orders: Tuple[Order, ...]
    has_more: bool

    def __len__(self) -> int:
        return len(self.orders)

    def __iter__(self):
        return iter(self.orders)


@dataclass(frozen=True)
class OrderParameters:
    """
    Fields accepted when creating or updating an order.

    Required: recipient_name, country_code, preferred_shipping_method.
    Everything else is optional and left out of the request when unset.
    Update is a full replace, so send every field you want to keep.
    """

    recipient_name: str
    country_code: str
    preferred_shipping_method: ShippingMethod

    merchant_order_id: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    address_town_or_city: Optional[str] = None
    state_or_county: Optional[str] = None
    postal_or_zip_code: Optional[str] = None
    mobile_telephone: Optional[str] = None
    telephone: Optional[str] = None
    email: Optional[str] = None

    payment: Optional[PaymentType] = None
    """Defaults to InvoiceMe on the service when unset."""

    packing_slip_url: Optional[str] = None
    """PNG packing slip, A4 recommended. Not supported by every facility."""

    invoice_amount_net: Optional[int] = None
    invoice_tax: Optional[int] = None
    invoice_currency: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the JSON body expected by the service.

        Raises:
            ValueError: If an enum field holds UNRECOGNIZED
        """
        for name, value in (
            ("preferred_shipping_method", self.preferred_shipping_method),
            ("payment", self.payment),
        ):
            if value is not None and not value.is_recognized:
                raise ValueError(f"Cannot send an unrecognized {name} value")

        return compact({
            "merchantOrderId": self.merchant_order_id,
            "recipientName": self.recipient_name,
            "address1": self.address1,
            "address2": self.address2,
            "addressTownOrCity": self.address_town_or_city,
            "stateOrCounty": self.state_or_county,
            "postalOrZipCode": self.postal_or_zip_code,
            "countryCode": self.country_code,
            "mobileTelephone": self.mobile_telephone,
            "telephone": self.telephone,
            "email": self.email,
            "preferredShippingMethod": self.preferred_shipping_method.value,
            "payment": self.payment.value if self.payment else None,
            "packingSlipUrl": self.packing_slip_url,
            "invoiceAmountNet": self.invoice_amount_net,
            "invoiceTax": self.invoice_tax,
            "invoiceCurrency": self.invoice_currency,
        })

    @classmethod
    def from_order(cls, order: Order, **overrides: Any) -> "OrderParameters":
        """
        Build update parameters from a decoded order.

        Empty strings in the order are treated as unset. Fields the service
        does not return (telephone, email, packing_slip_url) can be given
        as overrides.

        Args:
            order: Order as returned by the service
            **overrides: OrderParameters fields to replace

        Returns:
            OrderParameters carrying only client-settable fields
        """
        params = cls(
            recipient_name=order.recipient_name,
            country_code=order.country_code,
            preferred_shipping_method=order.preferred_shipping_method,
            merchant_order_id=order.merchant_order_id or None,
            address1=order.address1 or None,
            address2=order.address2 or None,
            address_town_or_city=order.address_town_or_city or None,
            state_or_county=order.state_or_county or None,
            postal_or_zip_code=order.postal_or_zip_code or None,
            mobile_telephone=order.mobile_telephone or None,
            payment=order.payment,
            invoice_amount_net=order.invoice_amount_net,
            invoice_tax=order.invoice_tax,
            invoice_currency=order.invoice_currency,
        )
        if overrides:
            params = replace(params, **overrides)
        return params
