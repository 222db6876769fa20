"""
Inbound webhook notification payload.

The service calls a merchant URL whenever an order's status changes, a
shipment is created, or a shipment's status changes. This library does not
receive those calls; it only defines the payload and how to fold it into
what the caller already knows.

Shipments in a notification are INCREMENTAL: the list may be empty (not
yet allocated) or contain only some of the order's shipments. Always merge
with merge_shipments(), never replace.

Usage:
    payload = WebhookPayload.from_json(request_body)
    known = merge_shipments(known, payload)
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Any, FrozenSet, Iterable, Optional, Tuple, Union

from .enums import OrderStatus, ShipmentStatus, WebhookEnvironment
from .parsing import as_str, parse_datetime, string_tuple


@dataclass(frozen=True)
class WebhookShipment:
    """A shipment as described in a webhook notification."""

    items: Tuple[str, ...]
    """Image IDs included in the shipment."""

    status: ShipmentStatus
    tracking_number: Optional[str] = None
    tracking_url: Optional[str] = None

    @property
    def key(self) -> FrozenSet[str]:
        """Identity of the shipment across notifications (its item set)."""
        return frozenset(self.items)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WebhookShipment":
        return cls(
            items=string_tuple(data.get("items")),
            status=ShipmentStatus.parse(data.get("status"), ShipmentStatus.IN_PROGRESS),
            tracking_number=data.get("trackingNumber"),
            tracking_url=data.get("trackingUrl"),
        )


@dataclass(frozen=True)
class WebhookPayload:
    """One order status notification."""

    order_id: str
    environment: WebhookEnvironment
    """LIVE or SANDBOX, the deployment that sent the notification."""

    timestamp: Optional[datetime]
    """When the change took place."""

    status: OrderStatus
    """Current order status."""

    shipments: Tuple[WebhookShipment, ...] = ()

    @property
    def is_live(self) -> bool:
        return self.environment is WebhookEnvironment.LIVE

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WebhookPayload":
        return cls(
            order_id=as_str(data.get("orderId")) or "",
            environment=WebhookEnvironment.parse(data.get("environment"), WebhookEnvironment.UNRECOGNIZED),
            timestamp=parse_datetime(data.get("timestamp")),
            status=OrderStatus.parse(data.get("status"), OrderStatus.UNRECOGNIZED),
            shipments=tuple(WebhookShipment.from_dict(s) for s in data.get("shipments") or []),
        )

    @classmethod
    def from_json(cls, body: Union[str, bytes]) -> "WebhookPayload":
        """
        Parse a raw notification body.

        Raises:
            ValueError: If the body is not a JSON object or carries an
                invalid timestamp
        """
        data = json.loads(body)
        if not isinstance(data, dict):
            raise ValueError("Webhook payload must be a JSON object")
        return cls.from_dict(data)


def merge_shipments(
    previous: Iterable[WebhookShipment],
    payload: WebhookPayload,
) -> Tuple[WebhookShipment, ...]:
    """
    Fold a notification's shipments into previously known shipments.

    - A shipment with the same item set replaces its earlier record in place
    - A shipment not seen before is appended
    - Shipments absent from the notification are kept unchanged

    Args:
        previous: Shipments known before this notification
        payload: The new notification

    Returns:
        Merged shipments, earlier ones first
    """
    merged = list(previous)
    positions = {shipment.key: index for index, shipment in enumerate(merged)}

    for shipment in payload.shipments:
        index = positions.get(shipment.key)
        if index is None:
            positions[shipment.key] = len(merged)
            merged.append(shipment)
        else:
            merged[index] = shipment

    return tuple(merged)
