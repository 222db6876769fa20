"""
Orders resource service.

Each method issues exactly one request through the shared ApiDispatcher and
returns typed models. Eligibility checks (can this order be cancelled,
updated, submitted?) are left to the service: a rejected action surfaces
as RequestFailedError carrying the service's message.

Usage:
    order = await client.orders.create(OrderParameters(
        recipient_name="Jane Doe",
        country_code="GB",
        preferred_shipping_method=ShippingMethod.STANDARD,
    ))
    await client.orders.add_images(order.id, [image_params, ...])

    report = await client.orders.validate(order.id)
    if report.is_valid:
        await client.orders.submit(order.id)
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..logging_config import get_logger
from ..models.enums import OrderStatus
from ..models.image import Image, ImageParameters
from ..models.order import Order, OrderPage, OrderParameters
from ..models.validation import OrderValidation
from .base import API_PREFIX, ResourceService, path_segment


logger = get_logger(__name__)

DEFAULT_PAGE_SIZE = 100
"""Orders per page when no limit is given. The service caps it at 250."""


class OrdersService(ResourceService):
    """Create, inspect, validate, submit and cancel orders."""

    def _order_path(self, order_id: str, suffix: str = "") -> str:
        return f"{API_PREFIX}/orders/{path_segment(order_id)}{suffix}"

    async def get(self, order_id: str) -> Order:
        """
        Fetch one order.

        Raises:
            RequestFailedError: If the order does not exist
        """
        path = self._order_path(order_id)
        data = await self._dispatcher.request(path)
        return self._decode(Order.from_dict, data, path)

    async def list(self, limit: Optional[int] = None, start: Optional[int] = None) -> OrderPage:
        """
        Fetch one page of orders.

        Args:
            limit: Page size (default 100; the service allows up to 250)
            start: Offset of the first order (default 0)

        Returns:
            OrderPage; follow has_more yourself to read further pages
        """
        limit = limit or DEFAULT_PAGE_SIZE
        start = start or 0
        path = f"{API_PREFIX}/orders?limit={limit}&start={start}"
        envelope = self._expect_object(await self._dispatcher.request(path), path)
        orders = self._build_list(self._unwrap_list(envelope, "data", path), Order.from_dict, path)
        return OrderPage(orders=tuple(orders), has_more=bool(envelope.get("has_more", False)))

    async def create(self, params: OrderParameters) -> Order:
        """Create a new order (status NotYetSubmitted)."""
        path = f"{API_PREFIX}/orders"
        data = await self._dispatcher.request(path, method="POST", body=params.to_dict())
        order = self._decode(Order.from_dict, data, path)
        logger.info(f"Created order {order.id}")
        return order

    async def update(self, order_id: str, params: OrderParameters) -> Order:
        """
        Replace the order's client-settable fields.

        Only accepted while the service allows it (see can_update_shipping).
        """
        path = self._order_path(order_id)
        data = await self._dispatcher.request(path, method="PUT", body=params.to_dict())
        return self._decode(Order.from_dict, data, path)

    async def validate(self, order_id: str) -> OrderValidation:
        """Ask the service whether the order would be accepted if submitted now."""
        path = self._order_path(order_id, "/SubmissionStatus")
        data = await self._dispatcher.request(path)
        return self._decode(OrderValidation.from_dict, data, path)

    async def submit(self, order_id: str) -> None:
        """Request the transition to Submitted."""
        await self._set_status(order_id, OrderStatus.SUBMITTED)

    async def cancel(self, order_id: str) -> None:
        """Request the transition to Cancelled."""
        await self._set_status(order_id, OrderStatus.CANCELLED)

    async def _set_status(self, order_id: str, status: OrderStatus) -> None:
        path = self._order_path(order_id, "/status")
        await self._dispatcher.request(path, method="POST", body={"status": status.value})
        logger.info(f"Order {order_id}: status change to {status.value} accepted")

    async def add_image(self, order_id: str, image: ImageParameters) -> Image:
        """Add one image line item; returns it with its ID and initial status."""
        path = self._order_path(order_id, "/images")
        data = await self._dispatcher.request(path, method="POST", body=image.to_dict())
        return self._decode(Image.from_dict, data, path)

    async def add_images(self, order_id: str, images: Sequence[ImageParameters]) -> List[Image]:
        """
        Add several images in one call.

        The call succeeds or fails as a whole. Item-level problems, if any,
        are visible in the returned images' status.

        Returns:
            Images in the same order as sent
        """
        path = self._order_path(order_id, "/images/batch")
        body = [image.to_dict() for image in images]
        data = await self._dispatcher.request(path, method="POST", body=body)
        return self._build_list(self._unwrap_list(data, "items", path), Image.from_dict, path)
