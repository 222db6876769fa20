"""
Image line-item models.

Image is what the service returns for an item in an order.
ImageParameters is what the client sends to add one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Any, Optional

from .enums import ImageStatus, ResizingType
from .parsing import as_str, compact, string_mapping


@dataclass(frozen=True)
class Image:
    """
    An image line item in an order, as decoded from the service.

    Value object: to change an image, send a new request and use the
    Image (or Order) the service returns.
    """

    id: str
    """Service-assigned identifier."""

    url: str
    """Source URL the service downloads from."""

    status: ImageStatus
    """Download/validation state."""

    copies: int
    """Number of copies to print."""

    sizing: ResizingType
    """How the image is resized when printing."""

    price: int
    """What the service charges for this item (minor units)."""

    sku: str
    """Product the image is printed on."""

    price_to_user: Optional[int] = None
    """Resale price, only with InvoiceRecipient payment (minor units)."""

    md5_hash: Optional[str] = None
    preview_url: str = ""
    thumbnail_url: str = ""

    attributes: Dict[str, str] = field(default_factory=dict)
    """Product attributes (e.g. {'frameColour': 'black'})."""

    @property
    def is_resolved(self) -> bool:
        """True once the service has finished downloading/validating."""
        return not self.status.is_pre_resolution

    @property
    def is_failed(self) -> bool:
        return self.status.is_failure

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Image":
        """Create from a service response object."""
        return cls(
            id=as_str(data.get("id")) or "",
            url=data.get("url") or "",
            status=ImageStatus.parse(data.get("status"), ImageStatus.AWAITING_URL_OR_DATA),
            copies=int(data.get("copies") or 0),
            sizing=ResizingType.parse(data.get("sizing"), ResizingType.CROP),
            price=int(data.get("price") or 0),
            sku=data.get("sku") or "",
            price_to_user=data.get("priceToUser"),
            md5_hash=data.get("md5Hash"),
            preview_url=data.get("previewUrl") or "",
            thumbnail_url=data.get("thumbnailUrl") or "",
            attributes=string_mapping(data.get("attributes")),
        )


@dataclass(frozen=True)
class ImageParameters:
    """
    Parameters for adding an image to an order.

    Example:
        ImageParameters(
            sku="GLOBAL-PHO-4x6",
            url="https://example.com/photo.jpg",
            copies=2,
            sizing=ResizingType.CROP,
        )
    """

    sku: str
    url: str
    copies: int = 1
    sizing: ResizingType = ResizingType.CROP
    price_to_user: Optional[int] = None
    md5_hash: Optional[str] = None
    attributes: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the JSON body expected by the service.

        Raises:
            ValueError: If sizing is UNRECOGNIZED (cannot be sent back)
        """
        if not self.sizing.is_recognized:
            raise ValueError("Cannot send an unrecognized sizing value")
        data = compact({
            "sku": self.sku,
            "url": self.url,
            "copies": self.copies,
            "sizing": self.sizing.value,
            "priceToUser": self.price_to_user,
            "md5Hash": self.md5_hash,
        })
        data["attributes"] = dict(self.attributes)
        return data
