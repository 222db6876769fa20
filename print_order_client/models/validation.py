"""
Order validation report.

OrderValidation is a point-in-time snapshot returned by the service's
submission check. It is not part of the order's state; fetch a fresh one
whenever the order changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Any, Tuple

from .enums import GeneralError, ImageError, ImageWarning
from .parsing import as_str


@dataclass(frozen=True)
class ImageValidation:
    """Errors and warnings reported for one image in the order."""

    id: str
    errors: Tuple[ImageError, ...] = ()
    warnings: Tuple[ImageWarning, ...] = ()

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ImageValidation":
        return cls(
            id=as_str(data.get("id")) or "",
            errors=tuple(ImageError(e) for e in data.get("errors") or []),
            warnings=tuple(ImageWarning(w) for w in data.get("warnings") or []),
        )


@dataclass(frozen=True)
class OrderValidation:
    """
    Whether an order would be accepted if submitted now.

    Attributes mirror the service report; is_valid is the service's own
    verdict, not recomputed from the error lists.
    """

    id: str
    is_valid: bool
    photos: Tuple[ImageValidation, ...] = ()
    general_errors: Tuple[GeneralError, ...] = ()

    @property
    def invalid_photos(self) -> Tuple[ImageValidation, ...]:
        """Images with at least one error (warnings alone do not count)."""
        return tuple(p for p in self.photos if p.has_errors)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OrderValidation":
        return cls(
            id=as_str(data.get("id")) or "",
            is_valid=bool(data.get("isValid", False)),
            photos=tuple(ImageValidation.from_dict(p) for p in data.get("photos") or []),
            general_errors=tuple(GeneralError(e) for e in data.get("generalErrors") or []),
        )
