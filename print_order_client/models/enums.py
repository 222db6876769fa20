"""
Closed vocabularies reported by the fulfillment service.

Every enum here mirrors a string set defined by the service. The client
never computes a status; it only decodes what the service reports.

Unknown values:
    Each vocabulary has an UNRECOGNIZED member. Decoding a value the
    service added after this library was written yields UNRECOGNIZED
    (and a warning in the log) instead of a bare string, so code that
    matches every known member can still detect the new case.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from ..logging_config import get_logger


logger = get_logger(__name__)

UNRECOGNIZED_VALUE = "__unrecognized__"


class ServiceEnum(Enum):
    """Base for service vocabularies with an UNRECOGNIZED fallback."""

    @classmethod
    def _missing_(cls, value: Any):
        fallback = cls.__members__.get("UNRECOGNIZED")
        if fallback is None:
            return None
        logger.warning(f"Unrecognized {cls.__name__} value from service: {value!r}")
        return fallback

    @classmethod
    def parse(cls, value: Any, default: Optional["ServiceEnum"] = None):
        """
        Decode a raw JSON value.

        Args:
            value: Raw value from the response (None allowed)
            default: Returned when value is None or empty

        Returns:
            Enum member, UNRECOGNIZED for unknown strings, or default
        """
        if value is None or value == "":
            return default
        return cls(value)

    @property
    def is_recognized(self) -> bool:
        return self.value != UNRECOGNIZED_VALUE


# =============================================================================
# ORDER / SHIPMENT / IMAGE LIFECYCLES
# =============================================================================

class OrderStatus(ServiceEnum):
    """
    Status of an order, as reported by the service.

    Lifecycle:
        NotYetSubmitted -> Submitted -> Complete
        NotYetSubmitted | Submitted -> Cancelled
    """

    NOT_YET_SUBMITTED = "NotYetSubmitted"
    """Order is still being built; images and address may change."""

    SUBMITTED = "Submitted"
    """Order has been sent for production."""

    COMPLETE = "Complete"
    """All shipments have been dispatched."""

    CANCELLED = "Cancelled"
    """Order was cancelled before completion."""

    UNRECOGNIZED = UNRECOGNIZED_VALUE

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.COMPLETE, OrderStatus.CANCELLED)


class ShipmentStatus(ServiceEnum):
    """
    Status of a shipment.

    Lifecycle:
        InProgress -> Shipped (one-way)
    """

    IN_PROGRESS = "InProgress"
    SHIPPED = "Shipped"
    UNRECOGNIZED = UNRECOGNIZED_VALUE


class ImageStatus(ServiceEnum):
    """
    Download/validation status of an image.

    Lifecycle:
        AwaitingUrlOrData | NotYetDownloaded -> Ok | FileNotFoundAtUrl | Invalid

    Failed images are not retried by the client.
    """

    AWAITING_URL_OR_DATA = "AwaitingUrlOrData"
    """No URL or file data has been provided yet."""

    NOT_YET_DOWNLOADED = "NotYetDownloaded"
    """URL is known, download pending."""

    OK = "Ok"
    """Image downloaded and validated."""

    FILE_NOT_FOUND_AT_URL = "FileNotFoundAtUrl"
    """Download failed (terminal)."""

    INVALID = "Invalid"
    """File is not a usable image (terminal)."""

    UNRECOGNIZED = UNRECOGNIZED_VALUE

    @property
    def is_pre_resolution(self) -> bool:
        return self in (ImageStatus.AWAITING_URL_OR_DATA, ImageStatus.NOT_YET_DOWNLOADED)

    @property
    def is_failure(self) -> bool:
        return self in (ImageStatus.FILE_NOT_FOUND_AT_URL, ImageStatus.INVALID)


class Carrier(ServiceEnum):
    """Shipping carrier used once a shipment has been dispatched."""

    ROYAL_MAIL = "RoyalMail"
    ROYAL_MAIL_FIRST_CLASS = "RoyalMailFirstClass"
    ROYAL_MAIL_SECOND_CLASS = "RoyalMailSecondClass"
    FEDEX = "FedEx"
    FEDEX_UK = "FedExUK"
    FEDEX_INTL = "FedExIntl"
    INTERLINK = "Interlink"
    UPS = "UPS"
    UPS_TWO_DAY = "UpsTwoDay"
    UK_MAIL = "UKMail"
    TNT = "TNT"
    PARCEL_FORCE = "ParcelForce"
    DHL = "DHL"
    UPSMI = "UPSMI"
    DPD_NEXT_DAY = "DpdNextDay"
    EU_POSTAL = "EuPostal"
    AU_POST = "AuPost"
    AIR_MAIL = "AirMail"
    NOT_KNOWN = "NotKnown"
    """Reported by the service when it does not know the carrier."""

    UNRECOGNIZED = UNRECOGNIZED_VALUE


# =============================================================================
# ORDER OPTIONS - sent by the client and echoed back by the service
# =============================================================================

class ShippingMethod(ServiceEnum):
    BUDGET = "Budget"
    STANDARD = "Standard"
    EXPRESS = "Express"
    OVERNIGHT = "Overnight"
    UNRECOGNIZED = UNRECOGNIZED_VALUE


class PaymentType(ServiceEnum):
    """Who pays for the order."""

    INVOICE_ME = "InvoiceMe"
    """The merchant is invoiced (service default)."""

    INVOICE_RECIPIENT = "InvoiceRecipient"
    """The recipient pays via the order's paymentUrl."""

    UNRECOGNIZED = UNRECOGNIZED_VALUE


class ResizingType(ServiceEnum):
    """How an image is resized to fit the product."""

    CROP = "Crop"
    SHRINK_TO_FIT = "ShrinkToFit"
    SHRINK_TO_EXACT_FIT = "ShrinkToExactFit"
    UNRECOGNIZED = UNRECOGNIZED_VALUE


class WebhookEnvironment(ServiceEnum):
    LIVE = "LIVE"
    SANDBOX = "SANDBOX"
    UNRECOGNIZED = UNRECOGNIZED_VALUE


# =============================================================================
# VALIDATION CODES
# =============================================================================

class ImageError(ServiceEnum):
    FILE_COULD_NOT_BE_DOWNLOADED = "FileCouldNotBeDownloaded"
    NO_IMAGE_FILE = "NoImageFile"
    INVALID_IMAGE_FILE = "InvalidImageFile"
    ZERO_COPIES = "ZeroCopies"
    UNRECOGNIZED = UNRECOGNIZED_VALUE


class ImageWarning(ServiceEnum):
    CROPPING_WILL_OCCUR = "CroppingWillOccur"
    PICTURE_SIZE_TOO_SMALL = "PictureSizeTooSmall"
    COULD_NOT_VALIDATE_IMAGE_SIZE = "CouldNotValidateImageSize"
    COULD_NOT_VALIDATE_ASPECT_RATIO = "CouldNotValidateAspectRatio"
    ATTRIBUTE_NOT_VALID = "AttributeNotValid"
    UNRECOGNIZED = UNRECOGNIZED_VALUE


class GeneralError(ServiceEnum):
    ACCOUNT_BALANCE_INSUFFICIENT = "AccountBalanceInsufficient"
    ITEMS_CONTAINING_ERRORS = "ItemsContainingErrors"
    NO_ITEMS_IN_ORDER = "NoItemsInOrder"
    POSTAL_ADDRESS_NOT_SET = "PostalAddressNotSet"
    UNRECOGNIZED = UNRECOGNIZED_VALUE
