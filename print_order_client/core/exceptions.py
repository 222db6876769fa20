"""
Custom exceptions for print_order_client.

Exception Hierarchy:
    PrintOrderClientError (base)
    ├── ConfigurationError   - Credentials or endpoint missing (first request)
    ├── RequestFailedError   - Non-success status or no decodable body
    └── ResponseDecodeError  - Success response that cannot be modeled

Transport failures (DNS, TLS, connection resets) are NOT wrapped. They
surface as the httpx exception raised by the transport.

Usage:
    try:
        await client.orders.cancel(order_id)
    except RequestFailedError as e:
        # e.message is the service's own errorMessage (or raw body text)
        print(e.message, e.status_code)
"""

from typing import Optional, Dict, Any


class PrintOrderClientError(Exception):
    """
    Base exception for all print_order_client errors.

    All custom exceptions inherit from this class, allowing callers to catch
    all library-specific errors with a single except clause if needed.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional context for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# CONFIGURATION ERRORS - Raised on the first request, never at construction
# =============================================================================

class ConfigurationError(PrintOrderClientError):
    """
    Client settings are incomplete.

    Typical causes:
    - PWINTY_MERCHANT_ID or PWINTY_API_KEY not set and not passed explicitly
    - Empty base URL override
    - PWINTY_TIMEOUT that is not a positive number
    """

    def __init__(self, missing: list, message: Optional[str] = None):
        message = message or f"Missing client configuration: {', '.join(missing)}"
        details = {
            "missing": list(missing),
            "resolution": "Pass the values explicitly or set the PWINTY_* environment variables",
        }
        super().__init__(message, details)
        self.missing = list(missing)


# =============================================================================
# REQUEST ERRORS - A response was received but the call did not succeed
# =============================================================================

class RequestFailedError(PrintOrderClientError):
    """
    The service answered, but the call failed.

    Covers both protocol failures (status outside 2xx, no decodable body) and
    domain rejections (e.g. cancelling an order already in production). The
    two are indistinguishable at this layer; both carry the service's message.

    The string form is exactly the service message, so callers can show it
    to users directly. Status and request info live on attributes instead of
    in details.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        method: Optional[str] = None,
        path: Optional[str] = None,
        response_text: str = "",
    ):
        super().__init__(message)
        self.status_code = status_code
        self.method = method
        self.path = path
        self.response_text = response_text


class ResponseDecodeError(PrintOrderClientError):
    """
    A successful response did not have the expected shape.

    Raised by the resource services when an envelope field such as
    ``items`` or ``prices`` is missing, or a model cannot be built.
    """

    def __init__(self, message: str, path: Optional[str] = None, payload: Any = None):
        details = {"path": path} if path else None
        super().__init__(message, details)
        self.path = path
        self.payload = payload
