"""
Core module for print_order_client.

Contains the request layer every resource service builds on:
- exceptions: Custom exception hierarchy
- api_client: Authenticated JSON request dispatcher
"""

from .exceptions import (
    PrintOrderClientError,
    ConfigurationError,
    RequestFailedError,
    ResponseDecodeError,
)
from .api_client import ApiDispatcher, DecodeResult, decode_response

__all__ = [
    "PrintOrderClientError",
    "ConfigurationError",
    "RequestFailedError",
    "ResponseDecodeError",
    "ApiDispatcher",
    "DecodeResult",
    "decode_response",
]
