"""
Request dispatcher for the print-fulfillment HTTP/JSON API.

Every resource service goes through ApiDispatcher.request(). It is the ONLY
place that builds headers, serializes bodies, talks to httpx and decides
whether a response is a success.

STATELESS PER CALL:
    - Settings (credentials, host) are captured once at construction
    - Each request() issues exactly one HTTP call
    - No retries, no backoff, no caching
    - Concurrent calls share nothing mutable

Transport:
    Pass an httpx.AsyncClient to reuse connections (the caller owns it and
    closes it). Without one, a short-lived client is opened per call.

Usage:
    dispatcher = ApiDispatcher(settings)

    order = await dispatcher.request("/v3.0/orders/123")
    created = await dispatcher.request("/v3.0/orders", method="POST", body={...})
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

import httpx

from ..logging_config import get_logger
from .exceptions import RequestFailedError

if TYPE_CHECKING:
    from ..config import ClientSettings


logger = get_logger(__name__)

MERCHANT_ID_HEADER = "X-Pwinty-MerchantId"
API_KEY_HEADER = "X-Pwinty-REST-API-Key"
JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class DecodeResult:
    """
    Outcome of decoding one HTTP response.

    Decoding never raises: a body that is not JSON is simply "no data".
    The dispatcher turns a failed result into RequestFailedError.
    """

    ok: bool
    """True when the status is 2xx AND a JSON value was decoded."""

    data: Any = None
    """Decoded JSON value (None when nothing could be decoded)."""

    error_message: str = ""
    """Service errorMessage, or the raw response text, when not ok."""


def _has_data(data: Any) -> bool:
    if isinstance(data, (dict, list)):
        return True
    return bool(data)


def decode_response(status_code: int, text: str) -> DecodeResult:
    """
    Decode a response body and classify it.

    Args:
        status_code: HTTP status code
        text: Full response body as text

    A 2xx response only succeeds when it carries data. An empty or non-JSON
    body, JSON null, and the falsy scalars false, 0 and "" all count as no
    data. Empty arrays and objects are data.

    Returns:
        DecodeResult with data on success, or the best available message
    """
    try:
        data = json.loads(text) if text else None
    except ValueError:
        data = None

    if 200 <= status_code < 300 and _has_data(data):
        return DecodeResult(ok=True, data=data)

    message = text
    if isinstance(data, dict) and data.get("errorMessage"):
        message = str(data["errorMessage"])
    return DecodeResult(ok=False, data=data, error_message=message)


class ApiDispatcher:
    """
    Authenticated JSON request dispatcher.

    Attributes:
        settings: The ClientSettings captured at construction
    """

    def __init__(
        self,
        settings: ClientSettings,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the dispatcher.

        Credentials are NOT validated here; a missing value is reported by
        the first request.

        Args:
            settings: Resolved client settings
            http_client: Optional shared httpx.AsyncClient (caller-owned)
        """
        self._settings = settings
        self._http_client = http_client

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    def build_headers(self) -> Dict[str, str]:
        """
        Headers attached to every request.

        Raises:
            ConfigurationError: If credentials are missing
        """
        self._settings.require_credentials()
        return {
            MERCHANT_ID_HEADER: self._settings.merchant_id,
            API_KEY_HEADER: self._settings.api_key,
            "Content-Type": JSON_CONTENT_TYPE,
            "Accept": JSON_CONTENT_TYPE,
        }

    def build_url(self, path: str) -> str:
        return f"{self._settings.base_url.rstrip('/')}{path}"

    async def request(self, path: str, method: str = "GET", body: Any = None) -> Any:
        """
        Send one request and return the decoded JSON value.

        Args:
            path: Path relative to the host, starting with "/"
            method: HTTP verb (default GET)
            body: Optional JSON-serializable value sent as the request body

        Returns:
            Decoded JSON (dict or list)

        Raises:
            ConfigurationError: If credentials are missing
            RequestFailedError: If the status is not 2xx or no JSON was returned
            httpx.TransportError: If the call itself could not complete
        """
        method = method.upper()
        headers = self.build_headers()
        url = self.build_url(path)
        content = json.dumps(body).encode("utf-8") if body is not None else None

        logger.debug(f"{method} {path}")

        try:
            if self._http_client is not None:
                response = await self._http_client.request(
                    method, url, headers=headers, content=content
                )
            else:
                async with httpx.AsyncClient(timeout=self._settings.timeout_seconds) as client:
                    response = await client.request(
                        method, url, headers=headers, content=content
                    )
        except httpx.TransportError as e:
            logger.error(f"{method} {path} could not complete: {e!r}")
            raise

        text = response.text
        result = decode_response(response.status_code, text)

        if not result.ok:
            logger.warning(
                f"{method} {path} failed ({response.status_code}): {result.error_message[:200]}"
            )
            raise RequestFailedError(
                result.error_message,
                status_code=response.status_code,
                method=method,
                path=path,
                response_text=text,
            )

        logger.debug(f"{method} {path} -> {response.status_code}")
        return result.data
