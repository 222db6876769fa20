"""Pytest fixtures shared by the print_order_client tests."""

import json

import httpx
import pytest
import pytest_asyncio

from print_order_client import ClientSettings, PrintOrderClient
from print_order_client.core.api_client import ApiDispatcher


@pytest.fixture
def settings():
    """Settings with explicit test credentials (no environment involved)."""
    return ClientSettings(
        base_url="https://sandbox.example.test",
        merchant_id="merchant-123",
        api_key="secret-key",
    )


@pytest.fixture
def order_payload():
    """A submitted order as returned by the service."""
    return {
        "id": 1234,
        "canCancel": False,
        "canHold": True,
        "canUpdateShipping": False,
        "canUpdateImages": False,
        "recipientName": "Jane Doe",
        "address1": "1 High Street",
        "address2": "",
        "addressTownOrCity": "London",
        "stateOrCounty": "Greater London",
        "postalOrZipCode": "N1 1AA",
        "countryCode": "GB",
        "mobileTelephone": "07700900000",
        "price": 1250,
        "status": "Submitted",
        "shippingInfo": {
            "price": 450,
            "shipments": [
                {
                    "shipmentId": "SH-1",
                    "isTracked": True,
                    "trackingNumber": "TRACK1",
                    "trackingUrl": "https://track.example.test/TRACK1",
                    "earliestEstimatedArrivalDate": "2024-05-01T00:00:00Z",
                    "latestEstimatedArrivalDate": "2024-05-04T00:00:00Z",
                    "shippedOn": "2024-04-29T10:15:00.1234567Z",
                    "carrier": "RoyalMail",
                    "photoIds": [555],
                }
            ],
        },
        "payment": "InvoiceMe",
        "images": [
            {
                "id": 555,
                "url": "https://images.example.test/a.jpg",
                "status": "Ok",
                "copies": 2,
                "sizing": "Crop",
                "price": 400,
                "md5Hash": "abc123",
                "previewUrl": "https://images.example.test/a-preview.jpg",
                "thumbnailUrl": "https://images.example.test/a-thumb.jpg",
                "sku": "GLOBAL-PHO-4x6",
                "attributes": {"finish": "matte"},
            }
        ],
        "merchantOrderId": "REF-1",
        "preferredShippingMethod": "Standard",
        "created": "2024-04-28T09:00:00Z",
        "lastUpdated": "2024-04-29T10:15:00Z",
    }


@pytest.fixture
def image_payload():
    def _image(image_id, sku="GLOBAL-PHO-4x6", status="NotYetDownloaded"):
        return {
            "id": image_id,
            "url": f"https://images.example.test/{image_id}.jpg",
            "status": status,
            "copies": 1,
            "sizing": "ShrinkToFit",
            "price": 300,
            "sku": sku,
            "attributes": {},
        }
    return _image


@pytest_asyncio.fixture
async def make_dispatcher():
    """
    Build dispatchers whose transport is a MockTransport handler.

    Returns a factory: make_dispatcher(settings, handler) -> ApiDispatcher.
    Every AsyncClient created here is closed at teardown.
    """
    http_clients = []

    def _make(settings, handler):
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        http_clients.append(http_client)
        return ApiDispatcher(settings, http_client=http_client)

    yield _make

    for http_client in http_clients:
        await http_client.aclose()


@pytest_asyncio.fixture
async def make_client(settings):
    """
    Build a client whose transport answers every request with one response.

    Returns a factory: make_client(status_code, json_body=..., text=...)
    -> (client, requests) where requests collects every httpx.Request sent.
    Every AsyncClient created here is closed at teardown.
    """
    http_clients = []

    def _make(status_code=200, json_body=None, text=None):
        requests = []

        def handler(request):
            requests.append(request)
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, content=json.dumps(json_body).encode("utf-8"))

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        http_clients.append(http_client)
        return PrintOrderClient(settings, http_client=http_client), requests

    yield _make

    for http_client in http_clients:
        await http_client.aclose()
