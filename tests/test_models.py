"""
Unit tests for the data models.

Covers decoding of service responses, the closed status vocabularies,
and the parameter round-trip used for updates.
"""

from datetime import datetime, timezone

import pytest

from print_order_client import (
    Carrier,
    ImageParameters,
    ImageStatus,
    Order,
    OrderParameters,
    OrderStatus,
    PaymentType,
    ResizingType,
    ShippingMethod,
)
from print_order_client.models import Image, Shipment
from print_order_client.models.parsing import parse_datetime


# Tests for Order decoding

class TestOrderFromDict:

    def test_decodes_all_sections(self, order_payload):
        order = Order.from_dict(order_payload)

        assert order.id == "1234"
        assert order.recipient_name == "Jane Doe"
        assert order.country_code == "GB"
        assert order.preferred_shipping_method is ShippingMethod.STANDARD
        assert order.payment is PaymentType.INVOICE_ME
        assert order.payment_url is None
        assert order.price == 1250
        assert order.shipping_info.price == 450
        assert order.created == datetime(2024, 4, 28, 9, 0, tzinfo=timezone.utc)

        # Capability flags are copied as reported, not derived from status
        assert order.can_cancel is False
        assert order.can_hold is True

    def test_shipments(self, order_payload):
        order = Order.from_dict(order_payload)

        assert len(order.shipments) == 1
        shipment = order.shipments[0]
        assert shipment.shipment_id == "SH-1"
        assert shipment.carrier is Carrier.ROYAL_MAIL
        assert shipment.photo_ids == ("555",)
        assert shipment.is_shipped is True
        assert shipment.shipped_on == datetime(2024, 4, 29, 10, 15, 0, 123456, tzinfo=timezone.utc)
        assert order.image_by_id(shipment.photo_ids[0]).sku == "GLOBAL-PHO-4x6"

    def test_unsubmitted_shipment_has_no_id(self):
        shipment = Shipment.from_dict({
            "shipmentId": None,
            "isTracked": False,
            "shippedOn": None,
            "photoIds": [],
        })

        assert shipment.shipment_id is None
        assert shipment.carrier is None
        assert shipment.is_shipped is False

    def test_images(self, order_payload):
        image = Order.from_dict(order_payload).images[0]

        assert image.id == "555"
        assert image.status is ImageStatus.OK
        assert image.sizing is ResizingType.CROP
        assert image.attributes == {"finish": "matte"}
        assert image.is_resolved is True
        assert image.is_failed is False

    def test_payment_url_kept_for_invoice_recipient(self, order_payload):
        order_payload.update({"payment": "InvoiceRecipient", "paymentUrl": "https://pay.example.test/1"})

        order = Order.from_dict(order_payload)

        assert order.payment is PaymentType.INVOICE_RECIPIENT
        assert order.payment_url == "https://pay.example.test/1"

    def test_payment_url_dropped_for_invoice_me(self, order_payload):
        order_payload.update({"payment": "InvoiceMe", "paymentUrl": "https://pay.example.test/1"})

        assert Order.from_dict(order_payload).payment_url is None

    def test_minimal_order(self):
        order = Order.from_dict({"id": 1, "status": "NotYetSubmitted"})

        assert order.shipments == ()
        assert order.images == ()
        assert order.created is None


# Tests for status vocabularies

class TestStatusVocabularies:

    def test_unknown_status_is_unrecognized_not_a_string(self):
        order = Order.from_dict({"id": 1, "status": "OnHold"})

        assert order.status is OrderStatus.UNRECOGNIZED
        assert order.status.is_recognized is False

    def test_unknown_carrier(self):
        assert Carrier("PigeonPost") is Carrier.UNRECOGNIZED
        assert Carrier("NotKnown") is Carrier.NOT_KNOWN

    def test_known_members_round_trip_values(self):
        assert OrderStatus("Cancelled") is OrderStatus.CANCELLED
        assert ImageStatus("FileNotFoundAtUrl") is ImageStatus.FILE_NOT_FOUND_AT_URL

    @pytest.mark.parametrize("status,pre,failed", [
        (ImageStatus.AWAITING_URL_OR_DATA, True, False),
        (ImageStatus.NOT_YET_DOWNLOADED, True, False),
        (ImageStatus.OK, False, False),
        (ImageStatus.FILE_NOT_FOUND_AT_URL, False, True),
        (ImageStatus.INVALID, False, True),
    ])
    def test_image_status_classification(self, status, pre, failed):
        assert status.is_pre_resolution is pre
        assert status.is_failure is failed

    def test_terminal_order_states(self):
        terminal = {s for s in OrderStatus if s.is_terminal}
        assert terminal == {OrderStatus.COMPLETE, OrderStatus.CANCELLED}


# Tests for request parameters

class TestOrderParameters:

    def test_optional_fields_omitted(self):
        params = OrderParameters(
            recipient_name="A",
            country_code="US",
            preferred_shipping_method=ShippingMethod.OVERNIGHT,
        )

        assert params.to_dict() == {
            "recipientName": "A",
            "countryCode": "US",
            "preferredShippingMethod": "Overnight",
        }

    def test_from_order_sends_no_server_only_fields(self, order_payload):
        order = Order.from_dict(order_payload)

        body = OrderParameters.from_order(order).to_dict()

        assert set(body) == {
            "merchantOrderId",
            "recipientName",
            "address1",
            "addressTownOrCity",
            "stateOrCounty",
            "postalOrZipCode",
            "countryCode",
            "mobileTelephone",
            "preferredShippingMethod",
            "payment",
        }
        assert body["recipientName"] == "Jane Doe"
        assert body["preferredShippingMethod"] == "Standard"

    def test_from_order_overrides(self, order_payload):
        order = Order.from_dict(order_payload)

        params = OrderParameters.from_order(
            order, email="jane@example.test", preferred_shipping_method=ShippingMethod.EXPRESS
        )

        assert params.email == "jane@example.test"
        assert params.to_dict()["preferredShippingMethod"] == "Express"

    def test_unrecognized_enum_cannot_be_sent(self):
        params = OrderParameters("A", "US", ShippingMethod.UNRECOGNIZED)

        with pytest.raises(ValueError):
            params.to_dict()


class TestImageParameters:

    def test_to_dict_includes_optional_values_when_set(self):
        params = ImageParameters(
            sku="SKU",
            url="https://images.example.test/x.jpg",
            copies=1,
            sizing=ResizingType.SHRINK_TO_EXACT_FIT,
            price_to_user=1500,
            md5_hash="d41d8cd9",
        )

        assert params.to_dict() == {
            "sku": "SKU",
            "url": "https://images.example.test/x.jpg",
            "copies": 1,
            "sizing": "ShrinkToExactFit",
            "priceToUser": 1500,
            "md5Hash": "d41d8cd9",
            "attributes": {},
        }

    def test_image_defaults_for_sparse_payload(self):
        image = Image.from_dict({"id": 3, "sku": "S"})

        assert image.status is ImageStatus.AWAITING_URL_OR_DATA
        assert image.price_to_user is None
        assert image.attributes == {}


class TestParseDatetime:

    def test_naive_timestamp_assumed_utc(self):
        assert parse_datetime("2024-01-02T03:04:05") == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

    def test_unset_is_none(self):
        assert parse_datetime(None) is None
        assert parse_datetime("") is None

    def test_unparseable_raises(self):
        with pytest.raises(ValueError, match="yesterday"):
            parse_datetime("yesterday")

    def test_shipment_with_bad_ship_date_rejected(self):
        with pytest.raises(ValueError):
            Shipment.from_dict({"shipmentId": "SH-1", "shippedOn": "29/04/2024 10:15"})
