"""
Tests for tracking extraction from order notes and metadata.
"""

import pytest
from pydantic import ValidationError

from wooinbox.models.tracking import Carrier, TrackingStatus
from wooinbox.services.tracking import (
    build_admin_url,
    detect_carrier,
    extract_tracking_info,
    find_shipped_date,
    find_tracking_number,
    generate_tracking_url,
    normalize_carrier,
)


class TestFindTrackingNumber:
    """Tests for the 10-12 digit tracking number pattern."""

    @pytest.mark.parametrize(
        "number", ["1234567890", "12345678901", "123456789012"]
    )
    def test_accepts_10_to_12_digits(self, number: str):
        assert find_tracking_number(f"Tracking number: {number}.") == number

    @pytest.mark.parametrize("number", ["123456789", "1234567890123"])
    def test_rejects_9_and_13_digits(self, number: str):
        assert find_tracking_number(f"Tracking number: {number}") is None

    def test_first_match_wins(self):
        text = "Tracking number 1111111111 replaced by 2222222222"
        assert find_tracking_number(text) == "1111111111"

    def test_letters_count_as_boundary(self):
        assert find_tracking_number("ref FX1234567890 sent") == "1234567890"

    def test_empty_text(self):
        assert find_tracking_number("") is None


class TestDetectCarrier:
    """Tests for ordered carrier detection."""

    def test_fedex_wins_over_ups(self):
        assert detect_carrier("sent with fedex, ups as backup") == Carrier.FEDEX

    def test_case_insensitive(self):
        assert detect_carrier("Shipped by dHl Express") == Carrier.DHL

    def test_usps_detected(self):
        assert detect_carrier("Sent via USPS Priority Mail") == Carrier.USPS

    def test_ups_before_usps_when_both_named(self):
        assert detect_carrier("USPS handoff, then UPS Ground") == Carrier.UPS

    def test_no_carrier(self):
        assert detect_carrier("Sent by courier") is None


class TestFindShippedDate:
    """Tests for the English shipped-date pattern."""

    def test_shipped_with_comma(self):
        assert (
            find_shipped_date("Order shipped March 3, 2024 from our warehouse")
            == "shipped March 3, 2024"
        )

    def test_on_without_comma(self):
        assert find_shipped_date("Dispatched on August 15 2024") == "on August 15 2024"

    def test_case_insensitive(self):
        assert find_shipped_date("SHIPPED DECEMBER 1, 2023") == "SHIPPED DECEMBER 1, 2023"

    def test_numeric_dates_not_matched(self):
        assert find_shipped_date("shipped 2024-03-03") is None

    def test_match_inside_longer_word(self):
        assert (
            find_shipped_date("Order reshipped March 3, 2024")
            == "shipped March 3, 2024"
        )
        assert find_shipped_date("Dispatched upon March 3, 2024") == "on March 3, 2024"


class TestGenerateTrackingUrl:
    """Tests for carrier tracking URL generation."""

    @pytest.mark.parametrize(
        "carrier,expected",
        [
            ("FedEx", "https://www.fedex.com/fedextrack/?trknbr=1234567890"),
            ("UPS", "https://www.ups.com/track?tracknum=1234567890"),
            (
                "USPS",
                "https://tools.usps.com/go/TrackConfirmAction?tLabels=1234567890",
            ),
            ("DHL", "https://www.dhl.com/en/express/tracking.html?AWB=1234567890"),
        ],
    )
    def test_known_carriers(self, carrier: str, expected: str):
        assert generate_tracking_url("1234567890", carrier) == expected

    def test_free_text_usps_is_not_ups(self):
        url = generate_tracking_url("1234567890", "usps priority mail")
        assert url.startswith("https://tools.usps.com/")

    def test_unknown_carrier_uses_search(self):
        url = generate_tracking_url("ABC123", "Royal Mail")
        assert url == "https://www.google.com/search?q=Royal+Mail+tracking+ABC123"


class TestHelpers:
    def test_build_admin_url(self):
        assert (
            build_admin_url("https://shop.example.com/", 1001)
            == "https://shop.example.com/wp-admin/post.php?post=1001&action=edit"
        )

    def test_build_admin_url_without_site(self):
        assert build_admin_url(None, 1001) is None

    def test_normalize_carrier(self):
        assert normalize_carrier(" fedex ") == "FedEx"
        assert normalize_carrier("Royal Mail") == "Royal Mail"


class TestNotesScan:
    """Tests for extraction from order notes."""

    def test_full_tracking_note(self, make_order, make_note):
        """Test a note with number, carrier and date."""
        body = (
            "Your order was shipped via FedEx. Tracking number: 123456789012. "
            "Shipped March 3, 2024."
        )
        record = extract_tracking_info(make_order(), [make_note(body)])

        assert record.tracking_number == "123456789012"
        assert record.carrier == "FedEx"
        assert record.shipped_date == "Shipped March 3, 2024"
        assert record.status == TrackingStatus.AVAILABLE
        assert (
            record.tracking_url
            == "https://www.fedex.com/fedextrack/?trknbr=123456789012"
        )
        assert record.note_content == body

    @pytest.mark.parametrize(
        "number", ["1234567890", "12345678901", "123456789012"]
    )
    def test_returns_exact_digit_run(self, make_order, make_note, number: str):
        record = extract_tracking_info(
            make_order(), [make_note(f"Tracking number {number} assigned")]
        )
        assert record.tracking_number == number

    @pytest.mark.parametrize("number", ["123456789", "1234567890123"])
    def test_rejects_wrong_length(self, make_order, make_note, number: str):
        record = extract_tracking_info(
            make_order(), [make_note(f"Tracking number {number} assigned")]
        )
        assert record.tracking_number is None
        assert record.status == TrackingStatus.NOT_FOUND

    def test_note_without_marker_is_ignored(self, make_order, make_note):
        record = extract_tracking_info(
            make_order(), [make_note("Sent 1234567890 with DHL")]
        )
        assert record.tracking_number is None
        assert record.note_content is None
        assert record.status == TrackingStatus.NOT_FOUND

    def test_marker_is_case_insensitive(self, make_order, make_note):
        record = extract_tracking_info(
            make_order(), [make_note("TRACKING NUMBER 1234567890")]
        )
        assert record.tracking_number == "1234567890"

    def test_first_qualifying_note_wins(self, make_order, make_note):
        """Notes are used in input order, not re-sorted."""
        notes = [
            make_note("Payment received", note_id=1),
            make_note("Tracking number 1111111111 via DHL", note_id=2),
            make_note("Tracking number 2222222222 via FedEx", note_id=3),
        ]
        record = extract_tracking_info(make_order(), notes)

        assert record.tracking_number == "1111111111"
        assert record.carrier == "DHL"

    def test_carrier_priority(self, make_order, make_note):
        record = extract_tracking_info(
            make_order(),
            [make_note("Tracking number 1234567890 - fedex, or ups if delayed")],
        )
        assert record.carrier == "FedEx"

    def test_number_without_carrier(self, make_order, make_note):
        record = extract_tracking_info(
            make_order(), [make_note("Tracking number 1234567890")]
        )
        assert record.status == TrackingStatus.FOUND_IN_NOTES
        assert record.carrier is None
        assert record.tracking_url is None


class TestOrderNoteFallback:
    """Tests for extraction from the order's own note."""

    def test_uses_order_note_when_no_notes(self, make_order):
        order = make_order(note="Sent with DHL, ref 9876543210")
        record = extract_tracking_info(order)

        assert record.tracking_number == "9876543210"
        assert record.carrier == "DHL"
        assert record.note_content == order.note
        assert record.status == TrackingStatus.AVAILABLE

    def test_carrier_from_note_is_kept(self, make_order, make_note):
        """A carrier found in a tracking note survives the fallback scan."""
        order = make_order(note="Reference 5555555555")
        record = extract_tracking_info(
            order, [make_note("Tracking number pending, shipping with DHL")]
        )

        assert record.tracking_number == "5555555555"
        assert record.carrier == "DHL"
        assert record.note_content == "Reference 5555555555"
        assert record.status == TrackingStatus.AVAILABLE

    def test_not_used_when_notes_have_number(self, make_order, make_note):
        order = make_order(note="Old reference 5555555555")
        record = extract_tracking_info(
            order, [make_note("Tracking number 1234567890")]
        )
        assert record.tracking_number == "1234567890"


class TestMetadataFallback:
    """Tests for extraction from order metadata."""

    def test_metadata_number_and_carrier(self, make_order):
        order = make_order(
            meta_data=[
                {"key": "Tracking_Number", "value": "1234567890"},
                {"key": "tracking_carrier", "value": "UPS"},
            ]
        )
        record = extract_tracking_info(order, [])

        assert record.tracking_number == "1234567890"
        assert record.carrier == "UPS"
        assert record.status == TrackingStatus.AVAILABLE
        assert record.tracking_url == "https://www.ups.com/track?tracknum=1234567890"

    def test_explicit_url_overrides_derived(self, make_order):
        order = make_order(
            meta_data=[
                {"key": "_tracking_number", "value": "ABC123"},
                {"key": "_tracking_carrier", "value": "Royal Mail"},
                {"key": "_tracking_url", "value": "https://track.example/ABC123"},
            ]
        )
        record = extract_tracking_info(order)

        assert record.tracking_url == "https://track.example/ABC123"
        assert record.status == TrackingStatus.AVAILABLE

    def test_unknown_carrier_gets_search_url(self, make_order):
        order = make_order(
            meta_data=[
                {"key": "_tracking_number", "value": "ABC123"},
                {"key": "_tracking_carrier", "value": "Royal Mail"},
            ]
        )
        record = extract_tracking_info(order)

        assert record.tracking_url == (
            "https://www.google.com/search?q=Royal+Mail+tracking+ABC123"
        )

    def test_carrier_value_is_canonicalised(self, make_order):
        order = make_order(
            meta_data=[
                {"key": "tracking_number", "value": "1234567890"},
                {"key": "tracking_carrier", "value": "fedex"},
            ]
        )
        assert extract_tracking_info(order).carrier == "FedEx"

    def test_shipped_date_key(self, make_order):
        order = make_order(
            meta_data=[
                {"key": "tracking_number", "value": "1234567890"},
                {"key": "_date_shipped", "value": "2024-03-03"},
            ]
        )
        record = extract_tracking_info(order)

        assert record.shipped_date == "2024-03-03"
        assert record.status == TrackingStatus.FOUND_IN_NOTES

    def test_url_without_carrier_is_dropped(self, make_order):
        order = make_order(
            meta_data=[
                {"key": "tracking_number", "value": "1234567890"},
                {"key": "tracking_url", "value": "https://track.example/1"},
            ]
        )
        record = extract_tracking_info(order)

        assert record.tracking_url is None
        assert record.status == TrackingStatus.FOUND_IN_NOTES

    def test_empty_values_ignored(self, make_order):
        order = make_order(
            meta_data=[
                {"key": "tracking_number", "value": ""},
                {"key": "tracking_carrier", "value": None},
            ]
        )
        record = extract_tracking_info(order)

        assert record.tracking_number is None
        assert record.carrier is None

    def test_not_used_when_notes_have_number(self, make_order, make_note):
        order = make_order(
            meta_data=[{"key": "tracking_number", "value": "9999999999"}]
        )
        record = extract_tracking_info(
            order, [make_note("Tracking number 1234567890")]
        )
        assert record.tracking_number == "1234567890"


class TestTrackingRecordInvariants:
    """Tests for status/URL consistency and purity."""

    @pytest.mark.parametrize(
        "notes,order_note,meta_data",
        [
            ([], "", []),
            (["Tracking number 1234567890"], "", []),
            (["Tracking number 1234567890 via UPS"], "", []),
            ([], "DHL 1234567890", []),
            ([], "", [{"key": "tracking_url", "value": "https://t.example"}]),
            ([], "", [{"key": "tracking_carrier", "value": "UPS"}]),
            (
                [],
                "",
                [
                    {"key": "tracking_number", "value": "1234567890"},
                    {"key": "tracking_carrier", "value": "DHL"},
                ],
            ),
        ],
    )
    def test_status_matches_fields(
        self, make_order, make_note, notes, order_note, meta_data
    ):
        order = make_order(note=order_note, meta_data=meta_data)
        record = extract_tracking_info(order, [make_note(n) for n in notes])

        available = record.status == TrackingStatus.AVAILABLE
        assert available == bool(record.tracking_url)
        assert available == bool(record.tracking_number and record.carrier)
        assert (record.status == TrackingStatus.FOUND_IN_NOTES) == bool(
            record.tracking_number and not record.carrier
        )

    def test_idempotent(self, make_order, make_note):
        order = make_order(note="UPS 1234567890")
        notes = [make_note("Tracking number 1111111111, shipped May 2, 2024")]

        assert extract_tracking_info(order, notes) == extract_tracking_info(
            order, notes
        )

    def test_nothing_found(self, make_order):
        record = extract_tracking_info(make_order())

        assert record.status == TrackingStatus.NOT_FOUND
        assert record.tracking_number is None
        assert record.carrier is None
        assert record.tracking_url is None
        assert record.shipped_date is None

    def test_admin_url(self, make_order):
        record = extract_tracking_info(
            make_order(order_id=42), site_url="https://shop.example.com"
        )
        assert (
            record.admin_url
            == "https://shop.example.com/wp-admin/post.php?post=42&action=edit"
        )

    def test_record_is_immutable(self, make_order):
        record = extract_tracking_info(make_order())
        with pytest.raises(ValidationError):
            record.tracking_number = "1234567890"
