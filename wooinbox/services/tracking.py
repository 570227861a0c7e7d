"""
Tracking extraction from order notes and metadata.

Stores typically record shipments as free text ("FedEx tracking number
123456789012, shipped March 3, 2024") rather than structured fields. This
module scans, in priority order:

1. The first order note mentioning "tracking number"
2. The customer note on the order itself
3. Order metadata keys written by shipment-tracking plugins

and derives a carrier tracking URL when both number and carrier are known.
Extraction never raises; a miss is reported as TrackingStatus.NOT_FOUND.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional
from urllib.parse import quote_plus

from wooinbox.models.order import Order, OrderNote
from wooinbox.models.tracking import Carrier, TrackingRecord, TrackingStatus

# Phrase that marks a note as carrying tracking information
TRACKING_NOTE_MARKER = "tracking number"

# 10-12 digit run not embedded in a longer digit run
TRACKING_NUMBER_PATTERN = re.compile(r"(?<![0-9])([0-9]{10,12})(?![0-9])")

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

SHIPPED_DATE_PATTERN = re.compile(
    r"(?:shipped|on)\s+(?:" + "|".join(MONTH_NAMES) + r")\s+\d{1,2},?\s+\d{4}",
    re.IGNORECASE,
)

# Note scan order; first carrier name found in the text wins
CARRIER_DETECTION_ORDER = (Carrier.FEDEX, Carrier.UPS, Carrier.USPS, Carrier.DHL)

CARRIER_TRACKING_URLS: dict[Carrier, str] = {
    Carrier.FEDEX: "https://www.fedex.com/fedextrack/?trknbr={number}",
    Carrier.UPS: "https://www.ups.com/track?tracknum={number}",
    Carrier.USPS: "https://tools.usps.com/go/TrackConfirmAction?tLabels={number}",
    Carrier.DHL: "https://www.dhl.com/en/express/tracking.html?AWB={number}",
}

# Free-text carrier values are checked in this order; first substring match wins
CARRIER_URL_MATCH_ORDER = (Carrier.FEDEX, Carrier.USPS, Carrier.UPS, Carrier.DHL)

GENERIC_TRACKING_URL = "https://www.google.com/search?q={query}"


@dataclass
class _TrackingFields:
    """Mutable accumulator used while scanning; frozen into a TrackingRecord."""

    tracking_number: Optional[str] = None
    carrier: Optional[str] = None
    tracking_url: Optional[str] = None
    shipped_date: Optional[str] = None
    note_content: Optional[str] = None


def find_tracking_number(text: str) -> Optional[str]:
    """Return the first standalone 10-12 digit run in text, if any."""
    match = TRACKING_NUMBER_PATTERN.search(text)
    return match.group(1) if match else None


def detect_carrier(text: str) -> Optional[Carrier]:
    """Return the first carrier (FedEx, UPS, USPS, DHL) named in text."""
    lowered = text.lower()
    for carrier in CARRIER_DETECTION_ORDER:
        if carrier.value.lower() in lowered:
            return carrier
    return None


def find_shipped_date(text: str) -> Optional[str]:
    """Return the first "shipped <Month> <day>, <year>" fragment in text."""
    match = SHIPPED_DATE_PATTERN.search(text)
    return match.group(0) if match else None


def normalize_carrier(value: str) -> str:
    """Map a case variant of a known carrier to its canonical name."""
    stripped = value.strip()
    for carrier in Carrier:
        if stripped.lower() == carrier.value.lower():
            return carrier.value
    return stripped


def generate_tracking_url(tracking_number: str, carrier: str) -> str:
    """
    Build a carrier tracking page URL.

    Unknown carriers fall back to a web search for the carrier and number.

    Args:
        tracking_number: Carrier tracking number
        carrier: Carrier name (canonical or free text)

    Returns:
        Tracking URL
    """
    lowered = carrier.lower()
    for known in CARRIER_URL_MATCH_ORDER:
        if known.value.lower() in lowered:
            return CARRIER_TRACKING_URLS[known].format(number=tracking_number)

    query = quote_plus(f"{carrier} tracking {tracking_number}")
    return GENERIC_TRACKING_URL.format(query=query)


def build_admin_url(site_url: Optional[str], order_id: Optional[int]) -> Optional[str]:
    """Return the wp-admin edit URL for an order, or None if unknown."""
    if not site_url or not order_id:
        return None
    return f"{site_url.rstrip('/')}/wp-admin/post.php?post={order_id}&action=edit"


def _scan_text(fields: _TrackingFields, text: str) -> None:
    fields.note_content = text

    number = find_tracking_number(text)
    if number:
        fields.tracking_number = number

    carrier = detect_carrier(text)
    if carrier:
        fields.carrier = carrier.value

    shipped_date = find_shipped_date(text)
    if shipped_date:
        fields.shipped_date = shipped_date


def _scan_metadata(fields: _TrackingFields, order: Order) -> None:
    for entry in order.meta_data:
        key = entry.key.lower()
        value = "" if entry.value is None else str(entry.value).strip()
        if not value:
            continue

        if "tracking" in key and "number" in key:
            fields.tracking_number = value
        elif "tracking" in key and "carrier" in key:
            fields.carrier = normalize_carrier(value)
        elif "tracking" in key and "url" in key:
            fields.tracking_url = value
        elif "shipped" in key or "shipment" in key:
            fields.shipped_date = value


def _first_tracking_note(notes: Iterable[OrderNote]) -> Optional[OrderNote]:
    for note in notes:
        if note.note and TRACKING_NOTE_MARKER in note.note.lower():
            return note
    return None


def extract_tracking_info(
    order: Order,
    notes: Optional[Iterable[OrderNote]] = None,
    site_url: Optional[str] = None,
) -> TrackingRecord:
    """
    Derive tracking information for an order.

    Args:
        order: Order snapshot
        notes: Order notes in the order returned by the store; the first note
            containing "tracking number" is used
        site_url: Store base URL, used to build the admin link

    Returns:
        A new TrackingRecord. Status is AVAILABLE when both number and carrier
        were found, FOUND_IN_NOTES when only a number was found, and
        NOT_FOUND otherwise.
    """
    fields = _TrackingFields()

    tracking_note = _first_tracking_note(notes or [])
    if tracking_note is not None:
        _scan_text(fields, tracking_note.note)

    if not fields.tracking_number and order.note:
        _scan_text(fields, order.note)

    if not fields.tracking_number:
        _scan_metadata(fields, order)

    status = TrackingStatus.NOT_FOUND
    tracking_url = None
    if fields.tracking_number and fields.carrier:
        tracking_url = fields.tracking_url or generate_tracking_url(
            fields.tracking_number, fields.carrier
        )
        status = TrackingStatus.AVAILABLE
    elif fields.tracking_number:
        status = TrackingStatus.FOUND_IN_NOTES

    return TrackingRecord(
        tracking_number=fields.tracking_number,
        carrier=fields.carrier,
        tracking_url=tracking_url,
        shipped_date=fields.shipped_date,
        status=status,
        note_content=fields.note_content,
        admin_url=build_admin_url(site_url, order.id),
    )
