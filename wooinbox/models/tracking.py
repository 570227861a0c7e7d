from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Carrier(StrEnum):
    """Carriers recognized in note text, in detection priority order"""

    FEDEX = "FedEx"
    UPS = "UPS"
    USPS = "USPS"
    DHL = "DHL"


class TrackingStatus(StrEnum):
    """Outcome of tracking extraction"""

    NOT_FOUND = "No tracking info found"
    FOUND_IN_NOTES = "Tracking found in order notes"
    AVAILABLE = "Tracking available"


class TrackingRecord(BaseModel):
    """
    Tracking information derived from order notes and metadata.

    A tracking URL is present exactly when both the tracking number and the
    carrier are, and then status is AVAILABLE.
    """

    tracking_number: Optional[str] = Field(
        default=None, description="Carrier tracking number"
    )
    carrier: Optional[str] = Field(default=None, description="Shipping carrier")
    tracking_url: Optional[str] = Field(
        default=None, description="Carrier tracking page URL"
    )
    shipped_date: Optional[str] = Field(
        default=None, description="Shipped date fragment as written in the note"
    )
    status: TrackingStatus = Field(
        default=TrackingStatus.NOT_FOUND, description="Extraction outcome"
    )
    note_content: Optional[str] = Field(
        default=None, description="Note text that was scanned for tracking"
    )
    admin_url: Optional[str] = Field(
        default=None, description="Store admin URL for the order"
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "tracking_number": "123456789012",
                "carrier": "FedEx",
                "tracking_url": "https://www.fedex.com/fedextrack/?trknbr=123456789012",
                "shipped_date": "shipped March 3, 2024",
                "status": "Tracking available",
                "note_content": "FedEx tracking number 123456789012, shipped March 3, 2024",
                "admin_url": "https://shop.example.com/wp-admin/post.php?post=1042&action=edit",
            }
        },
    )
