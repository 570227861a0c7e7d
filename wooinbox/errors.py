"""
Error taxonomy for order lookups.

Tracking extraction never raises; a miss is reported through
TrackingRecord.status instead.
"""


class WooInboxError(Exception):
    """Base class for wooinbox errors."""


class ConfigurationError(WooInboxError):
    """Required store configuration is missing or invalid."""


class TransportError(WooInboxError):
    """Network or HTTP failure talking to the store API."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"HTTP {self.status_code}: {self.message}"
        return self.message


class NotFoundError(WooInboxError):
    """A single-resource lookup returned nothing."""

    def __init__(self, resource: str, identifier: int | str):
        super().__init__(f"{resource} not found: {identifier}")
        self.resource = resource
        self.identifier = identifier
