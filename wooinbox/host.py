"""
Helpers for the inbox host that embeds the order sidebar.

The host delivers conversation payloads; these helpers pick out the
customer's email address and wait for the host API to become ready.
"""

import asyncio
import logging
import re
from typing import Any, Callable, Iterable, Optional

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Host readiness timeout in seconds
DEFAULT_READY_TIMEOUT = 2.0


def normalize_email(email: str) -> str:
    """Trim and lower-case an email address for comparison."""
    return email.strip().lower()


def is_valid_email_for_search(
    email: Any, excluded_domains: Iterable[str] = ()
) -> bool:
    """
    Check that a value looks like a customer email worth searching for.

    Args:
        email: Candidate value from a host payload
        excluded_domains: Domains to ignore, e.g. the store's own staff domain

    Returns:
        True if email is a plausible address outside the excluded domains
    """
    if not email or not isinstance(email, str):
        return False

    lowered = normalize_email(email)
    for domain in excluded_domains:
        if lowered.endswith(f"@{domain.lower().lstrip('@')}"):
            return False

    return bool(EMAIL_PATTERN.match(lowered))


def _candidate_emails(payload: dict[str, Any]) -> Iterable[Any]:
    latest = payload.get("latest_message") or {}
    yield (latest.get("from_field") or {}).get("address")
    yield (payload.get("from_field") or {}).get("address")

    for recipient in payload.get("to_fields") or []:
        if isinstance(recipient, dict):
            yield recipient.get("address")

    contacts = list(payload.get("contacts") or [])
    if payload.get("contact"):
        contacts.append(payload["contact"])
    for contact in contacts:
        if not isinstance(contact, dict):
            continue
        for entry in contact.get("emails") or []:
            yield entry.get("email") if isinstance(entry, dict) else entry
        yield contact.get("email")

    yield payload.get("email")


def extract_email_from_conversation(
    payload: Optional[dict[str, Any]],
    excluded_domains: Iterable[str] = (),
) -> Optional[str]:
    """
    Find the customer's email address in a host conversation payload.

    Checks the latest message sender first, then recipients, then contact
    records, then a bare `email` field.

    Returns:
        The first valid address, or None
    """
    if not payload or not isinstance(payload, dict):
        return None

    excluded = tuple(excluded_domains)
    for candidate in _candidate_emails(payload):
        if is_valid_email_for_search(candidate, excluded):
            return candidate.strip()
    return None


class HostReadiness:
    """
    One-shot readiness signal for the host API.

    The host integration calls mark_ready() once its API object exists.
    Consumers await wait(), which returns False after the timeout and runs
    the optional on_timeout fallback once.
    """

    def __init__(self, on_timeout: Optional[Callable[[], None]] = None):
        self._event = asyncio.Event()
        self._on_timeout = on_timeout

    @property
    def is_ready(self) -> bool:
        return self._event.is_set()

    def mark_ready(self) -> None:
        self._event.set()

    async def wait(self, timeout: float = DEFAULT_READY_TIMEOUT) -> bool:
        try:
            await asyncio.wait_for(self._event.wait(), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning("Host API not available after %.1fs", timeout)
            if self._on_timeout is not None:
                self._on_timeout()
            return False
        return True
