"""
signupkit.availability

Simulated email availability check. Nothing leaves the process: an address
containing "taken" (any case) is reported as already in use after a fixed
delay that stands in for network latency.
"""

import asyncio
import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_DELAY = 0.65

AVAILABLE_TEXT = "Email available"
UNAVAILABLE_TEXT = "Email already in use"

_TAKEN = re.compile(r"taken", re.IGNORECASE)


def is_email_available(email: str) -> bool:
    return not _TAKEN.search(email)


def status_text(available: bool) -> str:
    return AVAILABLE_TEXT if available else UNAVAILABLE_TEXT


async def check_email_availability(email: str, delay: float = DEFAULT_DELAY) -> bool:
    await asyncio.sleep(delay)
    available = is_email_available(email)
    logger.debug("availability check for %r -> %s", email, available)
    return available


class EmailCheck:
    """
    Tracks the latest email typed so a debounced or slow check only reports
    for the value still in the field. Each request() issues a new ticket and
    makes every older ticket stale. Front ends own the timers.
    """

    def __init__(self):
        self.ticket = 0
        self.email: Optional[str] = None

    def request(self, email: str) -> Optional[int]:
        """Ticket for the trimmed email, or None when it is blank (nothing to check)."""
        self.ticket += 1
        value = email.strip()
        self.email = value or None
        return self.ticket if value else None

    def is_current(self, ticket: int) -> bool:
        return ticket == self.ticket and self.email is not None

    def resolve(self, ticket: int) -> Optional[bool]:
        """Availability for a current ticket; None when superseded."""
        if not self.is_current(ticket):
            return None
        return is_email_available(self.email)

    def current(self) -> Optional[int]:
        """Ticket of the check still wanted, if any."""
        return self.ticket if self.email is not None else None
