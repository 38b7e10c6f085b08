"""
Pytest configuration for quiz lead capture tests.

This file adds the parent directory to the Python path so that tests
can import from the domain, services, providers and api modules, and
provides a recording EmailSender so no test talks to SES.
"""

import sys
import threading
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add the quiz-lead-capture directory to the Python path
# so tests can import domain, services, etc.
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from providers.base import EmailSender, SendResult  # noqa: E402
from services.notification_dispatcher import NotificationDispatcher  # noqa: E402

FROM_ADDRESS = "noreply@test.example"
ADMIN_ADDRESS = "admin@test.example"
FIXED_NOW = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class RecordingSender(EmailSender):
    """EmailSender that records every call and fails for chosen recipients."""

    name = "recording"

    def __init__(self, fail_for=()):
        self.fail_for = set(fail_for)
        self.calls = []
        self._lock = threading.Lock()

    def send(self, *, source, to_addresses, subject, text_body, html_body=None):
        with self._lock:
            self.calls.append({
                "source": source,
                "to_addresses": list(to_addresses),
                "subject": subject,
                "text_body": text_body,
                "html_body": html_body,
            })
        if self.fail_for.intersection(to_addresses):
            raise ConnectionError(f"send to {to_addresses[0]} failed")
        return SendResult(provider_name=self.name, provider_message_id=f"msg-{len(self.calls)}")

    def calls_to(self, address):
        return [call for call in self.calls if address in call["to_addresses"]]


@pytest.fixture
def make_sender():
    """Factory for RecordingSender; pass addresses whose sends should fail."""
    return RecordingSender


@pytest.fixture
def sender():
    return RecordingSender()


@pytest.fixture
def dispatcher(sender):
    return NotificationDispatcher(sender, from_address=FROM_ADDRESS, admin_address=ADMIN_ADDRESS)


@pytest.fixture
def addresses():
    return {"from": FROM_ADDRESS, "admin": ADMIN_ADDRESS}


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def sam_payload():
    return {
        "firstName": "Sam",
        "email": "sam@x.com",
        "answers": {
            "1": "7",
            "2": "urgent",
            "3": "Writing",
            "4": "none",
            "5": "minimal",
            "6": "grammar",
        },
    }
