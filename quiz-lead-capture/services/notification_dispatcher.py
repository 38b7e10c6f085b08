"""
Notification dispatcher for quiz leads.

Delivers the user confirmation and the admin alert through an injected
EmailSender.

Failure isolation:
- Each send is attempted exactly once.
- A failed send is caught and logged here and reported as a DispatchResult;
  it is never raised to the caller.
- The two sends run side by side and are both joined before dispatch_all()
  returns, so one failing (or hanging until its timeout) never prevents the
  other, and no send outlives the request.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional

from domain.lead import LeadRecord
from providers.base import EmailSender
from services.notification_renderer import RenderedEmail

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DispatchResult:
    """
    Outcome of one send attempt.

    ok: True if the sender accepted the message
    kind: "confirmation" or "admin_notification"
    recipient: Destination address
    provider_message_id: Message ID from the sender (success only)
    error: Failure description (failure only)
    """
    ok: bool
    kind: str
    recipient: str
    provider_message_id: Optional[str] = None
    error: Optional[str] = None


@dataclass(frozen=True, slots=True)
class DispatchReport:
    """Joined outcome of both sends for one submission."""
    confirmation: DispatchResult
    admin_notification: DispatchResult

    @property
    def all_ok(self) -> bool:
        return self.confirmation.ok and self.admin_notification.ok


class NotificationDispatcher:
    """
    Sends rendered notifications with per-message failure isolation.

    One instance (and its sender) is created per process and shared by all
    requests; it holds no per-request state.
    """

    def __init__(self, sender: EmailSender, from_address: str, admin_address: str) -> None:
        self.sender = sender
        self.from_address = from_address
        self.admin_address = admin_address

    def dispatch(self, kind: str, recipient: str, email: RenderedEmail) -> DispatchResult:
        """
        Send one email, converting any failure into a DispatchResult.

        Never raises.
        """
        try:
            result = self.sender.send(
                source=self.from_address,
                to_addresses=[recipient],
                subject=email.subject,
                text_body=email.text_body,
                html_body=email.html_body,
            )
        except Exception as e:
            logger.exception(
                f"Error sending {kind} email",
                extra={"notification_kind": kind, "recipient": recipient},
            )
            return DispatchResult(ok=False, kind=kind, recipient=recipient, error=str(e) or type(e).__name__)

        logger.info(
            f"{kind} email sent successfully",
            extra={
                "notification_kind": kind,
                "recipient": recipient,
                "provider_message_id": result.provider_message_id,
            },
        )
        return DispatchResult(
            ok=True,
            kind=kind,
            recipient=recipient,
            provider_message_id=result.provider_message_id,
        )

    def dispatch_all(
        self,
        record: LeadRecord,
        confirmation: RenderedEmail,
        admin_notification: RenderedEmail,
    ) -> DispatchReport:
        """
        Send the user confirmation and the admin alert for one lead.

        Both sends are submitted together and both futures are joined before
        returning.

        Args:
            record: Lead the emails were rendered from (supplies the user address)
            confirmation: Rendered user confirmation
            admin_notification: Rendered admin alert

        Returns:
            DispatchReport with one result per email
        """
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="dispatch") as executor:
            confirmation_future = executor.submit(
                self.dispatch, "confirmation", record.email, confirmation
            )
            admin_future = executor.submit(
                self.dispatch, "admin_notification", self.admin_address, admin_notification
            )
            report = DispatchReport(
                confirmation=confirmation_future.result(),
                admin_notification=admin_future.result(),
            )

        if not report.all_ok:
            logger.warning(
                "Lead notifications partially failed",
                extra={
                    "confirmation_ok": report.confirmation.ok,
                    "admin_notification_ok": report.admin_notification.ok,
                },
            )
        return report


__all__ = ["DispatchReport", "DispatchResult", "NotificationDispatcher"]
