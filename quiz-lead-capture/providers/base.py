"""
Email sender capability: base interface.

This module defines:
- SendResult: normalized result of a successful send call.
- EmailSender: interface every transactional-email backend implements.

Senders raise on failure (network errors, provider rejections, timeouts).
Callers that must isolate failures (the notification dispatcher) catch and
log; senders themselves never swallow errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True, slots=True)
class SendResult:
    """
    Result of an accepted send.

    Fields:
      provider_name:       Short identifier for the backend (e.g. "ses").
      provider_message_id: Provider-level message ID, when one is returned.
    """

    provider_name: str
    provider_message_id: Optional[str] = None


class EmailSender:
    """
    Base interface for transactional email backends.

    Implementations are long-lived and stateless between calls, so one
    instance is shared by every request in the process.
    """

    name: str = "base"

    def send(
        self,
        *,
        source: str,
        to_addresses: Sequence[str],
        subject: str,
        text_body: str,
        html_body: Optional[str] = None,
    ) -> SendResult:
        """
        Send one email.

        Arguments:
          source:       Sender address.
          to_addresses: Recipient addresses.
          subject:      Subject line.
          text_body:    Plain-text body.
          html_body:    Optional HTML body; omitted for text-only mail.

        Returns:
          SendResult for an accepted message.
        """
        raise NotImplementedError("EmailSender.send() must be implemented by subclasses")


__all__ = ["EmailSender", "SendResult"]
