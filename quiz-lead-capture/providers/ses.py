"""
Amazon SES email sender.

Wraps a boto3 SES client. The client is created once per process by
build_ses_sender() and reused across requests.

Timeouts come from Settings; retries are disabled so a slow or failing call
surfaces to the caller after a single attempt.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

import boto3
from botocore.config import Config

from core.config import Settings
from providers.base import EmailSender, SendResult

logger = logging.getLogger(__name__)

CHARSET = "UTF-8"


def _content(data: str) -> dict[str, str]:
    return {"Charset": CHARSET, "Data": data}


class SesEmailSender(EmailSender):
    """EmailSender backed by the SES SendEmail API."""

    name = "ses"

    def __init__(self, client: Any) -> None:
        self._client = client

    def send(
        self,
        *,
        source: str,
        to_addresses: Sequence[str],
        subject: str,
        text_body: str,
        html_body: Optional[str] = None,
    ) -> SendResult:
        body = {"Text": _content(text_body)}
        if html_body is not None:
            body["Html"] = _content(html_body)

        response = self._client.send_email(
            Source=source,
            Destination={"ToAddresses": list(to_addresses)},
            Message={
                "Subject": _content(subject),
                "Body": body,
            },
        )

        message_id = response.get("MessageId")
        logger.debug(
            "SES accepted message",
            extra={"provider_message_id": message_id, "recipient_count": len(to_addresses)},
        )
        return SendResult(provider_name=self.name, provider_message_id=message_id)


def build_ses_client(settings: Settings) -> Any:
    """Create the boto3 SES client for the configured region and timeouts."""

    return boto3.client(
        "ses",
        region_name=settings.aws_region,
        config=Config(
            connect_timeout=settings.ses_connect_timeout_seconds,
            read_timeout=settings.ses_read_timeout_seconds,
            retries={"mode": "standard", "total_max_attempts": 1},
        ),
    )


def build_ses_sender(settings: Settings) -> SesEmailSender:
    return SesEmailSender(build_ses_client(settings))


__all__ = ["SesEmailSender", "build_ses_client", "build_ses_sender"]
