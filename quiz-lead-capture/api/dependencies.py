"""
Process-wide collaborators for the HTTP entry points.

The SES sender and the dispatcher wrapping it are built once per process, on
first use, and shared by every request. Tests replace them through FastAPI
dependency overrides or by passing a dispatcher explicitly.
"""

from __future__ import annotations

from functools import lru_cache

from core.config import get_settings
from providers.ses import build_ses_sender
from services.notification_dispatcher import NotificationDispatcher


@lru_cache(maxsize=1)
def get_dispatcher() -> NotificationDispatcher:
    settings = get_settings()
    return NotificationDispatcher(
        sender=build_ses_sender(settings),
        from_address=settings.from_email,
        admin_address=settings.admin_email,
    )


__all__ = ["get_dispatcher"]
