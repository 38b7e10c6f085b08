"""
Serverless function entry point.

Accepts API Gateway (REST and HTTP API) proxy events and
returns the {"statusCode", "headers", "body"} dict those platforms expect.

Example event:
    {"httpMethod": "POST", "body": "{\\"firstName\\": \\"Sam\\", ...}"}
"""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Any, Mapping, Optional

from api.dependencies import get_dispatcher
from core.config import get_settings
from services.notification_dispatcher import NotificationDispatcher
from services.quiz_submission_service import handle_quiz_submission

logger = logging.getLogger(__name__)
logging.getLogger().setLevel(get_settings().log_level)


def _event_method(event: Mapping[str, Any]) -> str:
    method = event.get("httpMethod")
    if method:
        return method
    # HTTP API (payload v2) keeps the method under requestContext.http
    http = (event.get("requestContext") or {}).get("http") or {}
    return http.get("method") or ""


def _event_body(event: Mapping[str, Any]) -> Optional[str]:
    body = event.get("body")
    if body is None or not event.get("isBase64Encoded"):
        return body
    try:
        return base64.b64decode(body).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        logger.warning("Could not decode base64 request body")
        return None


def lambda_handler(
    event: Mapping[str, Any],
    context: Any = None,
    dispatcher: Optional[NotificationDispatcher] = None,
) -> dict[str, Any]:
    """
    Handle one quiz submission invocation.

    Args:
        event: Platform event
        context: Platform context (unused)
        dispatcher: Override for the process-wide dispatcher (tests)
    """
    result = handle_quiz_submission(
        _event_method(event),
        _event_body(event),
        dispatcher or get_dispatcher(),
        consultation_url=get_settings().consultation_url,
    )
    return {
        "statusCode": result.status_code,
        "headers": dict(result.headers),
        "body": result.body,
    }
