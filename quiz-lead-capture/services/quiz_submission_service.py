"""
Quiz submission service.

Orchestrates one quiz submission from raw HTTP method + body to an
HTTP-shaped response. Shared by the FastAPI router and the Lambda entry
point.

Flow:
1. Preflight: OPTIONS returns 200 with an empty body. Nothing else runs.
2. Parse: the body is decoded as JSON. Malformed input is treated like any
   other internal failure (500).
3. Validate: firstName, email and answers must be present and non-empty,
   otherwise 400 before any email is rendered or sent.
4. Process: build + log the lead record, normalize, render both emails,
   dispatch both (failures isolated by the dispatcher), return 200 with a
   fresh lead ID.
5. Fatal: anything else unexpected returns a generic 500. Details go to the
   log only.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Optional

from core.config import DEFAULT_CONSULTATION_URL
from domain.answers import normalize_content
from domain.lead import QuizSubmission, ValidationError, build_lead_record, new_lead_id
from services.notification_dispatcher import NotificationDispatcher
from services.notification_renderer import render_admin_alert, render_user_confirmation

logger = logging.getLogger(__name__)

CORS_HEADERS: Mapping[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}

SUCCESS_MESSAGE = "Lead captured successfully"
VALIDATION_ERROR = "Missing required fields"
INTERNAL_ERROR = "Internal server error"
INTERNAL_ERROR_MESSAGE = "Failed to process quiz submission"


@dataclass(frozen=True, slots=True)
class HandlerResponse:
    """
    HTTP-shaped result of one invocation.

    body is the serialized JSON payload, or "" for preflight responses.
    """
    status_code: int
    body: str
    headers: Mapping[str, str] = field(default_factory=lambda: dict(CORS_HEADERS))

    def json(self) -> Any:
        return json.loads(self.body) if self.body else None


def _json_response(status_code: int, payload: Mapping[str, Any]) -> HandlerResponse:
    headers = dict(CORS_HEADERS)
    headers["Content-Type"] = "application/json"
    return HandlerResponse(status_code=status_code, body=json.dumps(payload), headers=headers)


def preflight_response() -> HandlerResponse:
    return HandlerResponse(status_code=200, body="")


def handle_quiz_submission(
    method: str,
    body: Optional[str],
    dispatcher: NotificationDispatcher,
    *,
    consultation_url: str = DEFAULT_CONSULTATION_URL,
    now: Optional[datetime] = None,
) -> HandlerResponse:
    """
    Process one quiz submission request.

    Args:
        method: HTTP method of the inbound request
        body: Raw request body (JSON text)
        dispatcher: Process-wide notification dispatcher
        consultation_url: Booking link rendered into the confirmation email
        now: Creation instant for the lead (default: current UTC time)

    Returns:
        HandlerResponse (200 success/preflight, 400 validation, 500 fatal)

    Example:
        response = handle_quiz_submission("POST", request_body, dispatcher)
        # response.status_code == 200
        # response.json()["leadId"] == "IELTS-1735732800000-k3j9x0q2a"
    """
    if (method or "").upper() == "OPTIONS":
        return preflight_response()

    try:
        payload = json.loads(body)  # type: ignore[arg-type]

        try:
            submission = QuizSubmission.from_payload(payload)
        except ValidationError as e:
            logger.info(
                "Rejected quiz submission",
                extra={"missing_fields": list(e.missing)},
            )
            return _json_response(400, {"error": VALIDATION_ERROR})

        record = build_lead_record(submission, now=now)
        logger.info("New lead captured", extra={"lead": record.log_fields()})

        content = normalize_content(record)
        confirmation = render_user_confirmation(record, content, consultation_url=consultation_url)
        admin_notification = render_admin_alert(record)

        dispatcher.dispatch_all(record, confirmation, admin_notification)

        return _json_response(200, {
            "success": True,
            "message": SUCCESS_MESSAGE,
            "leadId": new_lead_id(record.timestamp),
        })

    except Exception:
        logger.exception("Error processing quiz submission")
        return _json_response(500, {
            "error": INTERNAL_ERROR,
            "message": INTERNAL_ERROR_MESSAGE,
        })


__all__ = [
    "CORS_HEADERS",
    "HandlerResponse",
    "handle_quiz_submission",
    "preflight_response",
]
