"""
Domain: quiz submissions and lead records.

Contract excerpts implemented here:
- A submission requires firstName, email and answers, each present and
  non-empty. No format validation is performed beyond presence.
- A LeadRecord is built once per request from a validated submission and is
  never mutated. Its timestamp is read from the clock exactly once, at build
  time, and is authoritative for everything rendered from the record.
- Quiz answers are indexed 1..6; indices the quiz did not send become None.
- Lead IDs are request-scoped: fixed prefix, creation instant in epoch
  milliseconds, random base-36 suffix. They are never stored.
"""

from __future__ import annotations

import re
import secrets
import string
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

from .time import epoch_millis, require_utc_timestamp, to_iso_utc, utc_now

REQUIRED_FIELDS = ("firstName", "email", "answers")

LEAD_ID_PREFIX = "IELTS"
LEAD_ID_SUFFIX_LENGTH = 9
LEAD_ID_PATTERN = re.compile(rf"^{LEAD_ID_PREFIX}-\d+-[0-9a-z]{{{LEAD_ID_SUFFIX_LENGTH}}}$")

_BASE36 = string.digits + string.ascii_lowercase


class ValidationError(ValueError):
    """Raised when a submission is missing a required field."""

    def __init__(self, missing: Sequence[str]) -> None:
        self.missing = tuple(missing)
        super().__init__(f"Missing required fields: {', '.join(self.missing)}")


@dataclass(frozen=True, slots=True)
class QuizSubmission:
    """
    Validated quiz form submission.

    answers is kept exactly as posted: normally a mapping keyed "1".."6",
    though int keys and list-shaped answers are accepted too.
    """

    first_name: str
    email: str
    answers: Any

    @classmethod
    def from_payload(cls, payload: Any) -> "QuizSubmission":
        """
        Validate a decoded JSON body.

        Raises:
            ValidationError: If the body is not an object or any required
                field is absent or empty
        """

        if not isinstance(payload, Mapping):
            raise ValidationError(REQUIRED_FIELDS)

        missing = [name for name in REQUIRED_FIELDS if not payload.get(name)]
        if missing:
            raise ValidationError(missing)

        return cls(
            first_name=str(payload["firstName"]),
            email=str(payload["email"]),
            answers=payload["answers"],
        )


@dataclass(frozen=True, slots=True)
class LeadRecord:
    """
    Lead attributes derived from one submission.

    Answer fields hold the raw codes; display labels live in
    NormalizedContent (domain.answers).
    """

    first_name: str
    email: str
    target_band: Optional[str]
    timeline: Optional[str]
    weak_section: Optional[str]
    experience: Optional[str]
    study_time: Optional[str]
    challenge: Optional[str]
    timestamp: datetime

    def __post_init__(self) -> None:
        require_utc_timestamp("timestamp", self.timestamp)

    @property
    def timestamp_iso(self) -> str:
        return to_iso_utc(self.timestamp)

    def log_fields(self) -> dict[str, Any]:
        """Flat view of the record using the submission's field names."""

        return {
            "firstName": self.first_name,
            "email": self.email,
            "targetBand": self.target_band,
            "timeline": self.timeline,
            "weakSection": self.weak_section,
            "experience": self.experience,
            "studyTime": self.study_time,
            "challenge": self.challenge,
            "timestamp": self.timestamp_iso,
        }


def _answer(answers: Any, index: int) -> Optional[str]:
    if isinstance(answers, Mapping):
        value = answers.get(str(index))
        if value is None:
            value = answers.get(index)
    elif isinstance(answers, (list, tuple)):
        value = answers[index] if index < len(answers) else None
    else:
        value = None

    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def build_lead_record(submission: QuizSubmission, now: Optional[datetime] = None) -> LeadRecord:
    """
    Build the LeadRecord for a validated submission.

    Args:
        submission: Output of QuizSubmission.from_payload
        now: Creation instant (default: current UTC time)
    """

    answers = submission.answers
    return LeadRecord(
        first_name=submission.first_name,
        email=submission.email,
        target_band=_answer(answers, 1),
        timeline=_answer(answers, 2),
        weak_section=_answer(answers, 3),
        experience=_answer(answers, 4),
        study_time=_answer(answers, 5),
        challenge=_answer(answers, 6),
        timestamp=now if now is not None else utc_now(),
    )


def new_lead_id(now: Optional[datetime] = None) -> str:
    """
    Generate a request-scoped lead ID, e.g. IELTS-1735732800000-k3j9x0q2a.
    """

    created = now if now is not None else utc_now()
    suffix = "".join(secrets.choice(_BASE36) for _ in range(LEAD_ID_SUFFIX_LENGTH))
    return f"{LEAD_ID_PREFIX}-{epoch_millis(created)}-{suffix}"


__all__ = [
    "LEAD_ID_PATTERN",
    "LeadRecord",
    "QuizSubmission",
    "ValidationError",
    "build_lead_record",
    "new_lead_id",
]
