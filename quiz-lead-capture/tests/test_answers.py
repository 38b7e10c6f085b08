"""
Tests for `domain/answers.py`.

Covers rules:
- Known timeline and study-time codes map to their exact labels.
- Unknown, missing and non-string codes map to the documented default.
- Only timeline and study_time are translated; other answers pass through.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from domain.answers import (
    STUDY_TIME_LABELS,
    TIMELINE_LABELS,
    normalize_content,
    study_time_label,
    timeline_label,
)
from domain.lead import LeadRecord

FIXED_NOW = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "code, expected",
    [
        ("urgent", "2-4 Week Intensive"),
        ("moderate", "6-8 Week Standard"),
        ("relaxed", "12+ Week Comprehensive"),
    ],
)
def test_timeline_label_known_codes(code: str, expected: str) -> None:
    """Verify each known timeline code resolves to its label."""

    assert timeline_label(code) == expected


@pytest.mark.parametrize(
    "code, expected",
    [
        ("minimal", "30-60 minutes daily"),
        ("moderate", "1-2 hours daily"),
        ("intensive", "2+ hours daily"),
    ],
)
def test_study_time_label_known_codes(code: str, expected: str) -> None:
    """Verify each known study-time code resolves to its label."""

    assert study_time_label(code) == expected


@pytest.mark.parametrize("code", [None, "", "URGENT", "someday", 3, ["urgent"], {"a": 1}])
def test_unknown_codes_fall_back_to_defaults(code) -> None:
    """Verify normalization is total: anything outside the closed set gets the default."""

    assert timeline_label(code) == "6-Week Standard"
    assert study_time_label(code) == "1-2 hours daily"


def test_label_tables_are_read_only() -> None:
    """Verify the lookup tables cannot be modified at runtime."""

    with pytest.raises(TypeError):
        TIMELINE_LABELS.labels["urgent"] = "changed"  # type: ignore[index]
    with pytest.raises(TypeError):
        STUDY_TIME_LABELS.labels["minimal"] = "changed"  # type: ignore[index]


def test_normalize_content_translates_only_timeline_and_study_time() -> None:
    """Verify pass-through fields are unchanged and labels replace the two coded answers."""

    record = LeadRecord(
        first_name="Sam",
        email="sam@x.com",
        target_band="7",
        timeline="relaxed",
        weak_section="Writing",
        experience="none",
        study_time="intensive",
        challenge="grammar",
        timestamp=FIXED_NOW,
    )

    content = normalize_content(record)

    assert content.target_band == "7"
    assert content.timeline == "12+ Week Comprehensive"
    assert content.weak_section == "Writing"
    assert content.study_time == "2+ hours daily"
    assert content.challenge == "grammar"


def test_normalize_content_with_missing_answers() -> None:
    """Verify missing answers produce default labels and None pass-through values."""

    record = LeadRecord(
        first_name="Sam",
        email="sam@x.com",
        target_band=None,
        timeline=None,
        weak_section=None,
        experience=None,
        study_time=None,
        challenge=None,
        timestamp=FIXED_NOW,
    )

    content = normalize_content(record)

    assert content.timeline == "6-Week Standard"
    assert content.study_time == "1-2 hours daily"
    assert content.target_band is None
    assert content.challenge is None
