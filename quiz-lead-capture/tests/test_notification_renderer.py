"""
Tests for `services/notification_renderer.py`.

Covers rules:
- User HTML and text bodies carry the same field values.
- The admin alert is text-only and reports the raw timeline code.
- Both emails report the record's single timestamp.
- Missing answers render as empty text; HTML values are escaped.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from domain.answers import normalize_content
from domain.lead import LeadRecord, QuizSubmission, build_lead_record
from services.notification_renderer import render_admin_alert, render_user_confirmation

FIXED_NOW = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def sam_record(sam_payload) -> LeadRecord:
    return build_lead_record(QuizSubmission.from_payload(sam_payload), now=FIXED_NOW)


def _empty_record() -> LeadRecord:
    return LeadRecord(
        first_name="Ana",
        email="ana@x.com",
        target_band=None,
        timeline=None,
        weak_section=None,
        experience=None,
        study_time=None,
        challenge=None,
        timestamp=FIXED_NOW,
    )


def test_user_confirmation_html_and_text_carry_same_fields(sam_record) -> None:
    """Verify field-for-field parity between the HTML and text renderings."""

    content = normalize_content(sam_record)
    email = render_user_confirmation(sam_record, content)

    expected_values = [
        content.target_band,
        content.timeline,
        content.weak_section,
        content.study_time,
        content.challenge,
        sam_record.first_name,
    ]
    for value in expected_values:
        assert value in email.text_body, value
        assert value in email.html_body, value

    for label, value in [
        ("Target Band:", "7"),
        ("Timeline:", "2-4 Week Intensive"),
        ("Weak Section:", "Writing"),
        ("Study Time:", "30-60 minutes daily"),
        ("Biggest Challenge:", "grammar"),
    ]:
        assert f"- {label} {value}" in email.text_body
        assert f"<strong>{label}</strong> {value}</li>" in email.html_body


def test_user_confirmation_uses_normalized_labels(sam_record) -> None:
    """Verify labels replace codes and appear lower-cased in the plan outline."""

    email = render_user_confirmation(sam_record, normalize_content(sam_record))

    assert "Timeline: 2-4 Week Intensive" in email.text_body
    assert "30-60 minutes daily" in email.text_body
    assert "roadmap for your 2-4 week intensive timeline" in email.text_body
    assert "roadmap for your 2-4 week intensive timeline" in email.html_body
    assert "urgent" not in email.text_body
    assert "minimal" not in email.text_body


def test_user_confirmation_subject_and_link(sam_record) -> None:
    """Verify the personalized subject and configurable consultation link."""

    email = render_user_confirmation(
        sam_record,
        normalize_content(sam_record),
        consultation_url="https://book.example/sam",
    )

    assert email.subject == "Your Personalized IELTS Study Plan is Ready, Sam! 📚"
    assert 'href="https://book.example/sam"' in email.html_body
    assert "Book your consultation: https://book.example/sam" in email.text_body


def test_admin_alert_reports_raw_record(sam_record) -> None:
    """Verify the admin alert lists raw values, including the unnormalized timeline."""

    email = render_admin_alert(sam_record)

    assert email.subject == "New IELTS Quiz Lead - Sam"
    assert email.html_body is None
    assert email.text_body == (
        "New IELTS Quiz Lead:\n"
        "Name: Sam\n"
        "Email: sam@x.com\n"
        "Target Band: 7\n"
        "Timeline: urgent\n"
        "Weak Section: Writing\n"
        "Challenge: grammar\n"
        "Timestamp: 2025-01-01T12:00:00.000Z"
    )


def test_rendered_emails_share_record_timestamp(sam_record) -> None:
    """Verify rendering never re-reads the clock."""

    first = render_admin_alert(sam_record)
    second = render_admin_alert(sam_record)

    assert first.text_body == second.text_body
    assert sam_record.timestamp_iso in first.text_body


def test_missing_answers_render_as_empty_text() -> None:
    """Verify None values neither raise nor leak as 'None'."""

    record = _empty_record()

    user = render_user_confirmation(record, normalize_content(record))
    admin = render_admin_alert(record)

    assert "None" not in user.text_body
    assert "None" not in user.html_body
    assert "None" not in admin.text_body
    assert "- Target Band: \n" in user.text_body
    assert "- Timeline: 6-Week Standard\n" in user.text_body
    assert "Timeline: \n" in admin.text_body


def test_html_body_escapes_submitted_values(fixed_now) -> None:
    """Verify user-supplied values cannot inject markup into the HTML body."""

    submission = QuizSubmission.from_payload({
        "firstName": "<b>Sam</b>",
        "email": "sam@x.com",
        "answers": {"3": "Reading & Writing", "6": '<script>alert("x")</script>'},
    })
    record = build_lead_record(submission, now=fixed_now)

    email = render_user_confirmation(record, normalize_content(record))

    assert "<script>" not in email.html_body
    assert "&lt;b&gt;Sam&lt;/b&gt;" in email.html_body
    assert "Reading &amp; Writing" in email.html_body
    assert "<b>Sam</b>" in email.text_body
    assert "Reading & Writing" in email.text_body
