#!/usr/bin/env python3
"""
Email Preview Script

Renders the user confirmation and admin alert for a quiz submission without
contacting SES. Useful when editing the templates.

Usage:
    python preview_emails.py
    python preview_emails.py --submission submission.json
    python preview_emails.py --output-dir previews/
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import get_settings
from domain.answers import normalize_content
from domain.lead import QuizSubmission, ValidationError, build_lead_record
from services.notification_renderer import render_admin_alert, render_user_confirmation

SAMPLE_SUBMISSION = {
    "firstName": "Sam",
    "email": "sam@example.com",
    "answers": {
        "1": "7",
        "2": "urgent",
        "3": "Writing",
        "4": "none",
        "5": "minimal",
        "6": "grammar",
    },
}


def main() -> int:
    parser = argparse.ArgumentParser(description="Render quiz lead emails without sending them")
    parser.add_argument(
        "--submission",
        type=Path,
        help="JSON file with a quiz submission (default: built-in sample)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Write user.html, user.txt and admin.txt here instead of printing",
    )
    args = parser.parse_args()

    payload = SAMPLE_SUBMISSION
    if args.submission:
        payload = json.loads(args.submission.read_text(encoding="utf-8"))

    try:
        submission = QuizSubmission.from_payload(payload)
    except ValidationError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    record = build_lead_record(submission)
    confirmation = render_user_confirmation(
        record,
        normalize_content(record),
        consultation_url=get_settings().consultation_url,
    )
    admin_alert = render_admin_alert(record)

    if args.output_dir:
        args.output_dir.mkdir(parents=True, exist_ok=True)
        (args.output_dir / "user.html").write_text(confirmation.html_body or "", encoding="utf-8")
        (args.output_dir / "user.txt").write_text(confirmation.text_body, encoding="utf-8")
        (args.output_dir / "admin.txt").write_text(admin_alert.text_body, encoding="utf-8")
        print(f"[OK] Wrote previews to {args.output_dir}")
        return 0

    print("=" * 70)
    print(f"To: {record.email}")
    print(f"Subject: {confirmation.subject}")
    print("=" * 70)
    print(confirmation.text_body)
    print("=" * 70)
    print(f"To: {get_settings().admin_email}")
    print(f"Subject: {admin_alert.subject}")
    print("=" * 70)
    print(admin_alert.text_body)
    return 0


if __name__ == "__main__":
    sys.exit(main())
