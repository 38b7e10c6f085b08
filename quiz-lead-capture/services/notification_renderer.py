"""
Notification renderer for quiz leads.

Produces the two emails sent for every submission:
- User confirmation: personalized study-plan summary, HTML + plain text.
- Admin alert: plain-text summary of the raw lead record.

Rendering rules:
- Templates are static layouts with substitution points; no branching on
  content beyond the label normalization done upstream.
- The user HTML and text bodies carry the same field values (target band,
  timeline label, weak section, study-time label, challenge, first name).
- The admin alert reports the raw timeline code, not its label.
- Missing answers render as empty text. Values are HTML-escaped in the HTML
  body only.
"""

from __future__ import annotations

from dataclasses import dataclass
from html import escape
from typing import Optional

from core.config import DEFAULT_CONSULTATION_URL
from domain.answers import NormalizedContent
from domain.lead import LeadRecord


@dataclass(frozen=True, slots=True)
class RenderedEmail:
    """
    Subject and bodies for one outgoing email.

    html_body is None for text-only mail.
    """
    subject: str
    text_body: str
    html_body: Optional[str] = None


def _text(value: Optional[str]) -> str:
    return "" if value is None else value


def _html(value: Optional[str]) -> str:
    return escape(_text(value), quote=True)


_USER_HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Your IELTS Study Plan</title>
  <style>
    body {{ font-family: Arial, sans-serif; line-height: 1.6; color: #333; }}
    .container {{ max-width: 600px; margin: 0 auto; padding: 20px; }}
    .header {{ background: linear-gradient(135deg, #667eea, #764ba2); color: white; padding: 30px; text-align: center; border-radius: 10px 10px 0 0; }}
    .content {{ background: #f9f9f9; padding: 30px; border-radius: 0 0 10px 10px; }}
    .cta-button {{ background: #667eea; color: white; padding: 15px 30px; text-decoration: none; border-radius: 5px; display: inline-block; margin: 20px 0; }}
    .highlight {{ background: #fff3cd; padding: 15px; border-radius: 5px; margin: 20px 0; }}
  </style>
</head>
<body>
  <div class="container">
    <div class="header">
      <h1>Your Personalized IELTS Study Plan is Ready! 🎉</h1>
    </div>
    <div class="content">
      <p>Hi {first_name},</p>

      <p>Congratulations on taking the first step toward your IELTS success!</p>

      <div class="highlight">
        <h3>📊 Your Assessment Results:</h3>
        <ul>
          <li><strong>Target Band:</strong> {target_band}</li>
          <li><strong>Timeline:</strong> {timeline}</li>
          <li><strong>Weak Section:</strong> {weak_section}</li>
          <li><strong>Study Time:</strong> {study_time}</li>
          <li><strong>Biggest Challenge:</strong> {challenge}</li>
        </ul>
      </div>

      <p>I've created a personalized study plan specifically for your situation. This isn't just another generic guide: it's tailored to help you reach Band {target_band} efficiently.</p>

      <p><strong>What you'll find in your study plan:</strong></p>
      <ul>
        <li>Week-by-week roadmap for your {timeline_lower} timeline</li>
        <li>Focus on improving your {weak_section} section</li>
        <li>Daily study schedule that fits your {study_time_lower} availability</li>
        <li>Common mistakes to avoid (especially relevant to your situation)</li>
        <li>Bonus prep checklist to get started immediately</li>
      </ul>

      <p><strong>Quick Win for This Week:</strong></p>
      <p>Since you mentioned {challenge} as your biggest obstacle, here's your first action step: Focus on building a strong foundation in {weak_section} with 30 minutes of daily practice. This single change will make a noticeable difference in your practice tests within 7 days.</p>

      <p><strong>Ready to take the next step?</strong></p>
      <p>I'm offering a free 15-minute consultation to help you get started with your study plan. We'll discuss your specific challenges and create an action plan for the next few weeks.</p>

      <a href="{consultation_url}" class="cta-button">Book Your Free Consultation</a>

      <p>Questions about your study plan? Just reply to this email. I read every response personally.</p>

      <p>To your IELTS success,<br>
      [Your Name]<br>
      IELTS Success Coach</p>
    </div>
  </div>
</body>
</html>
"""

_USER_TEXT_TEMPLATE = """Hi {first_name},

Your Personalized IELTS Study Plan is Ready! 🎉

Congratulations on taking the first step toward your IELTS success!

Your Assessment Results:
- Target Band: {target_band}
- Timeline: {timeline}
- Weak Section: {weak_section}
- Study Time: {study_time}
- Biggest Challenge: {challenge}

I've created a personalized study plan specifically for your situation. This isn't just another generic guide: it's tailored to help you reach Band {target_band} efficiently.

What you'll find in your study plan:
- Week-by-week roadmap for your {timeline_lower} timeline
- Focus on improving your {weak_section} section
- Daily study schedule that fits your {study_time_lower} availability
- Common mistakes to avoid (especially relevant to your situation)
- Bonus prep checklist to get started immediately

Quick Win for This Week:
Since you mentioned {challenge} as your biggest obstacle, here's your first action step: Focus on building a strong foundation in {weak_section} with 30 minutes of daily practice. This single change will make a noticeable difference in your practice tests within 7 days.

Ready to take the next step?
I'm offering a free 15-minute consultation to help you get started with your study plan. We'll discuss your specific challenges and create an action plan for the next few weeks.

Book your consultation: {consultation_url}

Questions about your study plan? Just reply to this email. I read every response personally.

To your IELTS success,
[Your Name]
IELTS Success Coach
"""

_ADMIN_TEXT_TEMPLATE = """New IELTS Quiz Lead:
Name: {first_name}
Email: {email}
Target Band: {target_band}
Timeline: {timeline}
Weak Section: {weak_section}
Challenge: {challenge}
Timestamp: {timestamp}"""


def user_subject(record: LeadRecord) -> str:
    return f"Your Personalized IELTS Study Plan is Ready, {record.first_name}! 📚"


def admin_subject(record: LeadRecord) -> str:
    return f"New IELTS Quiz Lead - {record.first_name}"


def render_user_confirmation(
    record: LeadRecord,
    content: NormalizedContent,
    consultation_url: str = DEFAULT_CONSULTATION_URL,
) -> RenderedEmail:
    """
    Render the study-plan confirmation sent to the quiz taker.

    Args:
        record: Lead record (supplies first_name)
        content: Normalized view of the same record
        consultation_url: Booking link for the call-to-action

    Returns:
        RenderedEmail with subject, text body and HTML body
    """
    values = {
        "first_name": record.first_name,
        "target_band": _text(content.target_band),
        "timeline": content.timeline,
        "timeline_lower": content.timeline.lower(),
        "weak_section": _text(content.weak_section),
        "study_time": content.study_time,
        "study_time_lower": content.study_time.lower(),
        "challenge": _text(content.challenge),
        "consultation_url": consultation_url,
    }
    html_values = {key: _html(value) for key, value in values.items()}

    return RenderedEmail(
        subject=user_subject(record),
        text_body=_USER_TEXT_TEMPLATE.format(**values),
        html_body=_USER_HTML_TEMPLATE.format(**html_values),
    )


def render_admin_alert(record: LeadRecord) -> RenderedEmail:
    """Render the plain-text new-lead alert for the administrator."""

    text_body = _ADMIN_TEXT_TEMPLATE.format(
        first_name=record.first_name,
        email=record.email,
        target_band=_text(record.target_band),
        timeline=_text(record.timeline),
        weak_section=_text(record.weak_section),
        challenge=_text(record.challenge),
        timestamp=record.timestamp_iso,
    )
    return RenderedEmail(subject=admin_subject(record), text_body=text_body)


__all__ = [
    "RenderedEmail",
    "admin_subject",
    "render_admin_alert",
    "render_user_confirmation",
    "user_subject",
]
