"""
Domain: quiz answer normalization.

Contract excerpts implemented here:
- Timeline and study-time answer codes translate to fixed display labels.
- The set of codes is closed; anything else (unknown, missing, wrong type)
  resolves to the table's default label.
- Normalization is pure and total: it never raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping, Optional

if TYPE_CHECKING:
    from .lead import LeadRecord


@dataclass(frozen=True, slots=True)
class LabelTable:
    """
    Immutable code → label lookup with an explicit default entry.
    """

    labels: Mapping[str, str]
    default: str

    def label_for(self, code: Any) -> str:
        """Resolve a raw answer code to its display label (default if unknown)."""

        if not isinstance(code, str):
            return self.default
        return self.labels.get(code, self.default)


TIMELINE_LABELS = LabelTable(
    labels=MappingProxyType({
        "urgent": "2-4 Week Intensive",
        "moderate": "6-8 Week Standard",
        "relaxed": "12+ Week Comprehensive",
    }),
    default="6-Week Standard",
)

STUDY_TIME_LABELS = LabelTable(
    labels=MappingProxyType({
        "minimal": "30-60 minutes daily",
        "moderate": "1-2 hours daily",
        "intensive": "2+ hours daily",
    }),
    default="1-2 hours daily",
)


def timeline_label(code: Optional[str]) -> str:
    return TIMELINE_LABELS.label_for(code)


def study_time_label(code: Optional[str]) -> str:
    return STUDY_TIME_LABELS.label_for(code)


@dataclass(frozen=True, slots=True)
class NormalizedContent:
    """
    Display view of a LeadRecord.

    Only timeline and study_time are translated; the other answers pass
    through as submitted (None when the quiz omitted them).
    """

    target_band: Optional[str]
    timeline: str
    weak_section: Optional[str]
    study_time: str
    challenge: Optional[str]


def normalize_content(record: "LeadRecord") -> NormalizedContent:
    """Derive the display labels for a lead record."""

    return NormalizedContent(
        target_band=record.target_band,
        timeline=timeline_label(record.timeline),
        weak_section=record.weak_section,
        study_time=study_time_label(record.study_time),
        challenge=record.challenge,
    )


__all__ = [
    "LabelTable",
    "NormalizedContent",
    "normalize_content",
    "STUDY_TIME_LABELS",
    "TIMELINE_LABELS",
    "study_time_label",
    "timeline_label",
]
