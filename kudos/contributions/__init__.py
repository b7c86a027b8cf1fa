"""Contribution translation and its observability events."""

from __future__ import annotations

from .observability import ContributionEventLogger, ContributionEventType
from .translator import (
    OPENED_ACTION,
    Ignore,
    Skip,
    TranslationOutcome,
    translate_event,
)

__all__ = [
    "OPENED_ACTION",
    "ContributionEventLogger",
    "ContributionEventType",
    "Ignore",
    "Skip",
    "TranslationOutcome",
    "translate_event",
]
