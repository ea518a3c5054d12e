from __future__ import annotations

from .event import (
    FAMILY_EVENT_TAGS,
    INDIVIDUAL_EVENT_TAGS,
    Event,
    extract_event,
    is_event_tag,
    is_family_event_tag,
    is_individual_event_tag,
)

__all__ = [
    "FAMILY_EVENT_TAGS",
    "INDIVIDUAL_EVENT_TAGS",
    "Event",
    "extract_event",
    "is_event_tag",
    "is_family_event_tag",
    "is_individual_event_tag",
]
