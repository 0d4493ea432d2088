"""Event validation rules.

Structural checks (types, date parsing) are done by the payload models. The
rules here run on the complete field map of an event, after defaults have
been applied and, for updates, after the stored document has been merged
with the changes. Every entry point (create, update, seed) goes through
``validate_event_fields``.
"""

import math
from typing import Any, Dict, List

from ..models.event import DEFAULT_AGE_RESTRICTION, DEFAULT_DRESS_CODE, EventType

# Required fields and the message reported when they are missing
REQUIRED_FIELD_MESSAGES = {
    'title': 'Please add an event title',
    'type': 'Please specify the event type',
    'date': 'Please add an event date',
    'time': 'Please add an event time',
    'image': 'Please add an image URL for the event',
    'hosted_by': 'Please add who is hosting the event',
    'ticket_price': 'Please add a ticket price',
    'description': 'Please add a description for the event',
    'tags': 'Please add at least one tag',
}

# Fields that become required when the event type is Offline
OFFLINE_REQUIRED_FIELD_MESSAGES = {
    'venue': 'Please add a venue for offline events',
    'address': 'Please add an address for offline events',
}

VALID_EVENT_TYPES = [event_type.value for event_type in EventType]


class EventValidationError(ValueError):
    """Raised when an event violates one or more validation rules."""

    def __init__(self, violations: List[str]):
        self.violations = list(violations)
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return "Event validation failed: " + "; ".join(self.violations)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def apply_defaults(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``fields`` with defaults filled in for absent values."""
    fields = dict(fields)
    if fields.get('dress_code') is None:
        fields['dress_code'] = DEFAULT_DRESS_CODE
    if fields.get('age_restriction') is None:
        fields['age_restriction'] = DEFAULT_AGE_RESTRICTION
    if fields.get('speakers') is None:
        fields['speakers'] = []
    return fields


def validate_event_fields(fields: Dict[str, Any]) -> List[str]:
    """
    Check a complete event field map against the catalog rules.

    Args:
        fields: Snake_case field map (see ``Event.to_fields``)

    Returns:
        List[str]: Violated constraints, empty when the event is valid
    """
    violations = [
        message
        for name, message in REQUIRED_FIELD_MESSAGES.items()
        if _is_missing(fields.get(name))
    ]

    event_type = fields.get('type')
    if not _is_missing(event_type) and event_type not in VALID_EVENT_TYPES:
        violations.append(
            f"'{event_type}' is not a valid event type, expected one of: {', '.join(VALID_EVENT_TYPES)}"
        )

    ticket_price = fields.get('ticket_price')
    if ticket_price is not None and not math.isfinite(ticket_price):
        violations.append('Ticket price must be a finite number')
    elif ticket_price is not None and ticket_price < 0:
        violations.append('Ticket price must be at least 0')

    for position, speaker in enumerate(fields.get('speakers') or [], start=1):
        if _is_missing(speaker.get('name')):
            violations.append(f'Speaker {position} is missing a name')
        if _is_missing(speaker.get('title')):
            violations.append(f'Speaker {position} is missing a title')

    # Cross-field rules run after the per-field checks
    violations.extend(validate_conditional_fields(fields))
    return violations


def validate_conditional_fields(fields: Dict[str, Any]) -> List[str]:
    """Venue and address are required for offline events only."""
    if fields.get('type') != EventType.OFFLINE.value:
        return []
    return [
        message
        for name, message in OFFLINE_REQUIRED_FIELD_MESSAGES.items()
        if _is_missing(fields.get(name))
    ]


def check_event_fields(fields: Dict[str, Any]) -> None:
    """Raise ``EventValidationError`` when ``fields`` is not a valid event."""
    violations = validate_event_fields(fields)
    if violations:
        raise EventValidationError(violations)
