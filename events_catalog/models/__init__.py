"""Models package initialization."""

from .base import Base
from .event import Event, EventTag, EventType, ALL_EVENT_TYPES
from .fields import EventFields, SpeakerFields

__all__ = ['Base', 'Event', 'EventTag', 'EventType', 'ALL_EVENT_TYPES', 'EventFields', 'SpeakerFields']
