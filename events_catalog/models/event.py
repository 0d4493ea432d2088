"""Event model definition."""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List

from sqlalchemy import Column, Date, DateTime, Float, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import relationship

from .base import Base

# Listing sentinel meaning "do not filter by type"
ALL_EVENT_TYPES = 'Both'

DEFAULT_DRESS_CODE = 'Casual'
DEFAULT_AGE_RESTRICTION = 'None'


class EventType(str, Enum):
    """Where an event takes place."""
    ONLINE = 'Online'
    OFFLINE = 'Offline'


def generate_event_id() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """SQLite hands back naive timestamps; they are stored as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class EventTag(Base):
    """A single tag of an event, kept in the order it was given."""
    __tablename__ = 'event_tags'

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(String(36), ForeignKey('events.id', ondelete='CASCADE'), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    name = Column(String, nullable=False)


class Event(Base):
    """
    Event model representing a catalog entry.

    Attributes use snake_case; ``to_dict`` renders the camelCase document
    returned by the API.

    Fields:
        id: Unique identifier (UUID4 string, assigned at creation)
        title: Event title
        type: 'Online' or 'Offline'
        date: Day the event takes place
        time: Free-form time description (e.g. '09:00 AM - 05:00 PM')
        image: URL of the event image
        hosted_by: Who is hosting the event
        venue: Venue name (offline events only)
        address: Venue address (offline events only)
        ticket_price: Ticket price, 0 for free events
        speakers: Ordered list of {name, title, image?} documents
        description: Event description
        tags: Ordered tags (see EventTag)
        dress_code: Dress code, 'Casual' unless given
        age_restriction: Age restriction, 'None' unless given
        created_at: When the event was first stored, never modified
    """
    __tablename__ = 'events'

    id = Column(String(36), primary_key=True, default=generate_event_id)
    title = Column(String, nullable=False)
    type = Column(String, nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    time = Column(String, nullable=False)
    image = Column(String, nullable=False)
    hosted_by = Column(String, nullable=False)
    venue = Column(String)
    address = Column(String)
    ticket_price = Column(Float, nullable=False)
    speakers = Column(JSON, nullable=False, default=list)
    description = Column(Text, nullable=False)
    dress_code = Column(String, nullable=False, default=DEFAULT_DRESS_CODE)
    age_restriction = Column(String, nullable=False, default=DEFAULT_AGE_RESTRICTION)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    tag_rows = relationship(
        EventTag,
        order_by=EventTag.position,
        cascade='all, delete-orphan',
        lazy='selectin',
    )

    @property
    def tags(self) -> List[str]:
        return [tag.name for tag in self.tag_rows]

    @tags.setter
    def tags(self, names: List[str]) -> None:
        self.tag_rows = [EventTag(position=index, name=name) for index, name in enumerate(names)]

    def apply_fields(self, fields: Dict[str, Any]) -> None:
        """Overwrite the stored fields with a validated field map."""
        for name in EVENT_FIELD_NAMES:
            if name in fields:
                setattr(self, name, fields[name])

    def to_fields(self) -> Dict[str, Any]:
        """Snake_case field map of the stored document, used for update merges."""
        return {
            'title': self.title,
            'type': self.type,
            'date': self.date,
            'time': self.time,
            'image': self.image,
            'hosted_by': self.hosted_by,
            'venue': self.venue,
            'address': self.address,
            'ticket_price': self.ticket_price,
            'speakers': [dict(speaker) for speaker in self.speakers or []],
            'description': self.description,
            'tags': self.tags,
            'dress_code': self.dress_code,
            'age_restriction': self.age_restriction,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the API document, leaving out absent optional fields."""
        document = {
            'id': self.id,
            'title': self.title,
            'type': self.type,
            'date': self.date.isoformat() if self.date else None,
            'time': self.time,
            'image': self.image,
            'hostedBy': self.hosted_by,
            'venue': self.venue,
            'address': self.address,
            'ticketPrice': self.ticket_price,
            'speakers': [dict(speaker) for speaker in self.speakers or []],
            'description': self.description,
            'tags': self.tags,
            'dressCode': self.dress_code,
            'ageRestriction': self.age_restriction,
            'createdAt': as_utc(self.created_at).isoformat() if self.created_at else None,
        }
        for optional in ('venue', 'address'):
            if document[optional] is None:
                del document[optional]
        return document

    def __str__(self) -> str:
        """String representation."""
        return f"Event(id={self.id}, title={self.title}, type={self.type}, date={self.date})"


# Writable fields in document order
EVENT_FIELD_NAMES = (
    'title',
    'type',
    'date',
    'time',
    'image',
    'hosted_by',
    'venue',
    'address',
    'ticket_price',
    'speakers',
    'description',
    'tags',
    'dress_code',
    'age_restriction',
)
