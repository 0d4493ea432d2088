"""Query construction for the event listing.

Translates the optional ``type`` and ``search`` listing parameters into a
SQLAlchemy filter clause over the events table.
"""

from typing import Optional

from sqlalchemy import and_, or_, true
from sqlalchemy.sql.elements import ColumnElement

from ..models.event import ALL_EVENT_TYPES, Event, EventTag

# Listing order: by date, then insertion order
EVENT_ORDERING = (Event.date.asc(), Event.created_at.asc(), Event.id.asc())


def build_event_filter(event_type: Optional[str] = None, search: Optional[str] = None) -> ColumnElement:
    """
    Build the filter clause for listing events.

    Args:
        event_type: Exact type to match. None, empty or 'Both' matches every type.
                    Values outside the enum are not rejected; they match nothing.
        search: Case-insensitive substring looked up in the title, the host or
                any single tag. None or empty applies no text constraint.

    Returns:
        A boolean clause; both constraints are ANDed when present.
    """
    clauses = []

    if event_type and event_type != ALL_EVENT_TYPES:
        clauses.append(Event.type == event_type)

    if search:
        # autoescape makes %, _ and the escape character match literally
        clauses.append(or_(
            Event.title.icontains(search, autoescape=True),
            Event.hosted_by.icontains(search, autoescape=True),
            Event.tag_rows.any(EventTag.name.icontains(search, autoescape=True)),
        ))

    if not clauses:
        return true()
    return and_(*clauses)
