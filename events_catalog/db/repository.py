"""Event repository.

All reads and writes of events go through ``EventRepository``. It holds an
injected ``Database`` and returns API documents (plain dicts), raising
``EventNotFoundError`` or ``EventValidationError`` for domain faults.
Storage faults propagate as ``DatabaseError`` subclasses.
"""

import logging
import uuid
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models.event import Event, EventTag
from ..models.fields import EventFields
from ..utils.validation import apply_defaults, check_event_fields
from .db_core import Database
from .queries import EVENT_ORDERING, build_event_filter

logger = logging.getLogger(__name__)


class EventNotFoundError(LookupError):
    """Raised when an event id does not resolve to a stored event."""

    def __init__(self, event_id: str):
        self.event_id = event_id
        super().__init__(f"Event not found: {event_id}")


def _is_well_formed_id(event_id: str) -> bool:
    try:
        uuid.UUID(str(event_id))
    except ValueError:
        return False
    return True


class EventRepository:
    """CRUD and listing operations over stored events."""

    def __init__(self, database: Database):
        self.database = database

    def _load(self, session: Session, event_id: str) -> Event:
        event = session.get(Event, event_id) if _is_well_formed_id(event_id) else None
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def list_events(self, event_type: Optional[str] = None, search: Optional[str] = None) -> List[Dict[str, Any]]:
        """List events matching the type/search filter, ordered by date."""
        statement = (
            select(Event)
            .where(build_event_filter(event_type, search))
            .order_by(*EVENT_ORDERING)
        )
        with self.database.session() as session:
            return [event.to_dict() for event in session.scalars(statement)]

    def get_event(self, event_id: str) -> Dict[str, Any]:
        with self.database.session() as session:
            return self._load(session, event_id).to_dict()

    def create_event(self, fields: EventFields) -> Dict[str, Any]:
        """
        Validate and store a new event.

        Returns:
            Dict: The stored document including its generated id and createdAt

        Raises:
            EventValidationError: If a required, enum or conditional rule fails
        """
        values = apply_defaults(fields.to_field_map())
        check_event_fields(values)

        with self.database.session() as session:
            event = Event()
            event.apply_fields(values)
            session.add(event)
            session.flush()
            logger.info(f"Created event {event.id} ({event.title})")
            return event.to_dict()

    def update_event(self, event_id: str, fields: EventFields) -> Dict[str, Any]:
        """
        Merge the given fields into a stored event and re-validate the result.

        Only fields present in the payload are changed; an explicit null clears
        the stored value (and then fails validation if the field is required).

        Raises:
            EventNotFoundError: If the event does not exist
            EventValidationError: If the merged event breaks a rule
        """
        changes = fields.to_field_map(partial=True)

        with self.database.session() as session:
            event = self._load(session, event_id)
            merged = apply_defaults({**event.to_fields(), **changes})
            check_event_fields(merged)
            event.apply_fields(merged)
            session.flush()
            logger.info(f"Updated event {event.id}")
            return event.to_dict()

    def delete_event(self, event_id: str) -> None:
        with self.database.session() as session:
            event = self._load(session, event_id)
            session.delete(event)
            logger.info(f"Deleted event {event_id}")

    def replace_all(self, dataset: Iterable[EventFields]) -> List[Dict[str, Any]]:
        """
        Delete every stored event and insert ``dataset`` in its place.

        The whole dataset is validated before anything is deleted, and the
        delete and inserts share one session: a failed insert rolls back the
        delete as well.

        Returns:
            List[Dict]: The inserted documents, in dataset order
        """
        rows = [apply_defaults(fields.to_field_map()) for fields in dataset]
        for values in rows:
            check_event_fields(values)

        with self.database.session() as session:
            session.query(EventTag).delete(synchronize_session=False)
            removed = session.query(Event).delete(synchronize_session=False)

            events = []
            for values in rows:
                event = Event()
                event.apply_fields(values)
                session.add(event)
                events.append(event)
            session.flush()

            logger.info(f"Replaced {removed} events with {len(events)} events")
            return [event.to_dict() for event in events]
