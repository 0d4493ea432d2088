"""Events router module.

Handlers are plain functions so FastAPI runs them in its threadpool and
storage calls never block the event loop. Each handler maps every fault it
can meet to a response itself.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...db import EventNotFoundError, EventRepository, seed_events
from ...models.fields import EventFields
from ...utils.validation import EventValidationError
from ..dependencies import get_event_repository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/events", tags=["events"])

EVENT_NOT_FOUND = "Event not found"


def _storage_failure(action: str, error: Exception) -> HTTPException:
    # Driver errors can carry SQL and bound values; they stay in the log
    logger.error(f"Failed to {action}: {error}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Database error: failed to {action}"
    )


@router.post("/seed", status_code=status.HTTP_201_CREATED)
def seed(repository: EventRepository = Depends(get_event_repository)):
    """Reset the catalog to the demonstration dataset."""
    try:
        events = seed_events(repository)
    except Exception as e:
        raise _storage_failure("seed events", e)
    return {"success": True, "count": len(events), "data": events}


@router.get("")
def list_events(
    event_type: Optional[str] = Query(None, alias="type"),
    search: Optional[str] = None,
    repository: EventRepository = Depends(get_event_repository)
):
    """
    List events ordered by date.

    ``type`` filters on Online/Offline ('Both' or nothing means all types);
    ``search`` matches title, host or any tag, ignoring case.
    """
    try:
        events = repository.list_events(event_type=event_type, search=search)
    except Exception as e:
        raise _storage_failure("list events", e)
    return {"success": True, "count": len(events), "data": events}


@router.get("/{event_id}")
def get_event(event_id: str, repository: EventRepository = Depends(get_event_repository)):
    """Get a single event by ID."""
    try:
        event = repository.get_event(event_id)
    except EventNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=EVENT_NOT_FOUND)
    except Exception as e:
        raise _storage_failure(f"get event {event_id}", e)
    return {"success": True, "data": event}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_event(fields: EventFields, repository: EventRepository = Depends(get_event_repository)):
    """Create a new event."""
    try:
        event = repository.create_event(fields)
    except EventValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except Exception as e:
        raise _storage_failure("create event", e)
    return {"success": True, "data": event}


@router.put("/{event_id}")
def update_event(
    event_id: str,
    fields: EventFields,
    repository: EventRepository = Depends(get_event_repository)
):
    """Update an existing event; the merged event is validated again."""
    try:
        event = repository.update_event(event_id, fields)
    except EventNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=EVENT_NOT_FOUND)
    except EventValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except Exception as e:
        raise _storage_failure(f"update event {event_id}", e)
    return {"success": True, "data": event}


@router.delete("/{event_id}")
def delete_event(event_id: str, repository: EventRepository = Depends(get_event_repository)):
    """Delete an event."""
    try:
        repository.delete_event(event_id)
    except EventNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=EVENT_NOT_FOUND)
    except Exception as e:
        raise _storage_failure(f"delete event {event_id}", e)
    return {"success": True, "data": {}}
