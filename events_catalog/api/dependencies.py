"""Request-scoped dependencies for the API routes."""

from fastapi import Request

from ..db.repository import EventRepository


def get_event_repository(request: Request) -> EventRepository:
    """Event repository built for this application at startup."""
    return request.app.state.event_repository
