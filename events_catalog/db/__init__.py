"""Database package initialization.

This module exposes the public interface of the database package.
"""

from .db_core import (
    Database,
    DatabaseConfig,
    DatabaseError,
    ConnectionError,
    SessionError,
)
from .queries import build_event_filter
from .repository import EventRepository, EventNotFoundError
from .seed_data import SEED_EVENTS, seed_events

__all__ = [
    # Core database classes
    'Database',
    'DatabaseConfig',

    # Exceptions
    'DatabaseError',
    'ConnectionError',
    'SessionError',
    'EventNotFoundError',

    # Events
    'EventRepository',
    'build_event_filter',
    'SEED_EVENTS',
    'seed_events',
]
