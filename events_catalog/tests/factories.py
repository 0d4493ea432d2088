"""Event payload builders for tests."""

from events_catalog.models.fields import EventFields


def make_event_payload(**overrides):
    """A valid offline event body, with camelCase keys as clients send it.

    Pass ``...`` as a value to leave that field out.
    """
    payload = {
        'title': 'Tech Conference 2023',
        'type': 'Offline',
        'date': '2023-07-13',
        'time': '09:00 AM - 05:00 PM',
        'image': 'https://picsum.photos/seed/techconf/400/300.jpg',
        'hostedBy': 'Tech Innovators Inc.',
        'venue': 'X',
        'address': 'Y',
        'ticketPrice': 150,
        'speakers': [{'name': 'Alice Future', 'title': 'CEO of Tomorrow'}],
        'description': 'A full-day conference on the latest in technology.',
        'tags': ['Technology', 'Networking'],
    }
    payload.update(overrides)
    return {key: value for key, value in payload.items() if value is not ...}


def make_online_payload(**overrides):
    """A valid online event body (no venue or address)."""
    fields = {
        'title': 'React Online Summit',
        'type': 'Online',
        'hostedBy': 'React Community',
        'ticketPrice': 0,
        'tags': ['React', 'JavaScript'],
        'venue': ...,
        'address': ...,
    }
    fields.update(overrides)
    return make_event_payload(**fields)


def make_fields(**overrides) -> EventFields:
    return EventFields.model_validate(make_event_payload(**overrides))


def make_online_fields(**overrides) -> EventFields:
    return EventFields.model_validate(make_online_payload(**overrides))
