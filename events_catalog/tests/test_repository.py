"""Tests for the event repository and the seed loader."""

import uuid
from datetime import date

import pytest

from events_catalog.db import EventNotFoundError, SEED_EVENTS, seed_events
from events_catalog.models.fields import EventFields
from events_catalog.utils.validation import EventValidationError
from .factories import make_fields, make_online_fields


def test_create_assigns_id_created_at_and_defaults(repository):
    event = repository.create_event(make_fields())

    assert uuid.UUID(event['id'])
    assert event['createdAt']
    assert event['date'] == '2023-07-13'
    assert event['ticketPrice'] == 150
    assert event['dressCode'] == 'Casual'
    assert event['ageRestriction'] == 'None'
    assert event['speakers'] == [{'name': 'Alice Future', 'title': 'CEO of Tomorrow'}]


def test_online_event_omits_venue_and_address(repository):
    event = repository.create_event(make_online_fields())
    assert 'venue' not in event
    assert 'address' not in event


def test_get_returns_the_stored_document(repository):
    created = repository.create_event(make_fields(tags=['b', 'a', 'c']))
    assert repository.get_event(created['id']) == created
    assert repository.get_event(created['id'])['tags'] == ['b', 'a', 'c']


def test_invalid_create_stores_nothing(repository):
    with pytest.raises(EventValidationError):
        repository.create_event(make_fields(venue=...))
    assert repository.list_events() == []


@pytest.mark.parametrize("event_id", [str(uuid.uuid4()), 'not-an-id', ''])
def test_unknown_ids_are_not_found(repository, event_id):
    with pytest.raises(EventNotFoundError):
        repository.get_event(event_id)
    with pytest.raises(EventNotFoundError):
        repository.update_event(event_id, EventFields(title='New title'))
    with pytest.raises(EventNotFoundError):
        repository.delete_event(event_id)


def test_update_merges_only_the_given_fields(repository):
    created = repository.create_event(make_fields())

    updated = repository.update_event(created['id'], EventFields(title='  Renamed  ', ticketPrice=0))

    assert updated['title'] == 'Renamed'
    assert updated['ticketPrice'] == 0
    assert updated['venue'] == 'X'
    assert updated['createdAt'] == created['createdAt']
    assert updated['id'] == created['id']
    assert repository.get_event(created['id']) == updated


def test_update_revalidates_the_merged_event(repository):
    created = repository.create_event(make_online_fields())

    with pytest.raises(EventValidationError) as excinfo:
        repository.update_event(created['id'], EventFields(type='Offline'))

    assert excinfo.value.violations == [
        'Please add a venue for offline events',
        'Please add an address for offline events',
    ]
    assert repository.get_event(created['id'])['type'] == 'Online'


def test_update_to_online_can_clear_venue_and_address(repository):
    created = repository.create_event(make_fields())

    updated = repository.update_event(
        created['id'],
        EventFields.model_validate({'type': 'Online', 'venue': None, 'address': None}),
    )

    assert updated['type'] == 'Online'
    assert 'venue' not in updated


def test_update_cannot_null_a_required_field(repository):
    created = repository.create_event(make_fields())
    with pytest.raises(EventValidationError):
        repository.update_event(created['id'], EventFields.model_validate({'title': None}))


def test_update_replaces_tags(repository):
    created = repository.create_event(make_fields())
    repository.update_event(created['id'], EventFields(tags=['Cloud']))

    assert repository.get_event(created['id'])['tags'] == ['Cloud']
    assert repository.list_events(search='networking') == []


def test_delete_removes_the_event(repository):
    created = repository.create_event(make_fields())
    repository.delete_event(created['id'])

    with pytest.raises(EventNotFoundError):
        repository.get_event(created['id'])
    assert repository.list_events(search='technology') == []


def test_seed_replaces_everything(repository):
    repository.create_event(make_fields(title='Leftover'))

    inserted = seed_events(repository)
    listed = repository.list_events()

    assert len(inserted) == len(SEED_EVENTS)
    assert sorted(e['title'] for e in listed) == sorted(f['title'] for f in SEED_EVENTS)
    assert 'Leftover' not in [event['title'] for event in listed]


def test_seed_is_an_idempotent_reset(repository):
    seed_events(repository)
    seed_events(repository)
    assert len(repository.list_events()) == len(SEED_EVENTS)


def test_seed_dataset_covers_types_prices_and_speaker_counts():
    assert {fixture['type'] for fixture in SEED_EVENTS} == {'Online', 'Offline'}
    assert 0 in {fixture['ticketPrice'] for fixture in SEED_EVENTS}
    assert {len(fixture['speakers']) for fixture in SEED_EVENTS} >= {0, 1, 2, 3}
    assert all(isinstance(fixture['date'], date) for fixture in SEED_EVENTS)


def test_replace_all_validates_before_deleting(repository):
    repository.create_event(make_fields(title='Keep me'))

    with pytest.raises(EventValidationError):
        repository.replace_all([make_online_fields(), make_fields(address=...)])

    assert [event['title'] for event in repository.list_events()] == ['Keep me']
