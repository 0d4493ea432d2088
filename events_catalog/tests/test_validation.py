"""Tests for the event validation rules."""

import pytest
from pydantic import ValidationError

from events_catalog.utils.validation import (
    EventValidationError,
    apply_defaults,
    check_event_fields,
    validate_event_fields,
)
from .factories import make_fields, make_online_fields


def field_map(fields):
    return apply_defaults(fields.to_field_map())


def test_valid_offline_event_has_no_violations():
    assert validate_event_fields(field_map(make_fields())) == []


def test_online_event_without_venue_or_address_is_valid():
    assert validate_event_fields(field_map(make_online_fields())) == []


@pytest.mark.parametrize("missing, message", [
    ('venue', 'Please add a venue for offline events'),
    ('address', 'Please add an address for offline events'),
])
def test_offline_event_requires_venue_and_address(missing, message):
    violations = validate_event_fields(field_map(make_fields(**{missing: ...})))
    assert violations == [message]


def test_blank_venue_counts_as_missing():
    violations = validate_event_fields(field_map(make_fields(venue='   ')))
    assert violations == ['Please add a venue for offline events']


def test_missing_required_fields_are_all_reported():
    violations = validate_event_fields(apply_defaults({'type': 'Online'}))
    assert 'Please add an event title' in violations
    assert 'Please add a ticket price' in violations
    assert 'Please add at least one tag' in violations
    assert 'Please specify the event type' not in violations
    assert len(violations) == 8


def test_empty_tag_list_is_rejected():
    violations = validate_event_fields(field_map(make_fields(tags=[])))
    assert violations == ['Please add at least one tag']


def test_unknown_event_type_is_rejected():
    violations = validate_event_fields(field_map(make_fields(type='Hybrid')))
    assert violations == ["'Hybrid' is not a valid event type, expected one of: Online, Offline"]


def test_negative_ticket_price_is_rejected():
    violations = validate_event_fields(field_map(make_fields(ticketPrice=-1)))
    assert violations == ['Ticket price must be at least 0']


def test_free_event_is_valid():
    assert validate_event_fields(field_map(make_fields(ticketPrice=0))) == []


def test_speakers_need_name_and_title():
    fields = make_fields(speakers=[
        {'name': 'Alice Future', 'title': 'CEO'},
        {'name': 'Bob Tech'},
        {'title': 'Host'},
    ])
    assert validate_event_fields(field_map(fields)) == [
        'Speaker 2 is missing a title',
        'Speaker 3 is missing a name',
    ]


def test_defaults_are_applied():
    values = field_map(make_fields(speakers=...))
    assert values['dress_code'] == 'Casual'
    assert values['age_restriction'] == 'None'
    assert values['speakers'] == []


def test_title_is_trimmed():
    assert make_fields(title='  Design Workshop  ').title == 'Design Workshop'


def test_check_event_fields_raises_with_message():
    with pytest.raises(EventValidationError) as excinfo:
        check_event_fields(field_map(make_fields(ticketPrice=-5, venue=...)))

    assert excinfo.value.violations == [
        'Ticket price must be at least 0',
        'Please add a venue for offline events',
    ]
    assert excinfo.value.message == (
        'Event validation failed: Ticket price must be at least 0; '
        'Please add a venue for offline events'
    )


@pytest.mark.parametrize("price", [float('inf'), float('-inf'), float('nan')])
def test_non_finite_ticket_price_is_rejected(price):
    values = apply_defaults(make_fields().to_field_map())
    values['ticket_price'] = price
    assert validate_event_fields(values) == ['Ticket price must be a finite number']


@pytest.mark.parametrize("raw_price", [float('inf'), 'nan', '-Infinity'])
def test_payload_refuses_non_finite_ticket_price(raw_price):
    with pytest.raises(ValidationError):
        make_fields(ticketPrice=raw_price)
