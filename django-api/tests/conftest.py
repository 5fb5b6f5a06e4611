"""Pytest configuration and shared fixtures."""

from datetime import date
from decimal import Decimal
from unittest.mock import create_autospec

import pytest

from eventsproject.domain import Event, Logistics, Participant, Role
from eventsproject.services import EventService
from eventsproject.stores import EventStore, LogisticsStore, ParticipantStore


@pytest.fixture
def event() -> Event:
    return Event(
        id=1,
        description="Conference Tech 2024",
        start_date=date(2024, 6, 1),
        end_date=date(2024, 6, 3),
        cost=Decimal("0"),
        participants=set(),
        logistics=set(),
    )


@pytest.fixture
def participant() -> Participant:
    return Participant(
        id=1,
        last_name="Tounsi",
        first_name="Ahmed",
        role=Role.ORGANIZER,
        events=set(),
    )


@pytest.fixture
def logistics() -> Logistics:
    return Logistics(
        id=1,
        description="Catering Service",
        reserved=True,
        unit_price=Decimal("50.0"),
        quantity=100,
    )


@pytest.fixture
def event_store():
    return create_autospec(EventStore, instance=True)


@pytest.fixture
def participant_store():
    return create_autospec(ParticipantStore, instance=True)


@pytest.fixture
def logistics_store():
    return create_autospec(LogisticsStore, instance=True)


@pytest.fixture
def service(event_store, participant_store, logistics_store) -> EventService:
    return EventService(event_store, participant_store, logistics_store)
