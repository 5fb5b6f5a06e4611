"""Unit tests for domain models and primitives.

Run with: pytest tests/test_domain.py -v
"""

from datetime import date
from decimal import Decimal

import pytest

from eventsproject.domain import DateRange, Event, Logistics, Participant, Role
from eventsproject.domain.errors import (
    DomainError,
    ErrorCode,
    ParticipantNotFoundError,
)


class TestLogistics:
    """Tests for Logistics."""

    def test_total_price_is_unit_price_times_quantity(self):
        """total_price multiplies unit price by quantity."""
        item = Logistics(unit_price=Decimal("12.50"), quantity=4)
        assert item.total_price == Decimal("50")

    def test_negative_quantity_is_not_rejected(self):
        """Malformed values pass through unchecked."""
        item = Logistics(unit_price=Decimal("10"), quantity=-2)
        assert item.total_price == Decimal("-20")


class TestEvent:
    """Tests for Event."""

    def test_defaults(self):
        """A new event costs nothing and has no relation sets yet."""
        event = Event()
        assert event.cost == Decimal("0")
        assert event.participants is None
        assert event.logistics is None

    def test_reserved_cost_ignores_free_items(self):
        """reserved_cost sums reserved items only."""
        event = Event(
            logistics={
                Logistics(reserved=True, unit_price=Decimal("50"), quantity=10),
                Logistics(reserved=True, unit_price=Decimal("100"), quantity=5),
                Logistics(reserved=False, unit_price=Decimal("999"), quantity=1),
            }
        )
        assert event.reserved_cost() == Decimal("1000")

    def test_reserved_logistics_without_set(self):
        """An event without logistics has no reserved items."""
        assert Event().reserved_logistics() == []

    def test_entities_hash_by_identity(self):
        """Two events with the same fields are distinct set members."""
        assert len({Event(id=1), Event(id=1)}) == 2

    def test_repr_does_not_follow_relations(self):
        """repr stays finite on cyclic event/participant graphs."""
        event = Event(id=1, description="Cyclic")
        participant = Participant(id=1, events={event})
        event.participants = {participant}
        assert "participants" not in repr(event)
        assert "events" not in repr(participant)


class TestRole:
    """Tests for Role."""

    def test_from_string_is_case_insensitive(self):
        """Role.from_string accepts lower-case names."""
        assert Role.from_string("organizer") is Role.ORGANIZER

    def test_from_string_rejects_unknown_role(self):
        """Role.from_string raises ValueError for unknown names."""
        with pytest.raises(ValueError):
            Role.from_string("speaker")


class TestDateRange:
    """Tests for DateRange."""

    def test_bounds_are_inclusive(self):
        """Both bounds belong to the range."""
        window = DateRange(date(2024, 6, 1), date(2024, 6, 30))
        assert date(2024, 6, 1) in window
        assert date(2024, 6, 30) in window
        assert date(2024, 7, 1) not in window

    def test_missing_date_is_outside(self):
        """None is never in a range."""
        assert None not in DateRange(date(2024, 6, 1), date(2024, 6, 30))


class TestDomainErrors:
    """Tests for domain errors."""

    def test_participant_not_found_message(self):
        """str() renders the code and the user-safe message."""
        error = ParticipantNotFoundError(5)
        assert isinstance(error, DomainError)
        assert error.code is ErrorCode.PARTICIPANT_NOT_FOUND
        assert error.participant_id == 5
        assert str(error) == "PARTICIPANT_NOT_FOUND: Participant not found"
