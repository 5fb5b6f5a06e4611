"""Domain models representing persisted state.

These are plain mutable objects with no persistence rules.
Django ORM models are in eventsproject/models.py (persistence layer).

Relation sets use ``None`` for "not initialized". Entities hash by identity
so the same object can be shared between the sets of related entities.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from eventsproject.domain.value_objects import Role


@dataclass(eq=False)
class Logistics:
    """Domain representation of a reservable logistics item."""

    id: int | None = None
    description: str = ""
    reserved: bool = False
    unit_price: Decimal = Decimal("0")
    quantity: int = 0

    @property
    def total_price(self) -> Decimal:
        return self.unit_price * self.quantity


@dataclass(eq=False)
class Event:
    """Domain representation of an Event."""

    id: int | None = None
    description: str = ""
    start_date: date | None = None
    end_date: date | None = None
    cost: Decimal = Decimal("0")
    participants: set["Participant"] | None = field(default=None, repr=False)
    logistics: set[Logistics] | None = field(default=None, repr=False)

    def reserved_logistics(self) -> list[Logistics]:
        """Return the reserved items of this event, in set iteration order."""
        return [item for item in self.logistics or () if item.reserved]

    def reserved_cost(self) -> Decimal:
        """Sum of unit price times quantity over reserved items."""
        return sum(
            (item.total_price for item in self.reserved_logistics()), Decimal("0")
        )


@dataclass(eq=False)
class Participant:
    """Domain representation of a Participant."""

    id: int | None = None
    last_name: str = ""
    first_name: str = ""
    role: Role = Role.GUEST
    events: set[Event] | None = field(default=None, repr=False)
