"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. ``save`` is an upsert:
entities without an id are inserted and receive one.
"""

from abc import ABC, abstractmethod
from datetime import date

from eventsproject.domain import Event, Logistics, Participant, Role


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def get_by_id(self, event_id: int) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def find_by_description(self, description: str) -> Event | None:
        """Return the event with this exact description, or None."""
        ...

    @abstractmethod
    def find_by_start_date_between(self, start: date, end: date) -> list[Event]:
        """Return events whose start date lies in [start, end]."""
        ...

    @abstractmethod
    def find_by_participant(
        self, last_name: str, first_name: str, role: Role
    ) -> list[Event]:
        """Return events attended by a participant matching all three attributes."""
        ...

    @abstractmethod
    def save(self, event: Event) -> Event:
        """Persist an event and return the persisted entity."""
        ...


class ParticipantStore(ABC):
    """Interface for participant persistence operations."""

    @abstractmethod
    def get_by_id(self, participant_id: int) -> Participant | None:
        """Return a participant by ID, or None if not found."""
        ...

    @abstractmethod
    def save(self, participant: Participant) -> Participant:
        """Persist a participant and return the persisted entity."""
        ...


class LogisticsStore(ABC):
    """Interface for logistics persistence operations."""

    @abstractmethod
    def save(self, logistics: Logistics) -> Logistics:
        """Persist a logistics item and return the persisted entity."""
        ...
