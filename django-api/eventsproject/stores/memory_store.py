"""In-memory implementation of the stores.

Keeps domain objects in dicts keyed by id and hands back the very objects
that were saved.
"""

from datetime import date

from eventsproject.domain import DateRange, Event, Logistics, Participant, Role
from eventsproject.stores.interfaces import EventStore, LogisticsStore, ParticipantStore


class InMemoryEventStore(EventStore):
    """Dict-backed event store."""

    def __init__(self) -> None:
        self.events: dict[int, Event] = {}

    def get_by_id(self, event_id: int) -> Event | None:
        return self.events.get(event_id)

    def find_by_description(self, description: str) -> Event | None:
        for event in self.events.values():
            if event.description == description:
                return event
        return None

    def find_by_start_date_between(self, start: date, end: date) -> list[Event]:
        window = DateRange(start, end)
        return [event for event in self.events.values() if event.start_date in window]

    def find_by_participant(
        self, last_name: str, first_name: str, role: Role
    ) -> list[Event]:
        return [
            event
            for event in self.events.values()
            if any(
                p.last_name == last_name and p.first_name == first_name and p.role == role
                for p in event.participants or ()
            )
        ]

    def save(self, event: Event) -> Event:
        if event.id is None:
            event.id = max(self.events, default=0) + 1
        self.events[event.id] = event
        return event


class InMemoryParticipantStore(ParticipantStore):
    """Dict-backed participant store."""

    def __init__(self) -> None:
        self.participants: dict[int, Participant] = {}

    def get_by_id(self, participant_id: int) -> Participant | None:
        return self.participants.get(participant_id)

    def save(self, participant: Participant) -> Participant:
        if participant.id is None:
            participant.id = max(self.participants, default=0) + 1
        self.participants[participant.id] = participant
        return participant


class InMemoryLogisticsStore(LogisticsStore):
    """Dict-backed logistics store."""

    def __init__(self) -> None:
        self.logistics: dict[int, Logistics] = {}

    def save(self, logistics: Logistics) -> Logistics:
        if logistics.id is None:
            logistics.id = max(self.logistics, default=0) + 1
        self.logistics[logistics.id] = logistics
        return logistics
