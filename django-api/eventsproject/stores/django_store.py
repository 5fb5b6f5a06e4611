"""Django ORM implementation of the stores.

Rows are converted to domain models one relation level deep: an event comes
back with its participants (whose ``events`` stay ``None``) and logistics; a
participant comes back with its events (whose ``participants`` stay ``None``).
Relation sets left as ``None`` are not written on save.
"""

from datetime import date

from django.db.models import QuerySet

from eventsproject import models
from eventsproject.domain import Event, Logistics, Participant, Role
from eventsproject.stores.interfaces import EventStore, LogisticsStore, ParticipantStore


def _logistics_to_domain(row: models.Logistics) -> Logistics:
    return Logistics(
        id=row.id,
        description=row.description,
        reserved=row.reserved,
        unit_price=row.unit_price,
        quantity=row.quantity,
    )


def _participant_to_domain(row: models.Participant) -> Participant:
    return Participant(
        id=row.id,
        last_name=row.last_name,
        first_name=row.first_name,
        role=Role(row.role),
    )


def _event_to_domain(row: models.Event, with_participants: bool = True) -> Event:
    event = Event(
        id=row.id,
        description=row.description,
        start_date=row.start_date,
        end_date=row.end_date,
        cost=row.cost,
        logistics={_logistics_to_domain(item) for item in row.logistics.all()},
    )
    if with_participants:
        event.participants = {
            _participant_to_domain(participant)
            for participant in row.participants.all()
        }
    return event


def _write_logistics(logistics: Logistics) -> models.Logistics:
    row = models.Logistics(
        id=logistics.id,
        description=logistics.description,
        reserved=logistics.reserved,
        unit_price=logistics.unit_price,
        quantity=logistics.quantity,
    )
    row.save()
    logistics.id = row.id
    return row


def _write_participant(participant: Participant) -> models.Participant:
    row = models.Participant(
        id=participant.id,
        last_name=participant.last_name,
        first_name=participant.first_name,
        role=participant.role.value,
    )
    row.save()
    participant.id = row.id
    return row


def _write_event(event: Event) -> models.Event:
    row = models.Event(
        id=event.id,
        description=event.description,
        start_date=event.start_date,
        end_date=event.end_date,
        cost=event.cost,
    )
    row.save()
    event.id = row.id
    return row


def _save_event_graph(event: Event) -> models.Event:
    row = _write_event(event)
    if event.participants is not None:
        for participant in event.participants:
            if participant.id is None:
                _write_participant(participant)
        row.participants.set([p.id for p in event.participants])
    if event.logistics is not None:
        for item in event.logistics:
            if item.id is None:
                _write_logistics(item)
        row.logistics.set([item.id for item in event.logistics])
    return row


def _events_with_relations() -> QuerySet[models.Event]:
    return models.Event.objects.prefetch_related("participants", "logistics")


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def get_by_id(self, event_id: int) -> Event | None:
        row = _events_with_relations().filter(id=event_id).first()
        return _event_to_domain(row) if row else None

    def find_by_description(self, description: str) -> Event | None:
        row = _events_with_relations().filter(description=description).first()
        return _event_to_domain(row) if row else None

    def find_by_start_date_between(self, start: date, end: date) -> list[Event]:
        rows = _events_with_relations().filter(start_date__range=(start, end))
        return [_event_to_domain(row) for row in rows]

    def find_by_participant(
        self, last_name: str, first_name: str, role: Role
    ) -> list[Event]:
        # A single filter() call keeps all three conditions on the same participant.
        rows = (
            _events_with_relations()
            .filter(
                participants__last_name=last_name,
                participants__first_name=first_name,
                participants__role=role.value,
            )
            .distinct()
        )
        return [_event_to_domain(row) for row in rows]

    def save(self, event: Event) -> Event:
        _save_event_graph(event)
        return event


class DjangoParticipantStore(ParticipantStore):
    """Relational participant store using Django ORM."""

    def get_by_id(self, participant_id: int) -> Participant | None:
        row = models.Participant.objects.filter(id=participant_id).first()
        if row is None:
            return None
        participant = _participant_to_domain(row)
        participant.events = {
            _event_to_domain(event_row, with_participants=False)
            for event_row in row.events.prefetch_related("logistics")
        }
        return participant

    def save(self, participant: Participant) -> Participant:
        row = _write_participant(participant)
        if participant.events is not None:
            for event in participant.events:
                if event.id is None:
                    _save_event_graph(event)
            row.events.set([event.id for event in participant.events])
        return participant


class DjangoLogisticsStore(LogisticsStore):
    """Relational logistics store using Django ORM."""

    def save(self, logistics: Logistics) -> Logistics:
        _write_logistics(logistics)
        return logistics
