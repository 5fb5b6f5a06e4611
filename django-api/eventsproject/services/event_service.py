"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Wire relations between events, participants and logistics in memory
- Compute aggregates such as event cost
- Return domain models or raise domain errors

Only the entity passed to a store's ``save`` is persisted. Participant sides
of an event assignment are updated in memory and are not saved here.
"""

import logging
from datetime import date

from eventsproject.domain.errors import EventNotFoundError, ParticipantNotFoundError
from eventsproject.domain.models import Event, Logistics, Participant
from eventsproject.domain.value_objects import Role
from eventsproject.stores.interfaces import EventStore, LogisticsStore, ParticipantStore

logger = logging.getLogger(__name__)

# Identity of the organizer whose events are costed by calculate_costs.
ORGANIZER_LAST_NAME = "Tounsi"
ORGANIZER_FIRST_NAME = "Ahmed"
ORGANIZER_ROLE = Role.ORGANIZER


class EventService:
    """Service for event, participant and logistics operations."""

    def __init__(
        self,
        event_store: EventStore,
        participant_store: ParticipantStore,
        logistics_store: LogisticsStore,
    ) -> None:
        self._events = event_store
        self._participants = participant_store
        self._logistics = logistics_store

    def add_participant(self, participant: Participant) -> Participant:
        """Persist a participant and return the stored entity."""
        return self._participants.save(participant)

    def assign_participant(self, event: Event, participant_id: int) -> Event:
        """Link the participant with the given id and the event, then save the event.

        Both relation sets are updated in memory; the participant is not saved.

        Raises:
            ParticipantNotFoundError: If the participant does not exist.
        """
        participant = self._get_participant(participant_id)
        self._link(participant, event)
        if event.participants is None:
            event.participants = set()
        if not any(listed.id == participant.id for listed in event.participants):
            event.participants.add(participant)
        return self._events.save(event)

    def assign_event_participants(self, event: Event) -> Event:
        """Attach an event to every participant already listed on it, then save the event.

        Each listed participant is resolved to its stored record by id.

        Raises:
            ParticipantNotFoundError: If a listed participant does not exist.
        """
        for listed in event.participants or ():
            participant = self._get_participant(listed.id)
            self._link(participant, event)
        return self._events.save(event)

    def assign_logistics(self, logistics: Logistics, event_description: str) -> Logistics:
        """Attach a logistics item to the event with the given description.

        Both the item and the event are saved; the saved item is returned.

        Raises:
            EventNotFoundError: If no event has this description.
        """
        event = self._events.find_by_description(event_description)
        if event is None:
            raise EventNotFoundError(event_description)
        if event.logistics is None:
            event.logistics = set()
        event.logistics.add(logistics)
        saved = self._logistics.save(logistics)
        self._events.save(event)
        logger.debug("Logistics %s attached to event %r", saved.id, event.description)
        return saved

    def get_reserved_logistics(self, start: date, end: date) -> list[Logistics] | None:
        """Return reserved logistics of events starting within [start, end].

        Returns None as soon as a matching event has no logistics at all.
        """
        events = self._events.find_by_start_date_between(start, end)
        reserved: list[Logistics] = []
        for event in events:
            if not event.logistics:
                logger.debug("Event %r has no logistics", event.description)
                return None
            reserved.extend(event.reserved_logistics())
        return reserved

    def calculate_costs(self) -> None:
        """Recompute and save the cost of each event run by the organizer."""
        events = self._events.find_by_participant(
            ORGANIZER_LAST_NAME, ORGANIZER_FIRST_NAME, ORGANIZER_ROLE
        )
        for event in events:
            event.cost = event.reserved_cost()
            self._events.save(event)
            logger.info("Cost of event %r is %s", event.description, event.cost)

    def _get_participant(self, participant_id: int | None) -> Participant:
        participant = (
            self._participants.get_by_id(participant_id)
            if participant_id is not None
            else None
        )
        if participant is None:
            raise ParticipantNotFoundError(participant_id)
        return participant

    @staticmethod
    def _link(participant: Participant, event: Event) -> None:
        if participant.events is None:
            participant.events = set()
        participant.events.add(event)
        logger.debug(
            "Participant %s linked to event %r", participant.id, event.description
        )
