from eventsproject.domain.models import Event, Logistics, Participant
from eventsproject.domain.value_objects import DateRange, Role

__all__ = [
    "Event",
    "Logistics",
    "Participant",
    "Role",
    "DateRange",
]
