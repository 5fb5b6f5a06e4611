from eventsproject.stores.interfaces import EventStore, LogisticsStore, ParticipantStore

__all__ = [
    "EventStore",
    "ParticipantStore",
    "LogisticsStore",
]
