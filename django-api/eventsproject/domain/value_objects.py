"""Domain primitives shared by events, participants and logistics."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Self


class Role(Enum):
    """Role a participant holds in an event."""

    ORGANIZER = "ORGANIZER"
    ANIMATOR = "ANIMATOR"
    GUEST = "GUEST"

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value.upper())


@dataclass(frozen=True)
class DateRange:
    """Closed date interval, both bounds included."""

    start: date
    end: date

    def __contains__(self, day: date | None) -> bool:
        if day is None:
            return False
        return self.start <= day <= self.end
