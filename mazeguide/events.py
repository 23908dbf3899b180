"""Plain event records handed to the presentation layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Type, TypeVar, Union

from .base import Coord
from .navigation import MoveOutcome


@dataclass(frozen=True)
class ChargeBegin:
    kind = "charge_begin"

    def to_dict(self) -> dict:
        return {"event": self.kind}


@dataclass(frozen=True)
class ChargeRelease:
    distance: int
    kind = "charge_release"

    def to_dict(self) -> dict:
        return {"event": self.kind, "distance": self.distance}


@dataclass(frozen=True)
class Pulse:
    index: int
    delay: float
    intensity: float
    kind = "pulse"

    def to_dict(self) -> dict:
        return {
            "event": self.kind,
            "index": self.index,
            "delay": self.delay,
            "intensity": self.intensity,
        }


@dataclass(frozen=True)
class ArrivalFlash:
    index: int
    kind = "arrival_flash"

    def to_dict(self) -> dict:
        return {"event": self.kind, "index": self.index}


@dataclass(frozen=True)
class Cancelled:
    kind = "cancelled"

    def to_dict(self) -> dict:
        return {"event": self.kind}


@dataclass(frozen=True)
class Moved:
    outcome: MoveOutcome
    kind = "move"

    def to_dict(self) -> dict:
        return {"event": self.kind, **self.outcome.to_dict()}


@dataclass(frozen=True)
class GoalCollected:
    position: Coord
    kind = "goal_collected"

    def to_dict(self) -> dict:
        return {"event": self.kind, "position": list(self.position)}


GuidanceEvent = Union[ChargeBegin, ChargeRelease, Pulse, ArrivalFlash, Cancelled]
Event = Union[GuidanceEvent, Moved, GoalCollected]
EventSink = Callable[[Event], None]

E = TypeVar("E")


def discard(event: Event) -> None:
    """Sink that drops every event."""


class EventLog:
    """Sink that records events in emission order."""

    def __init__(self) -> None:
        self.events: List[Event] = []

    def __call__(self, event: Event) -> None:
        self.events.append(event)

    def of_type(self, event_type: Type[E]) -> List[E]:
        return [event for event in self.events if isinstance(event, event_type)]

    def kinds(self) -> List[str]:
        return [event.kind for event in self.events]

    def clear(self) -> None:
        self.events.clear()


__all__ = [
    "ChargeBegin",
    "ChargeRelease",
    "Pulse",
    "ArrivalFlash",
    "Cancelled",
    "Moved",
    "GoalCollected",
    "GuidanceEvent",
    "Event",
    "EventSink",
    "EventLog",
    "discard",
]
