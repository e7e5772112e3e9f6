# app/events.py
from dataclasses import dataclass

from rectpath.domain.entities.geometry import Point
from rectpath.sim.event import BaseEvent


# Translated user input (board coordinates, already mapped from device events)
@dataclass(order=True)
class CursorMoved(BaseEvent):
    x: float
    y: float

    @property
    def pos(self) -> Point:
        return Point(self.x, self.y)


@dataclass(order=True)
class LeftClick(BaseEvent):
    x: float
    y: float

    @property
    def pos(self) -> Point:
        return Point(self.x, self.y)


@dataclass(order=True)
class RightClick(BaseEvent):
    x: float
    y: float

    @property
    def pos(self) -> Point:
        return Point(self.x, self.y)


# Movement lifecycle
@dataclass(order=True)
class MoveStep(BaseEvent):
    object_id: int
    task_id: int  # versioning to make stale steps harmless


@dataclass(order=True)
class SelectionChanged(BaseEvent):
    object_id: int | None
    previous_id: int | None = None


@dataclass(order=True)
class MoveRequested(BaseEvent):
    object_id: int
    task_id: int
    destination: tuple[float, float]
    waypoints: int


@dataclass(order=True)
class MoveRejected(BaseEvent):
    object_id: int | None
    reason: str
    destination: tuple[float, float] | None = None


@dataclass(order=True)
class MoveFinished(BaseEvent):
    object_id: int
    task_id: int
    position: tuple[float, float]
    ticks: int
