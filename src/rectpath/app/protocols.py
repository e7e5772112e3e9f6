from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from rectpath.domain.entities.geometry import Path, Point
from rectpath.domain.entities.rectangle import Rect


# ------------- Board collaborators --------------------
@runtime_checkable
class Obstacle(Protocol):
    """
    Anything the planner can route around.
    Only `blocking` obstacles are considered; coordinates are board units.
    """

    @property
    def rect(self) -> Rect: ...
    @property
    def blocking(self) -> bool: ...


# ------------- Mechanics --------------------
@runtime_checkable
class PathPlanner(Protocol):
    """
    Responsibilities:
      • Turn (start, destination, obstacles) into an ordered waypoint list.
      • The destination is always the last waypoint; start is never included.
    """

    def plan(self, start: Point, destination: Point, obstacles: Iterable = ()) -> list[Point]: ...
    def route(self, start: Point, destination: Point, obstacles: Iterable = ()) -> Path: ...


@runtime_checkable
class Stepper(Protocol):
    """One tick of movement: the next position, or None once the route is done."""

    @property
    def position(self) -> Point: ...
    def poll(self) -> Point | None: ...
