from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from rectpath.domain.entities.geometry import Point, Vector

Pt = Point | tuple[float, float]


def _to_point(p: Pt) -> Point:
    return p if isinstance(p, Point) else Point(float(p[0]), float(p[1]))


class MovementDirection(Enum):
    FORWARD = "forward"  # destination coordinate is greater
    BACKWARD = "backward"
    NONE = "none"

    @classmethod
    def of(cls, a: float, b: float) -> "MovementDirection":
        if a < b:
            return cls.FORWARD
        if a > b:
            return cls.BACKWARD
        return cls.NONE


@dataclass(frozen=True)
class TravelDirection:
    """Per-axis sense of travel, frozen from the original start to the final destination."""

    x: MovementDirection
    y: MovementDirection

    @classmethod
    def between(cls, start: Point, destination: Point) -> "TravelDirection":
        return cls(
            MovementDirection.of(start.x, destination.x),
            MovementDirection.of(start.y, destination.y),
        )

    @property
    def stationary(self) -> bool:
        return self.x is MovementDirection.NONE and self.y is MovementDirection.NONE


def _reached(position: Point, waypoint: Point) -> bool:
    # integer truncation on purpose: one unit per tick rarely lands exactly
    return int(position.x) == int(waypoint.x) and int(position.y) == int(waypoint.y)


class MovementHandler:
    """
    Walks a point along a waypoint queue, one unit of distance per poll().

    The queue is consumed front to back; the last waypoint is the destination.
    """

    def __init__(self, position: Pt, waypoints: Iterable[Pt]):
        self._position = _to_point(position)
        self._path: deque[Point] = deque(_to_point(w) for w in waypoints)
        self._step: Vector | None = None

    @classmethod
    def start(cls, current: Pt, destination: Pt, obstacles: Iterable = (), *, planner=None):
        """
        Without obstacles the queue is just the destination. With obstacles the
        waypoints come from `planner`, which is then required; planning errors
        propagate to the caller.
        """
        current, destination = _to_point(current), _to_point(destination)
        obstacles = list(obstacles)
        if planner is None:
            if obstacles:
                raise ValueError("a planner is required to route around obstacles")
            return cls(current, [destination])
        return cls(current, planner.plan(current, destination, obstacles))

    @property
    def position(self) -> Point:
        return self._position

    @property
    def waypoints(self) -> list[Point]:
        return list(self._path)

    @property
    def finished(self) -> bool:
        return not self._path

    def poll(self) -> Point | None:
        if not self._path:
            return None

        if _reached(self._position, self._path[0]):
            while self._path and _reached(self._position, self._path[0]):
                self._path.popleft()
            self._step = None
            if not self._path:
                return None

        if self._step is None:
            self._step = Vector.between(self._position, self._path[0]).unit()

        nxt = self._position + self._step
        if self._step.dot(Vector.between(nxt, self._path[0])) <= 0:
            nxt = self._path[0]  # stepped onto or past the waypoint
        self._position = nxt
        return self._position
