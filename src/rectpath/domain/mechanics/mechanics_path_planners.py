from collections.abc import Iterable

from rectpath.app.protocols import PathPlanner
from rectpath.domain.entities.geometry import Path, Point, line_from_points
from rectpath.domain.entities.motion import MovementDirection, TravelDirection
from rectpath.domain.entities.rectangle import (
    Rect,
    RectangleVertices,
    edge_crossings,
    point_in_rectangle,
)
from rectpath.domain.errors import NoPathFoundError, PlanningPreconditionError

F, B, N = MovementDirection.FORWARD, MovementDirection.BACKWARD, MovementDirection.NONE

# (direction_x, direction_y) -> (first, second) corner the route hugs; y grows downward.
# Axis-aligned travel slides along the side parallel to it, diagonal travel turns at
# the corner next to the leading one and follows the far side.
_DETOUR_CORNERS = {
    (F, N): ("upper_left", "upper_right"),
    (B, N): ("upper_right", "upper_left"),
    (N, F): ("upper_left", "lower_left"),
    (N, B): ("lower_left", "upper_left"),
    (F, F): ("upper_right", "lower_right"),
    (F, B): ("lower_right", "upper_right"),
    (B, F): ("upper_left", "lower_left"),
    (B, B): ("lower_left", "upper_left"),
}

# Diagonal travel starting level with the obstacle (beside it on the x axis):
# pass along the top or bottom side, whichever faces the destination.
_LEVEL_CORNERS = {
    (F, F): ("lower_left", "lower_right"),
    (F, B): ("upper_left", "upper_right"),
    (B, F): ("lower_right", "lower_left"),
    (B, B): ("upper_right", "upper_left"),
}


def detour_corners(
    rect: Rect, direction: TravelDirection, current: Point | None = None
) -> tuple[Point, Point]:
    key = (direction.x, direction.y)
    table = _DETOUR_CORNERS
    if current is not None and key in _LEVEL_CORNERS and rect.top < current.y < rect.bottom:
        table = _LEVEL_CORNERS
    try:
        first, second = table[key]
    except KeyError:
        raise PlanningPreconditionError(
            f"no detour for direction ({direction.x.name}, {direction.y.name})"
        ) from None
    v: RectangleVertices = rect.vertices()
    return getattr(v, first), getattr(v, second)


def _as_rect(obstacle) -> Rect | None:
    """Accepts GameObject-likes (rect + blocking), (id, obj) pairs or bare Rects."""
    if isinstance(obstacle, tuple):
        obstacle = obstacle[1]
    if not getattr(obstacle, "blocking", True):
        return None
    return obstacle if isinstance(obstacle, Rect) else obstacle.rect


def _ahead_on_axis(
    direction: MovementDirection, current: float, target: float, low: float, high: float
) -> bool:
    if direction is F:
        return current < low < target
    if direction is B:
        return target < high < current
    return low <= current <= high


def _overlaps_on_axis(current: float, target: float, low: float, high: float) -> bool:
    # open span of the leg against the open extent of the obstacle
    lo, hi = min(current, target), max(current, target)
    if lo == hi:
        return low < lo < high
    return max(lo, low) < min(hi, high)


def is_on_path(rect: Rect, current: Point, target: Point, direction: TravelDirection) -> bool:
    """
    False when the obstacle cannot be in the way of the leg current -> target.

    Axis-aligned travel needs the obstacle's leading edge ahead of `current`.
    Diagonal travel needs the obstacle's extent to overlap the leg on both axes,
    which also catches obstacles the leg starts level with.
    """
    if direction.x is N or direction.y is N:
        return _ahead_on_axis(
            direction.x, current.x, target.x, rect.left, rect.right
        ) and _ahead_on_axis(direction.y, current.y, target.y, rect.top, rect.bottom)
    return _overlaps_on_axis(current.x, target.x, rect.left, rect.right) and _overlaps_on_axis(
        current.y, target.y, rect.top, rect.bottom
    )


def crosses(rect: Rect, current: Point, target: Point) -> bool:
    line = line_from_points(current, target)
    return bool(edge_crossings(line, rect.position, rect.size))


def find_path(
    start: Point,
    destination: Point,
    obstacles: Iterable,
    *,
    max_depth: int = 8,
) -> list[Point]:
    """
    Waypoints from `start` (excluded) to `destination` (always last).

    Each blocking obstacle found on the direct line is bypassed through two of
    its corners, picked by the direction of travel; the legs in between are
    planned recursively. Raises PlanningPreconditionError for start ==
    destination or an endpoint buried in an obstacle, and NoPathFoundError once
    the detours nest deeper than `max_depth`.
    """
    rects = [r for r in map(_as_rect, obstacles) if r is not None]
    direction = TravelDirection.between(start, destination)
    if direction.stationary:
        raise PlanningPreconditionError(f"start and destination are both {start}")
    for r in rects:
        for p in (start, destination):
            if point_in_rectangle(p, r.position, r.size):
                raise PlanningPreconditionError(f"{p} lies inside obstacle {r}")

    def leg(current: Point, target: Point, depth: int) -> list[Point]:
        if current == target:
            return []
        for r in rects:
            if not is_on_path(r, current, target, direction):
                continue
            if not crosses(r, current, target):
                continue
            if depth >= max_depth:
                raise NoPathFoundError(start, destination, max_depth)
            first, second = detour_corners(r, direction, current)
            return (
                leg(current, first, depth + 1)
                + leg(first, second, depth + 1)
                + leg(second, target, depth + 1)
            )
        return [target]

    return leg(start, destination, 0)


# ----------------- Planners ---------------------


class StraightLinePlanner(PathPlanner):
    def plan(self, start, destination, obstacles=()):
        return [destination]

    def route(self, start, destination, obstacles=()):
        return Path.through(start, self.plan(start, destination, obstacles))


class ObstacleAvoidingPlanner(PathPlanner):
    def __init__(self, max_depth: int = 8):
        self.max_depth = max_depth

    def plan(self, start, destination, obstacles=()):
        return find_path(start, destination, obstacles, max_depth=self.max_depth)

    def route(self, start, destination, obstacles=()):
        return Path.through(start, self.plan(start, destination, obstacles))
