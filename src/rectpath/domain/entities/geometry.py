import math
from dataclasses import dataclass

from rectpath.domain.errors import ZeroLengthVectorError


# Core geometry types used by mechanics
@dataclass(frozen=True)
class Point:
    x: float  # board units, y grows downward
    y: float

    def get(self) -> tuple[float, float]:
        return self.x, self.y

    def __add__(self, other: "Vector") -> "Point":
        if not isinstance(other, Vector):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class Vector:
    x: float
    y: float
    magnitude: float

    @classmethod
    def between(cls, a: Point, b: Point) -> "Vector":
        x, y = b.x - a.x, b.y - a.y
        return cls(x, y, math.sqrt(x * x + y * y))

    def unit(self) -> "Vector":
        """Rescale to magnitude 1.0; components are divided, never clamped."""
        if self.magnitude == 0:
            raise ZeroLengthVectorError(f"cannot normalise zero-length vector ({self.x}, {self.y})")
        return Vector(self.x / self.magnitude, self.y / self.magnitude, 1.0)

    def dot(self, other: "Vector") -> float:
        return self.x * other.x + self.y * other.y


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point
    length: float


@dataclass
class Path:
    segments: list[Segment]
    total_length: float

    @classmethod
    def through(cls, start: Point, waypoints: list[Point]) -> "Path":
        segs, prev = [], start
        for w in waypoints:
            segs.append(Segment(prev, w, Vector.between(prev, w).magnitude))
            prev = w
        return cls(segs, sum(s.length for s in segs))

    @property
    def waypoints(self) -> list[Point]:
        return [s.end for s in self.segments]


def middle(position: Point, size: Size) -> Point:
    return Point(position.x + size.width / 2.0, position.y + size.height / 2.0)


# ----------------- Line equations ---------------------


@dataclass(frozen=True)
class Vertical:
    x: float  # x = constant


@dataclass(frozen=True)
class Horizontal:
    y: float  # y = constant


@dataclass(frozen=True)
class Curve:
    slope: float  # y = slope * x + y_intercept
    y_intercept: float


LineEquation = Vertical | Horizontal | Curve


def line_from_points(a: Point, b: Point) -> LineEquation:
    # vertical wins when a == b
    if a.x == b.x:
        return Vertical(a.x)
    if a.y == b.y:
        return Horizontal(a.y)
    slope = (a.y - b.y) / (a.x - b.x)
    return Curve(slope, a.y - slope * a.x)


def intersect(line_a: LineEquation, line_b: LineEquation) -> Point | None:
    """
    Point where two infinite lines meet, or None when they are parallel.

    Identical lines also give None: callers must not rely on collinear input.
    """
    if isinstance(line_a, Vertical):
        return _intersect_vertical(line_a.x, line_b)
    if isinstance(line_a, Horizontal):
        return _intersect_horizontal(line_a.y, line_b)
    if isinstance(line_a, Curve):
        return _intersect_curve(line_a.slope, line_a.y_intercept, line_b)
    raise TypeError(line_a)


def _intersect_vertical(x: float, line_b: LineEquation) -> Point | None:
    if isinstance(line_b, Vertical):
        return None
    if isinstance(line_b, Horizontal):
        return Point(x, line_b.y)
    if isinstance(line_b, Curve):
        return _curve_at_x(line_b.slope, line_b.y_intercept, x)
    raise TypeError(line_b)


def _intersect_horizontal(y: float, line_b: LineEquation) -> Point | None:
    if isinstance(line_b, Vertical):
        return Point(line_b.x, y)
    if isinstance(line_b, Horizontal):
        return None
    if isinstance(line_b, Curve):
        return _curve_at_y(line_b.slope, line_b.y_intercept, y)
    raise TypeError(line_b)


def _intersect_curve(slope: float, y_intercept: float, line_b: LineEquation) -> Point | None:
    if isinstance(line_b, Vertical):
        return _curve_at_x(slope, y_intercept, line_b.x)
    if isinstance(line_b, Horizontal):
        return _curve_at_y(slope, y_intercept, line_b.y)
    if isinstance(line_b, Curve):
        if slope == line_b.slope:
            return None
        x = (y_intercept - line_b.y_intercept) / -(slope - line_b.slope)
        return Point(x, slope * x + y_intercept)
    raise TypeError(line_b)


def _curve_at_x(slope: float, y_intercept: float, x: float) -> Point:
    return Point(x, slope * x + y_intercept)


def _curve_at_y(slope: float, y_intercept: float, y: float) -> Point | None:
    # a hand-built flat Curve never meets a Horizontal at a single point
    if slope == 0:
        return None
    return Point((y_intercept - y) / -slope, y)
