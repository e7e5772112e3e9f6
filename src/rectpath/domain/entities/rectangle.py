from collections.abc import Iterator
from dataclasses import dataclass

from rectpath.domain.entities.geometry import (
    Horizontal,
    LineEquation,
    Point,
    Size,
    Vertical,
    intersect,
)


@dataclass(frozen=True)
class Rect:
    position: Point  # upper-left vertex
    size: Size

    @property
    def left(self) -> float:
        return self.position.x

    @property
    def right(self) -> float:
        return self.position.x + self.size.width

    @property
    def top(self) -> float:
        return self.position.y

    @property
    def bottom(self) -> float:
        return self.position.y + self.size.height

    def vertices(self) -> "RectangleVertices":
        return vertices(self.position, self.size)

    def edge_lines(self) -> "RectangleLineEdges":
        return edge_lines(self.position, self.size)


@dataclass(frozen=True)
class RectangleVertices:
    upper_left: Point
    lower_left: Point
    upper_right: Point
    lower_right: Point


@dataclass(frozen=True)
class RectangleLineEdges:
    x0: Vertical  # left
    x1: Vertical  # right
    y0: Horizontal  # top
    y1: Horizontal  # bottom

    def __iter__(self) -> Iterator[Vertical | Horizontal]:
        return iter((self.x0, self.x1, self.y0, self.y1))


def vertices(upper_left: Point, size: Size) -> RectangleVertices:
    return RectangleVertices(
        upper_left=upper_left,
        lower_left=Point(upper_left.x, upper_left.y + size.height),
        upper_right=Point(upper_left.x + size.width, upper_left.y),
        lower_right=Point(upper_left.x + size.width, upper_left.y + size.height),
    )


def edge_lines(upper_left: Point, size: Size) -> RectangleLineEdges:
    return RectangleLineEdges(
        x0=Vertical(upper_left.x),
        x1=Vertical(upper_left.x + size.width),
        y0=Horizontal(upper_left.y),
        y1=Horizontal(upper_left.y + size.height),
    )


def point_in_rectangle(point: Point, upper_left: Point, size: Size) -> bool:
    """Strict interior test: points on the boundary are not contained."""
    return (
        upper_left.x < point.x < upper_left.x + size.width
        and upper_left.y < point.y < upper_left.y + size.height
    )


def point_on_edge(point: Point, edge: Vertical | Horizontal, upper_left: Point, size: Size) -> bool:
    """
    True when a point computed against one edge line lies on that finite edge.
    Both end vertices count as part of the edge.
    """
    if isinstance(edge, Vertical):
        return upper_left.y <= point.y <= upper_left.y + size.height
    if isinstance(edge, Horizontal):
        return upper_left.x <= point.x <= upper_left.x + size.width
    raise TypeError(edge)


def edge_crossings(line: LineEquation, upper_left: Point, size: Size) -> list[Point]:
    crossings = []
    for edge in edge_lines(upper_left, size):
        p = intersect(line, edge)
        if p is not None and point_on_edge(p, edge, upper_left, size):
            crossings.append(p)
    return crossings
