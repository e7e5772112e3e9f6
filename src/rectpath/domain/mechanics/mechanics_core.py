# rectpath/domain/mechanics/mechanics_core.py
from collections.abc import Iterable
from dataclasses import dataclass

from rectpath.app.protocols import PathPlanner
from rectpath.domain.entities.geometry import Path, Point
from rectpath.domain.entities.motion import MovementHandler


@dataclass
class Mechanics:
    """Convenience façade so controllers don't juggle planner and stepper separately."""

    planner: PathPlanner

    def plan(self, a: Point, b: Point, obstacles: Iterable = ()) -> list[Point]:
        return self.planner.plan(a, b, obstacles)

    def route(self, a: Point, b: Point, obstacles: Iterable = ()) -> Path:
        return self.planner.route(a, b, obstacles)

    def distance(self, a: Point, b: Point, obstacles: Iterable = ()) -> float:
        return self.route(a, b, obstacles).total_length

    def start_move(self, a: Point, b: Point, obstacles: Iterable = ()) -> MovementHandler:
        return MovementHandler.start(a, b, list(obstacles), planner=self.planner)
