# runtime/registries.py
from collections.abc import Callable
from typing import Any

from rectpath.app.protocols import PathPlanner
from rectpath.config.models import (
    PlannerObstacleAvoidingModel,
    PlannerStraightModel,
    PlannerUnion,
)
from rectpath.domain.mechanics.mechanics_path_planners import (
    ObstacleAvoidingPlanner,
    StraightLinePlanner,
)

PlannerFactory = Callable[[PlannerUnion, dict[str, Any]], PathPlanner]

_planner_registry: dict[str, PlannerFactory] = {}


# --------------------- Path Planners  ---------------------
def register_planner(kind: str):
    def deco(fn: PlannerFactory):
        _planner_registry[kind] = fn
        return fn

    return deco


def make_planner(cfg: PlannerUnion, *, deps: dict) -> PathPlanner:
    try:
        factory = _planner_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown planner kind {cfg.kind!r}") from None
    return factory(cfg, deps)


@register_planner("straight")
def _make_straight(cfg: PlannerStraightModel, deps):
    return StraightLinePlanner()


@register_planner("obstacle_avoiding")
def _make_obstacle_avoiding(cfg: PlannerObstacleAvoidingModel, deps):
    return ObstacleAvoidingPlanner(max_depth=cfg.max_depth)
