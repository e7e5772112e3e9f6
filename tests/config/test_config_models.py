# tests/config/test_config_models.py
import pytest
from pydantic import ValidationError

from rectpath.config.models import (
    MechanicsModel,
    ObjectModel,
    PlannerObstacleAvoidingModel,
    PlannerStraightModel,
    ScenarioModel,
)
from rectpath.runtime.registries import make_planner


def minimal(**kw):
    return {"name": "s", "run_id": "r", **kw}


def test_defaults():
    m = ScenarioModel.model_validate(minimal())
    assert m.sim.max_ticks == 10_000
    assert m.log.level == "INFO"
    assert isinstance(m.mechanics.planner, PlannerObstacleAvoidingModel)
    assert m.mechanics.planner.max_depth == 8
    assert m.board.objects == [] and m.inputs == []


def test_planner_discriminator():
    m = MechanicsModel.model_validate({"planner": {"kind": "straight"}})
    assert isinstance(m.planner, PlannerStraightModel)
    with pytest.raises(ValidationError):
        MechanicsModel.model_validate({"planner": {"kind": "teleport"}})


def test_max_depth_must_be_positive():
    with pytest.raises(ValidationError):
        PlannerObstacleAvoidingModel(max_depth=0)


def test_negative_size_rejected():
    with pytest.raises(ValidationError, match="width must be >= 0"):
        ObjectModel(kind="static", x=0, y=0, width=-1, height=5)


def test_unknown_kind_and_extra_fields_rejected():
    with pytest.raises(ValidationError):
        ObjectModel(kind="lava", x=0, y=0, width=1, height=1)
    with pytest.raises(ValidationError):
        ScenarioModel.model_validate(minimal(seed=3))


def test_input_ticks_must_fit_the_run():
    ok = minimal(sim={"max_ticks": 10}, inputs=[{"t": 10, "kind": "cursor", "x": 0, "y": 0}])
    assert ScenarioModel.model_validate(ok).inputs[0].t == 10
    late = minimal(sim={"max_ticks": 10}, inputs=[{"t": 11, "kind": "cursor", "x": 0, "y": 0}])
    with pytest.raises(ValidationError):
        ScenarioModel.model_validate(late)


def test_registry_builds_configured_planner():
    planner = make_planner(PlannerObstacleAvoidingModel(max_depth=3), deps={})
    assert planner.max_depth == 3


def test_registry_rejects_unregistered_kind():
    class Fake:
        kind = "teleport"

    with pytest.raises(ValueError, match="Unknown planner kind"):
        make_planner(Fake(), deps={})
