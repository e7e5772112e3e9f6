# rectpath/domain/mechanics/mechanics_factory.py

from rectpath.config.models import MechanicsModel
from rectpath.domain.mechanics.mechanics_core import Mechanics
from rectpath.runtime.registries import make_planner


def build_mechanics(cfg: MechanicsModel) -> Mechanics:
    return Mechanics(planner=make_planner(cfg.planner, deps={}))
