# rectpath/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from rectpath.app.controllers.movement import MovementController
from rectpath.app.controllers.selection import SelectionHandler
from rectpath.app.events import CursorMoved, LeftClick, RightClick
from rectpath.app.wiring import wire
from rectpath.config.models import InputModel, ScenarioModel
from rectpath.domain.entities.game_object import GameObject, ObjectKind
from rectpath.domain.entities.geometry import Point, Size
from rectpath.domain.mechanics.mechanics_core import Mechanics
from rectpath.domain.mechanics.mechanics_factory import build_mechanics
from rectpath.domain.state import BoardState
from rectpath.io.kernel_logging import KernelLogging  # JSON logs
from rectpath.io.recorder import JsonlSink, Recorder, Sink
from rectpath.sim.hooks import NoopHooks
from rectpath.sim.kernel import Kernel

_INPUTS = {"cursor": CursorMoved, "left_click": LeftClick, "right_click": RightClick}


@dataclass
class App:
    kernel: Kernel
    world: BoardState
    mechanics: Mechanics
    selection: SelectionHandler
    movement: MovementController
    max_ticks: int

    def run(self) -> int:
        return self.kernel.run(until=float(self.max_ticks))


def input_event(i: InputModel):
    return _INPUTS[i.kind](t=i.t, x=i.x, y=i.y)


def build(
    cfg: ScenarioModel | Mapping,
    *,
    use_logging: bool = True,
    sinks: tuple[Sink, ...] | None = None,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Kernel (with hooks)
    recorder = Recorder(*(sinks or (JsonlSink(),)))
    hooks = (
        KernelLogging(
            run_id=model.run_id,
            recorder=recorder,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )
    kernel = Kernel(hooks=hooks)

    # 2) Board
    world = BoardState()
    for o in model.board.objects:
        world.add_object(
            GameObject(ObjectKind(o.kind), Point(o.x, o.y), Size(o.width, o.height))
        )

    # 3) Mechanics & handlers (inject deps explicitly)
    mechanics = build_mechanics(model.mechanics)
    selection = SelectionHandler(world=world)
    movement = MovementController(world=world, mechanics=mechanics)

    # 4) Wiring
    wire(kernel, selection=selection, movement=movement)

    # 5) Scripted input
    for i in model.inputs:
        kernel.schedule(input_event(i))

    return App(kernel, world, mechanics, selection, movement, model.sim.max_ticks)
