# rectpath/app/wiring.py
from rectpath.app.controllers.movement import MovementController
from rectpath.app.controllers.selection import SelectionHandler
from rectpath.app.events import CursorMoved, LeftClick, MoveStep, RightClick
from rectpath.sim.kernel import Kernel


def wire(kernel: Kernel, *, selection: SelectionHandler, movement: MovementController) -> None:
    k = kernel

    # input
    k.on(CursorMoved, selection.on_cursor_moved)
    k.on(LeftClick, selection.on_left_click)  # select unit under cursor
    k.on(RightClick, movement.on_right_click)  # plan + first MoveStep

    # per-tick stepping
    k.on(MoveStep, movement.on_move_step)

    # SelectionChanged / MoveRequested / MoveRejected / MoveFinished have no
    # handlers; they exist for the logging hooks and the recorder.
