# tests/app/test_controllers.py
import pytest

from rectpath.app.controllers.movement import MovementController
from rectpath.app.controllers.selection import SelectionHandler
from rectpath.app.events import (
    CursorMoved,
    LeftClick,
    MoveFinished,
    MoveRejected,
    MoveRequested,
    MoveStep,
    RightClick,
    SelectionChanged,
)
from rectpath.app.wiring import wire
from rectpath.domain.entities.game_object import GameObject, ObjectKind
from rectpath.domain.entities.geometry import Point, Size
from rectpath.domain.mechanics.mechanics_core import Mechanics
from rectpath.domain.mechanics.mechanics_path_planners import ObstacleAvoidingPlanner
from rectpath.domain.state import BoardState
from rectpath.sim.hooks import NoopHooks
from rectpath.sim.kernel import Kernel


class CollectHooks(NoopHooks):
    def __init__(self):
        self.seen = []

    def dispatch_start(self, ev, *, seq, qsize, handlers):
        self.seen.append(ev)


@pytest.fixture
def board():
    w = BoardState()
    w.add_object(GameObject(ObjectKind.SELECTABLE, Point(100.0, 100.0), Size(20.0, 20.0)))
    w.add_object(GameObject(ObjectKind.STATIC, Point(150.0, 100.0), Size(100.0, 100.0)))
    w.add_object(GameObject(ObjectKind.SELECTABLE, Point(400.0, 400.0), Size(20.0, 20.0)))
    return w


@pytest.fixture
def controllers(board):
    mech = Mechanics(planner=ObstacleAvoidingPlanner())
    return SelectionHandler(board), MovementController(board, mech)


# ---------- Selection


def test_cursor_is_tracked(board, controllers):
    selection, _ = controllers
    assert selection.on_cursor_moved(CursorMoved(t=0, x=3.0, y=4.0)) == []
    assert board.cursor == Point(3.0, 4.0)


def test_left_click_selects_unit(board, controllers):
    selection, _ = controllers
    out = selection.on_left_click(LeftClick(t=0, x=110.0, y=110.0))
    assert out == [SelectionChanged(t=0, object_id=0, previous_id=None)]
    assert board.selected_id == 0

    out = selection.on_left_click(LeftClick(t=1, x=405.0, y=405.0))
    assert out == [SelectionChanged(t=1, object_id=2, previous_id=0)]


def test_left_click_on_wall_or_empty_board_keeps_selection(board, controllers):
    selection, _ = controllers
    selection.on_left_click(LeftClick(t=0, x=110.0, y=110.0))
    assert selection.on_left_click(LeftClick(t=1, x=200.0, y=150.0)) == []
    assert selection.on_left_click(LeftClick(t=2, x=900.0, y=900.0)) == []
    assert selection.on_left_click(LeftClick(t=3, x=110.0, y=110.0)) == []
    assert board.selected_id == 0


# ---------- Movement


def test_right_click_without_selection_is_rejected(controllers):
    _, movement = controllers
    out = movement.on_right_click(RightClick(t=0, x=300.0, y=100.0))
    assert len(out) == 1 and isinstance(out[0], MoveRejected)
    assert out[0].reason == "nothing_selected" and out[0].object_id is None


def test_right_click_into_a_wall_is_rejected(board, controllers):
    _, movement = controllers
    board.selected_id = 0
    out = movement.on_right_click(RightClick(t=0, x=200.0, y=150.0))
    assert isinstance(out[0], MoveRejected)
    assert "inside obstacle" in out[0].reason
    assert board.active is None


def test_right_click_on_own_position_is_rejected(board, controllers):
    _, movement = controllers
    board.selected_id = 0
    out = movement.on_right_click(RightClick(t=0, x=100.0, y=100.0))
    assert isinstance(out[0], MoveRejected)


def test_right_click_plans_and_schedules_first_step(board, controllers):
    _, movement = controllers
    board.selected_id = 0
    requested, step = movement.on_right_click(RightClick(t=3, x=300.0, y=100.0))
    assert isinstance(requested, MoveRequested)
    assert requested.waypoints == 3 and requested.destination == (300.0, 100.0)
    assert step == MoveStep(t=4, object_id=0, task_id=requested.task_id)
    assert board.active.handler.waypoints[-1] == Point(300.0, 100.0)


def test_stale_move_step_is_ignored(board, controllers):
    _, movement = controllers
    board.selected_id = 0
    _, first = movement.on_right_click(RightClick(t=0, x=300.0, y=100.0))
    _, second = movement.on_right_click(RightClick(t=0, x=100.0, y=300.0))
    assert second.task_id != first.task_id
    assert movement.on_move_step(first) == []
    assert board.get_object(0).position == Point(100.0, 100.0)
    assert movement.on_move_step(second) == [MoveStep(t=2, object_id=0, task_id=second.task_id)]
    assert board.get_object(0).position == Point(100.0, 101.0)


def test_removed_object_stops_the_move(board, controllers):
    _, movement = controllers
    board.selected_id = 0
    _, step = movement.on_right_click(RightClick(t=0, x=300.0, y=100.0))
    board.objects.pop(0)  # vanished without remove_object()
    out = movement.on_move_step(step)
    assert isinstance(out[0], MoveRejected) and out[0].reason == "object_removed"
    assert board.active is None


def test_full_move_through_the_kernel(board, controllers):
    selection, movement = controllers
    hooks = CollectHooks()
    k = Kernel(hooks=hooks)
    wire(k, selection=selection, movement=movement)

    k.schedule(LeftClick(t=0, x=110.0, y=110.0))
    k.schedule(RightClick(t=1, x=100.0, y=300.0))
    k.run()

    finished = [e for e in hooks.seen if isinstance(e, MoveFinished)]
    assert len(finished) == 1
    # the wall is not on a purely vertical route down from x=100, y=100
    assert finished[0].position == (100.0, 300.0)
    assert finished[0].ticks == 200
    assert board.get_object(0).position == Point(100.0, 300.0)
    assert board.active is None
