from rectpath.domain.entities.game_object import GameObject, ObjectKind
from rectpath.domain.entities.geometry import Point, Size
from rectpath.domain.entities.motion import MovementHandler
from rectpath.domain.state import ActiveMove, BoardState


def obj(kind, x, y, w=20.0, h=20.0):
    return GameObject(kind, Point(float(x), float(y)), Size(float(w), float(h)))


def make_board():
    w = BoardState()
    unit = w.add_object(obj(ObjectKind.SELECTABLE, 0, 0))
    rock = w.add_object(obj(ObjectKind.STATIC, 50, 0, 100, 100))
    chest = w.add_object(obj(ObjectKind.INTERACTABLE, 10, 10))
    return w, unit, rock, chest


def test_ids_are_sequential():
    w, unit, rock, chest = make_board()
    assert (unit, rock, chest) == (0, 1, 2)
    assert w.get_object(rock).kind is ObjectKind.STATIC
    assert w.get_object(99) is None


def test_only_static_objects_are_obstacles():
    w, unit, rock, chest = make_board()
    assert [oid for oid, _ in w.obstacles()] == [rock]
    assert list(w.obstacles(exclude=rock)) == []


def test_query_object_returns_first_match():
    w, unit, rock, chest = make_board()
    hit = w.query_object(lambda oid, o: o.kind is ObjectKind.INTERACTABLE)
    assert hit == (chest, w.get_object(chest))
    assert w.query_object(lambda oid, o: oid > 10) is None


def test_move_updates_position():
    w, unit, *_ = make_board()
    assert w.move(unit, Point(5.0, 6.0))
    assert w.get_object(unit).position == Point(5.0, 6.0)
    assert not w.move(42, Point(0.0, 0.0))


def test_remove_clears_selection_and_active_move():
    w, unit, *_ = make_board()
    w.selected_id = unit
    w.active = ActiveMove(unit, MovementHandler.start(Point(0.0, 0.0), Point(5.0, 0.0)), 1)
    w.remove_object(unit)
    assert w.get_object(unit) is None
    assert w.selected_id is None and w.active is None


def test_object_at_is_inclusive_and_prefers_lowest_id():
    w, unit, rock, chest = make_board()
    assert w.object_at(Point(20.0, 20.0)) == unit  # corner of the unit, inside the chest
    assert w.object_at(Point(25.0, 25.0)) == chest
    assert w.object_at(Point(150.0, 100.0)) == rock
    assert w.object_at(Point(500.0, 500.0)) is None


def test_object_at_filters_by_kind():
    w, unit, rock, chest = make_board()
    assert w.object_at(Point(25.0, 25.0), kinds={ObjectKind.SELECTABLE}) is None
    assert w.object_at(Point(5.0, 5.0), kinds={ObjectKind.SELECTABLE}) == unit
    assert BoardState().object_at(Point(0.0, 0.0)) is None


def test_task_ids_increase():
    w = BoardState()
    assert [w.next_task_id() for _ in range(3)] == [1, 2, 3]
