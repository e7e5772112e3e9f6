# rectpath/domain/state.py
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

import numpy as np

from rectpath.app.protocols import Stepper
from rectpath.domain.entities.game_object import GameObject, ObjectKind
from rectpath.domain.entities.geometry import Point


@dataclass
class ActiveMove:
    object_id: int
    handler: Stepper
    task_id: int  # bumped per move request so stale MoveStep events are harmless
    ticks: int = 0


@dataclass
class BoardState:
    objects: dict[int, GameObject] = field(default_factory=dict)
    next_id: int = 0
    selected_id: int | None = None
    cursor: Point = Point(0.0, 0.0)
    active: ActiveMove | None = None
    task_seq: int = 0

    def add_object(self, obj: GameObject) -> int:
        oid = self.next_id
        self.objects[oid] = obj
        self.next_id += 1
        return oid

    def remove_object(self, oid: int) -> None:
        self.objects.pop(oid, None)
        if self.selected_id == oid:
            self.selected_id = None
        if self.active is not None and self.active.object_id == oid:
            self.active = None

    def get_object(self, oid: int) -> GameObject | None:
        return self.objects.get(oid)

    def query_object(
        self, pred: Callable[[int, GameObject], bool]
    ) -> tuple[int, GameObject] | None:
        return next(((oid, o) for oid, o in self.objects.items() if pred(oid, o)), None)

    def move(self, oid: int, p: Point) -> bool:
        o = self.objects.get(oid)
        if o is None:
            return False
        o.position = p
        return True

    def obstacles(self, *, exclude: int | None = None) -> Iterator[tuple[int, GameObject]]:
        for oid, o in self.objects.items():
            if o.blocking and oid != exclude:
                yield oid, o

    def object_at(self, p: Point, kinds: set[ObjectKind] | None = None) -> int | None:
        """Lowest id whose area (boundary included) contains p, optionally filtered by kind."""
        ids = [oid for oid, o in self.objects.items() if kinds is None or o.kind in kinds]
        if not ids:
            return None
        boxes = np.array(
            [
                (o.position.x, o.position.y, o.size.width, o.size.height)
                for o in (self.objects[i] for i in ids)
            ],
            dtype=float,
        )
        x0, y0 = boxes[:, 0], boxes[:, 1]
        hit = (x0 <= p.x) & (p.x <= x0 + boxes[:, 2]) & (y0 <= p.y) & (p.y <= y0 + boxes[:, 3])
        idx = np.flatnonzero(hit)
        return None if idx.size == 0 else ids[int(idx[0])]

    def next_task_id(self) -> int:
        self.task_seq += 1
        return self.task_seq
