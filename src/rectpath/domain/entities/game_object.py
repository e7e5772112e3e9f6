# domain/entities/game_object.py
from dataclasses import dataclass
from enum import Enum

from rectpath.domain.entities.geometry import Point, Size
from rectpath.domain.entities.rectangle import Rect


class ObjectKind(Enum):
    STATIC = "static"  # walls, rocks: the only kind that blocks paths
    INTERACTABLE = "interactable"
    SELECTABLE = "selectable"  # units the player can pick and move


@dataclass
class GameObject:
    kind: ObjectKind
    position: Point  # upper-left vertex
    size: Size

    @property
    def rect(self) -> Rect:
        return Rect(self.position, self.size)

    @property
    def blocking(self) -> bool:
        return self.kind is ObjectKind.STATIC

    def contains(self, p: Point) -> bool:
        """Inclusive hit-test used for clicks (unlike point_in_rectangle)."""
        r = self.rect
        return r.left <= p.x <= r.right and r.top <= p.y <= r.bottom
