# rectpath/app/controllers/selection.py
from rectpath.app.events import CursorMoved, LeftClick, SelectionChanged
from rectpath.domain.entities.game_object import ObjectKind
from rectpath.domain.state import BoardState


class SelectionHandler:
    def __init__(self, world: BoardState):
        self.world = world

    def on_cursor_moved(self, ev: CursorMoved):
        self.world.cursor = ev.pos
        return []

    def on_left_click(self, ev: LeftClick):
        # clicking empty board keeps the current selection
        oid = self.world.object_at(ev.pos, kinds={ObjectKind.SELECTABLE})
        if oid is None or oid == self.world.selected_id:
            return []
        prev, self.world.selected_id = self.world.selected_id, oid
        return [SelectionChanged(t=ev.t, object_id=oid, previous_id=prev)]
