# rectpath/app/controllers/movement.py
from rectpath.app.events import MoveFinished, MoveRejected, MoveRequested, MoveStep, RightClick
from rectpath.domain.errors import NoPathFoundError, PlanningPreconditionError
from rectpath.domain.mechanics.mechanics_core import Mechanics
from rectpath.domain.state import ActiveMove, BoardState


class MovementController:
    def __init__(self, world: BoardState, mechanics: Mechanics):
        self.world = world
        self.mechanics = mechanics

    def on_right_click(self, ev: RightClick):
        """
        Plan a route for the selected object toward the click and start stepping.
        - A newer request replaces the active one; its pending MoveStep goes stale.
        - Planning failures become MoveRejected instead of aborting the run.
        """
        dest = ev.pos
        oid = self.world.selected_id
        obj = None if oid is None else self.world.get_object(oid)
        if obj is None:
            return [
                MoveRejected(
                    t=ev.t, object_id=oid, reason="nothing_selected", destination=dest.get()
                )
            ]

        try:
            handler = self.mechanics.start_move(
                obj.position, dest, self.world.obstacles(exclude=oid)
            )
        except (PlanningPreconditionError, NoPathFoundError) as exc:
            return [MoveRejected(t=ev.t, object_id=oid, reason=str(exc), destination=dest.get())]

        task_id = self.world.next_task_id()
        self.world.active = ActiveMove(object_id=oid, handler=handler, task_id=task_id)
        return [
            MoveRequested(
                t=ev.t,
                object_id=oid,
                task_id=task_id,
                destination=dest.get(),
                waypoints=len(handler.waypoints),
            ),
            MoveStep(t=ev.t + 1, object_id=oid, task_id=task_id),
        ]

    def on_move_step(self, ev: MoveStep):
        a = self.world.active
        if a is None or a.task_id != ev.task_id or a.object_id != ev.object_id:
            return []  # stale

        p = a.handler.poll()
        if p is None:
            self.world.active = None
            obj = self.world.get_object(a.object_id)
            pos = a.handler.position if obj is None else obj.position
            return [
                MoveFinished(
                    t=ev.t,
                    object_id=a.object_id,
                    task_id=a.task_id,
                    position=pos.get(),
                    ticks=a.ticks,
                )
            ]

        if not self.world.move(a.object_id, p):
            self.world.active = None
            return [MoveRejected(t=ev.t, object_id=a.object_id, reason="object_removed")]
        a.ticks += 1
        return [MoveStep(t=ev.t + 1, object_id=a.object_id, task_id=a.task_id)]
