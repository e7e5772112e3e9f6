# rectpath/io/business_events.py

from dataclasses import dataclass


# Base type for analytics records (not scheduled in the kernel!)
@dataclass
class BizEvent:
    run_id: str
    t: float  # simulation tick
    seq: int  # kernel dispatch sequence (for total ordering)
    name: str  # stable event name


@dataclass
class SelectionChangedBiz(BizEvent):
    object_id: int | None
    previous_id: int | None = None


@dataclass
class MoveRequestedBiz(BizEvent):
    object_id: int
    task_id: int
    destination: tuple[float, float]
    waypoints: int


@dataclass
class MoveRejectedBiz(BizEvent):
    object_id: int | None
    reason: str
    destination: tuple[float, float] | None = None


@dataclass
class MoveFinishedBiz(BizEvent):
    object_id: int
    task_id: int
    position: tuple[float, float]
    ticks: int


_BIZ_BY_NAME = {
    "SelectionChanged": SelectionChangedBiz,
    "MoveRequested": MoveRequestedBiz,
    "MoveRejected": MoveRejectedBiz,
    "MoveFinished": MoveFinishedBiz,
}


def to_biz(ev, *, run_id: str, seq: int) -> BizEvent | None:
    name = type(ev).__name__
    cls = _BIZ_BY_NAME.get(name)
    if cls is None:
        return None
    fields = {k: v for k, v in vars(ev).items() if k != "t"}
    return cls(run_id=run_id, t=ev.t, seq=seq, name=name, **fields)
