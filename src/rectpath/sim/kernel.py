# sim/kernel.py

import heapq
import time
from collections.abc import Callable, Iterable

from .event import BaseEvent
from .hooks import KernelHooks, NoopHooks

Handler = Callable[[BaseEvent], Iterable[BaseEvent] | None]

_EPS = 1e-9


class Kernel:
    """
    Per-tick driver for the board.

    Events are kept in a heap keyed by (tick, schedule order), so events on the
    same tick run first-in first-out. Every handler subscribed to an event's
    exact type is called in subscription order; whatever it returns is
    scheduled. Input events, MoveStep chains and lifecycle notices all go
    through the same queue.
    """

    def __init__(self, hooks: KernelHooks | None = None):
        self._now = 0.0
        self._heap: list[tuple[float, int, BaseEvent]] = []
        self._seq = 0
        self._handlers: dict[type[BaseEvent], list[Handler]] = {}
        self._hooks = hooks or NoopHooks()

    @property
    def now(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        return len(self._heap)

    def on(self, etype: type[BaseEvent], handler: Handler) -> None:
        self._handlers.setdefault(etype, []).append(handler)

    def schedule(self, ev: BaseEvent) -> None:
        self._seq += 1
        heapq.heappush(self._heap, (ev.t, self._seq, ev))
        self._hooks.schedule(ev, now=self._now, qsize=len(self._heap))

    def _due(self, until: float | None) -> bool:
        return bool(self._heap) and (until is None or self._heap[0][0] <= until)

    def _dispatch(self, ev: BaseEvent, seq: int) -> None:
        handlers = self._handlers.get(type(ev), ())
        started = time.perf_counter()
        self._hooks.dispatch_start(ev, seq=seq, qsize=len(self._heap), handlers=len(handlers))
        produced = 0
        for handler in handlers:
            for follow_up in handler(ev) or ():
                if follow_up.t < self._now - _EPS:
                    self._hooks.error(
                        ev,
                        reason="scheduled_past",
                        scheduled_t=follow_up.t,
                        nxt_type=type(follow_up).__name__,
                    )
                    raise RuntimeError(
                        f"{type(follow_up).__name__} scheduled for tick {follow_up.t} "
                        f"while the kernel is at {self._now}"
                    )
                self.schedule(follow_up)
                produced += 1
        self._hooks.dispatch_end(
            ev,
            produced=produced,
            qsize=len(self._heap),
            ms=(time.perf_counter() - started) * 1000,
        )

    def run(self, until: float | None = None, max_events: int | None = None) -> int:
        """Dispatch due events up to tick `until` (inclusive); returns how many ran."""
        started = time.perf_counter()
        self._hooks.run_start(until=until, max_events=max_events, qsize=len(self._heap))
        processed = 0
        while self._due(until):
            t, seq, ev = heapq.heappop(self._heap)
            if t < self._now - _EPS:
                self._hooks.error(ev, reason="time_backwards", prev_t=self._now, t=t)
                raise RuntimeError(f"time went backwards: {t} < {self._now}")
            self._now = t
            self._dispatch(ev, seq)
            processed += 1
            if max_events and processed >= max_events:
                break
        self._hooks.run_end(
            processed=processed,
            last_t=self._now,
            qsize=len(self._heap),
            wall_ms=(time.perf_counter() - started) * 1000,
        )
        return processed
