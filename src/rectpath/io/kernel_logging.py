# io/kernel_logging.py
import json
import logging
import sys
from dataclasses import asdict, is_dataclass

from rectpath.io.business_events import to_biz
from rectpath.io.recorder import Recorder
from rectpath.sim.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=str)


def _default_json_logger(name="rectpath", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class KernelLogging(NoopHooks):
    """
    One place to shape and emit structured logs for both engine and game events.
    Game events are also forwarded to the recorder as analytics records.
    """

    GAME = {
        "SelectionChanged",
        "MoveRequested",
        "MoveRejected",
        "MoveFinished",
    }

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1000,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.recorder = recorder
        self.log = logger or _default_json_logger(level=level)
        self._processed = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id, **extra}
        self.log.log(getattr(logging, level), msg, extra={"extra": payload})

    def _shape_event(self, ev, want_name: bool = False):
        # Normalize a few common fields to keep logs compact & consistent
        name = type(ev).__name__
        base = {"t": getattr(ev, "t", None)}
        for f in ("object_id", "task_id", "reason"):
            if hasattr(ev, f):
                base[f] = getattr(ev, f)
        if is_dataclass(ev):
            evd = asdict(ev)
            for k in list(base.keys()):
                evd.pop(k, None)
            if evd:
                base["data"] = evd
        return (name, base) if want_name else base

    # --------------------------------------------------------

    # engine lifecycle

    def run_start(self, *, until: float | None, max_events: int | None, qsize: int):
        self._emit("INFO", "run_start", until=until, max_events=max_events, qsize=qsize)

    def run_end(self, *, processed: int, **extra):
        self._emit("INFO", "run_end", processed=processed, **extra)

    def schedule(self, ev, *, now: float, qsize: int):
        if self.debug and (qsize % self.sample_every) == 0:
            self._emit("DEBUG", "schedule", **self._shape_event(ev), now=now, qsize=qsize)

    def dispatch_start(self, ev, *, seq: int, qsize: int, handlers: int):
        self._processed += 1
        name, extra = self._shape_event(ev, want_name=True)
        if name in self.GAME:
            self._emit("INFO", name, **extra, seq=seq, qsize=qsize, handlers=handlers)
            self.biz(ev, seq=seq)
        elif self.debug and (self._processed % self.sample_every) == 0:
            self._emit("DEBUG", name, **extra, seq=seq, qsize=qsize, handlers=handlers)

    def dispatch_end(self, ev, *, produced: int, qsize: int, **extra):
        if self.debug and (self._processed % self.sample_every) == 0:
            self._emit("DEBUG", "dispatch_done", produced=produced, qsize=qsize, **extra)

    def error(self, ev, *, reason: str, **extra):
        name, shaped = self._shape_event(ev, want_name=True)
        self._emit("ERROR", "kernel_error", event=name, error=reason, **{**shaped, **extra})

    # ------------- Game Event Reporting --------------------------

    def biz(self, ev, *, seq: int):
        if self.recorder:
            rec = to_biz(ev, run_id=self.run_id, seq=seq)
            if rec is not None:
                self.recorder.emit(rec)
