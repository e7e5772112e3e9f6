# rectpath/io/recorder.py
import json
import logging
import sys
from dataclasses import asdict
from typing import Protocol

log = logging.getLogger("rectpath.recorder")


class Sink(Protocol):
    def write(self, ev) -> None: ...


class JsonlSink:
    """One JSON object per business record; tuples (positions) become lists."""

    def __init__(self, fp=sys.stdout, *, flush: bool = False):
        self.fp, self.flush = fp, flush

    def write(self, ev) -> None:
        self.fp.write(json.dumps(asdict(ev), default=str) + "\n")
        if self.flush:
            self.fp.flush()


class MemorySink:
    def __init__(self):
        self.events: list = []

    def write(self, ev) -> None:
        self.events.append(ev)

    def named(self, name: str) -> list:
        return [e for e in self.events if e.name == name]


class Recorder:
    def __init__(self, *sinks: Sink):
        self.sinks = sinks or (JsonlSink(),)
        self.failures = 0

    def emit(self, ev):
        for s in self.sinks:
            try:
                s.write(ev)
            except Exception as exc:  # a broken sink must not stop the game loop
                self.failures += 1
                log.warning(
                    "sink %s failed on %s: %s", type(s).__name__, getattr(ev, "name", ev), exc
                )
