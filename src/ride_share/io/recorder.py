# io/recorder.py
import json
import logging
import sys
from dataclasses import asdict
from typing import Protocol

log = logging.getLogger("ride_share.recorder")


class Sink(Protocol):
    def write(self, ev) -> None: ...


class JsonlSink:
    """One JSON object per line. Defaults to stderr, resolved per write."""

    def __init__(self, fp=None):
        self.fp = fp

    def write(self, ev) -> None:
        fp = self.fp if self.fp is not None else sys.stderr
        fp.write(json.dumps(asdict(ev)) + "\n")


class MemorySink:
    def __init__(self):
        self.events: list = []

    def write(self, ev) -> None:
        self.events.append(ev)


class Recorder:
    def __init__(self, *sinks: Sink):
        self.sinks = sinks or (MemorySink(),)
        self.failed = 0

    def emit(self, ev):
        for s in self.sinks:
            try:
                s.write(ev)
            except Exception:
                # a broken sink must not break the run or starve the others
                self.failed += 1
                log.exception("sink %s failed on %s", type(s).__name__, type(ev).__name__)
