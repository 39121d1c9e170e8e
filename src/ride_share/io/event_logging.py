# io/event_logging.py
import itertools
import json
import logging
import sys

from ride_share.domain.hooks import NoopHooks
from ride_share.io.business_events import RideAddedBiz, RideAssignedBiz, RideRequestedBiz
from ride_share.io.recorder import Recorder


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
        return json.dumps(payload)


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever sys.stderr is at emit time; stdout carries the report."""

    def __init__(self, level=logging.NOTSET):
        logging.Handler.__init__(self, level)

    @property
    def stream(self):
        return sys.stderr


_runs = itertools.count(1)


def _default_json_logger(name="ride_share", level="WARNING"):
    # one handler on the package logger; each run gets its own child so
    # levels of earlier runs are left alone
    base = logging.getLogger("ride_share")
    if not base.handlers:
        h = _StderrHandler()
        h.setFormatter(_JsonFormatter())
        base.addHandler(h)
    logger = logging.getLogger(name)
    logger.setLevel(level)
    return logger


class EventLogging(NoopHooks):
    """
    Structured logs for RideBook mutations, plus the matching business events.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "WARNING",
        debug: bool = False,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.recorder = recorder
        self.log = logger or _default_json_logger(
            f"ride_share.run.{run_id}.{next(_runs)}", level=level
        )
        self._seq = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _next_seq(self) -> int:
        self._seq += 1
        return self._seq

    def biz(self, ev):
        if self.recorder:
            self.recorder.emit(ev)

    # ------------- RideBook hooks --------------------------

    def ride_added(self, ride, *, handle: int):
        fare = ride.calculate_fare()
        self._emit(
            "INFO",
            "ride_added",
            ride_id=ride.id,
            kind=ride.kind,
            handle=handle,
            distance_km=ride.distance_km,
            fare=fare,
        )
        self.biz(
            RideAddedBiz(
                run_id=self.run_id,
                seq=self._next_seq(),
                name="RideAdded",
                ride_id=ride.id,
                kind=ride.kind,
                distance_km=ride.distance_km,
                fare=fare,
            )
        )

    def ride_assigned(self, driver, ride, *, handle: int):
        self._emit("INFO", "ride_assigned", driver_id=driver.id, ride_id=ride.id, handle=handle)
        self.biz(
            RideAssignedBiz(
                run_id=self.run_id,
                seq=self._next_seq(),
                name="RideAssigned",
                driver_id=driver.id,
                ride_id=ride.id,
            )
        )

    def ride_requested(self, rider, ride, *, handle: int):
        self._emit("INFO", "ride_requested", rider_id=rider.id, ride_id=ride.id, handle=handle)
        self.biz(
            RideRequestedBiz(
                run_id=self.run_id,
                seq=self._next_seq(),
                name="RideRequested",
                rider_id=rider.id,
                ride_id=ride.id,
            )
        )

    def fare_quoted(self, ride):
        if self.debug:
            fare = ride.calculate_fare()
            self._emit("DEBUG", "fare_quoted", ride_id=ride.id, kind=ride.kind, fare=fare)
