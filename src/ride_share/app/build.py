# ride_share/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from ride_share.config.models import DEFAULT_SCENARIO, ScenarioModel
from ride_share.domain.entities.driver import Driver
from ride_share.domain.entities.rider import Rider
from ride_share.domain.hooks import BookHooks, NoopHooks
from ride_share.domain.state import RideBook
from ride_share.io.event_logging import EventLogging  # JSON logs
from ride_share.io.recorder import JsonlSink, MemorySink, Recorder
from ride_share.runtime.registries import make_ride


@dataclass
class App:
    model: ScenarioModel
    book: RideBook
    hooks: BookHooks
    recorder: Recorder


def build(cfg: ScenarioModel | Mapping | None = None, *, use_logging: bool = True) -> App:
    # 0) Validate config
    if cfg is None:
        cfg = DEFAULT_SCENARIO
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Hooks & recorder
    sink = JsonlSink() if model.log.events == "jsonl" else MemorySink()
    recorder = Recorder(sink)
    hooks = (
        EventLogging(
            run_id=model.run_id,
            recorder=recorder,
            level=model.log.level,
            debug=model.log.debug,
        )
        if use_logging
        else NoopHooks()
    )

    # 2) Arena: every ride is created here and owned by the book
    book = RideBook(hooks=hooks)
    for ride_cfg in model.rides:
        book.add_ride(make_ride(ride_cfg))

    # 3) Participants, wired to rides by handle in configuration order
    for dm in model.drivers:
        d = Driver(id=dm.id, name=dm.name, rating=dm.rating)
        book.add_driver(d)
        for h in dm.rides:
            book.assign(d, h)

    for rm in model.riders:
        r = Rider(id=rm.id, name=rm.name)
        book.add_rider(r)
        for h in rm.rides:
            book.request(r, h)

    return App(model, book, hooks, recorder)
