# domain/hooks.py
from typing import Protocol

from ride_share.app.protocols import Fareable


class BookHooks(Protocol):
    def ride_added(self, ride: Fareable, *, handle: int): ...
    def ride_assigned(self, driver, ride: Fareable, *, handle: int): ...
    def ride_requested(self, rider, ride: Fareable, *, handle: int): ...
    def fare_quoted(self, ride: Fareable): ...


class NoopHooks:
    def ride_added(self, *_, **__):
        pass

    def ride_assigned(self, *_, **__):
        pass

    def ride_requested(self, *_, **__):
        pass

    def fare_quoted(self, *_, **__):
        pass
