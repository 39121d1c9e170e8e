# ride_share/domain/state.py
from dataclasses import dataclass, field

from ride_share.domain.entities.driver import Driver
from ride_share.domain.entities.ride import Ride
from ride_share.domain.entities.rider import Rider
from ride_share.domain.hooks import BookHooks, NoopHooks


@dataclass
class RideBook:
    """
    Owns every Ride of a run. Drivers and riders only hold references to
    entries of `rides`; handles are positions in that list.
    Ids are never checked for uniqueness, so participants are kept in lists
    rather than keyed by id.
    """

    rides: list[Ride] = field(default_factory=list)
    drivers: list[Driver] = field(default_factory=list)
    riders: list[Rider] = field(default_factory=list)
    hooks: BookHooks = field(default_factory=NoopHooks, repr=False)

    def add_ride(self, ride: Ride) -> int:
        self.rides.append(ride)
        handle = len(self.rides) - 1
        self.hooks.ride_added(ride, handle=handle)
        return handle

    def ride(self, handle: int) -> Ride:
        if handle < 0:
            raise IndexError(f"ride handle out of range: {handle}")
        return self.rides[handle]

    def add_driver(self, d: Driver) -> None:
        self.drivers.append(d)

    def add_rider(self, r: Rider) -> None:
        self.riders.append(r)

    def assign(self, d: Driver, handle: int) -> None:
        ride = self.ride(handle)
        d.add_ride(ride)
        self.hooks.ride_assigned(d, ride, handle=handle)

    def request(self, r: Rider, handle: int) -> None:
        ride = self.ride(handle)
        r.request_ride(ride)
        self.hooks.ride_requested(r, ride, handle=handle)
