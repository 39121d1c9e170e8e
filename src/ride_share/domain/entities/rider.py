# domain/entities/rider.py
from dataclasses import dataclass, field

from ride_share.app.protocols import Fareable


@dataclass
class Rider:
    id: int
    name: str
    requested_rides: list[Fareable] = field(default_factory=list)

    def request_ride(self, ride: Fareable) -> None:
        self.requested_rides.append(ride)

    def view_rides(self) -> list[str]:
        return [r.describe() for r in self.requested_rides]
