# domain/entities/driver.py
from dataclasses import dataclass, field

from ride_share.app.protocols import Fareable
from ride_share.domain.entities.ride import fmt_num


@dataclass
class Driver:
    id: int
    name: str
    rating: float  # no 0-5 bound enforced
    assigned_rides: list[Fareable] = field(default_factory=list)

    @property
    def ride_count(self) -> int:
        return len(self.assigned_rides)

    def add_ride(self, ride: Fareable) -> None:
        # duplicates are kept, count reflects every call
        self.assigned_rides.append(ride)

    def describe(self) -> str:
        return (
            f"Driver {self.name} (ID: {self.id}) Rating: {fmt_num(self.rating)}"
            f" | Rides completed: {self.ride_count}"
        )
