# domain/entities/ride.py
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar


def fmt_num(x: float) -> str:
    """Shortest general form: 10.0 -> '10', 17.5 -> '17.5'."""
    return f"{x:g}"


@dataclass(eq=False)
class Ride(ABC):
    """
    A trip between two named places. Fare policy is the only thing variants change.

    Rides compare by identity; drivers and riders hold references into the
    RideBook, never copies.
    """

    id: int
    pickup: str
    dropoff: str
    distance_km: float  # unvalidated, may be <= 0

    kind: ClassVar[str] = ""

    def get_distance(self) -> float:
        return self.distance_km

    def set_distance(self, d: float) -> None:
        self.distance_km = d

    @abstractmethod
    def calculate_fare(self) -> float: ...

    def describe(self) -> str:
        return (
            f"Ride {self.id}: from {self.pickup} to {self.dropoff}, "
            f"distance={fmt_num(self.distance_km)} km, fare={fmt_num(self.calculate_fare())}"
        )


class StandardRide(Ride):
    kind = "standard"
    RATE_PER_KM: ClassVar[float] = 1.50

    def calculate_fare(self) -> float:
        return self.distance_km * self.RATE_PER_KM


class PremiumRide(Ride):
    kind = "premium"
    RATE_PER_KM: ClassVar[float] = 2.50
    FLAT_FEE: ClassVar[float] = 5.00

    def calculate_fare(self) -> float:
        return self.distance_km * self.RATE_PER_KM + self.FLAT_FEE
