from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    debug: bool = False
    events: Literal["memory", "jsonl"] = "memory"  # jsonl: business events to stderr


# ----------------- RIDES ---------------------
# distance_km is unbounded; rides accept any value.


class StandardRideModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["standard"] = "standard"
    id: int
    pickup: str
    dropoff: str
    distance_km: float


class PremiumRideModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["premium"] = "premium"
    id: int
    pickup: str
    dropoff: str
    distance_km: float


RideUnion = Annotated[StandardRideModel | PremiumRideModel, Field(discriminator="kind")]


# ----------------- PARTICIPANTS ---------------------


class DriverModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: int
    name: str
    rating: float
    rides: list[int] = Field(default_factory=list)  # handles into ScenarioModel.rides


class RiderModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: int
    name: str
    rides: list[int] = Field(default_factory=list)


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    log: LogModel = LogModel()
    rides: list[RideUnion] = Field(default_factory=list)
    drivers: list[DriverModel] = Field(default_factory=list)
    riders: list[RiderModel] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_handles(self):
        n = len(self.rides)
        for who in (*self.drivers, *self.riders):
            bad = [h for h in who.rides if not 0 <= h < n]
            if bad and n == 0:
                raise ValueError(
                    f"{who.name!r} references ride handles {bad} but the scenario has no rides"
                )
            if bad:
                raise ValueError(
                    f"{who.name!r} references unknown ride handles {bad}; "
                    f"valid handles are 0..{n - 1}"
                )
        return self


DEFAULT_SCENARIO = {
    "name": "demo",
    "run_id": "demo",
    "rides": [
        {
            "kind": "standard",
            "id": 101,
            "pickup": "Downtown",
            "dropoff": "Airport",
            "distance_km": 10,
        },
        {"kind": "premium", "id": 102, "pickup": "Mall", "dropoff": "Hotel", "distance_km": 5},
    ],
    "drivers": [{"id": 1, "name": "Alice", "rating": 4.9, "rides": [0, 1]}],
    "riders": [{"id": 501, "name": "Bob", "rides": [0, 1]}],
}
