from types import SimpleNamespace

import pytest

from ride_share.config.models import PremiumRideModel, StandardRideModel
from ride_share.domain.entities.ride import PremiumRide, Ride, StandardRide
from ride_share.runtime import registries
from ride_share.runtime.registries import make_ride, register_ride, registered_kinds


def test_builtin_kinds_are_registered():
    assert registered_kinds() == ["premium", "standard"]


def test_make_ride_builds_matching_variant():
    std = make_ride(
        StandardRideModel(id=101, pickup="Downtown", dropoff="Airport", distance_km=10)
    )
    prem = make_ride(PremiumRideModel(id=102, pickup="Mall", dropoff="Hotel", distance_km=5))
    assert isinstance(std, StandardRide) and std.distance_km == 10
    assert isinstance(prem, PremiumRide) and prem.pickup == "Mall"


def test_unknown_kind_raises_value_error():
    with pytest.raises(ValueError, match="Unknown ride kind 'pool'"):
        make_ride(SimpleNamespace(kind="pool"))


def test_new_variant_plugs_in_without_touching_shared_code(monkeypatch):
    monkeypatch.setattr(registries, "_ride_registry", dict(registries._ride_registry))

    class PoolRide(Ride):
        kind = "pool"

        def calculate_fare(self) -> float:
            return self.distance_km * 0.75

    @register_ride("pool")
    def _make_pool(cfg):
        return PoolRide(cfg.id, cfg.pickup, cfg.dropoff, cfg.distance_km)

    cfg = SimpleNamespace(kind="pool", id=9, pickup="A", dropoff="B", distance_km=8)
    ride = make_ride(cfg)
    assert ride.calculate_fare() == pytest.approx(6.0)
    assert ride.describe() == "Ride 9: from A to B, distance=8 km, fare=6"
