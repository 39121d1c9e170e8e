# ride_share/io/business_events.py

from dataclasses import dataclass


# Base type for analytics events
@dataclass
class BizEvent:
    run_id: str
    seq: int  # emission order within the run
    name: str  # stable event name


@dataclass
class RideAddedBiz(BizEvent):
    ride_id: int
    kind: str
    distance_km: float
    fare: float


@dataclass
class RideAssignedBiz(BizEvent):
    driver_id: int
    ride_id: int


@dataclass
class RideRequestedBiz(BizEvent):
    rider_id: int
    ride_id: int
