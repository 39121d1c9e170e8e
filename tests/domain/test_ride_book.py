import pytest

from ride_share.domain.entities.driver import Driver
from ride_share.domain.entities.ride import PremiumRide, StandardRide
from ride_share.domain.entities.rider import Rider
from ride_share.domain.state import RideBook


class _HookSpy:
    def __init__(self):
        self.calls = []

    def ride_added(self, ride, *, handle):
        self.calls.append(("added", ride.id, handle))

    def ride_assigned(self, driver, ride, *, handle):
        self.calls.append(("assigned", driver.id, ride.id))

    def ride_requested(self, rider, ride, *, handle):
        self.calls.append(("requested", rider.id, ride.id))

    def fare_quoted(self, ride):
        pass


def test_handles_are_positions_in_the_arena():
    book = RideBook()
    h0 = book.add_ride(StandardRide(101, "Downtown", "Airport", 10))
    h1 = book.add_ride(PremiumRide(102, "Mall", "Hotel", 5))
    assert (h0, h1) == (0, 1)
    assert book.ride(h1).id == 102


def test_assign_and_request_hand_out_the_owned_instance():
    book = RideBook()
    h = book.add_ride(StandardRide(101, "Downtown", "Airport", 10))
    alice = Driver(id=1, name="Alice", rating=4.9)
    bob = Rider(id=501, name="Bob")
    book.add_driver(alice)
    book.add_rider(bob)
    book.assign(alice, h)
    book.request(bob, h)

    assert alice.assigned_rides[0] is book.rides[h]
    assert bob.requested_rides[0] is book.rides[h]

    book.ride(h).set_distance(20)
    assert alice.assigned_rides[0].calculate_fare() == 30.0
    assert bob.requested_rides[0].calculate_fare() == 30.0


def test_duplicate_ids_are_kept():
    book = RideBook()
    book.add_ride(StandardRide(7, "a", "b", 1))
    book.add_ride(StandardRide(7, "c", "d", 2))
    book.add_driver(Driver(id=1, name="A", rating=5))
    book.add_driver(Driver(id=1, name="B", rating=5))
    assert len(book.rides) == 2
    assert [d.name for d in book.drivers] == ["A", "B"]


def test_unknown_handle_raises_index_error():
    book = RideBook()
    book.add_ride(StandardRide(1, "a", "b", 1))
    with pytest.raises(IndexError):
        book.ride(1)
    with pytest.raises(IndexError):
        book.ride(-1)


def test_mutations_are_reported_to_hooks():
    spy = _HookSpy()
    book = RideBook(hooks=spy)
    h = book.add_ride(PremiumRide(102, "Mall", "Hotel", 5))
    d = Driver(id=1, name="Alice", rating=4.9)
    r = Rider(id=501, name="Bob")
    book.assign(d, h)
    book.request(r, h)
    assert spy.calls == [("added", 102, 0), ("assigned", 1, 102), ("requested", 501, 102)]
