# ride_share/app/report.py
from ride_share.app.protocols import Fareable
from ride_share.domain.state import RideBook


def _ride_line(book: RideBook, ride: Fareable) -> str:
    book.hooks.fare_quoted(ride)
    return ride.describe()


def render(book: RideBook) -> list[str]:
    """
    Human-readable summary of the book, one string per output line:
    every ride, then each driver's summary, then each rider's history.
    Not a stable machine format.
    """
    lines = ["-- Ride Details --"]
    lines += [_ride_line(book, r) for r in book.rides]

    for d in book.drivers:
        lines += ["", d.describe()]

    for r in book.riders:
        lines += ["", f"-- {r.name}'s Ride History --"]
        for ride in r.requested_rides:
            book.hooks.fare_quoted(ride)
        lines += r.view_rides()

    return lines
