from typing import Protocol, runtime_checkable


@runtime_checkable
class Fareable(Protocol):
    """
    Anything a driver or rider can hold on to.
    Callers dispatch through these two methods only; no variant checks.
    """

    id: int

    def calculate_fare(self) -> float: ...
    def describe(self) -> str: ...
