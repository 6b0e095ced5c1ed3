"""
Clock contract for the timing loop.

The benchmark only needs two things from a time source: a monotonic reading
and the size of one reading unit in nanoseconds. `ClockLike` captures that
structurally so tests can drive the loop with a scripted clock without
subclassing anything.
"""

from __future__ import annotations

from typing import Protocol, Union, runtime_checkable


@runtime_checkable
class ClockLike(Protocol):
    """
    Duck-typed monotonic clock.

    Attributes
    ----------
    ns_per_tick : float
        How many nanoseconds one unit of `now()` represents.
    """

    ns_per_tick: float

    def now(self) -> Union[int, float]: ...
