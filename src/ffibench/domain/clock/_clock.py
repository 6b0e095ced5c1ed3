"""
Monotonic clocks used by the benchmark loop.

- `PerfCounterClock` reads `time.perf_counter_ns()` directly. Ticks are
  integer nanoseconds, so per-call durations in the tens of nanoseconds are
  not lost to float rounding or millisecond quantization.
- `MillisecondClock` returns float milliseconds elapsed since the clock was
  created, the unit a browser-style `performance.now()` uses. It is kept for
  comparing against numbers produced that way.
"""

from __future__ import annotations

import time


class PerfCounterClock:
    """
    Integer-nanosecond clock backed by `time.perf_counter_ns`.
    """

    __slots__ = ()

    ns_per_tick = 1.0

    def now(self) -> int:
        return time.perf_counter_ns()

    def __repr__(self) -> str:
        return "PerfCounterClock()"


class MillisecondClock:
    """
    Float-millisecond clock relative to its own creation time.

    The reading is assembled from whole seconds and sub-second nanoseconds
    of the elapsed interval, matching how a `performance.now()` host
    binding derives its value.
    """

    __slots__ = ("_start_ns",)

    ns_per_tick = 1e6

    def __init__(self) -> None:
        self._start_ns = time.perf_counter_ns()

    def now(self) -> float:
        elapsed = time.perf_counter_ns() - self._start_ns
        seconds, subsec_nanos = divmod(elapsed, 1_000_000_000)
        return float(seconds * 1_000) + (subsec_nanos / 1_000_000.0)

    def __repr__(self) -> str:
        return "MillisecondClock()"


_CLOCKS = {
    "ns": PerfCounterClock,
    "ms": MillisecondClock,
}


def make_clock(name: str = "ns"):
    """
    Build a clock by short name (`"ns"` or `"ms"`).
    """
    try:
        return _CLOCKS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown clock {name!r}; expected one of {sorted(_CLOCKS)}"
        ) from None


def clock_resolution_ns(name: str = "perf_counter") -> float:
    """
    Return the platform-declared resolution of a `time` clock in nanoseconds.
    """
    return time.get_clock_info(name).resolution * 1e9
