"""
Latency statistics for a single benchmark run.

`LatencyAccumulator` keeps the three running scalars of a timing loop (sum,
minimum and maximum of the per-call durations) together with the sample
count. Durations are stored in raw clock ticks; conversion to nanoseconds
happens once, when the accumulator is turned into a `LatencyReport`.

The extrema are seeded from the first sample rather than from a sentinel,
so after any number of samples `minimum` and `maximum` are always values
that were actually observed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

Number = Union[int, float]


@dataclass(frozen=True)
class LatencyReport:
    """
    Summary of one benchmark run, in nanoseconds.

    Attributes
    ----------
    count : int
        Number of timed calls.
    mean_ns : float
        Mean latency per call.
    min_ns : float
        Fastest observed call.
    max_ns : float
        Slowest observed call.
    """

    count: int
    mean_ns: float
    min_ns: float
    max_ns: float


class LatencyAccumulator:
    """
    Running sum/min/max over per-call durations.
    """

    __slots__ = ("count", "total", "minimum", "maximum")

    def __init__(self) -> None:
        self.count: int = 0
        self.total: Number = 0
        self.minimum: Optional[Number] = None
        self.maximum: Optional[Number] = None

    def add(self, diff: Number) -> None:
        if self.count == 0:
            self.minimum = diff
            self.maximum = diff
        else:
            self.minimum = min(self.minimum, diff)
            self.maximum = max(self.maximum, diff)
        self.total += diff
        self.count += 1

    def to_report(self, ns_per_tick: float = 1.0) -> LatencyReport:
        if self.count == 0:
            raise ValueError("cannot summarize an empty accumulator")
        return summarize(
            self.count, self.total, self.minimum, self.maximum, ns_per_tick
        )


def summarize(
    count: int,
    total: Number,
    minimum: Number,
    maximum: Number,
    ns_per_tick: float = 1.0,
) -> LatencyReport:
    """
    Convert raw accumulator values into a `LatencyReport`.

    Parameters
    ----------
    count : int
        Number of samples; must be positive.
    total, minimum, maximum : int | float
        Sum and extrema of the samples, in clock ticks.
    ns_per_tick : float
        Nanoseconds per clock tick (1.0 for a nanosecond counter, 1e6 for a
        millisecond clock).

    Returns
    -------
    LatencyReport
    """
    if count <= 0:
        raise ValueError(f"count must be positive, got {count}")
    return LatencyReport(
        count=int(count),
        mean_ns=(total / count) * ns_per_tick,
        min_ns=minimum * ns_per_tick,
        max_ns=maximum * ns_per_tick,
    )


def format_report(report: LatencyReport) -> str:
    """
    Render the one-line benchmark summary.

    Example
    -------
    `1000000 iters, 500.00 ns/iter, 300.00 ns min, 2000.00 ns max`
    """
    return (
        f"{report.count} iters, {report.mean_ns:.2f} ns/iter, "
        f"{report.min_ns:.2f} ns min, {report.max_ns:.2f} ns max"
    )
