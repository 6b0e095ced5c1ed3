from ._clock import MillisecondClock, PerfCounterClock, clock_resolution_ns, make_clock
from ._clock_protocol import ClockLike

__all__ = [
    ClockLike.__name__,
    MillisecondClock.__name__,
    PerfCounterClock.__name__,
    clock_resolution_ns.__name__,
    make_clock.__name__,
]
