import os
import tempfile
import unittest
import warnings
from typing import List, Sequence, Tuple
from unittest import mock

import numpy as np

from ffibench.domain._errors import NativeLibraryNotFoundError
from ffibench.domain._latency import format_report
from ffibench.domain.clock import PerfCounterClock
from ffibench.infrastructure.benchmark import (
    DEFAULT_ARGS,
    DEFAULT_ITERS,
    run_add_benchmark,
    run_call_benchmark,
)


class _ScriptedClock:
    """Clock that replays fixed readings, one per `now()` call."""

    def __init__(self, readings: Sequence[float], ns_per_tick: float = 1.0) -> None:
        self._readings = list(readings)
        self._pos = 0
        self.ns_per_tick = ns_per_tick

    def now(self) -> float:
        r = self._readings[self._pos]
        self._pos += 1
        return r

    @classmethod
    def from_diffs(cls, diffs: Sequence[float], ns_per_tick: float = 1.0):
        readings: List[float] = []
        t = 100.0
        for d in diffs:
            readings.extend([t, t + d])
            t += d + 10.0
        return cls(readings, ns_per_tick)


class _RecordingAdd:
    def __init__(self) -> None:
        self.calls: List[Tuple[int, ...]] = []

    def __call__(self, *args: int) -> int:
        self.calls.append(args)
        return sum(args)


class TestRunCallBenchmark(unittest.TestCase):
    def test_defaults(self) -> None:
        self.assertEqual(DEFAULT_ITERS, 1_000_000)
        self.assertEqual(DEFAULT_ARGS, (1, 2))

    def test_calls_fn_exactly_iters_times_with_fixed_args(self) -> None:
        fn = _RecordingAdd()
        run_call_benchmark(fn, iters=250, clock=PerfCounterClock())
        self.assertEqual(len(fn.calls), 250)
        self.assertTrue(all(c == (1, 2) for c in fn.calls))

    def test_scripted_diffs(self) -> None:
        diffs = [3.0, 1.0, 4.0, 1.0, 5.0]
        fn = _RecordingAdd()
        r = run_call_benchmark(
            fn, iters=len(diffs), clock=_ScriptedClock.from_diffs(diffs)
        )
        self.assertEqual(r.count, 5)
        self.assertAlmostEqual(r.mean_ns, 2.8)
        self.assertEqual(r.min_ns, 1.0)
        self.assertEqual(r.max_ns, 5.0)

    def test_millisecond_ticks_scale_to_nanoseconds(self) -> None:
        diffs = [0.0003, 0.002, 0.0005, 0.0002]
        r = run_call_benchmark(
            _RecordingAdd(),
            iters=len(diffs),
            clock=_ScriptedClock.from_diffs(diffs, ns_per_tick=1e6),
        )
        self.assertAlmostEqual(r.min_ns, 200.0, places=3)
        self.assertAlmostEqual(r.max_ns, 2000.0, places=3)
        self.assertAlmostEqual(r.mean_ns, 750.0, places=3)
        self.assertEqual(
            format_report(r), "4 iters, 750.00 ns/iter, 200.00 ns min, 2000.00 ns max"
        )

    def test_single_iteration(self) -> None:
        r = run_call_benchmark(
            _RecordingAdd(), iters=1, clock=_ScriptedClock.from_diffs([42.0])
        )
        self.assertEqual(r.count, 1)
        self.assertEqual(r.min_ns, 42.0)
        self.assertEqual(r.max_ns, 42.0)
        self.assertEqual(r.mean_ns, 42.0)

    def test_rejects_zero_iters_without_calling(self) -> None:
        fn = _RecordingAdd()
        with self.assertRaises(ValueError):
            run_call_benchmark(fn, iters=0)
        self.assertEqual(fn.calls, [])

    def test_samples_buffer_receives_every_diff(self) -> None:
        diffs = [5.0, 2.0, 8.0]
        samples = np.full((3,), -1.0, dtype=np.float64)
        run_call_benchmark(
            _RecordingAdd(),
            iters=3,
            clock=_ScriptedClock.from_diffs(diffs),
            samples=samples,
        )
        np.testing.assert_array_equal(samples, np.array(diffs))

    def test_samples_buffer_validation(self) -> None:
        fn = _RecordingAdd()
        with self.assertRaises(ValueError):
            run_call_benchmark(fn, iters=4, samples=np.empty((3,), dtype=np.float64))
        with self.assertRaises(ValueError):
            run_call_benchmark(fn, iters=3, samples=np.empty((3,), dtype=np.float32))
        with self.assertRaises(ValueError):
            run_call_benchmark(fn, iters=3, samples=np.empty((3, 1), dtype=np.float64))
        self.assertEqual(fn.calls, [])

    def test_statistics_match_recorded_samples(self) -> None:
        n = 2000
        samples = np.empty((n,), dtype=np.float64)
        r = run_call_benchmark(
            _RecordingAdd(), iters=n, clock=PerfCounterClock(), samples=samples
        )

        self.assertTrue(np.all(samples >= 0))
        self.assertLessEqual(r.min_ns, r.mean_ns)
        self.assertLessEqual(r.mean_ns, r.max_ns)
        self.assertEqual(r.min_ns, samples.min())
        self.assertEqual(r.max_ns, samples.max())
        np.testing.assert_allclose(r.mean_ns * n, samples.sum(), rtol=1e-9)

    def test_warns_on_coarse_default_clock(self) -> None:
        target = "ffibench.infrastructure.benchmark._ffi_call_bench.clock_resolution_ns"
        with mock.patch(target, return_value=15_600_000.0):
            with self.assertWarns(RuntimeWarning):
                run_call_benchmark(_RecordingAdd(), iters=3)

    def test_no_warning_with_fine_default_clock(self) -> None:
        target = "ffibench.infrastructure.benchmark._ffi_call_bench.clock_resolution_ns"
        with mock.patch(target, return_value=1.0):
            with warnings.catch_warnings():
                warnings.simplefilter("error", RuntimeWarning)
                run_call_benchmark(_RecordingAdd(), iters=3)


class TestRunAddBenchmarkSetupFailure(unittest.TestCase):
    def test_missing_library_fails_before_timing(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            missing = os.path.join(d, "does_not_exist.so")
            target = "ffibench.infrastructure.benchmark._ffi_call_bench.run_call_benchmark"
            with mock.patch(target) as loop:
                with self.assertRaises(NativeLibraryNotFoundError):
                    run_add_benchmark(missing, iters=10)
                loop.assert_not_called()


if __name__ == "__main__":
    unittest.main()
