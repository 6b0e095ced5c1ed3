"""
scripts/bench_add_ffi.py

Native call latency microbenchmark (NOT a unit test) for ffibench.

Loads the shared library exposing `add(int32, int32) -> int32`, calls
`add(1, 2)` one million times, times each call individually and prints:

    1000000 iters, 62.41 ns/iter, 40.00 ns min, 18230.00 ns max

Timing policy
-------------
- Library load and symbol binding happen once, before the timed loop.
- Every call is timed on its own; no warm-up, no outlier rejection.
- Default clock is `time.perf_counter_ns`.

Usage
-----
python scripts/bench_add_ffi.py
python scripts/bench_add_ffi.py --lib build/libadd.so
python scripts/bench_add_ffi.py --iters 100000 --clock ms
python scripts/bench_add_ffi.py --save-samples samples.npy

Notes
-----
- With no arguments the library is taken from FFIBENCH_NATIVE_LIB, or from
  ./add.dll, ./libadd.so or ./libadd.dylib depending on the platform.
- Build the library with scripts/build_native_add.py.
- A setup failure prints a traceback to stderr and nothing to stdout.
"""

from __future__ import annotations

import os
import sys

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC_DIR = os.path.join(ROOT_DIR, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

import argparse
from typing import List, Optional

import numpy as np

from ffibench.domain._latency import format_report
from ffibench.domain.clock import make_clock
from ffibench.infrastructure.benchmark import DEFAULT_ITERS, run_add_benchmark


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Time add(1, 2) through ctypes.")
    ap.add_argument(
        "--lib",
        type=str,
        default=None,
        help="shared library path (default: $FFIBENCH_NATIVE_LIB or ./<platform name>)",
    )
    ap.add_argument("--iters", type=int, default=DEFAULT_ITERS)
    ap.add_argument("--clock", choices=("ns", "ms"), default="ns")
    ap.add_argument(
        "--save-samples",
        type=str,
        default=None,
        help="write raw per-call durations (clock ticks) to this .npy file",
    )
    return ap


def main(argv: Optional[List[str]] = None) -> str:
    args = build_parser().parse_args(argv)
    if args.iters < 1:
        raise SystemExit(f"--iters must be >= 1, got {args.iters}")

    samples = None
    if args.save_samples:
        samples = np.empty((args.iters,), dtype=np.float64)

    report = run_add_benchmark(
        args.lib,
        iters=args.iters,
        clock=make_clock(args.clock),
        samples=samples,
    )

    line = format_report(report)
    print(line)

    if samples is not None:
        np.save(args.save_samples, samples)
    return line


if __name__ == "__main__":
    main()
