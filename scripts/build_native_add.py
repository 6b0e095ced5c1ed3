"""
scripts/build_native_add.py

Compile `src/ffibench/infrastructure/native/cpp/add.c` into the platform
shared library the benchmark loads by default.

Usage
-----
python scripts/build_native_add.py                 # writes ./libadd.so (or add.dll / libadd.dylib)
python scripts/build_native_add.py --out-dir build
CC=clang python scripts/build_native_add.py
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
import subprocess
from pathlib import Path

from ffibench.infrastructure.native.python._native_build import build_add_library


def main() -> None:
    ap = argparse.ArgumentParser(description="Build the native add library.")
    ap.add_argument("--out-dir", type=str, default=os.curdir)
    ap.add_argument("--cc", type=str, default=None)
    args = ap.parse_args()

    try:
        out = build_add_library(Path(args.out_dir), compiler=args.cc)
    except subprocess.CalledProcessError as e:
        print(e.stderr, file=sys.stderr)
        raise
    print(f"built: {out}")


if __name__ == "__main__":
    main()
