"""
Build the native `add` library from its C source.

Compiler selection: `$CC` if set, otherwise the first of `cc`, `gcc`,
`clang` found on PATH.
"""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

from ._native_loader import native_lib_name

ADD_SOURCE = Path(__file__).resolve().parents[1] / "cpp" / "add.c"


def find_c_compiler() -> Optional[str]:
    cc = os.environ.get("CC")
    if cc:
        return shutil.which(cc) or cc
    for candidate in ("cc", "gcc", "clang"):
        found = shutil.which(candidate)
        if found:
            return found
    return None


def shared_lib_flags() -> List[str]:
    if sys.platform == "darwin":
        return ["-dynamiclib"]
    if sys.platform.startswith("win"):
        return ["-shared"]
    return ["-shared", "-fPIC"]


def build_add_library(out_dir: Path, *, compiler: Optional[str] = None) -> Path:
    """
    Build the `add` shared library into `out_dir`.

    Parameters
    ----------
    out_dir : Path
        Output directory; created if missing.
    compiler : Optional[str]
        C compiler executable. Defaults to `find_c_compiler()`.

    Returns
    -------
    Path
        Path of the built library, named by `native_lib_name("add")`.

    Raises
    ------
    RuntimeError
        If no C compiler is available.
    subprocess.CalledProcessError
        If compilation fails.
    """
    compiler = compiler or find_c_compiler()
    if compiler is None:
        raise RuntimeError("No C compiler found (set CC or install cc/gcc/clang)")

    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    out = out_dir / native_lib_name("add")

    cmd = [compiler, "-O2", *shared_lib_flags(), "-o", str(out), str(ADD_SOURCE)]
    subprocess.run(cmd, capture_output=True, text=True, check=True)
    return out
