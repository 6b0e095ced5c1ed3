"""
ctypes binding for the benchmarked `add` symbol.

Exports:
- add : (int32 a, int32 b) -> int32

The native side lives in `../cpp/add.c` and is built with
`scripts/build_native_add.py`.
"""

from __future__ import annotations

from typing import Callable, Optional

from ....domain._ffi_types import SymbolDefinition
from ._dynamic_library import DynamicLibrary

ADD_SYMBOL = "add"

ADD_SYMBOLS = {
    ADD_SYMBOL: SymbolDefinition(("i32", "i32"), "i32"),
}


def load_add_library(lib_path: Optional[str] = None) -> DynamicLibrary:
    return DynamicLibrary(lib_path, ADD_SYMBOLS)


def load_add(lib_path: Optional[str] = None) -> Callable[[int, int], int]:
    """
    Load the library and return the bound `add` function.

    Parameters
    ----------
    lib_path : Optional[str]
        Library path; see `load_native_library` for the fallback order.

    Returns
    -------
    Callable[[int, int], int]
        `ctypes` function with `argtypes=[c_int32, c_int32]` and
        `restype=c_int32`.
    """
    return load_add_library(lib_path).symbols[ADD_SYMBOL]
