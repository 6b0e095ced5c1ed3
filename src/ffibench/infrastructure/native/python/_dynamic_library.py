"""
Bind a table of native symbols from a shared library.

`DynamicLibrary` takes a library path and a mapping of symbol name to
`SymbolDefinition`, loads the library once, and exposes each symbol as a
ready-to-call `ctypes` function under `.symbols[name]`:

    lib = DynamicLibrary("./libadd.so", {
        "add": SymbolDefinition(("i32", "i32"), "i32"),
    })
    lib.symbols["add"](1, 2)

All binding work (symbol lookup, `argtypes`/`restype` assignment) happens in
the constructor, so calling a bound symbol afterwards costs exactly one
`ctypes` foreign call.
"""

from __future__ import annotations

import ctypes
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional

from ....domain._errors import SymbolNotFoundError
from ....domain._ffi_types import SymbolDefinition
from ._native_loader import load_native_library


class DynamicLibrary:
    """
    A loaded shared library with a declared set of bound symbols.

    Parameters
    ----------
    path : Optional[str]
        Library path; resolved by `load_native_library`.
    symbols : Mapping[str, SymbolDefinition]
        Symbols to bind and their signatures.

    Raises
    ------
    NativeLibraryNotFoundError, NativeLibraryLoadError
        If the library cannot be loaded.
    SymbolNotFoundError
        If a declared symbol is not exported by the library.
    """

    def __init__(
        self,
        path: Optional[str],
        symbols: Mapping[str, SymbolDefinition],
    ) -> None:
        self.handle = load_native_library(path)
        self.path: str = self.handle._name

        bound: Dict[str, Callable] = {}
        for name, definition in symbols.items():
            bound[name] = bind_symbol(self.handle, name, definition)
        self.symbols = MappingProxyType(bound)

    def __repr__(self) -> str:
        return f"DynamicLibrary({self.path!r}, symbols={list(self.symbols)})"


def bind_symbol(
    lib: ctypes.CDLL, name: str, definition: SymbolDefinition
) -> Callable:
    """
    Look up `name` in `lib` and apply the declared signature to it.

    Parameters
    ----------
    lib : ctypes.CDLL
        Loaded library handle.
    name : str
        Exported symbol name.
    definition : SymbolDefinition
        Parameter and result types for the symbol.

    Returns
    -------
    Callable
        The configured `ctypes` foreign function.

    Raises
    ------
    SymbolNotFoundError
        If the library does not export `name`.
    """
    try:
        fn = getattr(lib, name)
    except AttributeError as e:
        raise SymbolNotFoundError(name, str(lib._name)) from e

    fn.argtypes = definition.argtypes
    fn.restype = definition.restype
    return fn


def symbol_address(fn: Callable) -> int:
    """Return the native address a bound `ctypes` function points at."""
    return ctypes.cast(fn, ctypes.c_void_p).value or 0


def describe_symbol(name: str, fn: Callable) -> str:
    return f"{name} at {hex(symbol_address(fn))}"
