"""
Declarative FFI signature descriptors.

A native symbol is described by a `SymbolDefinition`: an ordered tuple of
parameter type names and a single result type name. Type names are short
strings (`"i32"`, `"f64"`, `"pointer"`, ...) so that symbol tables can be
written as plain data:

    ADD_SYMBOLS = {"add": SymbolDefinition(("i32", "i32"), "i32")}

Descriptors are validated eagerly at construction time, which means a typo
in a symbol table surfaces during setup rather than when the symbol is first
called.
"""

from __future__ import annotations

import ctypes
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

from ._errors import UnknownFFITypeError

FFI_TYPES: Dict[str, Any] = {
    "u8": ctypes.c_uint8,
    "i8": ctypes.c_int8,
    "u16": ctypes.c_uint16,
    "i16": ctypes.c_int16,
    "u32": ctypes.c_uint32,
    "i32": ctypes.c_int32,
    "u64": ctypes.c_uint64,
    "i64": ctypes.c_int64,
    "f32": ctypes.c_float,
    "f64": ctypes.c_double,
    "pointer": ctypes.c_void_p,
    "void": None,
}


def to_ctypes_type(type_name: str) -> Optional[Any]:
    """
    Map an FFI type name onto its `ctypes` counterpart.

    Parameters
    ----------
    type_name : str
        One of the keys of `FFI_TYPES`.

    Returns
    -------
    Optional[Any]
        A `ctypes` simple type, or None for `"void"`.

    Raises
    ------
    UnknownFFITypeError
        If `type_name` is not a recognized FFI type name.
    """
    if not isinstance(type_name, str) or type_name not in FFI_TYPES:
        raise UnknownFFITypeError(type_name)
    return FFI_TYPES[type_name]


@dataclass(frozen=True)
class SymbolDefinition:
    """
    Signature of one native symbol.

    Parameters
    ----------
    parameters : Sequence[str]
        Parameter type names in call order. `"void"` is not allowed here.
    result : str
        Result type name; `"void"` means the symbol returns nothing.
    """

    parameters: Tuple[str, ...]
    result: str = "void"

    def __init__(self, parameters: Sequence[str], result: str = "void") -> None:
        params = tuple(parameters)
        for p in params:
            if to_ctypes_type(p) is None:
                raise UnknownFFITypeError(p, "void is only valid as a result type")
        to_ctypes_type(result)
        object.__setattr__(self, "parameters", params)
        object.__setattr__(self, "result", result)

    @property
    def argtypes(self) -> list:
        return [to_ctypes_type(p) for p in self.parameters]

    @property
    def restype(self) -> Optional[Any]:
        return to_ctypes_type(self.result)

    def __str__(self) -> str:
        return f"({', '.join(self.parameters)}) -> {self.result}"
