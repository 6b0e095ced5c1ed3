"""
Setup-time exceptions for ffibench.

Every failure this package models happens before the timed loop starts:
the shared library cannot be found or loaded, a declared symbol is not
exported, or a declared signature uses a type name the binding layer does
not know. All of them derive from `FFIBenchSetupError` so callers can abort
a run with a single `except` clause, while the secondary base classes keep
the errors compatible with the builtin exception a plain `ctypes` caller
would expect (`FileNotFoundError`, `OSError`, `AttributeError`,
`ValueError`).

The timed loop itself has no error path: a native call that crashes takes
the interpreter down with it.
"""


class FFIBenchSetupError(RuntimeError):
    """
    Base class for fatal errors raised while preparing a benchmark run.
    """


class NativeLibraryNotFoundError(FFIBenchSetupError, FileNotFoundError):
    """
    Raised when the shared library file does not exist.

    Attributes
    ----------
    path : str
        The fully resolved path that was checked.
    """

    def __init__(self, path: str) -> None:
        super().__init__(f"Native library not found: {path}")
        self.path = path


class NativeLibraryLoadError(FFIBenchSetupError, OSError):
    """
    Raised when the OS dynamic loader rejects an existing library file.

    Attributes
    ----------
    path : str
        The library path handed to the loader.
    reason : str
        The loader's own error message.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to load library: {path} ({reason})")
        self.path = path
        self.reason = reason


class SymbolNotFoundError(FFIBenchSetupError, AttributeError):
    """
    Raised when a declared symbol is not exported by the loaded library.

    Attributes
    ----------
    symbol : str
        Name of the missing symbol.
    path : str
        Library that was searched.
    """

    def __init__(self, symbol: str, path: str) -> None:
        super().__init__(f"Failed to find symbol: {symbol} in {path}")
        self.symbol = symbol
        self.path = path


class UnknownFFITypeError(FFIBenchSetupError, ValueError):
    """
    Raised when a signature descriptor names an unsupported FFI type.

    Attributes
    ----------
    type_name : object
        The offending type name as given by the caller.
    """

    def __init__(self, type_name: object, detail: str = "") -> None:
        msg = f"Unknown type: {type_name!r}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)
        self.type_name = type_name
