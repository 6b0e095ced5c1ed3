"""
ffibench native shared library loader.

This module centralizes resolving and loading the benchmarked shared library
via `ctypes`, including platform-specific filename conventions and Windows
DLL dependency handling.

Resolution policy
-----------------
1. An explicit `lib_path` argument always wins.
2. Otherwise the `FFIBENCH_NATIVE_LIB` environment variable, if set.
3. Otherwise the platform filename of the `add` library, relative to the
   current working directory (`./add.dll`, `./libadd.so`, `./libadd.dylib`).

No system search paths are consulted; a missing file is reported as such
instead of being looked up elsewhere.

Windows-specific considerations
-------------------------------
On Windows (Python 3.8+), dependent DLL discovery is restricted by default.
The directory containing the target library, and `FFIBENCH_MINGW_BIN` when
defined, are registered with `os.add_dll_directory(...)`. Registration
handles are attached to the returned library so they live as long as it.
"""

from __future__ import annotations

import ctypes
import os
import sys
from pathlib import Path
from typing import Optional

from ....domain._errors import NativeLibraryLoadError, NativeLibraryNotFoundError

LIB_PATH_ENV = "FFIBENCH_NATIVE_LIB"
MINGW_BIN_ENV = "FFIBENCH_MINGW_BIN"


def native_lib_name(stem: str = "add") -> str:
    """
    Return the platform-specific filename for a shared library.

    Parameters
    ----------
    stem : str
        Library base name without prefix or extension.

    Returns
    -------
    str
        The filename (not a full path) on the current OS.

    Notes
    -----
    - Windows:  <stem>.dll
    - macOS:    lib<stem>.dylib
    - Linux:    lib<stem>.so
    """
    if sys.platform.startswith("win"):
        return f"{stem}.dll"
    if sys.platform == "darwin":
        return f"lib{stem}.dylib"
    return f"lib{stem}.so"


def resolve_native_lib_path(lib_path: Optional[str] = None) -> Path:
    """
    Resolve which library file to load, without touching the loader.

    Parameters
    ----------
    lib_path : Optional[str]
        Explicit library path. Relative paths resolve against the current
        working directory.

    Returns
    -------
    Path
        Absolute path of the candidate library. It may not exist.
    """
    if lib_path is None:
        lib_path = os.environ.get(LIB_PATH_ENV) or None
    if lib_path is None:
        lib_path = os.path.join(os.curdir, native_lib_name())
    return Path(lib_path).resolve()


def load_native_library(lib_path: Optional[str] = None) -> ctypes.CDLL:
    """
    Load the benchmarked shared library via ctypes.

    Parameters
    ----------
    lib_path : Optional[str]
        Absolute or relative path to a specific library file. See the module
        docstring for the fallback order when omitted.

    Returns
    -------
    ctypes.CDLL
        A loaded ctypes handle to the native library.

    Raises
    ------
    NativeLibraryNotFoundError
        If the resolved file does not exist.
    NativeLibraryLoadError
        If the file exists but the OS loader rejects it, or if Windows DLL
        directory registration fails.
    """
    return _load_cdll_with_windows_dirs(resolve_native_lib_path(lib_path))


def _load_cdll_with_windows_dirs(dll_path: Path) -> ctypes.CDLL:
    if not dll_path.is_file():
        raise NativeLibraryNotFoundError(str(dll_path))

    handles = []
    if sys.platform.startswith("win") and hasattr(os, "add_dll_directory"):
        dirs = [str(dll_path.parent)]
        mingw_bin = os.environ.get(MINGW_BIN_ENV, "")
        if mingw_bin:
            dirs.append(mingw_bin)

        for d in dirs:
            try:
                handles.append(os.add_dll_directory(d))
            except OSError as e:
                raise NativeLibraryLoadError(
                    str(dll_path),
                    f"add_dll_directory failed for {d!r} "
                    f"winerror={getattr(e, 'winerror', None)} "
                    f"strerror={getattr(e, 'strerror', None)!r}",
                ) from e

    dll_str = str(dll_path)
    try:
        lib = ctypes.CDLL(dll_str)
    except OSError as e:
        raise NativeLibraryLoadError(dll_str, str(e)) from e

    setattr(lib, "_ffibench_dll_dir_handles", handles)
    return lib
