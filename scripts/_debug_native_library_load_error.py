import os
import sys

# Ensure repo_root/src is importable when running this file directly:
# repo_root/
#   src/ffibench/...
#   scripts/_debug_native_library_load_error.py
THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC_DIR = os.path.join(ROOT_DIR, "src")

if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from ffibench.infrastructure.native.python._dynamic_library import describe_symbol
from ffibench.infrastructure.native.python._native_loader import (
    resolve_native_lib_path,
)
from ffibench.infrastructure.native.python.add_ctypes import load_add_library

if __name__ == "__main__":
    lib_path = sys.argv[1] if len(sys.argv) > 1 else None
    print("resolved:", resolve_native_lib_path(lib_path))
    try:
        lib = load_add_library(lib_path)
        print("OK loaded:", lib)
        for name, fn in lib.symbols.items():
            print("  ", describe_symbol(name, fn))
    except Exception as e:
        print("FAILED:", repr(e))
        raise
