from ._ffi_call_bench import (
    DEFAULT_ARGS,
    DEFAULT_ITERS,
    run_add_benchmark,
    run_call_benchmark,
)

__all__ = [
    "DEFAULT_ARGS",
    "DEFAULT_ITERS",
    run_add_benchmark.__name__,
    run_call_benchmark.__name__,
]
