# dlcache/core/process/__init__.py
from .calls import (
    always_confirm,
    ask_yes_no,
    do_function,
    process_and_write,
    read_file,
    write_object,
)
from .orchestrate import maybe_cache, maybe_process, read_or_cache, read_or_process

__all__ = [
    "do_function",
    "read_file",
    "write_object",
    "process_and_write",
    "always_confirm",
    "ask_yes_no",
    "read_or_process",
    "maybe_process",
    "read_or_cache",
    "maybe_cache",
]
