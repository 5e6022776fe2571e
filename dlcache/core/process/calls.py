# dlcache/core/process/calls.py
"""
Calling the pluggable process / read / write functions.

Signatures expected from callers:
  process_f(source_path, **process_args) -> artifact
  read_f(target_path, **read_args)       -> artifact
  write_f(artifact, target_path, **write_args)

Defaults are joblib.load for reading/processing and joblib.dump for writing.
Exceptions raised by these functions propagate unchanged.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Any

import joblib

from dlcache.core.log import get_logger

logger = get_logger(__name__)

# Confirm signature: (question) -> proceed?
ConfirmFn = Callable[[str], bool]

DEFAULT_READ_F: Callable[..., Any] = joblib.load
DEFAULT_WRITE_F: Callable[..., Any] = joblib.dump


def do_function(
    do_f: Callable[..., Any] | None,
    default_f: Callable[..., Any],
    main_args: Sequence[Any],
    extra_args: Mapping[str, Any] | None = None,
) -> Any:
    """Call `do_f` (or `default_f` when None) with positional `main_args` then keyword `extra_args`."""
    fn = default_f if do_f is None else do_f
    return fn(*main_args, **dict(extra_args or {}))


def read_file(
    path: str | os.PathLike[str],
    read_f: Callable[..., Any] | None = None,
    read_args: Mapping[str, Any] | None = None,
) -> Any:
    # "Processing" a raw file and reading a cached one are the same call shape.
    return do_function(read_f, DEFAULT_READ_F, [path], read_args)


def write_object(
    obj: Any,
    target_path: str | os.PathLike[str],
    write_f: Callable[..., Any] | None = None,
    write_args: Mapping[str, Any] | None = None,
) -> Any:
    """Create the parent directories of `target_path`, then write `obj` there."""
    Path(target_path).parent.mkdir(parents=True, exist_ok=True)
    return do_function(write_f, DEFAULT_WRITE_F, [obj, target_path], write_args)


# ---------------------------
# Confirmation callbacks
# ---------------------------


def always_confirm(question: str) -> bool:
    return True


def ask_yes_no(question: str) -> bool:
    """
    Prompt on the terminal when attended; confirm silently otherwise.

    Anything starting with "n" declines; an empty answer accepts.
    """
    if not (sys.stdin and sys.stdin.isatty()):
        return True
    answer = input(f"{question} [Y/n] ").strip().lower()
    return not answer.startswith("n")


def process_and_write(
    source_path: str | os.PathLike[str],
    target_path: str | os.PathLike[str],
    process_f: Callable[..., Any] | None = None,
    process_args: Mapping[str, Any] | None = None,
    write_f: Callable[..., Any] | None = None,
    write_args: Mapping[str, Any] | None = None,
    confirm: ConfirmFn | None = None,
) -> Any:
    """
    Process `source_path` and persist the result at `target_path`.

    `source_path` is intentionally not checked for existence: some process
    functions produce their own input. The write step runs only if `confirm`
    agrees (default: always). The processed object is returned either way.
    """
    processed = read_file(source_path, read_f=process_f, read_args=process_args)

    question = f"Cache processed file at {target_path}?"
    if (confirm or always_confirm)(question):
        write_object(processed, target_path, write_f=write_f, write_args=write_args)
        logger.debug("Cached processed %s at %s", source_path, target_path)
    else:
        logger.debug("Skipped caching %s (declined)", target_path)

    return processed


__all__ = [
    "ConfirmFn",
    "DEFAULT_READ_F",
    "DEFAULT_WRITE_F",
    "do_function",
    "read_file",
    "write_object",
    "always_confirm",
    "ask_yes_no",
    "process_and_write",
]
