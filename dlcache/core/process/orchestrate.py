# dlcache/core/process/orchestrate.py
"""
Read-or-process workflow.

Decision shared by every entry point:
  force_process or target missing → obtain source (download if remote),
                                     process, write, return processed object
  otherwise                        → read the cached target

The *_cache variants compute the target as
  app_cache_dir(appname) / (filename or construct_processed_filename(source_path))
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from dlcache.core.cache.dirs import AppCacheRegistry, app_cache_dir
from dlcache.core.cache.keys import construct_processed_filename
from dlcache.core.errors import MismatchedReadWriteError
from dlcache.core.fetch.download import obtain_local
from dlcache.core.log import get_logger

from .calls import DEFAULT_READ_F, DEFAULT_WRITE_F, ConfirmFn, process_and_write, read_file

logger = get_logger(__name__)

PathLike = str | os.PathLike[str]


def _normalize_target(target_path: PathLike) -> Path:
    return Path(os.path.normpath(os.fspath(target_path)))


def _cache_target(
    source_path: PathLike,
    appname: str,
    filename: str | None,
    registry: AppCacheRegistry | None,
) -> Path:
    if filename is None:
        filename = construct_processed_filename(source_path)
    return app_cache_dir(appname, registry=registry) / filename


def _check_read_write_pair(read_f: Callable[..., Any] | None, write_f: Callable[..., Any] | None) -> None:
    if (read_f is None) != (write_f is None):
        raise MismatchedReadWriteError(
            "read_f and write_f must be a matched pair. Please specify both read_f and write_f, or neither."
        )


def _needs_processing(target: Path, force_process: bool) -> bool:
    return force_process or not target.exists()


def _process(
    source_path: PathLike,
    target: Path,
    process_f: Callable[..., Any] | None,
    process_args: Mapping[str, Any] | None,
    write_f: Callable[..., Any] | None,
    write_args: Mapping[str, Any] | None,
    confirm: ConfirmFn | None,
) -> Any:
    logger.debug("Processing %s -> %s", source_path, target)
    with obtain_local(source_path) as local_path:
        return process_and_write(
            source_path=local_path,
            target_path=target,
            process_f=process_f,
            process_args=process_args,
            write_f=write_f,
            write_args=write_args,
            confirm=confirm,
        )


# ---------------------------
# Public API
# ---------------------------


def read_or_process(
    source_path: PathLike,
    target_path: PathLike,
    process_f: Callable[..., Any] | None = None,
    process_args: Mapping[str, Any] | None = None,
    read_f: Callable[..., Any] | None = None,
    read_args: Mapping[str, Any] | None = None,
    write_f: Callable[..., Any] | None = None,
    write_args: Mapping[str, Any] | None = None,
    force_process: bool = False,
    confirm: ConfirmFn | None = None,
) -> Any:
    """
    Return the processed contents of `source_path`, cached at `target_path`.

    Args:
        source_path: Raw file. http(s)/ftp(s) URLs are downloaded to a temp
            file, only when processing is needed.
        target_path: Where the processed version is stored.
        process_f: Called as `process_f(local_source, **process_args)`.
            Defaults to joblib.load.
        read_f: Called as `read_f(target_path, **read_args)` on a cache hit.
            Defaults to joblib.load.
        write_f: Called as `write_f(obj, target_path, **write_args)`.
            Defaults to joblib.dump.
        force_process: Process even if `target_path` exists (e.g. to
            re-download).
        confirm: Called with a yes/no question before writing; defaults to
            always yes.

    Raises:
        MismatchedReadWriteError: exactly one of `read_f` / `write_f` given.
    """
    _check_read_write_pair(read_f, write_f)

    target = _normalize_target(target_path)

    if _needs_processing(target, force_process):
        return _process(source_path, target, process_f, process_args, write_f, write_args, confirm)

    logger.debug("Cache hit: %s", target)
    return read_file(target, read_f=read_f, read_args=read_args)


def maybe_process(
    source_path: PathLike,
    target_path: PathLike,
    process_f: Callable[..., Any] | None = None,
    process_args: Mapping[str, Any] | None = None,
    write_f: Callable[..., Any] | None = None,
    write_args: Mapping[str, Any] | None = None,
    force_process: bool = False,
    confirm: ConfirmFn | None = None,
) -> Path:
    """
    Make sure the processed file exists at `target_path`, without reading it.

    Returns the normalized `target_path`.
    """
    target = _normalize_target(target_path)

    if _needs_processing(target, force_process):
        _process(source_path, target, process_f, process_args, write_f, write_args, confirm)
    else:
        logger.debug("Cache hit: %s", target)

    return target


def read_or_cache(
    source_path: PathLike,
    appname: str,
    filename: str | None = None,
    process_f: Callable[..., Any] | None = None,
    process_args: Mapping[str, Any] | None = None,
    read_f: Callable[..., Any] | None = None,
    read_args: Mapping[str, Any] | None = None,
    write_f: Callable[..., Any] | None = None,
    write_args: Mapping[str, Any] | None = None,
    force_process: bool = False,
    confirm: ConfirmFn | None = None,
    *,
    registry: AppCacheRegistry | None = None,
) -> Any:
    """
    `read_or_process` with the target inside `appname`'s cache directory.

    Unlike `read_or_process`, read_f and write_f are not required to come as a
    pair here; whichever is omitted falls back to its joblib default.
    """
    return read_or_process(
        source_path=source_path,
        target_path=_cache_target(source_path, appname, filename, registry),
        process_f=process_f,
        process_args=process_args,
        read_f=read_f or DEFAULT_READ_F,
        read_args=read_args,
        write_f=write_f or DEFAULT_WRITE_F,
        write_args=write_args,
        force_process=force_process,
        confirm=confirm,
    )


def maybe_cache(
    source_path: PathLike,
    appname: str,
    filename: str | None = None,
    process_f: Callable[..., Any] | None = None,
    process_args: Mapping[str, Any] | None = None,
    write_f: Callable[..., Any] | None = None,
    write_args: Mapping[str, Any] | None = None,
    force_process: bool = False,
    confirm: ConfirmFn | None = None,
    *,
    registry: AppCacheRegistry | None = None,
) -> Path:
    """`maybe_process` with the target inside `appname`'s cache directory."""
    return maybe_process(
        source_path=source_path,
        target_path=_cache_target(source_path, appname, filename, registry),
        process_f=process_f,
        process_args=process_args,
        write_f=write_f,
        write_args=write_args,
        force_process=force_process,
        confirm=confirm,
    )


__all__ = ["read_or_process", "maybe_process", "read_or_cache", "maybe_cache"]
