# dlcache/core/cache/keys.py
"""
Deterministic filenames for processed artifacts.

    <base name>.<crc32 of identity, 8 hex>[.<extension>]

The identity of a URL is the URL itself; the identity of a local file is its
canonical absolute path, so two files called `data.csv` in different
directories get different keys.
"""

from __future__ import annotations

import os
import zlib
from pathlib import Path

from dlcache.core.urls import is_url

from .dirs import AppCacheRegistry, app_cache_dir


def source_identity(source_path: str | os.PathLike[str]) -> str:
    """URL verbatim, or the resolved absolute local path (need not exist)."""
    text = os.fspath(source_path)
    if is_url(text):
        return text
    return str(Path(text).expanduser().resolve())


def hash_identity(identity: str) -> str:
    return format(zlib.crc32(identity.encode("utf-8")) & 0xFFFFFFFF, "08x")


def _base_name(source_path: str) -> str:
    # Text after the last separator; a trailing separator gives an empty base name.
    if not is_url(source_path):
        source_path = source_path.replace(os.sep, "/")
    return source_path.rsplit("/", 1)[-1]


def construct_processed_filename(source_path: str | os.PathLike[str], extension: str | None = None) -> str:
    """
    Build a unique, stable filename for the processed version of `source_path`.

    An empty extension and `None` give the same result (no trailing dot).
    Only path canonicalization touches the filesystem.
    """
    text = os.fspath(source_path)
    name = f"{_base_name(text)}.{hash_identity(source_identity(text))}"
    if extension:
        name = f"{name}.{extension}"
    return name


def construct_cached_file_path(
    source_path: str | os.PathLike[str],
    appname: str,
    extension: str | None = None,
    *,
    registry: AppCacheRegistry | None = None,
) -> Path:
    """Full, normalized path of the cached artifact for `source_path` under `appname`'s cache dir."""
    cache_dir = app_cache_dir(appname, registry=registry)
    return Path(os.path.normpath(cache_dir / construct_processed_filename(source_path, extension)))


__all__ = [
    "source_identity",
    "hash_identity",
    "construct_processed_filename",
    "construct_cached_file_path",
]
