# dlcache/core/urls.py
"""
Remote-vs-local classification of source paths.
"""

from __future__ import annotations

import os

URL_SCHEMES: tuple[str, ...] = ("http", "https", "ftp", "ftps")

_URL_PREFIXES = tuple(f"{scheme}://" for scheme in URL_SCHEMES)


def is_url(path: str | os.PathLike[str]) -> bool:
    """Return True if `path` starts with http://, https://, ftp:// or ftps:// (any case)."""
    try:
        text = os.fspath(path)
    except TypeError:
        text = str(path)
    if not isinstance(text, str):
        return False
    return text.lower().startswith(_URL_PREFIXES)


__all__ = ["URL_SCHEMES", "is_url"]
