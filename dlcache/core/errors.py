# dlcache/core/errors.py
"""
Typed errors for the read-or-cache workflow.

Exports
-------
- DlcacheError, MismatchedReadWriteError, DirectoryAccessError, FetchError
- DLCACHE_ERRORS
- classify_fetch_error(exc)
- fetch_error_guard()

Errors raised by caller-supplied process/read/write functions are never
wrapped; they propagate as-is.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import requests

# =========================
# Exception types
# =========================


class DlcacheError(RuntimeError):
    """Base class for library failures."""


class MismatchedReadWriteError(DlcacheError, ValueError):
    """Only one of read_f / write_f was supplied."""


class DirectoryAccessError(DlcacheError, PermissionError):
    """A cache directory exists but cannot be read (or is not a directory)."""


class FetchError(DlcacheError):
    """HTTP/transport failure while downloading a remote source."""


# Selector tuple for grouped exception handling
DLCACHE_ERRORS = (
    MismatchedReadWriteError,
    DirectoryAccessError,
    FetchError,
)

# =========================
# Classification helpers
# =========================


def classify_fetch_error(exc: Exception) -> DlcacheError:
    """
    Map an exception raised by the HTTP transport to a DlcacheError subclass.

      - DlcacheError subclasses pass through
      - requests.HTTPError → FetchError naming the status code
      - any other requests.RequestException → FetchError
      - anything else → FetchError with the exception type in the message
    """
    if isinstance(exc, DlcacheError):
        return exc

    if isinstance(exc, requests.HTTPError):
        resp = exc.response
        status = getattr(resp, "status_code", None)
        url = getattr(resp, "url", None)
        if status is not None:
            return FetchError(f"HTTP {status} for {url or 'request'}")
        return FetchError(str(exc))

    if isinstance(exc, requests.RequestException):
        return FetchError(str(exc))

    return FetchError(f"{type(exc).__name__}: {exc}")


@contextmanager
def fetch_error_guard() -> Iterator[None]:
    """Normalize transport exceptions raised inside the block to FetchError."""
    try:
        yield
    except DLCACHE_ERRORS:
        raise
    except (requests.RequestException, OSError) as exc:
        raise classify_fetch_error(exc) from exc


__all__ = [
    "DlcacheError",
    "MismatchedReadWriteError",
    "DirectoryAccessError",
    "FetchError",
    "DLCACHE_ERRORS",
    "classify_fetch_error",
    "fetch_error_guard",
]
