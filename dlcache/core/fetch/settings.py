# dlcache/core/fetch/settings.py
"""
Process-wide fetch policy and the one-time timeout advisory.

The current FetchPolicy is module state, replaced (never mutated) by
`set_timeout` / `set_fetch_policy`. Like the cache-dir registry it is not
guarded by a lock.
"""

from __future__ import annotations

from dlcache.core.log import get_logger
from dlcache.schemas.models import FetchPolicy

logger = get_logger(__name__)

_POLICY: FetchPolicy = FetchPolicy()
_TIMEOUT_WARNED = False


def get_fetch_policy() -> FetchPolicy:
    return _POLICY


def set_fetch_policy(policy: FetchPolicy) -> FetchPolicy:
    """Install `policy` and return the one it replaced."""
    global _POLICY
    old = _POLICY
    _POLICY = policy
    return old


def set_timeout(seconds: float = 600.0) -> float:
    """
    Set the download timeout used for remote sources.

    The default of 60 seconds is too short for many large files. Returns the
    previous timeout so callers can restore it.
    """
    old = _POLICY.timeout_s
    # model_copy skips validation; rebuild so timeout_s > 0 is enforced
    set_fetch_policy(FetchPolicy.model_validate({**_POLICY.model_dump(), "timeout_s": seconds}))
    return old


def warn_timeout() -> bool:
    """
    Log a warning if the timeout is below the advisory threshold.

    Emitted at most once per process. Returns True if the warning was logged
    by this call.
    """
    global _TIMEOUT_WARNED
    if _TIMEOUT_WARNED or _POLICY.timeout_s >= _POLICY.warn_below_s:
        return False

    _TIMEOUT_WARNED = True
    logger.warning(
        "Your timeout is set to %g seconds. Call dlcache.set_timeout() to set it to something more reasonable "
        "for large file downloads. This message appears once per session.",
        _POLICY.timeout_s,
    )
    return True


def reset_timeout_warning() -> None:
    """Re-arm the once-per-process timeout warning."""
    global _TIMEOUT_WARNED
    _TIMEOUT_WARNED = False


__all__ = [
    "get_fetch_policy",
    "set_fetch_policy",
    "set_timeout",
    "warn_timeout",
    "reset_timeout_warning",
]
