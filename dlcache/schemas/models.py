# dlcache/schemas/models.py

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dlcache.core.log import get_logger

logger = get_logger(__name__)

# =========================
# Network fetch policy
# =========================

_DEFAULT_TIMEOUT_S = 60.0
_TIMEOUT_ENV = "DLCACHE_TIMEOUT"


def _timeout_from_env() -> float:
    """DLCACHE_TIMEOUT as a positive float; unset or unusable values fall back to the default."""
    raw = os.getenv(_TIMEOUT_ENV, "").strip()
    if not raw:
        return _DEFAULT_TIMEOUT_S
    try:
        value = float(raw)
    except ValueError:
        value = None
    if value is None or not value > 0:
        logger.warning("Ignoring %s=%r: expected a positive number of seconds. Using %g.", _TIMEOUT_ENV, raw, _DEFAULT_TIMEOUT_S)
        return _DEFAULT_TIMEOUT_S
    return value


class FetchPolicy(BaseModel):
    """
    Process-wide settings for remote fetches.

    `timeout_s` is handed to the HTTP transport; the library itself only
    compares it against `warn_below_s` to decide whether to emit the one-time
    advisory warning.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    timeout_s: float = Field(
        default_factory=_timeout_from_env,
        gt=0,
        validate_default=True,
        description="Network timeout in seconds. Initial value comes from DLCACHE_TIMEOUT when set.",
    )
    warn_below_s: float = Field(
        600.0,
        ge=0,
        description="Timeouts below this value trigger a once-per-process warning before the first download.",
    )
    user_agent: str = Field(
        "dlcache/0.1 (+read-or-cache)",
        description="User-Agent string used in HTTP requests.",
    )
    chunk_size: int = Field(
        1024 * 1024,
        gt=0,
        description="Bytes per chunk when streaming a download to disk.",
    )


# =========================
# Per-application cache config
# =========================


class AppCacheConfig(BaseModel):
    """An application's explicit cache-directory override."""

    model_config = ConfigDict(frozen=True)

    appname: str = Field(..., min_length=1, description="Application that owns the cache directory.")
    override_dir: Path | None = Field(
        None,
        description="Directory set at runtime. Wins over the environment variable and the OS default.",
    )

    @field_validator("appname")
    @classmethod
    def _appname_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("appname must not be blank")
        return v


__all__ = ["FetchPolicy", "AppCacheConfig"]
