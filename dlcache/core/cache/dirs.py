# dlcache/core/cache/dirs.py
"""
Per-application cache directories.

Resolution order for an application's cache root (first present wins):
  1) an override stored in the AppCacheRegistry (set_dir / set_app_cache_dir)
  2) the environment variable <APPNAME>_CACHE_DIR, if non-empty
  3) platformdirs.user_cache_dir(appname)

Only the override is remembered. Without one, the directory is recomputed on
every call so environment changes are picked up.

The registry is plain mutable state without locking. Hosts sharing one
registry across threads must synchronize access themselves.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

import platformdirs

from dlcache.core.errors import DirectoryAccessError
from dlcache.core.log import get_logger
from dlcache.schemas.models import AppCacheConfig

logger = get_logger(__name__)

_NON_IDENT = re.compile(r"\W")


def cache_dir_env_var(appname: str) -> str:
    """Name of the env var that overrides `appname`'s cache dir, e.g. MYAPP_CACHE_DIR."""
    return f"{_NON_IDENT.sub('_', appname).upper()}_CACHE_DIR"


def _normalize_dir(path: str | os.PathLike[str]) -> Path:
    return Path(path).expanduser().resolve()


class AppCacheRegistry:
    """Mapping of application name → AppCacheConfig holding explicit overrides."""

    def __init__(self) -> None:
        self._configs: dict[str, AppCacheConfig] = {}

    def __contains__(self, appname: object) -> bool:
        cfg = self._configs.get(appname) if isinstance(appname, str) else None
        return cfg is not None and cfg.override_dir is not None

    def get(self, appname: str) -> AppCacheConfig | None:
        return self._configs.get(appname)

    def resolve_dir(self, appname: str, verbose: bool = False) -> Path:
        """
        Return the cache directory for `appname` without creating it.

        With `verbose=True`, log a warning when the directory does not exist yet.
        """
        cfg = self._configs.get(appname)
        if cfg is not None and cfg.override_dir is not None:
            cache_dir = cfg.override_dir
        else:
            env_dir = os.getenv(cache_dir_env_var(appname), "")
            if env_dir:
                cache_dir = _normalize_dir(env_dir)
            else:
                cache_dir = _normalize_dir(platformdirs.user_cache_dir(appname))

        if verbose and not cache_dir.exists():
            logger.warning(
                "Cache directory %s for %r does not exist. Call create_app_cache_dir(%r) to create it.",
                cache_dir,
                appname,
                appname,
            )
        return cache_dir

    def set_dir(self, appname: str, cache_dir: str | os.PathLike[str] | None = None) -> Path:
        """
        Store `cache_dir` (or the currently resolved default) as `appname`'s override.

        The directory is created when missing. An existing directory must be
        readable, otherwise DirectoryAccessError is raised and nothing is stored.
        """
        target = _normalize_dir(cache_dir) if cache_dir is not None else self.resolve_dir(appname, verbose=False)

        if target.exists():
            if not target.is_dir():
                raise DirectoryAccessError(f"Cache path {target} exists but is not a directory.")
            if not os.access(target, os.R_OK):
                raise DirectoryAccessError(f"Cache directory {target} is not readable.")
        else:
            target.mkdir(parents=True, exist_ok=True)
            logger.debug("Created cache directory %s for %r", target, appname)

        self._configs[appname] = AppCacheConfig(appname=appname, override_dir=target)
        return target

    def create_default_dir(self, appname: str) -> Path:
        """Create whatever `resolve_dir` currently computes and pin it as the override."""
        return self.set_dir(appname, None)

    def clear_dir(self, appname: str) -> None:
        self._configs.pop(appname, None)

    def clear(self) -> None:
        self._configs.clear()


_DEFAULT_REGISTRY = AppCacheRegistry()


def default_registry() -> AppCacheRegistry:
    """The process-wide registry used when no registry is passed explicitly."""
    return _DEFAULT_REGISTRY


def _pick(registry: AppCacheRegistry | None) -> AppCacheRegistry:
    return registry if registry is not None else _DEFAULT_REGISTRY


# -------------------------
# Module-level wrappers
# -------------------------


def app_cache_dir(appname: str, verbose: bool = False, *, registry: AppCacheRegistry | None = None) -> Path:
    """Path to `appname`'s cache directory (see module docstring for precedence)."""
    return _pick(registry).resolve_dir(appname, verbose=verbose)


def set_app_cache_dir(
    appname: str,
    cache_dir: str | os.PathLike[str] | None = None,
    *,
    registry: AppCacheRegistry | None = None,
) -> Path:
    return _pick(registry).set_dir(appname, cache_dir)


def create_app_cache_dir(appname: str, *, registry: AppCacheRegistry | None = None) -> Path:
    return _pick(registry).create_default_dir(appname)


__all__ = [
    "AppCacheRegistry",
    "default_registry",
    "cache_dir_env_var",
    "app_cache_dir",
    "set_app_cache_dir",
    "create_app_cache_dir",
]
