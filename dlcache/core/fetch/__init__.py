# dlcache/core/fetch/__init__.py
from .download import download_cache, download_path, fetch_to_path, obtain_local
from .settings import (
    get_fetch_policy,
    reset_timeout_warning,
    set_fetch_policy,
    set_timeout,
    warn_timeout,
)

__all__ = [
    "fetch_to_path",
    "obtain_local",
    "download_path",
    "download_cache",
    "get_fetch_policy",
    "set_fetch_policy",
    "set_timeout",
    "warn_timeout",
    "reset_timeout_warning",
]
