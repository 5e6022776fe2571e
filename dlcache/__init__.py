# dlcache/__init__.py
"""
dlcache: download once, process once.

Cache the processed form of a remote or local file at a deterministic,
per-application path and read it back on later calls.

    import dlcache

    table = dlcache.read_or_cache(
        "https://example.com/data/table.csv",
        appname="myapp",
        process_f=load_table,
    )
"""

from dlcache.core.cache import (
    AppCacheRegistry,
    app_cache_dir,
    cache_dir_env_var,
    construct_cached_file_path,
    construct_processed_filename,
    create_app_cache_dir,
    default_registry,
    set_app_cache_dir,
)
from dlcache.core.errors import (
    DLCACHE_ERRORS,
    DirectoryAccessError,
    DlcacheError,
    FetchError,
    MismatchedReadWriteError,
)
from dlcache.core.fetch import (
    download_cache,
    download_path,
    get_fetch_policy,
    set_timeout,
)
from dlcache.core.log import enable_debug_logging
from dlcache.core.process import (
    ask_yes_no,
    maybe_cache,
    maybe_process,
    read_or_cache,
    read_or_process,
)
from dlcache.core.urls import is_url
from dlcache.schemas.models import AppCacheConfig, FetchPolicy

__version__ = "0.1.0"

__all__ = [
    # workflow
    "read_or_process",
    "read_or_cache",
    "maybe_process",
    "maybe_cache",
    "ask_yes_no",
    # cache paths
    "is_url",
    "construct_processed_filename",
    "construct_cached_file_path",
    "AppCacheRegistry",
    "default_registry",
    "cache_dir_env_var",
    "app_cache_dir",
    "set_app_cache_dir",
    "create_app_cache_dir",
    # downloads
    "download_path",
    "download_cache",
    "set_timeout",
    "get_fetch_policy",
    # config / errors / logging
    "FetchPolicy",
    "AppCacheConfig",
    "DlcacheError",
    "MismatchedReadWriteError",
    "DirectoryAccessError",
    "FetchError",
    "DLCACHE_ERRORS",
    "enable_debug_logging",
]
