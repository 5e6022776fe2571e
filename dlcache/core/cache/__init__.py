# dlcache/core/cache/__init__.py
from .dirs import (
    AppCacheRegistry,
    app_cache_dir,
    cache_dir_env_var,
    create_app_cache_dir,
    default_registry,
    set_app_cache_dir,
)
from .keys import (
    construct_cached_file_path,
    construct_processed_filename,
    hash_identity,
    source_identity,
)

__all__ = [
    "AppCacheRegistry",
    "default_registry",
    "cache_dir_env_var",
    "app_cache_dir",
    "set_app_cache_dir",
    "create_app_cache_dir",
    "construct_processed_filename",
    "construct_cached_file_path",
    "source_identity",
    "hash_identity",
]
