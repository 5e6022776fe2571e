# dlcache/schemas/__init__.py
from .models import AppCacheConfig, FetchPolicy

__all__ = ["AppCacheConfig", "FetchPolicy"]
