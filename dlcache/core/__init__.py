# dlcache/core/__init__.py
