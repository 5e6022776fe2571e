# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import pytest

from dlcache.core.cache.dirs import AppCacheRegistry, cache_dir_env_var
from dlcache.core.fetch import settings as fetch_settings
from tests.utils import DEFAULT_APPNAME, make_csv


# -------- Global fetch state --------
@pytest.fixture(autouse=True)
def _isolate_fetch_state():
    """Restore the process-wide fetch policy and re-arm the timeout warning around every test."""
    old_policy = fetch_settings.get_fetch_policy()
    fetch_settings.reset_timeout_warning()
    yield
    fetch_settings.set_fetch_policy(old_policy)
    fetch_settings.reset_timeout_warning()


# -------- Cache directory fixtures --------
@pytest.fixture
def registry() -> AppCacheRegistry:
    """A fresh registry per test so overrides never leak between tests."""
    return AppCacheRegistry()


@pytest.fixture
def app_env(monkeypatch):
    """
    Callable that points <APP>_CACHE_DIR at a directory (or clears it with None).

    Usage:
        app_env("testapp", tmp_path / "cache")
    """

    def _set(appname: str = DEFAULT_APPNAME, cache_dir: Path | None = None) -> str:
        var = cache_dir_env_var(appname)
        if cache_dir is None:
            monkeypatch.delenv(var, raising=False)
        else:
            monkeypatch.setenv(var, str(cache_dir))
        return var

    return _set


@pytest.fixture
def app_cache(tmp_path: Path, registry: AppCacheRegistry) -> Path:
    """Pin DEFAULT_APPNAME's cache dir to tmp_path/cache in the per-test registry."""
    return registry.set_dir(DEFAULT_APPNAME, tmp_path / "cache")


# -------- Source fixtures --------
@pytest.fixture
def csv_factory(tmp_path: Path):
    """
    Callable factory to create CSV sources in a test's tmp path.

    Usage:
        src = csv_factory()
        src = csv_factory(text="a\\n1\\n", filename="other.csv", subdir="nested")
    """

    def _factory(*, text: str | None = None, filename: str = "src.csv", subdir: str | None = None) -> Path:
        target_dir = tmp_path / subdir if subdir else tmp_path
        if text is None:
            return make_csv(target_dir, filename=filename)
        return make_csv(target_dir, text=text, filename=filename)

    return _factory


@pytest.fixture
def csv_source(csv_factory) -> Path:
    return csv_factory()


# -------- Pytest markers --------
def pytest_configure(config):
    config.addinivalue_line("markers", "integration: marks integration tests")
