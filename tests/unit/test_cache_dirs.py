# tests/unit/test_cache_dirs.py
from __future__ import annotations

import logging
import os
from pathlib import Path

import platformdirs
import pytest

from dlcache.core.cache import dirs as dirs_mod
from dlcache.core.cache.dirs import (
    AppCacheRegistry,
    app_cache_dir,
    cache_dir_env_var,
    create_app_cache_dir,
    set_app_cache_dir,
)
from dlcache.core.errors import DirectoryAccessError


def test_env_var_name() -> None:
    assert cache_dir_env_var("testapp") == "TESTAPP_CACHE_DIR"
    assert cache_dir_env_var("myApp") == "MYAPP_CACHE_DIR"
    assert cache_dir_env_var("my-app.v2") == "MY_APP_V2_CACHE_DIR"


def test_os_default_when_nothing_set(registry: AppCacheRegistry, app_env) -> None:
    app_env("testing", None)
    expected = Path(platformdirs.user_cache_dir("testing")).expanduser().resolve()
    assert registry.resolve_dir("testing") == expected


def test_precedence_override_then_env_then_os(tmp_path: Path, registry: AppCacheRegistry, app_env) -> None:
    os_default = Path(platformdirs.user_cache_dir("a")).expanduser().resolve()
    app_env("a", None)
    assert registry.resolve_dir("a") == os_default

    env_dir = tmp_path / "from_env"
    app_env("a", env_dir)
    assert registry.resolve_dir("a") == env_dir.resolve()

    override = registry.set_dir("a", tmp_path / "override")
    assert registry.resolve_dir("a") == override == (tmp_path / "override").resolve()

    # Dropping the override falls back to the environment again
    registry.clear_dir("a")
    assert registry.resolve_dir("a") == env_dir.resolve()


def test_empty_env_var_is_ignored(registry: AppCacheRegistry, monkeypatch) -> None:
    monkeypatch.setenv("EMPTYAPP_CACHE_DIR", "")
    assert registry.resolve_dir("emptyapp") == Path(platformdirs.user_cache_dir("emptyapp")).expanduser().resolve()


def test_env_is_reread_on_every_call(tmp_path: Path, registry: AppCacheRegistry, app_env) -> None:
    app_env("b", tmp_path / "one")
    first = registry.resolve_dir("b")
    app_env("b", tmp_path / "two")
    assert registry.resolve_dir("b") != first


def test_resolve_never_creates(tmp_path: Path, registry: AppCacheRegistry, app_env) -> None:
    target = tmp_path / "not_yet"
    app_env("c", target)
    assert registry.resolve_dir("c", verbose=True) == target.resolve()
    assert not target.exists()


def test_verbose_warns_about_missing_dir(tmp_path: Path, registry: AppCacheRegistry, app_env, caplog) -> None:
    app_env("c", tmp_path / "missing")
    with caplog.at_level(logging.WARNING, logger="dlcache"):
        registry.resolve_dir("c", verbose=True)
    assert any("create_app_cache_dir" in r.getMessage() for r in caplog.records)
    assert all(r.levelno == logging.WARNING for r in caplog.records)


def test_quiet_when_not_verbose_or_dir_exists(tmp_path: Path, registry: AppCacheRegistry, app_env, caplog) -> None:
    app_env("c", tmp_path / "missing")
    with caplog.at_level(logging.WARNING, logger="dlcache"):
        registry.resolve_dir("c")
        app_env("c", tmp_path)
        registry.resolve_dir("c", verbose=True)
    assert caplog.records == []


def test_set_dir_creates_nested_and_stores(tmp_path: Path, registry: AppCacheRegistry) -> None:
    target = tmp_path / "deep" / "er" / "cache"
    result = registry.set_dir("d", target)
    assert result == target.resolve()
    assert target.is_dir()
    assert "d" in registry
    cfg = registry.get("d")
    assert cfg is not None and cfg.override_dir == result


def test_set_dir_normalizes(tmp_path: Path, registry: AppCacheRegistry) -> None:
    messy = f"{tmp_path}{os.sep}x{os.sep}..{os.sep}cache{os.sep}"
    assert registry.set_dir("e", messy) == (tmp_path / "cache").resolve()


def test_set_dir_rejects_file(tmp_path: Path, registry: AppCacheRegistry) -> None:
    f = tmp_path / "file.txt"
    f.write_text("x")
    with pytest.raises(DirectoryAccessError):
        registry.set_dir("f", f)
    assert "f" not in registry


def test_set_dir_rejects_unreadable(tmp_path: Path, registry: AppCacheRegistry, monkeypatch) -> None:
    locked = tmp_path / "locked"
    locked.mkdir()
    # Root ignores mode bits, so deny access at the check itself
    monkeypatch.setattr(dirs_mod.os, "access", lambda *a, **k: False)
    with pytest.raises(DirectoryAccessError, match="not readable"):
        registry.set_dir("g", locked)
    assert "g" not in registry


def test_create_default_dir_uses_current_resolution(tmp_path: Path, registry: AppCacheRegistry, app_env) -> None:
    target = tmp_path / "envdir"
    app_env("h", target)
    created = registry.create_default_dir("h")
    assert created == target.resolve()
    assert target.is_dir()
    # Now pinned: changing the env no longer moves it
    app_env("h", tmp_path / "elsewhere")
    assert registry.resolve_dir("h") == created


def test_registries_are_independent(tmp_path: Path) -> None:
    r1, r2 = AppCacheRegistry(), AppCacheRegistry()
    r1.set_dir("i", tmp_path / "r1")
    assert "i" in r1
    assert "i" not in r2


def test_module_wrappers_use_default_registry(tmp_path: Path, monkeypatch) -> None:
    fresh = AppCacheRegistry()
    monkeypatch.setattr(dirs_mod, "_DEFAULT_REGISTRY", fresh)

    pinned = set_app_cache_dir("j", tmp_path / "j")
    assert app_cache_dir("j") == pinned
    assert fresh.get("j") is not None

    monkeypatch.setenv("K_CACHE_DIR", str(tmp_path / "k"))
    assert create_app_cache_dir("k") == (tmp_path / "k").resolve()
    assert (tmp_path / "k").is_dir()


def test_explicit_registry_wins_over_default(tmp_path: Path, registry: AppCacheRegistry) -> None:
    registry.set_dir("l", tmp_path / "l")
    assert app_cache_dir("l", registry=registry) == (tmp_path / "l").resolve()
