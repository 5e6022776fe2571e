# tests/utils.py
"""
Single source of truth for test data, factories, and fake transports.
Update values here to cascade across the test suite.
"""

from __future__ import annotations

import csv
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import requests

# -----------------------------
# Global defaults (edit once)
# -----------------------------

DEFAULT_APPNAME = "testapp"
DEFAULT_CSV = "a,b\n1,x\n2,y\n"
DEFAULT_URL = "https://query.data.world/s/owqxojjiphaypjmlxldsp566lck7co"
DEFAULT_BODY = b"a,b\n1,x\n2,y\n"

# -----------------------------
# Source file factories
# -----------------------------


def make_csv(tmp_dir: Path, *, text: str = DEFAULT_CSV, filename: str = "src.csv") -> Path:
    """Write `text` to tmp_dir/filename and return the path."""
    tmp_dir.mkdir(parents=True, exist_ok=True)
    path = tmp_dir / filename
    path.write_text(text, encoding="utf-8")
    return path


def first_row(source_path: str | Path) -> dict[str, str]:
    """Process function: parse a CSV and keep only its first data row."""
    with open(source_path, newline="", encoding="utf-8") as handle:
        return next(csv.DictReader(handle))


class CallCounter:
    """Wrap a function and count how many times it is called."""

    def __init__(self, fn):
        self.fn = fn
        self.calls: list[tuple[tuple[Any, ...], dict[str, Any]]] = []

    @property
    def count(self) -> int:
        return len(self.calls)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        self.calls.append((args, kwargs))
        return self.fn(*args, **kwargs)


# -----------------------------
# Fake HTTP transport
# -----------------------------


class FakeResponse:
    def __init__(self, *, status: int = 200, body: bytes = DEFAULT_BODY, chunk: int = 4, url: str = DEFAULT_URL):
        self.status_code = status
        self.url = url
        self.headers: dict[str, str] = {}
        self._body = body
        self._chunk = chunk
        self.closed = False

    def iter_content(self, chunk_size: int = 1024) -> Iterable[bytes]:
        # Stream body in small chunks to exercise the streaming path
        sz = min(chunk_size, self._chunk)
        for i in range(0, len(self._body), sz):
            yield self._body[i : i + sz]

    def close(self) -> None:  # requests API compat
        self.closed = True


def fake_get_factory(*, status: int = 200, body: bytes = DEFAULT_BODY, seen: list[dict[str, Any]] | None = None):
    """
    Build a stand-in for requests.get that records each call in `seen`.
    """

    def fake_get(url: str, *, headers: dict[str, str], timeout: float, stream: bool):
        if seen is not None:
            seen.append({"url": url, "headers": dict(headers), "timeout": timeout, "stream": stream})
        return FakeResponse(status=status, body=body, url=url)

    return fake_get


def failing_get(*args: Any, **kwargs: Any):
    raise requests.ConnectionError("connection refused")
