# dlcache/core/fetch/download.py
"""
Blocking downloads of remote sources.

- fetch_to_path: one GET (or FTP RETR) streamed to a local file
- obtain_local: context manager yielding a local path for any source; remote
  sources land in a temp file that is removed when the block exits
- download_path / download_cache: download-once helpers keyed by filename
"""

from __future__ import annotations

import ftplib
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from urllib.parse import unquote, urlparse

import requests

from dlcache.core.cache.dirs import AppCacheRegistry, app_cache_dir
from dlcache.core.errors import FetchError, fetch_error_guard
from dlcache.core.log import get_logger
from dlcache.core.urls import is_url
from dlcache.schemas.models import FetchPolicy

from .settings import get_fetch_policy, warn_timeout

logger = get_logger(__name__)

# ---------------------------
# Transport helpers
# ---------------------------


def _http_to_file(url: str, fh, pol: FetchPolicy) -> None:
    resp = requests.get(url, headers={"User-Agent": pol.user_agent}, timeout=pol.timeout_s, stream=True)
    try:
        if not 200 <= resp.status_code < 300:
            raise requests.HTTPError(f"HTTP {resp.status_code} for {url}", response=resp)
        for chunk in resp.iter_content(chunk_size=pol.chunk_size):
            if chunk:
                fh.write(chunk)
    finally:
        resp.close()


def _ftp_to_file(url: str, fh, pol: FetchPolicy) -> None:
    parsed = urlparse(url)
    secure = parsed.scheme.lower() == "ftps"
    ftp: ftplib.FTP = ftplib.FTP_TLS(timeout=pol.timeout_s) if secure else ftplib.FTP(timeout=pol.timeout_s)
    try:
        ftp.connect(parsed.hostname or "", parsed.port or 21)
        ftp.login(unquote(parsed.username or "anonymous"), unquote(parsed.password or ""))
        if isinstance(ftp, ftplib.FTP_TLS):
            ftp.prot_p()
        ftp.retrbinary(f"RETR {unquote(parsed.path)}", fh.write, blocksize=pol.chunk_size)
    except ftplib.all_errors as e:
        raise FetchError(f"FTP transfer failed for {url}: {e}") from e
    finally:
        ftp.close()


# ---------------------------
# Public API
# ---------------------------


def fetch_to_path(url: str, dest_path: str | os.PathLike[str], *, policy: FetchPolicy | None = None) -> Path:
    """
    Download `url` to `dest_path` in binary mode.

    Bytes are streamed into a `.part` file next to the destination and moved
    into place only on success, so a failed transfer never leaves a file that
    looks complete. Raises FetchError on transport failures and non-2xx
    responses. No retries.
    """
    pol = policy or get_fetch_policy()
    dest = Path(dest_path)
    dest.parent.mkdir(parents=True, exist_ok=True)
    logger.debug("Downloading %s -> %s (timeout=%gs)", url, dest, pol.timeout_s)

    with tempfile.NamedTemporaryFile(prefix="dl_", suffix=".part", delete=False, dir=str(dest.parent)) as tf:
        part_path = Path(tf.name)
        try:
            with fetch_error_guard():
                if urlparse(url).scheme.lower() in {"ftp", "ftps"}:
                    _ftp_to_file(url, tf, pol)
                else:
                    _http_to_file(url, tf, pol)
        except BaseException:
            tf.close()
            part_path.unlink(missing_ok=True)
            raise

    part_path.replace(dest)
    return dest


@contextmanager
def obtain_local(
    source_path: str | os.PathLike[str], *, policy: FetchPolicy | None = None
) -> Iterator[str | os.PathLike[str]]:
    """
    Yield a local path holding the raw content of `source_path`.

    Local sources are yielded unchanged and are not checked for existence (a
    process function may create the file itself). Remote sources are
    downloaded to a fresh temp file, removed when the block exits however it
    exits.
    """
    if not is_url(source_path):
        yield source_path
        return

    url = os.fspath(source_path)
    warn_timeout()

    suffix = Path(urlparse(url).path).suffix
    fd, tmp = tempfile.mkstemp(prefix="dlcache_", suffix=suffix)
    os.close(fd)
    tmp_path = Path(tmp)
    try:
        fetch_to_path(url, tmp_path, policy=policy)
        yield tmp_path
    finally:
        tmp_path.unlink(missing_ok=True)


def download_path(
    url: str,
    path: str | os.PathLike[str],
    redownload: bool = False,
    filename: str | None = None,
) -> Path:
    """
    Download `url` into directory `path` unless the file is already there.

    The file is named `filename`, or the last segment of the URL. Returns the
    full path to the local file.
    """
    target_dir = Path(path)
    target_dir.mkdir(parents=True, exist_ok=True)
    target = target_dir / (filename or url.rsplit("/", 1)[-1])

    if redownload or not target.exists():
        warn_timeout()
        fetch_to_path(url, target)
    else:
        logger.debug("Already downloaded: %s", target)

    return target


def download_cache(
    url: str,
    appname: str,
    redownload: bool = False,
    filename: str | None = None,
    *,
    registry: AppCacheRegistry | None = None,
) -> Path:
    """`download_path` into `appname`'s cache directory."""
    return download_path(url, app_cache_dir(appname, registry=registry), redownload=redownload, filename=filename)


__all__ = ["fetch_to_path", "obtain_local", "download_path", "download_cache"]
