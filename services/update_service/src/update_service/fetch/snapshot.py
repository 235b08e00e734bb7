from __future__ import annotations

import re
from datetime import datetime, timezone
from pathlib import Path

import httpx

from update_service.settings import settings

STAMP_RE = re.compile(r"<!-- Retrieved from.*?-->")


class SnapshotTooLargeError(RuntimeError):
    pass


def make_client() -> httpx.Client:
    headers = {"User-Agent": settings.user_agent}
    return httpx.Client(timeout=settings.request_timeout_s, headers=headers, follow_redirects=True)


def fetch_html(url: str, *, client: httpx.Client | None = None) -> str:
    """Fetch `url` and return its decoded body."""
    if client is None:
        with make_client() as own:
            return fetch_html(url, client=own)

    resp = client.get(url)
    resp.raise_for_status()
    if len(resp.content) > settings.max_bytes:
        raise SnapshotTooLargeError(f"Refusing to store {len(resp.content)} bytes (max_bytes={settings.max_bytes})")
    return resp.text


def stamp(url: str, html: str, *, now: datetime | None = None) -> str:
    retrieved = (now or datetime.now(timezone.utc)).isoformat()
    return f"<!-- Retrieved from {url} on {retrieved} -->{html}"


def strip_stamp(html: str) -> str:
    return STAMP_RE.sub("", html, count=1)


def read_snapshot(path: Path) -> str:
    """Stored snapshot without its retrieval stamp; empty if there is none yet."""
    if not path.exists():
        return ""
    return strip_stamp(path.read_text(encoding="utf-8"))


def write_snapshot(path: Path, html: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding="utf-8")
