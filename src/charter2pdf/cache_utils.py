"""Cache utilities: content fingerprints, layout memo and export file cache."""

from __future__ import annotations

import asyncio
import hashlib
import json
from collections import OrderedDict
from datetime import datetime, timezone
from pathlib import Path
from typing import Generic, Hashable, Iterable, TypeVar

from charter2pdf.schemas import Section

T = TypeVar("T")


def sections_fingerprint(sections: Iterable[Section], *extra: Hashable) -> str:
    """Hash every field of ``sections`` in collection order.

    Args:
        sections: The section snapshot.
        *extra: Additional parameters that influence the result (page budget,
            thresholds, ...); they are folded into the digest.

    Returns:
        A hex SHA-256 digest, stable across processes.
    """
    payload = [section.model_dump(mode="json") for section in sections]
    digest = hashlib.sha256()
    digest.update(json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8"))
    if extra:
        digest.update(repr(extra).encode("utf-8"))
    return digest.hexdigest()


class LRUCache(Generic[T]):
    """Small in-memory least-recently-used cache keyed by fingerprint."""

    def __init__(self, max_entries: int = 32) -> None:
        self.max_entries = max_entries
        self._items: OrderedDict[str, T] = OrderedDict()

    def get(self, key: str) -> T | None:
        value = self._items.get(key)
        if value is not None:
            self._items.move_to_end(key)
        return value

    def put(self, key: str, value: T) -> None:
        self._items[key] = value
        self._items.move_to_end(key)
        while len(self._items) > self.max_entries:
            self._items.popitem(last=False)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


def is_cache_fresh(path: Path, ttl_seconds: int) -> bool:
    """Check if a cached file is still fresh based on its modification time.

    Args:
        path: Path to the cached file.
        ttl_seconds: Time-to-live in seconds. If <= 0, cache is considered
            fresh indefinitely (cache forever mode).

    Returns:
        True if the cache is fresh and usable, False otherwise.
    """
    if not path.exists():
        return False
    if ttl_seconds <= 0:
        return True
    mtime = datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)
    age_seconds = (datetime.now(timezone.utc) - mtime).total_seconds()
    return age_seconds <= ttl_seconds


def cache_dir_for(fingerprint: str, base_path: Path) -> Path:
    """Cache directory for one document fingerprint, sharded by prefix."""
    return base_path / fingerprint[:2] / fingerprint


async def read_bytes_async(path: Path) -> bytes:
    """Read bytes from a file in a worker thread."""
    return await asyncio.to_thread(path.read_bytes)


async def write_bytes_async(path: Path, content: bytes) -> None:
    """Write bytes to a file in a worker thread."""
    await asyncio.to_thread(path.write_bytes, content)


async def mkdir_async(path: Path, parents: bool = False, exist_ok: bool = False) -> None:
    """Create a directory in a worker thread."""
    await asyncio.to_thread(path.mkdir, parents=parents, exist_ok=exist_ok)
