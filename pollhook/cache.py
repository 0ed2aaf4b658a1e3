"""Per-alias caches that remember insertion order and expire entries."""

from __future__ import annotations

import os
import re
import threading
from collections import deque
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from cachetools import TTLCache

DEFAULT_TTL = 300
RECENTLY_ADDED_TTL = 200
MAX_CAPACITY = 10_000

_UNSIGNED = re.compile(r"\+?[0-9]+")
_MISSING = object()


class AliasNotFoundError(LookupError):
    """Raised when an operation names an alias the cache was not built with."""

    def __init__(self, alias: str) -> None:
        super().__init__("Alias not found")
        self.alias = alias


@dataclass
class _Bucket:
    values: TTLCache
    recent: TTLCache
    order: deque = field(default_factory=deque)
    lock: threading.Lock = field(default_factory=threading.Lock)


def _parse_unsigned(raw: str | None) -> int | None:
    if raw is None or not _UNSIGNED.fullmatch(raw):
        return None
    return int(raw)


class OrderedCache:
    """A set of named caches whose entries can be drained oldest or newest first.

    A key inserted into an alias is ignored if the same key was inserted
    within the last ``RECENTLY_ADDED_TTL`` seconds, even if it has since
    been removed.
    """

    def __init__(self, aliases: Iterable[str], ttl: float = DEFAULT_TTL) -> None:
        self._ttl = ttl
        self._buckets: dict[str, _Bucket] = {
            alias: _Bucket(
                values=TTLCache(maxsize=MAX_CAPACITY, ttl=ttl),
                recent=TTLCache(maxsize=MAX_CAPACITY, ttl=RECENTLY_ADDED_TTL),
            )
            for alias in aliases
        }

    @classmethod
    def from_env(
        cls, aliases: Iterable[str], environ: Mapping[str, str] | None = None
    ) -> OrderedCache:
        """Build a cache whose TTL comes from ``CACHE_TTL`` (default 300 s)."""
        env = os.environ if environ is None else environ
        ttl = _parse_unsigned(env.get("CACHE_TTL"))
        return cls(aliases, DEFAULT_TTL if ttl is None else ttl)

    @property
    def ttl(self) -> float:
        """Seconds an entry lives in an alias cache."""
        return self._ttl

    def _bucket(self, alias: str) -> _Bucket:
        try:
            return self._buckets[alias]
        except KeyError:
            raise AliasNotFoundError(alias) from None

    def insert(self, alias: str, key: str, value: Any) -> bool:
        """Store ``value`` under ``key``; return False if the key was added recently."""
        bucket = self._bucket(alias)
        with bucket.lock:
            if key in bucket.recent:
                return False
            bucket.recent[key] = None
            bucket.values[key] = value
            try:
                bucket.order.remove(key)
            except ValueError:
                pass
            bucket.order.append(key)
        return True

    def get(self, alias: str, key: str) -> Any:
        """Return the live value for ``key``, or None if absent or the alias is unknown."""
        bucket = self._buckets.get(alias)
        if bucket is None:
            return None
        with bucket.lock:
            return bucket.values.get(key)

    def _take(self, alias: str, n: int, newest: bool) -> list[tuple[str, Any]]:
        bucket = self._bucket(alias)
        removed: list[tuple[str, Any]] = []
        with bucket.lock:
            while len(removed) < n and bucket.order:
                key = bucket.order.pop() if newest else bucket.order.popleft()
                value = bucket.values.pop(key, _MISSING)
                if value is not _MISSING:
                    removed.append((key, value))
        return removed

    def remove_oldest(self, alias: str, n: int) -> list[tuple[str, Any]]:
        """Remove and return up to ``n`` live entries, oldest first."""
        return self._take(alias, n, newest=False)

    def remove_newest(self, alias: str, n: int) -> list[tuple[str, Any]]:
        """Remove and return up to ``n`` live entries, newest first."""
        return self._take(alias, n, newest=True)

    def has_alias(self, alias: str) -> bool:
        return alias in self._buckets

    def aliases(self) -> list[str]:
        return list(self._buckets)