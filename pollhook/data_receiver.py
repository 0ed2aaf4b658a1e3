"""Accept a JSON payload for an alias and store it under its content hash."""

from __future__ import annotations

import hashlib
import json
from typing import Any

from pollhook.cache import OrderedCache


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON literal: {name}")


def receive_data(body: bytes, alias: str, cache: OrderedCache) -> tuple[str, str]:
    """Parse ``body`` as JSON, store it in ``cache`` and return ``(alias, key)``.

    The key is the hex SHA-256 digest of the raw body. Raises ``ValueError``
    if the body is not valid UTF-8 JSON, and ``AliasNotFoundError`` if the
    alias is unknown to the cache.
    """
    raw = bytes(body)
    value = json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
    key = hashlib.sha256(raw).hexdigest()
    cache.insert(alias, key, value)
    return alias, key