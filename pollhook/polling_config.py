"""Server-side settings for long polling."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_TIMEOUT = 20
DEFAULT_MAX_POLLED_ITEMS = 5

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _env_unsigned(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not _UNSIGNED.fullmatch(raw):
        return default
    return int(raw)


@dataclass(frozen=True)
class PollingConfig:
    """How long a poll may wait, in seconds, and how many items it may return."""

    timeout: float = DEFAULT_TIMEOUT
    max_polled_items: int = DEFAULT_MAX_POLLED_ITEMS

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> PollingConfig:
        """Read ``POLLING_TIMEOUT`` and ``POLL_ITEMS_COUNT``, falling back to defaults."""
        env = os.environ if environ is None else environ
        return cls(
            timeout=_env_unsigned(env, "POLLING_TIMEOUT", DEFAULT_TIMEOUT),
            max_polled_items=_env_unsigned(
                env, "POLL_ITEMS_COUNT", DEFAULT_MAX_POLLED_ITEMS
            ),
        )