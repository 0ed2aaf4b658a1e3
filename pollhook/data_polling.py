"""Long polling of cached data for an alias."""

from __future__ import annotations

import asyncio
from dataclasses import asdict, dataclass, field
from typing import Any

from pollhook.cache import AliasNotFoundError, OrderedCache
from pollhook.polling_config import PollingConfig

POLL_INTERVAL = 0.1
NO_DATA_MESSAGE = "No data available within timeout period"


@dataclass
class DataResponse:
    """Outcome of a poll: whether data came back, a message, and the items."""

    success: bool
    message: str
    count: int = 0
    data: list[Any] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


async def retrieve_data_with_polling(
    alias: str, cache: OrderedCache, polling_config: PollingConfig
) -> DataResponse:
    """Wait until data is cached for ``alias`` or the configured timeout passes.

    At most ``polling_config.max_polled_items`` entries are removed and
    returned, oldest first.
    """
    if not cache.has_alias(alias):
        return DataResponse(success=False, message=f"Alias '{alias}' not found")

    loop = asyncio.get_running_loop()
    deadline = loop.time() + polling_config.timeout
    items: list[tuple[str, Any]] = []
    try:
        while True:
            items = cache.remove_oldest(alias, polling_config.max_polled_items)
            if items:
                break
            remaining = deadline - loop.time()
            if remaining <= 0:
                break
            await asyncio.sleep(min(POLL_INTERVAL, remaining))
    except AliasNotFoundError:
        items = []

    if not items:
        return DataResponse(success=False, message=NO_DATA_MESSAGE)

    values = [value for _, value in items]
    return DataResponse(
        success=True,
        message=f"Retrieved {len(values)} items after polling",
        count=len(values),
        data=values,
    )