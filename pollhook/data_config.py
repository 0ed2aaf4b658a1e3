"""Mapping of data aliases to the endpoints that receive them."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

DEFAULT_METHOD = "GET"


@dataclass(frozen=True)
class EndpointDataMap:
    """Where an alias's data arrives: a path and an HTTP method."""

    path: str
    method: str = DEFAULT_METHOD


@dataclass(frozen=True)
class DataMap:
    """Endpoints keyed by alias."""

    endpoints: dict[str, EndpointDataMap] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, raw: Any) -> DataMap:
        """Build from a mapping of alias to ``{"path": ..., "method": ...}``."""
        if not isinstance(raw, Mapping):
            raise ValueError("data configuration must be a mapping")
        endpoints = {}
        for alias, entry in raw.items():
            if not isinstance(entry, Mapping):
                raise ValueError(f"data entry for {alias!r} must be a mapping")
            path = entry.get("path")
            if not isinstance(path, str):
                raise ValueError(f"data entry for {alias!r} needs a string 'path'")
            method = entry.get("method", DEFAULT_METHOD)
            if not isinstance(method, str):
                raise ValueError(f"data entry for {alias!r} has a non-string 'method'")
            endpoints[str(alias)] = EndpointDataMap(path=path, method=method)
        return cls(endpoints)

    def alias_path_method(self) -> list[tuple[str, str, str]]:
        """Return ``(alias, path, method)`` for every endpoint."""
        return [
            (alias, endpoint.path, endpoint.method)
            for alias, endpoint in self.endpoints.items()
        ]