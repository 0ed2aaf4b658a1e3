"""Extraction of values such as tokens and challenges from incoming requests."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Union
from urllib.parse import parse_qsl, urlsplit

log = logging.getLogger(__name__)

_INDEX = re.compile(r"\+?[0-9]+")

HeaderInput = Union[Mapping[str, str], Iterable[tuple[str, str]], None]


class ExtractionError(ValueError):
    """A value could not be taken from a request; maps to HTTP 400."""

    status = 400


@dataclass(frozen=True)
class Request:
    """The parts of an HTTP request that values can be extracted from."""

    path: str = "/"
    query_string: str = ""
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_uri(cls, uri: str, headers: HeaderInput = None) -> Request:
        """Build a request from a URI such as ``/a/b?x=1`` and optional headers."""
        parts = urlsplit(uri)
        pairs = headers.items() if isinstance(headers, Mapping) else (headers or ())
        return cls(
            path=parts.path or "/",
            query_string=parts.query,
            headers={name.lower(): value for name, value in pairs},
        )

    def header(self, name: str) -> str | None:
        return self.headers.get(name.lower())

    def query(self) -> dict[str, str]:
        return dict(parse_qsl(self.query_string, keep_blank_values=True))


def _fail(message: str, detail: str) -> ExtractionError:
    log.error(detail)
    return ExtractionError(message)


def _is_visible_ascii(value: str) -> bool:
    return all(ch == "\t" or " " <= ch <= "~" for ch in value)


def _from_body(body: bytes | None, locate_path: str, value_type: str) -> str:
    if body is None:
        raise _fail("Body expected but not provided", "Body expected but not provided")
    try:
        current: Any = json.loads(bytes(body).decode("utf-8", errors="replace"))
    except ValueError:
        raise _fail("Failed to parse body as JSON", "Failed to parse body as JSON") from None
    for part in locate_path.split("::"):
        if not isinstance(current, dict) or part not in current:
            raise _fail(
                f"{value_type} path not found in body",
                f"{value_type} path not found in body: {locate_path}",
            )
        current = current[part]
    if not isinstance(current, str):
        raise _fail(
            f"{value_type} value in body is not a string",
            f"{value_type} value in body is not a string",
        )
    return current


def extract_value(
    request: Request,
    location: str,
    locate_path: str,
    body: bytes | None,
    value_type: str,
) -> str:
    """Return the string found at ``locate_path`` in the given request ``location``.

    ``location`` is one of ``query``, ``header``, ``path`` (a segment index)
    or ``body`` (a ``::``-separated JSON path). Raises ``ExtractionError``.
    """
    if location == "query":
        value = request.query().get(locate_path)
        if value is None:
            raise _fail(
                f"{value_type} not found in query",
                f"{value_type} not found in query parameter: {locate_path}",
            )
        return value

    if location == "header":
        value = request.header(locate_path)
        if value is None:
            raise _fail(
                f"{value_type} not found in header",
                f"{value_type} not found in header: {locate_path}",
            )
        if not _is_visible_ascii(value):
            raise _fail("Invalid header value", f"Invalid header value for: {locate_path}")
        return value

    if location == "path":
        if not _INDEX.fullmatch(locate_path):
            raise _fail(
                "Invalid path segment index",
                f"Invalid path segment index: {locate_path}",
            )
        index = int(locate_path)
        segments = request.path.split("/")
        if index >= len(segments):
            raise _fail(
                "Path segment index out of bounds",
                f"Path segment index out of bounds: {index}",
            )
        return segments[index]

    if location == "body":
        return _from_body(body, locate_path, value_type)

    raise _fail(
        f"Unsupported {value_type} location",
        f"Unsupported {value_type} location: {location}",
    )