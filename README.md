# pollhook

pollhook provides the building blocks of a webhook relay:

- Incoming JSON payloads are stored per alias in an ordered cache whose entries expire.
- Clients collect the payloads by long polling.
- Tokens and challenges are pulled out of requests for verification handshakes.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Components

### `pollhook.cache`

`OrderedCache(aliases, ttl=300)` keeps one cache for each alias and remembers the order in which keys were inserted.

- `OrderedCache.from_env(aliases, environ=None)` reads the TTL in seconds from `CACHE_TTL`. When the variable is missing or is not an unsigned integer, the TTL is 300.
- `insert(alias, key, value)` stores a value and returns `True`. It returns `False` and does nothing if the same key was inserted into that alias within the last 200 seconds. This holds even if the key has since been removed.
- `get(alias, key)` returns the live value, or `None`.
- `remove_oldest(alias, n)` and `remove_newest(alias, n)` remove up to `n` live entries and return them as a list of `(key, value)` pairs.
- `has_alias(alias)` and `aliases()` report which aliases exist.
- Each alias holds at most 10,000 entries.
- `insert`, `remove_oldest` and `remove_newest` raise `AliasNotFoundError` (a `LookupError`) for an alias the cache was not built with.

### `pollhook.polling_config`

`PollingConfig` is a frozen dataclass with two fields:

- `timeout`, in seconds, default 20.
- `max_polled_items`, default 5.

`PollingConfig.from_env(environ=None)` reads `POLLING_TIMEOUT` and `POLL_ITEMS_COUNT`. It falls back to the defaults for values that are missing or are not unsigned integers.

### `pollhook.data_config`

`DataMap.from_mapping(raw)` builds a map from alias to `EndpointDataMap(path, method="GET")` out of a mapping such as `{"orders": {"path": "/orders", "method": "POST"}}`. Malformed entries raise `ValueError`.

`DataMap.alias_path_method()` returns a list of `(alias, path, method)` tuples.

### `pollhook.data_receiver`

`receive_data(body, alias, cache)` parses the bytes as UTF-8 JSON and computes the hex SHA-256 digest of the raw body. It stores the parsed value in the cache under that digest and returns `(alias, key)`.

- An invalid body raises `ValueError`.
- An unknown alias raises `AliasNotFoundError`.

### `pollhook.data_polling`

`retrieve_data_with_polling(alias, cache, polling_config)` is a coroutine. It checks the cache every 0.1 seconds until entries appear or the timeout passes. It removes at most `max_polled_items` entries, oldest first.

It returns a `DataResponse` with the fields `success`, `message`, `count` and `data`. `to_dict()` turns it into a plain dict. An unknown alias gives `success=False` and the message `Alias '<alias>' not found`.

### `pollhook.extractors`

`Request(path, query_string, headers)` holds the parts of a request. `Request.from_uri(uri, headers=None)` builds one from a URI and a mapping or sequence of header pairs. Header names are matched without regard to case.

`extract_value(request, location, locate_path, body, value_type)` returns a string. `location` is one of:

- `query`: a query parameter.
- `header`: a header. Values with non-visible characters are rejected.
- `path`: a segment index into the path split on `/`.
- `body`: a `::`-separated path into a JSON body, which must end at a string.

Failures raise `ExtractionError` (a `ValueError` with `status = 400`) and are logged.

## Example

```python
import asyncio

from pollhook.cache import OrderedCache
from pollhook.data_receiver import receive_data
from pollhook.data_polling import retrieve_data_with_polling
from pollhook.polling_config import PollingConfig


async def demo():
    cache = OrderedCache.from_env(["orders"])
    receive_data(b'{"id": 1}', "orders", cache)
    response = await retrieve_data_with_polling("orders", cache, PollingConfig.from_env())
    print(response.to_dict())


asyncio.run(demo())
```

Extracting values for a verification handshake:

```python
from pollhook.extractors import Request, extract_value

request = Request.from_uri("/callhook/endpoint?hub.challenge=abc",
                           {"Authorization": "Bearer token"})
extract_value(request, "header", "authorization", None, "Token")     # "Bearer token"
extract_value(request, "query", "hub.challenge", None, "Challenge")  # "abc"
```

## What the package does not do

- It runs no HTTP server and installs no command. You wire the functions above into a web framework of your choice.
- It does not load a webhook configuration file.
- It does not match verification paths, compare tokens or build the challenge response. It only extracts the values those steps need.