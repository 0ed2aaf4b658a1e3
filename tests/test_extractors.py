import json

import pytest

from pollhook.extractors import ExtractionError, Request, extract_value

BODY = json.dumps(
    {
        "data": {
            "user": {"id": "user123", "name": "John Doe"},
            "token": "secret-token",
        }
    }
).encode()


def test_extract_from_query():
    request = Request.from_uri("/?param=value")
    assert extract_value(request, "query", "param", None, "Test") == "value"


def test_extract_from_query_missing():
    request = Request.from_uri("/?other=value")
    with pytest.raises(ExtractionError, match="Test not found in query"):
        extract_value(request, "query", "param", None, "Test")


def test_extract_from_query_decodes_values():
    request = Request.from_uri("/?hub.challenge=a%20b")
    assert extract_value(request, "query", "hub.challenge", None, "Challenge") == "a b"


def test_extract_from_header():
    request = Request.from_uri("/", {"Authorization": "Bearer token"})
    assert extract_value(request, "header", "authorization", None, "Test") == "Bearer token"


def test_extract_from_header_missing():
    request = Request.from_uri("/")
    with pytest.raises(ExtractionError, match="Test not found in header"):
        extract_value(request, "header", "authorization", None, "Test")


def test_extract_from_header_invalid_value():
    request = Request.from_uri("/", [("X-Sig", "caf\u00e9")])
    with pytest.raises(ExtractionError, match="Invalid header value"):
        extract_value(request, "header", "x-sig", None, "Test")


def test_extract_from_path():
    request = Request.from_uri("/api/v1/resource")
    assert extract_value(request, "path", "3", None, "Test") == "resource"
    assert extract_value(request, "path", "0", None, "Test") == ""


def test_extract_from_path_out_of_bounds():
    request = Request.from_uri("/api/v1/resource")
    with pytest.raises(ExtractionError, match="out of bounds"):
        extract_value(request, "path", "5", None, "Test")


def test_extract_from_path_invalid_index():
    request = Request.from_uri("/api/v1/resource")
    with pytest.raises(ExtractionError, match="Invalid path segment index"):
        extract_value(request, "path", "not-a-number", None, "Test")


def test_extract_from_body_simple_path():
    request = Request.from_uri("/")
    assert extract_value(request, "body", "data::token", BODY, "Test") == "secret-token"


def test_extract_from_body_nested_path():
    request = Request.from_uri("/")
    assert extract_value(request, "body", "data::user::id", BODY, "Test") == "user123"


def test_extract_from_body_missing_path():
    request = Request.from_uri("/")
    with pytest.raises(ExtractionError, match="Test path not found in body"):
        extract_value(request, "body", "data::missing", BODY, "Test")


def test_extract_from_body_not_provided():
    request = Request.from_uri("/")
    with pytest.raises(ExtractionError, match="Body expected but not provided"):
        extract_value(request, "body", "data::token", None, "Test")


def test_extract_from_body_non_string_value():
    request = Request.from_uri("/")
    with pytest.raises(ExtractionError, match="not a string"):
        extract_value(request, "body", "data::user", BODY, "Test")


def test_unsupported_location():
    request = Request.from_uri("/")
    with pytest.raises(ExtractionError, match="Unsupported Test location"):
        extract_value(request, "unsupported", "param", None, "Test")


def test_invalid_json_body():
    request = Request.from_uri("/")
    with pytest.raises(ExtractionError, match="Failed to parse body as JSON"):
        extract_value(request, "body", "data", b"not a json", "Test")


def test_extraction_error_is_bad_request():
    request = Request.from_uri("/")
    with pytest.raises(ExtractionError) as info:
        extract_value(request, "nowhere", "x", None, "Token")
    assert info.value.status == 400


def test_from_uri_splits_path_and_query():
    request = Request.from_uri("/callhook/endpoint?a=1&b=2", {"X-Hub": "v"})
    assert request.path == "/callhook/endpoint"
    assert request.query() == {"a": "1", "b": "2"}
    assert request.header("x-hub") == "v"