"""
pytest configuration and fixtures.
"""

from typing import Optional
import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from parambind.binding import ParameterResolver, ParameterSet
from parambind.controller import RequestParamController
from parambind.http import HTTPRequest, parse_request


@pytest.fixture
def sample_get_request() -> bytes:
    """Sample HTTP GET request with query parameters."""
    return (
        b"GET /request-param-v2?username=kim&age=20 HTTP/1.1\r\n"
        b"Host: localhost:8080\r\n"
        b"User-Agent: pytest\r\n"
        b"Connection: keep-alive\r\n"
        b"\r\n"
    )


@pytest.fixture
def sample_form_request() -> bytes:
    """Sample HTTP POST request with a form-encoded body and a query string."""
    body = b"age=20&username=lee"
    return (
        b"POST /request-param-v1?username=kim HTTP/1.1\r\n"
        b"Host: localhost:8080\r\n"
        b"Content-Type: application/x-www-form-urlencoded; charset=UTF-8\r\n"
        + f"Content-Length: {len(body)}\r\n".encode()
        + b"\r\n"
        + body
    )


@pytest.fixture
def resolver() -> ParameterResolver:
    """A fresh resolver."""
    return ParameterResolver()


@pytest.fixture
def controller() -> RequestParamController:
    """The example controller."""
    return RequestParamController()


def _make_request(path: str, query: Optional[str] = None, form: Optional[str] = None) -> HTTPRequest:
    request = HTTPRequest(method="POST" if form is not None else "GET", path=path)
    if query is not None:
        request.query_params = ParameterSet.from_query_string(query).to_multi_dict()
    if form is not None:
        request.headers["content-type"] = "application/x-www-form-urlencoded"
        request.form_params = ParameterSet.from_query_string(form).to_multi_dict()
    return request


def _get(path_and_query: str) -> HTTPRequest:
    return parse_request(f"GET {path_and_query} HTTP/1.1\r\nHost: test\r\n\r\n".encode())


@pytest.fixture
def make_request():
    """Factory building a request the way the parser would, without raw bytes."""
    return _make_request


@pytest.fixture
def get_request():
    """Factory parsing a GET request for a path with optional query string."""
    return _get
