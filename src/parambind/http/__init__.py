"""
=============================================================================
HTTP PACKAGE - Protocol Implementation
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │ REQUEST (request.py)                                                │
    │ Raw bytes → HTTPRequest; query string and form body → parameters   │
    ├─────────────────────────────────────────────────────────────────────┤
    │ RESPONSE (response.py)                                              │
    │ HTTPResponse / ResponseBuilder → bytes                              │
    ├─────────────────────────────────────────────────────────────────────┤
    │ STATUS CODES (status_codes.py)                                      │
    │ HTTPStatus enum with reason phrases                                 │
    └─────────────────────────────────────────────────────────────────────┘

Key points:
- Lines end with CRLF (\\r\\n), not just \\n
- Headers and body separated by empty line (\\r\\n\\r\\n)
- Header names are case-insensitive ("Content-Type" = "content-type")
- Body length specified by Content-Length header

=============================================================================
"""

from .request import HTTPRequest, RequestParser, HTTPParseError, parse_request
from .response import (
    HTTPResponse,
    ResponseBuilder,
    ok,             # 200 OK
    bad_request,    # 400 Bad Request
    not_found,      # 404 Not Found
    error_response,  # any status, JSON error body
    internal_error,  # 500 Internal Server Error
)
from .status_codes import HTTPStatus

__all__ = [
    # Request parsing
    "HTTPRequest",
    "RequestParser",
    "HTTPParseError",
    "parse_request",

    # Response building
    "HTTPResponse",
    "ResponseBuilder",
    "ok",
    "bad_request",
    "not_found",
    "error_response",
    "internal_error",

    # Status codes
    "HTTPStatus",
]
