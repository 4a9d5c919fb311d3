"""
=============================================================================
HTTP STATUS CODES (RFC 7231)
=============================================================================

The status codes this package can produce, with their reason phrases.

    ┌────────┬───────────────────────────────────────────────────────────┐
    │  2xx   │ 200 OK                 - Parameters bound, handler ran    │
    ├────────┼───────────────────────────────────────────────────────────┤
    │  4xx   │ 400 Bad Request        - Missing/unconvertible parameter, │
    │        │                          malformed request                │
    │        │ 404 Not Found          - No endpoint for the path         │
    │        │ 405 Method Not Allowed - Unknown request method           │
    │        │ 413 Payload Too Large  - Request over max_request_size    │
    ├────────┼───────────────────────────────────────────────────────────┤
    │  5xx   │ 500 Internal Error     - Handler bug, bad descriptor      │
    │        │ 505 Version Not Supp.  - Not HTTP/1.0 or HTTP/1.1         │
    └────────┴───────────────────────────────────────────────────────────┘

A binding failure is the client's fault (it sent the wrong parameters), so
it is a 4xx. A descriptor that can never bind is ours, so it is a 5xx.

=============================================================================
"""

from enum import IntEnum


class HTTPStatus(IntEnum):
    """
    HTTP status codes.

    IntEnum keeps them comparable with plain ints:

        HTTPStatus.BAD_REQUEST == 400     # True
        f"{HTTPStatus.OK}"                # "200"
    """

    # 2xx Success
    OK = 200

    # 4xx Client Errors
    BAD_REQUEST = 400                   # Malformed request or bad parameter
    NOT_FOUND = 404                     # No endpoint for this path
    METHOD_NOT_ALLOWED = 405            # Unknown HTTP method
    PAYLOAD_TOO_LARGE = 413             # Request body too large

    # 5xx Server Errors
    INTERNAL_SERVER_ERROR = 500         # Unexpected server error (catch-all)
    HTTP_VERSION_NOT_SUPPORTED = 505    # HTTP version not supported

    def __str__(self) -> str:
        return str(self.value)

    @property
    def phrase(self) -> str:
        """
        Get the reason phrase for this status code.

            HTTP/1.1 400 Bad Request
                     ─── ───────────
                      │       │
                      │       └── Reason phrase
                      └────────── Status code
        """
        return _STATUS_PHRASES.get(self, "Unknown")

    @property
    def is_success(self) -> bool:
        """Check if this is a 2xx (success) status code."""
        return 200 <= self < 300

    @property
    def is_client_error(self) -> bool:
        """Check if this is a 4xx (client error) status code."""
        return 400 <= self < 500

    @property
    def is_server_error(self) -> bool:
        """Check if this is a 5xx (server error) status code."""
        return 500 <= self < 600

    @property
    def is_error(self) -> bool:
        """Check if this is an error status code (4xx or 5xx)."""
        return self >= 400


_STATUS_PHRASES = {
    HTTPStatus.OK: "OK",
    HTTPStatus.BAD_REQUEST: "Bad Request",
    HTTPStatus.NOT_FOUND: "Not Found",
    HTTPStatus.METHOD_NOT_ALLOWED: "Method Not Allowed",
    HTTPStatus.PAYLOAD_TOO_LARGE: "Payload Too Large",
    HTTPStatus.INTERNAL_SERVER_ERROR: "Internal Server Error",
    HTTPStatus.HTTP_VERSION_NOT_SUPPORTED: "HTTP Version Not Supported",
}
