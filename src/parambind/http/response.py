"""
=============================================================================
HTTP RESPONSE BUILDER
=============================================================================

What a handler hands back, and how it turns into bytes.

    ┌─ STATUS LINE ────────────────────────────────────────────────────┐
    │    HTTP/1.1 400 Bad Request\r\n                                  │
    ├─ HEADERS ────────────────────────────────────────────────────────┤
    │    Content-Length: 78\r\n                     ← added if missing │
    │    Date: Thu, 01 Jan 2026 12:00:00 GMT\r\n    ← added if missing │
    │    Server: parambind/1.0\r\n                  ← added if missing │
    │    Content-Type: application/json; charset=utf-8\r\n             │
    ├─ EMPTY LINE ─────────────────────────────────────────────────────┤
    │    \r\n                                                          │
    ├─ BODY ───────────────────────────────────────────────────────────┤
    │    {"error": "Required request parameter 'username' ...",        │
    │     "parameter": "username"}                                     │
    └──────────────────────────────────────────────────────────────────┘

Handlers either build a response with ResponseBuilder / the one-line
helpers (ok, bad_request, ...) or write into an HTTPResponse directly, the
way a servlet writes into its response writer.

=============================================================================
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Optional, Dict, Any, Union
import json

from .status_codes import HTTPStatus

DEFAULT_SERVER_NAME = "parambind/1.0"
TEXT_PLAIN = "text/plain; charset=utf-8"
APPLICATION_JSON = "application/json; charset=utf-8"


def _to_bytes(body: Union[str, bytes]) -> bytes:
    return body.encode("utf-8") if isinstance(body, str) else body


@dataclass
class HTTPResponse:
    """
    Status, headers and body of one response.

    Setters return self so they chain:

        response.set_content_type("text/csv").set_body("a,b")
    """

    status: HTTPStatus = HTTPStatus.OK
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    version: str = "HTTP/1.1"

    @property
    def status_line(self) -> str:
        """e.g. "HTTP/1.1 200 OK"."""
        return f"{self.version} {self.status.value} {self.status.phrase}"

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        return json.loads(self.body.decode("utf-8"))

    def set_header(self, name: str, value: str) -> "HTTPResponse":
        self.headers[name] = value
        return self

    def set_content_type(self, content_type: str) -> "HTTPResponse":
        return self.set_header("Content-Type", content_type)

    def set_body(self, body: Union[str, bytes]) -> "HTTPResponse":
        """Replace the body. Text is encoded as UTF-8."""
        self.body = _to_bytes(body)
        return self

    def write(self, text: str) -> "HTTPResponse":
        """
        Append text to the body.

        The raw-access style: a handler that never builds a response object
        of its own just writes into the one it was handed.

            response.write("ok")
        """
        self.headers.setdefault("Content-Type", TEXT_PLAIN)
        self.body += text.encode("utf-8")
        return self

    def to_bytes(self, server_name: str = DEFAULT_SERVER_NAME) -> bytes:
        """
        Serialize for the wire.

        Content-Length, Date and Server are filled in unless the handler set
        them. self.headers itself is left untouched.
        """
        headers = {
            "Content-Length": str(len(self.body)),
            "Date": format_http_date(datetime.now(timezone.utc)),
            "Server": server_name,
        }
        headers.update(self.headers)

        head = "".join(f"{name}: {value}\r\n" for name, value in headers.items())
        return f"{self.status_line}\r\n{head}\r\n".encode("utf-8") + self.body


class ResponseBuilder:
    """
    Fluent construction of an HTTPResponse.

        response = (ResponseBuilder()
            .status(HTTPStatus.BAD_REQUEST)
            .json({"error": "Invalid input"})
            .header("X-Request-ID", "3f2a9c1d")
            .build())
    """

    def __init__(self, server_name: str = DEFAULT_SERVER_NAME):
        self._server_name = server_name
        self._response = HTTPResponse()

    def status(self, status: HTTPStatus) -> "ResponseBuilder":
        self._response.status = status
        return self

    def header(self, name: str, value: str) -> "ResponseBuilder":
        self._response.set_header(name, value)
        return self

    def content_type(self, content_type: str) -> "ResponseBuilder":
        return self.header("Content-Type", content_type)

    def body(self, body: Union[str, bytes]) -> "ResponseBuilder":
        """Raw body; the Content-Type is left to the caller."""
        self._response.set_body(body)
        return self

    def text(self, text: str, content_type: str = TEXT_PLAIN) -> "ResponseBuilder":
        return self.body(text).content_type(content_type)

    def json(self, data: Any, pretty: bool = False) -> "ResponseBuilder":
        """
        JSON body.

        ensure_ascii=False keeps non-ASCII parameter values readable
        (a username of "김" stays "김", not "\\uae40").
        """
        encoded = json.dumps(data, indent=2 if pretty else None, ensure_ascii=False)
        return self.body(encoded).content_type(APPLICATION_JSON)

    def build(self) -> HTTPResponse:
        """A snapshot of the response so far; the builder stays usable."""
        return replace(self._response, headers=dict(self._response.headers))

    def to_bytes(self) -> bytes:
        return self.build().to_bytes(self._server_name)


def format_http_date(dt: datetime) -> str:
    """
    RFC 7231 HTTP-date of an aware UTC datetime:

        Thu, 01 Jan 2026 12:00:00 GMT
    """
    return format_datetime(dt, usegmt=True)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================
#
#     return ok("ok")
#     return bad_request(str(error), parameter=error.parameter)
#
# Every error helper answers with a JSON body of the form {"error": ...}.
#
# =============================================================================

def ok(body: Union[str, bytes, dict, list] = "", content_type: Optional[str] = None) -> HTTPResponse:
    """
    200 OK. dict and list bodies become JSON, str becomes text, bytes are
    sent as they are.
    """
    builder = ResponseBuilder()
    if isinstance(body, (dict, list)):
        return builder.json(body).build()
    if isinstance(body, str):
        return builder.text(body, content_type or TEXT_PLAIN).build()

    builder.body(body)
    if content_type:
        builder.content_type(content_type)
    return builder.build()


def error_response(status: HTTPStatus, message: str, **extra: Any) -> HTTPResponse:
    """JSON error response with an arbitrary status."""
    payload: Dict[str, Any] = {"error": message}
    payload.update(extra)
    return ResponseBuilder().status(status).json(payload).build()


def bad_request(message: str = "Bad Request", parameter: Optional[str] = None) -> HTTPResponse:
    """
    400 Bad Request, for malformed requests and for parameters that fail to
    bind. parameter names the offending request key when there is one.
    """
    if parameter is None:
        return error_response(HTTPStatus.BAD_REQUEST, message)
    return error_response(HTTPStatus.BAD_REQUEST, message, parameter=parameter)


def not_found(message: str = "Not Found") -> HTTPResponse:
    return error_response(HTTPStatus.NOT_FOUND, message)


def internal_error(message: str = "Internal Server Error") -> HTTPResponse:
    # Callers decide whether details may reach the client
    return error_response(HTTPStatus.INTERNAL_SERVER_ERROR, message)
