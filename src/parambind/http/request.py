"""
=============================================================================
HTTP REQUEST PARSER
=============================================================================

Parses raw HTTP/1.1 request bytes into HTTPRequest objects and exposes
their parameters for binding. Implements the parts of RFC 7230 a binding
layer needs: request line, headers, Content-Length body.

=============================================================================
WHERE REQUEST PARAMETERS LIVE
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │  POST /request-param-v1?username=kim HTTP/1.1\r\n                   │
    │                          ─────┬──────                               │
    │                               └── query string → query_params       │
    │  Content-Type: application/x-www-form-urlencoded\r\n                │
    │  Content-Length: 6\r\n                                              │
    │  \r\n                                                               │
    │  age=20                                                             │
    │  ───┬──                                                             │
    │     └── form body → form_params                                     │
    │                     (only for x-www-form-urlencoded)                │
    └─────────────────────────────────────────────────────────────────────┘

    request.parameters  →  ParameterSet {username: ["kim"], age: ["20"]}

Both sources feed the same ParameterSet, the way a servlet container
answers getParameter() from either. When a name appears in both, query
values come first.

=============================================================================
PARSING ERRORS
=============================================================================

    400 Bad Request            - malformed request line, path traversal,
                                 undecodable parameters
    405 Method Not Allowed     - unknown method
    413 Payload Too Large      - request over max_request_size
    505 Version Not Supported  - anything but HTTP/1.0 and HTTP/1.1

=============================================================================
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, List
from urllib.parse import urlparse, unquote
import logging
import re

from ..binding.params import ParameterSet

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class HTTPParseError(Exception):
    """
    Raised when HTTP request parsing fails.

    Carries the HTTP status code that should be returned to the client.
    """

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code  # HTTP status to return


@dataclass
class HTTPRequest:
    """
    Represents a parsed HTTP request.

    Attributes:
        method:         The HTTP method (GET, POST, ...)
        path:           Request path WITHOUT query string
        version:        "HTTP/1.1" or "HTTP/1.0"
        headers:        Header dict with LOWERCASE keys
        query_params:   Query string as dict of lists
                        "?a=1&a=2&b=" → {"a": ["1", "2"], "b": [""]}
        form_params:    Form-encoded body as dict of lists
        body:           Raw request body bytes
        client_address: (ip, port) of the client
        raw:            The original unparsed request bytes
    """

    # Core request line components
    method: str
    path: str
    version: str = "HTTP/1.1"

    # Parsed components
    headers: Dict[str, str] = field(default_factory=dict)
    query_params: Dict[str, List[str]] = field(default_factory=dict)
    form_params: Dict[str, List[str]] = field(default_factory=dict)
    body: bytes = b""

    # Metadata
    client_address: tuple[str, int] = ("", 0)
    raw: bytes = b""

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def content_type(self) -> Optional[str]:
        """
        Content-Type without parameters.

        "application/x-www-form-urlencoded; charset=UTF-8"
            → "application/x-www-form-urlencoded"
        """
        ct = self.headers.get("content-type", "")
        return ct.split(";")[0].strip().lower() or None

    @property
    def content_length(self) -> int:
        """Content-Length as an int, 0 if missing or invalid."""
        try:
            return int(self.headers.get("content-length", 0))
        except ValueError:
            return 0

    @property
    def user_agent(self) -> str:
        return self.headers.get("user-agent", "")

    @property
    def is_form(self) -> bool:
        """Check if the body is form-encoded based on Content-Type."""
        return self.content_type == FORM_CONTENT_TYPE

    @property
    def parameters(self) -> ParameterSet:
        """
        All request parameters: query string first, then form body.

        This is the value handed to the resolver. It is rebuilt on each
        access, so it always reflects query_params and form_params.
        """
        return ParameterSet(self.query_params).merge(self.form_params)

    # =========================================================================
    # ACCESSOR METHODS
    # =========================================================================

    def get_header(self, name: str, default: str = "") -> str:
        """Get a header value (case-insensitive lookup)."""
        return self.headers.get(name.lower(), default)

    def get_query(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get the first value of a query parameter.

        Example:
            # URL: /users?page=1&page=2
            request.get_query("page")  # Returns "1"
        """
        values = self.query_params.get(name, [])
        return values[0] if values else default

    def get_query_list(self, name: str) -> list[str]:
        """Get all values of a query parameter."""
        return self.query_params.get(name, [])

    def get_parameter(self, name: str) -> Optional[str]:
        """
        Raw access to a request parameter: the first value, or None.

        No conversion, no defaults, no errors. Everything else is up to
        the caller:

            age = int(request.get_parameter("age"))   # TypeError if absent
        """
        return self.parameters.first(name)

    def get_parameter_values(self, name: str) -> list[str]:
        """Raw access to every value of a request parameter."""
        return self.parameters.getlist(name)


class RequestParser:
    """
    Parses raw HTTP request bytes into HTTPRequest objects.

        Raw Request Bytes
              │
              ▼
        1. Size check            too large? → 413
        2. Split at \\r\\n\\r\\n     no separator? → 400
        3. Request line          METHOD SP URI SP VERSION → 400/405/505
        4. Headers               "Name: Value", names lower-cased
        5. Body                  exactly Content-Length bytes
        6. Form parameters       only for x-www-form-urlencoded bodies
              │
              ▼
        HTTPRequest
    """

    VALID_METHODS = {
        "GET",
        "POST",
        "PUT",
        "DELETE",
        "PATCH",
        "HEAD",
        "OPTIONS",
    }

    REQUEST_LINE_PATTERN = re.compile(r"^([A-Z]+) ([^ ]+) (HTTP/\d\.\d)$")
    HEADER_PATTERN = re.compile(r"^([^:]+):\s*(.*)$")

    def __init__(
        self,
        max_request_size: int = 10 * 1024 * 1024,
        parse_form_body: bool = True,
    ):
        """
        Args:
            max_request_size: Maximum allowed request size in bytes.
            parse_form_body: Read parameters from form-encoded bodies.
                             When False only the query string is used.
        """
        self.max_request_size = max_request_size
        self.parse_form_body = parse_form_body

    def parse(
        self,
        data: bytes,
        client_address: tuple[str, int] = ("", 0)
    ) -> HTTPRequest:
        """
        Parse raw HTTP request data into an HTTPRequest object.

        Args:
            data: Raw HTTP request bytes.
            client_address: Client's (ip, port) tuple for logging.

        Returns:
            Parsed HTTPRequest object.

        Raises:
            HTTPParseError: If the request is malformed.
        """
        if len(data) > self.max_request_size:
            raise HTTPParseError(
                f"Request too large: {len(data)} bytes",
                status_code=413  # 413 Payload Too Large
            )

        header_end = data.find(b"\r\n\r\n")
        if header_end == -1:
            raise HTTPParseError("Incomplete request: no header terminator")

        header_section = data[:header_end].decode("utf-8", errors="replace")
        body = data[header_end + 4:]

        lines = header_section.split("\r\n")
        method, path, query_params, version = self._parse_request_line(lines[0])
        headers = self._parse_headers(lines[1:])

        try:
            content_length = int(headers.get("content-length", 0))
        except ValueError:
            raise HTTPParseError(
                f"Invalid Content-Length: {headers['content-length']}"
            ) from None
        if content_length < 0:
            raise HTTPParseError(f"Invalid Content-Length: {content_length}")
        if len(body) < content_length:
            raise HTTPParseError(
                f"Incomplete body: expected {content_length} bytes, got {len(body)}"
            )

        # Anything after Content-Length belongs to the next request
        body = body[:content_length]

        request = HTTPRequest(
            method=method,
            path=path,
            version=version,
            headers=headers,
            query_params=query_params,
            body=body,
            client_address=client_address,
            raw=data,
        )

        if self.parse_form_body and request.is_form and body:
            request.form_params = self._parse_form(body)

        return request

    def _parse_request_line(
        self,
        line: str
    ) -> tuple[str, str, Dict[str, List[str]], str]:
        """
        Parse the HTTP request line.

            "GET /request-param-v2?username=kim&age=20 HTTP/1.1"
             ─┬─ ──────────────────┬──────────────────  ───┬────
              │                    │                       │
            Method                URI                   Version

        Returns:
            Tuple of (method, path, query_params, version)
        """
        match = self.REQUEST_LINE_PATTERN.match(line)
        if not match:
            raise HTTPParseError(f"Invalid request line: {line}")

        method, uri, version = match.groups()

        if method not in self.VALID_METHODS:
            raise HTTPParseError(f"Invalid method: {method}", status_code=405)

        if version not in ("HTTP/1.0", "HTTP/1.1"):
            raise HTTPParseError(
                f"Unsupported HTTP version: {version}",
                status_code=505
            )

        parsed = urlparse(uri)
        path = unquote(parsed.path) or "/"

        if ".." in path:
            raise HTTPParseError("Invalid path: contains ..", status_code=400)

        try:
            query_params = ParameterSet.from_query_string(parsed.query).to_multi_dict()
        except UnicodeDecodeError as e:
            raise HTTPParseError(f"Invalid query string encoding: {e}") from e

        return method, path, query_params, version

    def _parse_headers(self, lines: list[str]) -> Dict[str, str]:
        """
        Parse HTTP headers into a dictionary.

        - Names are lower-cased ("Content-Type" == "content-type").
        - Lines starting with whitespace continue the previous header.
        - Repeated headers are joined with ", ".
        - Malformed lines are skipped.
        """
        headers: Dict[str, str] = {}
        current_name = None
        current_value = None

        for line in lines:
            if not line:
                continue

            if line[0] in (" ", "\t"):
                if current_name is not None:
                    current_value += " " + line.strip()
                    headers[current_name] = current_value
                continue

            match = self.HEADER_PATTERN.match(line)
            if not match:
                logger.debug(f"Skipping malformed header line: {line!r}")
                continue

            name, value = match.groups()
            name = name.strip().lower()
            value = value.strip()

            if name in headers:
                headers[name] += ", " + value
            else:
                headers[name] = value

            current_name = name
            current_value = headers[name]

        return headers

    def _parse_form(self, body: bytes) -> Dict[str, List[str]]:
        """Parse an application/x-www-form-urlencoded body."""
        try:
            text = body.decode("utf-8")
            return ParameterSet.from_query_string(text).to_multi_dict()
        except UnicodeDecodeError as e:
            raise HTTPParseError(f"Invalid form body encoding: {e}") from e


# =============================================================================
# CONVENIENCE FUNCTION
# =============================================================================

def parse_request(
    data: bytes,
    client_address: tuple[str, int] = ("", 0),
    max_size: int = 10 * 1024 * 1024,
    parse_form_body: bool = True,
) -> HTTPRequest:
    """
    Parse an HTTP request in one call.

    Use RequestParser directly to parse many requests with the same
    settings.
    """
    parser = RequestParser(max_request_size=max_size, parse_form_body=parse_form_body)
    return parser.parse(data, client_address)
