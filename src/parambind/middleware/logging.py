"""
=============================================================================
LOGGING MIDDLEWARE
=============================================================================

Access logging with timing, request ids and the parameters that arrived.

=============================================================================
LOG FORMATS
=============================================================================

    text (Apache-style, plus the parameter set):
        127.0.0.1 - - [19/Oct/2026:10:00:00 +0000] "GET /request-param-v2"
        200 2 0.41ms params={'username': ['kim'], 'age': ['20']}

    json (for log aggregators):
        {"request_id": "3f2a9c1d", "method": "GET",
         "path": "/request-param-v2", "params": {"username": ["kim"], ...},
         "status_code": 200, ...}

The access log goes to the "parambind.access" logger so it can be routed or
silenced separately:

    logging.getLogger("parambind.access").setLevel(logging.WARNING)

=============================================================================
"""

from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional
import json
import logging
import time
import uuid

from .base import Middleware, NextHandler
from ..http.request import HTTPRequest
from ..http.response import HTTPResponse

logger = logging.getLogger("parambind.access")

ACCESS_TIME_FORMAT = "%d/%b/%Y:%H:%M:%S %z"


@dataclass
class RequestLog:
    """
    One access log entry.

    request_id:     Short random id, echoed as X-Request-ID
    params:         Query and form parameters as received
    duration_ms:    Time spent below this middleware
    """

    request_id: str
    method: str
    path: str
    client_ip: str
    user_agent: str
    status_code: int
    content_length: int
    duration_ms: float
    timestamp: str
    params: Dict[str, List[str]] = field(default_factory=dict)

    @classmethod
    def from_exchange(
        cls,
        request: HTTPRequest,
        response: HTTPResponse,
        request_id: str,
        duration_ms: float,
        with_params: bool = True,
    ) -> "RequestLog":
        """Build the entry for a request and the response it produced."""
        return cls(
            request_id=request_id,
            method=request.method,
            path=request.path,
            client_ip=request.client_address[0],
            user_agent=request.user_agent or "-",
            status_code=int(response.status),
            content_length=len(response.body),
            duration_ms=duration_ms,
            timestamp=time.strftime(ACCESS_TIME_FORMAT),
            params=request.parameters.to_multi_dict() if with_params else {},
        )

    def to_dict(self) -> dict:
        entry = asdict(self)
        entry["duration_ms"] = round(self.duration_ms, 2)
        return entry

    def to_text(self) -> str:
        """Apache-style line with the parameter set appended."""
        parts = [
            f"{self.client_ip or '-'} - - [{self.timestamp}]",
            f'"{self.method} {self.path}"',
            str(self.status_code),
            str(self.content_length),
            f"{self.duration_ms:.2f}ms",
        ]
        if self.params:
            parts.append(f"params={self.params}")
        return " ".join(parts)


class LoggingMiddleware(Middleware):
    """
    Writes one access log line per request.

    Add it first so the line shows the status the client actually got,
    after ErrorHandlingMiddleware has translated any binding error:

        pipeline.use(LoggingMiddleware(log_format="json"), ErrorHandlingMiddleware())
    """

    def __init__(
        self,
        log_format: str = "text",
        include_request_id: bool = True,
        log_level: int = logging.INFO,
        skip_paths: Optional[List[str]] = None,
        log_params: bool = True,
    ):
        """
        Args:
            log_format: "text" or "json".
            include_request_id: Add X-Request-ID to the response.
            log_level: Level for access log lines.
            skip_paths: Paths that are never logged.
            log_params: Include the request parameters. Turn off when
                        parameters may carry secrets.
        """
        self.log_format = log_format
        self.include_request_id = include_request_id
        self.log_level = log_level
        self.skip_paths = frozenset(skip_paths or ())
        self.log_params = log_params

    def __call__(self, request: HTTPRequest, next: NextHandler) -> HTTPResponse:
        request_id = uuid.uuid4().hex[:8]
        started = time.perf_counter()

        try:
            response = next(request)
        except Exception as e:
            elapsed = (time.perf_counter() - started) * 1000
            logger.error(
                f"Request failed: {request.method} {request.path} "
                f"- {type(e).__name__}: {e} ({elapsed:.2f}ms)"
            )
            raise

        if request.path not in self.skip_paths:
            elapsed = (time.perf_counter() - started) * 1000
            self._emit(RequestLog.from_exchange(
                request, response, request_id, elapsed, with_params=self.log_params
            ))

        if self.include_request_id:
            response.set_header("X-Request-ID", request_id)
        return response

    def _emit(self, entry: RequestLog) -> None:
        if self.log_format == "json":
            message = json.dumps(entry.to_dict(), ensure_ascii=False)
        else:
            message = entry.to_text()
        logger.log(self.log_level, message)
