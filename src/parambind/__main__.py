"""
=============================================================================
COMMAND-LINE ENTRY POINT
=============================================================================

Sends one request through the logging/error pipeline to the example
controller and prints the raw HTTP response.

=============================================================================
USAGE
=============================================================================

    # Query string binding
    python -m parambind "/request-param-v2?username=kim&age=20"

    # Form body binding (POST is implied by --data)
    python -m parambind /request-param-v1 --data "username=kim&age=20"

    # Missing required parameter → 400 and exit status 1
    python -m parambind /request-param-required

    # JSON access log, verbose
    python -m parambind "/model-attribute-v1?username=kim" --log-format json --log-level DEBUG

    # List endpoints
    python -m parambind --list

=============================================================================
"""

from typing import Optional, Sequence
import argparse
import logging
import sys

from . import __version__
from .config import BinderConfig, LOG_FORMATS, LOG_LEVELS, setup_logging
from .controller import RequestParamController
from .http.request import FORM_CONTENT_TYPE, HTTPParseError, RequestParser
from .http.response import error_response
from .http.status_codes import HTTPStatus
from .middleware import ErrorHandlingMiddleware, LoggingMiddleware, MiddlewarePipeline

logger = logging.getLogger(__name__)


def build_raw_request(target: str, method: str, data: Optional[str]) -> bytes:
    """Assemble an HTTP/1.1 request for target (path plus optional query)."""
    lines = [
        f"{method} {target.replace(' ', '%20')} HTTP/1.1",
        "Host: localhost",
        "User-Agent: parambind-cli",
    ]
    body = b""
    if data is not None:
        body = data.encode("utf-8")
        lines.append(f"Content-Type: {FORM_CONTENT_TYPE}")
        lines.append(f"Content-Length: {len(body)}")
    return ("\r\n".join(lines) + "\r\n\r\n").encode("utf-8") + body


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the CLI.

    Returns:
        0 for a 2xx response, 1 otherwise.
    """
    parser = argparse.ArgumentParser(
        prog="parambind",
        description="Send a request to the request-parameter binding examples",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m parambind "/request-param-v2?username=kim&age=20"
  python -m parambind /request-param-default
  python -m parambind /request-param-v1 --data "username=kim&age=20"
  python -m parambind "/request-param-multivaluemap?userIds=id1&userIds=id2"
        """,
    )

    parser.add_argument(
        "target",
        nargs="?",
        help="Request path with optional query string"
    )
    parser.add_argument(
        "--method", "-X",
        default=None,
        help="HTTP method (default: GET, or POST with --data)"
    )
    parser.add_argument(
        "--data", "-d",
        default=None,
        help="Form-encoded request body, e.g. 'username=kim&age=20'"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=LOG_LEVELS,
        help="Logging level (default: PARAMBIND_LOG_LEVEL or INFO)"
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=LOG_FORMATS,
        help="Access log format (default: PARAMBIND_LOG_FORMAT or text)"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the example endpoints and exit"
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"parambind {__version__}"
    )

    args = parser.parse_args(argv)

    controller = RequestParamController()

    if args.list:
        for path in controller.endpoints:
            print(path)
        return 0

    if not args.target:
        parser.error("target is required unless --list is given")

    # =========================================================================
    # CONFIGURATION
    # =========================================================================
    # Environment first, then CLI flags on top

    config = BinderConfig.from_env()
    if args.log_level:
        config.log_level = args.log_level
    if args.log_format:
        config.log_format = args.log_format

    try:
        config.validate()
    except ValueError as e:
        parser.error(str(e))

    setup_logging(config)

    # =========================================================================
    # PIPELINE
    # =========================================================================

    pipeline = MiddlewarePipeline().use(
        LoggingMiddleware(log_format=config.log_format),
        ErrorHandlingMiddleware(),
    )
    handler = pipeline.wrap(controller.handle)

    method = (args.method or ("POST" if args.data is not None else "GET")).upper()
    raw = build_raw_request(args.target, method, args.data)

    request_parser = RequestParser(
        max_request_size=config.max_request_size,
        parse_form_body=config.parse_form_body,
    )
    try:
        request = request_parser.parse(raw, ("127.0.0.1", 0))
    except HTTPParseError as e:
        logger.warning(f"Rejected request {method} {args.target}: {e}")
        response = error_response(HTTPStatus(e.status_code), str(e))
    else:
        response = handler(request)

    print(response.to_bytes(config.server_name).decode("utf-8", errors="replace"))
    return 0 if response.status.is_success else 1


if __name__ == "__main__":
    sys.exit(main())
