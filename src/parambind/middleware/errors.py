"""
=============================================================================
ERROR HANDLING MIDDLEWARE
=============================================================================

Turns exceptions raised while handling a request into HTTP responses.

    ┌──────────────────────────────┬────────┬─────────────────────────────┐
    │ Exception                    │ Status │ Logged as                   │
    ├──────────────────────────────┼────────┼─────────────────────────────┤
    │ MissingParameter             │ 400    │ WARNING                     │
    │ TypeConversionError          │ 400    │ WARNING                     │
    │ ConfigurationError           │ 500    │ ERROR with traceback        │
    │ anything else                │ 500    │ ERROR with traceback        │
    └──────────────────────────────┴────────┴─────────────────────────────┘

Binding errors describe what the client sent wrong, so their message goes
back in the body. Anything else is a server bug; the client only sees a
generic 500 and the details go to the log.

Malformed requests never get this far: RequestParser rejects them before
there is an HTTPRequest to hand to the pipeline, and the caller answers
with the HTTPParseError status itself.

=============================================================================
"""

import logging

from .base import Middleware, NextHandler
from ..binding.errors import BindingError
from ..http.request import HTTPRequest
from ..http.response import HTTPResponse, bad_request, internal_error

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware(Middleware):
    """
    Maps exceptions from downstream handlers to error responses.

    Place it inside LoggingMiddleware so the access log records the
    translated status instead of a failure.
    """

    def __init__(self, expose_errors: bool = False):
        """
        Args:
            expose_errors: Put the exception text of unexpected errors in
                           the 500 body. Only for local debugging.
        """
        self.expose_errors = expose_errors

    def __call__(self, request: HTTPRequest, next: NextHandler) -> HTTPResponse:
        try:
            return next(request)
        except BindingError as e:
            logger.warning(f"Binding failed for {request.method} {request.path}: {e}")
            return bad_request(str(e), parameter=e.parameter)
        except Exception as e:
            logger.exception(f"Handler error: {request.method} {request.path}: {e}")
            if self.expose_errors:
                return internal_error(f"{type(e).__name__}: {e}")
            return internal_error()
