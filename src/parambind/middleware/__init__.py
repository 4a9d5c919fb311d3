"""
=============================================================================
MIDDLEWARE PACKAGE
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │ LoggingMiddleware          - Access log with bound parameters       │
    │ ErrorHandlingMiddleware    - BindingError → 400, bugs → 500         │
    └─────────────────────────────────────────────────────────────────────┘

Typical order (first added = outermost):

    pipeline = MiddlewarePipeline()
    pipeline.use(LoggingMiddleware(), ErrorHandlingMiddleware())
    handler = pipeline.wrap(controller.handle)

=============================================================================
"""

from .base import Middleware, MiddlewarePipeline, NextHandler
from .errors import ErrorHandlingMiddleware
from .logging import LoggingMiddleware, RequestLog

__all__ = [
    "Middleware",
    "MiddlewarePipeline",
    "NextHandler",
    "ErrorHandlingMiddleware",
    "LoggingMiddleware",
    "RequestLog",
]
