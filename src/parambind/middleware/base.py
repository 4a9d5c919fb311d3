"""
=============================================================================
MIDDLEWARE BASE CLASSES
=============================================================================

Middleware wraps the endpoint handler to deal with cross-cutting concerns
(logging, error translation) without touching the handlers themselves.

=============================================================================
CHAIN OF RESPONSIBILITY
=============================================================================

    Request ──► LoggingMiddleware ──► ErrorHandlingMiddleware ──► Controller
                                                                       │
    Response ◄── LoggingMiddleware ◄── ErrorHandlingMiddleware ◄───────┘

Each middleware gets the request and a `next` callable. It may act before
calling next, after it, or instead of it.

=============================================================================
"""

from abc import ABC, abstractmethod
from functools import partial, reduce
from typing import Callable, Iterator, List
import logging

from ..http.request import HTTPRequest
from ..http.response import HTTPResponse

logger = logging.getLogger(__name__)

# The signature of both the final handler and every wrapped layer.
NextHandler = Callable[[HTTPRequest], HTTPResponse]


class Middleware(ABC):
    """
    One layer of the chain.

        class Timing(Middleware):
            def __call__(self, request, next):
                response = next(request)
                response.set_header("X-Handled-By", self.name)
                return response
    """

    @abstractmethod
    def __call__(self, request: HTTPRequest, next: NextHandler) -> HTTPResponse:
        """Handle request, delegating to next unless answering directly."""

    @property
    def name(self) -> str:
        return type(self).__name__


class MiddlewarePipeline:
    """
    Ordered middleware around a final handler. First added is outermost:

        handler = MiddlewarePipeline().use(
            LoggingMiddleware(),        # sees the final status
            ErrorHandlingMiddleware(),  # closest to the controller
        ).wrap(controller.handle)
    """

    def __init__(self):
        self._layers: List[Middleware] = []

    def add(self, middleware: Middleware) -> "MiddlewarePipeline":
        self._layers.append(middleware)
        logger.debug(f"Added middleware: {middleware.name}")
        return self

    def use(self, *middleware: Middleware) -> "MiddlewarePipeline":
        """Add several layers, outermost first. Returns self."""
        for layer in middleware:
            self.add(layer)
        return self

    def wrap(self, handler: NextHandler) -> NextHandler:
        """
        Build the chain. For [A, B] the result calls A, then B, then handler.

        With no layers the handler itself is returned.
        """
        return reduce(
            lambda inner, layer: partial(layer, next=inner),
            reversed(self._layers),
            handler,
        )

    def __len__(self) -> int:
        return len(self._layers)

    def __iter__(self) -> Iterator[Middleware]:
        return iter(self._layers)
