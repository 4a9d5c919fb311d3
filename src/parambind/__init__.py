"""
=============================================================================
PARAMBIND - HTTP Request-Parameter Binding Built From Scratch
=============================================================================

Turns the text of an HTTP request's query string and form body into typed
handler arguments, with one example endpoint per binding strategy.

=============================================================================
PACKAGE LAYOUT
=============================================================================

    parambind/
    ├── binding/             # The binding layer
    │   ├── params.py        # ParameterSet: multi-valued parameters
    │   ├── descriptors.py   # RequestParam, ModelAttribute
    │   ├── converters.py    # ParamType, text ⇄ value
    │   ├── resolver.py      # ParameterResolver
    │   └── errors.py        # MissingParameter, TypeConversionError, ...
    ├── http/                # HTTP protocol
    │   ├── request.py       # Request parsing, query + form parameters
    │   ├── response.py      # Response building
    │   └── status_codes.py  # HTTP status enum
    ├── middleware/          # Cross-cutting concerns
    │   ├── base.py          # Middleware, MiddlewarePipeline
    │   ├── errors.py        # Binding errors → 400
    │   └── logging.py       # Access log
    ├── controller.py        # The example endpoints
    ├── config.py            # BinderConfig, setup_logging
    └── __main__.py          # python -m parambind

=============================================================================
QUICK START
=============================================================================

    from parambind import ParameterResolver, ParamType, RequestParam
    from parambind.http import parse_request

    request = parse_request(
        b"GET /hello?username=kim&age=20 HTTP/1.1\\r\\nHost: x\\r\\n\\r\\n"
    )

    resolver = ParameterResolver()
    resolver.resolve_all(request.parameters, (
        RequestParam("username"),
        RequestParam("age", ParamType.INT),
    ))
    # {"username": "kim", "age": 20}

=============================================================================
"""

__version__ = "1.0.0"

from .binding import (
    BindingError,
    ConfigurationError,
    MissingParameter,
    ModelAttribute,
    ParameterResolver,
    ParameterSet,
    ParamType,
    RequestParam,
    TypeConversionError,
    resolve,
)
from .config import BinderConfig

__all__ = [
    "ParameterSet",
    "ParamType",
    "RequestParam",
    "ModelAttribute",
    "ParameterResolver",
    "resolve",
    "BindingError",
    "MissingParameter",
    "TypeConversionError",
    "ConfigurationError",
    "BinderConfig",
    "__version__",
]
