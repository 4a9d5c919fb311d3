"""
=============================================================================
BINDING PACKAGE - Request Parameters to Typed Values
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │ PARAMETER SET (params.py)                                           │
    │ Multi-valued view of query string + form body                       │
    │   ?userIds=id1&userIds=id2  →  {"userIds": ["id1", "id2"]}          │
    ├─────────────────────────────────────────────────────────────────────┤
    │ DESCRIPTORS (descriptors.py)                                        │
    │ RequestParam: one scalar (key, type, required, default)             │
    │ ModelAttribute: several scalars bound into one object               │
    ├─────────────────────────────────────────────────────────────────────┤
    │ CONVERTERS (converters.py)                                          │
    │ "20" → 20, "true" → True, and back again                            │
    ├─────────────────────────────────────────────────────────────────────┤
    │ RESOLVER (resolver.py)                                              │
    │ resolve / resolve_all / resolve_map / resolve_aggregate             │
    ├─────────────────────────────────────────────────────────────────────┤
    │ ERRORS (errors.py)                                                  │
    │ MissingParameter, TypeConversionError → 400                         │
    │ ConfigurationError → raised when the descriptor is declared         │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
"""

from .converters import ParamType, convert, to_string
from .descriptors import ModelAttribute, RequestParam
from .errors import (
    BindingError,
    ConfigurationError,
    MissingParameter,
    TypeConversionError,
)
from .params import ParameterSet
from .resolver import ParameterResolver, resolve

__all__ = [
    # Parameters
    "ParameterSet",

    # Descriptors
    "ParamType",
    "RequestParam",
    "ModelAttribute",

    # Resolution
    "ParameterResolver",
    "resolve",
    "convert",
    "to_string",

    # Errors
    "BindingError",
    "MissingParameter",
    "TypeConversionError",
    "ConfigurationError",
]
