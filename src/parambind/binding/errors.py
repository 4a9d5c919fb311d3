"""
=============================================================================
BINDING ERRORS
=============================================================================

Exceptions raised while binding request parameters to typed values.

=============================================================================
ERROR TAXONOMY
=============================================================================

    ┌──────────────────────────────────────────────────────────────────────┐
    │  Exception                                                           │
    │   ├── BindingError (status 400)        ← per-request, client's fault │
    │   │    ├── MissingParameter            ← required key not sent       │
    │   │    └── TypeConversionError         ← "abc" into an int           │
    │   └── ConfigurationError               ← bad descriptor, our fault   │
    └──────────────────────────────────────────────────────────────────────┘

BindingError subclasses are expected at runtime and become HTTP 400
responses. ConfigurationError is raised when a descriptor is declared, so a
broken binding site fails at import time instead of on the first request.

=============================================================================
"""

from typing import Any, Optional


class BindingError(Exception):
    """
    Base class for per-request binding failures.

    Carries the request key that failed and the HTTP status the error
    translates to, the same way HTTPParseError carries its status code.
    """

    status_code = 400

    def __init__(self, message: str, parameter: Optional[str] = None):
        super().__init__(message)
        self.parameter = parameter


class MissingParameter(BindingError):
    """A required parameter is absent and no default is declared."""

    def __init__(self, parameter: str, type_name: str = "str"):
        super().__init__(
            f"Required request parameter '{parameter}' for type {type_name} is not present",
            parameter,
        )


class TypeConversionError(BindingError):
    """A parameter value is present but cannot be converted to its type."""

    def __init__(self, parameter: Optional[str], value: Any, target_type: str):
        super().__init__(
            f"Failed to convert value {value!r} of parameter '{parameter}' to {target_type}",
            parameter,
        )
        self.value = value
        self.target_type = target_type


class ConfigurationError(Exception):
    """
    A descriptor can never bind successfully.

    Example: an optional parameter of a non-nullable type with no default.
    An absent value has nothing to bind to, so the declaration is rejected.
    """

    def __init__(self, message: str, parameter: Optional[str] = None):
        super().__init__(message)
        self.parameter = parameter
