"""
=============================================================================
STRING CONVERTERS
=============================================================================

Every request parameter arrives as text. This module turns that text into
the typed value a binding site declares, and back again.

=============================================================================
SUPPORTED TYPES
=============================================================================

    ┌────────────────┬──────────┬────────────────────────────────────────┐
    │ ParamType      │ Nullable │ Accepted text                          │
    ├────────────────┼──────────┼────────────────────────────────────────┤
    │ STR            │ yes      │ anything (including "")                │
    │ INT            │ no       │ [+-]?[0-9]+                            │
    │ OPTIONAL_INT   │ yes      │ [+-]?[0-9]+                            │
    │ FLOAT          │ no       │ 1, -2.5, .5, 1e10, 3.0E-2              │
    │ OPTIONAL_FLOAT │ yes      │ same as FLOAT                          │
    │ BOOL           │ no       │ true/on/yes/1, false/off/no/0          │
    │ OPTIONAL_BOOL  │ yes      │ same as BOOL                           │
    └────────────────┴──────────┴────────────────────────────────────────┘

Python's int() and float() are more lenient than a query string parser
should be: int(" 7 ") is 7, int("1_000") is 1000, float("nan") is a value.
The patterns below only accept the plain forms.

=============================================================================
"""

from enum import Enum
from typing import Any, Callable, Dict, Optional
import re

from .errors import TypeConversionError


class ParamType(Enum):
    """
    Target type of a binding site.

    Nullable types have None as their null-equivalent, so an absent optional
    parameter can bind to them. Non-nullable types cannot hold "nothing".
    """

    STR = ("str", True)
    INT = ("int", False)
    OPTIONAL_INT = ("Optional[int]", True)
    FLOAT = ("float", False)
    OPTIONAL_FLOAT = ("Optional[float]", True)
    BOOL = ("bool", False)
    OPTIONAL_BOOL = ("Optional[bool]", True)

    def __init__(self, label: str, nullable: bool):
        self.label = label
        self.nullable = nullable

    @property
    def is_text(self) -> bool:
        """True for STR, the only type where "" is a real value."""
        return self is ParamType.STR


INT_PATTERN = re.compile(r"[+-]?[0-9]+")
FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

TRUE_VALUES = frozenset({"true", "on", "yes", "1"})
FALSE_VALUES = frozenset({"false", "off", "no", "0"})


def _to_int(text: str) -> int:
    if not INT_PATTERN.fullmatch(text):
        raise ValueError(text)
    return int(text)


def _to_float(text: str) -> float:
    if not FLOAT_PATTERN.fullmatch(text):
        raise ValueError(text)
    return float(text)


def _to_bool(text: str) -> bool:
    lowered = text.lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ValueError(text)


_PARSERS: Dict[ParamType, Callable[[str], Any]] = {
    ParamType.STR: str,
    ParamType.INT: _to_int,
    ParamType.OPTIONAL_INT: _to_int,
    ParamType.FLOAT: _to_float,
    ParamType.OPTIONAL_FLOAT: _to_float,
    ParamType.BOOL: _to_bool,
    ParamType.OPTIONAL_BOOL: _to_bool,
}


def convert(text: str, param_type: ParamType, parameter: Optional[str] = None) -> Any:
    """
    Convert request text to a typed value.

    An empty string is a value only for STR. For the other nullable types
    it converts to None; for non-nullable types it cannot convert at all.

    Args:
        text: Raw parameter value.
        param_type: Target type.
        parameter: Request key, used in the error message.

    Returns:
        The converted value (None for "" into a nullable non-text type).

    Raises:
        TypeConversionError: If the text is not a valid literal of the type.
    """
    if text == "" and not param_type.is_text:
        if param_type.nullable:
            return None
        raise TypeConversionError(parameter, text, param_type.label)

    try:
        return _PARSERS[param_type](text)
    except ValueError:
        raise TypeConversionError(parameter, text, param_type.label) from None


def to_string(value: Any, param_type: ParamType) -> str:
    """
    Render a bound value back into its request-parameter form.

    For canonical input (no leading zeros, lower-case booleans) this is the
    inverse of convert():

        to_string(convert("20", ParamType.INT), ParamType.INT) == "20"
    """
    if value is None:
        return ""
    if param_type in (ParamType.BOOL, ParamType.OPTIONAL_BOOL):
        return "true" if value else "false"
    if param_type in (ParamType.FLOAT, ParamType.OPTIONAL_FLOAT):
        return repr(float(value))
    return str(value)
