"""
=============================================================================
PARAMETER DESCRIPTORS
=============================================================================

Static declarations of what a handler wants from the request.

=============================================================================
ANATOMY OF A DESCRIPTOR
=============================================================================

    RequestParam("member_age", ParamType.INT, name="age", default="-1")
                 ─────┬─────  ──────┬──────  ────┬─────  ─────┬──────
                      │             │            │            │
               binding site    target type   request key   used when the
               (field)                       (optional)    key is absent
                                                           or ""

When name is omitted the field doubles as the request key (implicit-name
binding). The key is always spelled out in the descriptor; nothing is
inferred from a function signature.

Descriptors are checked when they are constructed. A declaration that can
never bind raises ConfigurationError right there, which for module-level
descriptors means at import time.

=============================================================================
"""

from dataclasses import dataclass, field as dataclass_field
from typing import Any, Callable, Optional, Tuple

from .converters import ParamType, convert
from .errors import ConfigurationError, TypeConversionError


@dataclass(frozen=True)
class RequestParam:
    """
    Declares one scalar request parameter.

    Attributes:
        field: Name of the binding site. Keys the result in batch and
               aggregate binding, and is the request key when name is None.
        type: Target type of the bound value.
        name: Explicit request key.
        required: Whether an absent value is an error (ignored if a default
                  is declared).
        default: Text substituted for an absent or empty value, converted
                 like a request value.
    """

    field: str
    type: ParamType = ParamType.STR
    name: Optional[str] = None
    required: bool = True
    default: Optional[str] = None

    def __post_init__(self):
        if not self.field:
            raise ConfigurationError("Parameter descriptor needs a field name")
        if self.name == "":
            raise ConfigurationError(
                f"Explicit request key of '{self.field}' is empty", self.field
            )

        if self.default is None:
            if not self.required and not self.type.nullable:
                raise ConfigurationError(
                    f"Optional parameter '{self.key}' cannot bind an absent value "
                    f"to non-nullable type {self.type.label}; declare a default "
                    f"or use a nullable type",
                    self.key,
                )
            return

        if not isinstance(self.default, str):
            raise ConfigurationError(
                f"Default of parameter '{self.key}' must be request text, "
                f"got {type(self.default).__name__} {self.default!r}",
                self.key,
            )

        try:
            convert(self.default, self.type, self.key)
        except TypeConversionError as e:
            raise ConfigurationError(
                f"Default {self.default!r} of parameter '{self.key}' is not a valid "
                f"{self.type.label}",
                self.key,
            ) from e

    @property
    def key(self) -> str:
        """The request key this descriptor looks up."""
        return self.name or self.field

    @property
    def has_default(self) -> bool:
        return self.default is not None


def _check_fields(aggregate: str, fields: Tuple[RequestParam, ...]) -> None:
    if not fields:
        raise ConfigurationError(f"Aggregate {aggregate} declares no fields")

    seen = set()
    for param in fields:
        if not isinstance(param, RequestParam):
            raise ConfigurationError(
                f"Field {param!r} of aggregate {aggregate} is not a RequestParam"
            )
        if param.name is not None and param.name != param.field:
            raise ConfigurationError(
                f"Field '{param.field}' of aggregate {aggregate} is bound by its "
                f"own name, not '{param.name}'",
                param.field,
            )
        if param.field in seen:
            raise ConfigurationError(
                f"Aggregate {aggregate} declares field '{param.field}' twice", param.field
            )
        seen.add(param.field)


@dataclass(frozen=True)
class ModelAttribute:
    """
    Declares an aggregate: several scalar parameters bound into one value.

    Fields are resolved in declaration order, then handed to the factory as
    keyword arguments keyed by each field name:

        HELLO = ModelAttribute(
            fields=(RequestParam("username"), RequestParam("age", ParamType.INT)),
            factory=HelloData,
        )
        # ?username=kim&age=20  →  HelloData(username="kim", age=20)

    name labels the aggregate in ConfigurationError messages and defaults to
    the factory's name.
    """

    fields: Tuple[RequestParam, ...]
    factory: Callable[..., Any] = dict
    name: str = dataclass_field(default="")

    def __post_init__(self):
        if not self.name:
            object.__setattr__(
                self, "name", getattr(self.factory, "__name__", "aggregate")
            )
        object.__setattr__(self, "fields", tuple(self.fields))
        _check_fields(self.name, self.fields)
