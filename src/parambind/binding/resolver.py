"""
=============================================================================
PARAMETER RESOLVER
=============================================================================

Applies descriptors to a request's ParameterSet and produces typed values.

=============================================================================
SCALAR RESOLUTION RULES
=============================================================================

    lookup descriptor.key
          │
          ├── absent ─────────┬── default declared ──► convert(default)
          │                   ├── required ──────────► MissingParameter
          │                   └── optional ──────────► None
          │
          ├── "" ─────────────┬── default declared ──► convert(default)
          │                   ├── STR ───────────────► ""
          │                   └── other type ────────► convert("")
          │                                             (None if nullable,
          │                                              else conversion error)
          │
          └── "text" ────────────────────────────────► convert(text)

    A converted None on a required descriptor is reported as missing.

Defaults win over the required flag: a required parameter with a default
never raises MissingParameter.

=============================================================================
PURITY
=============================================================================

Resolution reads its inputs and returns a value or raises. It keeps no
state and does not log, so one resolver can serve every request on every
thread. Logging what was bound is the handler's job.

=============================================================================
"""

from typing import Any, Dict, List, Sequence, Union

from .converters import convert
from .descriptors import ModelAttribute, RequestParam
from .errors import MissingParameter
from .params import ParameterSet


class ParameterResolver:
    """
    Resolves request parameters against descriptors.

    Usage:
        resolver = ParameterResolver()
        age = resolver.resolve(request.parameters, RequestParam("age", ParamType.INT))
        everything = resolver.resolve_map(request.parameters, multi=True)
        hello = resolver.resolve_aggregate(request.parameters, HELLO_DATA)
    """

    def resolve(self, params: ParameterSet, descriptor: RequestParam) -> Any:
        """
        Resolve one scalar parameter.

        Args:
            params: The request's parameters.
            descriptor: What to bind and how.

        Returns:
            The typed value (or None for an absent optional parameter).

        Raises:
            MissingParameter: Required, no default, and absent.
            TypeConversionError: Present but not a valid literal of the type.
        """
        key = descriptor.key
        raw = params.first(key)

        if raw is None or (raw == "" and descriptor.has_default):
            if descriptor.has_default:
                return convert(descriptor.default, descriptor.type, key)
            if descriptor.required:
                raise MissingParameter(key, descriptor.type.label)
            return None

        value = convert(raw, descriptor.type, key)
        if value is None and descriptor.required:
            # "" into a nullable non-text type
            raise MissingParameter(key, descriptor.type.label)
        return value

    def resolve_all(
        self,
        params: ParameterSet,
        descriptors: Sequence[RequestParam],
    ) -> Dict[str, Any]:
        """
        Resolve several descriptors into {field: value}.

        Descriptors are resolved in order and the first failure propagates,
        so the earliest declared bad parameter is the one reported.
        """
        return {descriptor.field: self.resolve(params, descriptor) for descriptor in descriptors}

    def resolve_map(
        self,
        params: ParameterSet,
        multi: bool = False,
    ) -> Union[Dict[str, str], Dict[str, List[str]]]:
        """
        Bind the whole parameter set.

        Args:
            params: The request's parameters.
            multi: False for {name: first value}, True for {name: [values]}.

        Returns:
            A fresh dict the caller may modify.
        """
        return params.to_multi_dict() if multi else params.to_dict()

    def resolve_aggregate(self, params: ParameterSet, aggregate: ModelAttribute) -> Any:
        """
        Bind several parameters into one structured value.

        Each field is resolved with the scalar rules using its own field name
        as the request key, then the aggregate's factory builds the result.
        """
        values = self.resolve_all(params, aggregate.fields)
        return aggregate.factory(**values)


_default_resolver = ParameterResolver()


def resolve(params: ParameterSet, descriptor: RequestParam) -> Any:
    """Resolve one descriptor with a shared, stateless resolver."""
    return _default_resolver.resolve(params, descriptor)
