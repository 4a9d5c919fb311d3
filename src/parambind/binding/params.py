"""
=============================================================================
REQUEST PARAMETER SET
=============================================================================

A read-only, multi-valued view of a request's parameters.

=============================================================================
WHERE PARAMETERS COME FROM
=============================================================================

    POST /request-param-v1?username=kim HTTP/1.1
    Content-Type: application/x-www-form-urlencoded

    age=20&username=lee
              │
              ▼
    ┌──────────────────────────────────────────────┐
    │  query string   username=kim                 │
    │  form body      age=20, username=lee         │
    ├──────────────────────────────────────────────┤
    │  ParameterSet                                │
    │    username → ["kim", "lee"]   (query first) │
    │    age      → ["20"]                         │
    └──────────────────────────────────────────────┘

The same name may repeat (?userIds=id1&userIds=id2), so every name maps to a
list. Single-value lookups take the first entry.

=============================================================================
"""

from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple
from urllib.parse import parse_qsl


class ParameterSet(Mapping[str, List[str]]):
    """
    Immutable mapping of parameter name to its ordered list of values.

    Behaves like a read-only dict of lists:

        params = ParameterSet.from_query_string("a=1&a=2&b=")
        params["a"]             # ["1", "2"]
        params.first("a")       # "1"
        params.first("b")       # ""  (blank values are kept)
        "c" in params           # False
    """

    def __init__(self, values: Optional[Mapping[str, Iterable[str]]] = None):
        self._values: Dict[str, Tuple[str, ...]] = {}
        for name, items in (values or {}).items():
            if isinstance(items, str):
                items = (items,)
            self._values[name] = tuple(items)

    # =========================================================================
    # CONSTRUCTORS
    # =========================================================================

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> "ParameterSet":
        """Build from (name, value) pairs, preserving repeat order."""
        grouped: Dict[str, List[str]] = {}
        for name, value in pairs:
            grouped.setdefault(name, []).append(value)
        return cls(grouped)

    @classmethod
    def from_query_string(cls, query: str, encoding: str = "utf-8") -> "ParameterSet":
        """Parse "a=1&b=2" style text. Blank values are kept as ""."""
        return cls.from_pairs(
            parse_qsl(query, keep_blank_values=True, encoding=encoding, errors="strict")
        )

    def merge(self, other: Mapping[str, Iterable[str]]) -> "ParameterSet":
        """Return a new set with other's values appended after this set's."""
        combined: Dict[str, List[str]] = {name: list(items) for name, items in self._values.items()}
        for name, items in other.items():
            combined.setdefault(name, []).extend(items)
        return ParameterSet(combined)

    # =========================================================================
    # MAPPING PROTOCOL
    # =========================================================================

    def __getitem__(self, name: str) -> List[str]:
        return list(self._values[name])

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ParameterSet({self.to_multi_dict()!r})"

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    def first(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """First value of a parameter, or default when it was not sent."""
        values = self._values.get(name)
        return values[0] if values else default

    def getlist(self, name: str) -> List[str]:
        """All values of a parameter (empty list if not sent)."""
        return list(self._values.get(name, ()))

    def to_dict(self) -> Dict[str, str]:
        """{name: first value} for every parameter."""
        return {name: values[0] for name, values in self._values.items() if values}

    def to_multi_dict(self) -> Dict[str, List[str]]:
        """{name: [values...]} for every parameter."""
        return {name: list(values) for name, values in self._values.items()}
