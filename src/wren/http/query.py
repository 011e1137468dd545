"""Query string parameters of a request.

Routing never looks at the query; function routes read it from
``request.query``.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from urllib.parse import parse_qsl


class QueryParams(Mapping[str, str]):
    """Parsed ``?a=1&a=2&b=`` parameters, first value per key.

    ``get_list`` returns every value; blank values are kept.
    """

    __slots__ = ("_raw", "_values")

    def __init__(self, query_string: bytes | str = b"") -> None:
        if isinstance(query_string, bytes):
            query_string = query_string.decode("latin-1")
        values: dict[str, list[str]] = {}
        for key, value in parse_qsl(query_string, keep_blank_values=True):
            values.setdefault(key, []).append(value)
        object.__setattr__(self, "_raw", query_string)
        object.__setattr__(self, "_values", MappingProxyType(values))

    def __getitem__(self, key: str) -> str:
        return self._values[key][0]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"QueryParams({self._raw!r})"

    def get_list(self, key: str) -> list[str]:
        """Every value given for *key*, empty if absent."""
        return list(self._values.get(key, ()))

    @property
    def raw(self) -> str:
        """The query string as received, without the ``?``."""
        return self._raw
