"""Immutable, case-insensitive HTTP request headers.

The ASGI byte pairs are decoded once, when the request is built; every
lookup after that is a dict access on the lowercased name.
"""

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType


class Headers(Mapping[str, str]):
    """Request headers keyed by lowercased name.

    ``headers["Accept"]`` is the first value sent for that header;
    ``get_list`` returns every value in the order received.
    """

    __slots__ = ("_values",)

    def __init__(self, raw: Iterable[tuple[bytes, bytes]] = ()) -> None:
        values: dict[str, list[str]] = {}
        for name, value in raw:
            values.setdefault(name.decode("latin-1").lower(), []).append(
                value.decode("latin-1")
            )
        object.__setattr__(self, "_values", MappingProxyType(values))

    def __getitem__(self, key: str) -> str:
        return self._values[key.lower()][0]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Headers({dict(self)!r})"

    def get_list(self, key: str) -> list[str]:
        """Every value for *key*, empty if absent."""
        return list(self._values.get(key.lower(), ()))
