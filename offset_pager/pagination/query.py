"""Case-insensitive, ordered view over request query parameters."""

from typing import Iterable, Iterator, Mapping, Protocol, Sequence
from urllib.parse import parse_qsl


class QueryParameters(Protocol):
    """The narrow slice of a query-string multimap the paginator relies on.

    Starlette's ``request.query_params`` satisfies it as well as ``QueryParams``.
    """

    def get(self, key: str) -> str | None: ...

    def keys(self) -> Iterable[str]: ...


class QueryParams:
    """Immutable query parameters keyed case-insensitively.

    A key repeated under any casing keeps the spelling and position of its
    first appearance and the value of its last one.
    """

    __slots__ = ("_keys", "_values")

    def __init__(self, pairs: Iterable[tuple[str, str]] = ()) -> None:
        keys: dict[str, str] = {}
        values: dict[str, str] = {}
        for key, value in pairs:
            folded = key.lower()
            keys.setdefault(folded, key)
            values[folded] = value
        self._keys: tuple[str, ...] = tuple(keys.values())
        self._values = values

    @classmethod
    def from_query_string(cls, query_string: str) -> "QueryParams":
        query_string = query_string.lstrip("?")
        return cls(parse_qsl(query_string, keep_blank_values=True))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "QueryParams":
        return cls(mapping.items())

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._values.get(key.lower(), default)

    def keys(self) -> Sequence[str]:
        return self._keys

    def items(self) -> list[tuple[str, str]]:
        return [(k, self._values[k.lower()]) for k in self._keys]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryParams):
            return NotImplemented
        return self.items() == other.items()

    def __repr__(self) -> str:
        return f"QueryParams({self.items()!r})"
