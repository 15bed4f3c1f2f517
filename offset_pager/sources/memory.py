from itertools import islice
from typing import Iterable

from pydantic import BaseModel

from offset_pager.pagination.filters import Conjunction
from offset_pager.sources.base import DataSource, T


class MemorySource(DataSource[T]):
    """In-process list of records, kept in the order given."""

    def __init__(self, model: type[BaseModel], records: Iterable[T] = ()) -> None:
        super().__init__(model)
        self.records: list[T] = list(records)

    def _matching(self, predicate: Conjunction) -> Iterable[T]:
        if not predicate:
            return iter(self.records)
        return (r for r in self.records if predicate.matches(r))

    async def count(self, predicate: Conjunction) -> int:
        if not predicate:
            return len(self.records)
        return sum(1 for _ in self._matching(predicate))

    async def fetch(self, predicate: Conjunction, offset: int, limit: int) -> list[T]:
        return list(islice(self._matching(predicate), offset, offset + limit))
