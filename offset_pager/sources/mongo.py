"""MongoDB records through Beanie documents."""

from typing import Any

from beanie import Document, SortDirection

from offset_pager.pagination.filters import Conjunction
from offset_pager.sources.base import DataSource

# Stable order for skip/limit; Mongo gives none without an explicit sort
DEFAULT_SORT: list[tuple[str, SortDirection]] = [("_id", SortDirection.ASCENDING)]


def mongo_field_name(model: type[Document], field: str) -> str:
    if field == "id":
        return "_id"
    info = model.model_fields.get(field)
    if info is not None and info.alias:
        return info.alias
    return field


def to_mongo_filter(model: type[Document], predicate: Conjunction) -> dict[str, Any]:
    """Equality terms as a Mongo filter document ({} matches everything)."""
    return {mongo_field_name(model, term.field): term.value for term in predicate.terms}


class BeanieSource(DataSource[Document]):
    def __init__(
        self,
        model: type[Document],
        sort: list[tuple[str, SortDirection]] | None = None,
    ) -> None:
        super().__init__(model)
        self.sort = sort or DEFAULT_SORT

    async def count(self, predicate: Conjunction) -> int:
        return await self.model.find(to_mongo_filter(self.model, predicate)).count()

    async def fetch(self, predicate: Conjunction, offset: int, limit: int) -> list[Document]:
        return (
            await self.model.find(to_mongo_filter(self.model, predicate))
            .sort(self.sort)
            .skip(offset)
            .limit(limit)
            .to_list()
        )
