"""Limit/offset pagination over a data source, with ad-hoc field filters.

Typical use::

    paginator = LimitOffsetPagination(default_page_size=10, max_page_size=25)
    page = await paginator.create_page(source, "https://api.example.com/people", request.query_params)

``page.next`` / ``page.previous`` are complete URLs that reproduce the
request's valid filters with the adjusted limit/offset.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Iterable, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from offset_pager.core.exceptions import ConfigurationError
from offset_pager.core.logging import get_logger
from offset_pager.pagination.filters import build_filters
from offset_pager.pagination.links import build_links
from offset_pager.pagination.params import interpret_params
from offset_pager.pagination.query import QueryParameters
from offset_pager.pagination.schemas import PaginatedResult
from offset_pager.pagination.slicer import slice_page

if TYPE_CHECKING:
    from offset_pager.sources.base import DataSource

log = get_logger(__name__)

T = TypeVar("T")
U = TypeVar("U")


class PaginationConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    default_page_size: int = Field(gt=0)
    max_page_size: int | None = Field(default=None, gt=0)

    @model_validator(mode="after")
    def _max_not_below_default(self) -> "PaginationConfig":
        if self.max_page_size is not None and self.max_page_size < self.default_page_size:
            raise ValueError("max_page_size must be greater than or equal to default_page_size")
        return self


def transform_results(page: Iterable[T], transform: Callable[[T], U] | None = None) -> list[T] | list[U]:
    """Apply transform to each record in order; identity when no transform is given."""
    if transform is None:
        return list(page)
    return [transform(record) for record in page]


class Pagination(ABC):
    @abstractmethod
    async def create_page(
        self,
        source: "DataSource",
        base_url: str,
        params: QueryParameters,
        transform: Callable[[Any], Any] | None = None,
    ) -> PaginatedResult:
        ...


class LimitOffsetPagination(Pagination):
    def __init__(self, default_page_size: int, max_page_size: int | None = None) -> None:
        try:
            self.config = PaginationConfig(default_page_size=default_page_size, max_page_size=max_page_size)
        except ValidationError as e:
            raise ConfigurationError(
                "Invalid pagination settings",
                details={"errors": e.errors(include_url=False, include_context=False)},
            ) from e

    @classmethod
    def from_settings(cls, settings) -> "LimitOffsetPagination":
        return cls(settings.default_page_size, settings.max_page_size)

    @property
    def default_page_size(self) -> int:
        return self.config.default_page_size

    @property
    def max_page_size(self) -> int | None:
        return self.config.max_page_size

    async def create_page(
        self,
        source: "DataSource",
        base_url: str,
        params: QueryParameters,
        transform: Callable[[Any], Any] | None = None,
    ) -> PaginatedResult:
        page_request, candidates = interpret_params(params, self.default_page_size, self.max_page_size)
        predicate = build_filters(candidates, source.fields())
        count, page = await slice_page(source, predicate, page_request)
        previous, next_ = build_links(base_url, predicate, page_request, count)
        log.debug(
            "page_created",
            count=count,
            limit=page_request.limit,
            offset=page_request.offset,
            filters=[term.param for term in predicate.terms],
            returned=len(page),
        )
        return PaginatedResult(
            count=count,
            next=next_,
            previous=previous,
            results=transform_results(page, transform),
        )
