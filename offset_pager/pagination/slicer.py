"""Count matches and cut one page out of a data source."""

from typing import TYPE_CHECKING, Any

from offset_pager.pagination.filters import Conjunction
from offset_pager.pagination.schemas import PageRequest

if TYPE_CHECKING:
    from offset_pager.sources.base import DataSource


async def slice_page(
    source: "DataSource",
    predicate: Conjunction,
    page_request: PageRequest,
) -> tuple[int, list[Any]]:
    """
    Return (count, page) for the same predicate. The two reads are separate, so a
    source mutated in between may report a count that disagrees with the page.
    """
    count = await source.count(predicate)
    if page_request.offset >= count:
        return count, []
    page = await source.fetch(predicate, page_request.offset, page_request.limit)
    return count, page
