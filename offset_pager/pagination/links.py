"""previous/next navigation links for a limit/offset page."""

from urllib.parse import quote, urlencode

from offset_pager.pagination.filters import Conjunction
from offset_pager.pagination.params import LIMIT_PARAM, OFFSET_PARAM
from offset_pager.pagination.schemas import PageRequest


def build_url(base_url: str, predicate: Conjunction, limit: int, offset: int | None = None) -> str:
    """
    "{base_url}/?{filters}&limit=..[&offset=..]". Filters keep request order and
    spelling; offset is left out when None.
    """
    query: list[tuple[str, str]] = [(term.param, term.render()) for term in predicate.terms]
    query.append((LIMIT_PARAM, str(limit)))
    if offset is not None:
        query.append((OFFSET_PARAM, str(offset)))
    return f"{base_url.rstrip('/')}/?{urlencode(query, quote_via=quote)}"


def previous_link(base_url: str, predicate: Conjunction, page_request: PageRequest) -> str | None:
    if page_request.offset <= 0:
        return None
    prev_offset = page_request.offset - page_request.limit
    # offset=0 is the default, so the first page link omits it
    return build_url(base_url, predicate, page_request.limit, prev_offset if prev_offset > 0 else None)


def next_link(base_url: str, predicate: Conjunction, page_request: PageRequest, count: int) -> str | None:
    next_offset = page_request.offset + page_request.limit
    if next_offset >= count:
        return None
    return build_url(base_url, predicate, page_request.limit, next_offset)


def build_links(
    base_url: str,
    predicate: Conjunction,
    page_request: PageRequest,
    count: int,
) -> tuple[str | None, str | None]:
    """Return (previous, next)."""
    return (
        previous_link(base_url, predicate, page_request),
        next_link(base_url, predicate, page_request, count),
    )
