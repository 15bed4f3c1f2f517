"""Split request parameters into a page request and filter candidates."""

from offset_pager.pagination.fields import CoercionError, coerce_integer
from offset_pager.pagination.query import QueryParameters
from offset_pager.pagination.schemas import PageRequest

LIMIT_PARAM = "limit"
OFFSET_PARAM = "offset"

FilterCandidate = tuple[str, str]


def _parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return coerce_integer(value)
    except CoercionError:
        return None


def resolve_limit(value: str | None, default_page_size: int, max_page_size: int | None = None) -> int:
    """Requested limit, or the default when missing/non-positive; clamped to max_page_size if set."""
    limit = _parse_int(value)
    if limit is None or limit <= 0:
        limit = default_page_size
    if max_page_size is not None:
        limit = min(limit, max_page_size)
    return limit


def resolve_offset(value: str | None) -> int:
    offset = _parse_int(value)
    if offset is None or offset < 0:
        return 0
    return offset


def interpret_params(
    params: QueryParameters,
    default_page_size: int,
    max_page_size: int | None = None,
) -> tuple[PageRequest, list[FilterCandidate]]:
    """
    Read limit/offset and collect every other key as a filter candidate.
    Reserved keys match exactly ("Limit" is a filter candidate). Never raises.
    """
    raw_limit: str | None = None
    raw_offset: str | None = None
    candidates: list[FilterCandidate] = []
    for key in params.keys():
        value = params.get(key)
        if key == LIMIT_PARAM:
            raw_limit = value
        elif key == OFFSET_PARAM:
            raw_offset = value
        elif value is not None:
            candidates.append((key, value))
    page_request = PageRequest(
        limit=resolve_limit(raw_limit, default_page_size, max_page_size),
        offset=resolve_offset(raw_offset),
    )
    return page_request, candidates
