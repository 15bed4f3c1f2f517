from fastapi import APIRouter, Depends, Request

from offset_pager.deps import get_paginator, get_people_source
from offset_pager.models.person import PersonOut
from offset_pager.pagination.engine import LimitOffsetPagination
from offset_pager.pagination.query import QueryParams
from offset_pager.pagination.schemas import PaginatedResult
from offset_pager.sources.base import DataSource

router = APIRouter()


@router.get("", response_model=PaginatedResult[PersonOut])
@router.get("/", response_model=PaginatedResult[PersonOut], include_in_schema=False)
async def people_list(
    request: Request,
    paginator: LimitOffsetPagination = Depends(get_paginator),
    source: DataSource = Depends(get_people_source),
):
    """List people, filtered by any field given in the query (e.g. ?robot=true&limit=5)."""
    base_url = str(request.url.replace(query=""))
    params = QueryParams(request.query_params.multi_items())
    return await paginator.create_page(source, base_url, params, transform=PersonOut.from_record)
