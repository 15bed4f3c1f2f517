from offset_pager.pagination.engine import LimitOffsetPagination, Pagination, PaginationConfig, transform_results
from offset_pager.pagination.fields import FieldKind, FieldSpec, field_registry
from offset_pager.pagination.filters import BooleanEquals, Conjunction, IntegerEquals, TextEquals, build_filters
from offset_pager.pagination.links import build_links
from offset_pager.pagination.params import interpret_params
from offset_pager.pagination.query import QueryParameters, QueryParams
from offset_pager.pagination.schemas import PageRequest, PaginatedResult
from offset_pager.pagination.slicer import slice_page

__all__ = [
    "LimitOffsetPagination",
    "Pagination",
    "PaginationConfig",
    "transform_results",
    "FieldKind",
    "FieldSpec",
    "field_registry",
    "BooleanEquals",
    "Conjunction",
    "IntegerEquals",
    "TextEquals",
    "build_filters",
    "build_links",
    "interpret_params",
    "QueryParameters",
    "QueryParams",
    "PageRequest",
    "PaginatedResult",
    "slice_page",
]
