"""Pagination request/response models."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PageRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    limit: int = Field(gt=0)
    offset: int = Field(default=0, ge=0)


class PaginatedResult(BaseModel, Generic[T]):
    count: int = Field(ge=0)
    next: str | None = None
    previous: str | None = None
    results: list[T]
