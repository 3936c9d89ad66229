from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PageResponse(BaseModel, Generic[T]):
    data: list[T] = Field(description="Items on the requested page")
    total: int = Field(description="Total number of matching items across all pages")
    page: int = Field(description="Zero-based page index")
    size: int = Field(description="Requested page size")
