import math
from typing import Generic, List, TypeVar
from pydantic import BaseModel, Field

T = TypeVar("T")


class PageRequest(BaseModel):
    """Zero-based page index and page size."""

    page: int = Field(0, ge=0)
    size: int = Field(10, ge=1)

    @property
    def offset(self) -> int:
        return self.page * self.size


class Page(BaseModel, Generic[T]):
    content: List[T]
    total_elements: int
    page: int
    size: int
    total_pages: int
    number_of_elements: int
    first: bool
    last: bool
    empty: bool

    @classmethod
    def of(cls, content: List[T], page_request: PageRequest, total_elements: int) -> "Page[T]":
        total_pages = math.ceil(total_elements / page_request.size) if total_elements else 0
        return cls(
            content=content,
            total_elements=total_elements,
            page=page_request.page,
            size=page_request.size,
            total_pages=total_pages,
            number_of_elements=len(content),
            first=page_request.page == 0,
            last=page_request.page + 1 >= total_pages,
            empty=not content,
        )
