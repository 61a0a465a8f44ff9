from typing import Any, List, Optional, Type

from pydantic import BaseModel

from pagewindow.paginator import Paginator
from pagewindow.utils.serialization import serialize_items


class PageResponse(BaseModel):
    """One page of a paginated listing, for JSON endpoints."""

    items: List[Any]
    total: int
    page: int
    page_size: int
    pages_count: int
    has_next: bool
    has_prev: bool
    next_url: Optional[str] = None
    prev_url: Optional[str] = None

    @classmethod
    def from_paginator(
        cls, paginator: Paginator, item_schema: Optional[Type[BaseModel]] = None
    ) -> "PageResponse":
        """
        Build the response from a paginator, paginating it first if needed.

        Args:
            paginator: Paginator for the current request
            item_schema: Optional schema used to serialize ORM items

        Raises:
            UnsupportedSourceKind: If the paginator's source is unsupported
        """
        if paginator.data is None:
            paginator.paginate()

        page = paginator.current_page
        return cls(
            items=serialize_items(paginator.data, item_schema),
            total=paginator.total,
            page=page,
            page_size=paginator.page_size,
            pages_count=paginator.pages_count,
            has_next=paginator.has_next_page,
            has_prev=paginator.has_prev_page,
            next_url=paginator.get_url(page + 1) if paginator.has_next_page else None,
            prev_url=paginator.get_url(page - 1) if paginator.has_prev_page else None,
        )
