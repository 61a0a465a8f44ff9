"""
Paginator - page windows over lists, queries and query sets.

A Paginator is created per list view and per request. It reads the page and
page size from the request context (each instance under its own query-string
key, so several paginators can live on one page), slices the source exactly
once in paginate() and then answers navigation questions for templates.

Usage:
    >>> pager = Paginator(db.query(Article), RequestContext.from_request(request))
    >>> articles = pager.paginate()
    >>> pager.has_next_page, pager.get_url(pager.current_page + 1)
"""

import itertools
from threading import Lock
from typing import Any, Iterable, List, Optional, Union
import logging

from starlette.requests import HTTPConnection

from pagewindow.config import settings
from pagewindow.exceptions import InvalidConfiguration, UnsupportedSourceKind
from pagewindow.request_context import RequestContext
from pagewindow.sources import PageSource, classify_source
from pagewindow.utils.pagination import (
    PaginationInfo,
    calculate_pagination,
    count_pages,
    ensure_page_size,
)

logger = logging.getLogger(__name__)

_identity_lock = Lock()
_identity_counter = itertools.count(1)


def next_identity() -> int:
    """Process-wide unique paginator id; never reused."""
    with _identity_lock:
        return next(_identity_counter)


class Paginator:
    """
    Pagination state for one source on one request.

    Args:
        source: List, SQLAlchemy Query, query set, relation manager or PageSource
        request: RequestContext, Starlette request or URL the page is served from
        page: Explicit page, skips query-string resolution
        page_size: Explicit page size, skips query-string resolution
        page_size_options: Selectable page sizes shown to the user
        default_page_size: Used when no valid page size is supplied
        max_page_size: Upper bound for page sizes read from the query string
        key: Explicit query-string key instead of the derived name
        identity: Explicit unique id instead of the process-wide counter

    Raises:
        InvalidConfiguration: If default_page_size or max_page_size is not positive
    """

    def __init__(
        self,
        source: Any,
        request: Union[RequestContext, HTTPConnection, str, None] = None,
        *,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        page_size_options: Optional[Iterable[int]] = None,
        default_page_size: Optional[int] = None,
        max_page_size: Optional[int] = None,
        key: Optional[str] = None,
        identity: Optional[int] = None,
    ):
        self.source = source
        self.request = RequestContext.coerce(request)
        self.page_size_options: List[int] = list(
            page_size_options
            if page_size_options is not None
            else settings.PAGE_SIZE_OPTIONS
        )
        if default_page_size is None:
            default_page_size = settings.DEFAULT_PAGE_SIZE
        if default_page_size <= 0:
            raise InvalidConfiguration(
                f"Default page size must be positive, got {default_page_size}"
            )
        self.default_page_size = default_page_size
        self.max_page_size = (
            max_page_size if max_page_size is not None else settings.MAX_PAGE_SIZE
        )
        if self.max_page_size is not None and self.max_page_size <= 0:
            raise InvalidConfiguration(
                f"Max page size must be positive, got {self.max_page_size}"
            )
        self.key = key

        self.data: Optional[List[Any]] = None
        self.total: Optional[int] = None

        self._page = page
        self._page_size = page_size

        self.identity = identity if identity is not None else next_identity()
        self.page_source: Optional[PageSource] = classify_source(source)
        logger.debug(
            "Paginator %s classified %s as %s",
            self.identity,
            type(source).__name__,
            self.page_source.kind if self.page_source else "unsupported",
        )

    def __repr__(self):
        return f"<Paginator {self.name} page={self._page} size={self._page_size}>"

    # Query-string keys

    @property
    def name(self) -> str:
        """Query-string key holding this paginator's page number."""
        if self.key:
            return self.key
        base = None
        if self.page_source is not None:
            base = self.page_source.model_name
        return f"{base or settings.DEFAULT_NAME}_{self.identity}"

    @property
    def page_size_key(self) -> str:
        return self.name + settings.PAGE_SIZE_KEY_SUFFIX

    # Page size and page resolution

    @property
    def page_size(self) -> int:
        """
        Effective page size, resolved once.

        Order: explicit page_size, then the query string (capped by
        max_page_size), then default_page_size.
        """
        if self._page_size is None:
            requested = self.request.get_int(self.page_size_key)
            if requested is None:
                self._page_size = self.default_page_size
            elif self.max_page_size is not None:
                self._page_size = min(requested, self.max_page_size)
            else:
                self._page_size = requested
        return ensure_page_size(self._page_size)

    @property
    def page(self) -> int:
        return self.get_page()

    @page.setter
    def page(self, value: int):
        self.set_page(value)

    def get_page(self) -> int:
        """
        Current page, resolved once from the query string.

        Missing, malformed or non-positive input gives page 1. Input past the
        last page is clamped to the last page once the total is known.
        """
        if self._page is None:
            self._page = self._fetch_page(self.name)
        return self._page

    def set_page(self, page: int) -> int:
        self._page = page
        return page

    def _fetch_page(self, key: str) -> int:
        page = self.request.get_int(key)
        if page is None:
            return 1
        if self.total is not None and page > self.pages_count:
            return max(self.pages_count, 1)
        return page

    # Slicing

    def paginate(self) -> List[Any]:
        """
        Count the source and load the current page.

        Returns:
            Items of the current page, also stored on self.data

        Raises:
            UnsupportedSourceKind: If the source could not be classified
        """
        if self.page_source is None:
            logger.warning(
                "Paginator %s cannot paginate %s", self.name, type(self.source).__name__
            )
            raise UnsupportedSourceKind(self.source)

        total = self.page_source.count()
        self.total = total
        try:
            page_size = self.page_size
            page = self.get_page()
            data = self.page_source.fetch(page, page_size)
        except Exception:
            self.total = None
            raise

        self.data = data
        logger.debug(
            "Paginator %s loaded page %s (%s items of %s)",
            self.name,
            page,
            len(data),
            total,
        )
        return data

    # Derived readers

    def get_total(self) -> Optional[int]:
        return self.total

    @property
    def pages_count(self) -> int:
        return count_pages(self.total or 0, self.page_size)

    @property
    def current_page(self) -> int:
        return self.get_page()

    @property
    def has_next_page(self) -> bool:
        return self.get_page() < self.pages_count

    @property
    def has_prev_page(self) -> bool:
        return self.get_page() > 1

    def iter_prev_pages(self, count: Optional[int] = None) -> List[int]:
        """
        Up to count page numbers before the current one, ascending.

        Example: page 5, count 3 -> [2, 3, 4]; page 2 -> [1].
        """
        if count is None:
            count = settings.PAGE_WINDOW
        current = self.get_page()
        return [current - i for i in range(count, 0, -1) if current - i > 0]

    def iter_next_pages(self, count: Optional[int] = None) -> List[int]:
        """Up to count page numbers after the current one, not past the last page."""
        if count is None:
            count = settings.PAGE_WINDOW
        current = self.get_page()
        last = self.pages_count
        return [current + i for i in range(1, count + 1) if current + i <= last]

    # Links

    def get_url(self, page: int) -> str:
        return self.request.url_with(self.name, page)

    def url_page_size(self, page_size: int) -> str:
        return self.request.url_with(self.page_size_key, page_size)

    def info(self) -> PaginationInfo:
        """Pagination metadata for templates (see calculate_pagination)."""
        return calculate_pagination(self.get_page(), self.page_size, self.total or 0)
