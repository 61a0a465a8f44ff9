"""
FastAPI dependencies for building paginators inside route handlers.

Example:
    >>> @router.get("/articles")
    ... def list_articles(
    ...     make_paginator: PaginatorFactory = Depends(get_paginator_factory),
    ...     db: Session = Depends(get_db),
    ... ):
    ...     pager = make_paginator(db.query(Article).order_by(Article.id))
    ...     return PageResponse.from_paginator(pager, ArticleResponse)
"""

from functools import partial
from typing import Callable

from fastapi import Depends, Request

from pagewindow.paginator import Paginator
from pagewindow.request_context import RequestContext

PaginatorFactory = Callable[..., Paginator]


def get_request_context(request: Request) -> RequestContext:
    """Snapshot of the current request's path and query parameters."""
    return RequestContext.from_request(request)


def get_paginator_factory(
    context: RequestContext = Depends(get_request_context),
) -> PaginatorFactory:
    """
    Paginator constructor bound to the current request.

    The returned callable takes the same arguments as Paginator minus
    request, so a route can build one paginator per listing it renders.
    """
    return partial(Paginator, request=context)
