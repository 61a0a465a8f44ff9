"""
Page Sources - one adapter per kind of collection the paginator can slice.

Every adapter answers the same two questions: how many items are there, and
which items belong to a given page. The paginator only talks to PageSource,
so adding a new kind of collection means adding an adapter here.

Supported kinds:
- sequence: lists, tuples and other finite Sequence objects
- query: SQLAlchemy Query, or any builder with count/limit/offset/all
- query set: objects with count() and a native paginate(page, size)
- relation: association managers exposing get_query_set()
- select: SQLAlchemy 2.0 Select statement executed through a Session
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from functools import singledispatch
from itertools import islice
from typing import Any, List, Optional
import logging

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Query, Session

from pagewindow.utils.pagination import page_offset

logger = logging.getLogger(__name__)


class PageSource(ABC):
    """Uniform view over a paginated collection."""

    kind: str = "unknown"

    @property
    def model_name(self) -> Optional[str]:
        """Element type name used to label the paginator, if known."""
        return None

    @abstractmethod
    def count(self) -> int:
        """Total number of items."""

    @abstractmethod
    def fetch(self, page: int, page_size: int) -> List[Any]:
        """Items of page (1-indexed)."""


class SequenceSource(PageSource):
    kind = "sequence"

    def __init__(self, items: Sequence):
        self.items = items

    def count(self) -> int:
        return len(self.items)

    def fetch(self, page: int, page_size: int) -> List[Any]:
        start = page_offset(page, page_size)
        try:
            return list(self.items[start : start + page_size])
        except TypeError:
            # deque and other sequences without slice support
            return list(islice(self.items, start, start + page_size))


class QuerySource(PageSource):
    """Builder with count(), limit(n), offset(n) and all()."""

    kind = "query"

    def __init__(self, query):
        self.query = query

    def count(self) -> int:
        return self.query.count()

    def fetch(self, page: int, page_size: int) -> List[Any]:
        offset = page_offset(page, page_size)
        return list(self.query.limit(page_size).offset(offset).all())


class QuerySetSource(PageSource):
    """Query set that knows how to paginate itself."""

    kind = "query_set"

    def __init__(self, query_set):
        self.query_set = query_set

    @property
    def model_name(self) -> Optional[str]:
        model = getattr(self.query_set, "model", None)
        if model is None:
            return None
        return getattr(model, "__name__", type(model).__name__)

    def count(self) -> int:
        return self.query_set.count()

    def fetch(self, page: int, page_size: int) -> List[Any]:
        return list(self.query_set.paginate(page, page_size).all())


class RelationSource(PageSource):
    """
    Association manager (has-many, many-to-many) wrapping a query set.

    The manager is unwrapped once, on first use, and the resulting query set
    is paginated like any other.
    """

    kind = "relation"

    def __init__(self, manager):
        self.manager = manager
        self._query_set: Optional[QuerySetSource] = None

    @property
    def query_set(self) -> QuerySetSource:
        if self._query_set is None:
            self._query_set = QuerySetSource(self.manager.get_query_set())
        return self._query_set

    def count(self) -> int:
        return self.query_set.count()

    def fetch(self, page: int, page_size: int) -> List[Any]:
        return self.query_set.fetch(page, page_size)


class SelectSource(PageSource):
    """
    SQLAlchemy 2.0 select() statement bound to a session.

    Entity selects return ORM objects; selects of several columns return
    Row tuples.

    Statements carry no session, so this adapter is never picked by
    classify_source(); wrap the statement explicitly:

        >>> Paginator(SelectSource(db, select(Article).order_by(Article.id)))
    """

    kind = "select"

    def __init__(self, session: Session, statement: Select):
        self.session = session
        self.statement = statement

    def count(self) -> int:
        count_stmt = select(func.count()).select_from(
            self.statement.order_by(None).subquery()
        )
        return self.session.execute(count_stmt).scalar_one()

    def fetch(self, page: int, page_size: int) -> List[Any]:
        stmt = self.statement.limit(page_size).offset(page_offset(page, page_size))
        if len(self.statement.column_descriptions) > 1:
            return list(self.session.execute(stmt).all())
        return list(self.session.scalars(stmt).all())


def _is_relation_manager(obj) -> bool:
    return callable(getattr(obj, "get_query_set", None))


def _is_query_set(obj) -> bool:
    return callable(getattr(obj, "count", None)) and callable(
        getattr(obj, "paginate", None)
    )


def _is_query(obj) -> bool:
    return all(
        callable(getattr(obj, name, None)) for name in ("count", "limit", "offset", "all")
    )


@singledispatch
def classify_source(obj) -> Optional[PageSource]:
    """
    Wrap obj in the matching PageSource adapter.

    Concrete types are dispatched by registration; anything else is matched
    by the methods it exposes, most specific first.

    Returns:
        The adapter, or None when obj is not a supported collection
    """
    if _is_relation_manager(obj):
        return RelationSource(obj)
    if _is_query_set(obj):
        return QuerySetSource(obj)
    if _is_query(obj):
        return QuerySource(obj)
    logger.debug("No page source for %s", type(obj).__name__)
    return None


@classify_source.register
def _(obj: PageSource) -> PageSource:
    return obj


@classify_source.register
def _(obj: Sequence) -> PageSource:
    return SequenceSource(obj)


@classify_source.register(str)
@classify_source.register(bytes)
def _(obj) -> None:
    return None


@classify_source.register
def _(obj: Query) -> PageSource:
    return QuerySource(obj)
