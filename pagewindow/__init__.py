from pagewindow.exceptions import (
    InvalidConfiguration,
    PaginationError,
    UnsupportedSourceKind,
)
from pagewindow.paginator import Paginator
from pagewindow.request_context import RequestContext
from pagewindow.sources import (
    PageSource,
    QuerySetSource,
    QuerySource,
    RelationSource,
    SelectSource,
    SequenceSource,
    classify_source,
)

__all__ = [
    "Paginator",
    "RequestContext",
    "PageSource",
    "SequenceSource",
    "QuerySource",
    "QuerySetSource",
    "RelationSource",
    "SelectSource",
    "classify_source",
    "PaginationError",
    "UnsupportedSourceKind",
    "InvalidConfiguration",
]
