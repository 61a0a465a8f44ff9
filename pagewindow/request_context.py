"""
Request Context - immutable snapshot of the request a paginator reads from.

The paginator never touches a live request object. Routes build a
RequestContext (see pagewindow.dependencies.pagination) and pass it in,
which keeps the core usable outside of an HTTP handler and easy to test.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from starlette.datastructures import URL, QueryParams
from starlette.requests import HTTPConnection

from pagewindow.utils.pagination import parse_positive_int


@dataclass(frozen=True)
class RequestContext:
    """Path and query parameters of the current request."""

    path: str = ""
    query_params: QueryParams = field(default_factory=QueryParams)

    @classmethod
    def from_request(cls, request: HTTPConnection) -> "RequestContext":
        return cls(path=request.url.path, query_params=request.query_params)

    @classmethod
    def from_url(cls, url: Union[str, URL]) -> "RequestContext":
        """
        Build a context from a raw URL or request URI.

        Example:
            >>> ctx = RequestContext.from_url("/articles?Pager_1=2&q=news")
            >>> ctx.get("q")
            'news'
        """
        url = URL(str(url))
        return cls(path=url.path, query_params=QueryParams(url.query))

    @classmethod
    def coerce(
        cls, value: Union["RequestContext", HTTPConnection, str, None]
    ) -> "RequestContext":
        """Accept a context, a Starlette request, a URL string or None."""
        if value is None:
            return cls()
        if isinstance(value, RequestContext):
            return value
        if isinstance(value, HTTPConnection):
            return cls.from_request(value)
        return cls.from_url(value)

    def get(self, key: str) -> Optional[str]:
        return self.query_params.get(key)

    def get_int(self, key: str) -> Optional[int]:
        """Positive integer under key, None when missing or malformed."""
        return parse_positive_int(self.get(key))

    def url_with(self, key: str, value: Any) -> str:
        """
        Query string of this request with key set to value.

        Other parameters keep their order and repeated values; only the
        first occurrence of key is replaced and any repeats are dropped.

        Returns:
            String starting with "?", e.g. "?q=news&Pager_1=3"
        """
        items = []
        replaced = False
        for name, current in self.query_params.multi_items():
            if name != key:
                items.append((name, current))
            elif not replaced:
                items.append((key, str(value)))
                replaced = True
        if not replaced:
            items.append((key, str(value)))
        return "?" + str(QueryParams(items))
