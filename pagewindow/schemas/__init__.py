from pagewindow.schemas.pagination import PageResponse

__all__ = ["PageResponse"]
