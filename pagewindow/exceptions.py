"""
Exceptions raised by the pagination core.

Missing or malformed page/page-size input is never an error: the paginator
falls back to page 1 and the default page size instead.
"""


class PaginationError(Exception):
    """Base class for pagination failures."""

    pass


class UnsupportedSourceKind(PaginationError, TypeError):
    """Raised when paginate() cannot classify the source."""

    def __init__(self, source):
        self.source_type = type(source).__name__
        super().__init__(f"Unknown pagination source: {self.source_type}")


class InvalidConfiguration(PaginationError, ValueError):
    """Raised for a zero or negative effective page size."""

    pass
