"""
Page arithmetic shared by the paginator and its adapters.

These are pure functions with no knowledge of sources or requests, so the
paginator, the response schema and templates all agree on the same numbers.
"""

from typing import Optional, TypedDict

from pagewindow.exceptions import InvalidConfiguration


class PaginationInfo(TypedDict):
    """
    Pagination metadata handed to templates.

    Attributes:
        page: Current page number (1-indexed)
        per_page: Number of items per page
        total: Total number of items across all pages
        total_pages: Total number of pages
        offset: Offset of the first item on the page (0-indexed)
    """

    page: int
    per_page: int
    total: int
    total_pages: int
    offset: int


def ensure_page_size(page_size: int) -> int:
    """
    Validate an effective page size.

    Raises:
        InvalidConfiguration: If page_size is zero or negative
    """
    if page_size <= 0:
        raise InvalidConfiguration(f"Page size must be positive, got {page_size}")
    return page_size


def count_pages(total: int, page_size: int) -> int:
    """
    Number of pages needed for total items.

    Ceiling division in integers: an empty source has 0 pages.

    Example:
        >>> count_pages(25, 10)
        3
        >>> count_pages(0, 10)
        0
    """
    ensure_page_size(page_size)
    return (total + page_size - 1) // page_size


def page_offset(page: int, page_size: int) -> int:
    """Offset of the first item of page; pages below 1 start at 0."""
    return page_size * max(page - 1, 0)


def parse_positive_int(value: Optional[str]) -> Optional[int]:
    """
    Parse a raw query-string value into a positive integer.

    Returns:
        The integer, or None when the value is missing, malformed or <= 0
    """
    if value is None:
        return None
    try:
        number = int(value.strip())
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


def calculate_pagination(page: int, per_page: int, total: int) -> PaginationInfo:
    """
    Calculate pagination metadata from total count.

    Args:
        page: Current page number (1-indexed)
        per_page: Items per page (must be >= 1)
        total: Total number of items (must be >= 0)

    Returns:
        PaginationInfo dict with calculated metadata

    Example:
        >>> pagination = calculate_pagination(page=2, per_page=10, total=95)
        >>> pagination["total_pages"]
        10
        >>> pagination["offset"]
        10
    """
    return {
        "page": page,
        "per_page": per_page,
        "total": total,
        "total_pages": count_pages(total, per_page),
        "offset": page_offset(page, per_page),
    }
