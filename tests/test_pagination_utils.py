"""Unit tests for page arithmetic."""
import pytest

from pagewindow.exceptions import InvalidConfiguration, PaginationError
from pagewindow.utils.pagination import (
    calculate_pagination,
    count_pages,
    page_offset,
    parse_positive_int,
)


class TestCountPages:
    def test_empty(self):
        assert count_pages(0, 10) == 0

    def test_monotonic_in_total(self):
        counts = [count_pages(total, 7) for total in range(100)]
        assert counts == sorted(counts)

    @pytest.mark.parametrize("page_size", [0, -5])
    def test_rejects_non_positive_page_size(self, page_size):
        with pytest.raises(InvalidConfiguration):
            count_pages(10, page_size)

    def test_invalid_configuration_is_a_value_error(self):
        with pytest.raises(ValueError):
            count_pages(10, 0)
        with pytest.raises(PaginationError):
            count_pages(10, 0)


class TestPageOffset:
    @pytest.mark.parametrize("page,expected", [(-1, 0), (0, 0), (1, 0), (2, 10), (5, 40)])
    def test_offsets(self, page, expected):
        assert page_offset(page, 10) == expected


class TestParsePositiveInt:
    @pytest.mark.parametrize(
        "raw,expected",
        [(None, None), ("", None), ("7", 7), (" 7 ", 7), ("0", None), ("-1", None), ("1e3", None)],
    )
    def test_values(self, raw, expected):
        assert parse_positive_int(raw) == expected


def test_calculate_pagination():
    assert calculate_pagination(page=2, per_page=10, total=95) == {
        "page": 2,
        "per_page": 10,
        "total": 95,
        "total_pages": 10,
        "offset": 10,
    }


def test_calculate_pagination_empty():
    assert calculate_pagination(page=1, per_page=10, total=0)["total_pages"] == 0
