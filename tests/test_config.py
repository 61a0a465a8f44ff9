"""Unit tests for library settings."""
import pytest
from pydantic import ValidationError

from pagewindow.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("PAGEWINDOW_DEFAULT_PAGE_SIZE", raising=False)
    settings = Settings(_env_file=None)

    assert settings.DEFAULT_PAGE_SIZE == 10
    assert settings.PAGE_SIZE_OPTIONS == [10, 20, 50, 100]
    assert settings.MAX_PAGE_SIZE is None
    assert settings.PAGE_WINDOW == 3
    assert settings.DEFAULT_NAME == "Pager"
    assert settings.PAGE_SIZE_KEY_SUFFIX == "_PageSize"


def test_env_override(monkeypatch):
    monkeypatch.setenv("PAGEWINDOW_DEFAULT_PAGE_SIZE", "25")
    monkeypatch.setenv("PAGEWINDOW_MAX_PAGE_SIZE", "200")

    settings = Settings(_env_file=None)

    assert settings.DEFAULT_PAGE_SIZE == 25
    assert settings.MAX_PAGE_SIZE == 200


def test_rejects_non_positive_default(monkeypatch):
    monkeypatch.setenv("PAGEWINDOW_DEFAULT_PAGE_SIZE", "0")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
