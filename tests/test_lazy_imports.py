"""Tests for bookshelf.__init__ — lazy imports cover all public names."""

import pytest

import bookshelf


@pytest.mark.parametrize("name", bookshelf.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    assert getattr(bookshelf, name) is not None


def test_unknown_name_raises() -> None:
    with pytest.raises(AttributeError, match="no attribute 'Blueprint'"):
        bookshelf.Blueprint  # noqa: B018


def test_lazy_table_matches_all() -> None:
    assert sorted(bookshelf._LAZY_IMPORTS) == sorted(bookshelf.__all__)
