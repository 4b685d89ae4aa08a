"""Tests for bookshelf.cli._resolve — import string resolution."""

import sys
import types

import pytest

from bookshelf.app import App
from bookshelf.cli._resolve import resolve_app


@pytest.fixture
def fake_module(monkeypatch: pytest.MonkeyPatch) -> types.ModuleType:
    mod = types.ModuleType("_resolve_test_mod")
    mod.app = App()  # type: ignore[attr-defined]
    mod.make_app = lambda: App()  # type: ignore[attr-defined]
    mod.not_an_app = "hello"  # type: ignore[attr-defined]

    def broken_factory() -> App:
        raise RuntimeError("no database")

    mod.broken_factory = broken_factory  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_resolve_test_mod", mod)
    return mod


class TestResolveApp:
    def test_explicit_attribute(self, fake_module: types.ModuleType) -> None:
        assert resolve_app("_resolve_test_mod:app") is fake_module.app

    def test_default_attribute_is_app(self, fake_module: types.ModuleType) -> None:
        assert resolve_app("_resolve_test_mod") is fake_module.app

    def test_factory_is_called(self, fake_module: types.ModuleType) -> None:
        assert isinstance(resolve_app("_resolve_test_mod:make_app"), App)

    def test_service_factory(self) -> None:
        app = resolve_app("bookshelf.service:create_app")
        assert app.config.port == 4000

    def test_not_an_app(self, fake_module: types.ModuleType) -> None:
        with pytest.raises(TypeError, match="not a bookshelf.App instance"):
            resolve_app("_resolve_test_mod:not_an_app")

    def test_factory_error_wrapped(self, fake_module: types.ModuleType) -> None:
        with pytest.raises(TypeError, match="no database"):
            resolve_app("_resolve_test_mod:broken_factory")

    def test_missing_attribute(self, fake_module: types.ModuleType) -> None:
        with pytest.raises(AttributeError):
            resolve_app("_resolve_test_mod:nope")

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_app("_resolve_no_such_module:app")
