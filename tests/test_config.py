"""Tests for bookshelf.config — AppConfig frozen dataclass."""

import dataclasses

import pytest

from bookshelf.config import AppConfig


class TestAppConfig:
    def test_defaults(self) -> None:
        cfg = AppConfig()

        assert cfg.host == "127.0.0.1"
        assert cfg.port == 4000
        assert cfg.debug is False
        assert cfg.method_not_allowed is False
        assert cfg.log_level == "info"
        assert cfg.log_format == "text"
        assert cfg.workers == 0

    def test_override(self) -> None:
        cfg = AppConfig(host="0.0.0.0", port=3000, log_format="json")

        assert cfg.host == "0.0.0.0"
        assert cfg.port == 3000
        assert cfg.log_format == "json"

    def test_frozen(self) -> None:
        cfg = AppConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.port = 9000  # type: ignore[misc]
