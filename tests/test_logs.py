"""Tests for bookshelf.logs — event rendering, access lines, setup."""

import io
import json
import logging
import sys

import pytest

from bookshelf.logs import ACCESS_LOGGER, ROOT_LOGGER, configure_logging, event_formatter


def _record(msg: str = "hello", level: int = logging.INFO, **extra: object) -> logging.LogRecord:
    record = logging.LogRecord("bookshelf", level, __file__, 1, msg, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestEventFormatter:
    def test_text_is_logfmt(self) -> None:
        line = event_formatter("text").format(_record("getBook handler called", id="42"))

        assert line.startswith("time=")
        assert " level=info " in line
        assert 'msg="getBook handler called"' in line
        assert line.endswith(" id=42")

    def test_json_line(self) -> None:
        line = event_formatter("json").format(_record("starting server", addr="127.0.0.1:4000"))
        payload = json.loads(line)

        assert payload["level"] == "info"
        assert payload["msg"] == "starting server"
        assert payload["addr"] == "127.0.0.1:4000"
        assert "time" in payload

    def test_exception_rendered(self) -> None:
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.LogRecord(
                "bookshelf", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
            )
        payload = json.loads(event_formatter("json").format(record))
        assert "RuntimeError: boom" in payload["exception"]

    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError, match="Unknown log format"):
            event_formatter("xml")


class TestConfigureLogging:
    def test_events_are_structured(self) -> None:
        stream = io.StringIO()
        logger = configure_logging("info", "text", stream=stream)

        logger.info("healthcheck handler called")

        assert 'msg="healthcheck handler called"' in stream.getvalue()
        assert logger.name == ROOT_LOGGER
        assert logger.propagate is False

    def test_access_lines_are_plain(self) -> None:
        stream = io.StringIO()
        configure_logging("info", "json", stream=stream)

        logging.getLogger(ACCESS_LOGGER).info(
            "%s %s %d %s", "GET", "/v1/books", 200, "12.5µs", extra={"status": 200}
        )

        assert stream.getvalue() == "GET /v1/books 200 12.5µs\n"

    def test_access_lines_follow_root_level(self) -> None:
        stream = io.StringIO()
        configure_logging("warning", stream=stream)

        logging.getLogger(ACCESS_LOGGER).info("GET / 404 3µs")

        assert stream.getvalue() == ""

    def test_level_filters(self) -> None:
        stream = io.StringIO()
        logger = configure_logging("warning", stream=stream)

        logger.info("hidden")
        logger.warning("shown")

        output = stream.getvalue()
        assert "hidden" not in output
        assert "shown" in output

    def test_repeat_call_replaces_handlers(self) -> None:
        configure_logging(stream=io.StringIO())
        logger = configure_logging(stream=io.StringIO())

        assert len(logger.handlers) == 1
        assert len(logging.getLogger(ACCESS_LOGGER).handlers) == 1

    def test_level_is_case_insensitive(self) -> None:
        logger = configure_logging("DEBUG", stream=io.StringIO())
        assert logger.level == logging.DEBUG

    def test_unknown_level(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("verbose")
