"""Shared pytest fixtures."""

import logging
from collections.abc import Iterator

import pytest

from bookshelf.logs import ACCESS_LOGGER, ROOT_LOGGER


@pytest.fixture(autouse=True)
def _restore_bookshelf_loggers() -> Iterator[None]:
    """Undo ``configure_logging()`` so caplog keeps seeing bookshelf records."""
    saved = []
    for name in (ROOT_LOGGER, ACCESS_LOGGER):
        logger = logging.getLogger(name)
        saved.append((logger, list(logger.handlers), logger.level, logger.propagate))
    yield
    for logger, handlers, level, propagate in saved:
        logger.handlers[:] = handlers
        logger.setLevel(level)
        logger.propagate = propagate
