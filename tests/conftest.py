"""Pytest configuration and fixtures."""

import logging
import textwrap
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Detach handlers from playcheck loggers after each test so names can be reused."""
    yield

    names = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("playcheck")
    ]

    for name in names:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


@pytest.fixture()
def write_file(tmp_path):
    """Write dedented content to a file under tmp_path and return its path."""

    def _write(relpath: str, content: str) -> Path:
        p = tmp_path / relpath
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(textwrap.dedent(content))
        return p

    return _write
