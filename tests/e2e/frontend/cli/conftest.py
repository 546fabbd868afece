"""Fixtures for end-to-end CLI logging tests."""

import logging

import pytest
from click.testing import CliRunner

# loggers the tests raise or lower with -L
OVERRIDDEN_LOGGERS = ("agentkit", "agentkit.domain", "agentkit.entrypoints")


@pytest.fixture(autouse=True)
def _reset_logger_levels():
    """Undo per-logger levels set by -L so they do not leak between tests."""
    yield
    for name in OVERRIDDEN_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET)


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()
