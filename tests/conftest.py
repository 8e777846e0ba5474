from __future__ import annotations

import logging

import pytest

from lstheme.constants import LOGGER_NAME


@pytest.fixture
def lstheme_caplog(caplog):
    """caplog wired to the lstheme logger, which does not propagate to root."""
    log = logging.getLogger(LOGGER_NAME)
    log.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    try:
        yield caplog
    finally:
        log.removeHandler(caplog.handler)
