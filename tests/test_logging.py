"""Unit tests for the querybrick logging helpers and render log records."""

from __future__ import annotations

import logging

import pytest

from querybrick import MissingTargetError, configure_logging, eq
from querybrick.utils import get_logger


@pytest.fixture()
def restore_root_logger():
    logger = logging.getLogger("querybrick")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_get_logger_is_namespaced():
    assert get_logger("statements").name == "querybrick.statements"


def test_library_installs_null_handler():
    handlers = logging.getLogger("querybrick").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_configure_logging_adds_one_stream_handler(restore_root_logger):
    configure_logging(logging.DEBUG)
    configure_logging(logging.WARNING)
    streams = [h for h in restore_root_logger.handlers if not isinstance(h, logging.NullHandler)]
    assert len(streams) == 1
    assert restore_root_logger.level == logging.WARNING


def test_render_is_logged(pg, caplog):
    caplog.set_level(logging.DEBUG, logger="querybrick")
    pg.select("id").from_("users").where(eq("id", 1)).to_sql()
    assert "Rendered SELECT for postgres with 1 parameter(s)" in caplog.text


def test_dropped_clause_is_logged(pg, caplog):
    caplog.set_level(logging.DEBUG, logger="querybrick")
    pg.delete("logs").limit(5).to_sql()
    assert "Dropping LIMIT from DELETE: not supported by postgres" in caplog.text


def test_build_failure_is_logged(pg, caplog):
    caplog.set_level(logging.DEBUG, logger="querybrick")
    with pytest.raises(MissingTargetError):
        pg.update().set("x", 1).to_sql()
    assert "Failed to render UPDATE for postgres" in caplog.text
