"""Logging configuration tests."""

import logging

import pytest
import structlog

from flutterexpo.core import LogContext, configure_logging
from flutterexpo.core.logging_config import SERVICE_NAME, add_service


@pytest.fixture(autouse=True)
def clean_contextvars():
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


@pytest.mark.unit
def test_add_service():
    processor = add_service("bridge-a")
    assert processor(None, "info", {"event": "x"}) == {"event": "x", "service": "bridge-a"}
    # Explicit values win
    assert processor(None, "info", {"service": "other"})["service"] == "other"


@pytest.mark.unit
def test_log_context_binds_and_unbinds():
    with LogContext(session_id="sess_1", message_type="PING"):
        assert structlog.contextvars.get_contextvars() == {
            "session_id": "sess_1",
            "message_type": "PING",
        }
    assert structlog.contextvars.get_contextvars() == {}


@pytest.mark.unit
def test_log_context_nesting_restores_outer_values():
    with LogContext(session_id="outer"):
        with LogContext(session_id="inner", message_type="UI_UPDATE"):
            assert structlog.contextvars.get_contextvars()["session_id"] == "inner"
        assert structlog.contextvars.get_contextvars() == {"session_id": "outer"}


@pytest.mark.unit
@pytest.mark.parametrize("json_logs", [False, True])
def test_configure_logging_replaces_root_handler(json_logs):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging("DEBUG", json_logs)
        configure_logging("WARNING", json_logs, service=SERVICE_NAME)

        assert len(root.handlers) == 1
        assert root.level == logging.WARNING
        assert logging.getLogger("uvicorn.access").level == logging.WARNING
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)
