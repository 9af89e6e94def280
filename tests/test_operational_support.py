from __future__ import annotations

import logging

import pytest

from infra.logging_config import setup_logging
from infra.operational_support import TraceIdLogFilter, bind_trace_id, current_trace_id


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


def test_bind_trace_id_scopes_the_context():
    assert current_trace_id() is None

    with bind_trace_id("trc-abc") as trace_id:
        assert trace_id == "trc-abc"
        assert current_trace_id() == "trc-abc"

    assert current_trace_id() is None


def test_bind_trace_id_generates_one_when_missing():
    with bind_trace_id("  ") as trace_id:
        assert trace_id.startswith("trc-")
        assert current_trace_id() == trace_id


def test_trace_filter_stamps_records():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    TraceIdLogFilter().filter(record)
    assert record.trace_id == "-"

    with bind_trace_id("trc-1"):
        TraceIdLogFilter().filter(record)
    assert record.trace_id == "trc-1"


def test_setup_logging_writes_trace_ids_to_rotating_file(tmp_path, restore_root_logger):
    log_file = setup_logging(log_dir=tmp_path / "logs")

    with bind_trace_id("trc-log-test"):
        logging.getLogger("core.state.store").warning("subscriber failed")
    for handler in logging.getLogger().handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert log_file.name == "app.log"
    assert "Logging initialized" in text
    assert "trace=trc-log-test core.state.store - subscriber failed" in text
