"""Tests for role-tagged logging.

Critical Invariants:
- Lines read "[LEVEL] [ROLE] message (file:line)"
- Call site is the caller of the public method, not hostkit internals
- Role is fixed when the logger is built
"""

import inspect
import io
import logging

import pytest

from hostkit import CallSite, HostLogger, HostSettings, Role, RoleFormatter, configure_logging


@pytest.fixture
def capture(caplog):
    caplog.set_level(logging.DEBUG, logger="hostkit")
    return caplog


def _render(record: logging.LogRecord) -> str:
    return RoleFormatter().format(record)


def test_log_line_layout(capture):
    logger = HostLogger(HostSettings(role="client"))

    line = inspect.currentframe().f_lineno + 1
    logger.log("spawned", 3, "crates")

    (record,) = capture.records
    assert _render(record) == f"[INFO] [CLIENT] spawned 3 crates (test_logger.py:{line})"


def test_call_site_is_the_caller(capture):
    """CRITICAL: The reported location is the line calling log(), not logger.py.

    Why: A location inside hostkit would make every log line useless for debugging.
    """
    logger = HostLogger(HostSettings())

    line = inspect.currentframe().f_lineno + 1
    logger.log("here")

    record = capture.records[-1]
    assert record.filename == "test_logger.py"
    assert record.lineno == line


def test_stacklevel_reports_wrapper_caller(capture):
    logger = HostLogger(HostSettings())

    def wrapper():
        logger.log("wrapped", stacklevel=2)

    line = inspect.currentframe().f_lineno + 1
    wrapper()

    assert capture.records[-1].lineno == line


def test_explicit_site_overrides_frame(capture):
    logger = HostLogger(HostSettings())

    logger.log("elsewhere", site=CallSite("main.lua", 7))

    assert _render(capture.records[-1]).endswith("elsewhere (main.lua:7)")


def test_printf_formats_then_logs(capture):
    logger = HostLogger(HostSettings(role="server"))

    line = inspect.currentframe().f_lineno + 1
    logger.printf("player {name} joined slot {slot}", {"name": "ada", "slot": 2})

    rendered = _render(capture.records[-1])
    assert rendered == f"[INFO] [SERVER] player ada joined slot 2 (test_logger.py:{line})"


def test_role_is_fixed_at_construction(capture):
    settings = HostSettings(role="client")
    logger = HostLogger(settings)
    settings.role = Role.SERVER

    logger.log("still client")

    assert logger.role is Role.CLIENT
    assert "[CLIENT]" in _render(capture.records[-1])


def test_levels(capture):
    logger = HostLogger(HostSettings())

    logger.debug("d")
    logger.warning("w")
    logger.error("e")

    assert [r.levelname for r in capture.records] == ["DEBUG", "WARNING", "ERROR"]
    assert _render(capture.records[1]).startswith("[WARNING] [SERVER] w")


def test_error_with_exc_info_appends_traceback(capture):
    logger = HostLogger(HostSettings())

    try:
        raise RuntimeError("boom")
    except RuntimeError:
        logger.error("failed", exc_info=True)

    rendered = _render(capture.records[-1])
    assert rendered.splitlines()[0].startswith("[ERROR] [SERVER] failed (")
    assert "RuntimeError: boom" in rendered


def test_foreign_record_without_frame_degrades_to_unknown_site():
    record = logging.LogRecord("other", logging.INFO, "", 0, "plain", None, None)
    record.filename = "(unknown file)"

    assert RoleFormatter(default_role=Role.CLIENT).format(record) == "[INFO] [CLIENT] plain (?:0)"


def test_configure_logging_is_idempotent():
    settings = HostSettings(logger_name="hostkit.test_configure", log_level="debug")
    stream = io.StringIO()

    logger = configure_logging(settings, stream=stream)
    configure_logging(settings, stream=stream)

    role_handlers = [h for h in logger.handlers if isinstance(h.formatter, RoleFormatter)]
    assert len(role_handlers) == 1
    assert logger.level == logging.DEBUG

    HostLogger(settings).log("to stream")
    assert stream.getvalue().startswith("[INFO] [SERVER] to stream (test_logger.py:")


class Unprintable:
    def __str__(self):
        raise RuntimeError("broken __str__")


def test_value_with_raising_str_is_logged_with_placeholder(capture):
    """CRITICAL: Logging never fails, even when a value cannot be stringified.

    Why: A debug print must not crash the script that issued it.
    """
    logger = HostLogger(HostSettings())

    logger.log("value:", Unprintable(), "done")

    message = capture.records[-1].getMessage()
    assert message.startswith("value: <unprintable Unprintable object at 0x")
    assert message.endswith("> done")


def test_printf_with_raising_str_value_is_logged_with_placeholder(capture):
    logger = HostLogger(HostSettings())

    logger.printf("got {item}", {"item": Unprintable()})

    assert capture.records[-1].getMessage().startswith("got <unprintable Unprintable")
