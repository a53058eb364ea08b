"""Tests for datelog.logger — the DateLogger facade and module entry points.

Covers the full pipeline (suppression, formatting, dispatch), call-site
capture, the inert verbose family, and the module-level singleton.
"""

import inspect
import threading

import pytest

import datelog
from datelog.categories import Category, tag_for
from datelog.logger import (
    VERBOSE_LOGGING_IMPLEMENTED,
    DateLogger,
    get_logger,
    init_logger,
)
from datelog.sinks import ConsoleSink, CrashReportSink


CATEGORY_METHODS = {
    Category.DEFAULT: "default",
    Category.CRITICAL: "critical",
    Category.IMPORTANT: "important",
    Category.HIGHLIGHTED: "highlighted",
    Category.REVIEWED: "reviewed",
    Category.VALUABLE: "valuable",
    Category.TO_BE_REVIEWED: "to_be_reviewed",
    Category.NOT_IMPORTANT: "not_important",
}

MODULE_FUNCTIONS = {
    Category.DEFAULT: "dlog",
    Category.CRITICAL: "dlog_red",
    Category.IMPORTANT: "dlog_orange",
    Category.HIGHLIGHTED: "dlog_yellow",
    Category.REVIEWED: "dlog_green",
    Category.VALUABLE: "dlog_blue",
    Category.TO_BE_REVIEWED: "dlog_purple",
    Category.NOT_IMPORTANT: "dlog_gray",
}

VERBOSE_FUNCTIONS = [
    "vlog", "vlog_red", "vlog_orange", "vlog_yellow",
    "vlog_green", "vlog_blue", "vlog_purple", "vlog_gray",
]


def _emit(logger, category, message="data 42", date="2016-Jul-28"):
    getattr(logger, CATEGORY_METHODS[category])(
        message, date, filename="/a/b/Widget.ext", function="load", line=42)


# =============================================================================
# Pipeline
# =============================================================================

class TestPipeline:
    """record -> should_emit -> format_line -> dispatch."""

    def test_example_scenario(self, logger, buf):
        """Default, 2016-Jul-28 vs 2016-Jan-01: one formatted line."""
        _emit(logger, Category.DEFAULT)
        line = buf.getvalue()
        assert line.count("\n") == 1
        assert tag_for(Category.DEFAULT).symbol in line
        assert "[Widget.ext:42]" in line
        assert "load" in line
        assert "data 42" in line

    @pytest.mark.parametrize("category", list(Category))
    def test_each_method_uses_its_category(self, logger, buf, category):
        _emit(logger, category)
        assert tag_for(category).symbol in buf.getvalue()

    def test_critical_before_threshold(self, logger, buf):
        _emit(logger, Category.CRITICAL, date="1999-Jan-01")
        assert "data 42" in buf.getvalue()

    def test_suppressed_on_threshold(self, logger, buf):
        _emit(logger, Category.IMPORTANT, date="2016-Jan-01")
        assert buf.getvalue() == ""

    @pytest.mark.parametrize("category", list(Category))
    def test_disabled(self, logger, config, buf, crash_lines, category):
        """enabled=False: no output on either sink, Critical included."""
        config.enabled = False
        _emit(logger, category)
        assert buf.getvalue() == ""
        assert crash_lines == []

    @pytest.mark.parametrize("category", list(Category))
    def test_absent_message(self, logger, buf, category):
        _emit(logger, category, message=None)
        assert buf.getvalue() == ""

    def test_absent_date(self, logger, buf):
        logger.default("no date")
        assert buf.getvalue() == ""

    def test_toggle_sink_between_calls(self, logger, config, buf, crash_lines):
        """Each call lands in exactly one sink."""
        _emit(logger, Category.DEFAULT, message="to console")
        config.use_crash_report_sink = True
        _emit(logger, Category.DEFAULT, message="to crash report")
        assert "to console" in buf.getvalue()
        assert "to crash report" not in buf.getvalue()
        assert len(crash_lines) == 1
        assert "to crash report" in crash_lines[0]

    def test_color_mode(self, logger, config, buf):
        config.use_color = True
        _emit(logger, Category.CRITICAL)
        assert buf.getvalue().startswith("\x1b[48;2;220;100;100m")

    def test_sink_failure_never_raises(self, config):
        def broken(line):
            raise OSError("crash reporter offline")

        logger = init_logger(config=config,
                             crash_report=CrashReportSink(broken))
        config.use_crash_report_sink = True
        logger.critical("boom", "2016-Jul-28")

    def test_unformattable_message_dropped(self, logger, buf, crash_lines):
        """A message whose __format__ raises is dropped, not propagated."""
        class Unformattable:
            def __format__(self, spec):
                raise RuntimeError("cannot format")

            def __str__(self):
                raise RuntimeError("cannot format")

        logger.default(Unformattable(), "2016-Jul-28", filename="f",
                       function="g", line=1)
        logger.critical(Unformattable(), "2016-Jul-28")
        assert buf.getvalue() == ""
        assert crash_lines == []

    def test_unknown_category_dropped(self, logger, buf):
        logger.log("not-a-category", "msg", "2016-Jul-28",
                   filename="f", function="g", line=1)
        assert buf.getvalue() == ""

    def test_logging_continues_after_dropped_record(self, logger, buf):
        class Unformattable:
            def __format__(self, spec):
                raise ValueError("nope")

        logger.default(Unformattable(), "2016-Jul-28")
        logger.default("next", "2016-Jul-28")
        assert "next" in buf.getvalue()

    def test_log_with_explicit_category(self, logger, buf):
        logger.log(Category.VALUABLE, "via log", "2016-Jul-28",
                   filename="x.py", function="f", line=1)
        assert "[x.py:1] f - via log" in buf.getvalue()


# =============================================================================
# Call-site capture
# =============================================================================

class TestCallSite:
    """Caller context is taken from the stack when not given."""

    def test_method_captures_caller(self, logger, buf):
        expected_line = inspect.currentframe().f_lineno + 1
        logger.default("here", "2016-Jul-28")
        line = buf.getvalue()
        assert f"[test_logger.py:{expected_line}]" in line
        assert "test_method_captures_caller" in line

    def test_log_captures_caller(self, logger, buf):
        expected_line = inspect.currentframe().f_lineno + 1
        logger.log(Category.REVIEWED, "here", "2016-Jul-28")
        assert f"[test_logger.py:{expected_line}]" in buf.getvalue()

    def test_module_function_captures_caller(self, config, buf):
        init_logger(config=config, console=ConsoleSink(buf))
        expected_line = inspect.currentframe().f_lineno + 1
        datelog.dlog_green("here", "2016-Jul-28")
        line = buf.getvalue()
        assert f"[test_logger.py:{expected_line}]" in line
        assert "test_module_function_captures_caller" in line

    def test_stacklevel_skips_wrappers(self, logger, buf):
        """A helper can attribute the line to its own caller."""
        def helper(msg):
            logger.valuable(msg, "2016-Jul-28", stacklevel=2)

        expected_line = inspect.currentframe().f_lineno + 1
        helper("wrapped")
        assert f"[test_logger.py:{expected_line}]" in buf.getvalue()

    def test_explicit_values_win(self, logger, buf):
        logger.default("here", "2016-Jul-28", filename="/x/Other.swift",
                       function="viewDidLoad()", line=7)
        assert "[Other.swift:7] viewDidLoad() - here" in buf.getvalue()

    def test_partial_explicit_values(self, logger, buf):
        logger.default("here", "2016-Jul-28", function="custom")
        line = buf.getvalue()
        assert "test_logger.py" in line
        assert "custom - here" in line


# =============================================================================
# Verbose family
# =============================================================================

class TestVerboseFamily:
    """The vlog* entry points exist and never emit."""

    def test_flag_marks_unimplemented(self):
        assert VERBOSE_LOGGING_IMPLEMENTED is False

    @pytest.mark.parametrize("name", VERBOSE_FUNCTIONS)
    def test_module_functions_are_noops(self, name, config, buf, crash_lines):
        init_logger(config=config, console=ConsoleSink(buf),
                    crash_report=CrashReportSink(crash_lines.append))
        assert getattr(datelog, name)("data", "2016-Jul-28") is None
        assert buf.getvalue() == ""
        assert crash_lines == []

    @pytest.mark.parametrize("category", list(Category))
    def test_method_is_noop(self, logger, buf, category):
        logger.verbose(category, "data", "2016-Jul-28")
        assert buf.getvalue() == ""


# =============================================================================
# Module-level singleton
# =============================================================================

class TestSingleton:
    """init_logger / get_logger."""

    def test_get_logger_creates_default(self):
        logger = get_logger()
        assert isinstance(logger, DateLogger)
        assert get_logger() is logger

    def test_init_logger_replaces(self, config):
        first = get_logger()
        second = init_logger(config=config)
        assert second is not first
        assert get_logger() is second
        assert get_logger().config is config

    def test_default_writes_to_stderr(self, capsys):
        datelog.dlog("to stderr", "2016-Jul-28")
        assert "to stderr" in capsys.readouterr().err

    @pytest.mark.parametrize("category", list(Category))
    def test_module_functions_map_to_categories(self, category, config, buf):
        init_logger(config=config, console=ConsoleSink(buf))
        getattr(datelog, MODULE_FUNCTIONS[category])("m", "2016-Jul-28")
        assert tag_for(category).symbol in buf.getvalue()

    def test_reconfigure_through_singleton(self, buf):
        init_logger(console=ConsoleSink(buf))
        get_logger().config.suppress_before_date = "2016-Jul-28"
        datelog.dlog("same day", "2016-Jul-28")
        datelog.dlog("next day", "2016-Jul-29")
        assert "same day" not in buf.getvalue()
        assert "next day" in buf.getvalue()


# =============================================================================
# Concurrency
# =============================================================================

class TestConcurrentReconfiguration:
    """Reconfiguring from another thread never splits or drops a line."""

    def test_every_line_lands_in_one_sink(self, logger, config, buf,
                                          crash_lines):
        stop = threading.Event()

        def toggler():
            while not stop.is_set():
                config.use_crash_report_sink = not config.use_crash_report_sink

        thread = threading.Thread(target=toggler)
        thread.start()
        try:
            for i in range(500):
                _emit(logger, Category.DEFAULT, message=f"msg {i}")
        finally:
            stop.set()
            thread.join()

        console_lines = buf.getvalue().splitlines()
        assert len(console_lines) + len(crash_lines) == 500
