"""datelog — tagged, date-gated debug logging.

Call sites tag each message with a category and the date it was written.
Messages dated on or before the suppression threshold are dropped, except
CRITICAL ones. Emitted lines go to the console or to a crash reporter.

Public API:
    dlog, dlog_red, ... dlog_gray  — module-level entry points
    vlog, vlog_red, ... vlog_gray  — reserved verbose family (no-ops)
    DateLogger                     — per-category facade
    init_logger / get_logger       — singleton management
    LoggerConfig / load_config     — configuration
    Category / tag_for             — category registry
    ConsoleSink, CrashReportSink, NullSink, SinkDispatcher — backends
"""

from datelog._version import __version__, __app_name__
from datelog.categories import (
    Category, CategoryTag, CATEGORY_TAGS, tag_for, forces_emission,
    parse_category,
)
from datelog.config import LoggerConfig, ConfigValues, load_config
from datelog.formatter import format_line
from datelog.logger import (
    DateLogger, init_logger, get_logger, VERBOSE_LOGGING_IMPLEMENTED,
    dlog, dlog_red, dlog_orange, dlog_yellow, dlog_green, dlog_blue,
    dlog_purple, dlog_gray,
    vlog, vlog_red, vlog_orange, vlog_yellow, vlog_green, vlog_blue,
    vlog_purple, vlog_gray,
)
from datelog.record import LogRecord
from datelog.sinks import (
    Sink, ConsoleSink, CrashReportSink, NullSink, SinkDispatcher,
)
from datelog.suppression import should_emit, parse_log_date

__all__ = [
    "__version__", "__app_name__",
    "Category", "CategoryTag", "CATEGORY_TAGS", "tag_for", "forces_emission",
    "parse_category",
    "LoggerConfig", "ConfigValues", "load_config",
    "format_line",
    "DateLogger", "init_logger", "get_logger", "VERBOSE_LOGGING_IMPLEMENTED",
    "dlog", "dlog_red", "dlog_orange", "dlog_yellow", "dlog_green",
    "dlog_blue", "dlog_purple", "dlog_gray",
    "vlog", "vlog_red", "vlog_orange", "vlog_yellow", "vlog_green",
    "vlog_blue", "vlog_purple", "vlog_gray",
    "LogRecord",
    "Sink", "ConsoleSink", "CrashReportSink", "NullSink", "SinkDispatcher",
    "should_emit", "parse_log_date",
]
