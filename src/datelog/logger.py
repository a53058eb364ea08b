"""
DateLogger — the per-category entry points.

Each call builds a LogRecord, runs it through the suppression policy,
formats it, and hands the line to the sink dispatcher:

    record -> should_emit -> format_line -> dispatch

Call-site context (file, function, line) can be passed explicitly. When
omitted it is taken from the calling frame; stacklevel follows the
standard logging module's convention (1 = whoever called the method).

Usage::

    from datelog import dlog, dlog_red, get_logger

    dlog(f"data {data}", date="2016-Jul-28")
    dlog_red(f"error {error}", date="2016-Jul-28")

    get_logger().config.suppress_before_date = "2016-Jul-01"
"""

import dataclasses
import inspect
from typing import Optional

from datelog.categories import Category, tag_for
from datelog.config import LoggerConfig
from datelog.formatter import format_line
from datelog.record import LogRecord
from datelog.sinks import Sink, SinkDispatcher
from datelog.suppression import should_emit


# Verbose logging is reserved; every vlog* entry point is a no-op until
# its semantics are defined.
VERBOSE_LOGGING_IMPLEMENTED = False


def _call_site(stacklevel: int):
    """Return (filename, function, line) for the frame stacklevel above the caller."""
    frame = inspect.currentframe()
    try:
        for _ in range(stacklevel + 1):
            if frame.f_back is None:
                break
            frame = frame.f_back
        code = frame.f_code
        function = getattr(code, 'co_qualname', code.co_name)
        return code.co_filename, function, frame.f_lineno
    finally:
        del frame


class DateLogger:
    """Date-gated logger bound to one config and one sink dispatcher.

    The config is read on every call, so changes apply to the next call.
    """

    def __init__(self, config: LoggerConfig = None,
                 dispatcher: SinkDispatcher = None):
        self.config = config if config is not None else LoggerConfig()
        self.dispatcher = (dispatcher if dispatcher is not None
                           else SinkDispatcher())

    def log(self, category: Category, message: Optional[str],
            date: Optional[str] = None, filename: str = None,
            function: str = None, line: int = None,
            stacklevel: int = 1) -> None:
        """Emit message under category if enabled and not suppressed.

        Never raises: a record that cannot be evaluated or rendered (an
        unknown category, a message whose __format__ fails) is dropped.
        """
        values = self.config.snapshot()
        record = LogRecord(message=message, date=date, category=category)
        try:
            if not should_emit(record, values):
                return

            if filename is None or function is None or line is None:
                site = _call_site(stacklevel)
                filename = site[0] if filename is None else filename
                function = site[1] if function is None else function
                line = site[2] if line is None else line
            record = dataclasses.replace(
                record, filename=filename, function=function, line=line)

            text = format_line(record, tag_for(category), values)
        except Exception:
            return
        self.dispatcher.dispatch(text, values)

    def default(self, message, date=None, filename=None, function=None,
                line=None, stacklevel=1):
        self.log(Category.DEFAULT, message, date, filename, function, line,
                 stacklevel=stacklevel + 1)

    def critical(self, message, date=None, filename=None, function=None,
                 line=None, stacklevel=1):
        """Always logged while enabled, whatever the date."""
        self.log(Category.CRITICAL, message, date, filename, function, line,
                 stacklevel=stacklevel + 1)

    def important(self, message, date=None, filename=None, function=None,
                  line=None, stacklevel=1):
        self.log(Category.IMPORTANT, message, date, filename, function, line,
                 stacklevel=stacklevel + 1)

    def highlighted(self, message, date=None, filename=None, function=None,
                    line=None, stacklevel=1):
        self.log(Category.HIGHLIGHTED, message, date, filename, function,
                 line, stacklevel=stacklevel + 1)

    def reviewed(self, message, date=None, filename=None, function=None,
                 line=None, stacklevel=1):
        self.log(Category.REVIEWED, message, date, filename, function, line,
                 stacklevel=stacklevel + 1)

    def valuable(self, message, date=None, filename=None, function=None,
                 line=None, stacklevel=1):
        self.log(Category.VALUABLE, message, date, filename, function, line,
                 stacklevel=stacklevel + 1)

    def to_be_reviewed(self, message, date=None, filename=None,
                       function=None, line=None, stacklevel=1):
        self.log(Category.TO_BE_REVIEWED, message, date, filename, function,
                 line, stacklevel=stacklevel + 1)

    def not_important(self, message, date=None, filename=None,
                      function=None, line=None, stacklevel=1):
        self.log(Category.NOT_IMPORTANT, message, date, filename, function,
                 line, stacklevel=stacklevel + 1)

    def verbose(self, category, message, date=None, filename=None,
                function=None, line=None, stacklevel=1):
        """Reserved for verbose logging. Does nothing."""
        return None


# =============================================================================
# Module-level singleton
# =============================================================================

_logger: Optional[DateLogger] = None


def init_logger(config: LoggerConfig = None, console: Sink = None,
                crash_report: Sink = None) -> DateLogger:
    """Initialize the module-level DateLogger singleton.

    Call once at program startup, typically with load_config().

    Args:
        config: Logger configuration (default: built-in defaults)
        console: Console backend (default: stderr)
        crash_report: Crash-report backend (default: no-op)

    Returns:
        The initialized DateLogger instance
    """
    global _logger
    _logger = DateLogger(
        config=config,
        dispatcher=SinkDispatcher(console=console, crash_report=crash_report),
    )
    return _logger


def get_logger() -> DateLogger:
    """Get the module-level DateLogger, creating a default if needed."""
    global _logger
    if _logger is None:
        _logger = DateLogger()
    return _logger


# =============================================================================
# Module-level entry points, named by category color
# =============================================================================

def dlog(message, date=None, filename=None, function=None, line=None):
    get_logger().default(message, date, filename, function, line,
                         stacklevel=2)


def dlog_red(message, date=None, filename=None, function=None, line=None):
    get_logger().critical(message, date, filename, function, line,
                          stacklevel=2)


def dlog_orange(message, date=None, filename=None, function=None, line=None):
    get_logger().important(message, date, filename, function, line,
                           stacklevel=2)


def dlog_yellow(message, date=None, filename=None, function=None, line=None):
    get_logger().highlighted(message, date, filename, function, line,
                             stacklevel=2)


def dlog_green(message, date=None, filename=None, function=None, line=None):
    get_logger().reviewed(message, date, filename, function, line,
                          stacklevel=2)


def dlog_blue(message, date=None, filename=None, function=None, line=None):
    get_logger().valuable(message, date, filename, function, line,
                          stacklevel=2)


def dlog_purple(message, date=None, filename=None, function=None, line=None):
    get_logger().to_be_reviewed(message, date, filename, function, line,
                                stacklevel=2)


def dlog_gray(message, date=None, filename=None, function=None, line=None):
    get_logger().not_important(message, date, filename, function, line,
                               stacklevel=2)


# Verbose family: reserved, intentionally inert.
def vlog(message, date=None, filename=None, function=None, line=None):
    pass


def vlog_red(message, date=None, filename=None, function=None, line=None):
    pass


def vlog_orange(message, date=None, filename=None, function=None, line=None):
    pass


def vlog_yellow(message, date=None, filename=None, function=None, line=None):
    pass


def vlog_green(message, date=None, filename=None, function=None, line=None):
    pass


def vlog_blue(message, date=None, filename=None, function=None, line=None):
    pass


def vlog_purple(message, date=None, filename=None, function=None, line=None):
    pass


def vlog_gray(message, date=None, filename=None, function=None, line=None):
    pass
