"""
Sinks and sink dispatch.

A sink is anything with append(line). Two backends are wired into a
SinkDispatcher at configuration time:

    console       ConsoleSink, writes to a text stream (default: stderr)
    crash_report  CrashReportSink around a host-supplied callable, or
                  NullSink when no crash reporter is present

config.use_crash_report_sink picks exactly one of them per line. Sink
failures never reach the caller: logging must not crash the host.
"""

import sys
from typing import Callable, Optional, TextIO


class Sink:
    """Common capability interface for log backends."""

    def append(self, line: str) -> None:
        raise NotImplementedError


class NullSink(Sink):
    """Drops every line. Default crash-report backend."""

    def append(self, line: str) -> None:
        pass


class ConsoleSink(Sink):
    """Write lines to a text stream.

    With no stream given, the current sys.stderr is looked up on every
    write so that redirection (and pytest's capsys) is honored.
    """

    def __init__(self, file: TextIO = None):
        self.file = file

    def append(self, line: str) -> None:
        stream = self.file if self.file is not None else sys.stderr
        print(line, file=stream, flush=True)


class CrashReportSink(Sink):
    """Forward lines to a crash reporter's log-append function.

    Usage::

        sink = CrashReportSink(crash_reporter.log)

    Without an append function the backend counts as unavailable and
    lines are dropped.
    """

    def __init__(self, append: Optional[Callable[[str], None]] = None):
        self._append = append

    @property
    def available(self) -> bool:
        return self._append is not None

    def append(self, line: str) -> None:
        if self._append is None:
            return
        self._append(line)


class SinkDispatcher:
    """Route each formatted line to exactly one sink."""

    def __init__(self, console: Sink = None, crash_report: Sink = None):
        self.console = console if console is not None else ConsoleSink()
        self.crash_report = (crash_report if crash_report is not None
                             else NullSink())

    def select(self, config) -> Sink:
        """Return the sink config currently routes to."""
        if config.use_crash_report_sink:
            return self.crash_report
        return self.console

    def dispatch(self, line: str, config) -> None:
        """Write line to the selected sink, swallowing any sink failure.

        Failures are not retried and not reported.
        """
        sink = self.select(config)
        try:
            sink.append(line)
        except Exception:
            pass
