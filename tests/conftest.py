"""Shared test fixtures for the datelog test suite."""

import io
import os
from unittest.mock import patch

import pytest

from datelog import logger as _logger_mod
from datelog.config import ENV_MAPPING, LoggerConfig
from datelog.logger import DateLogger
from datelog.sinks import ConsoleSink, CrashReportSink, SinkDispatcher


# ---------------------------------------------------------------------------
# Isolation: no real config files, no DATELOG_* variables, fresh singleton
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _isolated_environment(tmp_path, monkeypatch):
    """Run every test in an empty working directory with a fake home."""
    for _, _, env_var in ENV_MAPPING:
        monkeypatch.delenv(env_var, raising=False)

    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)

    old_logger = _logger_mod._logger
    _logger_mod._logger = None
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield
    _logger_mod._logger = old_logger


@pytest.fixture
def tmp_config_home(tmp_path):
    """The fake home directory holding ~/.datelog/config.json."""
    return tmp_path / "home"


@pytest.fixture
def work_dir(tmp_path):
    """The working directory every test runs in."""
    return tmp_path / "work"


# ---------------------------------------------------------------------------
# Logger fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def buf():
    """A StringIO buffer standing in for the console."""
    return io.StringIO()


@pytest.fixture
def crash_lines():
    """Lines received by the crash-report backend."""
    return []


@pytest.fixture
def config():
    """Config with a 2016-Jan-01 threshold and plain output."""
    return LoggerConfig(suppress_before_date="2016-Jan-01")


@pytest.fixture
def dispatcher(buf, crash_lines):
    return SinkDispatcher(console=ConsoleSink(buf),
                          crash_report=CrashReportSink(crash_lines.append))


@pytest.fixture
def logger(config, dispatcher):
    """A DateLogger writing to buf (console) and crash_lines (crash report)."""
    return DateLogger(config=config, dispatcher=dispatcher)
