"""Tests for datelog._version and the version setup.py picks up."""

import re
from pathlib import Path

from datelog import __app_name__, __version__
from datelog._version import VERSION

SETUP_PY = Path(__file__).resolve().parents[1] / "setup.py"


def test_version_is_pep440_release():
    """setuptools needs a plain N.N.N release string."""
    assert re.match(r"^\d+\.\d+\.\d+$", __version__), \
        f"Unexpected version format: {__version__}"


def test_module_level_constants():
    assert VERSION == __version__
    assert __app_name__ == "datelog"


def test_setup_reads_version_file():
    """setup.py takes the version from _version.py instead of hard-coding it."""
    text = SETUP_PY.read_text(encoding="utf-8")
    assert "_version.py" in text
    assert not re.search(r'version="\d', text)
