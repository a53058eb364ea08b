import re
from pathlib import Path

from setuptools import setup, find_packages

VERSION_FILE = Path(__file__).parent / "src" / "datelog" / "_version.py"
VERSION = re.search(r'^__version__ = "([^"]+)"',
                    VERSION_FILE.read_text(encoding="utf-8"), re.M).group(1)

setup(
    name="datelog",
    version=VERSION,
    description="Tagged, date-gated debug logging with console and crash-report sinks",
    author="Dustin",
    author_email="6962246+djdarcy@users.noreply.github.com",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={
        "test": ["pytest>=7.0", "pytest-cov"],
    },
    entry_points={
        "console_scripts": [
            "datelog=datelog.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Logging",
    ],
    python_requires=">=3.10",
)
