"""Output helpers for the datelog command line.

Consistent message formatting across commands. Results go to stdout,
problems to stderr; logged lines themselves go through the sinks.
"""

import sys


def print_ok(msg):
    """Print a success message."""
    print(f"  [OK] {msg}")


def print_warn(msg):
    """Print a warning message to stderr."""
    print(f"  [WARN] {msg}", file=sys.stderr)


def print_error(msg):
    """Print an error message to stderr."""
    print(f"  ERROR: {msg}", file=sys.stderr)
