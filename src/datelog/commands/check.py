"""datelog check — report whether a date would pass the threshold.

Prints 'emit' or 'suppress'. The exit status follows, so scripts can
branch on it: 0 when a record with this date would be written, 1 when it
would be dropped.
"""

import argparse

from datelog.categories import forces_emission, parse_category
from datelog.logger import get_logger
from datelog.output import print_error, print_warn
from datelog.record import LogRecord
from datelog.suppression import parse_log_date, should_emit


def register(subparsers, parents):
    """Register the 'check' subcommand."""
    p = subparsers.add_parser(
        "check",
        parents=parents,
        help="Test a date against the suppression threshold",
        description=(
            "Evaluate a record dated DATE in the selected category against\n"
            "the current configuration. Exit status 0 means it would be\n"
            "emitted, 1 means it would be suppressed."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("date", help="Creation date to test (yyyy-MMM-dd)")
    p.set_defaults(func=run)


def run(args):
    """Execute the check command."""
    try:
        category = parse_category(args.category)
    except ValueError as e:
        print_error(str(e))
        return 2

    values = get_logger().config.snapshot()
    if not forces_emission(category):
        if parse_log_date(args.date) is None:
            print_warn(f"Unparseable date {args.date!r}; expected yyyy-MMM-dd")
        if parse_log_date(values.suppress_before_date) is None:
            print_warn(f"Unparseable threshold "
                       f"{values.suppress_before_date!r}; nothing dated passes")

    record = LogRecord(message="", date=args.date, category=category)
    if should_emit(record, values):
        print("emit")
        return 0
    print("suppress")
    return 1
