"""datelog emit — send one message through the date-gated pipeline.

The caller context that the Python API captures from the stack is given
explicitly here, so shell scripts can point at their own source::

    datelog emit "deploy finished" --date 2026-Oct-19 -c green \\
        --file deploy.sh --function main --line 88
"""

import argparse

from datelog.categories import parse_category
from datelog.logger import get_logger
from datelog.output import print_error


def register(subparsers, parents):
    """Register the 'emit' subcommand."""
    p = subparsers.add_parser(
        "emit",
        parents=parents,
        help="Log a message if its date passes the suppression threshold",
        description=(
            "Format MESSAGE with its category tag and caller context and\n"
            "write it to the console, unless it is suppressed. Records\n"
            "without --date are never written."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("message", help="Message text")
    p.add_argument("--date", "-d", metavar="DATE", default=None,
                   help="Creation date of the call site (yyyy-MMM-dd)")
    p.add_argument("--file", metavar="PATH", default="shell",
                   help="Source file shown in the line (default: shell)")
    p.add_argument("--function", metavar="NAME", default="main",
                   help="Function name shown in the line (default: main)")
    p.add_argument("--line", metavar="N", type=int, default=0,
                   help="Line number shown in the line (default: 0)")
    p.set_defaults(func=run)


def run(args):
    """Execute the emit command."""
    try:
        category = parse_category(args.category)
    except ValueError as e:
        print_error(str(e))
        return 2

    get_logger().log(category, args.message, args.date,
                     filename=args.file, function=args.function,
                     line=args.line)
    return 0
