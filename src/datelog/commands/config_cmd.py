"""datelog config — show or persist configuration.

Without --set, prints the resolved values (files, environment and global
flags applied). With --set, writes values to .datelog.json in the current
directory, or to ~/.datelog/config.json with --global::

    datelog config --set suppress_before_date=2016-Jul-01 --set use_color=true
"""

import argparse
import os
from pathlib import Path

from datelog.config import (
    BOOL_FIELDS, FIELD_NAMES, PROJECT_CONFIG_NAME, load_global_config,
    load_json, parse_bool, save_global_config, save_project_config,
)
from datelog.logger import get_logger
from datelog.output import print_error, print_ok
from datelog.suppression import parse_log_date


def register(subparsers, parents):
    """Register the 'config' subcommand."""
    p = subparsers.add_parser(
        "config",
        help="Show resolved configuration or save new values",
        description=(
            "Print the configuration datelog would use, or save values with\n"
            "--set KEY=VALUE. Keys: " + ", ".join(FIELD_NAMES)
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--set", dest="assignments", action="append",
                   metavar="KEY=VALUE", default=[],
                   help="Value to save (repeatable)")
    p.add_argument("--global", dest="global_scope", action="store_true",
                   default=False,
                   help="Save to ~/.datelog/config.json instead of ./.datelog.json")
    p.set_defaults(func=run)


def _parse_assignment(text):
    """Parse KEY=VALUE into a (field, value) pair.

    Raises:
        ValueError: for unknown keys or invalid values
    """
    key, sep, raw = text.partition("=")
    field = key.strip().replace("-", "_")
    if not sep:
        raise ValueError(f"Expected KEY=VALUE, got {text!r}")
    if field not in FIELD_NAMES:
        raise ValueError(f"Unknown config key: {key.strip()!r}")
    if field in BOOL_FIELDS:
        value = parse_bool(raw)
        if value is None:
            raise ValueError(f"{field} expects true/false, got {raw!r}")
        return field, value
    if field == "suppress_before_date" and parse_log_date(raw) is None:
        raise ValueError(f"suppress_before_date expects yyyy-MMM-dd, got {raw!r}")
    return field, raw


def run(args):
    """Execute the config command."""
    if not args.assignments:
        values = get_logger().config.snapshot()
        for field in FIELD_NAMES:
            print(f"{field} = {getattr(values, field)!r}")
        return 0

    try:
        updates = dict(_parse_assignment(a) for a in args.assignments)
    except ValueError as e:
        print_error(str(e))
        return 2

    if args.global_scope:
        data = load_global_config()
        data.update(updates)
        path = save_global_config(data)
    else:
        data = load_json(Path(os.getcwd()) / PROJECT_CONFIG_NAME)
        data.update(updates)
        path = save_project_config(data)
    print_ok(f"Saved {', '.join(sorted(updates))} to {path}")
    return 0
