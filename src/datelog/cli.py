"""Main CLI entry point for datelog.

Lets shell scripts and build steps emit date-gated lines through the same
pipeline as the Python API, and check what a threshold would suppress.

Two-pass argument parser:
  1. First pass: extract global flags (--config, --color, --suppress-before, ...)
  2. Second pass: dispatch to subcommand with shared parent args

Global flags can appear before OR after the subcommand:
  datelog --no-color emit "msg" --date 2016-Jul-28
  datelog emit "msg" --date 2016-Jul-28 --no-color

Subcommands self-register via register(subparsers, parents) convention.
"""

import argparse
import sys

from datelog._version import VERSION


# ---------------------------------------------------------------------------
# Global flags (can precede or follow the subcommand)
# ---------------------------------------------------------------------------
GLOBAL_FLAGS = {
    "--config": {"metavar": "PATH", "default": None,
                 "help": "Config file (default: .datelog.json, then ~/.datelog/config.json)"},
    "--color": {"dest": "use_color", "action": "store_const", "const": True,
                "default": None, "help": "Wrap lines in ANSI category colors"},
    "--no-color": {"dest": "use_color", "action": "store_const", "const": False,
                   "default": None, "help": "Use category glyphs instead of colors"},
    "--suppress-before": {"metavar": "DATE", "default": None,
                          "help": "Drop records dated on or before DATE (yyyy-MMM-dd)"},
    "--prefix": {"metavar": "TEXT", "default": None,
                 "help": "Source prefix at the start of each line"},
    "--disable": {"action": "store_true", "default": False,
                  "help": "Turn logging off entirely"},
}


def _extract_global_flags(argv):
    """Two-pass parse: pull global flags from anywhere in argv.

    Returns (global_namespace, remaining_argv).
    """
    global_parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False)
    for flag, kwargs in GLOBAL_FLAGS.items():
        global_parser.add_argument(flag, **kwargs)

    global_args, remaining = global_parser.parse_known_args(argv)
    return global_args, remaining


# ---------------------------------------------------------------------------
# Shared parent parser (inherited by all subcommands via parents=[])
# ---------------------------------------------------------------------------
def _build_common_parser():
    """Build the shared argument parser for category selection."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--category", "-c", metavar="NAME", default="default",
                        help="Category name or color alias (default: default)")
    return common


# ---------------------------------------------------------------------------
# Subcommand discovery and registration
# ---------------------------------------------------------------------------
def _discover_commands():
    """Import and return all command modules."""
    from datelog.commands import categories, check, config_cmd, emit
    return [emit, check, categories, config_cmd]


def _build_parser(commands, common_parser):
    """Build the main argparse parser with subcommand dispatch."""
    parser = argparse.ArgumentParser(
        prog="datelog",
        description="datelog — tagged, date-gated debug logging",
        epilog=(
            "Run 'datelog <command> --help' for details on a specific command.\n"
            "\n"
            "Global flags (--config, --color, --suppress-before, ...) can\n"
            "appear before or after the subcommand."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"datelog {VERSION}",
    )

    # Add global flags to main parser too (for --help display)
    for flag, kwargs in GLOBAL_FLAGS.items():
        parser.add_argument(flag, **kwargs)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    for cmd_module in commands:
        cmd_module.register(subparsers, parents=[common_parser])

    return parser


def _init_from_globals(global_args):
    """Resolve configuration and initialize the DateLogger singleton."""
    from datelog.config import load_config
    from datelog.logger import init_logger

    config = load_config(
        path=global_args.config,
        enabled=False if global_args.disable else None,
        suppress_before_date=global_args.suppress_before,
        use_color=global_args.use_color,
        source_prefix=global_args.prefix,
    )
    return init_logger(config=config)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None):
    """Main entry point for datelog CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success).
    """
    if argv is None:
        argv = sys.argv[1:]

    # Pass 1: extract global flags from anywhere in the arg list
    global_args, remaining = _extract_global_flags(argv)

    # Pass 2: parse subcommand + shared/specific args
    common_parser = _build_common_parser()
    commands = _discover_commands()
    parser = _build_parser(commands, common_parser)

    if not remaining:
        parser.print_help()
        return 0

    args = parser.parse_args(remaining)

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    # Merge global args into the namespace for convenience
    for key, value in vars(global_args).items():
        if key not in vars(args) or getattr(args, key) is None:
            setattr(args, key, value)

    _init_from_globals(global_args)

    try:
        return args.func(args) or 0
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1


if __name__ == "__main__":
    sys.exit(main())
