"""datelog categories — list the category table."""

from datelog.categories import format_category_list


def register(subparsers, parents):
    """Register the 'categories' subcommand."""
    p = subparsers.add_parser(
        "categories",
        help="List categories with their glyphs and colors",
    )
    p.set_defaults(func=run)


def run(args):
    """Execute the categories command."""
    print(format_category_list())
    return 0
