"""
Category registry for date-gated debug logging.

Categories are a fixed, closed set. Each one maps to a display tag: a
symbol glyph for plain output and an RGB color for ANSI output. Adding a
category means adding a row to CATEGORY_TAGS, not a new type.

Color meanings (the palette follows the color-per-severity DLog style):

    critical        red     always logged, bypasses date suppression
    important       orange
    highlighted     yellow
    reviewed        green
    valuable        blue
    to-be-reviewed  purple
    not-important   gray
    default         none    dark blue foreground only
"""

import enum
from dataclasses import dataclass
from typing import Dict, Tuple


class Category(enum.Enum):
    """Semantic severity/purpose of a log call."""
    DEFAULT = 'default'
    CRITICAL = 'critical'
    IMPORTANT = 'important'
    HIGHLIGHTED = 'highlighted'
    REVIEWED = 'reviewed'
    VALUABLE = 'valuable'
    TO_BE_REVIEWED = 'to-be-reviewed'
    NOT_IMPORTANT = 'not-important'


@dataclass(frozen=True)
class CategoryTag:
    """Display data for one category.

    Attributes:
        symbol: Glyph shown in plain (non-ANSI) output
        rgb: Color used when ANSI output is enabled
        background: True if rgb is a background color, False for foreground
        alias: Color name, used for the dlog_<color> entry points
        forces_emission: Bypass date-based suppression
        description: One-line summary for listings
    """
    symbol: str
    rgb: Tuple[int, int, int]
    background: bool
    alias: str
    forces_emission: bool = False
    description: str = ''


CATEGORY_TAGS: Dict[Category, CategoryTag] = {
    Category.DEFAULT: CategoryTag(
        '⚫', (0, 34, 98), False, 'none',
        description='General output'),
    Category.CRITICAL: CategoryTag(
        '🔴', (220, 100, 100), True, 'red', forces_emission=True,
        description='Errors; always logged regardless of date'),
    Category.IMPORTANT: CategoryTag(
        '🟠', (255, 212, 120), True, 'orange',
        description='Important state changes'),
    Category.HIGHLIGHTED: CategoryTag(
        '🟡', (255, 252, 120), True, 'yellow',
        description='Highlighted for the current debugging session'),
    Category.REVIEWED: CategoryTag(
        '🟢', (213, 251, 120), True, 'green',
        description='Reviewed and known to be correct'),
    Category.VALUABLE: CategoryTag(
        '🔵', (118, 214, 255), True, 'blue',
        description='Valuable data worth keeping an eye on'),
    Category.TO_BE_REVIEWED: CategoryTag(
        '🟣', (215, 131, 255), True, 'purple',
        description='Needs review'),
    Category.NOT_IMPORTANT: CategoryTag(
        '⚪', (192, 192, 192), True, 'gray',
        description='Low-value noise'),
}


def tag_for(category: Category) -> CategoryTag:
    """Return the display tag for a category."""
    return CATEGORY_TAGS[category]


def forces_emission(category: Category) -> bool:
    """True if messages in this category skip date suppression."""
    return CATEGORY_TAGS[category].forces_emission


def parse_category(name: str) -> Category:
    """Resolve a category from its name or color alias.

    Accepts 'critical', 'to-be-reviewed', 'to_be_reviewed', 'TO_BE_REVIEWED',
    or a color alias such as 'red' or 'gray'.

    Raises:
        ValueError: if the name matches no category
    """
    key = name.strip().lower().replace('_', '-')
    for category, tag in CATEGORY_TAGS.items():
        if key in (category.value, tag.alias):
            return category
    raise ValueError(f"Unknown category: {name!r}")


def format_category_list() -> str:
    """Format the category table for display.

    Returns:
        Formatted string listing every category with glyph, color and
        description.
    """
    lines = ["Available categories:"]
    max_name = max(len(c.value) for c in Category)
    max_alias = max(len(t.alias) for t in CATEGORY_TAGS.values())
    for category in Category:
        tag = CATEGORY_TAGS[category]
        forced = " (always logged)" if tag.forces_emission else ""
        lines.append(f"  {tag.symbol} {category.value:<{max_name}}  "
                     f"{tag.alias:<{max_alias}}  {tag.description}{forced}")
    return "\n".join(lines)
