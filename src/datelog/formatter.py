"""
Line formatting for emitted records.

Two mutually exclusive renderings, chosen by config.use_color:

    plain:  datelog 🟠 [Widget.py:42] load - data 42
    color:  ESC[48;2;255;212;120mdatelog [Widget.py:42] load - data 42ESC[0m

In color mode the glyph is dropped and the category color wraps the
whole line instead.
"""

from datelog.categories import CategoryTag
from datelog.record import LogRecord


ESCAPE = "\x1b["
RESET = ESCAPE + "0m"


def color_escape(tag: CategoryTag) -> str:
    """Return the ANSI 24-bit escape sequence for a category color."""
    r, g, b = tag.rgb
    ground = 48 if tag.background else 38
    return f"{ESCAPE}{ground};2;{r};{g};{b}m"


def basename(path: str) -> str:
    """Strip directories from a path, accepting / and \\ separators."""
    return path.replace('\\', '/').rsplit('/', 1)[-1]


def format_line(record: LogRecord, tag: CategoryTag, config) -> str:
    """Render a record as a single log line.

    Args:
        record: The record to render; message must not be None
        tag: Display tag for the record's category
        config: LoggerConfig or ConfigValues snapshot

    Returns:
        The formatted line, without a trailing newline.
    """
    location = f"[{basename(record.filename)}:{record.line}]"
    body = f"{location} {record.function} - {record.message}"

    if config.use_color:
        parts = [config.source_prefix, body]
        line = " ".join(p for p in parts if p)
        return f"{color_escape(tag)}{line}{RESET}"

    parts = [config.source_prefix, tag.symbol, body]
    return " ".join(p for p in parts if p)
