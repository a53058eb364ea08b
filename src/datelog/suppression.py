"""
Date-based suppression: decide whether a record is emitted.

Every call site tags its message with the date it was written, in the
fixed calendar format yyyy-MMM-dd (e.g. "2016-Jul-28"). Raising the
suppression threshold silences older debug output without touching the
call sites. The emit rule is:

    enabled and message and date          (otherwise drop)
    category forces emission  ->  emit    (CRITICAL)
    record date > threshold   ->  emit    (strictly later, same day drops)

Malformed dates on either side fail closed: the record is dropped.
"""

import datetime
import re
from typing import Optional

from datelog.categories import forces_emission
from datelog.record import LogRecord


_MONTHS = {
    'jan': 1, 'feb': 2, 'mar': 3, 'apr': 4, 'may': 5, 'jun': 6,
    'jul': 7, 'aug': 8, 'sep': 9, 'oct': 10, 'nov': 11, 'dec': 12,
}

# Month names are matched independently of the process locale.
_DATE_RE = re.compile(r'^\s*(\d{4})-([A-Za-z]{3})-(\d{1,2})\s*$')


def parse_log_date(text: Optional[str]) -> Optional[datetime.date]:
    """Parse a yyyy-MMM-dd date string.

    Returns:
        The calendar date, or None if text is missing or malformed
        (including impossible days such as 2016-Feb-30).
    """
    if not isinstance(text, str):
        return None
    m = _DATE_RE.match(text)
    if not m:
        return None
    month = _MONTHS.get(m.group(2).lower())
    if month is None:
        return None
    try:
        return datetime.date(int(m.group(1)), month, int(m.group(3)))
    except ValueError:
        return None


def should_emit(record: LogRecord, config) -> bool:
    """Return True if the record passes enablement and date suppression.

    Args:
        record: The log call being evaluated
        config: LoggerConfig or ConfigValues snapshot, read at call time
    """
    if not config.enabled:
        return False
    if record.message is None or record.date is None:
        return False
    if forces_emission(record.category):
        return True

    created = parse_log_date(record.date)
    threshold = parse_log_date(config.suppress_before_date)
    if created is None or threshold is None:
        return False
    return created > threshold
