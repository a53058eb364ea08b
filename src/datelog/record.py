"""LogRecord: the per-call input to the emission pipeline."""

from dataclasses import dataclass
from typing import Optional

from datelog.categories import Category


@dataclass(frozen=True)
class LogRecord:
    """One log call, built at the call site and consumed immediately.

    A record with no message or no date is never emitted.
    """
    message: Optional[str]
    date: Optional[str]
    category: Category = Category.DEFAULT
    filename: str = ''
    function: str = ''
    line: int = 0
