# services/year_inference.py

import logging
from datetime import date, timedelta
from typing import Tuple

from core.command import Command

logger = logging.getLogger("year_inference")


def shift_years(d: date, years: int) -> date:
    """
    Move a date by whole years, normalising like a calendar would:
    Feb 29 moved into a non-leap year lands on Mar 1.
    """
    return date(d.year + years, d.month, 1) + timedelta(days=d.day - 1)


def infer_year(candidate: date, command: Command, now: date) -> date:
    """
    Pick the year of a month/day that was typed without one.

    - until: the date must not be before today
    - since: the date must not be after today
    - from:  left alone, ordering is handled per range
    Today itself is never moved.
    """
    if command.looks_forward() and candidate < now:
        moved = shift_years(candidate, 1)
        logger.debug(f"until: {candidate} is in the past, using {moved}")
        return moved

    if command.looks_backward() and candidate > now:
        moved = shift_years(candidate, -1)
        logger.debug(f"since: {candidate} is in the future, using {moved}")
        return moved

    return candidate


def order_yearless_range(first: date, second: date) -> Tuple[date, date]:
    """
    Two month/day pairs with no years: the second must not come before the first.
    Only the second date is ever moved.
    """
    if first > second:
        moved = shift_years(second, 1)
        logger.debug(f"range: {second} precedes {first}, using {moved}")
        return first, moved
    return first, second
