# services/day_counter.py

from datetime import date

from core.command import Command
from models.days import ResolvedDates


def days_between(start: date, end: date) -> int:
    """
    Signed number of whole days from start to end.
    """
    return (end - start).days


def count_days(command: Command, resolved: ResolvedDates, now: date) -> int:
    if command is Command.UNTIL:
        return days_between(now, resolved.first)
    if command is Command.SINCE:
        return days_between(resolved.first, now)
    return days_between(resolved.first, resolved.second)
