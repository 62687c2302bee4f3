# services/days_validator.py

from core.command import Command
from core.errors import CardinalityMismatch, InvertedRange
from models.days import ResolvedDates


def validate_resolved_dates(command: Command, resolved: ResolvedDates) -> None:
    """
    Final gate before counting days.
    MUST run after resolution.
    MUST NOT correct anything, only reject.
    """

    # -------- Invariant 1 --------
    # until/since take one date, from takes two
    expected = command.expected_dates()
    if resolved.count != expected:
        raise CardinalityMismatch(command.value, expected, resolved.count)

    # -------- Invariant 2 --------
    # from: first date must not be after the second
    if command is Command.FROM and not resolved.is_ordered():
        first, second = resolved.isoformat()
        raise InvertedRange(first, second)
