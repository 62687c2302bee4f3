# core/command.py
from enum import Enum


class Command(str, Enum):
    """
    The three things a user can ask for.
    """

    UNTIL = "until"
    SINCE = "since"
    FROM = "from"

    # -----------------------------
    # Semantic helpers (SAFE)
    # -----------------------------
    def expected_dates(self) -> int:
        return 2 if self is Command.FROM else 1

    def looks_forward(self) -> bool:
        return self is Command.UNTIL

    def looks_backward(self) -> bool:
        return self is Command.SINCE

    @classmethod
    def names(cls) -> list[str]:
        return [c.value for c in cls]
