# core/errors.py
"""
Failure kinds raised while turning date arguments into a day count.

Every error is terminal for the invocation. The CLI prints `str(err)` and
exits non-zero; the HTTP layer returns `err.to_envelope()` with status 400.
"""

from typing import Any, Dict, Optional, Sequence


class DaysError(Exception):
    code = "DAYS_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_envelope(self) -> Dict[str, Any]:
        return {
            "error": {
                "type": type(self).__name__,
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        }


class TooFewArguments(DaysError):
    code = "TOO_FEW_ARGUMENTS"

    def __init__(self):
        super().__init__("too few date arguments")


class TooManyArguments(DaysError):
    code = "TOO_MANY_ARGUMENTS"

    def __init__(self, count: int, limit: int):
        super().__init__(
            "too many date arguments",
            details={"count": count, "limit": limit},
        )


class UnknownCommand(DaysError):
    code = "UNKNOWN_COMMAND"

    def __init__(self, command: str):
        super().__init__(f"unknown command: {command}", details={"command": command})


class DateParseFailure(DaysError):
    code = "DATE_PARSE_FAILURE"

    def __init__(
        self,
        tokens: Sequence[str],
        attempted: Sequence[str] = (),
        position: Optional[str] = None,
    ):
        self.tokens = tuple(tokens)
        self.attempted = tuple(attempted)
        self.position = position
        text = " ".join(self.tokens)
        prefix = f"{position} date: " if position else ""
        super().__init__(
            f"can't parse date: {prefix}{text!r}",
            details={
                "tokens": list(self.tokens),
                "attempted": list(self.attempted),
                "position": position,
            },
        )

    def at(self, position: str) -> "DateParseFailure":
        """Return the same failure tagged with which date of a pair it was."""
        return DateParseFailure(self.tokens, self.attempted, position=position)


class CardinalityMismatch(DaysError):
    code = "CARDINALITY_MISMATCH"

    def __init__(self, command: str, expected: int, got: int):
        if expected == 1:
            message = f"too many dates for command '{command}'"
        else:
            message = f"command '{command}' requires exactly two dates"
        super().__init__(
            message,
            details={"command": command, "expected": expected, "got": got},
        )


class InvertedRange(DaysError):
    code = "INVERTED_RANGE"

    def __init__(self, first: str, second: str):
        super().__init__(
            "first date occurs after second date, which is invalid for the 'from' command",
            details={"first": first, "second": second},
        )
