# FILE: services/date_parsers.py
"""
Parsers for the three kinds of date token group.

- ISO:          2004-03-18
- Year-bearing: feb 23 2004 / february 23 2004
- Year-less:    feb 23 (year taken from today, then inferred)
"""

import re
from datetime import date, datetime
from typing import Optional, Sequence

from core.command import Command
from core.errors import DateParseFailure
from services.year_inference import infer_year

ISO_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
ISO_GRAMMAR = "YYYY-MM-DD"

# Tried in order, abbreviated month names first
MONTH_DAY_YEAR_GRAMMARS = (
    "%b %d %Y",   # jan 2 2006
    "%B %d %Y",   # january 2 2006
)


def parse_iso(tokens: Sequence[str]) -> date:
    text = " ".join(tokens)
    if len(tokens) != 1 or not ISO_PATTERN.match(text):
        raise DateParseFailure(tokens, attempted=[ISO_GRAMMAR])
    try:
        return date.fromisoformat(text)
    except ValueError:
        # right shape, impossible calendar day (2024-04-31)
        raise DateParseFailure(tokens, attempted=[ISO_GRAMMAR])


def _first_matching_grammar(text: str) -> Optional[date]:
    for grammar in MONTH_DAY_YEAR_GRAMMARS:
        try:
            return datetime.strptime(text, grammar).date()
        except ValueError:
            continue
    return None


def parse_year_bearing(tokens: Sequence[str]) -> date:
    """
    Parse `<month> <day> <year>`, e.g. ["feb", "23", "2004"].
    """
    if len(tokens) != 3:
        raise DateParseFailure(tokens, attempted=MONTH_DAY_YEAR_GRAMMARS)

    parsed = _first_matching_grammar(" ".join(tokens))
    if parsed is None:
        raise DateParseFailure(tokens, attempted=MONTH_DAY_YEAR_GRAMMARS)
    return parsed


def parse_yearless(tokens: Sequence[str], command: Command, now: date) -> date:
    """
    Parse `<month> <day>` in today's year, then move the year so the date
    points the way the command looks (future for until, past for since).
    """
    if len(tokens) != 2:
        raise DateParseFailure(tokens, attempted=MONTH_DAY_YEAR_GRAMMARS)

    parsed = _first_matching_grammar(f"{tokens[0]} {tokens[1]} {now.year:04d}")
    if parsed is None:
        raise DateParseFailure(tokens, attempted=MONTH_DAY_YEAR_GRAMMARS)
    return infer_year(parsed, command, now)
