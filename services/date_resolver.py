"""
Date Resolver Service

- Turns a token sequence into one or two concrete calendar dates
- Every comparison against "today" uses the single reference date passed in
"""

import logging
from datetime import date, datetime, tzinfo
from typing import Optional, Tuple

from core.command import Command
from core.date_shape import Classification, GroupKind, TokenGroup
from core.errors import DateParseFailure
from models.days import ResolvedDates
from services.date_classifier import classify_tokens
from services.date_parsers import parse_iso, parse_year_bearing, parse_yearless
from services.year_inference import order_yearless_range

logger = logging.getLogger("date_resolver")

POSITIONS = ("first", "second")


def get_reference_date(tz: Optional[tzinfo] = None) -> date:
    """
    Return today's date in `tz` (system local zone when None).

    Call once per invocation and pass the result down.
    """
    return datetime.now(tz).date()


def parse_group(group: TokenGroup, command: Command, now: date) -> date:
    if group.kind is GroupKind.ISO:
        return parse_iso(group.tokens)
    if group.kind is GroupKind.YEAR_BEARING:
        return parse_year_bearing(group.tokens)
    return parse_yearless(group.tokens, command, now)


def resolve_classification(
    classification: Classification, command: Command, now: date
) -> ResolvedDates:
    parsed = []
    for position, group in zip(POSITIONS, classification.groups):
        try:
            parsed.append(parse_group(group, command, now))
        except DateParseFailure as e:
            if classification.shape.is_range():
                raise e.at(position) from e
            raise

    # -----------------------------
    # Two bare month/day pairs: quietly fix the order
    # -----------------------------
    if classification.shape.needs_range_ordering():
        first, second = order_yearless_range(parsed[0], parsed[1])
        return ResolvedDates((first, second))

    # Any other inverted range is left for the validator to reject
    return ResolvedDates(tuple(parsed))


def resolve_dates(
    command: Command, tokens, now: date
) -> Tuple[Classification, ResolvedDates]:
    """
    High-level resolver.

    INPUT: command, normalised tokens, reference date
    OUTPUT: (classification, resolved dates)
    Raises a DaysError subclass on any failure.
    """
    classification = classify_tokens(tokens)
    logger.debug(f"classified {list(tokens)} as {classification.shape.value}")

    resolved = resolve_classification(classification, command, now)
    logger.debug(f"resolved to {resolved.isoformat()}")
    return classification, resolved
