# services/date_classifier.py

from typing import Sequence

from core.date_shape import Classification, DateShape, GroupKind, TokenGroup
from core.errors import TooFewArguments, TooManyArguments

MAX_TOKENS = 6


def _has_dash(tok: str) -> bool:
    return "-" in tok


def _looks_like_year(tok: str) -> bool:
    return len(tok) == 4


def _iso(tokens: Sequence[str]) -> TokenGroup:
    return TokenGroup(GroupKind.ISO, tuple(tokens))


def _yearless(tokens: Sequence[str]) -> TokenGroup:
    return TokenGroup(GroupKind.YEARLESS, tuple(tokens))


def _year_bearing(tokens: Sequence[str]) -> TokenGroup:
    return TokenGroup(GroupKind.YEAR_BEARING, tuple(tokens))


def classify_tokens(tokens: Sequence[str]) -> Classification:
    """
    Decide how a token sequence splits into one or two dates.

    INPUT: lowercase tokens with "to" already removed
    OUTPUT: Classification (shape + token groups)

    RULES:
    - Dispatch on token count first, then on token shape
    - A dash means ISO; a 4-character third token means a year
    - Dash detection wins over length detection
    - Deterministic, no parsing happens here
    """
    n = len(tokens)

    if n == 0:
        raise TooFewArguments()

    if n > MAX_TOKENS:
        raise TooManyArguments(n, MAX_TOKENS)

    # -----------------------------
    # One or two tokens
    # -----------------------------
    if n == 1:
        return Classification(DateShape.ISO, (_iso(tokens),))

    if n == 2:
        if _has_dash(tokens[0]):
            return Classification(
                DateShape.ISO_PAIR, (_iso(tokens[:1]), _iso(tokens[1:]))
            )
        return Classification(DateShape.YEARLESS, (_yearless(tokens),))

    # -----------------------------
    # Three tokens: ISO + month/day, or one full date
    # -----------------------------
    if n == 3:
        if _has_dash(tokens[0]):
            return Classification(
                DateShape.ISO_THEN_YEARLESS, (_iso(tokens[:1]), _yearless(tokens[1:]))
            )
        if _has_dash(tokens[2]):
            return Classification(
                DateShape.YEARLESS_THEN_ISO, (_yearless(tokens[:2]), _iso(tokens[2:]))
            )
        return Classification(DateShape.YEAR_BEARING, (_year_bearing(tokens),))

    # -----------------------------
    # Four tokens: ISO + full date, or two month/day pairs
    # -----------------------------
    if n == 4:
        if _has_dash(tokens[0]):
            return Classification(
                DateShape.ISO_THEN_YEAR_BEARING,
                (_iso(tokens[:1]), _year_bearing(tokens[1:])),
            )
        if _has_dash(tokens[3]):
            return Classification(
                DateShape.YEAR_BEARING_THEN_ISO,
                (_year_bearing(tokens[:3]), _iso(tokens[3:])),
            )
        return Classification(
            DateShape.YEARLESS_PAIR, (_yearless(tokens[:2]), _yearless(tokens[2:]))
        )

    # -----------------------------
    # Five tokens: one full date and one month/day, order unknown
    # -----------------------------
    if n == 5:
        if _looks_like_year(tokens[2]):
            # jan 3 2004 march 3
            return Classification(
                DateShape.YEAR_BEARING_THEN_YEARLESS,
                (_year_bearing(tokens[:3]), _yearless(tokens[3:])),
            )
        # jan 3 march 3 2030
        return Classification(
            DateShape.YEARLESS_THEN_YEAR_BEARING,
            (_yearless(tokens[:2]), _year_bearing(tokens[2:])),
        )

    # -----------------------------
    # Six tokens: two full dates
    # -----------------------------
    return Classification(
        DateShape.YEAR_BEARING_PAIR,
        (_year_bearing(tokens[:3]), _year_bearing(tokens[3:])),
    )
