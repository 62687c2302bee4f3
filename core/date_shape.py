# core/date_shape.py
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class GroupKind(str, Enum):
    ISO = "iso"
    YEARLESS = "yearless"
    YEAR_BEARING = "year_bearing"


class DateShape(str, Enum):
    """
    Every layout the classifier can recognise in a token sequence.
    """

    ISO = "iso"
    ISO_PAIR = "iso_pair"
    YEARLESS = "yearless"
    YEARLESS_PAIR = "yearless_pair"
    YEAR_BEARING = "year_bearing"
    YEAR_BEARING_PAIR = "year_bearing_pair"
    ISO_THEN_YEARLESS = "iso_then_yearless"
    YEARLESS_THEN_ISO = "yearless_then_iso"
    ISO_THEN_YEAR_BEARING = "iso_then_year_bearing"
    YEAR_BEARING_THEN_ISO = "year_bearing_then_iso"
    YEAR_BEARING_THEN_YEARLESS = "year_bearing_then_yearless"
    YEARLESS_THEN_YEAR_BEARING = "yearless_then_year_bearing"

    def is_range(self) -> bool:
        return self not in {DateShape.ISO, DateShape.YEARLESS, DateShape.YEAR_BEARING}

    def needs_range_ordering(self) -> bool:
        # Only two bare month/day pairs get their second year bumped
        return self is DateShape.YEARLESS_PAIR


@dataclass(frozen=True)
class TokenGroup:
    kind: GroupKind
    tokens: Tuple[str, ...]

    def text(self) -> str:
        return " ".join(self.tokens)


@dataclass(frozen=True)
class Classification:
    shape: DateShape
    groups: Tuple[TokenGroup, ...]
