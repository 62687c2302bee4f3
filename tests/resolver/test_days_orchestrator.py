from datetime import date

import pytest

from core.command import Command
from core.errors import (
    CardinalityMismatch,
    DateParseFailure,
    InvertedRange,
    TooFewArguments,
    TooManyArguments,
    UnknownCommand,
)
from services.days_orchestrator import handle_days


# ---------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------

def test_until_feb_23():
    result = handle_days("until", ["feb", "23"], now=date(2024, 1, 10))

    assert result.days == 44
    assert result.dates == ["2024-02-23"]
    assert result.command is Command.UNTIL


def test_since_feb_23():
    result = handle_days("since", ["feb", "23"], now=date(2024, 3, 10))
    assert result.days == 16


@pytest.mark.parametrize("now, expected", [(date(2024, 5, 5), 60), (date(2023, 5, 5), 59)])
def test_from_two_yearless_dates(now, expected):
    result = handle_days("from", ["jan", "3", "march", "3"], now=now)
    assert result.days == expected


def test_from_iso_dates_across_leap_day():
    result = handle_days("from", ["2024-01-01", "2024-03-01"], now=date(2026, 1, 1))
    assert result.days == 60


def test_until_past_iso_date_is_negative():
    result = handle_days("until", ["2020-01-01"], now=date(2024, 1, 10))
    assert result.days == -1470


def test_from_out_of_order_yearless_dates_is_corrected():
    result = handle_days("from", ["march", "3", "jan", "3"], now=date(2024, 6, 1))

    assert result.days == 306
    assert result.dates == ["2024-03-03", "2025-01-03"]


def test_to_is_ignored():
    result = handle_days("from", ["jun 1", "to", "aug 1"], now=date(2024, 6, 1))
    assert result.days == 61


@pytest.mark.parametrize("command", ["until", "since"])
def test_today_counts_zero(command):
    result = handle_days(command, ["feb", "23"], now=date(2024, 2, 23))
    assert result.days == 0
    assert result.dates == ["2024-02-23"]


@pytest.mark.parametrize("name", ["UNTIL", " until", "Since", "from "])
def test_command_name_must_match_exactly(name):
    with pytest.raises(UnknownCommand):
        handle_days(name, ["2024-01-11"], now=date(2024, 1, 10))


def test_reference_date_read_once(frozen_today):
    frozen_today(date(2024, 1, 10))

    result = handle_days("until", ["feb 23"])

    assert result.reference_date == "2024-01-10"
    assert result.days == 44


# ---------------------------------------------------------------------
# Rejections
# ---------------------------------------------------------------------

def test_unknown_command():
    with pytest.raises(UnknownCommand):
        handle_days("between", ["feb", "23"], now=date(2024, 1, 10))


def test_too_many_raw_arguments():
    with pytest.raises(TooManyArguments):
        handle_days("from", ["a"] * 8, now=date(2024, 1, 10))


def test_seven_raw_arguments_with_to_is_allowed():
    result = handle_days(
        "from", ["jan", "3", "2004", "to", "march", "3", "2006"], now=date(2024, 1, 10)
    )
    assert result.days == 790


def test_only_joining_word_is_too_few():
    with pytest.raises(TooFewArguments):
        handle_days("until", ["to"], now=date(2024, 1, 10))


def test_until_with_two_dates_is_cardinality_mismatch():
    with pytest.raises(CardinalityMismatch) as exc:
        handle_days("until", ["jan", "3", "march", "3"], now=date(2024, 1, 10))

    assert exc.value.details == {"command": "until", "expected": 1, "got": 2}


def test_from_with_one_date_is_cardinality_mismatch():
    with pytest.raises(CardinalityMismatch):
        handle_days("from", ["feb", "23"], now=date(2024, 1, 10))


def test_from_inverted_full_dates():
    with pytest.raises(InvertedRange):
        handle_days("from", ["mar", "3", "2024", "jan", "3", "2024"], now=date(2024, 1, 10))


def test_from_inverted_mixed_dates_not_corrected():
    with pytest.raises(InvertedRange):
        handle_days("from", ["mar", "3", "2024", "jan", "3"], now=date(2024, 6, 1))


def test_unparseable_date():
    with pytest.raises(DateParseFailure):
        handle_days("since", ["april", "31"], now=date(2024, 6, 1))
