import logging
from datetime import date

import pytest

from main import main


def test_prints_day_count(capsys, frozen_today):
    frozen_today(date(2024, 1, 10))

    code = main(["until", "feb", "23"])

    assert code == 0
    assert capsys.readouterr().out.strip() == "44"


def test_quoted_argument_with_spaces(capsys, frozen_today):
    frozen_today(date(2024, 3, 10))

    assert main(["since", "feb 23"]) == 0
    assert capsys.readouterr().out.strip() == "16"


def test_error_goes_to_stderr_with_nonzero_exit(capsys, frozen_today):
    frozen_today(date(2024, 6, 1))

    code = main(["from", "2024-03-01", "2024-01-01"])

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert "first date occurs after second date" in captured.err


def test_unknown_command(capsys):
    assert main(["between", "feb", "23"]) == 1
    assert "unknown command: between" in capsys.readouterr().err


def test_missing_dates_prints_usage(capsys):
    assert main(["until"]) == 0
    assert "provide a command" in capsys.readouterr().out


def test_rejection_is_not_logged_as_warning(capsys, caplog):
    """
    stderr must carry only the diagnostic, not a log line before it.
    """
    assert main(["between", "feb", "23"]) == 1

    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
    assert capsys.readouterr().err.strip() == "unknown command: between"


@pytest.mark.parametrize("dates", [["-5"], ["--since", "feb", "23"], ["-h"]])
def test_dash_arguments_are_dates_not_options(capsys, frozen_today, dates):
    frozen_today(date(2024, 6, 1))

    assert main(["until"] + dates) == 1
    assert "usage" not in capsys.readouterr().out


def test_leading_help_flag_prints_help(capsys):
    assert main(["--help"]) == 0
    assert "until, since, from" in capsys.readouterr().out
