# FILE: services/days_orchestrator.py
"""
Single entry point used by both the CLI and the HTTP service.
"""

import logging
from datetime import date
from typing import Optional, Sequence

from core.command import Command
from core.errors import DaysError, UnknownCommand
from models.days import DaysResponse
from services.date_resolver import get_reference_date, resolve_dates
from services.day_counter import count_days
from services.days_validator import validate_resolved_dates
from services.tokenizer import check_raw_argument_count, tokenize

logger = logging.getLogger("days_orchestrator")


def parse_command(name: str) -> Command:
    try:
        return Command(name)
    except ValueError:
        raise UnknownCommand(name)


def handle_days(
    command_name: str,
    raw_args: Sequence[str],
    now: Optional[date] = None,
    tz=None,
) -> DaysResponse:
    """
    Resolve the arguments and count days for one invocation.

    `now` freezes "today" (tests); otherwise it is read once from the clock
    in `tz`. Any DaysError propagates to the caller unchanged.
    """
    try:
        check_raw_argument_count(raw_args)
        command = parse_command(command_name)

        if now is None:
            now = get_reference_date(tz)

        tokens = tokenize(raw_args)
        logger.info(f"Resolving {command.value} with {len(tokens)} tokens (today={now})")

        classification, resolved = resolve_dates(command, tokens, now)
        validate_resolved_dates(command, resolved)

        days = count_days(command, resolved, now)
        logger.info(f"{command.value} {resolved.isoformat()} -> {days}")

        return DaysResponse(
            command=command,
            days=days,
            dates=resolved.isoformat(),
            reference_date=now.isoformat(),
            shape=classification.shape.value,
        )

    except DaysError as e:
        logger.info(f"Rejected {command_name} {list(raw_args)}: [{e.code}] {e.message}")
        raise
