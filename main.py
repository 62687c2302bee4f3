import argparse
import logging
import sys
from typing import Optional, Sequence

from config import DAYS_TIMEZONE, LOG_LEVEL
from core.command import Command
from core.errors import DaysError
from services.days_orchestrator import handle_days

HELP_FLAGS = ("-h", "--help")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="days",
        allow_abbrev=False,
        description="Count whole days until, since, or between loosely written dates.",
        epilog=(
            "examples: days until feb 23 | days since 2004-03-18 | "
            "days from jan 3 2004 to march 3"
        ),
    )
    p.add_argument("command", nargs="?", help=f"One of: {', '.join(Command.names())}")
    p.add_argument(
        "dates",
        nargs="*",
        help="Date arguments: 'feb 23', 'feb 23 2004', '2004-02-23', or two of them",
    )
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(
        level=LOG_LEVEL,
        stream=sys.stderr,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = build_parser()
    argv = list(sys.argv[1:] if argv is None else argv)

    # Only a leading help flag is an option; "-5" and friends are date text
    if argv and argv[0] in HELP_FLAGS:
        parser.print_help()
        return 0

    if len(argv) < 2:
        print("provide a command (until, since, from) and date arguments")
        parser.print_usage()
        return 0

    command, dates = argv[0], argv[1:]

    try:
        result = handle_days(command, dates, tz=DAYS_TIMEZONE)
    except DaysError as e:
        print(e.message, file=sys.stderr)
        return 1

    print(result.days)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
