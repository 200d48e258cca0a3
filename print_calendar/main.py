"""
Prints the waste collection calendar of a district from a schedule document.

Get the JSON document from the Sherbrooke open data portal (calendrier des
collectes), then:

    print-calendar calendrier_collectes.json
    print-calendar calendrier_collectes.json | lp -o columns=2 -o page-top=72
"""
import argparse
import os
import sys
from typing import List, Optional

from collection_calendar.exceptions import DownloadError, ParsingError, UsageError
from collection_calendar.services.calendar_formatter import render_lines

from .app_factory import create_facade
from .logging_config import run_logger


class ArgumentParser(argparse.ArgumentParser):
    """Prints the usage line to stdout instead of exiting on bad arguments."""

    def error(self, message):
        self.print_usage(sys.stdout)
        raise UsageError(message)


def build_parser(program_name: str) -> ArgumentParser:
    parser = ArgumentParser(
        prog=program_name,
        usage="%(prog)s FILE.json",
        description="Print the waste collection calendar of a district.",
        add_help=False,
    )
    parser.add_argument("file", help="Path or URL of the schedule JSON document.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    program_name = os.path.basename(sys.argv[0]) or "print-calendar"
    if argv is None:
        argv = sys.argv[1:]

    with run_logger(program_name) as logger:
        parser = build_parser(program_name)
        try:
            # "--" keeps a path starting with "-" positional
            args = parser.parse_args(["--"] + list(argv))
        except UsageError:
            logger.critical("not enough arguments")
            return 1

        facade = create_facade()
        try:
            lines = facade.build_calendar(args.file)
        except (OSError, DownloadError, ParsingError) as e:
            logger.critical(e)
            return 1

        for text in render_lines(lines):
            print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
