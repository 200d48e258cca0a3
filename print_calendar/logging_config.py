"""
This module sets up the logger of a calendar run.
"""
import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

from collection_calendar.config import LOG_DATE_FORMAT, LOG_FORMAT, LOG_LEVEL

LIBRARY_LOGGER_NAME = "collection_calendar"


@contextmanager
def run_logger(
    program_name: str, stream: Optional[TextIO] = None, level: int = LOG_LEVEL
) -> Iterator[logging.Logger]:
    """
    Provides a logger that prefixes messages with the program name.

    The handler is attached to the program logger and to the library logger
    for the duration of the run only.
    """
    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(f"{program_name} - {LOG_FORMAT}", datefmt=LOG_DATE_FORMAT)
    )

    logger = logging.getLogger(program_name)
    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    attached = [logger, library_logger]
    saved = [(log.level, log.propagate) for log in attached]
    for log in attached:
        log.setLevel(level)
        log.propagate = False
        log.addHandler(handler)

    try:
        yield logger
    finally:
        for log, (saved_level, saved_propagate) in zip(attached, saved):
            log.removeHandler(handler)
            log.setLevel(saved_level)
            log.propagate = saved_propagate
        handler.close()
