"""
This module defines custom exceptions for the collection calendar.
"""


class DownloadError(Exception):
    """Custom exception for errors while downloading a schedule document."""

    pass


class ParsingError(Exception):
    """Custom exception for errors while decoding a schedule document."""

    pass


class DateParseError(ParsingError):
    """Raised when a record carries a date that does not match the date format."""

    pass


class UsageError(Exception):
    """Raised when the command line arguments are wrong."""

    pass
