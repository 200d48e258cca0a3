"""
This module defines the data models for the collection calendar.
"""

import enum
from dataclasses import dataclass, field
from datetime import date
from typing import Dict

from .config import (
    DATE_FORMAT,
    DISTRICT_NAME,
    LEGEND,
    LEGEND_TITLE,
    SHORT_DATE_FORMAT,
)


@dataclass(frozen=True)
class CollectionRecord:
    """Represents a single entry of the collection schedule document."""

    municipality_id: str = ""
    code_id: str = ""
    week_number: str = ""
    date_begin: str = ""
    date_end: str = ""
    district: str = ""
    type: str = ""
    description: str = ""
    information: str = ""


@dataclass(frozen=True)
class Period:
    """One calendar entry: every consecutive record of the same week merged."""

    number: str = ""
    types: str = ""
    date_begin: date = date.min
    date_end: date = date.min
    information: str = ""


class LineKind(enum.Enum):
    MONTH_HEADER = "month_header"
    PERIOD = "period"
    INFORMATION = "information"
    LEGEND = "legend"


@dataclass(frozen=True)
class CalendarLine:
    """A line of the printable calendar."""

    kind: LineKind
    text: str

    def render(self) -> str:
        """Return the text exactly as it is printed."""
        if self.kind is LineKind.MONTH_HEADER:
            return f"\n\n{self.text}"
        if self.kind is LineKind.INFORMATION:
            return f" `-> {self.text}"
        if self.kind is LineKind.LEGEND:
            return f"\n{self.text}"
        return self.text


@dataclass(frozen=True)
class CalendarConfig:
    """Settings that drive a calendar build."""

    district: str = DISTRICT_NAME
    date_format: str = DATE_FORMAT
    short_date_format: str = SHORT_DATE_FORMAT
    legend_title: str = LEGEND_TITLE
    legend: Dict[str, str] = field(default_factory=lambda: dict(LEGEND))
