"""
This module turns calendar periods into printable lines.
"""
import calendar
from datetime import date
from typing import Dict, Iterable, Iterator, List, Optional

from ..config import LEGEND, LEGEND_TITLE, SHORT_DATE_FORMAT
from ..models import CalendarLine, LineKind, Period


def month_label(day: date) -> str:
    """Long English month name and 4-digit year, e.g. "January 2014"."""
    # strftime("%Y") does not zero-pad years below 1000 on every platform
    return f"{calendar.month_name[day.month]} {day.year:04d}"


def legend_text(title: str = LEGEND_TITLE, legend: Optional[Dict[str, str]] = None) -> str:
    if legend is None:
        legend = LEGEND
    entries = [f"{code} - {meaning}" for code, meaning in legend.items()]
    return "\n".join([title] + entries)


def format_calendar(
    periods: Iterable[Period],
    short_date_format: str = SHORT_DATE_FORMAT,
    legend_title: str = LEGEND_TITLE,
    legend: Optional[Dict[str, str]] = None,
) -> List[CalendarLine]:
    """
    Build the calendar lines for the given periods.

    A month header is emitted each time the month of a period's start date
    differs from the previous period's. Every period gets a summary line and,
    when it carries information, an extra information line. The legend closes
    the calendar.
    """
    lines = []
    previous_month = ""
    for period in periods:
        current_month = month_label(period.date_begin)
        if current_month != previous_month:
            lines.append(CalendarLine(LineKind.MONTH_HEADER, current_month))
            previous_month = current_month

        summary = "\t".join(
            [
                period.number,
                period.types,
                period.date_begin.strftime(short_date_format),
                period.date_end.strftime(short_date_format),
            ]
        )
        lines.append(CalendarLine(LineKind.PERIOD, summary))

        if period.information:
            lines.append(CalendarLine(LineKind.INFORMATION, period.information))

    lines.append(CalendarLine(LineKind.LEGEND, legend_text(legend_title, legend)))
    return lines


def render_lines(lines: Iterable[CalendarLine]) -> Iterator[str]:
    """Yield the printed text of each line."""
    for line in lines:
        yield line.render()
