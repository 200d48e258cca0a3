"""
This module defines the central facade for the collection calendar.
"""

import logging
from typing import List, Optional

from .models import CalendarConfig, CalendarLine
from .services.calendar_formatter import format_calendar
from .services.period_aggregator import aggregate_periods
from .services.record_filter import filter_records
from .services.schedule_loader import ScheduleLoader

logger = logging.getLogger(__name__)


class CalendarFacade:
    """
    The central entry point for building a calendar.
    It runs the loader, filter, aggregator and formatter one after the other.
    """

    def __init__(
        self, schedule_loader: ScheduleLoader, config: Optional[CalendarConfig] = None
    ):
        self.schedule_loader = schedule_loader
        self.config = config or CalendarConfig()

    def build_calendar(self, source: str) -> List[CalendarLine]:
        """
        Builds the printable calendar of the configured district.

        Args:
            source: The path or URL of the schedule document.

        Returns:
            The calendar lines, legend included.

        Raises:
            OSError: If the document cannot be read.
            DownloadError: If the document cannot be downloaded.
            ParsingError: If the document or one of its dates is malformed.
        """
        records = self.schedule_loader.load(source)

        district_records = list(filter_records(records, self.config.district))
        logger.info(
            f"Kept {len(district_records)} of {len(records)} records for '{self.config.district}'."
        )
        if not district_records:
            logger.info(f"No collection found for district '{self.config.district}'.")

        periods = aggregate_periods(district_records, self.config.date_format)
        logger.info(f"Aggregated {len(periods)} periods.")

        return format_calendar(
            periods,
            short_date_format=self.config.short_date_format,
            legend_title=self.config.legend_title,
            legend=self.config.legend,
        )
