"""
This module provides a factory for creating the application's core components.
"""
from typing import Optional

from collection_calendar.facade import CalendarFacade
from collection_calendar.models import CalendarConfig
from collection_calendar.services.schedule_loader import ScheduleLoader


def create_facade(config: Optional[CalendarConfig] = None) -> CalendarFacade:
    """
    Initializes and returns the CalendarFacade with all its dependencies.
    """
    schedule_loader = ScheduleLoader()
    return CalendarFacade(schedule_loader=schedule_loader, config=config)
