"""
Calendar-day windows for appointment filtering.

Days are ``YYYY-MM-DD`` strings expanded to naive datetimes covering
00:00:00.000 through 23:59:59.999. No time zone conversion is applied.
"""

from datetime import date, datetime, time
from typing import Optional, Tuple


DAY_FORMAT = "%Y-%m-%d"

# MongoDB stores datetimes with millisecond precision
END_OF_DAY = time(23, 59, 59, 999000)


def parse_day(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` string, raising ValueError when malformed."""
    return datetime.strptime(value.strip(), DAY_FORMAT).date()


def day_bounds(start_day: date, end_day: Optional[date] = None) -> Tuple[datetime, datetime]:
    """Return the first and last instant of the inclusive range of days."""
    end_day = end_day or start_day
    return datetime.combine(start_day, time.min), datetime.combine(end_day, END_OF_DAY)


def resolve_window(
    start_date: Optional[str],
    end_date: Optional[str]
) -> Optional[Tuple[datetime, datetime]]:
    """
    Build the start-time window for an appointment listing.
    
    Both dates give an inclusive range, a start date alone gives that
    single day, and an end date alone gives no window at all.
    
    Raises:
        ValueError: If a supplied date cannot be parsed
    """
    if not start_date:
        return None
    if end_date:
        return day_bounds(parse_day(start_date), parse_day(end_date))
    return day_bounds(parse_day(start_date))
