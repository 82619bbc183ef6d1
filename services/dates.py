"""
Calendar Date Service

Parsing and formatting of YYYY-MM-DD dates and the Sunday to Saturday
week arithmetic used to auto-create planning periods.
"""

from datetime import date, datetime, timedelta

from constants import DATE_FORMAT, TIME_FORMAT, WEEK_START_WEEKDAY, DAYS_IN_WEEK, DAY_NAMES
from .errors import InvalidDateError


def parse_date(value):
    """
    Parse a calendar date.

    Accepts a date, a datetime (time part dropped) or a 'YYYY-MM-DD' string.
    Raises InvalidDateError for anything else.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDateError(value)
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError:
        raise InvalidDateError(value) from None


def format_date(value):
    """Format a date as YYYY-MM-DD, zero-padding years below 1000."""
    return value.isoformat()


def normalize_date(value):
    """Parse then re-format, so '2026-1-5' and date(2026, 1, 5) both become '2026-01-05'."""
    return format_date(parse_date(value))


def week_bounds(value):
    """
    Return (start, end) of the week containing value.

    Weeks start on Sunday and end on Saturday (not the ISO Monday start).
    2026-01-01 is a Thursday, so its week is 2025-12-28 .. 2026-01-03.
    """
    day = parse_date(value)
    offset = (day.weekday() - WEEK_START_WEEKDAY) % DAYS_IN_WEEK
    start = day - timedelta(days=offset)
    return start, start + timedelta(days=DAYS_IN_WEEK - 1)


def day_name(value):
    return DAY_NAMES[parse_date(value).weekday()]


def current_date_info(current=None):
    """
    Describe "today" for the planner agent.

    Returns the current date, weekday name, HH:MM time and the next seven
    days (today included) as {date, day} pairs.
    """
    if current is None:
        current = datetime.now()
    today = current.date()
    next_days = []
    for i in range(DAYS_IN_WEEK):
        d = today + timedelta(days=i)
        next_days.append({'date': format_date(d), 'day': day_name(d)})
    return {
        'current_date': format_date(today),
        'current_day': day_name(today),
        'current_time': current.strftime(TIME_FORMAT),
        'next_7_days': next_days,
    }
