"""
Calendar Tools

Lets the agent establish "today" before making any date decisions.
"""

from services import current_date_info
from .base import Tool, EmptyInput


def get_current_date(params, context):
    return current_date_info()


CALENDAR_TOOLS = [
    Tool(
        'get-current-date',
        'Get the current date, time, day of the week and the next 7 days.',
        EmptyInput,
        get_current_date,
    ),
]
