# Constants for the meal planner
from .planning import (
    PLANNING_STATUSES, DEFAULT_PLANNING_STATUS, MEAL_TYPES,
    DATE_FORMAT, TIME_FORMAT, WEEK_START_WEEKDAY, DAYS_IN_WEEK,
    DAY_NAMES
)
