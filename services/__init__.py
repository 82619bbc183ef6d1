"""
Services Package

Business logic modules for the meal planner.
"""

from .errors import (
    PlanningError,
    OverlapError,
    NotFoundError,
    InvalidDateError,
    InvalidDateRangeError,
    InvalidStatusError,
    InvalidMealTypeError,
    PlanningMismatchError,
)

from .dates import (
    parse_date,
    format_date,
    normalize_date,
    week_bounds,
    current_date_info,
)

from .repository import (
    PlanningRepository,
    EventRepository,
)

from .planning import MealPlanningService
from .events import MealEventService


def create_services(session):
    """Wire the planning and event services onto one database session."""
    planning_service = MealPlanningService(PlanningRepository(session))
    event_service = MealEventService(EventRepository(session), planning_service)
    return planning_service, event_service


__all__ = [
    # Errors
    'PlanningError',
    'OverlapError',
    'NotFoundError',
    'InvalidDateError',
    'InvalidDateRangeError',
    'InvalidStatusError',
    'InvalidMealTypeError',
    'PlanningMismatchError',
    # Dates
    'parse_date',
    'format_date',
    'normalize_date',
    'week_bounds',
    'current_date_info',
    # Storage
    'PlanningRepository',
    'EventRepository',
    # Services
    'MealPlanningService',
    'MealEventService',
    'create_services',
]
