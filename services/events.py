"""
Meal Event Service

Creates and lists meal events. A new event is attached to the planning
period covering its date, creating a draft week when none exists yet.
"""

import logging

from constants import MEAL_TYPES
from models import MealEvent, generate_id, now
from .dates import normalize_date
from .errors import NotFoundError, InvalidMealTypeError, PlanningMismatchError
from .planning import normalize_range

logger = logging.getLogger(__name__)


def validate_meal_type(meal_type):
    meal_type = (meal_type or '').strip().lower()
    if meal_type not in MEAL_TYPES:
        raise InvalidMealTypeError(
            f"Invalid meal type {meal_type!r}, expected one of: {', '.join(MEAL_TYPES)}"
        )
    return meal_type


class MealEventService:
    """Meal events tied to planning periods through planning_service."""

    def __init__(self, repository, planning_service):
        self.repository = repository
        self.planning_service = planning_service

    def create_event(self, family_id, date, meal_type, recipe_name=None, participants=None, planning_id=None):
        day = normalize_date(date)
        meal_type = validate_meal_type(meal_type)

        if planning_id is None:
            planning_id = self.planning_service.resolve_planning_for_date(family_id, day).id
        else:
            planning = self.planning_service.get_planning(planning_id)
            if planning is None:
                raise NotFoundError('Meal planning', planning_id)
            if planning.family_id != family_id or not planning.start_date <= day <= planning.end_date:
                raise PlanningMismatchError(planning, family_id, day)

        timestamp = now()
        event = MealEvent(
            id=generate_id(),
            family_id=family_id,
            planning_id=planning_id,
            date=day,
            meal_type=meal_type,
            recipe_name=recipe_name,
            participants=list(participants or []),
            created_at=timestamp,
            updated_at=timestamp,
        )
        event = self.repository.insert(event)
        logger.info("Created %s event %s on %s in planning %s", meal_type, event.id, day, planning_id)
        return event

    def get_event(self, event_id):
        return self.repository.find_by_id(event_id)

    def list_events(self, family_id, start_date, end_date):
        """Events of the family dated within [start_date, end_date], oldest first."""
        start, end = normalize_range(start_date, end_date)
        return self.repository.find_in_range(family_id, start, end)

    def list_events_for_planning(self, planning_id):
        return self.repository.find_for_planning(planning_id)

    def update_event(self, event_id, recipe_name=None, participants=None):
        event = self.repository.find_by_id(event_id)
        if event is None:
            raise NotFoundError('Meal event', event_id)
        if recipe_name is not None:
            event.recipe_name = recipe_name
        if participants is not None:
            event.participants = list(participants)
        event.updated_at = now()
        return self.repository.update(event)

    def delete_event(self, event_id):
        event = self.repository.find_by_id(event_id)
        if event is None:
            raise NotFoundError('Meal event', event_id)
        self.repository.delete(event)
        logger.info("Deleted event %s", event_id)
        return event_id
