"""
Meal Event Tools

Agent tools for meal events. Creating an event attaches it to the planning
covering its date.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from services import OverlapError
from .base import Tool, overlap_result
from .planning_tools import DATE_PATTERN


class GetEventsInput(BaseModel):
    family_id: str = Field(description='The family ID')
    start_date: str = Field(pattern=DATE_PATTERN, description='First day of the range (YYYY-MM-DD)')
    end_date: str = Field(pattern=DATE_PATTERN, description='Last day of the range, inclusive (YYYY-MM-DD)')


class CreateEventInput(BaseModel):
    family_id: str = Field(description='The family ID')
    date: str = Field(pattern=DATE_PATTERN, description='Day of the meal (YYYY-MM-DD)')
    meal_type: Literal['breakfast', 'lunch', 'dinner', 'snack']
    recipe_name: Optional[str] = Field(default=None, max_length=200)
    participants: List[str] = Field(default_factory=list, description='Member IDs eating this meal')
    planning_id: Optional[str] = Field(default=None, description='Omit to use the planning covering the date')


class UpdateEventInput(BaseModel):
    id: str = Field(description='The meal event ID')
    recipe_name: Optional[str] = Field(default=None, max_length=200)
    participants: Optional[List[str]] = Field(default=None, description='Replaces the member IDs eating this meal')


class DeleteEventInput(BaseModel):
    id: str = Field(description='The meal event ID')


def get_events(params, context):
    events = context.event_service.list_events(params.family_id, params.start_date, params.end_date)
    return [e.to_dict() for e in events]


def create_event(params, context):
    try:
        event = context.event_service.create_event(
            params.family_id,
            params.date,
            params.meal_type,
            recipe_name=params.recipe_name,
            participants=params.participants,
            planning_id=params.planning_id,
        )
    except OverlapError as e:
        return overlap_result(e)
    return event.to_dict()


def update_event(params, context):
    event = context.event_service.update_event(
        params.id, recipe_name=params.recipe_name, participants=params.participants
    )
    return event.to_dict()


def delete_event(params, context):
    deleted_id = context.event_service.delete_event(params.id)
    return {'success': True, 'deleted_id': deleted_id}


EVENT_TOOLS = [
    Tool(
        'get-meal-events',
        'Get meal events for a family within a date range.',
        GetEventsInput,
        get_events,
    ),
    Tool(
        'create-meal-event',
        'Create a single meal event. The event joins the meal planning covering its date.',
        CreateEventInput,
        create_event,
    ),
    Tool(
        'update-meal-event',
        'Change the recipe or participants of a meal event.',
        UpdateEventInput,
        update_event,
    ),
    Tool(
        'delete-meal-event',
        'Delete a meal event.',
        DeleteEventInput,
        delete_event,
    ),
]
