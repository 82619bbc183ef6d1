"""
Meal Planning Tools

Agent tools for creating, reading, updating and resolving meal planning periods.
"""

import logging
from typing import Literal, Optional

from pydantic import BaseModel, Field

from services import OverlapError
from .base import Tool, overlap_result

logger = logging.getLogger(__name__)

DATE_PATTERN = r'^\d{4}-\d{1,2}-\d{1,2}$'

PlanningStatus = Literal['draft', 'active', 'completed']


class CreatePlanningInput(BaseModel):
    family_id: str = Field(description='The family ID')
    start_date: str = Field(pattern=DATE_PATTERN, description='First day of the planning (YYYY-MM-DD)')
    end_date: str = Field(pattern=DATE_PATTERN, description='Last day of the planning, inclusive (YYYY-MM-DD)')
    status: Optional[PlanningStatus] = Field(default=None, description='Defaults to draft')


class GetPlanningInput(BaseModel):
    id: str = Field(description='The meal planning ID')


class UpdatePlanningInput(BaseModel):
    id: str = Field(description='The meal planning ID')
    status: Optional[PlanningStatus] = Field(default=None, description='New status for the meal planning')
    start_date: Optional[str] = Field(default=None, pattern=DATE_PATTERN, description='New first day (YYYY-MM-DD)')
    end_date: Optional[str] = Field(default=None, pattern=DATE_PATTERN, description='New last day (YYYY-MM-DD)')


class ResolvePlanningInput(BaseModel):
    family_id: str = Field(description='The family ID')
    date: str = Field(pattern=DATE_PATTERN, description='A day the planning must cover (YYYY-MM-DD)')


def create_planning(params, context):
    try:
        planning = context.planning_service.create_planning(
            params.family_id, params.start_date, params.end_date, status=params.status
        )
    except OverlapError as e:
        return overlap_result(e)
    return planning.to_dict()


def get_planning(params, context):
    planning = context.planning_service.get_planning(params.id)
    if planning is None:
        return {'found': False}
    return {'found': True, 'planning': planning.to_dict()}


def update_planning(params, context):
    # NotFoundError propagates: updating a missing planning is a failed command
    try:
        planning = context.planning_service.update_planning(
            params.id,
            status=params.status,
            start_date=params.start_date,
            end_date=params.end_date,
        )
    except OverlapError as e:
        return overlap_result(e)
    return planning.to_dict()


def resolve_planning(params, context):
    service = context.planning_service
    try:
        planning = service.resolve_planning_for_date(params.family_id, params.date)
    except OverlapError:
        # Another request may have created the week between our read and write
        logger.info("Overlap while resolving %s for family %s, retrying once", params.date, params.family_id)
        try:
            planning = service.resolve_planning_for_date(params.family_id, params.date)
        except OverlapError as e:
            return overlap_result(e)
    return planning.to_dict()


PLANNING_TOOLS = [
    Tool(
        'create-meal-planning',
        'Create a new meal planning cycle for a date range. Fails with the conflicting '
        'plannings when the range overlaps an existing planning of the family.',
        CreatePlanningInput,
        create_planning,
    ),
    Tool(
        'get-meal-planning',
        'Get a meal planning by ID.',
        GetPlanningInput,
        get_planning,
    ),
    Tool(
        'update-meal-planning',
        'Update a meal planning. Use to move it from draft to active (when the user approves) '
        'or to completed, or to change its dates.',
        UpdatePlanningInput,
        update_planning,
    ),
    Tool(
        'resolve-meal-planning-for-date',
        'Get the meal planning covering a date, creating a draft Sunday to Saturday week if none exists.',
        ResolvePlanningInput,
        resolve_planning,
    ),
]
