"""
Meal Planning Service

Manages a family's meal planning periods: inclusive date ranges that must
never share a calendar day with another period of the same family.

Overlap rule (inclusive bounds):
    existing.start_date <= new.end_date AND existing.end_date >= new.start_date

Periods ending 2026-01-07 and starting 2026-01-07 overlap; a period ending
2026-01-07 followed by one starting 2026-01-08 does not.
"""

import logging

from constants import PLANNING_STATUSES, DEFAULT_PLANNING_STATUS
from models import MealPlanning, generate_id, now
from .dates import parse_date, format_date, normalize_date, week_bounds
from .errors import OverlapError, NotFoundError, InvalidDateRangeError, InvalidStatusError

logger = logging.getLogger(__name__)


def validate_status(status):
    if status not in PLANNING_STATUSES:
        raise InvalidStatusError(
            f"Invalid status {status!r}, expected one of: {', '.join(PLANNING_STATUSES)}"
        )
    return status


def normalize_range(start_date, end_date):
    """Normalise both bounds to YYYY-MM-DD and reject inverted ranges."""
    start = parse_date(start_date)
    end = parse_date(end_date)
    if start > end:
        raise InvalidDateRangeError(format_date(start), format_date(end))
    return format_date(start), format_date(end)


class MealPlanningService:
    """
    Overlap detection, create/update with validation and date resolution.

    The repository is injected; see services.repository.PlanningRepository
    for the methods it must provide.
    """

    def __init__(self, repository):
        self.repository = repository

    def find_overlapping(self, family_id, start_date, end_date, exclude_id=None):
        """Return every planning of the family overlapping the range, minus exclude_id."""
        start, end = normalize_range(start_date, end_date)
        return self.repository.find_overlapping(family_id, start, end, exclude_id=exclude_id)

    def create_planning(self, family_id, start_date, end_date, status=None):
        """
        Create a planning period.

        Raises OverlapError listing every conflicting planning when the range
        shares a day with an existing planning of the family. Not idempotent:
        repeating the same call conflicts with the first result.
        """
        start, end = normalize_range(start_date, end_date)
        status = validate_status(status if status is not None else DEFAULT_PLANNING_STATUS)

        self.repository.lock_family(family_id)
        overlapping = self.repository.find_overlapping(family_id, start, end)
        if overlapping:
            logger.warning("Rejected planning %s to %s for family %s: %d overlapping",
                           start, end, family_id, len(overlapping))
            raise OverlapError(overlapping)

        timestamp = now()
        planning = MealPlanning(
            id=generate_id(),
            family_id=family_id,
            start_date=start,
            end_date=end,
            status=status,
            created_at=timestamp,
            updated_at=timestamp,
        )
        planning = self.repository.insert(planning)
        logger.info("Created planning %s (%s to %s) for family %s", planning.id, start, end, family_id)
        return planning

    def get_planning(self, planning_id):
        """Lookup by id; None when missing."""
        return self.repository.find_by_id(planning_id)

    def list_plannings(self, family_id):
        return self.repository.list_for_family(family_id)

    def latest_planning(self, family_id):
        return self.repository.latest_for_family(family_id)

    def update_planning(self, planning_id, status=None, start_date=None, end_date=None):
        """
        Update status and/or dates of a planning.

        Date changes are checked against the family's other plannings (never
        against the planning itself). Status-only changes skip the check.
        Nothing is written when validation fails.
        """
        planning = self.repository.find_by_id(planning_id)
        if planning is None:
            raise NotFoundError('Meal planning', planning_id)

        if status is not None:
            validate_status(status)

        dates_changed = start_date is not None or end_date is not None
        if dates_changed:
            new_start, new_end = normalize_range(
                start_date if start_date is not None else planning.start_date,
                end_date if end_date is not None else planning.end_date,
            )
            self.repository.lock_family(planning.family_id)
            overlapping = self.repository.find_overlapping(
                planning.family_id, new_start, new_end, exclude_id=planning.id
            )
            if overlapping:
                logger.warning("Rejected moving planning %s to %s to %s: %d overlapping",
                               planning.id, new_start, new_end, len(overlapping))
                raise OverlapError(overlapping)
            planning.start_date = new_start
            planning.end_date = new_end

        if status is not None:
            planning.status = status
        planning.updated_at = now()
        planning = self.repository.update(planning)
        logger.info("Updated planning %s (%s to %s, %s)",
                    planning.id, planning.start_date, planning.end_date, planning.status)
        return planning

    def find_planning_for_date(self, family_id, day):
        """The planning whose range contains day, or None."""
        return self.repository.find_containing_date(family_id, normalize_date(day))

    def resolve_planning_for_date(self, family_id, day):
        """
        Find the planning covering day, creating a draft Sunday-Saturday week if none does.

        An OverlapError from the creation step is raised unchanged, e.g. when a
        concurrent caller created the week first or a neighbouring planning
        covers part of it.
        """
        existing = self.find_planning_for_date(family_id, day)
        if existing is not None:
            return existing

        week_start, week_end = week_bounds(day)
        logger.info("No planning covers %s for family %s, creating week %s to %s",
                    normalize_date(day), family_id, format_date(week_start), format_date(week_end))
        return self.create_planning(
            family_id,
            format_date(week_start),
            format_date(week_end),
            status=DEFAULT_PLANNING_STATUS,
        )
