"""
Planning Repositories

SQLAlchemy-backed storage for meal plannings and meal events. The services
receive a repository instead of reaching for the global db session, so they
can run against any object offering the same methods.

All date arguments are normalised YYYY-MM-DD strings.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from models import Family, MealPlanning, MealEvent

logger = logging.getLogger(__name__)


class PlanningRepository:
    """Reads and writes MealPlanning rows through one SQLAlchemy session."""

    def __init__(self, session):
        self.session = session

    def _family_query(self, family_id):
        return self.session.query(MealPlanning).filter(MealPlanning.family_id == family_id)

    def find_overlapping(self, family_id, start_date, end_date, exclude_id=None):
        """Plannings of the family sharing at least one day with [start_date, end_date]."""
        query = self._family_query(family_id).filter(
            MealPlanning.start_date <= end_date,
            MealPlanning.end_date >= start_date,
        )
        if exclude_id:
            query = query.filter(MealPlanning.id != exclude_id)
        return query.order_by(MealPlanning.start_date).all()

    def find_containing_date(self, family_id, day):
        return self._family_query(family_id).filter(
            MealPlanning.start_date <= day,
            MealPlanning.end_date >= day,
        ).order_by(MealPlanning.start_date).first()

    def find_by_id(self, planning_id):
        return self.session.get(MealPlanning, planning_id)

    def list_for_family(self, family_id):
        return self._family_query(family_id).order_by(MealPlanning.start_date.desc()).all()

    def latest_for_family(self, family_id):
        return self._family_query(family_id).order_by(MealPlanning.created_at.desc()).first()

    def lock_family(self, family_id):
        """
        Take a row lock on the family before a check-then-write.

        Emits SELECT ... FOR UPDATE where the database supports it
        (PostgreSQL, MySQL); SQLite ignores the clause.
        """
        self.session.query(Family).filter(Family.id == family_id).with_for_update().first()

    def insert(self, planning):
        self.session.add(planning)
        self._commit()
        return planning

    def update(self, planning):
        self._commit()
        return planning

    def _commit(self):
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise


class EventRepository:
    """Reads and writes MealEvent rows through one SQLAlchemy session."""

    def __init__(self, session):
        self.session = session

    def find_by_id(self, event_id):
        return self.session.get(MealEvent, event_id)

    def find_in_range(self, family_id, start_date, end_date):
        return self.session.query(MealEvent).filter(
            MealEvent.family_id == family_id,
            MealEvent.date >= start_date,
            MealEvent.date <= end_date,
        ).order_by(MealEvent.date, MealEvent.created_at).all()

    def find_for_planning(self, planning_id):
        return self.session.query(MealEvent).filter(
            MealEvent.planning_id == planning_id
        ).order_by(MealEvent.date).all()

    def insert(self, event):
        self.session.add(event)
        self._commit()
        return event

    def update(self, event):
        self._commit()
        return event

    def delete(self, event):
        self.session.delete(event)
        self._commit()

    def _commit(self):
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
