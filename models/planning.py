"""
Meal Planning Models

Contains the MealPlanning model (a date-range planning period for a family)
and the MealEvent model (a single meal slot optionally tied to a period).

Dates are stored as YYYY-MM-DD strings. ISO dates sort in calendar order,
so range comparisons run directly on the columns.
"""

from .base import db, generate_id, now


class MealPlanning(db.Model):
    """Inclusive [start_date, end_date] planning period; periods of one family never overlap."""
    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    family_id = db.Column(db.String(36), db.ForeignKey('family.id', ondelete='CASCADE'), nullable=False, index=True)
    start_date = db.Column(db.String(10), nullable=False)
    end_date = db.Column(db.String(10), nullable=False)
    status = db.Column(db.String(20), nullable=False, default='draft')  # draft, active, completed
    created_at = db.Column(db.String(32), nullable=False, default=now)
    updated_at = db.Column(db.String(32), nullable=False, default=now)

    def describe_range(self):
        """Human readable range, e.g. '2026-01-01 to 2026-01-07'."""
        return f"{self.start_date} to {self.end_date}"

    def to_dict(self):
        return {
            'id': self.id,
            'family_id': self.family_id,
            'start_date': self.start_date,
            'end_date': self.end_date,
            'status': self.status,
            'created_at': self.created_at,
            'updated_at': self.updated_at,
        }

    def __repr__(self):
        return f"<MealPlanning {self.id} {self.describe_range()} {self.status}>"


class MealEvent(db.Model):
    """A single meal (date + meal type) for a family."""
    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    family_id = db.Column(db.String(36), db.ForeignKey('family.id', ondelete='CASCADE'), nullable=False, index=True)
    planning_id = db.Column(db.String(36), db.ForeignKey('meal_planning.id', ondelete='SET NULL'), nullable=True, index=True)
    date = db.Column(db.String(10), nullable=False, index=True)
    meal_type = db.Column(db.String(20), nullable=False)  # breakfast, lunch, dinner, snack
    recipe_name = db.Column(db.String(200), nullable=True)
    participants = db.Column(db.JSON, nullable=False, default=list)  # member ids
    created_at = db.Column(db.String(32), nullable=False, default=now)
    updated_at = db.Column(db.String(32), nullable=False, default=now)
    planning = db.relationship('MealPlanning')

    def to_dict(self):
        return {
            'id': self.id,
            'family_id': self.family_id,
            'planning_id': self.planning_id,
            'date': self.date,
            'meal_type': self.meal_type,
            'recipe_name': self.recipe_name,
            'participants': list(self.participants or []),
            'created_at': self.created_at,
            'updated_at': self.updated_at,
        }
