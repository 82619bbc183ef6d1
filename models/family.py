"""
Family Model

Contains the Family model. Family management lives elsewhere; the planner
only needs the table so plannings and events can reference it.
"""

from .base import db, generate_id, now


class Family(db.Model):
    """Household that owns meal plannings and meal events."""
    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    name = db.Column(db.String(100), nullable=False)
    country = db.Column(db.String(2), nullable=False, default='US')  # ISO 3166-1 alpha-2
    language = db.Column(db.String(2), nullable=False, default='en')  # ISO 639-1
    created_at = db.Column(db.String(32), nullable=False, default=now)
    updated_at = db.Column(db.String(32), nullable=False, default=now)
    plannings = db.relationship('MealPlanning', backref='family', lazy=True, cascade='all, delete-orphan')

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'country': self.country,
            'language': self.language,
            'created_at': self.created_at,
            'updated_at': self.updated_at,
        }
