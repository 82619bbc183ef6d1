"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db, generate_id, now

from .family import Family
from .planning import MealPlanning, MealEvent

__all__ = [
    'db',
    'generate_id',
    'now',
    'Family',
    'MealPlanning',
    'MealEvent',
]
