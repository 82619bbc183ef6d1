"""
Database Base Module

Creates the SQLAlchemy database instance that all models inherit from,
plus the id and timestamp helpers shared by every table.
This is separate to avoid circular imports.
"""

import uuid
from datetime import datetime, timezone

from flask_sqlalchemy import SQLAlchemy

# Create the SQLAlchemy instance
# This will be initialized with the Flask app in app.py
db = SQLAlchemy()


def generate_id():
    """Return a new opaque record id."""
    return str(uuid.uuid4())


def now():
    """Current UTC timestamp as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat(timespec='microseconds')
