"""
Planning Errors

Domain errors raised by the meal planning services. Storage errors
(e.g. an unknown family id hitting a foreign key) are not wrapped here;
they propagate from SQLAlchemy unchanged.
"""


class PlanningError(Exception):
    """Base class for meal planning domain errors."""
    pass


class OverlapError(PlanningError):
    """Raised when a date range overlaps existing meal plannings of the same family."""

    def __init__(self, conflicting_plannings, message=None):
        self.conflicting_plannings = list(conflicting_plannings)
        if message is None:
            ranges = ', '.join(p.describe_range() for p in self.conflicting_plannings)
            message = f"Date range overlaps with existing meal planning(s): {ranges}"
        super().__init__(message)

    @property
    def conflicting_ranges(self):
        return [(p.start_date, p.end_date) for p in self.conflicting_plannings]


class NotFoundError(PlanningError):
    """Raised when a mutation targets a record that does not exist."""

    def __init__(self, kind, record_id):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} with id {record_id} not found")


class InvalidDateError(PlanningError):
    """Raised when a value is not a YYYY-MM-DD calendar date."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid date {value!r}, expected YYYY-MM-DD")


class InvalidDateRangeError(PlanningError):
    """Raised when a start date falls after its end date."""

    def __init__(self, start_date, end_date):
        self.start_date = start_date
        self.end_date = end_date
        super().__init__(f"Start date {start_date} is after end date {end_date}")


class InvalidStatusError(PlanningError):
    """Raised for a planning status outside draft/active/completed."""
    pass


class InvalidMealTypeError(PlanningError):
    """Raised for a meal type outside the supported meal slots."""
    pass


class PlanningMismatchError(PlanningError):
    """Raised when an event names a planning of another family or one not covering its date."""

    def __init__(self, planning, family_id, day):
        self.planning = planning
        self.family_id = family_id
        self.day = day
        super().__init__(
            f"Meal planning {planning.id} ({planning.describe_range()}) "
            f"does not cover {day} for family {family_id}"
        )
