"""
Planning Constants

Whitelists and formats used by meal planning periods and meal events.
"""

# Lifecycle labels for a meal planning period (no enforced transition order)
PLANNING_STATUSES = ('draft', 'active', 'completed')
DEFAULT_PLANNING_STATUS = 'draft'

# Meal slots an event can occupy
MEAL_TYPES = ('breakfast', 'lunch', 'dinner', 'snack')

# Calendar dates are exchanged as YYYY-MM-DD strings everywhere
DATE_FORMAT = '%Y-%m-%d'
TIME_FORMAT = '%H:%M'

# Python weekday() numbering: Monday=0 .. Sunday=6. Planning weeks run Sunday to Saturday.
WEEK_START_WEEKDAY = 6
DAYS_IN_WEEK = 7

DAY_NAMES = ('Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday', 'Sunday')

