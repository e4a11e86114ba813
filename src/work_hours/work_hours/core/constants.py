"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DATE_FORMAT = "%Y-%m-%d"
CLOCK_FORMAT = "%H:%M"

DEFAULT_SESSION_DAYS = 7

# Monday..Friday as returned by date.weekday()
WORKDAYS = (0, 1, 2, 3, 4)

HOLIDAY_REFERENCE_WEEKS = 5
HOLIDAY_ENTITLEMENT_FRACTION = 5

SESSION_HOLIDAY_CARRY = "saved_holiday_hours"
SESSION_WEEKLY_OVERRIDE = "manual_weekly_hours"
