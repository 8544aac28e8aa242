"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MIN_YEAR = 1
MAX_YEAR = 4
ACADEMIC_YEARS = tuple(range(MIN_YEAR, MAX_YEAR + 1))

MIN_MARKS = 0
MAX_MARKS = 100
PASS_MARKS = 50

MIN_PASSWORD_LENGTH = 6
