"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

MONEY_PRECISION = 2
MONEY_MAX = Decimal("1000000")
NET_SALARY_TOLERANCE = Decimal("0.01")

# Largest identifier accepted from the wire (MySQL signed INT).
INT_MAX = 2**31 - 1

MONTH_MIN_YEAR = 1900
MONTH_MAX_YEAR = 2100

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 6

DEFAULT_SESSION_HOURS = 24
