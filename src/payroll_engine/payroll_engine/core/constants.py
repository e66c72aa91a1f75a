"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

CURRENCY_PLACES = 2
CENT = Decimal("0.01")

MINUTES_PER_HOUR = Decimal("60")
MONTHS_PER_YEAR = 12

# Original default shift is 09:30 - 18:30.
DEFAULT_SHIFT_HOURS = Decimal("9")
DEFAULT_HALF_DAY_MULTIPLIER = Decimal("0.5")
DEFAULT_MAX_WORKERS = 4
