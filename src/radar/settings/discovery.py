"""Event discovery tunables.

Consumed through ``events.conf``; change them here (or in the environment)
instead of in the ranking code.
"""

from decouple import config

# Age band derivation
DISCOVERY_MIN_AGE = config("DISCOVERY_MIN_AGE", default=13, cast=int)
DISCOVERY_MAX_AGE = config("DISCOVERY_MAX_AGE", default=100, cast=int)
DISCOVERY_AGE_SPREAD_MULTIPLIER = config("DISCOVERY_AGE_SPREAD_MULTIPLIER", default=4.0, cast=float)
DISCOVERY_DEFAULT_AVERAGE_AGE = config("DISCOVERY_DEFAULT_AVERAGE_AGE", default=25.0, cast=float)

# Paging
DISCOVERY_OVERFETCH_MULTIPLIER = config("DISCOVERY_OVERFETCH_MULTIPLIER", default=2, cast=int)
DISCOVERY_DEFAULT_PAGE_SIZE = config("DISCOVERY_DEFAULT_PAGE_SIZE", default=25, cast=int)
DISCOVERY_MAX_PAGE_SIZE = config("DISCOVERY_MAX_PAGE_SIZE", default=100, cast=int)
DISCOVERY_MAX_STORE_READS = config("DISCOVERY_MAX_STORE_READS", default=10, cast=int)
# 0 disables the per-request deadline
DISCOVERY_REQUEST_BUDGET_SECONDS = config("DISCOVERY_REQUEST_BUDGET_SECONDS", default=5.0, cast=float)
