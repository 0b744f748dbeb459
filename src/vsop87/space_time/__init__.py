from .julian import (
    J2000,
    DAYS_PER_JULIAN_MILLENNIUM,
    julian_millennia_since_j2000,
    datetime_to_julian,
    julian_to_datetime,
)

__all__ = [
    "J2000",
    "DAYS_PER_JULIAN_MILLENNIUM",
    "julian_millennia_since_j2000",
    "datetime_to_julian",
    "julian_to_datetime",
]
