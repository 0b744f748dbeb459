"""Julian date helpers.

Conversions between timezone-aware datetimes and Julian dates use the
algorithm from Meeus, "Astronomical Algorithms" (2nd ed.), and only
support Gregorian calendar dates (1583 onwards).
"""

from datetime import datetime, timedelta, timezone

# J2000.0, 2000 January 1.5 TDB
J2000 = 2451545.0
DAYS_PER_JULIAN_MILLENNIUM = 365250.0

# Microsecond precision
JD_PRECISION = 12


def julian_millennia_since_j2000(jd: float) -> float:
    """Time variable of the VSOP87 series: Julian millennia from J2000.0."""
    return (jd - J2000) / DAYS_PER_JULIAN_MILLENNIUM


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Convert a Gregorian date to the Julian Day Number starting at noon.

    Raises:
        ValueError: If date is before 1583 (Gregorian calendar adoption)
    """
    if year < 1583:
        raise ValueError("Dates before 1583 are not supported")

    # Jan & Feb are months 13 & 14 of the previous year
    if month <= 2:
        year -= 1
        month += 12

    a = year // 100
    b = 2 - a + (a // 4)
    return int(365.25 * (year + 4716)) + int(30.6001 * (month + 1)) + day + b - 1524


def datetime_to_julian(dt: datetime) -> float:
    """Convert a timezone-aware datetime to a Julian date.

    Args:
        dt: datetime object (must be timezone-aware)

    Returns:
        Julian date (UTC based)
    """
    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware")

    dt = dt.astimezone(timezone.utc)
    jdn = gregorian_to_jdn(dt.year, dt.month, dt.day)
    seconds = dt.hour * 3600 + dt.minute * 60 + dt.second + dt.microsecond / 1_000_000
    return round(jdn - 0.5 + seconds / 86400, JD_PRECISION)


def julian_to_datetime(jd: float) -> datetime:
    """Convert a Julian date to a UTC datetime, rounded to the microsecond."""
    jd_plus_half = round(jd, JD_PRECISION) + 0.5
    z = int(jd_plus_half)
    f = jd_plus_half - z

    # Gregorian calendar correction
    a = z
    if z >= 2299161:
        alpha = int((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - int(alpha / 4)

    b = a + 1524
    c = int((b - 122.1) / 365.25)
    d = int(365.25 * c)
    e = int((b - d) / 30.6001)

    day = b - d - int(30.6001 * e)
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715

    midnight = datetime(year, month, day, tzinfo=timezone.utc)
    microseconds = round(f * 86400 * 1_000_000)
    return midnight + timedelta(microseconds=microseconds)
