"""Julian Date helpers built on rms-julian."""

from __future__ import annotations

import math

import julian

from jpl2mpc.constants import JD_OF_J2000_MIDNIGHT, SECONDS_PER_DAY


def day_sec_from_jd(jd: float) -> tuple[int, float]:
    """Split a Julian Date into (day, sec), day counted from 2000-01-01.

    No leap seconds are involved; Horizons vector tables are in TDB.
    julian.day_sec_from_jd is not used here because it treats the JD as
    UTC and folds leap seconds into the seconds count.

    Parameters:
        jd: Julian Date.

    Returns:
        (day, sec) with 0 <= sec < 86400.
    """
    days = jd - JD_OF_J2000_MIDNIGHT
    day = math.floor(days)
    sec = (days - day) * SECONDS_PER_DAY
    return (int(day), float(sec))


def format_jd(jd: float) -> str:
    """Format a TDB Julian Date as calendar text (e.g. '2019-10-07 00:00:00.000 TDB').

    Parameters:
        jd: Julian Date.

    Returns:
        Calendar date and time string.
    """
    day, sec = day_sec_from_jd(jd)
    year, month, mday = julian.ymd_from_day(day)
    hour, minute, second = julian.hms_from_sec(sec)
    return (
        f'{int(year):04d}-{int(month):02d}-{int(mday):02d} '
        f'{int(hour):02d}:{int(minute):02d}:{float(second):06.3f} TDB'
    )
