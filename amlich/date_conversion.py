"""
Vietnamese lunar calendar conversion.

Based on the algorithms published by Ho Ngoc Duc (2006),
from the book "Astronomical Algorithms" by Jean Meeus, 1998.

The coefficients below are empirical fit constants. They are reproduced
literally; changing any of them shifts conversion results for real dates.
"""

import logging
import math
from dataclasses import asdict, dataclass
from typing import Any, NamedTuple

log = logging.getLogger(__name__)

DEFAULT_TIME_ZONE = 7.0
GREGORIAN_REFORM_JD = 2299161
SYNODIC_MONTH = 29.530588853
LUNATION_EPOCH = 2415021.076998695
LEAP_SCAN_LIMIT = 14

SOLAR_TERMS = [
    "Xuân Phân",
    "Thanh Minh",
    "Cốc Vũ",
    "Lập Hạ",
    "Tiểu Mãn",
    "Mang Chủng",
    "Hạ Chí",
    "Tiểu Thử",
    "Đại Thử",
    "Lập Thu",
    "Xử Thử",
    "Bạch Lộ",
    "Thu Phân",
    "Hàn Lộ",
    "Sương Giáng",
    "Lập Đông",
    "Tiểu Tuyết",
    "Đại Tuyết",
    "Đông Chí",
    "Tiểu Hàn",
    "Đại Hàn",
    "Lập Xuân",
    "Vũ Thủy",
    "Kinh Trập",
]


@dataclass(frozen=True)
class SolarDate:
    """A proleptic Gregorian (or Julian before 1582-10-15) calendar date."""

    day: int
    month: int
    year: int

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class LunarDate:
    """A day of the Vietnamese lunar calendar, as produced by solar_to_lunar."""

    day: int
    month: int
    year: int
    is_leap_month: bool = False

    @property
    def display(self) -> str:
        prefix = "Nhuận " if self.is_leap_month else ""
        return f"{prefix}{self.day}/{self.month}/{self.year}"

    @property
    def short_display(self) -> str:
        return f"{self.day}/{self.month}"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class LeapMonthScan(NamedTuple):
    offset: int
    iterations: int
    converged: bool


def jd_from_date(dd: int, mm: int, yy: int) -> int:
    """Compute the Julian day number for a given Gregorian date."""
    a = int((14 - mm) / 12.0)
    y = yy + 4800 - a
    m = mm + 12 * a - 3
    jd = (
        dd
        + int((153 * m + 2) / 5.0)
        + 365 * y
        + int(y / 4.0)
        - int(y / 100.0)
        + int(y / 400.0)
        - 32045
    )
    if jd < GREGORIAN_REFORM_JD:
        jd = dd + int((153 * m + 2) / 5.0) + 365 * y + int(y / 4.0) - 32083
    return jd


def jd_to_date(jd: int) -> SolarDate:
    """Convert a Julian day number back to a calendar date."""
    if jd >= GREGORIAN_REFORM_JD:
        a = jd + 32044
        b = int((4 * a + 3) / 146097.0)
        c = a - int((b * 146097) / 4.0)
    else:
        b = 0
        c = jd + 32082

    d = int((4 * c + 3) / 1461.0)
    e = c - int((1461 * d) / 4.0)
    m = int((5 * e + 2) / 153.0)
    day = e - int((153 * m + 2) / 5.0) + 1
    month = m + 3 - 12 * int(m / 10.0)
    year = b * 100 + d - 4800 + int(m / 10.0)
    return SolarDate(day, month, year)


def new_moon(k: int) -> float:
    """Compute the Julian date of the k-th new moon since 1900-01-01."""
    t = k / 1236.85
    t2 = t * t
    t3 = t2 * t
    dr = math.pi / 180.0
    jd1 = 2415020.75933 + 29.53058868 * k + 0.0001178 * t2 - 0.000000155 * t3
    jd1 = jd1 + 0.00033 * math.sin((166.56 + 132.87 * t - 0.009173 * t2) * dr)
    m = 359.2242 + 29.10535608 * k - 0.0000333 * t2 - 0.00000347 * t3
    mpr = 306.0253 + 385.81691806 * k + 0.0107306 * t2 + 0.00001236 * t3
    f = 21.2964 + 390.67050646 * k - 0.0016528 * t2 - 0.00000239 * t3
    c1 = (0.1734 - 0.000393 * t) * math.sin(m * dr) + 0.0021 * math.sin(2 * dr * m)
    c1 = c1 - 0.4068 * math.sin(mpr * dr) + 0.0161 * math.sin(dr * 2 * mpr)
    c1 = c1 - 0.0004 * math.sin(dr * 3 * mpr)
    c1 = c1 + 0.0104 * math.sin(dr * 2 * f) - 0.0051 * math.sin(dr * (m + mpr))
    c1 = c1 - 0.0074 * math.sin(dr * (m - mpr)) + 0.0004 * math.sin(dr * (2 * f + m))
    c1 = (
        c1 - 0.0004 * math.sin(dr * (2 * f - m)) - 0.0006 * math.sin(dr * (2 * f + mpr))
    )
    c1 = (
        c1
        + 0.0010 * math.sin(dr * (2 * f - mpr))
        + 0.0005 * math.sin(dr * (2 * mpr + m))
    )
    if t < -11:
        deltat = (
            0.001
            + 0.000839 * t
            + 0.0002261 * t2
            - 0.00000845 * t3
            - 0.000000081 * t * t3
        )
    else:
        deltat = -0.000278 + 0.000265 * t + 0.000262 * t2
    return jd1 + c1 - deltat


def sun_longitude_degrees(jd: float) -> float:
    """Compute the apparent ecliptic longitude of the sun, in [0, 360)."""
    t = (jd - 2451545.0) / 36525.0
    t2 = t * t
    dr = math.pi / 180.0
    m = 357.52910 + 35999.05030 * t - 0.0001559 * t2 - 0.00000048 * t * t2
    l0 = 280.46645 + 36000.76983 * t + 0.0003032 * t2
    dl = (1.914600 - 0.004817 * t - 0.000014 * t2) * math.sin(dr * m)
    dl += (0.019993 - 0.000101 * t) * math.sin(dr * 2 * m) + 0.000290 * math.sin(
        dr * 3 * m
    )
    longitude = l0 + dl
    return longitude - 360.0 * math.floor(longitude / 360.0)


def sun_longitude(jd: float) -> int:
    """Return the 30-degree sector (0-11) holding the sun at a Julian date."""
    return math.floor(sun_longitude_degrees(jd) / 30.0)


def get_solar_term(day_number: int, time_zone: float = DEFAULT_TIME_ZONE) -> int:
    """Compute the solar term index (0-23) for local midnight of a Julian day."""
    return math.floor(sun_longitude_degrees(day_number - 0.5 - time_zone / 24.0) / 15.0)


def get_new_moon_day(k: int, time_zone: float = DEFAULT_TIME_ZONE) -> int:
    """Round the k-th new moon to the local Julian day it falls on."""
    return math.floor(new_moon(k) + 0.5 + time_zone / 24.0)


def get_lunar_month_11(yy: int, time_zone: float = DEFAULT_TIME_ZONE) -> int:
    """Find the first day of the lunar month holding the winter solstice of a year."""
    off = jd_from_date(31, 12, yy) - 2415021.0
    k = math.floor(off / SYNODIC_MONTH)
    nm = new_moon(k)
    if sun_longitude(nm) >= 9:
        nm = new_moon(k - 1)
    return math.floor(nm + 0.5 + time_zone / 24.0)


def scan_leap_month(a11: int, time_zone: float = DEFAULT_TIME_ZONE) -> LeapMonthScan:
    """Walk lunations after month 11 until the sun's sector stops advancing.

    The returned offset is the zero-based index of the leap month counted
    from a11. The scan is capped at LEAP_SCAN_LIMIT lunations; a capped scan
    still yields the capped offset. time_zone is accepted for symmetry with
    the other helpers, the sector test runs on the raw new-moon instant.
    """
    k = math.floor((a11 - LUNATION_EPOCH) / SYNODIC_MONTH + 0.5)
    i = 1
    arc = sun_longitude(new_moon(k + i))
    while True:
        last = arc
        i += 1
        arc = sun_longitude(new_moon(k + i))
        if arc == last or i >= LEAP_SCAN_LIMIT:
            break
    converged = arc == last
    if not converged:
        log.warning(
            f"{__name__}: leap month scan from jd {a11} hit the {LEAP_SCAN_LIMIT} lunation cap"
        )
    return LeapMonthScan(offset=i - 1, iterations=i, converged=converged)


def get_leap_month_offset(a11: int, time_zone: float = DEFAULT_TIME_ZONE) -> int:
    """Calculate the index of the leap month following the 11th lunar month."""
    return scan_leap_month(a11, time_zone).offset


def solar_to_lunar(
    dd: int, mm: int, yy: int, time_zone: float = DEFAULT_TIME_ZONE
) -> LunarDate:
    """Convert a Gregorian (Solar) date to its corresponding Lunar date."""
    day_number = jd_from_date(dd, mm, yy)
    k = math.floor((day_number - LUNATION_EPOCH) / SYNODIC_MONTH)
    month_start = get_new_moon_day(k + 1, time_zone)
    if month_start > day_number:
        month_start = get_new_moon_day(k, time_zone)
    a11 = get_lunar_month_11(yy, time_zone)
    b11 = a11
    if a11 >= month_start:
        lunar_year = yy
        a11 = get_lunar_month_11(yy - 1, time_zone)
    else:
        lunar_year = yy + 1
        b11 = get_lunar_month_11(yy + 1, time_zone)
    lunar_day = day_number - month_start + 1
    diff = (month_start - a11) // 29
    lunar_leap = False
    lunar_month = diff + 11
    if b11 - a11 > 365:
        leap_month_diff = get_leap_month_offset(a11, time_zone)
        if diff >= leap_month_diff:
            lunar_month = diff + 10
            if diff == leap_month_diff:
                lunar_leap = True
    if lunar_month > 12:
        lunar_month = lunar_month - 12
    if lunar_month >= 11 and diff < 4:
        lunar_year -= 1
    return LunarDate(lunar_day, lunar_month, lunar_year, lunar_leap)


def lunar_to_solar(
    lunar_day: int,
    lunar_month: int,
    lunar_year: int,
    lunar_leap: bool = False,
    time_zone: float = DEFAULT_TIME_ZONE,
) -> SolarDate | None:
    """Convert a Lunar date to its Gregorian date, or None if the leap month does not exist."""
    if lunar_month < 11:
        a11 = get_lunar_month_11(lunar_year - 1, time_zone)
        b11 = get_lunar_month_11(lunar_year, time_zone)
    else:
        a11 = get_lunar_month_11(lunar_year, time_zone)
        b11 = get_lunar_month_11(lunar_year + 1, time_zone)
    k = math.floor(0.5 + (a11 - LUNATION_EPOCH) / SYNODIC_MONTH)
    off = lunar_month - 11
    if off < 0:
        off += 12
    if b11 - a11 > 365:
        leap_off = get_leap_month_offset(a11, time_zone)
        leap_month = leap_off - 2
        if leap_month < 0:
            leap_month += 12
        if lunar_leap and lunar_month != leap_month:
            return None
        elif lunar_leap or off >= leap_off:
            off += 1
    elif lunar_leap:
        return None
    month_start = get_new_moon_day(k + off, time_zone)
    return jd_to_date(month_start + lunar_day - 1)
