import datetime
import logging
from typing import Any

from .auspicious_hours import day_branch, get_auspicious_hours
from .can_chi import (
    can_chi,
    day_can_chi_from_jd,
    lunar_month_name,
    month_can_chi,
    zodiac_animal,
    zodiac_animal_common,
    zodiac_animal_english,
)
from .config import get_settings
from .date_conversion import (
    SOLAR_TERMS,
    LunarDate,
    get_solar_term,
    jd_from_date,
    lunar_to_solar,
    solar_to_lunar,
)
from .holidays import get_holidays_for_solar_date, is_special_lunar_day

log = logging.getLogger(__name__)

DAYS = ["Thứ Hai", "Thứ Ba", "Thứ Tư", "Thứ Năm", "Thứ Sáu", "Thứ Bảy", "Chủ Nhật"]

CONVERSION_TYPES = ("s2l", "l2s")

TRUE_VALUES = frozenset({"true", "1", "yes", "on"})
FALSE_VALUES = frozenset({"false", "0", "no", "off", ""})

FIELD_MAPPING = {
    "weekday_vi": "Thứ (tiếng Việt)",
    "relative_to": "Ngày Dương lịch mốc để so sánh (luôn là ngày hiện tại)",
    "full_solar_date_vi": "Ngày Dương lịch đầy đủ",
    "full_lunar_date_vi": "Ngày Âm lịch đầy đủ",
    "can_chi.full_can_chi_date_vi": "Ngày Can Chi đầy đủ",
    "zodiac": "Con giáp của năm Âm lịch",
    "special_day": "Ngày Sóc (mồng 1) hoặc Vọng (rằm)",
    "holidays": "Ngày lễ trùng với ngày này",
    "solar_term": "Tiết khí",
    "auspicious_hours": "Giờ Hoàng Đạo / Hắc Đạo",
}


def validate_date(date: str) -> bool:
    """Validate if a string is in YYYY-MM-DD format."""
    try:
        datetime.date.fromisoformat(date)
        return True
    except (TypeError, ValueError):
        return False


def split_date(date: str) -> tuple[int, int, int]:
    """Split a date string (YYYY-MM-DD) into day, month, and year."""
    current_date = datetime.date.fromisoformat(date)
    return current_date.day, current_date.month, current_date.year


def parse_flag(value: Any) -> bool | None:
    """Read a boolean keyword that may arrive as a string; None if unreadable."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, int):
        return value != 0
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    return None


def get_number_of_days(day: int, month: int, year: int) -> int:
    """Calculate the day difference between today and a given date."""
    return (datetime.date(year, month, day) - datetime.date.today()).days


def describe_day(
    day: int, month: int, year: int, time_zone: float
) -> dict[str, Any]:
    """Assemble every derived fact about one solar day."""
    day_number = jd_from_date(day, month, year)
    lunar_date = solar_to_lunar(day, month, year, time_zone)
    weekday = DAYS[datetime.date(year, month, day).weekday()]
    can_chi_day = day_can_chi_from_jd(day_number)
    can_chi_month = month_can_chi(lunar_date.month, lunar_date.year)
    can_chi_year = can_chi(lunar_date.year)
    is_special, special_name = is_special_lunar_day(lunar_date)
    days = get_number_of_days(day, month, year)
    holidays = get_holidays_for_solar_date(
        day, month, year, time_zone, lunar_date=lunar_date
    )
    return {
        "solar_date": datetime.date(year, month, day).isoformat(),
        "lunar_date": lunar_date.to_dict(),
        "lunar_date_display": lunar_date.display,
        "weekday_vi": weekday,
        "difference_days": abs(days),
        "difference_direction": "days_remaining" if days >= 0 else "days_elapsed",
        "relative_to": datetime.date.today().isoformat(),
        "full_solar_date_vi": f"{weekday} ngày {day} tháng {month} năm {year}",
        "full_lunar_date_vi": (
            f"{weekday} ngày {lunar_date.day} tháng "
            f"{lunar_month_name(lunar_date.month, lunar_date.is_leap_month)} "
            f"năm {can_chi_year}"
        ),
        "can_chi": {
            "day": can_chi_day,
            "month": can_chi_month,
            "year": can_chi_year,
            "day_branch": day_branch(day_number),
            "full_can_chi_date_vi": f"{weekday} ngày {can_chi_day} tháng {can_chi_month} năm {can_chi_year}",
        },
        "zodiac": {
            "branch": zodiac_animal(lunar_date.year),
            "animal_vi": zodiac_animal_common(lunar_date.year),
            "animal_en": zodiac_animal_english(lunar_date.year),
        },
        "special_day": {"is_special": is_special, "name": special_name},
        "holidays": [holiday.to_dict() for holiday in holidays],
        "solar_term": SOLAR_TERMS[get_solar_term(day_number + 1, time_zone)],
        "auspicious_hours": [hour.to_dict() for hour in get_auspicious_hours(day_number)],
    }


def date_conversion_tool(conversion_type: str, date: str, **kwargs) -> dict[str, Any]:
    """Convert between Solar (Dương lịch) and Lunar (Âm lịch) dates.

    conversion_type is "s2l" (solar to lunar) or "l2s" (lunar to solar);
    date is YYYY-MM-DD. For l2s, the leap_month keyword marks a leap month.
    A time_zone keyword overrides the configured offset in hours. Failures
    are reported as {"error": ...} rather than raised.
    """
    if not all([conversion_type, date]):
        return {
            "error": "Missing one or more required arguments: conversion_type, date"
        }

    if conversion_type not in CONVERSION_TYPES:
        return {"error": "Wrong Conversion Type: conversion_type must be s2l or l2s"}

    if not validate_date(date):
        return {"error": "Invalid date format: YYYY-MM-DD"}

    settings = get_settings()
    try:
        time_zone = float(kwargs.get("time_zone", settings.time_zone))
    except (TypeError, ValueError):
        return {"error": "Invalid time_zone: must be a number of hours"}

    day, month, year = split_date(date)
    if conversion_type == "s2l":
        try:
            response = {"mode": "s2l"}
            response.update(describe_day(day, month, year, time_zone))
        except Exception as error:
            log.error(f"{__name__}: s2l failed for '{date}': {error}")
            return {
                "error": f"Error converting Solar date {date} to Lunar date: {error}"
            }
    else:
        if day > 30:
            return {"error": "Invalid date: Lunar day must be less than or equal to 30"}
        leap_month = parse_flag(kwargs.get("leap_month", False))
        if leap_month is None:
            return {"error": "Invalid leap_month: must be true or false"}
        try:
            solar_date = lunar_to_solar(day, month, year, leap_month, time_zone)
            # Day 30 of a 29-day month lands on the next month's first day.
            if solar_date is None or solar_to_lunar(
                solar_date.day, solar_date.month, solar_date.year, time_zone
            ) != LunarDate(day, month, year, leap_month):
                return {
                    "error": f"Invalid lunar date: Day {day} Month {month} (Leap: {leap_month}) Year {year} does not exist."
                }
            response = {"mode": "l2s", "requested_lunar_date": date}
            response.update(
                describe_day(solar_date.day, solar_date.month, solar_date.year, time_zone)
            )
        except Exception as error:
            log.error(f"{__name__}: l2s failed for '{date}' {kwargs}: {error}")
            return {
                "error": f"Error converting Lunar date {date} {kwargs} to Solar date: {error}"
            }

    response["locale"] = settings.locale
    response["timezone"] = settings.timezone_name
    response["time_zone_offset"] = time_zone
    response["field_mapping"] = FIELD_MAPPING
    return response
