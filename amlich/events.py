from enum import Enum

from .date_conversion import DEFAULT_TIME_ZONE, solar_to_lunar


class RepeatType(str, Enum):
    NEVER = "never"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    LUNAR_MONTHLY = "lunar_monthly"
    LUNAR_YEARLY = "lunar_yearly"

    @property
    def display_name(self) -> str:
        return REPEAT_TYPE_NAMES[self]


REPEAT_TYPE_NAMES = {
    RepeatType.NEVER: "Không lặp lại",
    RepeatType.DAILY: "Hàng ngày",
    RepeatType.WEEKLY: "Hàng tuần",
    RepeatType.MONTHLY: "Hàng tháng",
    RepeatType.YEARLY: "Hàng năm",
    RepeatType.LUNAR_MONTHLY: "Hàng tháng (Âm lịch)",
    RepeatType.LUNAR_YEARLY: "Hàng năm (Âm lịch)",
}


def is_event_on_lunar_date(
    lunar_day: int | None,
    lunar_month: int | None,
    repeat_type: RepeatType | str,
    dd: int,
    mm: int,
    yy: int,
    time_zone: float = DEFAULT_TIME_ZONE,
) -> bool:
    """Check whether a lunar-anchored event occurs on a Gregorian date.

    Monthly lunar events match on the lunar day alone. Yearly and one-off
    events match on lunar day and month. Solar repeat types never match here.
    """
    if lunar_day is None or lunar_month is None:
        return False
    try:
        repeat_type = RepeatType(repeat_type)
    except ValueError:
        return False
    lunar_date = solar_to_lunar(dd, mm, yy, time_zone)
    if repeat_type is RepeatType.LUNAR_MONTHLY:
        return lunar_date.day == lunar_day
    if repeat_type in (RepeatType.LUNAR_YEARLY, RepeatType.NEVER):
        return lunar_date.day == lunar_day and lunar_date.month == lunar_month
    return False
