from dataclasses import dataclass, field
from typing import Any

from .date_conversion import DEFAULT_TIME_ZONE, LunarDate, solar_to_lunar


@dataclass(frozen=True)
class VietnameseHoliday:
    """A holiday record; two records are equal when they fall on the same date."""

    name: str = field(compare=False)
    name_english: str = field(compare=False)
    day: int
    month: int
    is_lunar: bool
    description: str = field(default="", compare=False)
    emoji: str = field(default="", compare=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "name_english": self.name_english,
            "day": self.day,
            "month": self.month,
            "is_lunar": self.is_lunar,
            "description": self.description,
            "emoji": self.emoji,
        }


# Giỗ Tổ Hùng Vương is dated on the lunar calendar but listed with the
# public solar holidays.
SOLAR_HOLIDAYS = [
    VietnameseHoliday(
        "Tết Dương Lịch", "New Year's Day", 1, 1, False, "Năm mới Dương lịch", "🎊"
    ),
    VietnameseHoliday(
        "Ngày Thành lập Đảng",
        "Vietnamese Communist Party Founding Day",
        3,
        2,
        False,
        "Kỷ niệm ngày thành lập Đảng Cộng sản Việt Nam",
        "🇻🇳",
    ),
    VietnameseHoliday(
        "Giỗ Tổ Hùng Vương",
        "Hung Kings' Temple Festival",
        10,
        3,
        True,
        "Lễ hội tưởng nhớ các vua Hùng",
        "🏛️",
    ),
    VietnameseHoliday(
        "Ngày Giải phóng Miền Nam",
        "Reunification Day",
        30,
        4,
        False,
        "Kỷ niệm ngày thống nhất đất nước",
        "🎆",
    ),
    VietnameseHoliday(
        "Quốc tế Lao động",
        "International Labor Day",
        1,
        5,
        False,
        "Ngày Quốc tế Lao động",
        "👷",
    ),
    VietnameseHoliday(
        "Quốc khánh",
        "National Day",
        2,
        9,
        False,
        "Ngày Quốc khánh nước Cộng hòa Xã hội Chủ nghĩa Việt Nam",
        "🇻🇳",
    ),
]

LUNAR_HOLIDAYS = [
    VietnameseHoliday(
        "Tết Nguyên Đán", "Lunar New Year", 1, 1, True, "Tết Nguyên Đán - Năm mới Âm lịch", "🧧"
    ),
    VietnameseHoliday(
        "Mùng 2 Tết", "Second Day of Tet", 2, 1, True, "Ngày thứ hai của Tết", "🧧"
    ),
    VietnameseHoliday(
        "Mùng 3 Tết", "Third Day of Tet", 3, 1, True, "Ngày thứ ba của Tết", "🧧"
    ),
    VietnameseHoliday(
        "Tết Nguyên Tiêu", "Lantern Festival", 15, 1, True, "Rằm tháng Giêng", "🏮"
    ),
    VietnameseHoliday(
        "Tết Hàn Thực", "Cold Food Festival", 3, 3, True, "Tết Hàn Thực", "🍚"
    ),
    VietnameseHoliday(
        "Lễ Phật Đản",
        "Buddha's Birthday",
        15,
        4,
        True,
        "Phật Đản sinh - Đại lễ Phật giáo",
        "☸️",
    ),
    VietnameseHoliday(
        "Tết Đoan Ngọ",
        "Dragon Boat Festival",
        5,
        5,
        True,
        "Tết Đoan Ngọ - Tết diệt sâu bọ",
        "🐉",
    ),
    VietnameseHoliday(
        "Vu Lan", "Vu Lan Festival", 15, 7, True, "Lễ Vu Lan - Ngày Cha Mẹ Việt Nam", "🌹"
    ),
    VietnameseHoliday(
        "Tết Trung Thu",
        "Mid-Autumn Festival",
        15,
        8,
        True,
        "Tết Trung Thu - Tết Thiếu nhi",
        "🥮",
    ),
    VietnameseHoliday(
        "Tết Trùng Cửu", "Double Ninth Festival", 9, 9, True, "Tết Trùng Cửu", "🍁"
    ),
    VietnameseHoliday(
        "Tết Hạ Nguyên", "Lower Yuan Festival", 15, 10, True, "Tết Hạ Nguyên", "🕯️"
    ),
    VietnameseHoliday(
        "Ông Công - Ông Táo",
        "Kitchen God Festival",
        23,
        12,
        True,
        "Tiễn ông Táo về trời",
        "🍪",
    ),
    VietnameseHoliday(
        "Giao Thừa", "New Year's Eve", 30, 12, True, "Đêm Giao Thừa", "🎆"
    ),
]


def is_special_lunar_day(lunar_date: LunarDate) -> tuple[bool, str]:
    """Flag the new-moon (Sóc) and full-moon (Vọng) days of a lunar month."""
    if lunar_date.day == 1:
        return True, "Mồng 1 - Sóc"
    if lunar_date.day == 15:
        return True, "Rằm - Vọng"
    return False, ""


def get_holidays_for_solar_date(
    dd: int,
    mm: int,
    yy: int,
    time_zone: float = DEFAULT_TIME_ZONE,
    lunar_date: LunarDate | None = None,
) -> list[VietnameseHoliday]:
    """Collect solar- and lunar-dated holidays falling on a Gregorian date."""
    holidays = [
        holiday
        for holiday in SOLAR_HOLIDAYS
        if not holiday.is_lunar and holiday.day == dd and holiday.month == mm
    ]
    if lunar_date is None:
        lunar_date = solar_to_lunar(dd, mm, yy, time_zone)
    lunar_dated = [h for h in LUNAR_HOLIDAYS if h.is_lunar]
    lunar_dated += [h for h in SOLAR_HOLIDAYS if h.is_lunar]
    for holiday in lunar_dated:
        if holiday.day == lunar_date.day and holiday.month == lunar_date.month:
            holidays.append(holiday)
    return holidays


def get_holidays_for_month(month: int, is_lunar: bool) -> list[VietnameseHoliday]:
    if is_lunar:
        return [h for h in LUNAR_HOLIDAYS if h.month == month and h.is_lunar]
    return [h for h in SOLAR_HOLIDAYS if h.month == month and not h.is_lunar]
