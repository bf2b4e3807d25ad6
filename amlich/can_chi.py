from .date_conversion import jd_from_date

CAN = ["Giáp", "Ất", "Bính", "Đinh", "Mậu", "Kỷ", "Canh", "Tân", "Nhâm", "Quý"]

CHI = [
    "Tý",
    "Sửu",
    "Dần",
    "Mão",
    "Thìn",
    "Tỵ",
    "Ngọ",
    "Mùi",
    "Thân",
    "Dậu",
    "Tuất",
    "Hợi",
]

ZODIAC_ANIMALS_EN = [
    "Rat",
    "Ox",
    "Tiger",
    "Cat",
    "Dragon",
    "Snake",
    "Horse",
    "Goat",
    "Monkey",
    "Rooster",
    "Dog",
    "Pig",
]

# Colloquial names; the Vietnamese zodiac has the Cat where others have the Rabbit.
ZODIAC_ANIMALS_COMMON = [
    "Chuột",
    "Trâu",
    "Hổ",
    "Mèo",
    "Rồng",
    "Rắn",
    "Ngựa",
    "Dê",
    "Khỉ",
    "Gà",
    "Chó",
    "Heo",
]

MONTHS = [
    "Giêng",
    "Hai",
    "Ba",
    "Tư",
    "Năm",
    "Sáu",
    "Bảy",
    "Tám",
    "Chín",
    "Mười",
    "Mười Một",
    "Chạp",
]


def pos_mod(a: int, m: int) -> int:
    """Modulo that never returns a negative remainder."""
    return ((a % m) + m) % m


def zodiac_index(year: int) -> int:
    """Position of a lunar year in the twelve-year animal cycle, Tý being 0."""
    return pos_mod(year - 4, 12)


def zodiac_animal(year: int) -> str:
    """Earthly branch naming the zodiac animal of a lunar year."""
    return CHI[zodiac_index(year)]


def zodiac_animal_english(year: int) -> str:
    """English name of the zodiac animal of a lunar year."""
    return ZODIAC_ANIMALS_EN[zodiac_index(year)]


def zodiac_animal_common(year: int) -> str:
    """Everyday Vietnamese name of the zodiac animal, e.g. Chuột for Tý."""
    return ZODIAC_ANIMALS_COMMON[zodiac_index(year)]


def can_chi(year: int) -> str:
    """Sexagenary name of a lunar year, e.g. 2024 -> "Giáp Thìn"."""
    return f"{CAN[pos_mod(year + 6, 10)]} {CHI[pos_mod(year + 8, 12)]}"


def month_can_chi(lunar_month: int, lunar_year: int) -> str:
    """Sexagenary name of a lunar month within its lunar year."""
    stem = CAN[pos_mod(lunar_year * 12 + lunar_month + 3, 10)]
    branch = CHI[pos_mod(lunar_month + 1, 12)]
    return f"{stem} {branch}"


def day_stem_index(jdn: int) -> int:
    """Heavenly stem index of a Julian day number, Giáp being 0."""
    return pos_mod(jdn + 9, 10)


def day_can_chi_from_jd(jdn: int) -> str:
    """Sexagenary name of the day with the given Julian day number."""
    return f"{CAN[day_stem_index(jdn)]} {CHI[pos_mod(jdn + 1, 12)]}"


def day_can_chi(dd: int, mm: int, yy: int) -> str:
    """Sexagenary name of a solar day; repeats every 60 days."""
    return day_can_chi_from_jd(jd_from_date(dd, mm, yy))


def hour_branch_index(hour: int) -> int:
    """Two-hour slot of a clock hour, Tý (23:00-01:00) being 0."""
    return pos_mod(hour + 1, 24) // 2


def hour_can_chi(jdn: int, hour_index: int) -> str:
    """Sexagenary name of a two-hour slot; the Tý hour stem follows the day stem."""
    first_stem = (day_stem_index(jdn) % 5) * 2
    stem = CAN[pos_mod(first_stem + hour_index, 10)]
    return f"{stem} {CHI[pos_mod(hour_index, 12)]}"


def lunar_month_name(lunar_month: int, is_leap_month: bool = False) -> str:
    """Vietnamese month name, suffixed with "nhuận" for a leap month."""
    return MONTHS[pos_mod(lunar_month - 1, 12)] + (" nhuận" if is_leap_month else "")
