from amlich.date_conversion import LunarDate
from amlich.holidays import (
    LUNAR_HOLIDAYS,
    SOLAR_HOLIDAYS,
    VietnameseHoliday,
    get_holidays_for_month,
    get_holidays_for_solar_date,
    is_special_lunar_day,
)


def _names(holidays):
    return [holiday.name for holiday in holidays]


class TestSpecialDays:
    def test_new_moon_day(self):
        assert is_special_lunar_day(LunarDate(1, 3, 2024)) == (True, "Mồng 1 - Sóc")

    def test_full_moon_day(self):
        assert is_special_lunar_day(LunarDate(15, 8, 2024, True)) == (True, "Rằm - Vọng")

    def test_ordinary_day(self):
        assert is_special_lunar_day(LunarDate(2, 3, 2024)) == (False, "")


class TestHolidayLookup:
    def test_solar_holiday(self):
        assert "Quốc khánh" in _names(get_holidays_for_solar_date(2, 9, 2024))
        assert "Tết Dương Lịch" in _names(get_holidays_for_solar_date(1, 1, 2024))

    def test_lunar_new_year(self):
        assert "Tết Nguyên Đán" in _names(get_holidays_for_solar_date(10, 2, 2024))

    def test_mid_autumn(self):
        assert _names(get_holidays_for_solar_date(17, 9, 2024)) == ["Tết Trung Thu"]

    def test_hung_kings_day_is_matched_on_the_lunar_calendar(self):
        assert "Giỗ Tổ Hùng Vương" in _names(get_holidays_for_solar_date(18, 4, 2024))
        assert "Giỗ Tổ Hùng Vương" not in _names(get_holidays_for_solar_date(10, 3, 2024))

    def test_precomputed_lunar_date(self):
        holidays = get_holidays_for_solar_date(
            5, 5, 2024, lunar_date=LunarDate(5, 5, 2024)
        )
        assert _names(holidays) == ["Tết Đoan Ngọ"]

    def test_plain_day(self):
        assert get_holidays_for_solar_date(6, 11, 2024) == []


class TestHolidayTables:
    def test_month_filters(self):
        assert len(get_holidays_for_month(1, is_lunar=True)) == 4
        assert _names(get_holidays_for_month(1, is_lunar=False)) == ["Tết Dương Lịch"]
        assert get_holidays_for_month(3, is_lunar=False) == []

    def test_equality_uses_date_fields(self):
        a = VietnameseHoliday("A", "A", 1, 1, True)
        b = VietnameseHoliday("B", "B", 1, 1, True)
        c = VietnameseHoliday("A", "A", 1, 1, False)
        assert a == b
        assert a != c

    def test_tables_are_well_formed(self):
        for holiday in SOLAR_HOLIDAYS + LUNAR_HOLIDAYS:
            assert 1 <= holiday.day <= 31
            assert 1 <= holiday.month <= 12
        assert all(holiday.is_lunar for holiday in LUNAR_HOLIDAYS)
        assert set(holiday.to_dict()) >= {"name", "day", "month", "is_lunar"}
