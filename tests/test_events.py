from amlich.events import RepeatType, is_event_on_lunar_date


class TestLunarRecurrence:
    def test_yearly_matches_day_and_month(self):
        assert is_event_on_lunar_date(1, 1, RepeatType.LUNAR_YEARLY, 10, 2, 2024)
        assert not is_event_on_lunar_date(1, 2, RepeatType.LUNAR_YEARLY, 10, 2, 2024)

    def test_monthly_matches_day_only(self):
        assert is_event_on_lunar_date(1, 7, RepeatType.LUNAR_MONTHLY, 10, 2, 2024)
        assert not is_event_on_lunar_date(2, 1, RepeatType.LUNAR_MONTHLY, 10, 2, 2024)

    def test_one_off_event(self):
        assert is_event_on_lunar_date(15, 8, "never", 17, 9, 2024)

    def test_solar_repeat_types_never_match(self):
        assert not is_event_on_lunar_date(1, 1, RepeatType.MONTHLY, 10, 2, 2024)
        assert not is_event_on_lunar_date(1, 1, "daily", 10, 2, 2024)

    def test_missing_anchor_or_unknown_type(self):
        assert not is_event_on_lunar_date(None, 1, RepeatType.LUNAR_YEARLY, 10, 2, 2024)
        assert not is_event_on_lunar_date(1, 1, "fortnightly", 10, 2, 2024)

    def test_display_name(self):
        assert RepeatType.LUNAR_YEARLY.display_name == "Hàng năm (Âm lịch)"
