from amlich.auspicious_hours import (
    CHI_HOUR_RANGES,
    GIO_HOANG_DAO,
    HAC_DAO,
    HOANG_DAO,
    day_branch,
    favorable_branches,
    get_auspicious_hours,
    is_auspicious_hour,
)
from amlich.can_chi import CHI
from amlich.date_conversion import jd_from_date


class TestTable:
    def test_every_day_branch_has_six_distinct_favorable_hours(self):
        assert set(GIO_HOANG_DAO) == set(CHI)
        for branch, hours in GIO_HOANG_DAO.items():
            assert len(hours) == 6, branch
            assert len(set(hours)) == 6, branch
            assert set(hours) <= set(CHI)

    def test_time_ranges_cover_every_branch(self):
        assert list(CHI_HOUR_RANGES) == CHI
        assert CHI_HOUR_RANGES["Tý"] == "23:00 - 01:00"
        assert CHI_HOUR_RANGES["Hợi"] == "21:00 - 23:00"

    def test_unknown_branch(self):
        assert favorable_branches("Rồng") == frozenset()
        assert not is_auspicious_hour("Rồng", "Tý")


class TestClassification:
    def test_day_branch(self):
        assert day_branch(jd_from_date(10, 2, 2024)) == "Thìn"

    def test_membership(self):
        assert favorable_branches("Thìn") == {"Dần", "Thìn", "Tỵ", "Thân", "Dậu", "Hợi"}
        assert is_auspicious_hour("Tý", "Ngọ")
        assert not is_auspicious_hour("Tý", "Mão")

    def test_full_listing(self):
        hours = get_auspicious_hours(jd_from_date(10, 2, 2024))
        assert [hour.name for hour in hours] == CHI
        assert sum(hour.is_auspicious for hour in hours) == 6
        assert hours[0].cross_midnight
        assert not any(hour.cross_midnight for hour in hours[1:])
        assert (hours[0].start_hour, hours[0].end_hour) == ("23:00", "01:00")
        assert hours[2].label == HOANG_DAO
        assert hours[0].label == HAC_DAO

    def test_to_dict(self):
        hour = get_auspicious_hours(jd_from_date(10, 2, 2024))[4]
        assert hour.to_dict() == {
            "name": "Thìn",
            "time_range": "07:00 - 09:00",
            "start_hour": "07:00",
            "end_hour": "09:00",
            "is_auspicious": True,
            "cross_midnight": False,
            "label": HOANG_DAO,
        }
