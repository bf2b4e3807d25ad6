from dataclasses import asdict, dataclass
from typing import Any

from .can_chi import CHI, pos_mod

# Day branch -> the six Hoàng Đạo (favorable) hour branches of that day.
GIO_HOANG_DAO = {
    "Tý": ("Dần", "Thân", "Tý", "Ngọ", "Sửu", "Mùi"),
    "Sửu": ("Dần", "Mão", "Tỵ", "Thân", "Tuất", "Hợi"),
    "Dần": ("Tý", "Sửu", "Thìn", "Tỵ", "Mùi", "Tuất"),
    "Mão": ("Tý", "Dần", "Mão", "Ngọ", "Mùi", "Dậu"),
    "Thìn": ("Dần", "Thìn", "Tỵ", "Thân", "Dậu", "Hợi"),
    "Tỵ": ("Sửu", "Thìn", "Ngọ", "Mùi", "Tuất", "Hợi"),
    "Ngọ": ("Tý", "Dần", "Mão", "Ngọ", "Mùi", "Dậu"),
    "Mùi": ("Dần", "Mão", "Tỵ", "Thân", "Tuất", "Hợi"),
    "Thân": ("Tý", "Sửu", "Thìn", "Tỵ", "Mùi", "Tuất"),
    "Dậu": ("Tý", "Dần", "Mão", "Ngọ", "Mùi", "Dậu"),
    "Tuất": ("Dần", "Thìn", "Tỵ", "Thân", "Dậu", "Hợi"),
    "Hợi": ("Sửu", "Thìn", "Ngọ", "Mùi", "Tuất", "Hợi"),
}

CHI_HOUR_RANGES = {
    "Tý": "23:00 - 01:00",
    "Sửu": "01:00 - 03:00",
    "Dần": "03:00 - 05:00",
    "Mão": "05:00 - 07:00",
    "Thìn": "07:00 - 09:00",
    "Tỵ": "09:00 - 11:00",
    "Ngọ": "11:00 - 13:00",
    "Mùi": "13:00 - 15:00",
    "Thân": "15:00 - 17:00",
    "Dậu": "17:00 - 19:00",
    "Tuất": "19:00 - 21:00",
    "Hợi": "21:00 - 23:00",
}

HOANG_DAO = "Giờ Hoàng Đạo"
HAC_DAO = "Giờ Hắc Đạo"


@dataclass(frozen=True)
class AuspiciousHour:
    name: str
    time_range: str
    start_hour: str
    end_hour: str
    is_auspicious: bool
    cross_midnight: bool = False

    @property
    def label(self) -> str:
        return HOANG_DAO if self.is_auspicious else HAC_DAO

    def to_dict(self) -> dict[str, Any]:
        result = asdict(self)
        result["label"] = self.label
        return result


def day_branch(jdn: int) -> str:
    """Earthly branch of a day as used for the Hoàng Đạo hour lookup.

    Kept separate from the chi half of day_can_chi; the two are not
    interchangeable even where their offsets agree.
    """
    return CHI[pos_mod(jdn + 1, 12)]


def favorable_branches(day_chi: str) -> frozenset[str]:
    """Hour branches that are Hoàng Đạo on a day of the given branch."""
    return frozenset(GIO_HOANG_DAO.get(day_chi, ()))


def is_auspicious_hour(day_chi: str, hour_chi: str) -> bool:
    return hour_chi in favorable_branches(day_chi)


def get_auspicious_hours(jdn: int) -> list[AuspiciousHour]:
    """List all twelve two-hour slots of a Julian day with their classification."""
    favorable = favorable_branches(day_branch(jdn))
    hours = []
    for i, name in enumerate(CHI):
        start_hour = f"{(i * 2 + 23) % 24:02d}:00"
        end_hour = f"{(i * 2 + 1) % 24:02d}:00"
        hours.append(
            AuspiciousHour(
                name=name,
                time_range=CHI_HOUR_RANGES[name],
                start_hour=start_hour,
                end_hour=end_hour,
                is_auspicious=name in favorable,
                cross_midnight=start_hour == "23:00",
            )
        )
    return hours
