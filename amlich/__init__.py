from .auspicious_hours import favorable_branches, get_auspicious_hours
from .can_chi import can_chi, day_can_chi, zodiac_animal, zodiac_animal_english
from .date_conversion import LunarDate, SolarDate, lunar_to_solar, solar_to_lunar
from .holidays import is_special_lunar_day

__version__ = "1.0.0"

__all__ = [
    "LunarDate",
    "SolarDate",
    "can_chi",
    "day_can_chi",
    "favorable_branches",
    "get_auspicious_hours",
    "is_special_lunar_day",
    "lunar_to_solar",
    "solar_to_lunar",
    "zodiac_animal",
    "zodiac_animal_english",
]
