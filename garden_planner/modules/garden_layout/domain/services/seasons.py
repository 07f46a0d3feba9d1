"""
Season and crop-family helpers used when archiving placements to history
and when warning about crop rotation.
"""

from datetime import date
from typing import Dict, List, Optional, Tuple

PLANT_FAMILIES: Dict[str, List[str]] = {
    "nightshade": ["tomato", "pepper", "eggplant", "potato"],
    "brassica": ["broccoli", "cabbage", "cauliflower", "kale", "brussels sprouts", "collard", "kohlrabi"],
    "cucurbit": ["cucumber", "squash", "zucchini", "pumpkin", "melon", "watermelon", "gourd"],
    "allium": ["onion", "garlic", "leek", "shallot", "chive"],
    "legume": ["bean", "pea", "lentil", "peanut"],
    "carrot": ["carrot", "parsnip", "celery", "parsley", "dill", "fennel"],
    "lettuce": ["lettuce", "endive", "chicory", "artichoke", "sunflower"],
}


def plant_family(plant_name: str) -> Optional[str]:
    """Family whose member name appears anywhere in plant_name (case-insensitive)."""
    lower_name = plant_name.lower()
    for family, members in PLANT_FAMILIES.items():
        if any(member in lower_name for member in members):
            return family
    return None


def season_name(day: date) -> str:
    if 3 <= day.month <= 5:
        return "spring"
    if 6 <= day.month <= 8:
        return "summer"
    if 9 <= day.month <= 11:
        return "fall"
    return "winter"


def season_for(day: date) -> Tuple[int, str]:
    """(season_year, season_name) a given day belongs to."""
    return day.year, season_name(day)
