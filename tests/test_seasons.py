# 📄 File: tests/test_seasons.py
# 🧪 Purpose (Technical Summary):
# Unit tests for season derivation and crop family lookup.

from datetime import date

import pytest

from garden_planner.modules.garden_layout.domain.services.seasons import (
    plant_family,
    season_for,
    season_name,
)


class TestSeasons:
    @pytest.mark.parametrize(
        "day,expected",
        [
            (date(2025, 3, 1), "spring"),
            (date(2025, 5, 31), "spring"),
            (date(2025, 6, 1), "summer"),
            (date(2025, 9, 15), "fall"),
            (date(2025, 12, 1), "winter"),
            (date(2025, 1, 10), "winter"),
        ],
    )
    def test_season_name(self, day, expected):
        assert season_name(day) == expected

    def test_season_year_is_calendar_year(self):
        assert season_for(date(2024, 12, 20)) == (2024, "winter")


class TestPlantFamily:
    @pytest.mark.parametrize(
        "name,family",
        [
            ("Cherry Tomato", "nightshade"),
            ("Bell Pepper", "nightshade"),
            ("KALE", "brassica"),
            ("Zucchini", "cucurbit"),
            ("Garlic", "allium"),
            ("Pole Bean", "legume"),
            ("Carrot", "carrot"),
        ],
    )
    def test_family_by_substring(self, name, family):
        assert plant_family(name) == family

    def test_unknown_plant_has_no_family(self):
        assert plant_family("Basil") is None
