# 📄 File: tests/test_spacing_validator.py
# 🧪 Purpose (Technical Summary):
# Unit tests for the square (Chebyshev) plant exclusion zone and blocked-cell listing.

import pytest

from garden_planner.modules.garden_layout.domain.models.placement import BedPlacement
from garden_planner.modules.garden_layout.domain.services.grid import GridSize
from garden_planner.modules.garden_layout.domain.services.spacing_validator import (
    blocked_cells,
    find_spacing_conflict,
    is_blocked_by,
    required_cells,
)


def placed(x, y, placement_id=1):
    return BedPlacement(id=placement_id, bed_id=1, plant_id=1, x=x, y=y, plant_name="Tomato")


class TestRequiredCells:
    @pytest.mark.parametrize(
        "spacing,cell,expected",
        [(12, 12, 1), (24, 12, 2), (18, 12, 2), (6, 12, 1), (36, 6, 6)],
    )
    def test_ceil_with_minimum_of_one(self, spacing, cell, expected):
        assert required_cells(spacing, cell) == expected


class TestExclusionZone:
    def test_chebyshev_distance_one_is_blocked_for_two_cells(self):
        assert is_blocked_by(placed(0, 0), 1, 1, 2)
        assert is_blocked_by(placed(0, 0), 1, 0, 2)

    def test_chebyshev_distance_two_is_free_for_two_cells(self):
        assert not is_blocked_by(placed(0, 0), 2, 2, 2)
        assert not is_blocked_by(placed(0, 0), 2, 0, 2)

    def test_zone_is_square_not_round(self):
        # A diagonal neighbour is exactly as blocked as an orthogonal one
        assert is_blocked_by(placed(3, 3), 5, 5, 3)

    def test_occupant_of_target_cell_never_blocks(self):
        assert not is_blocked_by(placed(2, 2), 2, 2, 5)

    def test_one_cell_spacing_never_blocks_neighbours(self):
        assert find_spacing_conflict([placed(0, 0)], 1, 1, 1) is None

    def test_first_blocking_placement_is_returned(self):
        first, second = placed(0, 0, 1), placed(2, 0, 2)
        assert find_spacing_conflict([first, second], 1, 0, 2) is first


class TestBlockedCells:
    def test_neighbours_of_each_placement_are_blocked(self):
        cells = blocked_cells([placed(1, 1)], GridSize(4, 4), 2)
        assert cells == {(0, 0), (1, 0), (2, 0), (0, 1), (2, 1), (0, 2), (1, 2), (2, 2)}

    def test_occupied_cell_is_only_blocked_by_another_plant(self):
        cells = blocked_cells([placed(0, 0, 1), placed(1, 0, 2)], GridSize(4, 4), 2)
        assert (0, 0) in cells and (1, 0) in cells

    def test_zone_is_clipped_to_the_bed(self):
        cells = blocked_cells([placed(0, 0)], GridSize(2, 2), 3)
        assert all(0 <= x < 2 and 0 <= y < 2 for x, y in cells)
