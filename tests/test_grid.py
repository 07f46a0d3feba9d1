# 📄 File: tests/test_grid.py
# 🧭 Purpose (Layman Explanation):
# Checks the inches-to-squares arithmetic that every layout decision relies on.
#
# 🧪 Purpose (Technical Summary):
# Unit tests for grid counts (floor), footprints (ceil, rotation swap) and rectangle
# overlap/containment.

import pytest

from garden_planner.modules.garden_layout.domain.services.grid import (
    GridRect,
    GridSize,
    cells_for,
    footprint_cells,
    grid_size,
)


class TestGridSize:
    def test_garden_grid_floors_partial_cells(self):
        assert grid_size(120, 120, 12) == GridSize(10, 10)
        assert grid_size(125, 131, 12) == GridSize(10, 10)

    def test_grid_has_at_least_one_cell(self):
        assert cells_for(5, 12) == 1

    def test_cols_and_rows_alias_width_and_height(self):
        size = grid_size(96, 48, 12)
        assert (size.cols, size.rows) == (8, 4)


class TestFootprint:
    def test_footprint_ceils_partial_cells(self):
        assert footprint_cells(50, 96, False, 12) == GridSize(5, 8)

    def test_rotation_swaps_width_and_height(self):
        assert footprint_cells(48, 96, True, 12) == GridSize(8, 4)

    @pytest.mark.parametrize(
        "w,h,cell",
        [(48, 96, 12), (30, 70, 12), (13, 7, 6), (120, 24, 12), (1, 1, 12)],
    )
    def test_rotation_symmetry(self, w, h, cell):
        assert footprint_cells(w, h, False, cell) == footprint_cells(h, w, True, cell)

    def test_bed_on_finer_garden_grid_covers_more_cells(self):
        assert footprint_cells(48, 96, False, 6) == GridSize(8, 16)


class TestGridRect:
    def test_two_by_two_and_three_by_three_overlap_when_offset_by_one(self):
        assert GridRect(0, 0, 2, 2).overlaps(GridRect(1, 1, 3, 3))

    def test_edge_sharing_rectangles_do_not_overlap(self):
        assert not GridRect(0, 0, 2, 2).overlaps(GridRect(2, 2, 3, 3))
        assert not GridRect(0, 0, 4, 8).overlaps(GridRect(4, 0, 4, 8))

    def test_overlap_is_symmetric(self):
        a, b = GridRect(3, 0, 4, 8), GridRect(0, 0, 4, 8)
        assert a.overlaps(b) and b.overlaps(a)

    def test_fits_within_grid(self):
        grid = GridSize(10, 10)
        assert GridRect(6, 2, 4, 8).fits_within(grid)
        assert not GridRect(7, 0, 4, 8).fits_within(grid)
        assert not GridRect(-1, 0, 1, 1).fits_within(grid)

    def test_contains_cell(self):
        rect = GridRect(2, 3, 2, 2)
        assert rect.contains_cell(3, 4)
        assert not rect.contains_cell(4, 4)
