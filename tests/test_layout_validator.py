# 📄 File: tests/test_layout_validator.py
# 🧪 Purpose (Technical Summary):
# Unit tests for the pure garden-scale validator: coordinate coercion, garden presence,
# bounds and overlap ordering.

import math

import pytest

from garden_planner.modules.garden_layout.domain.models.bed import Bed
from garden_planner.modules.garden_layout.domain.models.garden import Garden
from garden_planner.modules.garden_layout.domain.services.grid import GridRect
from garden_planner.modules.garden_layout.domain.services.layout_validator import (
    coerce_cell_coordinate,
    find_overlapping_bed,
    validate_bed_position,
)
from garden_planner.shared.core.exceptions import (
    ConfigurationError,
    OutOfBoundsError,
    OverlapError,
    ValidationError,
)

GARDEN = Garden(id=1, owner_id="u", width_inches=120, height_inches=120, cell_inches=12)


def make_bed(bed_id, name="Bed", w=48, h=96, x=None, y=None, rotated=False):
    return Bed(
        id=bed_id,
        owner_id="u",
        name=name,
        width_inches=w,
        height_inches=h,
        cell_inches=12,
        garden_x=x,
        garden_y=y,
        garden_rotated=rotated,
    )


class TestCoerceCellCoordinate:
    @pytest.mark.parametrize("value,expected", [(0, 0), (7, 7), (3.0, 3), (-2, -2)])
    def test_accepts_whole_numbers(self, value, expected):
        assert coerce_cell_coordinate(value, "x") == expected

    @pytest.mark.parametrize("value", [1.5, math.inf, -math.inf, math.nan, "3", True, None])
    def test_rejects_everything_else(self, value):
        with pytest.raises(ValidationError):
            coerce_cell_coordinate(value, "x")


class TestValidateBedPosition:
    def test_fits_inside_empty_garden(self):
        rect = validate_bed_position(make_bed(1), 6, 2, GARDEN, [])
        assert rect == GridRect(6, 2, 4, 8)

    def test_one_past_the_edge_is_out_of_bounds(self):
        with pytest.raises(OutOfBoundsError) as exc_info:
            validate_bed_position(make_bed(1), 7, 0, GARDEN, [])
        assert exc_info.value.status_code == 400

    def test_negative_coordinates_are_out_of_bounds(self):
        with pytest.raises(OutOfBoundsError):
            validate_bed_position(make_bed(1), -1, 0, GARDEN, [])

    def test_missing_garden_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            validate_bed_position(make_bed(1), 0, 0, None, [])

    def test_validation_runs_before_garden_lookup(self):
        with pytest.raises(ValidationError):
            validate_bed_position(make_bed(1), 0.5, 0, None, [])

    def test_overlap_names_the_conflicting_bed(self):
        other = make_bed(2, name="Bed A", x=0, y=0)
        with pytest.raises(OverlapError) as exc_info:
            validate_bed_position(make_bed(1), 3, 0, GARDEN, [other])
        assert "Bed A" in exc_info.value.message
        assert exc_info.value.status_code == 409

    def test_adjacent_bed_does_not_overlap(self):
        other = make_bed(2, x=0, y=0)
        assert validate_bed_position(make_bed(1), 4, 0, GARDEN, [other]) == GridRect(4, 0, 4, 8)

    def test_moving_bed_ignores_its_own_footprint(self):
        bed = make_bed(1, x=0, y=0)
        assert validate_bed_position(bed, 1, 0, GARDEN, [bed]) == GridRect(1, 0, 4, 8)

    def test_rotation_override_is_validated(self):
        # 48x96 rotated is 8 wide; at column 3 it would end at 11 > 10
        with pytest.raises(OutOfBoundsError):
            validate_bed_position(make_bed(1, x=3, y=0), 3, 0, GARDEN, [], rotated=True)

    def test_first_conflict_in_iteration_order_is_reported(self):
        a = make_bed(2, name="First", w=24, h=24, x=0, y=0)
        b = make_bed(3, name="Second", w=24, h=24, x=2, y=0)
        conflict = find_overlapping_bed(GridRect(0, 0, 4, 2), [a, b], 12)
        assert conflict.name == "First"

    def test_unplaced_beds_never_conflict(self):
        assert find_overlapping_bed(GridRect(0, 0, 10, 10), [make_bed(2)], 12) is None
