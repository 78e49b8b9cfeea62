"""
Unit Tests for Bounds Model

Tests for the Bounds dataclass describing page rectangles.
"""

import pytest

from image_catalog.core.models.bounds import Bounds


class TestBounds:
    """Tests for Bounds dataclass."""

    # ─────────────────────────────────────────────────────────────────────────
    # Constructor Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_init_when_valid_bounds_then_creates_bounds(self):
        """Valid bounds should be created successfully."""
        b = Bounds(top=3, left=3, bottom=6, right=48)
        assert b.top == 3
        assert b.left == 3
        assert b.bottom == 6
        assert b.right == 48

    def test_init_when_bottom_not_greater_than_top_then_raises_error(self):
        """bottom <= top should raise ValueError."""
        with pytest.raises(ValueError, match="bottom must be > top"):
            Bounds(top=10, left=0, bottom=5, right=10)

    def test_init_when_bottom_equals_top_then_raises_error(self):
        """bottom == top should raise ValueError."""
        with pytest.raises(ValueError, match="bottom must be > top"):
            Bounds(top=10, left=0, bottom=10, right=10)

    def test_init_when_right_not_greater_than_left_then_raises_error(self):
        """right <= left should raise ValueError."""
        with pytest.raises(ValueError, match="right must be > left"):
            Bounds(top=0, left=50, bottom=10, right=50)

    def test_bounds_are_immutable(self):
        """Bounds cannot be changed after construction."""
        b = Bounds(0, 0, 10, 10)
        with pytest.raises(AttributeError):
            b.top = 5

    # ─────────────────────────────────────────────────────────────────────────
    # Property Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_width_and_height_when_valid_bounds_then_returns_extents(self):
        b = Bounds(top=9, left=3, bottom=60, right=48)
        assert b.width == 45
        assert b.height == 51

    def test_center_when_valid_bounds_then_returns_midpoint(self):
        assert Bounds(0, 0, 10, 20).center == (10, 5)

    # ─────────────────────────────────────────────────────────────────────────
    # Query Method Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_contains_point_when_on_edge_then_true(self):
        b = Bounds(0, 0, 10, 10)
        assert b.contains_point(10, 10)
        assert not b.contains_point(10.1, 5)

    def test_contains_when_inner_rectangle_then_true(self):
        outer = Bounds(0, 0, 10, 10)
        assert outer.contains(Bounds(1, 1, 9, 9))
        assert not outer.contains(Bounds(1, 1, 11, 9))

    def test_overlaps_when_touching_edges_then_false(self):
        """Rectangles that only share an edge do not overlap."""
        a = Bounds(0, 0, 10, 10)
        assert not a.overlaps(Bounds(10, 0, 20, 10))
        assert a.overlaps(Bounds(5, 5, 15, 15))

    # ─────────────────────────────────────────────────────────────────────────
    # Derived Rectangle Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_inset_when_valid_amount_then_shrinks_all_sides(self):
        assert Bounds(0, 0, 10, 20).inset(1) == Bounds(1, 1, 9, 19)

    def test_inset_when_too_large_then_raises_error(self):
        with pytest.raises(ValueError):
            Bounds(0, 0, 10, 10).inset(5)

    def test_split_bottom_when_valid_height_then_bands_abut(self):
        upper, lower = Bounds(0, 0, 10, 4).split_bottom(2)
        assert upper == Bounds(0, 0, 8, 4)
        assert lower == Bounds(8, 0, 10, 4)
        assert upper.bottom == lower.top

    @pytest.mark.parametrize("height", [0, 10, 12, -1])
    def test_split_bottom_when_height_out_of_range_then_raises_error(self, height):
        with pytest.raises(ValueError, match="split height"):
            Bounds(0, 0, 10, 4).split_bottom(height)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_to_list_uses_top_left_bottom_right_order(self):
        assert Bounds(1, 2, 3, 4).to_list() == [1, 2, 3, 4]

    def test_from_dict_when_to_dict_output_then_equal(self):
        b = Bounds(1.5, 2, 3, 4.25)
        assert Bounds.from_dict(b.to_dict()) == b

    def test_from_dict_when_missing_key_then_raises_error(self):
        with pytest.raises(KeyError):
            Bounds.from_dict({"top": 0, "left": 0, "bottom": 1})
