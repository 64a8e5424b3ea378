"""
Unit tests for weighted partitioning and weight adjustment.
"""

from dataclasses import astuple

import pytest
from triplecol.geometry import LayoutDirection, Rect, ResizeDelta, WindowEdges
from triplecol.layouts.layout_utils import (
    EPSILON,
    adjust_area_half_weights,
    adjust_area_weights,
    adjust_weights,
    calculate_weights,
    clip,
    slide,
    split_area_half_weighted,
    split_area_weighted,
    split_weighted,
    tiled_edges,
)

H = LayoutDirection.HORIZONTAL
V = LayoutDirection.VERTICAL


@pytest.mark.unit
class TestSplitAreaWeighted:
    """Test the area partitioner."""

    def test_single_weight_returns_area(self, standard_area):
        """One weight leaves the area untouched, gap included."""
        assert split_area_weighted(standard_area, [3.0], 10, H) == [standard_area]

    def test_partition_is_complete(self, standard_area):
        """Parts plus gaps cover the whole extent without overlap."""
        rects = split_area_weighted(standard_area, [1, 2, 3], 10, H)

        assert sum(r.width for r in rects) == pytest.approx(1000 - 2 * 10)
        assert rects[0].x == pytest.approx(0)
        assert rects[-1].max_x == pytest.approx(1000)
        for left, right in zip(rects, rects[1:]):
            assert right.x == pytest.approx(left.max_x + 10)

    def test_cross_axis_is_copied(self):
        """The extent across the split axis is unchanged."""
        area = Rect(20, 30, 400, 300)
        for rect in split_area_weighted(area, [1, 1, 2], 6, V):
            assert rect.x == 20
            assert rect.width == 400

    def test_vertical_split_proportions(self):
        """Heights follow the weights when there is no gap."""
        rects = split_area_weighted(Rect(0, 0, 100, 900), [1, 2], 0, V)

        assert astuple(rects[0]) == pytest.approx((0, 0, 100, 300))
        assert astuple(rects[1]) == pytest.approx((0, 300, 100, 600))

    def test_zero_weight_gets_no_extent(self, standard_area):
        """A zero weight collapses its part instead of failing."""
        rects = split_area_weighted(standard_area, [1, 0, 1], 0, H)

        assert rects[0].width == pytest.approx(500)
        assert rects[1].width == pytest.approx(0)
        assert rects[2].width == pytest.approx(500)

    def test_all_zero_weights_split_evenly(self, standard_area):
        """Without any positive weight the extent is shared evenly."""
        rects = split_area_weighted(standard_area, [0, 0], 0, H)
        assert [r.width for r in rects] == pytest.approx([500, 500])

    def test_equal_weights_outer_parts_are_larger(self):
        """Outer parts border one seam, inner parts two."""
        parts = split_weighted(0, 600, [1, 1, 1], 10)

        assert [length for _, length in parts] == pytest.approx([195, 190, 195])

    def test_two_tile_scenario(self, standard_area):
        """Ratio 0.6 with a 10px gap gives 595 | 395."""
        master, stack = split_area_half_weighted(standard_area, 0.6, 10, H)

        assert astuple(master) == pytest.approx((0, 0, 595, 600))
        assert astuple(stack) == pytest.approx((605, 0, 395, 600))

    @pytest.mark.parametrize("ratio", [0.1, 0.25, 0.5, 0.6, 0.9])
    def test_half_split_matches_weighted_split(self, standard_area, ratio):
        """The binary split is the weighted split of [r, 1 - r]."""
        half = split_area_half_weighted(standard_area, ratio, 10, H)
        full = split_area_weighted(standard_area, [ratio, 1 - ratio], 10, H)

        assert [astuple(r) for r in half] == [astuple(r) for r in full]


@pytest.mark.unit
class TestAdjustWeights:
    """Test pixel delta to weight conversion."""

    def test_forward_delta_grows_target(self):
        """Moving the east edge by 100px moves the boundary by 100px."""
        weights = adjust_weights(0, 1000, [1, 1], 10, 0, 100, 0)
        assert weights == pytest.approx([0.6, 0.4])

    def test_only_adjacent_partition_changes(self):
        """Partitions away from the moved edge keep their extent."""
        weights = adjust_weights(0, 900, [1, 1, 1], 0, 0, 50, 0)
        assert weights == pytest.approx([350 / 900, 250 / 900, 300 / 900])

    def test_backward_delta_round_trip(self):
        """Splitting the adjusted weights reproduces the dragged boundary."""
        before = split_weighted(0, 1200, [2, 1, 1], 10)
        weights = adjust_weights(0, 1200, [2, 1, 1], 10, 1, 0, 40)
        after = split_weighted(0, 1200, weights, 10)

        assert after[1][0] == pytest.approx(before[1][0] - 40)
        assert after[1][1] == pytest.approx(before[1][1] + 40)
        assert after[0][1] == pytest.approx(before[0][1] - 40)
        assert after[2] == pytest.approx(before[2])

    def test_single_partition_is_noop(self):
        """Nothing to trade extent with."""
        assert adjust_weights(0, 1000, [2.0], 10, 0, 100, 100) == [2.0]

    def test_out_of_range_target_is_noop(self):
        assert adjust_weights(0, 1000, [1, 1], 0, 5, 100, 0) == [1, 1]

    def test_growth_is_clamped(self):
        """A huge drag leaves the neighbour with a positive weight."""
        weights = adjust_weights(0, 1000, [1, 1], 0, 0, 10_000, 0)

        assert all(w > 0 for w in weights)
        assert weights[1] == pytest.approx(0.001)

    def test_shrink_is_clamped(self):
        """A huge inward drag leaves the target with a positive weight."""
        weights = adjust_weights(0, 1000, [1, 1], 0, 1, 0, -10_000)

        assert all(w > 0 for w in weights)
        assert weights[1] == pytest.approx(0.001)

    def test_degenerate_line_keeps_weights_positive(self):
        """A zero-length line still yields positive weights."""
        weights = adjust_weights(0, 0, [1, 1], 0, 0, 50, 0)
        assert all(w >= EPSILON for w in weights)

    def test_calculate_weights_inverts_split(self):
        parts = split_weighted(0, 1000, [3, 1], 10)
        assert calculate_weights(parts, 10) == pytest.approx([0.75, 0.25])

    def test_area_weights_use_vertical_components(self):
        """North/south deltas drive vertical adjustment."""
        area = Rect(0, 0, 500, 600)
        weights = adjust_area_weights(
            area, [1, 1], 0, 1, ResizeDelta(north=60, east=500), V
        )
        assert weights == pytest.approx([0.4, 0.6])

    def test_half_weights_stack_side(self, standard_area):
        """Dragging the stack's west edge shrinks the master ratio."""
        ratio = adjust_area_half_weights(
            standard_area, 0.6, 10, 1, ResizeDelta(west=50), H
        )
        assert ratio == pytest.approx(0.55)

    def test_half_weights_master_side(self, standard_area):
        """Dragging the master's east edge grows the master ratio."""
        ratio = adjust_area_half_weights(
            standard_area, 0.5, 10, 0, ResizeDelta(east=100), H
        )
        assert ratio == pytest.approx(0.6)


@pytest.mark.unit
class TestHelpers:
    """Test small numeric helpers."""

    def test_clip(self):
        assert clip(5, 1, 10) == 5
        assert clip(-1, 1, 10) == 1
        assert clip(11, 1, 10) == 10

    def test_slide_moves_to_next_step(self):
        assert slide(0.6, 0.05) == pytest.approx(0.65)
        assert slide(0.6, -0.05) == pytest.approx(0.55)
        assert slide(0.62, 0.05) == pytest.approx(0.65)
        assert slide(0.62, -0.05) == pytest.approx(0.6)

    def test_tiled_edges(self, standard_area):
        master, stack = split_area_half_weighted(standard_area, 0.5, 10, H)

        assert tiled_edges(master, standard_area) == (
            WindowEdges.LEFT | WindowEdges.TOP | WindowEdges.BOTTOM
        )
        assert tiled_edges(stack, standard_area) == (
            WindowEdges.RIGHT | WindowEdges.TOP | WindowEdges.BOTTOM
        )
        assert tiled_edges(standard_area, standard_area) == WindowEdges.ALL
