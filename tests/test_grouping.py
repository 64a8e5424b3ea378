"""
Unit tests for tile grouping.
"""

import math

import pytest
from triplecol.layouts.grouping import Grouping, Regime, column_groups, row_groups


@pytest.mark.unit
class TestColumnGroups:
    """Test the column grouping policy."""

    @pytest.mark.parametrize(
        "tile_count, capacity, regime, sizes",
        [
            (0, 1, Regime.SINGLE, ()),
            (1, 1, Regime.SINGLE, (1,)),
            (2, 5, Regime.SPLIT, (1, 1)),
            (3, 5, Regime.STACK, (1, 2)),
            (3, 1, Regime.STACK, (1, 2)),
            (4, 5, Regime.SINGLE, (4,)),
            (5, 5, Regime.SINGLE, (5,)),
            (6, 5, Regime.MASTER_STACK, (5, 1)),
            (7, 5, Regime.THREE_COLUMNS, (5, 1, 1)),
            (4, 1, Regime.THREE_COLUMNS, (1, 2, 1)),
            (8, 2, Regime.THREE_COLUMNS, (2, 3, 3)),
            (9, 2, Regime.THREE_COLUMNS, (2, 4, 3)),
        ],
    )
    def test_regimes(self, tile_count, capacity, regime, sizes):
        grouping = column_groups(tile_count, capacity)

        assert grouping.regime == regime
        assert grouping.sizes == sizes
        assert grouping.tile_count == tile_count

    @pytest.mark.parametrize("capacity", range(3, 8))
    def test_one_tile_outside_full_master(self, capacity):
        """capacity + 1 tiles leave exactly one tile outside the master."""
        grouping = column_groups(capacity + 1, capacity)

        assert grouping.sizes[0] == capacity
        assert grouping.tile_count - grouping.sizes[0] == 1

    @pytest.mark.parametrize("capacity", range(2, 8))
    @pytest.mark.parametrize("extra", range(2, 7))
    def test_stacks_share_the_rest(self, capacity, extra):
        """Beyond capacity + 1 the stacks take ceil(k/2) and floor(k/2)."""
        grouping = column_groups(capacity + extra, capacity)
        master, left, right = grouping.sizes

        assert master == capacity
        assert left == math.ceil(extra / 2)
        assert right == extra // 2

    def test_capacity_below_one_is_treated_as_one(self):
        assert column_groups(5, 0).sizes == (1, 2, 2)


@pytest.mark.unit
class TestGrouping:
    """Test group lookup helpers."""

    def test_locate(self):
        grouping = Grouping(Regime.THREE_COLUMNS, (1, 2, 1))

        assert grouping.locate(0) == (0, 0)
        assert grouping.locate(1) == (1, 0)
        assert grouping.locate(2) == (1, 1)
        assert grouping.locate(3) == (2, 0)
        assert grouping.locate(4) is None
        assert grouping.locate(-1) is None

    def test_split_and_bounds(self):
        grouping = Grouping(Regime.THREE_COLUMNS, (2, 2, 1))

        assert grouping.split("abcde") == [["a", "b"], ["c", "d"], ["e"]]
        assert grouping.bounds(1) == (2, 4)
        assert grouping.count == 3

    def test_locate_agrees_with_split(self):
        """Every tile is found in the group split puts it in."""
        grouping = column_groups(11, 3)
        groups = grouping.split(list(range(11)))

        for index in range(11):
            group, position = grouping.locate(index)
            assert groups[group][position] == index


@pytest.mark.unit
class TestRowGroups:
    """Test the row grouping policy."""

    @pytest.mark.parametrize(
        "tile_count, regime, sizes",
        [
            (0, Regime.SINGLE, ()),
            (1, Regime.SINGLE, (1,)),
            (2, Regime.SPLIT, (1, 1)),
            (3, Regime.STACK, (1, 2)),
            (4, Regime.ROWS, (1, 2, 1)),
            (5, Regime.ROWS, (1, 2, 2)),
            (6, Regime.ROWS, (1, 2, 2, 1)),
        ],
    )
    def test_regimes(self, tile_count, regime, sizes):
        grouping = row_groups(tile_count)

        assert grouping.regime == regime
        assert grouping.sizes == sizes

    @pytest.mark.parametrize("tile_count", range(4, 12))
    def test_row_count(self, tile_count):
        grouping = row_groups(tile_count)
        assert grouping.count - 1 == math.ceil((tile_count - 1) / 2)
