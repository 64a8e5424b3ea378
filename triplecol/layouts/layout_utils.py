"""
Layout Utilities

Weighted area partitioning and the inverse used for resize gestures.

Partitions are laid out by cutting the line at the cumulative weight
fractions and then pulling each side of every internal seam back by half
the gap. The inverse (``calculate_weights``) adds those half gaps back, so
a weight vector derived from pixel extents reproduces the same extents
when split again.
"""

from __future__ import annotations
import logging
import math
from typing import List, Sequence, Tuple

from ..geometry import LayoutDirection, Rect, ResizeDelta, WindowEdges

log = logging.getLogger(__name__)

# Smallest extent, in pixels, an adjustment may leave a partition with
MIN_EXTENT = 1.0

# Smallest weight an adjustment may produce
EPSILON = 1e-4

Part = Tuple[float, float]


def clip(value: float, low: float, high: float) -> float:
    """Clamp ``value`` into ``[low, high]``."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def slide(value: float, step: float) -> float:
    """Move ``value`` to the next multiple of ``step`` in the step's direction."""
    if step == 0:
        return value
    return round(math.floor(value / step + 1.000001) * step, 9)


def _seam_shares(count: int, gap: float) -> List[float]:
    """Gap taken from each partition by the seams on its sides."""
    half = gap / 2
    return [half * ((i > 0) + (i < count - 1)) for i in range(count)]


def split_weighted(
    begin: float, length: float, weights: Sequence[float], gap: float = 0
) -> List[Part]:
    """
    Split the line ``[begin, begin + length)`` proportionally to ``weights``.

    Returns a ``(begin, length)`` pair per weight. Non-positive weights get
    no extent; if no weight is positive the line is split evenly.

    Cuts fall at the cumulative weight fractions of ``length`` and every
    internal seam takes ``gap / 2`` from both neighbours. The outer parts
    border one seam only, so with equal weights and three or more parts
    they come out ``gap / 2`` larger than the inner ones.
    """
    n = len(weights)
    if n == 0:
        return []
    if n == 1:
        return [(begin, length)]

    if any(weight <= 0 for weight in weights):
        log.warning("Non-positive weight in %s, treating as empty", list(weights))
    clean = [max(weight, 0.0) for weight in weights]
    total = sum(clean)
    if total <= 0:
        clean = [1.0] * n
        total = float(n)

    half = gap / 2
    parts = []
    acc = 0.0
    for i, weight in enumerate(clean):
        start = begin + length * acc / total
        acc += weight
        end = begin + length if i == n - 1 else begin + length * acc / total
        if i > 0:
            start += half
        if i < n - 1:
            end -= half
        parts.append((start, max(end - start, 0.0)))
    return parts


def calculate_weights(parts: Sequence[Part], gap: float = 0) -> List[float]:
    """
    Inverse of ``split_weighted``: weights (summing to 1) that reproduce
    ``parts`` when the same line is split again with the same gap.
    """
    n = len(parts)
    if n == 0:
        return []
    spans = [
        length + share for (_, length), share in zip(parts, _seam_shares(n, gap))
    ]
    total = sum(spans)
    if total <= 0:
        return [1.0 / n] * n
    return [span / total for span in spans]


def _limit_delta(delta: float, target_length: float, neighbor_length: float) -> float:
    """Limit ``delta`` so neither partition drops below ``MIN_EXTENT``."""
    low = min(MIN_EXTENT - target_length, 0.0)
    high = max(neighbor_length - MIN_EXTENT, 0.0)
    return clip(delta, low, high)


def adjust_weights(
    begin: float,
    length: float,
    weights: Sequence[float],
    gap: float,
    target: int,
    delta_forward: float,
    delta_backward: float,
) -> List[float]:
    """
    Move the edges of partition ``target`` by pixel deltas.

    ``delta_backward`` moves the edge shared with the previous partition,
    ``delta_forward`` the edge shared with the next one; positive values
    grow ``target``. The neighbour across each moved edge absorbs the
    change, other partitions keep their extent. Returns normalized weights.
    """
    n = len(weights)
    if n < 2 or not 0 <= target < n:
        return list(weights)

    parts = [list(part) for part in split_weighted(begin, length, weights, gap)]

    if target > 0 and delta_backward != 0:
        neighbor = parts[target - 1]
        delta = _limit_delta(delta_backward, parts[target][1], neighbor[1])
        parts[target] = [parts[target][0] - delta, parts[target][1] + delta]
        neighbor[1] -= delta

    if target < n - 1 and delta_forward != 0:
        neighbor = parts[target + 1]
        delta = _limit_delta(delta_forward, parts[target][1], neighbor[1])
        parts[target][1] += delta
        parts[target + 1] = [neighbor[0] + delta, neighbor[1] - delta]

    return [max(weight, EPSILON) for weight in calculate_weights(parts, gap)]


def split_area_weighted(
    area: Rect,
    weights: Sequence[float],
    gap: float = 0,
    direction: LayoutDirection = LayoutDirection.VERTICAL,
) -> List[Rect]:
    """Split ``area`` along ``direction`` proportionally to ``weights``."""
    if len(weights) == 1:
        return [area]
    begin, length = area.line(direction)
    return [
        area.with_line(direction, part_begin, part_length)
        for part_begin, part_length in split_weighted(begin, length, weights, gap)
    ]


def split_area_half_weighted(
    area: Rect,
    ratio: float,
    gap: float = 0,
    direction: LayoutDirection = LayoutDirection.HORIZONTAL,
) -> List[Rect]:
    """Split ``area`` in two, the first part taking ``ratio`` of it."""
    return split_area_weighted(area, [ratio, 1 - ratio], gap, direction)


def adjust_area_weights(
    area: Rect,
    weights: Sequence[float],
    gap: float,
    target: int,
    delta: ResizeDelta,
    direction: LayoutDirection = LayoutDirection.VERTICAL,
) -> List[float]:
    """Apply the components of ``delta`` along ``direction`` to ``target``."""
    begin, length = area.line(direction)
    delta_forward, delta_backward = delta.along(direction)
    return adjust_weights(
        begin, length, weights, gap, target, delta_forward, delta_backward
    )


def adjust_area_half_weights(
    area: Rect,
    ratio: float,
    gap: float,
    side: int,
    delta: ResizeDelta,
    direction: LayoutDirection = LayoutDirection.HORIZONTAL,
) -> float:
    """
    Binary form of ``adjust_area_weights``.

    ``side`` is 0 when the first part is resized and 1 for the second one.
    Returns the new ratio of the first part.
    """
    ratio = clip(ratio, EPSILON, 1 - EPSILON)
    return adjust_area_weights(
        area, [ratio, 1 - ratio], gap, side, delta, direction
    )[0]


def tiled_edges(rect: Rect, area: Rect, tolerance: float = 0.5) -> WindowEdges:
    """Edges of ``rect`` lying on the border of ``area``."""
    edges = WindowEdges.NONE
    if abs(rect.x - area.x) <= tolerance:
        edges |= WindowEdges.LEFT
    if abs(rect.max_x - area.max_x) <= tolerance:
        edges |= WindowEdges.RIGHT
    if abs(rect.y - area.y) <= tolerance:
        edges |= WindowEdges.TOP
    if abs(rect.max_y - area.max_y) <= tolerance:
        edges |= WindowEdges.BOTTOM
    return edges


def place_tile(tile, rect: Rect, area: Rect):
    """Write ``rect`` and the resulting tiled edges to ``tile``."""
    tile.geometry = rect
    tile.tiled_edges = tiled_edges(rect, area)
