"""
Main entry point for running triplecol as a module.

Usage:
    python -m triplecol [options]
"""

import argparse
import logging
import sys

from .config import LayoutConfig
from .geometry import Rect
from .objects import Tile


def main(argv=None):
    """Print the geometry of a row of tiles."""
    parser = argparse.ArgumentParser(
        prog="triplecol", description="Print left-master tile geometry"
    )
    parser.add_argument("--tiles", type=int, default=4, help="number of tiles")
    parser.add_argument("--width", type=float, default=1920)
    parser.add_argument("--height", type=float, default=1080)
    parser.add_argument("--gap", type=float, default=None, help="gap in pixels")
    parser.add_argument("--layout", choices=["TripleColumnLeft", "ThreeColAlt"])
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    overrides = {}
    if args.gap is not None:
        overrides["tile_layout_gap"] = args.gap
    config = LayoutConfig.from_env(**overrides)

    layouts = config.get_layouts()
    layout = layouts[0]
    if args.layout:
        layout = next(item for item in layouts if item.name == args.layout)

    tiles = [Tile(i) for i in range(max(args.tiles, 0))]
    area = Rect(0, 0, args.width, args.height)
    layout.apply(tiles, area)

    print(layout.describe())
    for tile in tiles:
        x, y, width, height = tile.geometry.rounded()
        print(f"  tile {tile.object_id}: x={x} y={y} w={width} h={height}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
