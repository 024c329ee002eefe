#!/usr/bin/env python3
"""
Command line runner for lifegrid.

Loads a grid from a .gol/.bgol file, a named creature or the corner-glider
demo scene, advances it and prints the bordered rendering:

    lifegrid --shape glider --width 12 --height 12 --steps 8
    lifegrid --input board.gol --steps 100 --toroidal --output after.bgol
"""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from .config import LOG_LEVELS, SimulationConfig
from .core.grid import Grid
from .core.world import World
from .errors import FormatError, GridIOError, InvalidArgumentError, OutOfBoundsError
from . import zoo

logger = logging.getLogger(__name__)

DEMO_SIZE = 32


def build_parser(defaults: SimulationConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='lifegrid', description="Conway's Game of Life runner")

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--input", help="Grid file to load (.gol or .bgol)")
    source.add_argument("--shape", choices=sorted(zoo.SHAPES), help="Built-in creature")
    source.add_argument("--demo", action="store_true", help="Four gliders and an r-pentomino")

    parser.add_argument("--width", type=int, default=defaults.width, help="World width")
    parser.add_argument("--height", type=int, default=defaults.height, help="World height")
    parser.add_argument("--offset", type=int, nargs=2, metavar=('X', 'Y'),
                        help="Top-left placement of the source grid (default: centred)")
    parser.add_argument("--steps", type=int, default=defaults.steps, help="Generations to advance")
    parser.add_argument("--toroidal", action="store_true", default=defaults.toroidal,
                        help="Wrap neighbours around the grid edges")
    parser.add_argument("--output", help="Save the final grid (.gol or .bgol)")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS,
                        default=defaults.log_level, help="Logging level")
    return parser


def load_source(args: argparse.Namespace, config: SimulationConfig) -> Grid:
    if args.input:
        return zoo.load(args.input)
    if args.shape:
        return zoo.get_shape(args.shape)
    return zoo.corner_gliders(config.width or DEMO_SIZE, config.height or DEMO_SIZE)


def place(source: Grid, config: SimulationConfig, offset: Optional[Tuple[int, int]]) -> Grid:
    """Merge the source grid into a world-sized grid, centred unless an offset is given."""
    width = config.width or source.width
    height = config.height or source.height
    if (width, height) == (source.width, source.height) and offset is None:
        return source

    if offset is None:
        offset = ((width - source.width) // 2, (height - source.height) // 2)

    board = Grid(width, height)
    board.merge(source, offset[0], offset[1])
    return board


def run(config: SimulationConfig, args: argparse.Namespace) -> World:
    grid = place(load_source(args, config), config, args.offset)
    world = World(grid)

    logger.info(f"Running {world.width}x{world.height} world for {config.steps} steps "
                f"(toroidal={config.toroidal}, alive={world.get_alive_cells()})")
    world.advance(config.steps, config.toroidal)
    logger.info(f"Finished at generation {world.generation} with {world.get_alive_cells()} alive cells")

    if args.output:
        zoo.save(args.output, world.get_state())
        logger.info(f"Saved final grid to {args.output}")
    return world


def main(argv: Optional[List[str]] = None) -> int:
    try:
        defaults = SimulationConfig.from_env()
    except InvalidArgumentError as e:
        print(f"Invalid environment configuration: {e}", file=sys.stderr)
        return 1

    args = build_parser(defaults).parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(),
                        format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        config = SimulationConfig(width=args.width, height=args.height, steps=args.steps,
                                  toroidal=args.toroidal, log_level=args.log_level)
        world = run(config, args)
    except (InvalidArgumentError, OutOfBoundsError, FormatError, GridIOError) as e:
        logger.error(f"Simulation failed: {e}")
        return 1

    print(world)
    return 0


if __name__ == "__main__":
    sys.exit(main())
