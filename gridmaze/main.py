import argparse
import sys
import os
import logging
import random
import time

# Ensure project root is in path so we can import 'gridmaze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from gridmaze.algo.registry import ALGORITHMS, ALIASES, get_generator
from gridmaze.core.complexity import MazePostProcessor
from gridmaze.core.distances import Distances, longest_path
from gridmaze.core.errors import MazeError
from gridmaze.core.grid import Grid
from gridmaze.viz.ascii import STYLES, render

logger = logging.getLogger("gridmaze")


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="gridmaze: rectangular maze generator")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    algo_choices = sorted(ALGORITHMS) + sorted(ALIASES)

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze and print it")
    gen_parser.add_argument("--rows", type=int, default=10, help="Maze rows")
    gen_parser.add_argument("--columns", type=int, default=10, help="Maze columns")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--algo", type=str, default="recursive_backtracker", choices=algo_choices, help="Generation Algorithm")
    gen_parser.add_argument("--braid", type=float, default=0.0, help="Braid Factor (0.0 - 1.0)")
    gen_parser.add_argument("--style", type=str, default="ascii", choices=sorted(STYLES), help="Text rendering style")
    gen_parser.add_argument("--distances", action="store_true", help="Overlay distances from the root cell")
    gen_parser.add_argument("--root", type=int, nargs=2, default=(0, 0), metavar=("ROW", "COL"), help="Root cell for distances")
    gen_parser.add_argument("--path", type=int, nargs=2, default=None, metavar=("ROW", "COL"), help="Overlay the shortest path from root to this cell")
    gen_parser.add_argument("--longest", action="store_true", help="Overlay the longest path in the maze")
    gen_parser.add_argument("--png", type=str, default=None, help="Also write a PNG image to this file")
    gen_parser.add_argument("--cell-size", type=int, default=10, help="Pixels per cell for --png/--visual")
    gen_parser.add_argument("--visual", action="store_true", help="Show generation in a window")
    gen_parser.add_argument("--record", action="store_true", help="Record generation video")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time every generator")
    bench_parser.add_argument("--size", type=int, default=50, help="Benchmark size (size x size)")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")
    bench_parser.add_argument("--algo", type=str, nargs="*", default=None, choices=algo_choices, help="Subset of algorithms")

    return parser


def run_generate(args):
    logger.info(f"Generating {args.rows}x{args.columns} maze with {args.algo.upper()}...")
    grid = Grid(args.rows, args.columns)
    rng = random.Random(args.seed)
    generator = get_generator(args.algo)(grid, rng=rng)

    root = tuple(args.root)
    if not grid.contains(root):
        raise MazeError(f"Root {root} is outside the {args.rows}x{args.columns} grid")

    if args.visual or args.record:
        logger.info("Visual mode enabled - Opening window...")
        from gridmaze.viz.viewer import Viewer
        viewer = Viewer(grid, generator=generator, distances_root=root if args.distances else None,
                        record=args.record, cell_size=args.cell_size)
        viewer.init_window()
        viewer.run_loop()
        if not viewer.gen_finished:
            # Window closed early; finish so the printed maze is complete
            for _ in viewer.gen_iter:
                pass
    else:
        generator.run_all()

    # Post-Processing (Braid)
    if args.braid > 0.0:
        logger.info(f"Braiding maze (factor={args.braid})...")
        removed = MazePostProcessor.braid(grid, factor=args.braid, rng=rng)
        logger.info(f"Removed {removed} dead ends.")

    logger.debug(f"Stats: {MazePostProcessor.calculate_stats(grid)}")

    field = None
    overlay = None
    if args.longest:
        path = longest_path(grid, root)
        field = Distances.build(grid, path[0])
        overlay = field.subset(path)
        logger.info(f"Longest path: {len(path) - 1} steps from {tuple(path[0])} to {tuple(path[-1])}")
    elif args.path is not None:
        field = Distances.build(grid, root)
        path = field.path_to(tuple(args.path))
        overlay = field.subset(path)
        logger.info(f"Path length: {len(path) - 1}")
    elif args.distances:
        field = Distances.build(grid, root)
        overlay = field
        cell, distance = field.max()
        logger.info(f"Farthest cell from {root}: {tuple(cell)} at {distance}")

    print(render(grid, overlay, style=args.style), end="")

    if args.png:
        from gridmaze.viz.image import render_image, save_image
        save_image(render_image(grid, field, cell_size=args.cell_size), args.png)


def run_benchmark(args):
    logger.info(f"Running Generator Benchmark Suite (Size: {args.size}x{args.size})...")
    names = [ALIASES.get(name, name) for name in args.algo] if args.algo else list(ALGORITHMS)

    print(f"\n{'ALGORITHM':<22} | {'TIME (s)':<10} | {'DEAD ENDS':<10} | {'LONGEST':<10}")
    print("-" * 62)

    for name in names:
        grid = Grid(args.size, args.size)
        t_start = time.time()
        get_generator(name)(grid, seed=args.seed).run_all()
        duration = time.time() - t_start

        stats = MazePostProcessor.calculate_stats(grid)
        longest = len(longest_path(grid)) - 1
        print(f"{name:<22} | {duration:<10.4f} | {stats['dead_ends']:<10} | {longest:<10}")


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    logger.info(f"Running command: {args.command}")

    try:
        if args.command == "generate":
            run_generate(args)
        elif args.command == "benchmark":
            run_benchmark(args)
    except (MazeError, ValueError) as e:
        logger.error(str(e))
        parser.error(str(e))

    return 0


if __name__ == "__main__":
    sys.exit(main())
