"""Headless entry point: run a search on a grid and print the replayed result."""

import argparse
import logging
import sys
from typing import List

from PySide6.QtCore import QCoreApplication

from .domain.types import Algorithm, Coord


def parse_walls(text: str) -> List[Coord]:
    """Parse 'r,c;r,c;...' into coordinates."""
    walls = []
    for item in filter(None, (part.strip() for part in text.split(";"))):
        row, col = item.split(",")
        walls.append((int(row), int(col)))
    return walls


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathlab",
        description="Run a grid search or maze generation and print the replayed grid",
    )
    parser.add_argument("--algorithm", "-a", default="dijkstra",
                        choices=[a.value for a in Algorithm], help="Search strategy")
    parser.add_argument("--rows", type=int, default=20, help="Grid rows (10-50)")
    parser.add_argument("--cols", type=int, default=50, help="Grid columns (10-100)")
    parser.add_argument("--walls", type=str, default="", help="Walls as 'r,c;r,c;...'")
    parser.add_argument("--maze", action="store_true", help="Carve a maze before searching")
    parser.add_argument("--seed", type=int, default=None, help="Seed for maze generation")
    parser.add_argument("--steps", type=int, default=None,
                        help="Only replay this many search steps instead of the whole trace")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None) -> int:
    """Main entry point for the command-line runner."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    app.setApplicationName("pathlab")

    # Import after the application object exists
    from .app.config import AppConfig
    from .app.controller import VisualizerController
    from .utils.grid_factory import grid_to_ascii

    errors = []
    try:
        walls = parse_walls(args.walls)
    except ValueError:
        print(f"Invalid --walls value: {args.walls!r}")
        return 2

    controller = VisualizerController(
        AppConfig(rows=args.rows, cols=args.cols, algorithm=args.algorithm, seed=args.seed)
    )
    controller.error_occurred.connect(errors.append)

    if args.maze:
        controller.generate_maze(args.seed)
        controller.finish()

    for row, col in walls:
        controller.toggle_wall(row, col)

    if args.steps is None:
        controller.visualize()
        controller.finish()
    else:
        for _ in range(args.steps):
            if not controller.step():
                break

    if errors:
        for message in errors:
            print(f"Error: {message}")
        return 1

    grid = controller.grid
    result = controller.last_result
    print(grid_to_ascii(grid))
    print(f"Grid: {grid.rows}x{grid.cols}  Start: {grid.start}  End: {grid.end}")
    if result is not None:
        status = f"path length {result.path_length}" if result.found else "no path"
        print(f"{result.algorithm.value}: visited {result.nodes_explored} cells, {status}")
        print(f"Replayed {controller.replay.cursor}/{controller.replay.total} steps")
    return 0


if __name__ == "__main__":
    sys.exit(main())
