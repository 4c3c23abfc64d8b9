"""Shortest path and reachable-area report for a random grid maze.

Run from the repository root:
    python examples/grid_maze_bfs.py --size 32 --density 0.3 --seed 7
"""

from __future__ import annotations

import argparse
import logging

import numpy as np

from frontierx import (
    FifoFrontier,
    FindBranch,
    FindResult,
    IterBranch,
    SearchDepth,
    filter_duplicates,
)

STEPS = ((1, 0), (0, 1), (-1, 0), (0, -1))


def _make_maze(size: int, density: float, seed: int) -> np.ndarray:
    rng = np.random.default_rng(seed)
    walls = rng.random((size, size)) < density
    walls[0, 0] = False
    walls[-1, -1] = False
    return walls


def _neighbours(walls: np.ndarray, position: tuple[int, int]):
    height, width = walls.shape
    x, y = position
    for dx, dy in STEPS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < width and 0 <= ny < height and not walls[ny, nx]:
            yield (nx, ny)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--size", type=int, default=32)
    parser.add_argument("--density", type=float, default=0.3)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    walls = _make_maze(args.size, args.density, args.seed)
    goal = (args.size - 1, args.size - 1)

    area = filter_duplicates(FifoFrontier([(0, 0)]))
    area.recursive_iter(lambda p: IterBranch(_neighbours(walls, p)))

    def step(search):
        if search.state == goal:
            return FindResult(search.depth)
        return FindBranch(search.descend(p) for p in _neighbours(walls, search.state))

    distance = filter_duplicates(FifoFrontier([SearchDepth((0, 0))])).recursive_find(
        step
    )

    print(f"open tiles:      {int((~walls).sum())}")
    print(f"reachable tiles: {len(area.seen)}")
    print(f"distance to {goal}: {'unreachable' if distance is None else distance}")


if __name__ == "__main__":
    main()
