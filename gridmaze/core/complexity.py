import logging
import random
from gridmaze.core.grid import Grid

logger = logging.getLogger(__name__)


class MazePostProcessor:
    @staticmethod
    def braid(grid: Grid, factor: float = 1.0, rng: random.Random = None, seed: int = None) -> int:
        """
        Removes dead ends to create loops.
        factor: 0.0 = Remove NO dead ends (Perfect Maze)
                1.0 = Remove ALL dead ends (No dead ends)
        """
        if not 0.0 <= factor <= 1.0:
            raise ValueError(f"Braid factor must be within [0, 1], got {factor}")
        if rng is None:
            rng = random.Random(seed)

        dead_ends = grid.dead_ends()
        rng.shuffle(dead_ends)

        # Number to remove
        target_remove = int(len(dead_ends) * factor)
        removed_count = 0

        for cell in dead_ends:
            if removed_count >= target_remove:
                break

            # Re-check: a previous braid may already have opened it
            if len(grid.links(cell)) != 1:
                continue

            closed_neighbors = [n for n in grid.neighbors_of(cell) if not grid.is_linked(cell, n)]
            if not closed_neighbors:
                continue

            # Joining two dead ends removes both at once
            best = [n for n in closed_neighbors if len(grid.links(n)) == 1]
            grid.link(cell, rng.choice(best or closed_neighbors))
            removed_count += 1

        logger.debug("Braided %d of %d dead ends", removed_count, len(dead_ends))
        return removed_count

    @staticmethod
    def calculate_stats(grid: Grid):
        dead_ends = 0
        corridors = 0 # 2 links
        junctions = 0 # 3+ links

        for cell in grid:
            exits = len(grid.links(cell))
            if exits == 1: dead_ends += 1
            elif exits == 2: corridors += 1
            elif exits >= 3: junctions += 1

        total = grid.size
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "links": grid.link_count(),
            "dead_end_percent": (dead_ends / total) * 100,
        }
