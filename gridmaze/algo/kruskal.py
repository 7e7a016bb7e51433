from typing import Dict, Iterator, List, Tuple
from gridmaze.core.grid import Cell, Grid
from gridmaze.algo.base import Generator


class DisjointSet:
    """Union-find over cells with path halving and union by size."""

    def __init__(self, cells):
        self.parent: Dict[Cell, Cell] = {cell: cell for cell in cells}
        self.size: Dict[Cell, int] = {cell: 1 for cell in self.parent}
        self.sets = len(self.parent)

    def find(self, cell: Cell) -> Cell:
        parent = self.parent
        while parent[cell] != cell:
            parent[cell] = parent[parent[cell]]
            cell = parent[cell]
        return cell

    def union(self, a: Cell, b: Cell) -> bool:
        """Merges the sets of a and b. False if they were already one set."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self.size[root_a] < self.size[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        self.size[root_a] += self.size[root_b]
        self.sets -= 1
        return True


class Kruskals(Generator):
    """
    Randomized Kruskal's: visit every neighbor pair in random order and
    link it whenever it joins two separate trees.
    """
    name = "kruskal"

    def run(self) -> Iterator[str]:
        sets = DisjointSet(self.grid)

        # Each pair once, from its northern or western member
        edges: List[Tuple[Cell, Cell]] = []
        for cell in self.grid:
            for dir_bit in (Grid.SOUTH, Grid.EAST):
                neighbor = self.grid.neighbor(cell, dir_bit)
                if neighbor is not None:
                    edges.append((cell, neighbor))
        self.rng.shuffle(edges)

        for a, b in edges:
            if sets.sets == 1:
                break
            if sets.union(a, b):
                self.grid.link(a, b)
                self.step_count += 1
                if self.step_count % 100 == 0:
                    yield f"Trees: {sets.sets}"

        yield "Done"
