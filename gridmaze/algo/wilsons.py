from typing import Dict, Iterator, List
from gridmaze.core.grid import Cell
from gridmaze.algo.base import Generator

class Wilsons(Generator):
    """
    Uniform spanning tree from loop-erased random walks. Each walk starts at
    an unvisited cell and wanders until it touches the tree; any loop it
    closes along the way is cut out before the walk is carved in.
    """
    name = "wilsons"

    def run(self) -> Iterator[str]:
        # List for random choice, index map for O(1) swap-remove
        unvisited: List[Cell] = list(self.grid)
        index: Dict[Cell, int] = {cell: i for i, cell in enumerate(unvisited)}

        def mark_visited(cell: Cell):
            i = index.pop(cell)
            last = unvisited.pop()
            if last != cell:
                unvisited[i] = last
                index[last] = i

        mark_visited(self.rng.choice(unvisited))

        while unvisited:
            cell = self.rng.choice(unvisited)
            path: List[Cell] = [cell]
            # cell -> position in path
            position: Dict[Cell, int] = {cell: 0}

            while cell in index:
                cell = self.rng.choice(self.grid.neighbors_of(cell))
                if cell in position:
                    # Erase the loop back to the earlier visit
                    cut = position[cell] + 1
                    for erased in path[cut:]:
                        del position[erased]
                    del path[cut:]
                else:
                    position[cell] = len(path)
                    path.append(cell)

                self.step_count += 1
                if self.step_count % 100 == 0:
                    yield f"Walking... Path: {len(path)} Unvisited: {len(unvisited)}"

            # Last cell of the path is already in the tree
            for a, b in zip(path, path[1:]):
                self.grid.link(a, b)
                mark_visited(a)

        yield "Done"
