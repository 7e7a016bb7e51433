import unittest
import random
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from gridmaze.algo.binary_tree import BinaryTree
from gridmaze.algo.dfs import RecursiveBacktracker
from gridmaze.algo.kruskal import DisjointSet
from gridmaze.algo.registry import ALGORITHMS, generate, get_generator
from gridmaze.algo.sidewinder import Sidewinder
from gridmaze.core.distances import Distances
from gridmaze.core.errors import UnknownAlgorithm
from gridmaze.core.grid import Grid


class ScriptedRandom:
    """Always takes the first choice and never closes a sidewinder run early."""

    def choice(self, seq):
        return seq[0]

    def randrange(self, *args):
        return 1

    def random(self):
        return 0.99

    def shuffle(self, seq):
        pass


class TestGenerators(unittest.TestCase):
    SIZES = [(1, 1), (1, 6), (6, 1), (2, 2), (7, 9)]

    def assertSpanningTree(self, grid, name):
        n = grid.size
        self.assertEqual(grid.link_count(), n - 1, f"{name} should leave exactly {n - 1} links")
        reached = Distances.build(grid, (0, 0))
        self.assertEqual(len(reached), n, f"{name} should connect every cell")

    def test_all_generators_produce_spanning_trees(self):
        for name in ALGORITHMS:
            for rows, cols in self.SIZES:
                with self.subTest(algo=name, size=(rows, cols)):
                    grid = Grid(rows, cols)
                    generate(grid, name, seed=42)
                    self.assertSpanningTree(grid, name)

    def test_links_are_symmetric(self):
        for name in ALGORITHMS:
            grid = generate(Grid(6, 6), name, seed=3)
            for cell in grid:
                for other in grid.links(cell):
                    self.assertTrue(grid.is_linked(other, cell))
                    self.assertIn(other, grid.neighbors_of(cell))

    def test_single_cell_is_trivial(self):
        for name in ALGORITHMS:
            grid = Grid(1, 1)
            get_generator(name)(grid, seed=1).run_all()
            self.assertEqual(grid.link_count(), 0)

    def test_determinism(self):
        for name in ALGORITHMS:
            with self.subTest(algo=name):
                grid1 = Grid(10, 10)
                get_generator(name)(grid1, seed=12345).run_all()

                grid2 = Grid(10, 10)
                gen = get_generator(name)(grid2, rng=random.Random(12345))
                for _ in gen.run(): pass

                self.assertEqual(grid1.cells.tobytes(), grid2.cells.tobytes())

    def test_run_yields_progress_and_done(self):
        grid = Grid(20, 20)
        statuses = list(RecursiveBacktracker(grid, seed=1).run())
        self.assertEqual(statuses[-1], "Done")
        self.assertGreater(len(statuses), 1)

    def test_backtracker_start(self):
        grid = Grid(5, 5)
        RecursiveBacktracker(grid, seed=9, start=(2, 2)).run_all()
        self.assertEqual(grid.link_count(), 24)

    def test_binary_tree_prefers_north(self):
        grid = Grid(4, 4)
        BinaryTree(grid, rng=ScriptedRandom()).run_all()

        # Top row is one corridor
        for col in range(3):
            self.assertTrue(grid.is_linked((0, col), (0, col + 1)))
        # Every other cell goes north, nothing else
        for row in range(1, 4):
            for col in range(4):
                self.assertEqual(grid.links((row, col)), [(row - 1, col)] + ([(row + 1, col)] if row < 3 else []))
        self.assertEqual(grid.link_count(), 15)

    def test_binary_tree_top_row_and_east_column(self):
        # Whatever the coin says, the top row and east column are corridors
        grid = Grid(6, 6)
        BinaryTree(grid, seed=5).run_all()
        for col in range(5):
            self.assertTrue(grid.is_linked((0, col), (0, col + 1)))
        for row in range(1, 6):
            self.assertTrue(grid.is_linked((row, 5), (row - 1, 5)))

    def test_sidewinder_runs_never_close(self):
        grid = Grid(4, 4)
        Sidewinder(grid, rng=ScriptedRandom()).run_all()
        for row in range(4):
            for col in range(3):
                self.assertTrue(grid.is_linked((row, col), (row, col + 1)))
        # Each closed run goes north from its first member
        for row in range(1, 4):
            self.assertTrue(grid.is_linked((row, 0), (row - 1, 0)))
        self.assertEqual(grid.link_count(), 15)

    def test_sidewinder_top_row_is_corridor(self):
        grid = Grid(5, 8)
        Sidewinder(grid, seed=11).run_all()
        for col in range(7):
            self.assertTrue(grid.is_linked((0, col), (0, col + 1)))

    def test_wilsons_large_grid(self):
        grid = Grid(30, 40)
        get_generator("wilsons")(grid, seed=17).run_all()
        self.assertSpanningTree(grid, "wilsons")

    def test_unknown_algorithm(self):
        with self.assertRaises(UnknownAlgorithm):
            get_generator("growing_tree")
        self.assertIs(get_generator("dfs"), RecursiveBacktracker)

    def test_disjoint_set(self):
        sets = DisjointSet(["a", "b", "c"])
        self.assertTrue(sets.union("a", "b"))
        self.assertFalse(sets.union("b", "a"))
        self.assertEqual(sets.find("a"), sets.find("b"))
        self.assertNotEqual(sets.find("a"), sets.find("c"))
        self.assertEqual(sets.sets, 2)

if __name__ == '__main__':
    unittest.main()
