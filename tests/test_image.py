import unittest
import sys
import os
import tempfile

import cv2
import numpy as np

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from gridmaze.algo.registry import generate
from gridmaze.core.distances import Distances
from gridmaze.core.grid import Grid
from gridmaze.viz.image import distance_colors, render_image, save_image
from gridmaze.viz.recorder import VideoRecorder

class TestImage(unittest.TestCase):
    def test_shape_and_border(self):
        grid = generate(Grid(3, 5), "prim", seed=1)
        image = render_image(grid, cell_size=10, wall_size=1)
        self.assertEqual(image.shape, (31, 51, 3))
        self.assertEqual(image.dtype, np.uint8)

        # Boundary is always walled
        self.assertTrue((image[0, :] == 0).all())
        self.assertTrue((image[-1, :] == 0).all())
        self.assertTrue((image[:, 0] == 0).all())
        self.assertTrue((image[:, -1] == 0).all())
        # Cell interiors are background
        self.assertEqual(tuple(image[5, 5]), (255, 255, 255))

    def test_open_passage_has_no_wall(self):
        grid = Grid(1, 2)
        closed = render_image(grid)
        grid.link((0, 0), (0, 1))
        opened = render_image(grid)
        # Pixel on the shared wall between the two cells
        self.assertEqual(tuple(closed[5, 10]), (0, 0, 0))
        self.assertEqual(tuple(opened[5, 10]), (255, 255, 255))

    def test_distance_shading(self):
        grid = Grid(1, 3)
        grid.link((0, 0), (0, 1))
        grid.link((0, 1), (0, 2))
        colors = distance_colors(Distances.build(grid, (0, 0)))
        self.assertEqual(tuple(colors[0, 0]), (200, 255, 200))
        self.assertEqual(tuple(colors[0, 2]), (0, 128, 0))

        image = render_image(grid, Distances.build(grid, (0, 0)))
        self.assertEqual(tuple(image[5, 25]), (0, 128, 0))

    def test_unreachable_cells_use_background(self):
        grid = Grid(2, 2)
        grid.link((0, 0), (0, 1))
        colors = distance_colors(Distances.build(grid, (0, 0)))
        self.assertEqual(tuple(colors[1, 1]), (255, 255, 255))
        self.assertEqual(tuple(colors[0, 1]), (0, 128, 0))

    def test_root_differs_from_background(self):
        grid = generate(Grid(5, 5), "kruskal", seed=6)
        colors = distance_colors(Distances.build(grid, (2, 2)))
        # Every cell is reachable, so none may look like the background
        self.assertFalse((colors == 255).all(axis=-1).any())
        single = distance_colors(Distances.build(Grid(1, 1), (0, 0)))
        self.assertNotEqual(tuple(single[0, 0]), (255, 255, 255))

    def test_invalid_cell_size(self):
        with self.assertRaises(ValueError):
            render_image(Grid(2, 2), cell_size=1, wall_size=1)

    def test_save_image(self):
        grid = generate(Grid(4, 4), "sidewinder", seed=3)
        image = render_image(grid, Distances.build(grid, (0, 0)), cell_size=8)
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "maze.png")
            save_image(image, path)
            loaded = cv2.imread(path)
            self.assertEqual(loaded.shape, image.shape)
            # Stored as BGR on disk
            self.assertTrue((cv2.cvtColor(loaded, cv2.COLOR_BGR2RGB) == image).all())

    def test_recorder_inactive_is_noop(self):
        recorder = VideoRecorder(active=False)
        recorder.capture_frame(render_image(Grid(2, 2)))
        recorder.stop()
        self.assertEqual(recorder.frame_count, 0)

if __name__ == '__main__':
    unittest.main()
