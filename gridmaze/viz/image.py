import logging
from typing import Optional

import cv2
import numpy as np

from gridmaze.core.distances import Distances
from gridmaze.core.grid import Grid

logger = logging.getLogger(__name__)

COLOR_BG = (255, 255, 255)
COLOR_WALL = (0, 0, 0)


def distance_colors(distances: Distances) -> np.ndarray:
    """
    (rows, columns, 3) uint8 shading: the root is palest green, the
    farthest cell darkest. Unreachable cells get the background color.
    """
    field = distances.to_array()
    reached = field >= 0
    maximum = int(field.max())

    if maximum > 0:
        intensity = np.clip((maximum - field) / maximum, 0.0, 1.0)
    else:
        intensity = np.ones(field.shape)

    # Capped below 255 so the root never matches the background
    dark = np.round(200 * intensity)
    bright = 128 + np.round(127 * intensity)
    colors = np.stack([dark, bright, dark], axis=-1).astype(np.uint8)
    colors[~reached] = COLOR_BG
    return colors


def render_image(grid: Grid, distances: Optional[Distances] = None, cell_size: int = 10, wall_size: int = 1) -> np.ndarray:
    """RGB uint8 raster of the maze, optionally shaded by a distance field."""
    if cell_size <= wall_size:
        raise ValueError(f"cell_size ({cell_size}) must exceed wall_size ({wall_size})")

    height = grid.rows * cell_size + wall_size
    width = grid.columns * cell_size + wall_size
    image = np.empty((height, width, 3), dtype=np.uint8)
    image[:] = COLOR_BG

    if distances is not None:
        colors = distance_colors(distances)
        # Upscale one pixel per cell to cell_size blocks
        blocks = np.repeat(np.repeat(colors, cell_size, axis=0), cell_size, axis=1)
        image[:grid.rows * cell_size, :grid.columns * cell_size] = blocks

    for cell in grid:
        x0 = cell.column * cell_size
        y0 = cell.row * cell_size
        x1 = x0 + cell_size
        y1 = y0 + cell_size

        if cell.row == 0:
            image[y0:y0 + wall_size, x0:x1 + wall_size] = COLOR_WALL
        if cell.column == 0:
            image[y0:y1 + wall_size, x0:x0 + wall_size] = COLOR_WALL
        if grid.has_wall(cell, Grid.EAST):
            image[y0:y1 + wall_size, x1:x1 + wall_size] = COLOR_WALL
        if grid.has_wall(cell, Grid.SOUTH):
            image[y1:y1 + wall_size, x0:x1 + wall_size] = COLOR_WALL

    return image


def save_image(image: np.ndarray, path: str):
    # OpenCV expects BGR
    ok = cv2.imwrite(path, cv2.cvtColor(image, cv2.COLOR_RGB2BGR))
    if not ok:
        raise OSError(f"Could not write image to {path}")
    logger.info("Saved %dx%d image to %s", image.shape[1], image.shape[0], path)
