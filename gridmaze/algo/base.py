import logging
import random
from abc import ABC, abstractmethod
from typing import Iterator
from gridmaze.core.grid import Grid

logger = logging.getLogger(__name__)


class Generator(ABC):
    name = "generator"

    def __init__(self, grid: Grid, rng: random.Random = None, seed: int = None):
        """
        rng: injected random source (random.Random or anything exposing
        random/randrange/choice/shuffle). A private Random(seed) otherwise.
        """
        self.grid = grid
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on self.grid.
        """
        pass

    def run_all(self) -> Grid:
        """Helper to run the generator to completion."""
        logger.debug("%s: generating %dx%d", self.name, self.grid.rows, self.grid.columns)
        for _ in self.run():
            pass
        logger.debug("%s: done after %d steps", self.name, self.step_count)
        return self.grid
