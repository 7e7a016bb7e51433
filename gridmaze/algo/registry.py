from typing import Dict, Type

from gridmaze.algo.aldous_broder import AldousBroder
from gridmaze.algo.base import Generator
from gridmaze.algo.binary_tree import BinaryTree
from gridmaze.algo.dfs import RecursiveBacktracker
from gridmaze.algo.hunt_and_kill import HuntAndKill
from gridmaze.algo.kruskal import Kruskals
from gridmaze.algo.prim import PrimsAlgorithm
from gridmaze.algo.sidewinder import Sidewinder
from gridmaze.algo.wilsons import Wilsons
from gridmaze.core.errors import UnknownAlgorithm
from gridmaze.core.grid import Grid

ALGORITHMS: Dict[str, Type[Generator]] = {
    cls.name: cls
    for cls in (
        BinaryTree,
        Sidewinder,
        AldousBroder,
        Wilsons,
        HuntAndKill,
        RecursiveBacktracker,
        PrimsAlgorithm,
        Kruskals,
    )
}

# Short names accepted on the command line
ALIASES = {
    "dfs": "recursive_backtracker",
    "backtracker": "recursive_backtracker",
    "wilson": "wilsons",
}


def get_generator(name: str) -> Type[Generator]:
    key = ALIASES.get(name, name)
    try:
        return ALGORITHMS[key]
    except KeyError:
        raise UnknownAlgorithm(name, sorted(ALGORITHMS)) from None


def generate(grid: Grid, algorithm: str = "recursive_backtracker", rng=None, seed: int = None) -> Grid:
    """Runs one generator over grid to completion and returns the grid."""
    return get_generator(algorithm)(grid, rng=rng, seed=seed).run_all()
