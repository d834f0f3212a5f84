from .bitset import FixedBitSet
from .sources import RandomBool, numpy_random_bool, scripted_random_bool
from .grid import ALIVE_GLYPH, DEAD_GLYPH, GLIDER, Universe, transition
from .dense import neighbor_counts, life_step
from .trajectory import CycleInfo, collect_trajectory, find_cycle
from .config import UniverseConfig, load_config, build_universe

__all__ = [
    "FixedBitSet",
    "RandomBool",
    "numpy_random_bool",
    "scripted_random_bool",
    "ALIVE_GLYPH",
    "DEAD_GLYPH",
    "GLIDER",
    "Universe",
    "transition",
    "neighbor_counts",
    "life_step",
    "CycleInfo",
    "collect_trajectory",
    "find_cycle",
    "UniverseConfig",
    "load_config",
    "build_universe",
]
