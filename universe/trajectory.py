from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

from .grid import Universe


@dataclass
class CycleInfo:
    start: int
    period: int


def collect_trajectory(universe: Universe, horizon: int) -> np.ndarray:
    """Return boards (T, H, W) starting from the current state.

    The universe is ticked ``horizon - 1`` times and left at the last board.
    """
    if horizon < 1:
        raise ValueError("horizon must be >= 1")
    traj = np.empty((horizon, universe.height, universe.width), dtype=np.uint8)
    traj[0] = universe.to_array()
    for t in range(1, horizon):
        universe.tick()
        traj[t] = universe.to_array()
    return traj


def find_cycle(universe: Universe, max_steps: int = 1000) -> Optional[CycleInfo]:
    """Tick until a board repeats, at most ``max_steps`` times.

    ``start`` is the generation (counted from the current one) where the cycle
    begins. On success the universe is left at generation ``start + period``.
    Returns None if no repeat is seen.
    """
    seen: Dict[bytes, int] = {}
    for t in range(max_steps + 1):
        key = universe.cells().tobytes()
        if key in seen:
            return CycleInfo(start=seen[key], period=t - seen[key])
        seen[key] = t
        if t < max_steps:
            universe.tick()
    return None
