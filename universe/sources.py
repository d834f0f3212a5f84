from __future__ import annotations

import itertools
from typing import Callable, Iterable, Optional

import numpy as np

# Zero-argument callable returning the state of the next cell.
RandomBool = Callable[[], bool]


def numpy_random_bool(seed: Optional[int] = None, p: float = 0.5) -> RandomBool:
    """Return a source that yields True with probability ``p``."""
    if not (0.0 <= p <= 1.0):
        raise ValueError("p must be in [0,1]")
    rng = np.random.default_rng(seed)

    def draw() -> bool:
        return bool(rng.random() < p)

    return draw


def scripted_random_bool(values: Iterable[bool]) -> RandomBool:
    """Return a source that replays ``values`` in order, cycling when exhausted."""
    script = [bool(v) for v in values]
    if not script:
        raise ValueError("values must be non-empty")
    it = itertools.cycle(script)
    return lambda: next(it)
