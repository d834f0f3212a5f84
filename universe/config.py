from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import yaml

from .grid import Universe
from .sources import numpy_random_bool

PATTERNS = ("random", "deterministic", "glider", "empty")


@dataclass
class UniverseConfig:
    width: int = 64
    height: int = 64
    pattern: str = "random"  # one of PATTERNS
    seed: Optional[int] = None
    alive_cells: List[Tuple[int, int]] = field(default_factory=list)
    generations: int = 10
    print_every: int = 1

    def __post_init__(self):
        for name in ("width", "height", "generations", "print_every"):
            value = getattr(self, name)
            if value is None or isinstance(value, bool):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            try:
                setattr(self, name, int(value))
            except (TypeError, ValueError) as e:
                raise ValueError(f"{name} must be an integer, got {value!r}") from e
        if self.seed is not None:
            self.seed = int(self.seed)
        if self.alive_cells is None:
            self.alive_cells = []
        if self.pattern not in PATTERNS:
            raise ValueError(f"pattern must be one of {PATTERNS}, got {self.pattern!r}")
        if self.width < 0 or self.height < 0:
            raise ValueError("width and height must be non-negative")
        if self.generations < 0:
            raise ValueError("generations must be non-negative")
        if self.print_every < 1:
            raise ValueError("print_every must be >= 1")
        self.alive_cells = [(int(r), int(c)) for r, c in self.alive_cells]

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "UniverseConfig":
        known = set(cls.__dataclass_fields__)
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ValueError(f"unknown config keys: {unknown}")
        return cls(**raw)


def load_config(path: str) -> UniverseConfig:
    with open(path, "r") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError("config must be a YAML mapping")
    return UniverseConfig.from_dict(raw)


def build_universe(cfg: UniverseConfig) -> Universe:
    if cfg.pattern == "random":
        u = Universe.new(cfg.width, cfg.height, numpy_random_bool(cfg.seed))
    elif cfg.pattern == "deterministic":
        u = Universe.deterministic_pattern(cfg.width, cfg.height)
    elif cfg.pattern == "glider":
        u = Universe.with_seeded_glider(cfg.width, cfg.height)
    else:
        u = Universe.empty(cfg.width, cfg.height)
    if cfg.alive_cells:
        u.set_alive_cells(cfg.alive_cells)
    return u
