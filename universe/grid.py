from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

import numpy as np

from .bitset import FixedBitSet
from .sources import RandomBool, numpy_random_bool

logger = logging.getLogger(__name__)

ALIVE_GLYPH = "◼"
DEAD_GLYPH = "◻"

# Row-major 3x3 neighbourhood written by seed_glider_at.
GLIDER = (
    False, True, True,
    True, False, True,
    False, False, True,
)


def _check_dimension(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must be non-negative")
    return int(value)


def transition(alive: bool, live_neighbors: int) -> bool:
    """Conway's B3/S23 rule for a single cell."""
    if alive and live_neighbors < 2:
        # underpopulation
        return False
    if alive and live_neighbors in (2, 3):
        return True
    if alive and live_neighbors > 3:
        # overpopulation
        return False
    if not alive and live_neighbors == 3:
        # reproduction
        return True
    return alive


class Universe:
    """Toroidal Game of Life board stored as a row-major bit set.

    Neighbor counting and glider seeding wrap around both edges. Direct
    setters (``set_alive_cells``) and ``cell_state`` do not wrap; they expect
    in-range coordinates.
    """

    def __init__(self, width: int, height: int, cells: Optional[FixedBitSet] = None):
        self._width = _check_dimension(width, "width")
        self._height = _check_dimension(height, "height")
        size = self._width * self._height
        if cells is None:
            cells = FixedBitSet(size)
        elif len(cells) != size:
            raise ValueError(f"cells must hold width*height={size} bits, got {len(cells)}")
        else:
            cells = cells.copy()
        self._cells = cells

    # -- construction -----------------------------------------------------

    @classmethod
    def new(cls, width: int, height: int, random_bool: Optional[RandomBool] = None) -> "Universe":
        """Each cell alive with probability 1/2, drawn from ``random_bool``."""
        draw = random_bool if random_bool is not None else numpy_random_bool()
        u = cls(width, height)
        for i in range(len(u._cells)):
            u._cells.set(i, bool(draw()))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("random universe %dx%d, %d alive", u._width, u._height, u._cells.count_ones())
        return u

    @classmethod
    def deterministic_pattern(cls, width: int = 64, height: int = 64) -> "Universe":
        """Reproducible seed: cell i alive iff i % 2 == 0 or i % 7 == 0."""
        size = _check_dimension(width, "width") * _check_dimension(height, "height")
        idx = np.arange(size)
        cells = FixedBitSet.from_bools((idx % 2 == 0) | (idx % 7 == 0))
        return cls(width, height, cells)

    @classmethod
    def empty(cls, width: int, height: int) -> "Universe":
        return cls(width, height)

    @classmethod
    def with_seeded_glider(cls, width: int, height: int) -> "Universe":
        u = cls.empty(width, height)
        u.seed_glider_at(width // 2, height // 2)
        return u

    @classmethod
    def from_array(cls, board: np.ndarray) -> "Universe":
        """Build from a 2D array; nonzero entries are alive."""
        b = np.asarray(board)
        if b.ndim != 2:
            raise ValueError("board must be 2D")
        height, width = b.shape
        return cls(width, height, FixedBitSet.from_bools(b != 0))

    # -- storage and indexing ---------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def set_width(self, width: int) -> None:
        """Set the width of the universe.

        Resets all cells to the dead state, also when the width is unchanged.
        """
        self._width = _check_dimension(width, "width")
        self._cells.resize(self._width * self._height)
        logger.debug("resized to %dx%d, all cells reset", self._width, self._height)

    def set_height(self, height: int) -> None:
        """Set the height of the universe.

        Resets all cells to the dead state, also when the height is unchanged.
        """
        self._height = _check_dimension(height, "height")
        self._cells.resize(self._width * self._height)
        logger.debug("resized to %dx%d, all cells reset", self._width, self._height)

    def index(self, row: int, column: int) -> int:
        return row * self._width + column

    def cell_state(self, row: int, column: int) -> bool:
        return self._cells[self.index(row, column)]

    def cells(self) -> np.ndarray:
        """Packed cell bits as a read-only uint32 array (bit i is cell i)."""
        return self._cells.as_slice()

    def get_cells(self) -> FixedBitSet:
        """Copy of the cell bit set."""
        return self._cells.copy()

    def to_array(self) -> np.ndarray:
        """Dense (height, width) uint8 copy of the board."""
        return self._cells.to_bools().reshape(self._height, self._width).astype(np.uint8)

    def population(self) -> int:
        return self._cells.count_ones()

    # -- evolution --------------------------------------------------------

    def _require_cells(self) -> None:
        if self._width == 0 or self._height == 0:
            raise ValueError("universe must have non-zero width and height")

    def live_neighbor_count(self, row: int, column: int) -> int:
        self._require_cells()
        count = 0
        for delta_row in (self._height - 1, 0, 1):
            for delta_col in (self._width - 1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                neighbor_row = (row + delta_row) % self._height
                neighbor_col = (column + delta_col) % self._width
                count += self._cells[self.index(neighbor_row, neighbor_col)]
        return count

    def tick(self) -> None:
        """Advance one generation.

        Every cell is computed from the current buffer into a copy, which then
        replaces it; no cell sees a neighbour already updated in this tick.
        """
        self._require_cells()
        nxt = self._cells.copy()
        changed = 0
        for row in range(self._height):
            for col in range(self._width):
                idx = self.index(row, col)
                cell = self._cells[idx]
                next_cell = transition(cell, self.live_neighbor_count(row, col))
                nxt[idx] = next_cell
                if next_cell != cell:
                    changed += 1
        self._cells = nxt
        logger.debug("tick: %d cells changed", changed)

    def step(self, generations: int = 1) -> None:
        if generations < 0:
            raise ValueError("generations must be non-negative")
        for _ in range(generations):
            self.tick()

    # -- seeding ----------------------------------------------------------

    def seed_glider_at(self, row: int, column: int) -> None:
        """Overwrite the wrapped 3x3 block centered at (row, column) with a glider."""
        self._require_cells()
        i = 0
        for delta_row in (self._height - 1, 0, 1):
            for delta_col in (self._width - 1, 0, 1):
                neighbor_row = (row + delta_row) % self._height
                neighbor_col = (column + delta_col) % self._width
                self._cells[self.index(neighbor_row, neighbor_col)] = GLIDER[i]
                i += 1

    def set_alive_cells(self, cells: Iterable[Tuple[int, int]]) -> None:
        """Mark each (row, column) alive. Coordinates are not wrapped."""
        for row, col in cells:
            if not (0 <= row < self._height and 0 <= col < self._width):
                raise IndexError(f"cell ({row}, {col}) outside {self._height}x{self._width} universe")
            self._cells[self.index(row, col)] = True

    # -- rendering --------------------------------------------------------

    def render(self) -> str:
        bits = self._cells.to_bools()
        lines = []
        for row in range(self._height):
            start = self.index(row, 0)
            lines.append("".join(ALIVE_GLYPH if b else DEAD_GLYPH for b in bits[start:start + self._width]))
            lines.append("\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Universe(width={self._width}, height={self._height}, alive={self.population()})"
