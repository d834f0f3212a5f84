import numpy as np

# (row, col) offsets of the Moore neighbourhood.
_OFFSETS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]


def neighbor_counts(board: np.ndarray) -> np.ndarray:
    """Live-neighbor count of every cell of a toroidal board.

    Args:
        board: 2D array of shape (H, W) with values {0,1}.

    Returns:
        2D int16 array of shape (H, W) with counts in [0, 8]. Cells on an
        edge count the cells wrapped in from the opposite edge.
    """
    if board.ndim != 2:
        raise ValueError("board must be 2D")
    b = board.astype(np.int16)
    counts = np.zeros_like(b)
    for dr, dc in _OFFSETS:
        # np.roll by (-dr, -dc) brings cell (r + dr, c + dc) to (r, c)
        counts += np.roll(b, (-dr, -dc), axis=(0, 1))
    return counts


def life_step(board: np.ndarray) -> np.ndarray:
    """Whole-board B3/S23 step on a torus, used to check Universe.tick.

    Returns:
        Next board (uint8) with values {0,1}.
    """
    counts = neighbor_counts(board)
    live = board != 0
    born = ~live & (counts == 3)
    survive = live & ((counts == 2) | (counts == 3))
    return (born | survive).astype(np.uint8)
