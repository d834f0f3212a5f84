from __future__ import annotations

from typing import Iterable, Iterator

import numpy as np

BLOCK_BITS = 32
_BLOCK_MASK = (1 << BLOCK_BITS) - 1


def _blocks_for(length: int) -> int:
    return (length + BLOCK_BITS - 1) // BLOCK_BITS


class FixedBitSet:
    """Fixed-length sequence of bits packed into uint32 blocks.

    Bit i lives in block i // 32 at position i % 32 (least significant bit
    first). Bits past ``len(self)`` in the last block are always zero.
    """

    def __init__(self, length: int = 0):
        if length < 0:
            raise ValueError("length must be non-negative")
        self._len = int(length)
        self._blocks = np.zeros(_blocks_for(self._len), dtype=np.uint32)

    @classmethod
    def from_bools(cls, values: Iterable[bool]) -> "FixedBitSet":
        """Pack a flat sequence of truthy values, one bit per element."""
        if not isinstance(values, np.ndarray):
            values = list(values)
        flat = np.asarray(values, dtype=bool).ravel()
        out = cls(flat.size)
        if flat.size:
            packed = np.packbits(flat, bitorder="little")
            padded = np.zeros(out._blocks.size * 4, dtype=np.uint8)
            padded[: packed.size] = packed
            out._blocks = padded.view("<u4").astype(np.uint32)
        return out

    def __len__(self) -> int:
        return self._len

    def _check(self, i: int) -> int:
        i = int(i)
        if i < 0 or i >= self._len:
            raise IndexError(f"bit index {i} out of range for length {self._len}")
        return i

    def get(self, i: int) -> bool:
        i = self._check(i)
        return bool((int(self._blocks[i // BLOCK_BITS]) >> (i % BLOCK_BITS)) & 1)

    def set(self, i: int, value: bool) -> None:
        i = self._check(i)
        b = i // BLOCK_BITS
        mask = 1 << (i % BLOCK_BITS)
        block = int(self._blocks[b])
        if value:
            block |= mask
        else:
            block &= ~mask & _BLOCK_MASK
        self._blocks[b] = block

    __getitem__ = get
    __setitem__ = set

    def grow(self, length: int) -> None:
        """Extend to at least ``length`` bits; new bits are zero. Never shrinks."""
        if length <= self._len:
            return
        blocks = np.zeros(_blocks_for(length), dtype=np.uint32)
        blocks[: self._blocks.size] = self._blocks
        self._blocks = blocks
        self._len = int(length)

    def resize(self, length: int) -> None:
        """Set the length to exactly ``length`` bits, all cleared."""
        if length < 0:
            raise ValueError("length must be non-negative")
        self._len = int(length)
        self._blocks = np.zeros(_blocks_for(self._len), dtype=np.uint32)

    def copy(self) -> "FixedBitSet":
        out = FixedBitSet.__new__(FixedBitSet)
        out._len = self._len
        out._blocks = self._blocks.copy()
        return out

    def to_bools(self) -> np.ndarray:
        """Unpacked bits as a 1D bool array of length ``len(self)``."""
        raw = self._blocks.astype("<u4").view(np.uint8)
        return np.unpackbits(raw, bitorder="little")[: self._len].astype(bool)

    def count_ones(self) -> int:
        return int(self.to_bools().sum())

    def ones(self) -> Iterator[int]:
        return iter(np.flatnonzero(self.to_bools()).tolist())

    def as_slice(self) -> np.ndarray:
        """Read-only view of the packed blocks."""
        view = self._blocks.view()
        view.flags.writeable = False
        return view

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedBitSet):
            return NotImplemented
        return self._len == other._len and np.array_equal(self._blocks, other._blocks)

    def __repr__(self) -> str:
        bits = "".join("1" if b else "0" for b in self.to_bools().tolist())
        return f"FixedBitSet(len={self._len}, bits={bits!r})"
