from __future__ import annotations

from typing import Dict, List

import numpy as np

INITIAL_SIZE = 30000

CELL_DTYPES = {
    8: np.uint8,
    16: np.uint16,
    32: np.uint32,
    64: np.uint64,
}


class Tape:
    """
    Zero-initialized cell array with a movable cursor.

    The tape is conceptually infinite in both directions. Physically it is a
    numpy buffer that doubles whenever the cursor would leave it:

    - Growing right appends a zeroed block; nothing moves.
    - Growing left prepends a zeroed block; existing cells and the cursor
      shift up by the inserted size, so logical offsets never change.

    ``origin`` is the physical index of logical offset 0 (where the cursor
    started), which lets callers address cells independently of growth.
    """

    def __init__(self, size=INITIAL_SIZE, cell_bits=64):
        if size <= 0:
            raise ValueError(f"Tape size must be positive, got {size}")
        if cell_bits not in CELL_DTYPES:
            raise ValueError(f"Unsupported cell width: {cell_bits} bits")
        self.cell_bits = cell_bits
        self.mask = (1 << cell_bits) - 1
        self.cells = np.zeros(size, dtype=CELL_DTYPES[cell_bits])
        self.cursor = 0
        self.origin = 0

    def __len__(self) -> int:
        return len(self.cells)

    @property
    def position(self) -> int:
        """Logical cursor offset relative to the starting cell."""
        return self.cursor - self.origin

    # ===== Cursor cell access =====

    def current_value(self) -> int:
        return int(self.cells[self.cursor])

    def set(self, value: int) -> None:
        self.cells[self.cursor] = int(value) & self.mask

    def add(self, delta: int) -> None:
        self.cells[self.cursor] = (int(self.cells[self.cursor]) + delta) & self.mask

    # ===== Movement and growth =====

    def move(self, offset: int) -> None:
        while offset < 0 and -offset > self.cursor:
            self._grow_left()

        self.cursor += offset

        while self.cursor >= len(self.cells):
            self._grow_right()

    def _grow_right(self) -> None:
        self.cells = np.concatenate((self.cells, np.zeros_like(self.cells)))

    def _grow_left(self) -> None:
        old_size = len(self.cells)
        self.cells = np.concatenate((np.zeros_like(self.cells), self.cells))
        self.cursor += old_size
        self.origin += old_size

    # ===== Inspection by logical offset =====

    def peek(self, offset: int) -> int:
        idx = self.origin + offset
        if idx < 0 or idx >= len(self.cells):
            return 0
        return int(self.cells[idx])

    def window(self, start: int, stop: int) -> List[int]:
        return [self.peek(offset) for offset in range(start, stop)]

    def nonzero(self) -> Dict[int, int]:
        (indices,) = np.nonzero(self.cells)
        return {int(i) - self.origin: int(self.cells[i]) for i in indices}
