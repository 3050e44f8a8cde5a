"""Tetromino pieces: shapes, movement and rotation."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Iterator

BLOCK_SIZE = 32
GRID = 4

Shape = tuple[tuple[int, ...], ...]
Color = tuple[int, int, int]

SHAPE_NAMES = "ITOSZLJ"

SHAPES: tuple[Shape, ...] = (
    ((1, 1, 1, 1), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0)),  # I
    ((1, 1, 1, 0), (0, 1, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0)),  # T
    ((1, 1, 0, 0), (1, 1, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0)),  # O
    ((1, 1, 0, 0), (0, 1, 1, 0), (0, 0, 0, 0), (0, 0, 0, 0)),  # S
    ((0, 1, 1, 0), (1, 1, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0)),  # Z
    ((1, 0, 0, 0), (1, 1, 1, 0), (0, 0, 0, 0), (0, 0, 0, 0)),  # L
    ((0, 0, 1, 0), (1, 1, 1, 0), (0, 0, 0, 0), (0, 0, 0, 0)),  # J
)

SPAWN_X = 4
SPAWN_Y = 0


@dataclass(frozen=True)
class Tetromino:
    """A piece on the grid: position, 4x4 shape matrix and colour."""

    x: int
    y: int
    shape: Shape
    color: Color = (255, 255, 255)

    @classmethod
    def spawn(cls, rng: random.Random | None = None) -> Tetromino:
        """Create a random piece with a random colour at the spawn point."""
        rng = rng or random.Random()
        shape = SHAPES[rng.randrange(len(SHAPES))]
        color = (rng.randrange(256), rng.randrange(256), rng.randrange(256))
        return cls(x=SPAWN_X, y=SPAWN_Y, shape=shape, color=color)

    def _local_cells(self) -> Iterator[tuple[int, int]]:
        for i, row in enumerate(self.shape):
            for j, value in enumerate(row):
                if value:
                    yield j, i

    def cells(self) -> Iterator[tuple[int, int]]:
        """Yield the (x, y) grid coordinates of every block of the piece."""
        for j, i in self._local_cells():
            yield self.x + j, self.y + i

    def moved(self, dx: int, dy: int) -> Tetromino:
        """Return the piece shifted by (dx, dy)."""
        return replace(self, x=self.x + dx, y=self.y + dy)

    def rotated(self) -> Tetromino:
        """Return the piece with its 4x4 matrix turned 90 degrees clockwise."""
        size = len(self.shape)
        new_shape = tuple(
            tuple(self.shape[size - 1 - c][r] for c in range(size))
            for r in range(size)
        )
        return replace(self, shape=new_shape)

    def preview_cells(self) -> list[tuple[int, int]]:
        """Pixel offsets of the blocks, centred inside a 4x4-block preview box."""
        local = list(self._local_cells())
        if not local:
            return []
        xs = [j for j, _ in local]
        ys = [i for _, i in local]
        min_x, min_y = min(xs), min(ys)
        width = (max(xs) - min_x + 1) * BLOCK_SIZE
        height = (max(ys) - min_y + 1) * BLOCK_SIZE
        offset_x = (GRID * BLOCK_SIZE - width) // 2
        offset_y = (GRID * BLOCK_SIZE - height) // 2
        return [
            (offset_x + (j - min_x) * BLOCK_SIZE, offset_y + (i - min_y) * BLOCK_SIZE)
            for j, i in local
        ]