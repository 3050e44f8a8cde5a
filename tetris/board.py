"""The playing field: occupied cells, collisions and line clearing."""

from __future__ import annotations

from tetris.tetromino import Tetromino

BOARD_WIDTH = 10
BOARD_HEIGHT = 20


class Board:
    """A grid of occupied and empty cells, indexed rows[y][x]."""

    def __init__(self, width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT) -> None:
        self.width = width
        self.height = height
        self.rows: list[list[bool]] = [[False] * width for _ in range(height)]

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_filled(self, x: int, y: int) -> bool:
        """Whether the cell at (x, y) holds a block."""
        if not self._inside(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the board")
        return self.rows[y][x]

    def can_move(self, piece: Tetromino, dx: int, dy: int) -> bool:
        """Whether the piece fits after shifting it by (dx, dy)."""
        return all(
            self._inside(x, y) and not self.rows[y][x]
            for x, y in piece.moved(dx, dy).cells()
        )

    def place(self, piece: Tetromino) -> None:
        """Fix the piece's blocks onto the board; blocks outside are dropped."""
        for x, y in piece.cells():
            if self._inside(x, y):
                self.rows[y][x] = True

    def clear_lines(self) -> int:
        """Remove every full row, shifting rows above down; return the count."""
        kept = [row for row in self.rows if not all(row)]
        cleared = self.height - len(kept)
        self.rows = [[False] * self.width for _ in range(cleared)] + kept
        return cleared

    def ghost(self, piece: Tetromino) -> Tetromino:
        """Return the piece dropped as far down as it can go."""
        while self.can_move(piece, 0, 1):
            piece = piece.moved(0, 1)
        return piece