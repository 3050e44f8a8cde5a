"""Game state: current and next piece, score, toggles and the rules for moving."""

from __future__ import annotations

import random

from tetris.board import Board
from tetris.tetromino import Tetromino

LINE_SCORE = 100


class Game:
    """One running game. Movement is ignored while paused."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()
        self.board = Board()
        self.current = Tetromino.spawn(self.rng)
        self.next_piece = Tetromino.spawn(self.rng)
        self.score = 0
        self.paused = False
        self.show_ghost = False
        self.show_preview = False

    def _shift(self, dx: int, dy: int) -> bool:
        if self.paused or not self.board.can_move(self.current, dx, dy):
            return False
        self.current = self.current.moved(dx, dy)
        return True

    def _lock(self) -> None:
        self.board.place(self.current)
        self.score += LINE_SCORE * self.board.clear_lines()

    def rotate(self) -> bool:
        """Rotate the current piece if the result fits."""
        if self.paused:
            return False
        candidate = self.current.rotated()
        if not self.board.can_move(candidate, 0, 0):
            return False
        self.current = candidate
        return True

    def move_left(self) -> bool:
        return self._shift(-1, 0)

    def move_right(self) -> bool:
        return self._shift(1, 0)

    def soft_drop(self) -> bool:
        return self._shift(0, 1)

    def hard_drop(self) -> None:
        """Drop the piece to the bottom, lock it and bring in the next piece."""
        if self.paused:
            return
        self.current = self.board.ghost(self.current)
        self._lock()
        self.current = self.next_piece
        self.next_piece = Tetromino.spawn(self.rng)

    def gravity_step(self) -> None:
        """Move the piece down one row, or lock it and spawn a fresh one."""
        if self.paused:
            return
        if self.board.can_move(self.current, 0, 1):
            self.current = self.current.moved(0, 1)
            return
        self._lock()
        self.current = Tetromino.spawn(self.rng)

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        return self.paused

    def toggle_ghost(self) -> bool:
        self.show_ghost = not self.show_ghost
        return self.show_ghost

    def toggle_preview(self) -> bool:
        self.show_preview = not self.show_preview
        return self.show_preview

    def ghost(self) -> Tetromino:
        """Where the current piece would land."""
        return self.board.ghost(self.current)