"""Window, drawing and keyboard handling for the game."""

from __future__ import annotations

import argparse
import sys

import pygame

from tetris.board import BOARD_HEIGHT, BOARD_WIDTH, Board
from tetris.game import Game
from tetris.tetromino import BLOCK_SIZE, GRID, Tetromino

WINDOW_WIDTH = (BOARD_WIDTH + 6) * BLOCK_SIZE
WINDOW_HEIGHT = BOARD_HEIGHT * BLOCK_SIZE
GRAVITY_DELAY_MS = 500
FRAME_DELAY_MS = 16
PAUSED_DELAY_MS = 100
FONT_SIZE = 24

BACKGROUND = (0, 0, 0)
BLOCK_COLOR = (128, 128, 128)
GRID_COLOR = (50, 50, 50)
PREVIEW_BOX_COLOR = (100, 100, 100)
TEXT_COLOR = (255, 255, 255)
GHOST_ALPHA = 100
PREVIEW_ALPHA = 80

PANEL_X = BOARD_WIDTH * BLOCK_SIZE + 32
PREVIEW_Y = 64


def handle_key(game: Game, key: int) -> bool:
    """Apply a key press to the game; return False when the game should quit."""
    if key == pygame.K_q:
        return False
    if key == pygame.K_p:
        game.toggle_pause()
    elif key == pygame.K_g:
        game.toggle_ghost()
    elif key == pygame.K_h:
        game.toggle_preview()
    elif key == pygame.K_UP:
        game.rotate()
    elif key == pygame.K_LEFT:
        game.move_left()
    elif key == pygame.K_RIGHT:
        game.move_right()
    elif key == pygame.K_DOWN:
        game.soft_drop()
    elif key == pygame.K_SPACE:
        game.hard_drop()
    return True


def _fill_block(surface: pygame.Surface, color, alpha: int, x: int, y: int) -> None:
    if alpha >= 255:
        surface.fill(color, pygame.Rect(x, y, BLOCK_SIZE, BLOCK_SIZE))
        return
    block = pygame.Surface((BLOCK_SIZE, BLOCK_SIZE), pygame.SRCALPHA)
    block.fill((*color, alpha))
    surface.blit(block, (x, y))


def draw_board(surface: pygame.Surface, board: Board) -> None:
    """Draw locked blocks filled and empty cells as grid outlines."""
    for y, row in enumerate(board.rows):
        for x, filled in enumerate(row):
            cell = pygame.Rect(x * BLOCK_SIZE, y * BLOCK_SIZE, BLOCK_SIZE, BLOCK_SIZE)
            if filled:
                surface.fill(BLOCK_COLOR, cell)
            else:
                pygame.draw.rect(surface, GRID_COLOR, cell, 1)


def draw_piece(surface: pygame.Surface, piece: Tetromino, alpha: int = 255) -> None:
    """Draw a piece at its board position with the given opacity."""
    for x, y in piece.cells():
        _fill_block(surface, piece.color, alpha, x * BLOCK_SIZE, y * BLOCK_SIZE)


def draw_preview(surface: pygame.Surface, piece: Tetromino, x: int, y: int) -> None:
    """Draw a translucent piece centred in the preview box at (x, y)."""
    for dx, dy in piece.preview_cells():
        _fill_block(surface, piece.color, PREVIEW_ALPHA, x + dx, y + dy)


def _text(surface: pygame.Surface, font: pygame.font.Font, text: str, x: int, y: int) -> None:
    surface.blit(font.render(text, True, TEXT_COLOR), (x, y))


def draw_frame(surface: pygame.Surface, game: Game, font: pygame.font.Font) -> None:
    """Draw one complete frame of the game."""
    surface.fill(BACKGROUND)
    if game.paused:
        _text(surface, font, "PAUSED", WINDOW_WIDTH // 2 - 50, WINDOW_HEIGHT // 2 - 20)
        return
    draw_board(surface, game.board)
    if game.show_ghost:
        draw_piece(surface, game.ghost(), GHOST_ALPHA)
    draw_piece(surface, game.current)
    if game.show_preview:
        box = pygame.Rect(PANEL_X, PREVIEW_Y, GRID * BLOCK_SIZE, GRID * BLOCK_SIZE)
        pygame.draw.rect(surface, PREVIEW_BOX_COLOR, box, 1)
        _text(surface, font, "NEXT", BOARD_WIDTH * BLOCK_SIZE + 64, 45)
        draw_preview(surface, game.next_piece, PANEL_X, PREVIEW_Y)
    _text(surface, font, f"Score: {game.score}", PANEL_X, 16)


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the game until it is closed or Q is pressed."""
    parser = argparse.ArgumentParser(prog="tetris")
    parser.add_argument("--font", default=None, help="path of a TrueType font")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        try:
            font = pygame.font.Font(args.font, FONT_SIZE)
        except (OSError, pygame.error) as exc:
            print(f"Failed to load font: {exc}", file=sys.stderr)
            return 1
        try:
            screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        except pygame.error as exc:
            print(f"Window could not be created: {exc}", file=sys.stderr)
            return 1
        pygame.display.set_caption("Tetris")

        game = Game()
        last_tick = pygame.time.get_ticks()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and not handle_key(game, event.key):
                    running = False

            if game.paused:
                draw_frame(screen, game, font)
                pygame.display.flip()
                pygame.time.delay(PAUSED_DELAY_MS)
                continue

            now = pygame.time.get_ticks()
            if now - last_tick >= GRAVITY_DELAY_MS:
                game.gravity_step()
                last_tick = now

            draw_frame(screen, game, font)
            pygame.display.flip()
            pygame.time.delay(FRAME_DELAY_MS)
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())