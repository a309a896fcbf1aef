from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import pygame
from pygame import gfxdraw

from checkers.config import DisplaySettings
from checkers.errors import CheckersError
from checkers.game import Game
from checkers.pieces import Color, Piece

logger = logging.getLogger(__name__)

Coordinate = tuple[int, int]
RGB = tuple[int, int, int]

DARK_CELL: RGB = (181, 136, 99)
SELECTED_CELL: RGB = (105, 138, 76)

# (light cell, highlighted destination) per theme.
THEMES: tuple[tuple[RGB, RGB], ...] = (
    ((240, 217, 181), (170, 210, 221)),
    ((196, 224, 232), (246, 227, 90)),
    ((233, 210, 173), (252, 142, 80)),
)


def cell_from_pixel(pos: tuple[int, int], margin: int, cell_size: int, board_width: int) -> Optional[Coordinate]:
    """Map a window pixel to board (x, y), or None outside the board."""
    px, py = pos[0] - margin, pos[1] - margin
    board_pixels = cell_size * board_width
    if px < 0 or py < 0 or px >= board_pixels or py >= board_pixels:
        return None
    return (px // cell_size, py // cell_size)


def lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t


@dataclass
class _Animation:
    piece: Piece
    x: float
    y: float
    end_x: float
    end_y: float

    def step(self, speed: float) -> bool:
        self.x = lerp(self.x, self.end_x, speed)
        self.y = lerp(self.y, self.end_y, speed)
        if abs(self.x - self.end_x) < 1 and abs(self.y - self.end_y) < 1:
            self.x, self.y = self.end_x, self.end_y
            return True
        return False


class CheckersGUI:
    def __init__(self, game: Game, settings: Optional[DisplaySettings] = None, margin: int = 24, info_height: int = 56) -> None:
        self.game = game
        self.settings = settings or DisplaySettings()
        self.square_size = self.settings.cell_size
        self.board_size = self.game.board.width
        self.board_pixels = self.square_size * self.board_size
        self.margin = margin
        self.info_height = info_height

        self.window_width = self.board_pixels + self.margin * 2
        self.window_height = self.board_pixels + self.info_height + self.margin * 2

        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("Checkers")

        self.font = pygame.font.SysFont("arial", 24, bold=True)
        self.small_font = pygame.font.SysFont("arial", 16)
        self.clock = pygame.time.Clock()

        self.animation: Optional[_Animation] = None
        self.piece_surfaces: dict[tuple[Color, bool], pygame.Surface] = {}

        light, highlight = THEMES[self.settings.theme]
        self.colors = {
            "light": light,
            "dark": DARK_CELL,
            "highlight": highlight,
            "selected": SELECTED_CELL,
            "white_piece": (255, 255, 255),
            "black_piece": (0, 0, 0),
            "background": (30, 34, 45),
            "text": (230, 230, 230),
            "banner_bg": (255, 255, 255),
            "banner_text": (200, 0, 200),
        }

    def run(self) -> None:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key in (pygame.K_ESCAPE, pygame.K_q):
                        running = False
                    elif event.key == pygame.K_r:
                        self.game.reset()
                        self.animation = None
                        logger.info("Game restarted")
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self._handle_click(event.pos)

            self._draw()
            pygame.display.flip()
            self.clock.tick(self.settings.fps)

    def _handle_click(self, pos: tuple[int, int]) -> None:
        cell = cell_from_pixel(pos, self.margin, self.square_size, self.board_size)
        if cell is None or self.game.is_over:
            return

        destinations = {target.coords for target in self.game.destinations}
        if self.game.selected is not None and cell in destinations:
            start = self._center_for_cell(*self.game.selected.position.coords)
            try:
                result = self.game.move_selected_to(*cell)
            except CheckersError as exc:
                logger.debug("Move rejected: %s", exc)
                return
            end = self._center_for_cell(*result.destination.coords)
            self.animation = _Animation(result.piece, start[0], start[1], end[0], end[1])
            return

        piece = self.game.board.piece_at(*cell)
        if piece is None or piece.color != self.game.current_player:
            return
        try:
            self.game.select(*cell)
        except CheckersError as exc:
            logger.debug("Selection rejected: %s", exc)

    def _draw(self) -> None:
        self.screen.fill(self.colors["background"])
        self._draw_board()
        self._draw_pieces()
        self._draw_animation()
        self._draw_status()
        if self.game.is_over:
            self._draw_winner_banner()

    def _draw_board(self) -> None:
        destinations = {target.coords for target in self.game.destinations}
        selected = self.game.selected.position.coords if self.game.selected is not None else None
        for cell in self.game.board.cells():
            if cell.coords == selected:
                color = self.colors["selected"]
            elif cell.coords in destinations:
                color = self.colors["highlight"]
            elif cell.is_dark:
                color = self.colors["dark"]
            else:
                color = self.colors["light"]
            pygame.draw.rect(self.screen, color, self._rect_for_cell(*cell.coords))

    def _draw_pieces(self) -> None:
        moving = self.animation.piece if self.animation is not None else None
        for piece in self.game.board.pieces():
            if piece is moving:
                continue
            surface = self._get_piece_surface(piece)
            rect = surface.get_rect(center=self._center_for_cell(*piece.position.coords))
            self.screen.blit(surface, rect)

    def _draw_animation(self) -> None:
        if self.animation is None:
            return
        finished = self.animation.step(self.settings.animation_speed)
        surface = self._get_piece_surface(self.animation.piece)
        self.screen.blit(surface, surface.get_rect(center=(int(self.animation.x), int(self.animation.y))))
        if finished:
            self.animation = None

    def _draw_status(self) -> None:
        counts = self.game.piece_counts()
        line = (
            f"{self.game.current_player.value.capitalize()} to move  |  "
            f"White {counts[Color.WHITE]}  Black {counts[Color.BLACK]}  |  R: Restart  Esc/Q: Quit"
        )
        text = self.small_font.render(line, True, self.colors["text"])
        self.screen.blit(text, (self.margin, self.margin + self.board_pixels + self.info_height // 2 - 8))

    def _draw_winner_banner(self) -> None:
        label = f"{self.game.winner.value.capitalize()} wins!"
        text = self.font.render(label, True, self.colors["banner_text"])
        rect = text.get_rect(center=(self.window_width // 2, self.margin + int(self.board_pixels * 0.4)))
        banner = rect.inflate(24, 16)
        pygame.draw.rect(self.screen, self.colors["banner_bg"], banner)
        pygame.draw.rect(self.screen, (0, 0, 0), banner, 4)
        self.screen.blit(text, rect)

    def _rect_for_cell(self, x: int, y: int) -> pygame.Rect:
        return pygame.Rect(
            self.margin + x * self.square_size,
            self.margin + y * self.square_size,
            self.square_size,
            self.square_size,
        )

    def _center_for_cell(self, x: int, y: int) -> tuple[int, int]:
        return (
            self.margin + x * self.square_size + self.square_size // 2,
            self.margin + y * self.square_size + self.square_size // 2,
        )

    def _get_piece_surface(self, piece: Piece) -> pygame.Surface:
        key = (piece.color, piece.is_king)
        if key in self.piece_surfaces:
            return self.piece_surfaces[key]

        diameter = int(self.square_size * 0.8)
        radius = diameter // 2
        surface = pygame.Surface((diameter + 2, diameter + 2), pygame.SRCALPHA)
        cx, cy = surface.get_width() // 2, surface.get_height() // 2

        if piece.color == Color.WHITE:
            base, outline = self.colors["white_piece"], self.colors["black_piece"]
        else:
            base, outline = self.colors["black_piece"], self.colors["white_piece"]
        pygame.draw.circle(surface, outline, (cx, cy), radius)
        pygame.draw.circle(surface, base, (cx, cy), radius - 4)

        if piece.is_king:
            crown = int(self.square_size * 0.15)
            pygame.draw.circle(surface, base, (cx, cy), crown)
            pygame.draw.circle(surface, outline, (cx, cy), crown, 3)
            gfxdraw.aacircle(surface, cx, cy, int(self.square_size * 0.35), outline)

        self.piece_surfaces[key] = surface
        return surface
