"""
Board rendering for Snake Arcade.

Draws a GameState snapshot with Pillow:
- Score / high score header
- 10x10 grid with snake (darker head), food and empty cells
- Overlay text for START, PAUSED and GAME_OVER
"""

from typing import Tuple

from PIL import Image, ImageDraw, ImageFont

from domain.constants import BOARD_SIZE, START, PAUSED, GAME_OVER
from domain.game_state import GameState
from settings import CELL_SIZE

HEADER_HEIGHT = 40
BOARD_PADDING = 16
CELL_GAP = 2


class ColorScheme:
    """Neon palette"""

    BACKGROUND = "#0F0F0F"
    PANEL = "#1F2937"
    EMPTY_CELL = "#1E1E1E"
    SNAKE = "#FF00FF"
    FOOD = "#00FFFF"
    SCORE_TEXT = "#00FFFF"
    OVERLAY = (0, 0, 0, 128)
    OVERLAY_TEXT = "#FFFFFF"


OVERLAY_MESSAGES = {
    START: "Press SPACE to start",
    PAUSED: "Paused",
    GAME_OVER: "Game Over!",
}


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def darken_color(hex_color: str, amount: float = 0.3) -> Tuple[int, int, int]:
    """Darken a hex color by a given amount"""
    r, g, b = hex_to_rgb(hex_color)
    r = max(0, int(r * (1 - amount)))
    g = max(0, int(g * (1 - amount)))
    b = max(0, int(b * (1 - amount)))
    return (r, g, b)


class BoardRenderer:
    """Render GameState snapshots to RGB images"""

    def __init__(self, board_size: int = BOARD_SIZE, cell_size: int = CELL_SIZE):
        if cell_size <= CELL_GAP:
            raise ValueError(f"cell_size must be larger than {CELL_GAP}, got {cell_size}")

        self.board_size = board_size
        self.cell_size = cell_size
        self.board_pixels = board_size * cell_size
        self.width = self.board_pixels + 2 * BOARD_PADDING
        self.height = self.board_pixels + HEADER_HEIGHT + 2 * BOARD_PADDING

        self.font = ImageFont.load_default()

    @property
    def image_size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def cell_box(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """Pixel rectangle (left, top, right, bottom) of a board cell."""
        left = BOARD_PADDING + x * self.cell_size
        top = HEADER_HEIGHT + BOARD_PADDING + y * self.cell_size
        return (left, top, left + self.cell_size - CELL_GAP, top + self.cell_size - CELL_GAP)

    def cell_center(self, x: int, y: int) -> Tuple[int, int]:
        left, top, right, bottom = self.cell_box(x, y)
        return ((left + right) // 2, (top + bottom) // 2)

    def render(self, game_state: GameState) -> Image.Image:
        """Render a single frame of the game"""
        if game_state.board_size != self.board_size:
            raise ValueError(
                f"Renderer built for {self.board_size}x{self.board_size}, "
                f"got a {game_state.board_size}x{game_state.board_size} board"
            )

        img = Image.new('RGBA', self.image_size, hex_to_rgb(ColorScheme.BACKGROUND))
        draw = ImageDraw.Draw(img)

        self._draw_header(draw, game_state)
        self._draw_board(draw, game_state)

        message = OVERLAY_MESSAGES.get(game_state.lifecycle)
        if message:
            img = self._draw_overlay(img, message)

        return img.convert('RGB')

    def _draw_header(self, draw: ImageDraw.ImageDraw, game_state: GameState):
        draw.rectangle([0, 0, self.width, HEADER_HEIGHT], fill=hex_to_rgb(ColorScheme.PANEL))

        score_text = f"Score: {game_state.score}"
        high_text = f"High Score: {game_state.high_score}"
        text_y = HEADER_HEIGHT // 2 - 6

        draw.text((BOARD_PADDING, text_y), score_text, fill=hex_to_rgb(ColorScheme.SCORE_TEXT), font=self.font)

        bbox = draw.textbbox((0, 0), high_text, font=self.font)
        text_width = bbox[2] - bbox[0]
        draw.text(
            (self.width - BOARD_PADDING - text_width, text_y),
            high_text,
            fill=hex_to_rgb(ColorScheme.SCORE_TEXT),
            font=self.font
        )

    def _draw_board(self, draw: ImageDraw.ImageDraw, game_state: GameState):
        colors = {
            "empty": hex_to_rgb(ColorScheme.EMPTY_CELL),
            "food": hex_to_rgb(ColorScheme.FOOD),
            "snake": hex_to_rgb(ColorScheme.SNAKE),
            "head": darken_color(ColorScheme.SNAKE, 0.3),
        }

        for y in range(self.board_size):
            for x in range(self.board_size):
                draw.rectangle(self.cell_box(x, y), fill=colors[game_state.cell_kind(x, y)])

    def _draw_overlay(self, img: Image.Image, message: str) -> Image.Image:
        overlay = Image.new('RGBA', img.size, ColorScheme.OVERLAY)
        draw = ImageDraw.Draw(overlay)

        bbox = draw.textbbox((0, 0), message, font=self.font)
        text_width = bbox[2] - bbox[0]
        text_height = bbox[3] - bbox[1]
        draw.text(
            ((self.width - text_width) // 2, (self.height - text_height) // 2),
            message,
            fill=hex_to_rgb(ColorScheme.OVERLAY_TEXT),
            font=self.font
        )

        return Image.alpha_composite(img, overlay)
