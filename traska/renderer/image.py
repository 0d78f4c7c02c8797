from typing import Dict, Optional, Tuple, Union

from PIL import Image, ImageDraw, ImageFont

from traska.components import Cell, Position
from traska.state import GameState
from traska.types import CellKind

DEFAULT_RESOLUTION = 640

Color = Tuple[int, int, int, int]
FontType = Union[ImageFont.ImageFont, ImageFont.FreeTypeFont]

CELL_COLORS: Dict[CellKind, Color] = {
    CellKind.EMPTY: (0, 0, 0, 255),
    CellKind.PATH: (229, 231, 235, 255),
    CellKind.START: (34, 197, 94, 255),
    CellKind.FINISH: (239, 68, 68, 255),
    CellKind.FUEL: (253, 224, 71, 255),
}
SHIP_COLOR: Color = (59, 130, 246, 255)
LEGAL_OUTLINE: Color = (147, 197, 253, 255)
GAP_COLOR: Color = (64, 64, 64, 255)
TEXT_COLOR: Color = (0, 0, 0, 255)


def cell_color(cell: Cell, is_ship: bool) -> Color:
    if is_ship:
        return SHIP_COLOR
    return CELL_COLORS[cell.kind]


def render(
    state: GameState,
    resolution: int = DEFAULT_RESOLUTION,
    show_legal_moves: bool = True,
    font: Optional[FontType] = None,
) -> Image.Image:
    """
    Renders the race as a square PIL image: tiles, legal move outlines, fuel
    amounts and the ship.
    """
    size = state.grid.size
    cell_size = max(resolution // size, 4)
    gap = max(cell_size // 16, 1)
    outline = max(cell_size // 10, 1)

    img = Image.new("RGBA", (size * cell_size, size * cell_size), GAP_COLOR)
    draw = ImageDraw.Draw(img)
    text_font = font or ImageFont.load_default()

    for y, row in enumerate(state.grid.rows()):
        for x, cell in enumerate(row):
            pos = Position(x, y)
            x0, y0 = x * cell_size + gap, y * cell_size + gap
            x1, y1 = (x + 1) * cell_size - gap - 1, (y + 1) * cell_size - gap - 1
            draw.rectangle(
                (x0, y0, x1, y1), fill=cell_color(cell, pos == state.position)
            )
            if show_legal_moves and pos in state.legal_moves:
                draw.rectangle((x0, y0, x1, y1), outline=LEGAL_OUTLINE, width=outline)
            if cell.is_fuel and pos != state.position:
                label = str(cell.amount)
                left, top, right, bottom = draw.textbbox((0, 0), label, font=text_font)
                draw.text(
                    ((x0 + x1 - (right - left)) / 2 - left, (y0 + y1 - (bottom - top)) / 2 - top),
                    label,
                    fill=TEXT_COLOR,
                    font=text_font,
                )

    return img


class ImageRenderer:
    resolution: int
    show_legal_moves: bool

    def __init__(self, resolution: int = DEFAULT_RESOLUTION, show_legal_moves: bool = True):
        self.resolution = resolution
        self.show_legal_moves = show_legal_moves

    def render(self, state: GameState) -> Image.Image:
        return render(
            state,
            resolution=self.resolution,
            show_legal_moves=self.show_legal_moves,
        )
