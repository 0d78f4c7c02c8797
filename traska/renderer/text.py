"""ASCII board rendering.

Legend: ``@`` ship, ``S`` start, ``F`` finish, ``.`` path, ``#`` empty,
digits fuel (``*`` for ten), ``+`` legal target on plain path.
"""

from typing import List

from traska.components import Position
from traska.state import GameState
from traska.types import CellKind


def render_text(state: GameState, show_legal_moves: bool = True) -> str:
    lines: List[str] = []
    for y, row in enumerate(state.grid.rows()):
        chars: List[str] = []
        for x, cell in enumerate(row):
            pos = Position(x, y)
            if pos == state.position:
                chars.append("@")
            elif cell.kind == CellKind.EMPTY:
                chars.append("#")
            elif cell.kind == CellKind.START:
                chars.append("S")
            elif cell.kind == CellKind.FINISH:
                chars.append("F")
            elif cell.is_fuel:
                chars.append(str(cell.amount) if cell.amount <= 9 else "*")
            elif show_legal_moves and pos in state.legal_moves:
                chars.append("+")
            else:
                chars.append(".")
        lines.append("".join(chars))
    return "\n".join(lines)
