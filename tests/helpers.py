from __future__ import annotations

from typing import Dict, Sequence

from necromatcher.components.game_state import GameState
from necromatcher.components.level_data import LevelData
from necromatcher.components.piece import PieceType, Piece
from necromatcher.constants import COLS, ROWS
from necromatcher.systems.level_loader import CELL_CODES


def board_from_rows(rows: Sequence[str]) -> tuple[Piece, ...]:
    """Build 64 pieces from up to eight rows of cell codes, starting at y = 0.

    Missing rows and missing trailing cells are empty.
    """
    pieces: list[Piece] = []
    for y in range(ROWS):
        codes = rows[y].split(",") if y < len(rows) else []
        codes = [code.strip() for code in codes] + ["00"] * (COLS - len(codes))
        pieces.extend(CELL_CODES[code] for code in codes)
    return tuple(pieces)


def make_level(
    rows: Sequence[str] = (),
    *,
    bowman: int = 0,
    hound: int = 0,
    swordsman: int = 0,
    seed: int = 1,
    intro: str = "test level",
) -> LevelData:
    counts: Dict[PieceType, int] = {
        PieceType.BOWMAN: bowman,
        PieceType.HOUND: hound,
        PieceType.SWORDSMAN: swordsman,
    }
    return LevelData(seed=seed, intro=intro, counts=counts, pieces=board_from_rows(rows))


def make_state(*levels: LevelData, load: int | None = 0, **kwargs) -> GameState:
    """A state over the given levels, with level `load` already applied."""
    from necromatcher.events.game_event import LoadLevel
    from necromatcher.systems.game_event_handler import apply_event

    state = GameState(levels=tuple(levels), **kwargs)
    if load is not None:
        apply_event(state, LoadLevel(level_id=load))
    return state
