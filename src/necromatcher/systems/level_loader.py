"""Level catalogue and the line-oriented level text format.

    line 1   free-text intro (may be empty)
    line 2   decimal RNG seed
    line 3   initial soul counts: bowman,hound,swordsman
    line 4+  64 comma-separated cell codes, row-major from y = 0

Level files ship with the package and are trusted; anything malformed raises
LevelFormatError and aborts construction instead of being patched up at runtime.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Tuple

from necromatcher.components.game_state import GameState, LevelStatus
from necromatcher.components.level_data import LevelData
from necromatcher.components.piece import (
    EMPTY,
    PLACEABLE_TYPES,
    Enemy,
    Friendly,
    Obstacle,
    Piece,
    PieceType,
)
from necromatcher.constants import NUM_TILES

logger = logging.getLogger(__name__)

LEVELS_DIR = Path(__file__).resolve().parents[1] / "levels"
LEVEL_FILES = (
    "tutorial.txt",
    "level1.txt",
    "level2.txt",
    "level3.txt",
    "level4.txt",
)
NUM_LEVELS = len(LEVEL_FILES)

MAX_SEED = 2**64 - 1

CELL_CODES: Dict[str, Piece] = {
    "0": EMPTY,
    "00": EMPTY,
    "1": Friendly(PieceType.HOUND),
    "01": Friendly(PieceType.HOUND),
    "2": Friendly(PieceType.SWORDSMAN),
    "02": Friendly(PieceType.SWORDSMAN),
    "3": Friendly(PieceType.BOWMAN),
    "03": Friendly(PieceType.BOWMAN),
    "11": Enemy(PieceType.HOUND),
    "12": Enemy(PieceType.SWORDSMAN),
    "13": Enemy(PieceType.BOWMAN),
    "99": Obstacle(PieceType.WALL),
}


class LevelFormatError(ValueError):
    """A shipped level file is malformed."""

    def __init__(self, name: str, message: str):
        super().__init__(f"{name}: {message}")
        self.name = name


def _parse_unsigned(token: str, name: str, what: str) -> int:
    token = token.strip()
    if not (token.isascii() and token.isdigit()):
        raise LevelFormatError(name, f"expected an unsigned integer for {what}, found {token!r}")
    return int(token)


def parse_level_file(data: str, name: str = "<level>") -> LevelData:
    lines = data.splitlines()
    if len(lines) < 3:
        raise LevelFormatError(name, f"expected intro, seed and counts lines, found {len(lines)} line(s)")

    intro = lines[0].strip()

    seed = _parse_unsigned(lines[1], name, "seed")
    if seed > MAX_SEED:
        raise LevelFormatError(name, f"seed {seed} does not fit in 64 bits")

    count_tokens = lines[2].split(",")
    if len(count_tokens) != len(PLACEABLE_TYPES):
        raise LevelFormatError(
            name, f"expected {len(PLACEABLE_TYPES)} counts (bowman,hound,swordsman), found {len(count_tokens)}"
        )
    counts = {
        piece_type: _parse_unsigned(token, name, f"{piece_type.value} count")
        for piece_type, token in zip(PLACEABLE_TYPES, count_tokens)
    }

    pieces: List[Piece] = []
    for line in lines[3:]:
        if not line.strip():
            continue
        for token in line.split(","):
            code = token.strip()
            try:
                pieces.append(CELL_CODES[code])
            except KeyError:
                raise LevelFormatError(
                    name, f"found cell code {code!r}, expected one of {', '.join(sorted(CELL_CODES))}"
                ) from None
    if len(pieces) != NUM_TILES:
        raise LevelFormatError(name, f"expected {NUM_TILES} cells, found {len(pieces)}")

    return LevelData(seed=seed, intro=intro, counts=counts, pieces=tuple(pieces), name=name)


@lru_cache(maxsize=None)
def load_levels() -> Tuple[LevelData, ...]:
    """Read and parse every shipped level once."""
    levels = []
    for file_name in LEVEL_FILES:
        path = LEVELS_DIR / file_name
        levels.append(parse_level_file(path.read_text(encoding="utf-8"), name=file_name))
    return tuple(levels)


def load_level(state: GameState, level_id: int) -> bool:
    """Seed the rng and overwrite counts, message and tiles from the level.

    Out-of-range ids are ignored. Returns True when a level was loaded.
    """
    if level_id < 0 or level_id >= state.num_levels:
        logger.warning(
            "Ignoring level loading request as %s is outside the %s available levels",
            level_id,
            state.num_levels,
        )
        return False
    from necromatcher.systems.game_event_handler import apply_event
    from necromatcher.events.game_event import SeedRng

    level = state.levels[level_id]
    apply_event(state, SeedRng(seed=level.seed))

    state.souls.reset(level.counts.items())
    state.level_message = level.intro
    for tile, piece in zip(state.tiles, level.pieces):
        tile.piece = piece
    state.current_level = level_id
    state.status = LevelStatus.PLAYING
    logger.info("Loaded level %s (%s)", level_id, level.name or "unnamed")
    return True
