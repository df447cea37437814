"""The single owned game state. Mutated only through the reducer in systems.game_event_handler."""
from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Tuple

from necromatcher.components.level_data import LevelData
from necromatcher.components.piece import Enemy, Piece, PieceType
from necromatcher.components.soul_bank import SoulBank
from necromatcher.components.tile import Tile
from necromatcher.constants import COLS, NUM_TILES
from necromatcher.events.game_event import GameEvent


class LevelStatus(Enum):
    """Where the player stands in the campaign.

    PLAYING   -> WON        placement clears the last enemy and another level exists
    PLAYING   -> COMPLETED  placement clears the last enemy on the final level
    any       -> PLAYING    a level is loaded (LoadLevel, NextLevel, Reset)
    """
    PLAYING = auto()
    WON = auto()
    COMPLETED = auto()


def empty_tiles() -> List[Tile]:
    return [Tile(x=idx % COLS, y=idx // COLS) for idx in range(NUM_TILES)]


@dataclass(frozen=True, slots=True)
class StateSnapshot:
    """Read-only view handed to display code."""
    pieces: Tuple[Piece, ...]
    counts: Dict[PieceType, int]
    current_level: int
    level_message: str
    status: LevelStatus


@dataclass
class GameState:
    levels: Tuple[LevelData, ...] = ()
    tiles: List[Tile] = field(default_factory=empty_tiles)
    souls: SoulBank = field(default_factory=SoulBank)
    current_level: int = 0
    level_message: str = ""
    status: LevelStatus = LevelStatus.PLAYING
    rng: random.Random = field(default_factory=random.Random)
    events: List[GameEvent] = field(default_factory=list)
    # Earlier rule set: a placement also needs a friendly piece next to it.
    require_adjacent_friendly: bool = False

    @property
    def num_levels(self) -> int:
        return len(self.levels)

    def enemies_remaining(self) -> int:
        return sum(1 for tile in self.tiles if isinstance(tile.piece, Enemy))

    def snapshot(self) -> StateSnapshot:
        return StateSnapshot(
            pieces=tuple(tile.piece for tile in self.tiles),
            counts=dict(self.souls.counts),
            current_level=self.current_level,
            level_message=self.level_message,
            status=self.status,
        )
