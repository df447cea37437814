from dataclasses import dataclass, field
from typing import Dict, Tuple

from necromatcher.components.piece import Piece, PieceType


@dataclass(frozen=True, slots=True)
class LevelData:
    """Parsed contents of one level file."""
    seed: int
    intro: str
    counts: Dict[PieceType, int] = field(default_factory=dict)
    pieces: Tuple[Piece, ...] = ()
    name: str = ""
