from dataclasses import dataclass

from necromatcher.components.piece import PieceType


@dataclass(slots=True)
class PieceVisual:
    """On-screen representation of the piece at a board index."""
    idx: int
    piece_type: PieceType
    owned: bool
    obstacle: bool = False


@dataclass(slots=True)
class PendingDespawn:
    """Seconds left before the visual on the same entity is removed."""
    remaining: float


@dataclass(slots=True)
class GameOverBanner:
    """Tag for the frozen terminal state shown once the campaign is completed. Input is locked while present."""
    pass
