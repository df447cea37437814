from dataclasses import dataclass, field
from typing import Dict, Iterable, Tuple

from necromatcher.components.piece import PLACEABLE_TYPES, PieceType


def _zero_counts() -> Dict[PieceType, int]:
    return {piece_type: 0 for piece_type in PLACEABLE_TYPES}


@dataclass(slots=True)
class SoulBank:
    """Remaining placeable pieces per type.

    Placing a piece spends one soul of its type; capturing an enemy piece credits
    one soul of the captured type. Walls never hold souls. Counts never go negative.
    """
    counts: Dict[PieceType, int] = field(default_factory=_zero_counts)

    def count(self, piece_type: PieceType) -> int:
        return self.counts.get(piece_type, 0)

    def has_capacity(self, piece_type: PieceType) -> bool:
        return self.count(piece_type) > 0

    def spend(self, piece_type: PieceType) -> bool:
        if not self.has_capacity(piece_type):
            return False
        self.counts[piece_type] -= 1
        return True

    def add(self, piece_type: PieceType, amount: int = 1):
        if amount <= 0 or piece_type not in PLACEABLE_TYPES:
            return
        self.counts[piece_type] = self.count(piece_type) + amount

    def reset(self, counts: Iterable[Tuple[PieceType, int]]):
        self.counts = _zero_counts()
        for piece_type, amount in counts:
            if piece_type in PLACEABLE_TYPES:
                self.counts[piece_type] = max(0, int(amount))
