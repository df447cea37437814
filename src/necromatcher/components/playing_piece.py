from dataclasses import dataclass

from necromatcher.components.piece import PieceType


@dataclass(slots=True)
class PlayingPiece:
    """Piece type the player will place on the next tile click."""
    piece_type: PieceType = PieceType.SWORDSMAN

    def toggle(self) -> PieceType:
        self.piece_type = self.piece_type.toggle()
        return self.piece_type
