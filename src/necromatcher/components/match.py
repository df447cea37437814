from dataclasses import dataclass
from enum import Enum, auto
from typing import List

from necromatcher.constants import COLS


class Orientation(Enum):
    HORIZONTAL = auto()
    VERTICAL = auto()


@dataclass(frozen=True, slots=True)
class Match:
    """A run of at least three same-type pieces starting at start_idx."""
    orientation: Orientation
    start_idx: int
    length: int

    def indices(self) -> List[int]:
        if self.orientation is Orientation.HORIZONTAL:
            return list(range(self.start_idx, self.start_idx + self.length))
        return [self.start_idx + step * COLS for step in range(self.length)]
