from typing import Iterable, List, Optional, Sequence

from necromatcher.components.match import Match, Orientation
from necromatcher.components.piece import PieceType, match_type
from necromatcher.components.tile import Tile
from necromatcher.constants import COLS, ROWS

MIN_MATCH_LENGTH = 3


def _scan_line(
    indices: Iterable[int],
    types: Sequence[Optional[PieceType]],
    orientation: Orientation,
    matches: List[Match],
) -> None:
    run_start = 0
    run_length = 0
    run_type: Optional[PieceType] = None
    for idx in indices:
        tval = types[idx]
        if tval is not None and tval == run_type:
            run_length += 1
            continue
        if run_length >= MIN_MATCH_LENGTH:
            matches.append(Match(orientation, run_start, run_length))
        run_start = idx
        run_type = tval
        run_length = 1 if tval is not None else 0
    if run_length >= MIN_MATCH_LENGTH:
        matches.append(Match(orientation, run_start, run_length))


def get_matches(tiles: Sequence[Tile]) -> List[Match]:
    """Detect every horizontal then vertical run of >= 3 same-type pieces.

    Friendly and enemy pieces of one type continue each other's runs; empty cells
    and obstacles break them. Runs are closed at row/column edges and overlapping
    runs are reported separately, never merged.
    """
    types = [match_type(tile.piece) for tile in tiles]
    matches: List[Match] = []
    for y in range(ROWS):
        _scan_line(range(y * COLS, (y + 1) * COLS), types, Orientation.HORIZONTAL, matches)
    for x in range(COLS):
        _scan_line(range(x, ROWS * COLS, COLS), types, Orientation.VERTICAL, matches)
    return matches
