from necromatcher.components.game_state import empty_tiles
from necromatcher.components.match import Match, Orientation
from necromatcher.components.piece import Enemy, Friendly, Obstacle, PieceType
from necromatcher.systems.match import get_matches


def _board(placements):
    tiles = empty_tiles()
    for idx, piece in placements.items():
        tiles[idx].piece = piece
    return tiles


def test_empty_board_has_no_matches():
    assert get_matches(empty_tiles()) == []


def test_horizontal_run_of_three():
    tiles = _board({idx: Enemy(PieceType.SWORDSMAN) for idx in (4, 5, 6)})
    assert get_matches(tiles) == [Match(Orientation.HORIZONTAL, 4, 3)]


def test_vertical_run_of_five():
    tiles = _board({idx: Friendly(PieceType.BOWMAN) for idx in (9, 17, 25, 33, 41)})
    matches = get_matches(tiles)
    assert matches == [Match(Orientation.VERTICAL, 9, 5)]
    assert matches[0].indices() == [9, 17, 25, 33, 41]


def test_runs_do_not_wrap_across_rows():
    tiles = _board({idx: Enemy(PieceType.HOUND) for idx in (6, 7, 8)})
    assert get_matches(tiles) == []


def test_friendly_and_enemy_of_same_type_match_together():
    tiles = _board({
        16: Friendly(PieceType.HOUND),
        17: Enemy(PieceType.HOUND),
        18: Enemy(PieceType.HOUND),
    })
    assert get_matches(tiles) == [Match(Orientation.HORIZONTAL, 16, 3)]


def test_different_types_break_runs():
    tiles = _board({
        0: Enemy(PieceType.HOUND),
        1: Enemy(PieceType.HOUND),
        2: Enemy(PieceType.SWORDSMAN),
        3: Enemy(PieceType.HOUND),
    })
    assert get_matches(tiles) == []


def test_obstacle_breaks_run():
    tiles = _board({
        0: Enemy(PieceType.BOWMAN),
        1: Enemy(PieceType.BOWMAN),
        2: Obstacle(PieceType.WALL),
        3: Enemy(PieceType.BOWMAN),
        4: Enemy(PieceType.BOWMAN),
    })
    assert get_matches(tiles) == []


def test_walls_in_a_row_never_match():
    tiles = _board({idx: Obstacle(PieceType.WALL) for idx in range(8)})
    assert get_matches(tiles) == []


def test_run_ending_at_row_edge_is_reported():
    tiles = _board({idx: Enemy(PieceType.SWORDSMAN) for idx in (60, 61, 62, 63)})
    assert get_matches(tiles) == [Match(Orientation.HORIZONTAL, 60, 4)]


def test_crossing_runs_are_reported_separately_horizontal_first():
    sword = Enemy(PieceType.SWORDSMAN)
    tiles = _board({26: sword, 27: sword, 28: sword, 19: sword, 35: sword})
    assert get_matches(tiles) == [
        Match(Orientation.HORIZONTAL, 26, 3),
        Match(Orientation.VERTICAL, 19, 3),
    ]


def test_two_runs_in_one_row():
    hound = Enemy(PieceType.HOUND)
    bow = Enemy(PieceType.BOWMAN)
    tiles = _board({0: hound, 1: hound, 2: hound, 4: bow, 5: bow, 6: bow})
    assert get_matches(tiles) == [
        Match(Orientation.HORIZONTAL, 0, 3),
        Match(Orientation.HORIZONTAL, 4, 3),
    ]
