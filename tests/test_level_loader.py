import logging
import random

import pytest

from necromatcher.components.game_state import GameState, LevelStatus
from necromatcher.components.piece import EMPTY, Enemy, Friendly, Obstacle, PieceType
from necromatcher.constants import NUM_TILES
from necromatcher.systems.level_loader import (
    NUM_LEVELS,
    LevelFormatError,
    load_level,
    load_levels,
    parse_level_file,
)
from tests.helpers import make_level

BOARD = "\n".join(["00,00,00,00,00,00,00,00"] * 8)


def _level_text(intro="Hello", seed="7", counts="1,2,3", board=BOARD):
    return f"{intro}\n{seed}\n{counts}\n{board}\n"


def test_parse_valid_level():
    board_rows = ["02,12,13,99,01,03,11,0"] + ["00,00,00,00,00,00,00,00"] * 7
    level = parse_level_file(_level_text(intro="  Welcome  ", board="\n".join(board_rows)), "ok.txt")
    assert level.intro == "Welcome"
    assert level.seed == 7
    assert level.counts == {PieceType.BOWMAN: 1, PieceType.HOUND: 2, PieceType.SWORDSMAN: 3}
    assert len(level.pieces) == NUM_TILES
    assert level.pieces[:8] == (
        Friendly(PieceType.SWORDSMAN),
        Enemy(PieceType.SWORDSMAN),
        Enemy(PieceType.BOWMAN),
        Obstacle(PieceType.WALL),
        Friendly(PieceType.HOUND),
        Friendly(PieceType.BOWMAN),
        Enemy(PieceType.HOUND),
        EMPTY,
    )
    assert level.name == "ok.txt"


def test_parse_tolerates_whitespace_and_blank_lines():
    board = "\n\n" + "\n".join([" 00, 00 ,00,00,00,00,00,00 "] * 8) + "\n\n"
    level = parse_level_file(_level_text(board=board))
    assert all(piece == EMPTY for piece in level.pieces)


def test_parse_accepts_empty_intro():
    level = parse_level_file(_level_text(intro=""))
    assert level.intro == ""


def test_parse_accepts_max_seed():
    level = parse_level_file(_level_text(seed=str(2**64 - 1)))
    assert level.seed == 2**64 - 1


@pytest.mark.parametrize(
    "text",
    [
        "only intro\n7\n",
        _level_text(seed="abc"),
        _level_text(seed="-5"),
        _level_text(seed=str(2**64)),
        _level_text(counts="1,2"),
        _level_text(counts="1,2,3,4"),
        _level_text(counts="1,x,3"),
        _level_text(seed="\u00b2"),
        _level_text(counts="1,\u0663,3"),
        _level_text(board=BOARD.replace("00", "42", 1)),
        _level_text(board="\n".join(BOARD.splitlines()[:7])),
        _level_text(board=BOARD + "\n00"),
    ],
    ids=[
        "too-few-lines",
        "seed-not-numeric",
        "seed-negative",
        "seed-too-large",
        "too-few-counts",
        "too-many-counts",
        "count-not-numeric",
        "seed-non-ascii-digit",
        "count-non-ascii-digit",
        "unknown-cell-code",
        "too-few-cells",
        "too-many-cells",
    ],
)
def test_parse_rejects_malformed_levels(text):
    with pytest.raises(LevelFormatError):
        parse_level_file(text, "bad.txt")


def test_format_error_names_the_file():
    with pytest.raises(LevelFormatError) as excinfo:
        parse_level_file(_level_text(seed="x"), "broken.txt")
    assert excinfo.value.name == "broken.txt"
    assert "broken.txt" in str(excinfo.value)


def test_shipped_levels_load():
    levels = load_levels()
    assert len(levels) == NUM_LEVELS == 5
    for level in levels:
        assert len(level.pieces) == NUM_TILES
        assert any(isinstance(piece, Enemy) for piece in level.pieces)
        assert level.intro


def test_load_level_overwrites_state_and_seeds_rng():
    level = make_level(["02,12"], swordsman=2, seed=99, intro="first")
    state = GameState(levels=(level,))
    state.status = LevelStatus.WON

    assert load_level(state, 0) is True
    assert state.tiles[0].piece == Friendly(PieceType.SWORDSMAN)
    assert state.tiles[1].piece == Enemy(PieceType.SWORDSMAN)
    assert state.souls.count(PieceType.SWORDSMAN) == 2
    assert state.level_message == "first"
    assert state.current_level == 0
    assert state.status is LevelStatus.PLAYING

    assert state.rng.random() == random.Random(99).random()


def test_load_level_out_of_range_is_ignored(caplog):
    level = make_level(["12"], swordsman=1, intro="only")
    state = GameState(levels=(level,))
    load_level(state, 0)
    before = state.snapshot()

    with caplog.at_level(logging.WARNING):
        assert load_level(state, 1) is False
        assert load_level(state, -1) is False

    assert state.snapshot() == before
    assert "Ignoring level loading request" in caplog.text
