import random

import pytest

from minefield.game import (
    FieldKind,
    FieldState,
    GameState,
    Minesweeper,
    OpenResult,
)


def test_generation_places_requested_mines():
    ms = Minesweeper(10, 10, 5)
    assert ms.mine_count() == 5
    mined = [(x, y) for x in range(10) for y in range(10) if ms.is_mined((x, y))]
    assert len(mined) == 5


def test_play_open_and_flag():
    ms = Minesweeper(10, 10, 10, rng=random.Random(1))
    ms.open((4, 4))
    ms.flag((5, 5))
    text = str(ms)
    assert text.startswith("Remaining Mines: ")
    assert ms.is_open((4, 4)) or ms.is_flagged((4, 4)) is False
    assert ms.is_open((4, 4))
    if not ms.is_open((5, 5)) and ms.game_state is not GameState.LOSS:
        assert ms.is_flagged((5, 5))
    else:
        assert not ms.is_flagged((5, 5))


def test_bounds():
    ms = Minesweeper(10, 10, 10)
    assert ms.is_in_bounds((5, 5)) is True
    assert ms.is_in_bounds((10, 5)) is False
    assert ms.is_in_bounds((5, 10)) is False


def test_same_seed_same_mines():
    a = Minesweeper(9, 9, 10, rng=random.Random(42))
    b = Minesweeper(9, 9, 10, rng=random.Random(42))
    cells = [(x, y) for x in range(9) for y in range(9)]
    assert [a.is_mined(c) for c in cells] == [b.is_mined(c) for c in cells]


def test_too_many_mines_rejected():
    with pytest.raises(ValueError):
        Minesweeper(2, 2, 5)


def test_from_mines_out_of_bounds_rejected():
    with pytest.raises(ValueError):
        Minesweeper.from_mines(3, 3, [(3, 0)])


def test_open_result_str():
    assert str(OpenResult(mined=True)) == "Mine"
    assert str(OpenResult(mined=False, count=3)) == "NoMine(3)"


def test_neighbors_corner_and_centre():
    ms = Minesweeper.from_mines(3, 3, [])
    assert list(ms.neighbors((0, 0))) == [(0, 1), (1, 0), (1, 1)]
    assert len(list(ms.neighbors((1, 1)))) == 8
    assert (1, 1) not in list(ms.neighbors((1, 1)))


def test_open_cascade_wins():
    ms = Minesweeper.from_mines(3, 3, [(0, 0)])
    result = ms.open((2, 2))
    assert result == OpenResult(mined=False, count=0)
    assert ms.game_state is GameState.WIN
    assert ms.field_state((1, 0)) == FieldState(FieldKind.OPEN, 1)
    assert ms.field_state((2, 2)) == FieldState(FieldKind.OPEN, 0)
    assert ms.field_state((0, 0)) == FieldState(FieldKind.MINE_REVEALED)


def test_open_mine_loses():
    ms = Minesweeper.from_mines(3, 3, [(0, 0)])
    assert ms.open((0, 0)) == OpenResult(mined=True)
    assert ms.game_state is GameState.LOSS
    assert ms.field_state((0, 0)) == FieldState(FieldKind.MINE_DETONATED)
    assert ms.open((2, 2)) is None
    assert not ms.is_open((2, 2))


def test_open_numbered_field_does_not_cascade():
    ms = Minesweeper.from_mines(3, 3, [(0, 0)])
    assert ms.open((1, 1)) == OpenResult(mined=False, count=1)
    assert ms.is_open((1, 1))
    assert not ms.is_open((2, 2))
    assert ms.game_state is GameState.IN_PROGRESS


def test_open_twice_and_out_of_bounds_return_none():
    ms = Minesweeper.from_mines(3, 3, [(0, 0)])
    assert ms.open((1, 1)) is not None
    assert ms.open((1, 1)) is None
    assert ms.open((5, 5)) is None


def test_flag_cycle():
    ms = Minesweeper.from_mines(3, 3, [(0, 0)])
    ms.flag((1, 1))
    assert ms.field_state((1, 1)) == FieldState(FieldKind.FLAGGED)
    assert ms.remaining_mines() == 0
    ms.flag((1, 1))
    assert ms.field_state((1, 1)) == FieldState(FieldKind.QUESTION)
    assert ms.remaining_mines() == 1
    ms.flag((1, 1))
    assert ms.field_state((1, 1)) == FieldState(FieldKind.UNKNOWN)


def test_flagged_and_question_fields_cannot_be_opened():
    ms = Minesweeper.from_mines(3, 3, [(0, 0)])
    ms.flag((1, 1))
    assert ms.open((1, 1)) is None
    ms.flag((1, 1))
    assert ms.open((1, 1)) is None
    assert not ms.is_open((1, 1))


def test_open_field_cannot_be_flagged():
    ms = Minesweeper.from_mines(3, 3, [(0, 0)])
    ms.open((1, 1))
    ms.flag((1, 1))
    assert not ms.is_flagged((1, 1))


def test_chord_with_correct_flag_wins():
    ms = Minesweeper.from_mines(3, 3, [(0, 0)])
    ms.flag((0, 0))
    assert ms.open((1, 1)) == OpenResult(mined=False, count=1)
    assert ms.game_state is GameState.WIN
    assert ms.field_state((0, 0)) == FieldState(FieldKind.MINE_REVEALED)


def test_chord_with_wrong_flag_loses():
    ms = Minesweeper.from_mines(3, 3, [(0, 0)])
    ms.flag((2, 2))
    assert ms.open((1, 1)) == OpenResult(mined=False, count=1)
    assert ms.game_state is GameState.LOSS
    assert ms.field_state((0, 0)) == FieldState(FieldKind.MINE_DETONATED)
    assert ms.field_state((2, 2)) == FieldState(FieldKind.NO_MINE)


def test_neighboring_counts():
    ms = Minesweeper.from_mines(3, 3, [(0, 0), (2, 2)])
    ms.flag((0, 1))
    assert ms.neighboring_mines((1, 1)) == 2
    assert ms.neighboring_flags((1, 1)) == 1
    assert ms.neighboring_mines((2, 0)) == 0


def test_str_fresh_board():
    ms = Minesweeper.from_mines(2, 2, [(0, 0)])
    assert str(ms) == "Remaining Mines: 1\n|1|⬜ ⬜ \n|0|⬜ ⬜ \n| ||0||1|\n"


def test_str_after_loss():
    ms = Minesweeper.from_mines(2, 2, [(0, 0)])
    ms.open((0, 0))
    assert str(ms) == (
        "Remaining Mines: 1\n|1|⬜ ⬜ \n|0|💣 ⬜ \n| ||0||1|\nYou lost!\n"
    )


def test_str_after_win():
    ms = Minesweeper.from_mines(2, 2, [(0, 0)])
    ms.flag((0, 0))
    ms.open((1, 1))
    assert ms.game_state is GameState.WIN
    assert str(ms) == (
        "Remaining Mines: 0\n|1| 1  1 \n|0|🚩  1 \n| ||0||1|\nYou won!\n"
    )