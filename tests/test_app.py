import pytest

from minefield.app import window_geometry
from minefield.game import Minesweeper
from minefield.interface import GameDifficulty, MinesweeperInterface


def parse(geometry):
    width, height = geometry.split("x")
    return int(width), int(height)


def test_easy_geometry():
    ui = MinesweeperInterface(Minesweeper.from_mines(9, 9, [(0, 0)]))
    assert window_geometry(ui) == "336x412"


@pytest.mark.parametrize("difficulty", list(GameDifficulty))
def test_geometry_matches_interface_size(difficulty):
    ui = MinesweeperInterface()
    ui.start_new_game(difficulty)
    assert parse(window_geometry(ui)) == ui.calculate_size()


def test_geometry_follows_new_game():
    ui = MinesweeperInterface()
    before = parse(window_geometry(ui))
    ui.start_new_game(GameDifficulty.HARD)
    after = parse(window_geometry(ui))
    assert after[0] > before[0]
    assert after[1] > before[1]


def test_square_boards_give_taller_than_wide_windows():
    ui = MinesweeperInterface(Minesweeper.from_mines(16, 16, []))
    width, height = parse(window_geometry(ui))
    assert height > width