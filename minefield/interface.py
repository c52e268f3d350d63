"""Interface state for a minesweeper window, independent of any toolkit."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any

from .game import FieldKind, GameState, Minesweeper, OpenResult, Position

log = logging.getLogger(__name__)


class GameDifficulty(Enum):
    """Board presets: width, height and number of mines."""

    EASY = (9, 9, 10)
    MEDIUM = (16, 16, 40)
    HARD = (30, 16, 99)

    def __init__(self, width: int, height: int, mines: int) -> None:
        self.width = width
        self.height = height
        self.mines = mines

    @property
    def label(self) -> str:
        return self.name.title()

    def new_game(self) -> Minesweeper:
        return Minesweeper(self.width, self.height, self.mines)


NEW_GAME_BUTTONS: tuple[tuple[str, str, GameDifficulty], ...] = (
    ("easy-button", "Easy", GameDifficulty.EASY),
    ("medium-button", "Medium", GameDifficulty.MEDIUM),
    ("hard-button", "Hard", GameDifficulty.HARD),
)

_SEVEN_SEGMENT = {str(digit): f"score{digit}" for digit in range(10)}
_SEVEN_SEGMENT["-"] = "score_dash"

_KIND_ASSETS = {
    FieldKind.UNKNOWN: "closed",
    FieldKind.FLAGGED: "flag",
    FieldKind.QUESTION: "question_closed",
    FieldKind.MINE_REVEALED: "mine",
    FieldKind.NO_MINE: "mine_false",
    FieldKind.MINE_DETONATED: "mine_detonated",
}

_STATE_FACES = {
    GameState.IN_PROGRESS: "face",
    GameState.LOSS: "face_lose",
    GameState.WIN: "face_win",
}


def seven_segment_assets(text: str) -> list[str]:
    """Map each character to the name of its seven-segment digit image."""
    return [_SEVEN_SEGMENT.get(char, "score_empty") for char in text]


def padded_number(number: int, min_length: int) -> str:
    """Render ``number`` left-padded with zeros to at least ``min_length``."""
    return str(number).rjust(min_length, "0")


class MinesweeperInterface:
    """Everything the window shows, and how player input changes it."""

    EDGE_PADDING = 10
    BORDER_PADDING = 2
    FIELD_SIZE = 16
    SCALE_FACTOR = 2

    def __init__(self, game: Minesweeper | None = None) -> None:
        self.game = game if game is not None else GameDifficulty.EASY.new_game()
        self.face_pressed = False
        self.open_pressed = False
        self.show_new_game_menu = False
        self.timer = 0
        self.timer_enabled = False
        self.pressed_button_id: str | None = None

    def title(self) -> str:
        return "Minesweeper"

    def scale_factor(self) -> float:
        return float(self.SCALE_FACTOR)

    def calculate_size(self) -> tuple[int, int]:
        """Window size in pixels, scale factor applied."""
        width = (
            self.game.width * self.FIELD_SIZE
            + self.EDGE_PADDING * 2
            + self.BORDER_PADDING * 2
        )
        height = (
            (self.game.height + 1) * self.FIELD_SIZE
            + self.EDGE_PADDING * 4
            + self.BORDER_PADDING * 3
        )
        return width * self.SCALE_FACTOR, height * self.SCALE_FACTOR

    # Field interaction

    def open_field(self, pos: Position) -> OpenResult | None:
        result = self.game.open(pos)
        self.timer_enabled = True
        self.open_pressed = False
        if result is not None:
            log.info("Open '(%d, %d)' with result '%s'", pos[0], pos[1], result)
        return result

    def flag_field(self, pos: Position) -> None:
        self.game.flag(pos)
        self.timer_enabled = True
        self.open_pressed = False
        log.info("Flag '(%d, %d)'", pos[0], pos[1])

    def press_open(self) -> None:
        self.open_pressed = True

    def release_open(self) -> None:
        self.open_pressed = False

    # New game

    def press_face(self) -> None:
        self.face_pressed = True

    def release_face(self) -> None:
        self.face_pressed = False

    def open_new_game_menu(self) -> None:
        self.show_new_game_menu = True
        self.face_pressed = False
        self.timer_enabled = False
        self.timer = 0

    def start_new_game(self, difficulty: GameDifficulty) -> tuple[int, int]:
        """Start a fresh game and return the window size it needs."""
        self.show_new_game_menu = False
        self.game = difficulty.new_game()
        log.info("Starting new game with difficulty %s", difficulty.name)
        return self.calculate_size()

    # Menu buttons

    def press_button(self, button_id: str) -> None:
        self.pressed_button_id = button_id

    def release_button(self, action: Callable[[], Any] | None) -> Any:
        """Release the pressed button and run its action, if any."""
        self.pressed_button_id = None
        if action is None:
            return None
        return action()

    # Timer

    def tick(self) -> None:
        if self.timer_enabled and self.game.game_state is GameState.IN_PROGRESS:
            self.timer += 1

    # What to draw

    def face_asset(self) -> str:
        if self.face_pressed:
            return "face_pressed"
        if self.open_pressed:
            return "face_open"
        return _STATE_FACES[self.game.game_state]

    def field_asset(self, pos: Position) -> str:
        state = self.game.field_state(pos)
        if state.kind is FieldKind.OPEN:
            if not 0 <= state.count <= 8:
                raise ValueError(f"mine count out of range 0 - 8: {state.count}")
            return f"field{state.count}"
        return _KIND_ASSETS[state.kind]

    def mines_display(self) -> str:
        return padded_number(self.game.remaining_mines(), 3)

    def timer_display(self) -> str:
        return padded_number(self.timer, 3)