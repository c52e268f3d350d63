"""Minesweeper board: mine placement, opening, flagging and win/loss rules."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

Position = tuple[int, int]


@dataclass(frozen=True)
class OpenResult:
    """Outcome of opening a field: a mine, or the number of neighbouring mines."""

    mined: bool
    count: int = 0

    def __str__(self) -> str:
        return "Mine" if self.mined else f"NoMine({self.count})"


class GameState(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    LOSS = "loss"


class FieldKind(Enum):
    UNKNOWN = "unknown"
    MINE_REVEALED = "mine_revealed"
    NO_MINE = "no_mine"
    MINE_DETONATED = "mine_detonated"
    OPEN = "open"
    FLAGGED = "flagged"
    QUESTION = "question"


@dataclass(frozen=True)
class FieldState:
    """What the player sees on one field; ``count`` matters only for OPEN."""

    kind: FieldKind
    count: int = 0


class Minesweeper:
    """A minesweeper game on a ``width`` x ``height`` grid."""

    def __init__(
        self,
        width: int,
        height: int,
        num_mines: int,
        rng: random.Random | None = None,
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError("board dimensions must not be negative")
        if num_mines < 0:
            raise ValueError("number of mines must not be negative")
        if num_mines > width * height:
            raise ValueError(
                f"cannot place {num_mines} mines on a {width}x{height} board"
            )
        rng = rng or random.Random()
        self.width = width
        self.height = height
        self.game_state = GameState.IN_PROGRESS
        self._opened: set[Position] = set()
        self._flagged: set[Position] = set()
        self._question: set[Position] = set()
        self._mines: set[Position] = set()
        while len(self._mines) < num_mines:
            self._mines.add((rng.randrange(width), rng.randrange(height)))

    @classmethod
    def from_mines(
        cls, width: int, height: int, mines: Iterable[Position]
    ) -> Minesweeper:
        """Build a board with mines at exactly the given positions."""
        game = cls(width, height, 0)
        placed = {tuple(pos) for pos in mines}
        outside = [pos for pos in placed if not game.is_in_bounds(pos)]
        if outside:
            raise ValueError(f"mine positions out of bounds: {sorted(outside)}")
        game._mines = placed
        return game

    def mine_count(self) -> int:
        """Total number of mines on the board."""
        return len(self._mines)

    # Position checks

    def is_mined(self, pos: Position) -> bool:
        return pos in self._mines

    def is_open(self, pos: Position) -> bool:
        return pos in self._opened

    def is_flagged(self, pos: Position) -> bool:
        return pos in self._flagged

    def is_question(self, pos: Position) -> bool:
        return pos in self._question

    def is_in_bounds(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def field_state(self, pos: Position) -> FieldState:
        """Return what should be shown for the field at ``pos``."""
        if self.game_state is GameState.IN_PROGRESS:
            if self.is_flagged(pos):
                return FieldState(FieldKind.FLAGGED)
            if self.is_question(pos):
                return FieldState(FieldKind.QUESTION)
        else:
            if self.is_mined(pos):
                if self.is_open(pos):
                    return FieldState(FieldKind.MINE_DETONATED)
                return FieldState(FieldKind.MINE_REVEALED)
            if self.is_flagged(pos):
                return FieldState(FieldKind.NO_MINE)

        if self.is_open(pos):
            return FieldState(FieldKind.OPEN, self.neighboring_mines(pos))
        return FieldState(FieldKind.UNKNOWN)

    # Win/loss rules

    def _check_game_state(self) -> GameState:
        if self._mines & self._opened:
            self.game_state = GameState.LOSS
            return GameState.LOSS
        if len(self._opened) == self.width * self.height - len(self._mines):
            self.game_state = GameState.WIN
            return GameState.WIN
        return GameState.IN_PROGRESS

    def remaining_mines(self) -> int:
        """Mines left according to the player: mines minus flags."""
        return len(self._mines) - len(self._flagged)

    # Neighbours

    def neighbors(self, pos: Position) -> Iterator[Position]:
        """Yield the in-bounds positions around ``pos``, column by column."""
        x, y = pos
        for i in range(max(x, 1) - 1, min(x + 1, self.width - 1) + 1):
            for j in range(max(y, 1) - 1, min(y + 1, self.height - 1) + 1):
                if (i, j) != (x, y):
                    yield (i, j)

    def neighboring_mines(self, pos: Position) -> int:
        return sum(1 for n in self.neighbors(pos) if n in self._mines)

    def neighboring_flags(self, pos: Position) -> int:
        return sum(1 for n in self.neighbors(pos) if n in self._flagged)

    # Player actions

    def _reveal(self, pos: Position) -> OpenResult | None:
        if (
            self.is_flagged(pos)
            or self.is_question(pos)
            or self.is_open(pos)
            or self.game_state is GameState.LOSS
        ):
            return None
        if not self.is_in_bounds(pos):
            return None
        self._opened.add(pos)
        if self.is_mined(pos):
            self.game_state = GameState.LOSS
            return OpenResult(mined=True)
        return OpenResult(mined=False, count=self.neighboring_mines(pos))

    def _cascade(self, pos: Position) -> Iterator[Position]:
        if self.neighboring_mines(pos) == self.neighboring_flags(pos):
            yield from self.neighbors(pos)

    def open(self, pos: Position) -> OpenResult | None:
        """Open a field, spreading to neighbours when all its mines are flagged.

        Returns ``None`` when the field cannot be opened.
        """
        result = self._reveal(pos)
        if result is None or result.mined:
            return result

        pending = [self._cascade(pos)]
        while pending:
            neighbor = next(pending[-1], None)
            if neighbor is None:
                pending.pop()
                self._check_game_state()
                continue
            if self.is_flagged(neighbor) or self.is_open(neighbor):
                continue
            opened = self._reveal(neighbor)
            if opened is not None and not opened.mined:
                pending.append(self._cascade(neighbor))
        return result

    def flag(self, pos: Position) -> None:
        """Cycle a closed field through flagged, question mark and cleared."""
        if self.is_open(pos) or self.game_state is GameState.LOSS:
            return
        if not self.is_in_bounds(pos):
            return
        if self.is_flagged(pos):
            self._flagged.discard(pos)
            self._question.add(pos)
        elif self.is_question(pos):
            self._question.discard(pos)
        else:
            self._flagged.add(pos)
            self._check_game_state()

    def __repr__(self) -> str:
        return (
            f"Minesweeper(width={self.width}, height={self.height}, "
            f"mines={len(self._mines)}, state={self.game_state.name})"
        )

    def __str__(self) -> str:
        lines = [f"Remaining Mines: {self.remaining_mines()}"]
        lost = self.game_state is GameState.LOSS
        for y in reversed(range(self.width)):
            cells = []
            for x in range(self.height):
                pos = (x, y)
                if self.is_mined(pos) and (self.is_open(pos) or lost):
                    cells.append("💣 ")
                elif self.is_open(pos):
                    count = self.neighboring_mines(pos)
                    cells.append(f" {count} " if count > 0 else "   ")
                elif self.is_flagged(pos):
                    cells.append("🚩 ")
                else:
                    cells.append("⬜ ")
            lines.append(f"|{y}|" + "".join(cells))
        lines.append("| |" + "".join(f"|{x}|" for x in range(self.width)))
        if lost:
            lines.append("You lost!")
        elif self.game_state is GameState.WIN:
            lines.append("You won!")
        return "\n".join(lines) + "\n"