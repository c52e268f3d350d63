# minefield

The classic mine-clearing puzzle game, played on a grid of covered fields. Open
the fields that hold no mine, flag the ones that do, and do it before the clock
runs too long.

## Installing

```
pip install .
```

The desktop window uses Tkinter, which ships with most Python installations.
The package has no other dependencies.

## Playing

```
minefield
minefield --difficulty hard
```

`--difficulty` picks the first board: `easy` (the default), `medium` or `hard`.

- Left-click a field to open it. A number shows how many mines touch it. When the
  number of flags around a field equals the number of mines around it (including
  a field with no mines around it at all), opening it opens its unflagged
  neighbours too, and so on outwards.
- Right-click a covered field to cycle it through flag, question mark and
  covered. Flagged and question-marked fields cannot be opened.
- Click the face to open the new-game menu, then pick **Easy** (9×9, 10 mines),
  **Medium** (16×16, 40 mines) or **Hard** (30×16, 99 mines). The window resizes
  to fit the new board.

The counter on the left shows the mines left, going by your flags. The counter on
the right is the timer. It starts on your first open or flag, stops when the game
ends, and is reset when the new-game menu is opened.

The board, face and counters are drawn with plain shapes and text on a canvas;
no image files are used.

## Using the game logic

The rules live in `minefield.game` and do not depend on any interface:

```python
from minefield.game import Minesweeper, GameState

game = Minesweeper.from_mines(3, 3, {(0, 0)})
result = game.open((2, 2))
print(result)               # NoMine(0)
print(game.game_state)      # GameState.WIN
print(game)                 # text rendering of the board
```

`Minesweeper(width, height, num_mines)` places the mines at random and raises
`ValueError` if they cannot fit. It also takes an optional `rng` (a
`random.Random`) for repeatable boards. `open(pos)` returns an `OpenResult`, or
`None` when the field cannot be opened. `field_state(pos)` reports what a field
should show as a `FieldState` with a `FieldKind`, `flag(pos)` cycles its marker,
and `remaining_mines()` gives the number the counter shows.

`minefield.interface.MinesweeperInterface` holds the state of the screen: the
timer, the face, the new-game menu and the window size. It can be driven without
a window, and reports what to draw through `face_asset()`, `field_asset(pos)`,
`mines_display()` and `timer_display()`. `minefield.styles` holds the colours of
the bevelled borders and backgrounds.

## Running the tests

```
pip install ".[test]"
pytest
```