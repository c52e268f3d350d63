"""Tk window that draws a MinesweeperInterface and feeds it mouse input."""

from __future__ import annotations

import argparse
from typing import Any

from . import styles
from .interface import (
    NEW_GAME_BUTTONS,
    GameDifficulty,
    MinesweeperInterface,
)

_E = MinesweeperInterface.EDGE_PADDING
_B = MinesweeperInterface.BORDER_PADDING
_F = MinesweeperInterface.FIELD_SIZE
_DIGIT_WIDTH = 9
_MENU_PADDING = 25
_BUTTON_HEIGHT = 21
_BUTTON_SPACING = 5
_BUTTON_MAX_WIDTH = 200

_NUMBER_COLORS = {
    1: "#0000ff",
    2: "#007b00",
    3: "#ff0000",
    4: "#00007b",
    5: "#7b0000",
    6: "#007b7b",
    7: "#000000",
    8: "#7b7b7b",
}

_FACE_TEXT = {
    "face": ":)",
    "face_pressed": ":)",
    "face_open": ":o",
    "face_lose": "x(",
    "face_win": "B)",
}


def window_geometry(interface: MinesweeperInterface) -> str:
    """Tk geometry string (``WIDTHxHEIGHT``) for the interface's window."""
    width, height = interface.calculate_size()
    return f"{width}x{height}"


class App:
    """Draws the game on a canvas and routes clicks to the interface."""

    def __init__(self, master: Any, interface: MinesweeperInterface | None = None):
        import tkinter as tk

        self.master = master
        self.interface = interface if interface is not None else MinesweeperInterface()
        self._scale = self.interface.scale_factor()
        self._pressed: tuple | None = None

        background = styles.game_container().background
        master.title(self.interface.title())
        master.resizable(False, False)
        master.configure(background=background.hex())
        self.canvas = tk.Canvas(
            master, highlightthickness=0, borderwidth=0, background=background.hex()
        )
        self.canvas.pack()
        for button in (1, 3):
            self.canvas.bind(
                f"<ButtonPress-{button}>",
                lambda event, b=button: self._on_press(event, b),
            )
            self.canvas.bind(
                f"<ButtonRelease-{button}>",
                lambda event, b=button: self._on_release(event, b),
            )
        self._resize()
        self.redraw()
        self.master.after(1000, self._tick)

    # Layout, in unscaled units

    def _board_width(self) -> int:
        return self.interface.game.width * _F + 2 * _E + 2 * _B

    def _controls_inner(self) -> tuple[int, int, int, int]:
        return (_E + _B, _E + _B, self._board_width() - _E - _B, _E + _B + _F)

    def _board_inner(self) -> tuple[int, int, int, int]:
        top = _E + _F + 2 * _B + _E + _B
        game = self.interface.game
        return (_E + _B, top, _E + _B + game.width * _F, top + game.height * _F)

    def _face_rect(self) -> tuple[float, float, float, float]:
        x0, y0, x1, _ = self._controls_inner()
        centre = (x0 + x1) / 2
        return (centre - _F / 2, y0, centre + _F / 2, y0 + _F)

    def _menu_buttons(self):
        x0, y0, x1, _ = self._board_inner()
        width = min(_BUTTON_MAX_WIDTH, (x1 - x0) - 2 * _MENU_PADDING)
        left = (x0 + x1 - width) / 2
        top = y0 + _MENU_PADDING
        for button_id, label, difficulty in NEW_GAME_BUTTONS:
            yield (left, top, left + width, top + _BUTTON_HEIGHT), button_id, label, difficulty
            top += _BUTTON_HEIGHT + _BUTTON_SPACING

    # Drawing helpers

    def _rect(self, x0, y0, x1, y1, fill: str, outline: str = "") -> None:
        s = self._scale
        self.canvas.create_rectangle(
            x0 * s, y0 * s, x1 * s, y1 * s, fill=fill, outline=outline, width=1
        )

    def _text(self, x, y, text: str, fill: str, size: int = 9) -> None:
        s = self._scale
        self.canvas.create_text(
            x * s, y * s, text=text, fill=fill,
            font=("Courier", int(size * s), "bold"),
        )

    def _sunken_box(self, inner: tuple, fill: str) -> None:
        x0, y0, x1, y1 = inner
        self._rect(x0, y0, x1 + _B, y1 + _B,
                   styles.wrapper_container_bottom_right().background.hex())
        self._rect(x0 - _B, y0 - _B, x1, y1,
                   styles.wrapper_container_top_left().background.hex())
        self._rect(x0, y0, x1, y1, fill)

    def _bevel(self, x0, y0, x1, y1, pressed: bool = False) -> None:
        self._rect(x0, y0, x1, y1,
                   styles.button_container_top_left(pressed).background.hex())
        self._rect(x0 + _B, y0 + _B, x1, y1,
                   styles.button_container_bottom_right(pressed).background.hex())
        self._rect(x0 + _B, y0 + _B, x1 - _B, y1 - _B,
                   styles.button_container(pressed).background.hex())

    def _draw_field(self, asset: str, x: int, y: int) -> None:
        light = styles.game_container().background.hex()
        mid = styles.wrapper_container_top_left().background.hex()
        x1, y1 = x + _F, y + _F
        cx, cy = x + _F / 2, y + _F / 2
        if asset in ("closed", "flag", "question_closed"):
            self._bevel(x, y, x1, y1)
            if asset == "flag":
                self._rect(cx, y + 3, cx + 1, y1 - 3, "#000000")
                s = self._scale
                self.canvas.create_polygon(
                    (cx + 1) * s, (y + 3) * s, (cx + 1) * s, (y + 9) * s,
                    (x + 3) * s, (y + 6) * s, fill="#ff0000",
                )
            elif asset == "question_closed":
                self._text(cx, cy, "?", "#000000")
            return
        background = "#ff0000" if asset == "mine_detonated" else light
        self._rect(x, y, x1, y1, background, outline=mid)
        if asset.startswith("field"):
            count = int(asset[len("field"):])
            if count:
                self._text(cx, cy, str(count), _NUMBER_COLORS[count])
            return
        s = self._scale
        self.canvas.create_oval(
            (x + 4) * s, (y + 4) * s, (x1 - 4) * s, (y1 - 4) * s, fill="#000000"
        )
        if asset == "mine_false":
            self.canvas.create_line(
                (x + 3) * s, (y + 3) * s, (x1 - 3) * s, (y1 - 3) * s,
                fill="#ff0000", width=s,
            )
            self.canvas.create_line(
                (x1 - 3) * s, (y + 3) * s, (x + 3) * s, (y1 - 3) * s,
                fill="#ff0000", width=s,
            )

    def _draw_counter(self, text: str, left: float, top: float) -> None:
        width = len(text) * _DIGIT_WIDTH
        self._rect(left, top, left + width, top + _F, "#000000")
        for offset, char in enumerate(text):
            self._text(left + offset * _DIGIT_WIDTH + _DIGIT_WIDTH / 2,
                       top + _F / 2, char, "#ff0000", size=10)

    def redraw(self) -> None:
        """Draw the whole window from the interface's current state."""
        ui = self.interface
        self.canvas.delete("all")
        wrapper = styles.wrapper_container().background.hex()

        controls = self._controls_inner()
        self._sunken_box(controls, wrapper)
        mines = ui.mines_display()
        timer = ui.timer_display()
        self._draw_counter(mines, controls[0], controls[1])
        self._draw_counter(timer, controls[2] - len(timer) * _DIGIT_WIDTH, controls[1])
        fx0, fy0, fx1, fy1 = self._face_rect()
        self._bevel(fx0, fy0, fx1, fy1, pressed=ui.face_pressed)
        s = self._scale
        self.canvas.create_oval(
            (fx0 + 3) * s, (fy0 + 3) * s, (fx1 - 3) * s, (fy1 - 3) * s,
            fill="#ffff00", outline="#000000",
        )
        self._text((fx0 + fx1) / 2, (fy0 + fy1) / 2, _FACE_TEXT[ui.face_asset()],
                   "#000000", size=5)

        board = self._board_inner()
        if ui.show_new_game_menu:
            self._sunken_box(board, styles.game_container().background.hex())
            for (x0, y0, x1, y1), button_id, label, _ in self._menu_buttons():
                pressed = ui.pressed_button_id == button_id
                self._bevel(x0, y0, x1, y1, pressed=pressed)
                self._text((x0 + x1) / 2, (y0 + y1) / 2, label,
                           styles.button_container(pressed).text_color.hex(), size=6)
        else:
            self._sunken_box(board, wrapper)
            for y in range(ui.game.height):
                for x in range(ui.game.width):
                    self._draw_field(ui.field_asset((x, y)),
                                     board[0] + x * _F, board[1] + y * _F)

    # Input

    def _hit(self, event: Any) -> tuple | None:
        x, y = event.x / self._scale, event.y / self._scale
        fx0, fy0, fx1, fy1 = self._face_rect()
        if fx0 <= x < fx1 and fy0 <= y < fy1:
            return ("face",)
        bx0, by0, bx1, by1 = self._board_inner()
        if not (bx0 <= x < bx1 and by0 <= y < by1):
            return None
        if self.interface.show_new_game_menu:
            for (x0, y0, x1, y1), button_id, _, difficulty in self._menu_buttons():
                if x0 <= x < x1 and y0 <= y < y1:
                    return ("button", button_id, difficulty)
            return None
        return ("field", (int((x - bx0) // _F), int((y - by0) // _F)))

    def _on_press(self, event: Any, button: int) -> None:
        target = self._hit(event)
        self._pressed = target
        if target is None:
            return
        if target[0] == "field":
            self.interface.press_open()
        elif button == 1 and target[0] == "face":
            self.interface.press_face()
        elif button == 1 and target[0] == "button":
            self.interface.press_button(target[1])
        self.redraw()

    def _on_release(self, event: Any, button: int) -> None:
        target = self._hit(event)
        pressed, self._pressed = self._pressed, None
        if pressed is None:
            return
        ui = self.interface
        if pressed[0] == "field":
            if target is not None and target[0] == "field":
                if button == 1:
                    ui.open_field(target[1])
                else:
                    ui.flag_field(target[1])
            else:
                ui.release_open()
        elif pressed[0] == "face" and button == 1:
            if target == pressed:
                ui.open_new_game_menu()
            else:
                ui.release_face()
        elif pressed[0] == "button" and button == 1:
            if target == pressed:
                difficulty = pressed[2]
                ui.release_button(lambda: self._start(difficulty))
            else:
                ui.release_button(None)
        self.redraw()

    def _start(self, difficulty: GameDifficulty) -> tuple[int, int]:
        size = self.interface.start_new_game(difficulty)
        self._resize()
        return size

    def _resize(self) -> None:
        width, height = self.interface.calculate_size()
        self.canvas.configure(width=width, height=height)
        self.master.geometry(window_geometry(self.interface))

    def _tick(self) -> None:
        self.interface.tick()
        self.redraw()
        self.master.after(1000, self._tick)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="minefield", description="Play minesweeper.")
    parser.add_argument(
        "--difficulty",
        choices=[d.name.lower() for d in GameDifficulty],
        default="easy",
        help="board to start with (default: easy)",
    )
    args = parser.parse_args(argv)

    import tkinter as tk

    interface = MinesweeperInterface(GameDifficulty[args.difficulty.upper()].new_game())
    root = tk.Tk()
    App(root, interface)
    root.mainloop()
    return 0