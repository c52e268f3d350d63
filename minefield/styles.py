"""Colours and container styles for the classic bevelled look."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An 8-bit RGB colour."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def hex(self) -> str:
        """Return the colour as ``#rrggbb``."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


@dataclass(frozen=True)
class ContainerStyle:
    background: Color | None = None
    text_color: Color | None = None


_BLACK = Color(0, 0, 0)
_WHITE = Color(255, 255, 255)
_LIGHT_GREY = Color(191, 191, 191)
_MID_GREY = Color(127, 127, 127)
_DARK_GREY = Color(76, 76, 76)


def game_container() -> ContainerStyle:
    """Top-level game background."""
    return ContainerStyle(background=_LIGHT_GREY)


def wrapper_container() -> ContainerStyle:
    """Background of a sunken wrapper."""
    return ContainerStyle(background=_DARK_GREY)


def wrapper_container_top_left() -> ContainerStyle:
    """Top-left border of a sunken wrapper."""
    return ContainerStyle(background=_MID_GREY)


def wrapper_container_bottom_right() -> ContainerStyle:
    """Bottom-right border of a sunken wrapper."""
    return ContainerStyle(background=_WHITE)


def button_container(pressed: bool = False) -> ContainerStyle:
    """Face of a bevelled button."""
    return ContainerStyle(
        background=_MID_GREY if pressed else _LIGHT_GREY, text_color=_BLACK
    )


def button_container_top_left(pressed: bool = False) -> ContainerStyle:
    """Top-left border of a bevelled button."""
    return ContainerStyle(background=_MID_GREY if pressed else _WHITE)


def button_container_bottom_right(pressed: bool = False) -> ContainerStyle:
    """Bottom-right border of a bevelled button."""
    return ContainerStyle(background=_MID_GREY)