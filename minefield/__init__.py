"""The classic mine-clearing puzzle game: rules, screen state and a Tk window."""

__version__ = "1.0.0"
__all__ = ["app", "game", "interface", "styles"]