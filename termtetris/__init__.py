"""A falling-block puzzle game for the terminal, with a curses screen and a mock screen."""

__version__ = "0.1.0"
__all__ = ["__version__"]