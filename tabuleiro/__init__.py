"""Rules, a computer player, saved games, statistics and a text menu for a small board game."""

__version__ = "0.1.0"
__all__ = ["__version__"]