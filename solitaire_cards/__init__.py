"""Klondike solitaire model: cards, stacks, a board grid, game rules and a line-command front end."""

__version__ = "0.1.0"
__all__ = ["__version__"]