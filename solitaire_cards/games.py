"""The game being played and the list of games that can be started."""

from __future__ import annotations

import logging
import random
import threading
from abc import ABC, abstractmethod
from gettext import gettext as _
from typing import Optional

from .card_stack import CardStack
from .cards import Card, card_name
from .runtime import Grid

log = logging.getLogger("solitaire")

_lock = threading.RLock()
_current: Optional["Game"] = None


class Game(ABC):
    """The rules of one solitaire game."""

    @classmethod
    @abstractmethod
    def new_game(
        cls, cards: list[Card], grid: Grid, rng: Optional[random.Random] = None
    ) -> "Game":
        """Deal ``cards`` from ``grid`` into the game's stacks."""

    @abstractmethod
    def on_drag_completed(self, origin_stack: CardStack) -> None:
        """React to cards having been dragged off ``origin_stack``."""

    @abstractmethod
    def on_card_click(self, card: Card) -> None:
        """React to a click on ``card``."""


def load_game(
    game_name: str, grid: Grid, rng: Optional[random.Random] = None
) -> Game:
    """Name the cards lying in ``grid``, deal a new game and make it current."""
    global _current
    cards = grid.children()
    for index, card in enumerate(cards):
        if not isinstance(card, Card):
            raise TypeError(f"grid child {index} is not a card")
        card.name = card_name(index)
        card.sensitive = True

    from .klondike import Klondike

    game = Klondike.new_game(cards, grid, rng)
    with _lock:
        _current = game
    log.info("Loaded game: %s", game_name)
    return game


def unload(grid: Grid) -> None:
    """Drop the current game and lay every stack's cards out in its own row."""
    global _current
    with _lock:
        _current = None
    stacks = grid.children()
    for stack in stacks:
        if not isinstance(stack, CardStack):
            raise TypeError("every child of the grid must be a card stack")
    for row, stack in enumerate(stacks):
        stack.remove_child_controllers()
        stack.dissolve_to_row(grid, row)


def get_games() -> list[str]:
    """The names of the games that can be played."""
    return [_("Klondike")]


def current_game() -> Optional[Game]:
    """The game being played, if any."""
    with _lock:
        return _current


def on_card_click(card: Card) -> None:
    """Pass a click on ``card`` to the current game."""
    with _lock:
        if _current is not None:
            _current.on_card_click(card)


def on_drag_completed(origin_stack: CardStack) -> None:
    """Tell the current game that a drag off ``origin_stack`` has finished."""
    with _lock:
        if _current is not None:
            _current.on_drag_completed(origin_stack)