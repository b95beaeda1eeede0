"""Klondike: seven tableau piles, four foundations, a stock and a waste."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from . import runtime
from .card_stack import CardStack
from .cards import Card
from .games import Game
from .runtime import Grid

TABLEAU_COUNT = 7
FOUNDATION_COLUMNS = range(3, 7)


def _draw(remaining: list[Card], grid: Grid, rng) -> Card:
    card = remaining.pop(rng.randrange(len(remaining)))
    grid.remove(card)
    return card


@dataclass
class Klondike(Game):
    """The Klondike game, dealt onto a grid of card stacks."""

    foundation_heart: str = ""
    foundation_diamond: str = ""
    foundation_club: str = ""
    foundation_spade: str = ""

    @classmethod
    def new_game(
        cls, cards: list[Card], grid: Grid, rng: Optional[random.Random] = None
    ) -> "Klondike":
        """Deal ``cards`` at random from ``grid`` into tableau and stock."""
        rng = rng if rng is not None else random.Random()
        remaining = list(cards)

        for column in range(TABLEAU_COUNT):
            tableau = CardStack(f"tableau_{column}")
            for position in range(column + 1):
                if not remaining:
                    raise LookupError("Failed to get child from grid")
                card = _draw(remaining, grid, rng)
                tableau.add_card(card)
                if position < column:
                    card.flip()
                tableau.add_drag_to_card(card)
                runtime.connect_click(card)
            grid.attach(tableau, column, 1)
            tableau.enable_drop()

        for column in FOUNDATION_COLUMNS:
            foundation = CardStack(f"foundation_{column}", fan_cards=False)
            grid.attach(foundation, column, 0)
            foundation.enable_drop()

        grid.attach(CardStack("waste", fan_cards=False), 1, 0)

        stock = CardStack("stock", fan_cards=False)
        while remaining:
            card = _draw(remaining, grid, rng)
            stock.add_card(card)
            card.flip()
            runtime.connect_click(card)
        grid.attach(stock, 0, 0)

        return cls()

    def on_drag_completed(self, origin_stack: CardStack) -> None:
        """Turn up the card left on top of a tableau pile."""
        if origin_stack.name.startswith("tableau"):
            origin_stack.face_up_top_card()

    def on_card_click(self, card: Card) -> None:
        """Deal a clicked stock card face up onto the waste."""
        stack = card.parent
        if not isinstance(stack, CardStack):
            raise TypeError("a clicked card must lie in a card stack")
        grid = stack.parent
        if not isinstance(grid, Grid):
            raise TypeError("a card stack must lie in the grid")
        if stack.name == "stock":
            waste = runtime.get_child(grid, "waste")
            stack.remove_card(card)
            card.flip()
            waste.add_card(card)
            waste.add_drag_to_card(card)
            runtime.remove_click(card)