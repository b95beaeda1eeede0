"""Stacks of cards on the board and the stacks carried during a drag."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional

from . import runtime
from .cards import ASPECT, Card

log = logging.getLogger("solitaire")

DROP = "drop"


class Orientation(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class Allocation:
    """Where a card was placed inside its stack."""

    card: Card
    width: int
    height: int
    y: int


def _card_height(width: int) -> int:
    # Rounded first so that binary float noise never pushes the floor down a pixel.
    return math.floor(round(width * ASPECT, 6))


def get_index(card_name: str, children: Iterable[Card]) -> int:
    """Return the position of the card called ``card_name`` among ``children``."""
    for index, child in enumerate(children):
        if child.name == card_name:
            return index
    raise LookupError(f"Card named '{card_name}' was not found in the stack.")


class _Stack:
    """Cards kept in order, bottom first."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.parent: Any = None
        self.realized = True
        self.width = 0
        self.height = 0
        self.v_offset = 0
        self.allocations: list[Allocation] = []
        self._cards: list[Card] = []

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self):
        return iter(list(self._cards))

    def children(self) -> list[Card]:
        """The cards in the stack, bottom first."""
        return list(self._cards)

    def _append(self, card: Card) -> None:
        if card.parent is not None:
            log.warning("Attempted to add a widget that already has a parent")
            return
        self._cards.append(card)
        card.parent = self

    def _take(self, card: Card) -> None:
        if not any(c is card for c in self._cards):
            raise ValueError(f"card {card.name!r} is not in stack {self.name!r}")
        self._cards = [c for c in self._cards if c is not card]
        card.parent = None

    def _place(self, width: int, height: int, offset: Optional[int]) -> list[Allocation]:
        """Lay the cards out; ``offset`` None means fan them by ``self.v_offset``."""
        self.width, self.height = width, height
        cards = self._cards
        if not cards:
            self.allocations = []
            return []
        if len(cards) == 1:
            self.allocations = [Allocation(cards[0], width, _card_height(width), 0)]
            return self.allocations
        card_height = _card_height(width)
        if height <= card_height:
            raise ValueError(
                f"card stack height is less than card height, height: {height}"
            )
        step = self.v_offset if offset is None else offset
        self.allocations = [
            Allocation(card, width, card_height, index * step)
            for index, card in enumerate(cards)
        ]
        return self.allocations


class CardStack(_Stack):
    """A pile of cards on the board, fanned downwards or squared up."""

    def __init__(self, name: str = "", fan_cards: bool = True) -> None:
        super().__init__(name)
        self.fan_cards = fan_cards
        self.controllers: list = []

    def measure(self, orientation: Orientation, for_size: int) -> tuple[int, int, int, int]:
        """Return (minimum, natural, minimum baseline, natural baseline)."""
        if for_size == 0:
            raise ValueError("for_size must not be 0")
        if not isinstance(orientation, Orientation):
            raise ValueError("orientation is not vertical or horizontal")
        if for_size == -1:
            if orientation is Orientation.HORIZONTAL:
                return 20, 30, -1, -1
            return 60, 90, -1, -1
        if orientation is Orientation.HORIZONTAL:
            return 20, int(for_size / 3), -1, -1
        return 60, for_size * 3, -1, -1

    def size_allocate(self, width: int, height: int) -> list[Allocation]:
        """Place the cards within ``width`` x ``height`` and return the placements."""
        if len(self._cards) < 2 or not self.fan_cards:
            return self._place(width, height, 0)
        card_height = _card_height(width)
        if height <= card_height:
            raise ValueError(
                f"card stack height is less than card height, height: {height}"
            )
        limit = min(height, width * 4)
        offset = min((limit - card_height) // (len(self._cards) - 1), card_height // 3)
        self.v_offset = offset
        return self._place(width, height, offset)

    def _relayout(self) -> None:
        if self.width > 0:
            self.size_allocate(self.width, self.height)

    def add_card(self, card: Card) -> None:
        """Put ``card`` on top of the stack unless it already lies elsewhere."""
        self._append(card)

    def remove_card(self, card: Card) -> None:
        """Take ``card`` out of the stack."""
        self._take(card)

    def enable_drop(self) -> None:
        """Let dragged stacks be dropped onto this one."""
        self.controllers.append(_DropTarget(self))

    def split_to_new_on(self, card_name: str) -> TransferCardStack:
        """Move the named card and every card above it to a new transfer stack."""
        start = get_index(card_name, self._cards)
        moving = TransferCardStack()
        moving.v_offset = self.v_offset
        moving.origin_name = self.name
        for card in self._cards[start:]:
            self._take(card)
            moving.add_card(card)
        self._relayout()
        moving.height_request = self.height
        moving.width_request = self.width
        return moving

    def merge_stack(self, stack: TransferCardStack) -> None:
        """Move every card of ``stack`` onto this stack, keeping their order."""
        for card in stack.children():
            stack._take(card)
            self.add_card(card)
        self._relayout()
        stack.realized = False

    def dissolve_to_row(self, grid: runtime.Grid, row: int) -> None:
        """Lay the cards out along ``row`` of ``grid`` and drop the stack."""
        for column, card in enumerate(self.children()):
            self._take(card)
            grid.attach(card, column, row)
        grid.remove(self)
        self.realized = False

    def remove_child_controllers(self) -> None:
        """Remove every controller attached to the stack itself."""
        self.controllers.clear()

    def face_up_top_card(self) -> None:
        """Turn the top card face up."""
        if not self._cards:
            raise IndexError(f"stack {self.name!r} is empty")
        self._cards[-1].flip_to_face()

    def add_drag_to_card(self, card: Card) -> None:
        """Let ``card``, with everything above it, be dragged off its stack."""
        card.controllers.append(_DragSource(card))

    def focus_card(self, card_name: str) -> None:
        """Give the named card the keyboard focus."""
        runtime.get_child(self, card_name).focused = True


class TransferCardStack(_Stack):
    """The cards being carried by a drag, remembering the stack they left."""

    def __init__(self, origin_name: str = "") -> None:
        super().__init__()
        self.origin_name = origin_name
        self.width_request = 0
        self.height_request = 0

    def add_card(self, card: Card) -> None:
        """Put ``card`` on top unless it already lies elsewhere."""
        self._append(card)

    def size_allocate(self, width: int, height: int) -> list[Allocation]:
        """Place the cards, fanned by the offset of the stack they came from."""
        return self._place(width, height, None)


@dataclass(eq=False)
class _DropTarget:
    """Accepts transfer stacks dropped onto a card stack."""

    stack: CardStack
    kind: str = DROP

    def drop(self, value: Any) -> bool:
        if not isinstance(value, TransferCardStack):
            log.warning("Tried to drop a non-TransferCardStack onto a CardStack")
            return False
        self.stack.merge_stack(value)
        return True


@dataclass(eq=False)
class _DragSource:
    """Carries a card and the cards above it away from their stack."""

    card: Card
    kind: str = runtime.DRAG
    content: Optional[TransferCardStack] = None

    def prepare(self) -> TransferCardStack:
        stack = self.card.parent
        if not isinstance(stack, CardStack):
            raise TypeError("a dragged card must lie in a CardStack")
        self.content = stack.split_to_new_on(self.card.name)
        return self.content

    def _carried(self) -> TransferCardStack:
        if self.content is None:
            raise RuntimeError("the drag has not been prepared")
        return self.content

    def begin(self) -> TransferCardStack:
        carried = self._carried()
        if carried.width_request > 0:
            carried.size_allocate(carried.width_request, carried.height_request)
        return carried

    def _origin(self) -> CardStack:
        grid = runtime.get_grid()
        if grid is None:
            raise RuntimeError("no card grid is registered")
        return runtime.get_child(grid, self._carried().origin_name)

    def cancel(self) -> bool:
        self._origin().merge_stack(self._carried())
        return True

    def end(self) -> None:
        from . import games

        games.on_drag_completed(self._origin())