"""The card grid and the event controllers attached to cards."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Iterator

CLICK = "click"
DRAG = "drag"

_state = threading.local()


@dataclass(eq=False)
class _ClickGesture:
    """Reports a released click on a card to the running game."""

    card: Any
    kind: str = CLICK

    def release(self) -> None:
        from . import games

        games.on_card_click(self.card)


@dataclass(eq=False)
class _Cell:
    widget: Any
    column: int
    row: int


class Grid:
    """A container that places widgets at (column, row) positions."""

    def __init__(self, name: str = "card_grid") -> None:
        self.name = name
        self.parent = None
        self._cells: list[_Cell] = []

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.children())

    def _cell_of(self, widget: Any) -> _Cell:
        cell = next((c for c in self._cells if c.widget is widget), None)
        if cell is None:
            raise ValueError(f"widget {getattr(widget, 'name', widget)!r} is not in the grid")
        return cell

    def attach(self, widget: Any, column: int, row: int) -> None:
        """Place ``widget`` at ``column``, ``row``."""
        if widget.parent is not None:
            raise ValueError("widget already has a parent")
        self._cells.append(_Cell(widget, column, row))
        widget.parent = self

    def remove(self, widget: Any) -> None:
        """Take ``widget`` out of the grid."""
        self._cells.remove(self._cell_of(widget))
        widget.parent = None

    def children(self) -> list:
        """The widgets in the order they were attached."""
        return [cell.widget for cell in self._cells]

    def position_of(self, widget: Any) -> tuple[int, int]:
        """Return the (column, row) of ``widget``."""
        cell = self._cell_of(widget)
        return cell.column, cell.row


def get_child(container: Any, name: str) -> Any:
    """Return the child of ``container`` with the given name."""
    child = next((c for c in container.children() if c.name == name), None)
    if child is None:
        raise LookupError(f"Card named '{name}' was not found in the stack.")
    return child


def connect_click(card: Any) -> None:
    """Attach a click controller that forwards released clicks to the game."""
    card.controllers.append(_ClickGesture(card))


def _remove_kind(widget: Any, kind: str) -> None:
    widget.controllers[:] = [c for c in widget.controllers if c.kind != kind]


def remove_click(card: Any) -> None:
    """Remove every click controller from ``card``."""
    _remove_kind(card, CLICK)


def remove_drag(card: Any) -> None:
    """Remove every drag source from ``card``."""
    _remove_kind(card, DRAG)


def get_grid() -> Grid | None:
    """The grid registered for this thread, if any."""
    return getattr(_state, "grid", None)


def set_grid(grid: Grid | None) -> None:
    """Register ``grid`` as this thread's card grid."""
    _state.grid = grid