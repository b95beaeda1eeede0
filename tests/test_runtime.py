import threading
from dataclasses import dataclass

import pytest

from solitaire_cards.cards import Card, new_deck
from solitaire_cards.runtime import (
    CLICK,
    DRAG,
    Grid,
    connect_click,
    get_child,
    get_grid,
    remove_click,
    remove_drag,
    set_grid,
)


@dataclass(eq=False)
class FakeDrag:
    kind: str = DRAG


@pytest.fixture
def grid():
    return Grid()


def test_attach_sets_parent_and_position(grid):
    card = Card("club_ace")
    grid.attach(card, 3, 1)
    assert card.parent is grid
    assert grid.position_of(card) == (3, 1)
    assert grid.children() == [card]


def test_children_keep_attach_order(grid):
    deck = new_deck()
    for column, card in enumerate(deck[:5]):
        grid.attach(card, column, 0)
    assert grid.children() == deck[:5]
    assert len(grid) == 5
    assert list(grid) == deck[:5]


def test_attach_widget_with_parent_fails(grid):
    card = Card("heart_2")
    grid.attach(card, 0, 0)
    with pytest.raises(ValueError):
        Grid().attach(card, 0, 0)


def test_remove_clears_parent(grid):
    card = Card("spade_3")
    other = Card("spade_4")
    grid.attach(card, 0, 0)
    grid.attach(other, 1, 0)
    grid.remove(card)
    assert card.parent is None
    assert grid.children() == [other]


def test_remove_missing_widget_fails(grid):
    with pytest.raises(ValueError):
        grid.remove(Card("club_5"))


def test_position_of_missing_widget_fails(grid):
    with pytest.raises(ValueError):
        grid.position_of(Card("club_6"))


def test_get_child_finds_by_name(grid):
    deck = new_deck()
    for card in deck[:3]:
        grid.attach(card, 0, 0)
    assert get_child(grid, deck[1].name) is deck[1]


def test_get_child_missing_raises_lookup_error(grid):
    grid.attach(Card("club_ace"), 0, 0)
    with pytest.raises(LookupError, match="was not found in the stack"):
        get_child(grid, "waste")


def test_connect_and_remove_click():
    card = Card("diamond_9")
    connect_click(card)
    assert [c.kind for c in card.controllers] == [CLICK]
    remove_click(card)
    assert card.controllers == []


def test_remove_click_keeps_drag():
    card = Card("diamond_8")
    drag = FakeDrag()
    card.controllers.append(drag)
    connect_click(card)
    connect_click(card)
    remove_click(card)
    assert card.controllers == [drag]


def test_remove_drag_keeps_click():
    card = Card("heart_king")
    card.controllers.append(FakeDrag())
    connect_click(card)
    remove_drag(card)
    assert [c.kind for c in card.controllers] == [CLICK]


def test_set_and_get_grid(grid):
    set_grid(grid)
    try:
        assert get_grid() is grid
    finally:
        set_grid(None)
    assert get_grid() is None


def test_grid_is_per_thread(grid):
    set_grid(grid)
    seen = []
    worker = threading.Thread(target=lambda: seen.append(get_grid()))
    worker.start()
    worker.join()
    try:
        assert seen == [None]
        assert get_grid() is grid
    finally:
        set_grid(None)