import random

import pytest

from solitaire_cards import games, runtime
from solitaire_cards.card_stack import CardStack
from solitaire_cards.cards import DECK_SIZE, RANKS, SUITES, Card, card_name
from solitaire_cards.window import SolitaireWindow


@pytest.fixture
def window():
    return SolitaireWindow(rng=random.Random(7))


def test_add_cards_lays_out_full_deck(window):
    cards = window.grid.children()
    assert len(cards) == DECK_SIZE
    assert sorted(c.name for c in cards) == sorted(card_name(i) for i in range(DECK_SIZE))
    assert cards[0].name == card_name(DECK_SIZE - 1)
    assert cards[-1].name == card_name(0)


def test_add_cards_positions_by_rank_and_suit(window):
    for card in window.grid.children():
        suite, rank = card.name.split("_", 1)
        assert window.grid.position_of(card) == (RANKS.index(rank), SUITES.index(suite))
        assert card.sensitive


def test_window_registers_grid(window):
    assert runtime.get_grid() is window.grid


def test_game_list_rows(window):
    assert [row.title for row in window.game_rows] == games.get_games()
    assert all(row.subtitle == "You haven't played this yet" for row in window.game_rows)
    assert window.page == "chooser"


def test_start_game_deals_board(window):
    window.start_game("Klondike")
    assert window.page == "game"
    names = {child.name for child in window.grid.children()}
    expected = {f"tableau_{i}" for i in range(7)} | {f"foundation_{i}" for i in range(3, 7)}
    assert names == expected | {"waste", "stock"}
    assert sum(len(stack) for stack in window.grid.children()) == DECK_SIZE
    assert games.current_game() is not None


def test_row_activation_starts_game(window):
    window.game_rows[0].activate()
    assert window.page == "game"
    assert all(isinstance(c, CardStack) for c in window.grid.children())


def test_recent_clicked_uses_setting():
    window = SolitaireWindow(settings={"recent-game": "Klondike"}, rng=random.Random(3))
    window.recent_clicked()
    assert window.page == "game"
    assert len(window.grid.children()) == 13


def test_new_game_accept_returns_to_chooser(window):
    window.start_game("Klondike")
    window.new_game_clicked(True)
    assert window.page == "chooser"
    assert games.current_game() is None
    cards = window.grid.children()
    assert len(cards) == DECK_SIZE
    assert all(isinstance(c, Card) for c in cards)


def test_new_game_decline_keeps_game(window, capsys):
    window.start_game("Klondike")
    capsys.readouterr()
    window.new_game_clicked(False)
    assert capsys.readouterr().out == "Keeping current game!\n"
    assert window.page == "game"
    assert games.current_game() is not None


def test_new_game_accept_can_restart(window):
    window.start_game("Klondike")
    window.new_game_clicked(True)
    window.start_game("Klondike")
    assert window.page == "game"
    assert sum(len(stack) for stack in window.grid.children()) == DECK_SIZE


def test_starting_twice_without_unload_fails(window):
    window.start_game("Klondike")
    with pytest.raises(TypeError):
        window.start_game("Klondike")


@pytest.mark.parametrize("action, text", [("hint", "Hint!"), ("undo", "Undo!"), ("redo", "Redo!")])
def test_window_actions_print(window, capsys, action, text):
    capsys.readouterr()
    window.actions[action]()
    assert capsys.readouterr().out == text + "\n"


def test_present_and_close(window):
    window.present()
    assert window.visible
    window.close()
    assert not window.visible