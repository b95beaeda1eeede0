"""The main window: the game chooser and the board the cards are dealt onto."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from gettext import gettext as _
from typing import Any, Callable, Mapping, Optional

from . import games, runtime
from .cards import DECK_SIZE, RANKS, Card, card_name

log = logging.getLogger("solitaire")

CHOOSER_PAGE = "chooser"
GAME_PAGE = "game"
RECENT_GAME_KEY = "recent-game"
DEFAULT_SETTINGS = {RECENT_GAME_KEY: "Klondike"}
GAME_ROW_ICON = "go-next-symbolic"


@dataclass(eq=False)
class _GameRow:
    """An entry of the game chooser that starts a game when activated."""

    title: str
    subtitle: str
    on_activate: Callable[[], None]
    icon_name: str = GAME_ROW_ICON
    activatable: bool = True

    def activate(self) -> None:
        if self.activatable:
            self.on_activate()


class SolitaireWindow:
    """The application window holding the game chooser and the card grid."""

    def __init__(
        self,
        application: Any = None,
        settings: Optional[Mapping[str, str]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.application = application
        self.settings = {**DEFAULT_SETTINGS, **(settings or {})}
        self.rng = rng
        self.grid = runtime.Grid()
        self.visible = False
        self.game_rows: list[_GameRow] = []
        self.action_log: list[str] = []
        self.actions: dict[str, Callable[[], Any]] = {
            "hint": self.hint,
            "undo": self.undo,
            "redo": self.redo,
        }
        self._pages = [CHOOSER_PAGE]
        self.add_cards()
        self.populate_game_list()
        runtime.set_grid(self.grid)

    @property
    def page(self) -> str:
        """The tag of the page being shown."""
        return self._pages[-1]

    def _push_page(self, tag: str) -> None:
        self._pages.append(tag)

    def _pop_to_page(self, tag: str) -> None:
        if tag not in self._pages:
            raise LookupError(f"no page tagged {tag!r}")
        while self._pages[-1] != tag:
            self._pages.pop()

    def present(self) -> None:
        """Show the window."""
        self.visible = True

    def close(self) -> None:
        """Hide the window."""
        self.visible = False

    def add_cards(self) -> None:
        """Lay out a full deck on the grid, one suit to a row."""
        for index in reversed(range(DECK_SIZE)):
            suite, rank = divmod(index, len(RANKS))
            self.grid.attach(Card(card_name(index)), rank, suite)

    def _announce(self, action: str) -> str:
        """Record that ``action`` was asked for, print it and return the message."""
        message = f"{action}!"
        self.action_log.append(action)
        print(message)
        return message

    def hint(self) -> str:
        """Handle the hint action."""
        return self._announce("Hint")

    def undo(self) -> str:
        """Handle the undo action."""
        return self._announce("Undo")

    def redo(self) -> str:
        """Handle the redo action."""
        return self._announce("Redo")

    def populate_game_list(self) -> None:
        """Add a chooser row for every game that can be played."""
        print("Populating game list!")
        not_played = _("You haven't played this yet")
        for game in games.get_games():
            self.game_rows.append(
                _GameRow(
                    title=_(game),
                    subtitle=not_played,
                    on_activate=lambda name=game: self.start_game(name),
                )
            )

    def start_game(self, game_name: str) -> None:
        """Deal ``game_name`` onto the grid and show the board."""
        log.info("Starting %s!", game_name)
        games.load_game(game_name, self.grid, self.rng)
        self._push_page(GAME_PAGE)
        log.info("pushed to game")

    def recent_clicked(self) -> None:
        """Start the game played most recently."""
        print("Starting Recent!")
        games.load_game(self.settings[RECENT_GAME_KEY], self.grid, self.rng)
        self._push_page(GAME_PAGE)

    def new_game_clicked(self, accept: bool) -> None:
        """Answer the new-game question: drop the game and go back to the chooser, or keep it."""
        if accept:
            print("Going to game chooser!")
            games.unload(self.grid)
            self._pop_to_page(CHOOSER_PAGE)
        else:
            print("Keeping current game!")