"""The application object and the command that starts it."""

from __future__ import annotations

import argparse
import gettext
import random
import sys
from typing import Any, Callable, Optional

from .card_stack import CardStack
from .cards import APP_ID, GETTEXT_PACKAGE, LOCALEDIR, VERSION
from .window import SolitaireWindow

RESOURCE_BASE_PATH = "/org/gnome/Solitaire"

_COMMAND_ACTIONS = {
    "quit": "app.quit",
    "about": "app.about",
    "hint": "win.hint",
    "undo": "win.undo",
    "redo": "win.redo",
}
_YES = {"yes", "y", "accept"}


class SolitaireApplication:
    """Owns the windows and the application-wide actions."""

    def __init__(
        self, application_id: str = APP_ID, rng: Optional[random.Random] = None
    ) -> None:
        self.application_id = application_id
        self.resource_base_path = RESOURCE_BASE_PATH
        self.rng = rng
        self.windows: list[SolitaireWindow] = []
        self.running = False
        self.shown_about: Optional[str] = None
        self.actions: dict[str, Callable[[], Any]] = {
            "quit": self.quit,
            "about": self._show_about,
        }
        self.accels = {
            "app.quit": ["<primary>q"],
            "win.hint": ["<primary>h"],
            "win.redo": ["<primary><shift>z"],
            "win.undo": ["<primary>z"],
        }

    @property
    def active_window(self) -> Optional[SolitaireWindow]:
        return self.windows[-1] if self.windows else None

    def activate(self) -> SolitaireWindow:
        """Present the current window, creating one if there is none."""
        window = self.active_window
        if window is None:
            window = SolitaireWindow(self, rng=self.rng)
            self.windows.append(window)
        self.running = True
        window.present()
        return window

    def activate_action(self, action: str) -> None:
        """Run an ``app.`` or ``win.`` action by its detailed name."""
        scope, _, name = action.partition(".")
        if scope == "app":
            handler = self.actions.get(name)
        elif scope == "win":
            window = self.active_window
            if window is None:
                raise RuntimeError(f"action {action!r} needs an open window")
            handler = window.actions.get(name)
        else:
            handler = None
        if handler is None:
            raise LookupError(f"no action named {action!r}")
        handler()

    def about_text(self) -> str:
        """The text of the about dialog."""
        if self.active_window is None:
            raise RuntimeError("the about dialog needs an open window")
        lines = [
            "Solitaire",
            f"Version {VERSION}",
            "Play solitaire games",
            f"Application id: {APP_ID}",
        ]
        credits = gettext.gettext("translator-credits")
        if credits != "translator-credits":
            lines.append(f"Translators: {credits}")
        return "\n".join(lines)

    def _show_about(self) -> str:
        text = self.about_text()
        self.shown_about = text
        print(text)
        return text

    def quit(self) -> None:
        """Close every window and stop the application."""
        for window in self.windows:
            window.close()
        self.windows.clear()
        self.running = False


def _print_board(window: SolitaireWindow) -> None:
    for child in window.grid.children():
        if isinstance(child, CardStack):
            cards = " ".join(card.image_key() for card in child.children())
            print(f"{child.name}: {cards}".rstrip())
        else:
            print(child.name)


def _run_command(app: SolitaireApplication, words: list[str]) -> None:
    command, args = words[0], words[1:]
    window = app.active_window
    if command in _COMMAND_ACTIONS:
        app.activate_action(_COMMAND_ACTIONS[command])
        return
    if window is None:
        raise RuntimeError("no window is open")
    if command == "play":
        if not args:
            raise ValueError("play needs the name of a game")
        window.start_game(" ".join(args))
    elif command == "recent":
        window.recent_clicked()
    elif command == "new":
        window.new_game_clicked(bool(args) and args[0].lower() in _YES)
    elif command == "board":
        _print_board(window)
    else:
        raise LookupError(f"unknown command {command!r}")


def main(argv: Optional[list[str]] = None) -> int:
    """Start the application and run commands read from standard input."""
    parser = argparse.ArgumentParser(prog="solitaire", description="Play solitaire games")
    parser.add_argument("--version", action="version", version=VERSION)
    parser.add_argument("--seed", type=int, default=None, help="seed for shuffling the deck")
    args = parser.parse_args(argv)

    gettext.bindtextdomain(GETTEXT_PACKAGE, LOCALEDIR)
    gettext.textdomain(GETTEXT_PACKAGE)

    rng = random.Random(args.seed) if args.seed is not None else None
    app = SolitaireApplication(APP_ID, rng=rng)
    app.activate()
    for line in sys.stdin:
        words = line.split()
        if not words:
            continue
        try:
            _run_command(app, words)
        except (LookupError, RuntimeError, TypeError, ValueError) as exc:
            print(f"solitaire: {exc}", file=sys.stderr)
        if not app.running:
            break
    if app.running:
        app.quit()
    return 0