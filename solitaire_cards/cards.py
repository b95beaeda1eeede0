"""Playing cards, their names and their face-up or face-down state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

VERSION = "DEV"
APP_ID = "org.gnome.Solitaire.Devel"
GETTEXT_PACKAGE = "solitaire"
LOCALEDIR = "/app/share/locale"
PKGDATADIR = "/app/share/solitaire"

JOKERS = ("joker_red", "joker_black")
SUITES = ("club", "diamond", "heart", "spade")
RANKS = (
    "ace", "2", "3", "4", "5", "6", "7", "8", "9", "10", "jack", "queen", "king",
)
DECK_SIZE = len(SUITES) * len(RANKS)

# Height of a card divided by its width.
ASPECT = 1.4
CARD_WIDTH = 250
CARD_HEIGHT = 350

BACK_IMAGE = "back"
_BACK_SUFFIX = "_b"


def card_name(index: int) -> str:
    """Return the name of the card at ``index`` in a standard 52-card deck."""
    if not 0 <= index < DECK_SIZE:
        raise IndexError(f"card index {index} is outside 0..{DECK_SIZE - 1}")
    suite, rank = divmod(index, len(RANKS))
    return f"{SUITES[suite]}_{RANKS[rank]}"


@dataclass(eq=False)
class Card:
    """A single card widget.

    The face-down state is kept in the name: a card lying face down has
    ``_b`` appended to its face name.
    """

    name: str
    parent: Any = None
    sensitive: bool = True
    focused: bool = False
    controllers: list = field(default_factory=list)

    @property
    def face_up(self) -> bool:
        return not self.name.endswith(_BACK_SUFFIX)

    def face_name(self) -> str:
        """The card's name as seen face up."""
        if self.name.endswith(_BACK_SUFFIX):
            return self.name[: -len(_BACK_SUFFIX)]
        return self.name

    def image_key(self) -> str:
        """The id of the image layer that shows this card as it lies."""
        return self.name if self.face_up else BACK_IMAGE

    def flip(self) -> None:
        """Turn the card over."""
        if self.face_up:
            self.name += _BACK_SUFFIX
        else:
            self.name = self.face_name()

    def flip_to_face(self) -> None:
        """Turn the card face up if it lies face down."""
        if not self.face_up:
            self.name = self.face_name()


def new_deck() -> list[Card]:
    """Return the 52 cards of a standard deck, face up, in suit-then-rank order."""
    return [Card(card_name(index)) for index in range(DECK_SIZE)]