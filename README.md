# solitaire-cards

A small solitaire game model with Klondike as its game. It keeps a deck
of 52 named cards on a board grid. It deals them into tableau,
foundation, waste and stock stacks, and moves cards between stacks
when they are clicked or dragged. It has no dependencies beyond the
standard library.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
solitaire-cards [--seed N]
```

This starts the application and opens its window. The window holds a
fresh deck and the list of games. The program then reads commands from
standard input, one per line:

| command | what it does |
|---|---|
| `play <name>` | deals a game onto the board (every name deals Klondike) |
| `recent` | deals the most recent game (the setting defaults to `Klondike`) |
| `board` | prints each child of the board. A stack prints as `name: cards`, with each face-down card shown as `back` |
| `new yes` | drops the current game and lays each stack's cards out in its own row. `new` with any other word keeps the game |
| `hint`, `undo`, `redo` | prints `Hint!`, `Undo!` or `Redo!` |
| `about` | prints the about text |
| `quit` | closes the window and ends the program |

`--seed N` makes the shuffle repeatable. `--version` prints the
version. If a command fails, the program prints `solitaire: <reason>`
on standard error and goes on reading. It quits when its input ends.

## Using it as a library

- `solitaire_cards.cards` holds `Card`, `card_name(index)` and
  `new_deck()`, plus the deck constants `SUITES`, `RANKS` and
  `DECK_SIZE`.
  - A card's face-down state is kept in its name: a face-down card has
    a `_b` suffix.
  - `Card.flip()` turns the card over. `Card.flip_to_face()` turns it
    face up only if it is face down.
  - `Card.face_name()` gives the name without the suffix.
    `Card.image_key()` gives the card's own name when it is face up and
    `"back"` when it is face down.
- `solitaire_cards.runtime` holds the board and the handlers on cards.
  - `Grid` has `attach(widget, column, row)`, `remove(widget)`,
    `children()` and `position_of(widget)`.
  - `get_child(container, name)` looks up a child by name and raises
    `LookupError` if there is none.
  - `connect_click`, `remove_click` and `remove_drag` add and remove a
    card's click and drag handlers.
  - `get_grid()` and `set_grid(grid)` hold the current board, one per
    thread.
- `solitaire_cards.card_stack` holds `CardStack`, `TransferCardStack`,
  `Orientation` and `get_index(card_name, children)`.
  - A transfer stack holds the cards being dragged.
    `CardStack.split_to_new_on(card_name)` makes one from the named card
    and every card above it. `merge_stack(stack)` puts one back.
  - `size_allocate(width, height)` returns where each card goes. Cards
    are 1.4 times as tall as they are wide. In a fanned stack each card
    sits lower than the one below it, by at most a third of a card's
    height.
  - `measure(orientation, for_size)` gives the stack's minimum and
    natural size.
- `solitaire_cards.games` works with the current game.
  - `load_game(game_name, grid, rng)` names the cards on the grid and
    deals a Klondike game. `unload(grid)` drops it.
  - `current_game()` returns the game being played. `get_games()` lists
    the games that can be played.
  - `on_card_click(card)` and `on_drag_completed(origin_stack)` pass
    events on to the current game.
- `solitaire_cards.klondike` deals and plays Klondike.
  - `Klondike.new_game(cards, grid, rng)` deals seven tableau stacks,
    each with only its top card face up. It also makes four empty
    foundations, an empty waste stack and a face-down stock.
  - When a drag leaves a tableau stack, its new top card is turned face
    up.
  - Clicking a card in the stock moves it face up onto the waste stack.
- `solitaire_cards.window` holds `SolitaireWindow`. It has the game
  chooser rows, the board grid, the pages that `start_game`,
  `recent_clicked` and `new_game_clicked(accept)` move between, and the
  `hint`, `undo` and `redo` actions.
- `solitaire_cards.application` holds `SolitaireApplication`, with
  `activate()`, `activate_action("app.quit")` and the other actions,
  `about_text()` and `quit()`. It also holds `main(argv=None)`, which is
  the `solitaire-cards` command.

```python
import random

from solitaire_cards import games
from solitaire_cards.window import SolitaireWindow

window = SolitaireWindow(rng=random.Random(1))
window.start_game("Klondike")
stock = next(s for s in window.grid.children() if s.name == "stock")
games.on_card_click(stock.children()[-1])   # deals that card onto the waste
```

## What it does not do

- There is no graphical display. The window is a model, and `board`
  prints the layout as text. Card images are named by `image_key()`
  but never drawn.
- Moves are not checked against the rules. Any transfer stack can be
  dropped on a tableau or foundation stack.
- There is no scoring and no check for a won game.
- `hint`, `undo` and `redo` only announce themselves.
- The most recent game is not stored between runs.
- Klondike is the only game.