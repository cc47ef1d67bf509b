# ttysol

Klondike solitaire in your terminal. The game is drawn with the standard
library's `curses` module and played entirely from the keyboard, so it needs a
system where `curses` is available (Linux, macOS and other POSIX systems).

## Installing

```
pip install .
```

The terminal has to be at least 57 columns wide and 28 lines tall. If it is
smaller, the game asks you to enlarge it (or press `q` to quit).

## Playing

```
ttysol
```

Options:

```
  -v, --version              Show version
  -h, --help                 Show this message
  -p, --passes               Number of passes through the deck  (default: 3)
      --four-color-deck      Draw unique card suit colors       (default: false)
      --no-background-color  Don't draw background color        (default: false)
```

`--help`, `--version` and any unknown option print their message and exit
with status 0.

Keys:

- arrow keys or `h` `j` `k` `l` move the cursor;
- space on the stock turns up a card; once the stock is empty, space moves the
  waste pile back onto it, as long as passes are left (`O` on the empty stock
  means a pass is left, `X` means none are);
- space on a covered card turns it over;
- space on an exposed card selects it, and a second space puts it where the
  cursor is, if the move is legal. If you place a single card back on the pile
  it came from, the game tries to move it to a foundation;
- while a tableau card is selected, `m` selects one more card, `M` selects every
  exposed card, `n` selects one fewer and `N` goes back to one card;
- Esc cancels the selection;
- `q` or `Q` quits at any time.

The game ends when the stock and the waste pile are empty and every tableau
card is face up; `You won.` is then printed.

## Using the modules

The game logic does not need a terminal. A `Game` deals a shuffled table and
takes an optional `random.Random` for a repeatable deal:

```python
import random

from ttysol.game import Game, valid_move

game = Game(3, False, random.Random(7))
print(game.won())
print(valid_move(game.deck.waste_pile, game.deck.foundation[0]))
```

`Renderer` draws into its `cells` dictionary, mapping `(row, column)` to a
`(character, color pair)` tuple, and only touches a curses screen when its
`screen` attribute is set. `KeyboardHandler` applies key presses to a game:

```python
from ttysol.gui import Renderer
from ttysol.keyboard import KeyboardHandler, QuitGame

renderer = Renderer(game)
handler = KeyboardHandler(game, renderer, lambda: True, lambda: None)
handler.handle("l")          # cursor moves one pile to the right
print(game.cursor.x, game.cursor.y)
```

`handle` raises `QuitGame` on `q` or `Q`.

The modules:

- `ttysol.card`: `Card`, `Frame` and the `Value`, `Suit` and `Face` enums;
- `ttysol.stack`: `Stack`, a pile of cards with a fixed place on the table;
- `ttysol.deck`: `Deck`, the stock, waste pile, foundations and tableau;
- `ttysol.cursor`: `Cursor`, `Movement` and `direction`;
- `ttysol.game`: `Game`, `valid_move`, `move_card`, `move_block`;
- `ttysol.gui`: `Renderer`, `card_label`, `suit_symbol`, `suit_color_pair`;
- `ttysol.keyboard`: `KeyboardHandler`, `QuitGame`, `marked_cards_count`;
- `ttysol.common`: `term_size_ok` and the minimum terminal size;
- `ttysol.cli`: `parse_args`, `greeting_lines`, `run` and `main`.

## Tests

```
pip install .[test]
pytest
```