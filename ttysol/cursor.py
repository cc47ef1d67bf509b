"""The selection cursor that moves between the piles on the table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .deck import Deck
from .stack import Stack

CURSOR_BEGIN_X = 4
CURSOR_BEGIN_Y = 7

CURSOR_INVALID_SPOT_X = 20
CURSOR_INVALID_SPOT_Y = 7

CURSOR_STOCK_X = 4
CURSOR_WASTE_PILE_X = 12
CURSOR_FOUNDATION_X = (28, 36, 44, 52)
CURSOR_MANEUVRE_X = (4, 12, 20, 28, 36, 44, 52)

CURSOR_RIGHTMOST_MOVABLE_X = 49
CURSOR_STEP_X = 8

MANEUVRE_BEGIN_X = (1, 9, 17, 25, 33, 41, 49)

KEY_DOWN = 0o402
KEY_UP = 0o403
KEY_LEFT = 0o404
KEY_RIGHT = 0o405


class Movement(Enum):
    LEFT = 0
    DOWN = 1
    UP = 2
    RIGHT = 3


_DIRECTIONS = {
    ord("h"): Movement.LEFT,
    KEY_LEFT: Movement.LEFT,
    ord("j"): Movement.DOWN,
    KEY_DOWN: Movement.DOWN,
    ord("k"): Movement.UP,
    KEY_UP: Movement.UP,
    ord("l"): Movement.RIGHT,
    KEY_RIGHT: Movement.RIGHT,
}


def direction(key: int | str) -> Movement:
    """Map a movement key (hjkl or an arrow key) to a Movement."""
    code = ord(key) if isinstance(key, str) else key
    try:
        return _DIRECTIONS[code]
    except KeyError:
        raise ValueError(f"invalid cursor direction: {key!r}") from None


@dataclass
class Cursor:
    """Screen position of the cursor and whether it holds a selection."""

    x: int = CURSOR_BEGIN_X
    y: int = CURSOR_BEGIN_Y
    marked: bool = False

    def mark(self) -> None:
        self.marked = True

    def unmark(self) -> None:
        self.marked = False

    def move(self, movement: Movement, deck: Deck) -> None:
        """Move one step in the given direction, staying on the table."""
        if movement is Movement.LEFT:
            if self.x > CURSOR_BEGIN_X:
                self.x -= CURSOR_STEP_X
                self._follow_column(deck)
        elif movement is Movement.RIGHT:
            if self.x < CURSOR_RIGHTMOST_MOVABLE_X:
                self.x += CURSOR_STEP_X
                self._follow_column(deck)
        elif movement is Movement.UP:
            if self.y > CURSOR_BEGIN_Y:
                self.y = CURSOR_BEGIN_Y
        elif movement is Movement.DOWN:
            if self.y == CURSOR_BEGIN_Y and self.x - 3 in MANEUVRE_BEGIN_X:
                column = MANEUVRE_BEGIN_X.index(self.x - 3)
                self.y = 6 + deck.maneuvre[column].top().frame.begin_y

    def _follow_column(self, deck: Deck) -> None:
        if self.y > CURSOR_BEGIN_Y:
            self.move(Movement.UP, deck)
            self.move(Movement.DOWN, deck)

    def stack(self, deck: Deck) -> Stack | None:
        """Return the pile under the cursor, or None on the empty spot."""
        if self.y == CURSOR_BEGIN_Y:
            if self.x == CURSOR_INVALID_SPOT_X:
                return None
            if self.x == CURSOR_STOCK_X:
                return deck.stock
            if self.x == CURSOR_WASTE_PILE_X:
                return deck.waste_pile
            if self.x in CURSOR_FOUNDATION_X:
                return deck.foundation[CURSOR_FOUNDATION_X.index(self.x)]
        elif self.x in CURSOR_MANEUVRE_X:
            return deck.maneuvre[CURSOR_MANEUVRE_X.index(self.x)]
        raise ValueError(f"invalid stack at cursor position ({self.y}, {self.x})")

    def on_stock(self, deck: Deck) -> bool:
        stack = self.stack(deck)
        return stack is not None and stack is deck.stock

    def on_invalid_spot(self, deck: Deck) -> bool:
        return self.stack(deck) is None