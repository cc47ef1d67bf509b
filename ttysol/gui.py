"""Drawing cards, piles and the cursor onto a character grid."""

from __future__ import annotations

from typing import Any

from .card import FRAME_HEIGHT, FRAME_WIDTH, Card, Face, Frame, Suit
from .cursor import Cursor
from .deck import Deck
from .stack import Stack
from .game import is_maneuvre_stack, is_stock_stack

DEFAULT_PAIR = 0
BLACK_ON_WHITE = 1
RED_ON_WHITE = 2
GREEN_ON_WHITE = 3
YELLOW_ON_WHITE = 4
WHITE_ON_BLUE = 5
WHITE_ON_GREEN = 6

_CARD_SUITS = ("\u2666", "\u2660", "\u2665", "\u2663")
_CARD_VALUES = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")

_FOUR_COLOR_PAIRS = {
    Suit.SPADES: GREEN_ON_WHITE,
    Suit.DIAMONDS: YELLOW_ON_WHITE,
    Suit.CLUBS: BLACK_ON_WHITE,
}

_BOX_TOP = "\u250c" + "\u2500" * (FRAME_WIDTH - 2) + "\u2510"
_BOX_BOTTOM = "\u2514" + "\u2500" * (FRAME_WIDTH - 2) + "\u2518"
_BOX_SIDE = "\u2502"


def card_label(value: int) -> str:
    """Return the text printed in the corners of a card of this value."""
    if not 0 <= value < len(_CARD_VALUES):
        raise ValueError(f"card has no value: {value!r}")
    return _CARD_VALUES[value]


def suit_symbol(suit: int) -> str:
    """Return the symbol printed for this suit."""
    if not 0 <= suit < len(_CARD_SUITS):
        raise ValueError(f"card has no suit: {suit!r}")
    return _CARD_SUITS[suit]


def suit_color_pair(suit: int, four_color_deck: bool) -> int:
    """Return the color pair a suit symbol is drawn with."""
    if not four_color_deck:
        return RED_ON_WHITE if suit % 2 == 0 else BLACK_ON_WHITE
    return _FOUR_COLOR_PAIRS.get(suit, RED_ON_WHITE)


class Renderer:
    """Draws the table into ``cells`` and, when set, onto a curses ``screen``.

    ``cells`` maps (row, column) to a (character, color pair) tuple.
    """

    def __init__(self, game: Any) -> None:
        self.game = game
        self.cells: dict[tuple[int, int], tuple[str, int]] = {}
        self.screen: Any = None
        self._cursor_at: tuple[int, int] | None = None

    def _put(self, y: int, x: int, text: str, pair: int) -> None:
        for offset, char in enumerate(text):
            self.cells[(y, x + offset)] = (char, pair)
        if self.screen is not None:
            import curses

            try:
                self.screen.addstr(y, x, text, curses.color_pair(pair))
            except curses.error:
                pass

    def _fill(self, frame: Frame, pair: int) -> None:
        for row in range(FRAME_HEIGHT):
            self._put(frame.begin_y + row, frame.begin_x, " " * FRAME_WIDTH, pair)

    def _box(self, frame: Frame, pair: int) -> None:
        y, x = frame.begin_y, frame.begin_x
        self._put(y, x, _BOX_TOP, pair)
        for row in range(1, FRAME_HEIGHT - 1):
            self._put(y + row, x, _BOX_SIDE, pair)
            self._put(y + row, x + FRAME_WIDTH - 1, _BOX_SIDE, pair)
        self._put(y + FRAME_HEIGHT - 1, x, _BOX_BOTTOM, pair)

    def _draw_front(self, card: Card) -> None:
        frame = card.frame
        y, x = frame.begin_y, frame.begin_x
        self._fill(frame, BLACK_ON_WHITE)
        label = card_label(card.value)
        self._put(y, x, label, BLACK_ON_WHITE)
        self._put(y + 4, x + 7 - len(label), label, BLACK_ON_WHITE)
        symbol = suit_symbol(card.suit)
        pair = suit_color_pair(card.suit, bool(self.game.four_color_deck))
        self._put(y, x + len(label), symbol, pair)
        self._put(y + 4, x + 6 - len(label), symbol, pair)

    def _draw_back(self, card: Card) -> None:
        self._fill(card.frame, WHITE_ON_BLUE)
        self._box(card.frame, WHITE_ON_BLUE)

    def draw_card(self, card: Card) -> None:
        if card.face == Face.EXPOSED:
            self._draw_front(card)
        else:
            self._draw_back(card)

    def draw_stack(self, stack: Stack) -> None:
        if stack.empty():
            frame = stack.top().frame
            self._fill(frame, DEFAULT_PAIR)
            self._box(frame, DEFAULT_PAIR)
            if is_stock_stack(stack):
                mark = "O" if self.game.passes_through_deck_left >= 1 else "X"
                self._put(frame.begin_y + 2, frame.begin_x + 3, mark, DEFAULT_PAIR)
        elif is_maneuvre_stack(stack):
            for card in reversed(list(stack)):
                self.draw_card(card)
        else:
            self.draw_card(stack.top())

    def draw_deck(self, deck: Deck) -> None:
        for stack in deck.stacks():
            self.draw_stack(stack)

    def draw_cursor(self, cursor: Cursor) -> None:
        self._put(cursor.y, cursor.x, "@" if cursor.marked else "*", DEFAULT_PAIR)
        self._cursor_at = (cursor.y, cursor.x)

    def erase_card(self, card: Card) -> None:
        self._fill(card.frame, DEFAULT_PAIR)

    def erase_stack(self, stack: Stack) -> None:
        if is_maneuvre_stack(stack):
            for card in list(stack) or [stack.top()]:
                self.erase_card(card)
        else:
            self.erase_card(stack.top())

    def erase_cursor(self, cursor: Cursor) -> None:
        y, x = self._cursor_at or (cursor.y, cursor.x)
        self._put(y, x, " ", DEFAULT_PAIR)