"""Solitaire rules, card moves and the initial deal."""

from __future__ import annotations

import random

from .card import Card, Face, Frame, Suit, Value
from .cursor import MANEUVRE_BEGIN_X, Cursor
from .deck import Deck
from .stack import Stack

NUMBER_OF_CARDS = 52

STOCK_BEGIN_X = 1
STOCK_BEGIN_Y = 1

WASTE_PILE_BEGIN_X = 9
WASTE_PILE_BEGIN_Y = 1

FOUNDATION_BEGIN_Y = 1
FOUNDATION_BEGIN_X = (25, 33, 41, 49)

MANEUVRE_BEGIN_Y = 9

FILL_BEGIN_Y = 1
FILL_BEGIN_X = 1


def is_stock_stack(stack: Stack) -> bool:
    frame = stack.top().frame
    return frame.begin_y == STOCK_BEGIN_Y and frame.begin_x == STOCK_BEGIN_X


def is_waste_pile_stack(stack: Stack) -> bool:
    frame = stack.top().frame
    return frame.begin_y == WASTE_PILE_BEGIN_Y and frame.begin_x == WASTE_PILE_BEGIN_X


def is_foundation_stack(stack: Stack) -> bool:
    frame = stack.top().frame
    return frame.begin_y == FOUNDATION_BEGIN_Y and frame.begin_x in FOUNDATION_BEGIN_X


def is_maneuvre_stack(stack: Stack) -> bool:
    frame = stack.top().frame
    return frame.begin_y >= MANEUVRE_BEGIN_Y and frame.begin_x in MANEUVRE_BEGIN_X


def valid_move(origin: Stack, destination: Stack) -> bool:
    """Return True if the top card of origin may go onto destination."""
    card = origin.top()
    target = destination.top()
    if card.face != Face.EXPOSED:
        return False
    if is_stock_stack(origin) and is_waste_pile_stack(destination):
        return True
    if is_foundation_stack(destination):
        if destination.empty():
            return card.value == Value.ACE
        return card.suit == target.suit and card.value == target.value + 1
    if is_maneuvre_stack(destination):
        if destination.empty():
            return card.value == Value.KING
        return (
            target.face == Face.EXPOSED
            and (card.suit + target.suit) % 2 == 1
            and card.value + 1 == target.value
        )
    return False


def move_card(origin: Stack, destination: Stack) -> None:
    """Move the top card of origin onto destination, placing it on screen."""
    card = origin.pop()
    if card is None:
        return
    frame = destination.top().frame
    begin_y, begin_x = frame.begin_y, frame.begin_x
    if not destination.empty() and is_maneuvre_stack(destination):
        begin_y += 1
    destination.push(card)
    card.frame.move_to(begin_y, begin_x)


def move_block(origin: Stack, destination: Stack, block_size: int) -> int:
    """Move the top block_size cards of origin onto destination, in order.

    Returns how many rows the cursor should move down to stay on the
    top card of the destination.
    """
    holding = Stack()
    for _ in range(block_size):
        holding.push(origin.pop())
    for _ in range(block_size):
        move_card(holding, destination)
    return block_size if len(destination) > 1 else 0


class Game:
    """A dealt game: the piles, the cursor and the remaining passes."""

    def __init__(
        self,
        passes_through_deck: int = 3,
        four_color_deck: bool = False,
        rng: random.Random | None = None,
    ) -> None:
        self.cursor = Cursor()
        self.deck = Deck()
        self.four_color_deck = four_color_deck
        self.passes_through_deck_left = passes_through_deck
        self._rng = rng if rng is not None else random.Random()

        deck = self.deck
        deck.stock.top().frame.move_to(STOCK_BEGIN_Y, STOCK_BEGIN_X)
        deck.waste_pile.top().frame.move_to(WASTE_PILE_BEGIN_Y, WASTE_PILE_BEGIN_X)
        for stack, begin_x in zip(deck.foundation, FOUNDATION_BEGIN_X):
            stack.top().frame.move_to(FOUNDATION_BEGIN_Y, begin_x)
        for stack, begin_x in zip(deck.maneuvre, MANEUVRE_BEGIN_X):
            stack.top().frame.move_to(MANEUVRE_BEGIN_Y, begin_x)

        self._fill()
        self._shuffle()
        self._deal()

    def _fill(self) -> None:
        for value in range(Value.ACE, Value.KING + 1):
            for suit in range(Suit.DIAMONDS, Suit.CLUBS + 1):
                self.deck.stock.push(
                    Card(value, suit, Face.COVERED, Frame(FILL_BEGIN_Y, FILL_BEGIN_X))
                )

    def _shuffle(self) -> None:
        cards = [self.deck.stock.pop() for _ in range(NUMBER_OF_CARDS)]
        for i in range(NUMBER_OF_CARDS):
            j = self._rng.randrange(NUMBER_OF_CARDS)
            cards[i], cards[j] = cards[j], cards[i]
        for card in cards:
            self.deck.stock.push(card)

    def _deal(self) -> None:
        maneuvre = self.deck.maneuvre
        for i, stack in enumerate(maneuvre):
            move_card(self.deck.stock, stack)
            stack.top().expose()
            for later in maneuvre[i + 1:]:
                move_card(self.deck.stock, later)

    def won(self) -> bool:
        """Return True once every card is face up and stock and waste are empty."""
        for stack in self.deck.maneuvre:
            if any(card.face == Face.COVERED for card in stack):
                return False
        return self.deck.stock.empty() and self.deck.waste_pile.empty()