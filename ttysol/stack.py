"""A pile of cards with a fixed place on the table."""

from __future__ import annotations

from collections.abc import Iterator

from .card import Card, Frame


class Stack:
    """A pile of cards, iterated from the top card down.

    An empty pile is represented by a blank card whose frame records
    where the pile sits on the table.
    """

    def __init__(self, begin_y: int = 0, begin_x: int = 0) -> None:
        self._cards: list[Card] = []
        self._blank = Card(frame=Frame(begin_y, begin_x))

    def top(self) -> Card:
        """Return the top card, or the blank placeholder of an empty pile."""
        return self._cards[-1] if self._cards else self._blank

    def empty(self) -> bool:
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return reversed(self._cards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        if self.empty() and other.empty():
            return self._blank == other._blank
        return self._cards == other._cards

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Stack({list(self)!r})"

    def push(self, card: Card | None) -> None:
        """Put a card on top; None is ignored."""
        if card is not None:
            self._cards.append(card)

    def pop(self) -> Card | None:
        """Remove and return the top card, or None if the pile is empty."""
        if not self._cards:
            return None
        card = self._cards.pop()
        if not self._cards:
            self._blank = Card(frame=card.frame.copy())
        return card

    def reversed(self) -> Stack:
        """Return a new pile holding copies of the cards in reverse order."""
        result = Stack()
        result._blank = self._blank.copy()
        result._cards = [card.copy() for card in self]
        return result

    def copy(self) -> Stack:
        """Return a new pile holding copies of the cards in the same order."""
        result = Stack()
        result._blank = self._blank.copy()
        result._cards = [card.copy() for card in self._cards]
        return result