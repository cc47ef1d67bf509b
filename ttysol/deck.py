"""The set of piles laid out on the table."""

from __future__ import annotations

from collections.abc import Iterator

from .stack import Stack

FOUNDATION_STACKS_NUMBER = 4
MANEUVRE_STACKS_NUMBER = 7


class Deck:
    """Stock, waste pile, four foundations and seven maneuvre piles."""

    def __init__(self) -> None:
        self.stock = Stack()
        self.waste_pile = Stack()
        self.foundation = [Stack() for _ in range(FOUNDATION_STACKS_NUMBER)]
        self.maneuvre = [Stack() for _ in range(MANEUVRE_STACKS_NUMBER)]

    def stacks(self) -> Iterator[Stack]:
        """Yield every pile: stock, waste pile, foundations, maneuvre piles."""
        yield self.stock
        yield self.waste_pile
        yield from self.foundation
        yield from self.maneuvre