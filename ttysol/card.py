"""Playing cards and the screen frames they occupy."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

FRAME_WIDTH = 7
FRAME_HEIGHT = 5


class Value(IntEnum):
    NO_VALUE = -1
    ACE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    NINE = 8
    TEN = 9
    JACK = 10
    QUEEN = 11
    KING = 12


class Suit(IntEnum):
    NO_SUIT = -1
    DIAMONDS = 0
    SPADES = 1
    HEARTS = 2
    CLUBS = 3


class Face(IntEnum):
    NO_FACE = -1
    COVERED = 0
    EXPOSED = 1


@dataclass
class Frame:
    """Top-left screen position of a card-sized area."""

    begin_y: int = 0
    begin_x: int = 0

    def move_to(self, begin_y: int, begin_x: int) -> None:
        self.begin_y = begin_y
        self.begin_x = begin_x

    def copy(self) -> Frame:
        return Frame(self.begin_y, self.begin_x)


@dataclass
class Card:
    """A card with its value, suit, face and position; blank by default."""

    value: int = Value.NO_VALUE
    suit: int = Suit.NO_SUIT
    face: int = Face.NO_FACE
    frame: Frame = field(default_factory=Frame)

    def place(self, value: int, suit: int, face: int, begin_y: int, begin_x: int) -> None:
        self.frame.move_to(begin_y, begin_x)
        self.value = value
        self.suit = suit
        self.face = face

    def expose(self) -> None:
        self.face = Face.EXPOSED

    def cover(self) -> None:
        self.face = Face.COVERED

    def mark(self) -> None:
        self.frame.move_to(self.frame.begin_y + 1, self.frame.begin_x)

    def unmark(self) -> None:
        self.frame.move_to(self.frame.begin_y - 1, self.frame.begin_x)

    def copy(self) -> Card:
        return Card(self.value, self.suit, self.face, self.frame.copy())