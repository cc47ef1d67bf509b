"""Turning key presses into moves on the table."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .card import Face
from .cursor import KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_UP, direction
from .game import (
    MANEUVRE_BEGIN_Y,
    is_maneuvre_stack,
    is_waste_pile_stack,
    move_block,
    move_card,
    valid_move,
)
from .gui import Renderer
from .stack import Stack

KEY_SPACEBAR = 32
KEY_ESCAPE = 27
KEY_RESIZE = 0o632

MOVEMENT_KEYS = frozenset({ord(c) for c in "hjkl"} | {KEY_LEFT, KEY_DOWN, KEY_UP, KEY_RIGHT})
QUIT_KEYS = frozenset({ord("q"), ord("Q")})


class QuitGame(Exception):
    """Raised when the player asks to leave the game."""


def marked_cards_count(stack: Stack) -> int:
    """Count the marked cards on top of a maneuvre pile.

    A pile without marked cards reports its whole length.
    """
    cards = list(stack)
    if len(cards) == 1:
        return 1 if cards[0].frame.begin_y > MANEUVRE_BEGIN_Y else 0
    for count, (card, below) in enumerate(zip(cards, cards[1:] + [None]), start=1):
        if below is None or card.frame.begin_y - below.frame.begin_y > 1:
            return count
    return 0


def _unmark_cards(stack: Stack) -> None:
    for card in list(stack)[: marked_cards_count(stack)]:
        card.unmark()


def _key_code(key: int | str) -> int:
    return ord(key) if isinstance(key, str) else key


def _single(card) -> Stack:
    pile = Stack()
    pile.push(card)
    return pile


class KeyboardHandler:
    """Applies key presses to a game, drawing the changes as it goes."""

    def __init__(
        self,
        game: Any,
        renderer: Renderer,
        size_ok: Callable[[], bool],
        on_resize: Callable[[], None],
    ) -> None:
        self.game = game
        self.renderer = renderer
        self._size_ok = size_ok
        self._on_resize = on_resize
        self._origin: Stack | None = None

    @property
    def selection(self) -> Stack | None:
        """The pile cards are being moved from, or None."""
        return self._origin

    def handle(self, key: int | str) -> None:
        """Handle one key press; raises QuitGame on q or Q."""
        code = _key_code(key)
        if code in QUIT_KEYS:
            raise QuitGame
        if not self._size_ok():
            if code == KEY_RESIZE:
                self._on_resize()
            return
        if self._origin is not None:
            self._handle_selection(code)
        elif code in MOVEMENT_KEYS:
            self._move_cursor(code)
        elif code == KEY_SPACEBAR:
            self._space()
        elif code == KEY_RESIZE:
            self._on_resize()

    def _move_cursor(self, code: int) -> None:
        cursor = self.game.cursor
        self.renderer.erase_cursor(cursor)
        cursor.move(direction(code), self.game.deck)
        self.renderer.draw_cursor(cursor)

    def _space(self) -> None:
        game, deck, renderer = self.game, self.game.deck, self.renderer
        if game.cursor.on_stock(deck):
            if deck.stock.empty():
                if game.passes_through_deck_left >= 1:
                    while not deck.waste_pile.empty():
                        move_card(deck.waste_pile, deck.stock)
                        deck.stock.top().cover()
                    renderer.draw_stack(deck.stock)
                    renderer.draw_stack(deck.waste_pile)
            else:
                move_card(deck.stock, deck.waste_pile)
                if deck.stock.empty():
                    game.passes_through_deck_left -= 1
                deck.waste_pile.top().expose()
                renderer.erase_stack(deck.waste_pile)
                renderer.draw_stack(deck.stock)
                renderer.draw_stack(deck.waste_pile)
            return
        stack = game.cursor.stack(deck)
        if stack is not None and stack.top().face == Face.COVERED:
            card = stack.top()
            card.expose()
            renderer.draw_card(card)
        else:
            self._begin_selection()

    def _begin_selection(self) -> None:
        cursor, renderer = self.game.cursor, self.renderer
        origin = cursor.stack(self.game.deck)
        if origin is None or origin.empty():
            return
        if is_maneuvre_stack(origin):
            renderer.erase_stack(origin)
            origin.top().mark()
            renderer.draw_stack(origin)
            cursor.y += 1
        renderer.erase_cursor(cursor)
        cursor.mark()
        renderer.draw_cursor(cursor)
        self._origin = origin

    def _on_origin(self) -> bool:
        origin = self._origin
        return self.game.cursor.stack(self.game.deck) is origin and is_maneuvre_stack(origin)

    def _handle_selection(self, code: int) -> None:
        if code in MOVEMENT_KEYS:
            self._move_cursor(code)
        elif code == ord("m"):
            self._mark_more(all_cards=False)
        elif code == ord("M"):
            self._mark_more(all_cards=True)
        elif code == ord("n"):
            self._mark_fewer()
        elif code == ord("N"):
            if self._on_origin():
                origin = self._origin
                self.renderer.erase_stack(origin)
                _unmark_cards(origin)
                origin.top().mark()
                self.renderer.draw_stack(origin)
        elif code == KEY_SPACEBAR:
            self._place()
        elif code == KEY_ESCAPE:
            self._cancel()
        elif code == KEY_RESIZE:
            self._on_resize()

    def _mark_more(self, all_cards: bool) -> None:
        if not self._on_origin():
            return
        origin = self._origin
        cards = list(origin)
        for card, below in zip(cards, cards[1:]):
            if below.face == Face.EXPOSED and card.frame.begin_y - below.frame.begin_y > 1:
                self.renderer.erase_stack(origin)
                below.mark()
                self.renderer.draw_stack(origin)
                if not all_cards:
                    break

    def _mark_fewer(self) -> None:
        if not self._on_origin():
            return
        origin = self._origin
        rest = list(origin)[1:]
        for card, below in zip(rest, rest[1:] + [None]):
            if below is not None:
                if card.frame.begin_y - below.frame.begin_y > 1:
                    self._unmark_one(card)
                    break
            elif card.frame.begin_y == MANEUVRE_BEGIN_Y + 1:
                self._unmark_one(card)
                break

    def _unmark_one(self, card) -> None:
        self.renderer.erase_stack(self._origin)
        card.unmark()
        self.renderer.draw_stack(self._origin)

    def _place(self) -> None:
        game, cursor, renderer = self.game, self.game.cursor, self.renderer
        origin = self._origin
        destination = cursor.stack(game.deck)
        count = marked_cards_count(origin)
        if is_maneuvre_stack(origin) and count > 0:
            renderer.erase_stack(origin)
            _unmark_cards(origin)
            renderer.draw_stack(origin)
        if destination is not None:
            renderer.erase_stack(origin)
            renderer.erase_cursor(cursor)
            if count > 1 and is_maneuvre_stack(origin) and is_maneuvre_stack(destination):
                block = _single(list(origin)[count - 1])
                if valid_move(block, destination):
                    cursor.y += move_block(origin, destination, count)
            elif valid_move(origin, destination):
                if is_maneuvre_stack(destination):
                    cursor.y += 1
                move_card(origin, destination)

            if origin is destination and (
                (is_maneuvre_stack(origin) and count == 1) or is_waste_pile_stack(origin)
            ):
                for foundation in game.deck.foundation:
                    destination = foundation
                    if valid_move(origin, foundation):
                        move_card(origin, foundation)
                        break

            renderer.draw_stack(origin)
            renderer.draw_stack(destination)
            if is_maneuvre_stack(origin) and origin is destination:
                renderer.erase_cursor(cursor)
                cursor.y -= 1
        cursor.unmark()
        renderer.draw_cursor(cursor)
        self._origin = None

    def _cancel(self) -> None:
        cursor, renderer = self.game.cursor, self.renderer
        origin = self._origin
        if self._on_origin():
            renderer.erase_cursor(cursor)
            cursor.y -= 1
        if marked_cards_count(origin) > 0 and is_maneuvre_stack(origin):
            renderer.erase_stack(origin)
            _unmark_cards(origin)
            renderer.draw_stack(origin)
        if cursor.marked:
            cursor.unmark()
            renderer.draw_cursor(cursor)
        self._origin = None