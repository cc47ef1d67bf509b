import random

import pytest

from ttysol.card import Card, Face, Frame, Suit, Value
from ttysol.deck import Deck
from ttysol.game import (
    FOUNDATION_BEGIN_X,
    FOUNDATION_BEGIN_Y,
    MANEUVRE_BEGIN_Y,
    STOCK_BEGIN_X,
    STOCK_BEGIN_Y,
    WASTE_PILE_BEGIN_X,
    WASTE_PILE_BEGIN_Y,
    Game,
    is_foundation_stack,
    is_maneuvre_stack,
    is_stock_stack,
    is_waste_pile_stack,
    move_block,
    move_card,
    valid_move,
)
from ttysol.stack import Stack

MANEUVRE_X = (1, 9, 17, 25, 33, 41, 49)


def make_stack(value, suit, begin_y, begin_x, face=Face.EXPOSED):
    stack = Stack(begin_y, begin_x)
    stack.push(Card(value, suit, face, Frame(begin_y, begin_x)))
    return stack


def stock(value, suit):
    return make_stack(value, suit, STOCK_BEGIN_Y, STOCK_BEGIN_X)


def waste(value, suit):
    return make_stack(value, suit, WASTE_PILE_BEGIN_Y, WASTE_PILE_BEGIN_X)


def foundations(cards):
    return [
        make_stack(value, suit, FOUNDATION_BEGIN_Y, x)
        for (value, suit), x in zip(cards, FOUNDATION_BEGIN_X)
    ]


def maneuvres(cards):
    return [
        make_stack(value, suit, MANEUVRE_BEGIN_Y, x)
        for (value, suit), x in zip(cards, MANEUVRE_X)
    ]


def test_stack_kinds():
    assert is_stock_stack(stock(Value.ACE, Suit.SPADES))
    assert is_waste_pile_stack(waste(Value.ACE, Suit.SPADES))
    assert all(is_foundation_stack(s) for s in foundations([(Value.ACE, Suit.SPADES)] * 4))
    assert all(is_maneuvre_stack(s) for s in maneuvres([(Value.ACE, Suit.SPADES)] * 7))
    assert not is_maneuvre_stack(stock(Value.ACE, Suit.SPADES))


def test_valid_move_from_stock_to_stock():
    s0 = stock(Value.ACE, Suit.SPADES)
    s1 = stock(Value.KING, Suit.HEARTS)
    assert not valid_move(s0, s0)
    assert not valid_move(s0, s1)
    assert not valid_move(s1, s0)
    assert not valid_move(s1, s1)


def test_valid_move_from_stock_to_waste_pile():
    assert valid_move(stock(Value.ACE, Suit.SPADES), waste(Value.KING, Suit.HEARTS))


def test_valid_move_from_stock_to_foundation_stacks():
    origin = stock(Value.ACE, Suit.SPADES)
    for destination in foundations([(Value.ACE, Suit.SPADES)] * 4):
        assert not valid_move(origin, destination)


def test_valid_move_from_stock_to_maneuvre_stacks():
    origin = stock(Value.ACE, Suit.SPADES)
    for destination in maneuvres([(Value.ACE, Suit.SPADES)] * 7):
        assert not valid_move(origin, destination)


def test_valid_move_from_waste_pile_to_stock():
    assert not valid_move(waste(Value.KING, Suit.HEARTS), stock(Value.ACE, Suit.SPADES))


def test_valid_move_from_waste_pile_to_waste_pile():
    w0 = waste(Value.ACE, Suit.SPADES)
    w1 = waste(Value.KING, Suit.HEARTS)
    assert not valid_move(w0, w0)
    assert not valid_move(w0, w1)
    assert not valid_move(w1, w0)
    assert not valid_move(w1, w1)


def test_valid_move_from_waste_pile_to_foundation_stacks():
    origin = waste(Value.TWO, Suit.SPADES)
    for destination in foundations([(Value.ACE, Suit.SPADES)] * 4):
        assert valid_move(origin, destination)


def test_valid_move_from_waste_pile_to_maneuvre_stacks():
    origin = waste(Value.ACE, Suit.DIAMONDS)
    cards = [(Value.TWO, Suit.SPADES)] * 4 + [(Value.TWO, Suit.CLUBS)] * 3
    for destination in maneuvres(cards):
        assert valid_move(origin, destination)


def test_valid_move_from_foundation_stack_to_stock():
    destination = stock(Value.ACE, Suit.SPADES)
    for origin in foundations([(Value.ACE, Suit.SPADES)] * 4):
        assert not valid_move(origin, destination)


def test_valid_move_from_foundation_stack_to_waste_pile():
    destination = waste(Value.ACE, Suit.SPADES)
    for origin in foundations([(Value.ACE, Suit.SPADES)] * 4):
        assert not valid_move(origin, destination)


def test_valid_move_from_foundation_stack_to_foundation_stacks():
    stacks = foundations(
        [
            (Value.ACE, Suit.SPADES),
            (Value.TWO, Suit.SPADES),
            (Value.THREE, Suit.SPADES),
            (Value.FOUR, Suit.SPADES),
        ]
    )
    for i, origin in enumerate(stacks):
        for j, destination in enumerate(stacks):
            assert valid_move(origin, destination) is (i == j + 1)


def test_valid_move_from_foundation_stack_to_maneuvre_stacks():
    origins = foundations([(Value.ACE, Suit.SPADES)] * 2 + [(Value.ACE, Suit.CLUBS)] * 2)
    destinations = maneuvres(
        [(Value.TWO, Suit.HEARTS)] * 4 + [(Value.TWO, Suit.DIAMONDS)] * 3
    )
    for origin in origins:
        for destination in destinations:
            assert valid_move(origin, destination)


def test_valid_move_from_maneuvre_stack_to_stock():
    destination = stock(Value.ACE, Suit.SPADES)
    for origin in maneuvres([(Value.ACE, Suit.SPADES)] * 7):
        assert not valid_move(origin, destination)


def test_valid_move_from_maneuvre_stack_to_waste_pile():
    destination = waste(Value.ACE, Suit.SPADES)
    for origin in maneuvres([(Value.ACE, Suit.SPADES)] * 7):
        assert not valid_move(origin, destination)


def test_valid_move_from_maneuvre_stack_to_foundation_stacks():
    destinations = foundations([(Value.ACE, Suit.SPADES)] * 4)
    for origin in maneuvres([(Value.TWO, Suit.SPADES)] * 7):
        for destination in destinations:
            assert valid_move(origin, destination)


def test_valid_move_from_maneuvre_stack_to_maneuvre_stacks():
    stacks = maneuvres(
        [
            (Value.ACE, Suit.SPADES),
            (Value.TWO, Suit.HEARTS),
            (Value.THREE, Suit.CLUBS),
            (Value.FOUR, Suit.DIAMONDS),
            (Value.FIVE, Suit.SPADES),
            (Value.SIX, Suit.DIAMONDS),
            (Value.SEVEN, Suit.CLUBS),
        ]
    )
    for i, origin in enumerate(stacks):
        for j, destination in enumerate(stacks):
            assert valid_move(origin, destination) is (i + 1 == j)


def test_valid_move_needs_exposed_card():
    origin = make_stack(Value.TWO, Suit.SPADES, WASTE_PILE_BEGIN_Y, WASTE_PILE_BEGIN_X, Face.COVERED)
    destination = foundations([(Value.ACE, Suit.SPADES)])[0]
    assert not valid_move(origin, destination)


def test_valid_move_onto_empty_piles():
    ace = waste(Value.ACE, Suit.HEARTS)
    king = waste(Value.KING, Suit.HEARTS)
    empty_foundation = Stack(FOUNDATION_BEGIN_Y, FOUNDATION_BEGIN_X[0])
    empty_maneuvre = Stack(MANEUVRE_BEGIN_Y, MANEUVRE_X[0])
    assert valid_move(ace, empty_foundation)
    assert not valid_move(king, empty_foundation)
    assert valid_move(king, empty_maneuvre)
    assert not valid_move(ace, empty_maneuvre)


def test_move_card_from_empty_stack_to_empty_stack():
    origin = Stack()
    destination = Stack()
    origin_copy = origin.copy()
    destination_copy = destination.copy()
    move_card(origin, destination)
    assert origin == origin_copy
    assert destination == destination_copy


def test_move_card_from_empty_stack_to_non_empty_stack():
    origin = Stack()
    destination = Stack()
    destination.push(Card(Value.ACE, Suit.SPADES, Face.EXPOSED, Frame(0, 0)))
    origin_copy = origin.copy()
    destination_copy = destination.copy()
    move_card(origin, destination)
    assert origin == origin_copy
    assert destination == destination_copy


def _six_cards():
    return [Card(Value.TWO + i, i % 5, i % 2, Frame(99, 99)) for i in range(6)]


def test_move_card_from_non_empty_stack_to_empty_stack():
    cards = _six_cards()
    origin = Stack()
    destination = Stack()
    for card in cards:
        origin.push(card)

    move_card(origin, destination)
    assert (len(origin), len(destination)) == (5, 1)
    assert destination.top() is cards[5]

    move_card(origin, destination)
    assert (len(origin), len(destination)) == (4, 2)
    assert destination.top() is cards[4]

    move_card(origin, destination)
    assert (len(origin), len(destination)) == (3, 3)
    assert destination.top() is cards[3]
    assert destination.top().value == Value.FIVE


def test_move_card_from_non_empty_stack_to_non_empty_stack():
    cards = _six_cards()
    origin = Stack()
    destination = Stack()
    for card in cards[:3]:
        origin.push(card)
    for card in cards[3:]:
        destination.push(card)
    move_card(origin, destination)
    assert (len(origin), len(destination)) == (2, 4)
    top, below = list(destination)[:2]
    assert top is cards[2]
    assert below is cards[5]


def test_move_card_should_not_change_empty_stack_coordinates():
    origin = Stack()
    destination = Stack()
    origin.push(Card(Value.ACE, Suit.SPADES, Face.EXPOSED, Frame(MANEUVRE_BEGIN_Y, MANEUVRE_X[0])))
    destination.push(Card(Value.KING, Suit.HEARTS, Face.EXPOSED, Frame(MANEUVRE_BEGIN_Y, MANEUVRE_X[1])))
    move_card(origin, destination)
    assert origin.empty()
    assert (origin.top().frame.begin_y, origin.top().frame.begin_x) == (MANEUVRE_BEGIN_Y, MANEUVRE_X[0])


def test_move_card_onto_maneuvre_steps_down():
    origin = waste(Value.QUEEN, Suit.HEARTS)
    destination = maneuvres([(Value.KING, Suit.SPADES)])[0]
    move_card(origin, destination)
    frame = destination.top().frame
    assert (frame.begin_y, frame.begin_x) == (MANEUVRE_BEGIN_Y + 1, MANEUVRE_X[0])


def test_move_block_keeps_order():
    origin = Stack(MANEUVRE_BEGIN_Y, MANEUVRE_X[0])
    values = [Value.KING, Value.QUEEN, Value.JACK]
    for depth, value in enumerate(values):
        origin.push(Card(value, Suit.SPADES, Face.EXPOSED, Frame(MANEUVRE_BEGIN_Y + depth, MANEUVRE_X[0])))
    destination = maneuvres([(Value.KING, Suit.HEARTS)])[1 - 1]
    destination = Stack(MANEUVRE_BEGIN_Y, MANEUVRE_X[1])
    destination.push(Card(Value.KING, Suit.HEARTS, Face.EXPOSED, Frame(MANEUVRE_BEGIN_Y, MANEUVRE_X[1])))

    rows = move_block(origin, destination, 2)

    assert rows == 2
    assert len(origin) == 1
    assert [card.value for card in destination] == [Value.JACK, Value.QUEEN, Value.KING]
    assert [card.frame.begin_y for card in destination] == [11, 10, 9]
    assert all(card.frame.begin_x == MANEUVRE_X[1] for card in destination)


def test_move_block_onto_empty_single_card_needs_no_cursor_move():
    origin = Stack(MANEUVRE_BEGIN_Y, MANEUVRE_X[0])
    origin.push(Card(Value.KING, Suit.SPADES, Face.EXPOSED, Frame(MANEUVRE_BEGIN_Y, MANEUVRE_X[0])))
    destination = Stack(MANEUVRE_BEGIN_Y, MANEUVRE_X[2])
    assert move_block(origin, destination, 1) == 0
    assert len(destination) == 1
    assert origin.empty()


def test_game_deal_layout():
    game = Game(3, False, random.Random(1))
    deck = game.deck
    assert len(deck.stock) == 52 - 28
    assert deck.waste_pile.empty()
    assert all(stack.empty() for stack in deck.foundation)
    for i, stack in enumerate(deck.maneuvre):
        cards = list(stack)
        assert len(cards) == i + 1
        assert cards[0].face == Face.EXPOSED
        assert all(card.face == Face.COVERED for card in cards[1:])
        assert [card.frame.begin_y for card in cards] == list(range(9 + i, 8, -1))
        assert all(card.frame.begin_x == MANEUVRE_X[i] for card in cards)


def test_game_uses_every_card_once():
    game = Game(rng=random.Random(7))
    cards = [(card.value, card.suit) for stack in game.deck.stacks() for card in stack]
    assert len(cards) == 52
    assert len(set(cards)) == 52


def test_game_settings_and_start_state():
    game = Game(5, True, random.Random(2))
    assert game.passes_through_deck_left == 5
    assert game.four_color_deck is True
    assert (game.cursor.y, game.cursor.x, game.cursor.marked) == (7, 4, False)
    assert is_stock_stack(game.deck.stock)
    assert is_waste_pile_stack(game.deck.waste_pile)
    assert not game.won()


def test_game_same_seed_same_deal():
    first = Game(rng=random.Random(42))
    second = Game(rng=random.Random(42))
    assert list(first.deck.stacks()) == list(second.deck.stacks())


def test_won_when_all_exposed_and_stock_empty():
    game = Game(rng=random.Random(3))
    game.deck = Deck()
    game.deck.maneuvre[0].push(Card(Value.KING, Suit.SPADES, Face.EXPOSED))
    assert game.won()
    game.deck.maneuvre[1].push(Card(Value.KING, Suit.HEARTS, Face.COVERED))
    assert not game.won()


@pytest.mark.parametrize("pile", ["stock", "waste_pile"])
def test_not_won_with_cards_left_in_pile(pile):
    game = Game(rng=random.Random(3))
    game.deck = Deck()
    getattr(game.deck, pile).push(Card(Value.ACE, Suit.CLUBS, Face.EXPOSED))
    assert not game.won()