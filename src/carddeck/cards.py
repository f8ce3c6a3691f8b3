# src/carddeck/cards.py

import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple, Union

from .constants import MIN_VALUE, MAX_VALUE, VALUES


class InvalidCardError(ValueError):
    """Raised when a card is built from a bad suit or value."""
    pass


class Suit(Enum):
    # declaration order is deck order, file suit code order and ranking (first is strongest)
    DIAMONDS = "diamonds"
    HEARTS = "hearts"
    SPADES = "spades"
    CLUBS = "clubs"

    def __str__(self) -> str:
        return self.value


SUITS = list(Suit)


@dataclass(frozen=True)
class Card:
    suit: Suit
    value: int  # 1..13

    def __post_init__(self) -> None:
        if not isinstance(self.suit, Suit):
            raise InvalidCardError(f"Invalid suit: {self.suit!r}")
        # bool is an int subclass, reject it explicitly
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidCardError(f"Card value must be an int, got {self.value!r}")
        if not MIN_VALUE <= self.value <= MAX_VALUE:
            raise InvalidCardError(f"Card value must be {MIN_VALUE}..{MAX_VALUE}, got {self.value}")

    def __str__(self) -> str:
        return f"{self.value} of {self.suit}"


Deck = List[Card]
Hand = List[Card]
RngLike = Union[random.Random, int, None]


def as_rng(rng: RngLike) -> random.Random:
    if isinstance(rng, random.Random):
        return rng
    # None -> seeded from the OS
    return random.Random(rng)


def create_deck() -> Deck:
    """
    All 52 cards, ordered by suit (diamonds, hearts, spades, clubs)
    then by value 1..13 inside each suit.
    """
    return [Card(suit, value) for suit in SUITS for value in VALUES]


def shuffle(deck: Sequence[Card], rng: RngLike = None) -> Deck:
    """
    Returns a new list with the same cards in uniformly random order.
    rng: a random.Random, an int seed, or None for a fresh OS-seeded source.
    """
    shuffled = list(deck)
    as_rng(rng).shuffle(shuffled)
    return shuffled


def deal(deck: Sequence[Card], size: int = 1) -> Tuple[Hand, Deck]:
    """
    Split off the first `size` cards.
    Returns (hand, rest). size is clamped to 0..len(deck).
    """
    size = max(0, min(size, len(deck)))
    return list(deck[:size]), list(deck[size:])


def create_and_deal(hand_size: int, rng: RngLike = None) -> Tuple[Hand, Deck]:
    return deal(shuffle(create_deck(), rng), hand_size)


def contains(hand: Sequence[Card], card: Card) -> bool:
    return any(c == card for c in hand)
