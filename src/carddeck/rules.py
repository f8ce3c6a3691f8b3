# src/carddeck/rules.py

from enum import Enum

from .cards import Card, InvalidCardError, Suit, SUITS
from .logging_utils import get_logger

_log = get_logger("rules")


class DuplicateCardError(InvalidCardError):
    """Raised when two identical cards are battled (impossible from one deck)."""
    pass


class Winner(Enum):
    FIRST_WINS = "first"
    SECOND_WINS = "second"


def suit_rank(suit: Suit) -> int:
    # diamonds > hearts > spades > clubs
    return len(SUITS) - SUITS.index(suit)


def battle_cards(card_one: Card, card_two: Card) -> Winner:
    """
    Higher value wins. On a tied value the stronger suit wins,
    with diamonds the strongest followed by hearts, spades and clubs.
    """
    if card_one == card_two:
        _log.warning(f"DuplicateCardError: cannot battle {card_one} against itself")
        raise DuplicateCardError(f"Identical cards: {card_one}")

    if card_one.value != card_two.value:
        return Winner.FIRST_WINS if card_one.value > card_two.value else Winner.SECOND_WINS

    if suit_rank(card_one.suit) > suit_rank(card_two.suit):
        return Winner.FIRST_WINS
    return Winner.SECOND_WINS
