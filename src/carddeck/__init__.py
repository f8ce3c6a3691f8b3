# src/carddeck/__init__.py

from .cards import (
    Card,
    InvalidCardError,
    Suit,
    contains,
    create_and_deal,
    create_deck,
    deal,
    shuffle,
)
from .codec import DeckFormatError, decode_deck, encode_deck
from .rules import DuplicateCardError, Winner, battle_cards
from .storage import DeckIOError, DeckStorageError, Err, IOErrorKind, Ok, load, save

__all__ = [
    "Card",
    "InvalidCardError",
    "Suit",
    "contains",
    "create_and_deal",
    "create_deck",
    "deal",
    "shuffle",
    "DeckFormatError",
    "decode_deck",
    "encode_deck",
    "DuplicateCardError",
    "Winner",
    "battle_cards",
    "DeckIOError",
    "DeckStorageError",
    "Err",
    "IOErrorKind",
    "Ok",
    "load",
    "save",
]
