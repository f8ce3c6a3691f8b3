# src/carddeck/codec.py

import struct
from typing import List, Sequence

from .cards import Card, Suit
from .constants import (
    MAGIC_COOKIE, FORMAT_VERSION,
    HEADER_LEN, CARD_LEN, MAX_CARDS,
    MIN_VALUE, MAX_VALUE,
)
from .logging_utils import get_logger

_log = get_logger("codec")

# Suit encoding follows deck order: diamonds, hearts, spades, clubs -> 0..3
SUIT_TO_CODE = {suit: code for code, suit in enumerate(Suit)}
CODE_TO_SUIT = {v: k for k, v in SUIT_TO_CODE.items()}

# -------------------------
# Errors
# -------------------------
class DeckFormatError(ValueError):
    """Raised when encoded deck bytes are malformed or invalid."""
    pass


def _require(condition: bool, msg: str) -> None:
    if not condition:
        _log.warning(f"DeckFormatError: {msg}")
        raise DeckFormatError(msg)


# -------------------------
# CARD: suit(1) value(1) = 2 bytes
# suit: 0..3 (diamonds, hearts, spades, clubs), value: 1..13
# -------------------------
def encode_card(card: Card) -> bytes:
    return struct.pack("!B B", SUIT_TO_CODE[card.suit], card.value)


def decode_card(data: bytes) -> Card:
    _require(len(data) == CARD_LEN, f"Invalid card length: expected {CARD_LEN}, got {len(data)}")
    suit_code, value = struct.unpack("!B B", data)
    _require(suit_code in CODE_TO_SUIT, f"Invalid suit code: {suit_code}")
    _require(MIN_VALUE <= value <= MAX_VALUE, f"Invalid card value: {value}")
    return Card(CODE_TO_SUIT[suit_code], value)


# -------------------------
# DECK: cookie(4) version(1) count(2) then count * CARD
# -------------------------
def encode_deck(deck: Sequence[Card]) -> bytes:
    _require(len(deck) <= MAX_CARDS, f"Too many cards to encode: {len(deck)}")
    header = struct.pack("!I B H", MAGIC_COOKIE, FORMAT_VERSION, len(deck))
    return header + b"".join(encode_card(c) for c in deck)


def decode_deck(data: bytes) -> List[Card]:
    _require(len(data) >= HEADER_LEN, f"Truncated header: expected at least {HEADER_LEN} bytes, got {len(data)}")
    cookie, version, count = struct.unpack("!I B H", data[:HEADER_LEN])
    _require(cookie == MAGIC_COOKIE, "Bad magic cookie")
    _require(version == FORMAT_VERSION, f"Unsupported format version: expected {FORMAT_VERSION}, got {version}")

    expected = HEADER_LEN + count * CARD_LEN
    _require(len(data) == expected, f"Invalid deck length: expected {expected}, got {len(data)}")

    body = data[HEADER_LEN:]
    return [decode_card(body[i:i + CARD_LEN]) for i in range(0, len(body), CARD_LEN)]
