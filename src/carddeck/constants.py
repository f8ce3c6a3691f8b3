# src/carddeck/constants.py

MIN_VALUE = 1
MAX_VALUE = 13
VALUES = list(range(MIN_VALUE, MAX_VALUE + 1))  # 1..13

SUIT_COUNT = 4
DECK_SIZE = SUIT_COUNT * len(VALUES)  # 52

# Deck file format
MAGIC_COOKIE = 0xCA4DDECC
FORMAT_VERSION = 0x1

# Fixed sizes (bytes)
HEADER_LEN = 4 + 1 + 2   # cookie(4) version(1) count(2) = 7
CARD_LEN = 1 + 1         # suit(1) value(1) = 2
MAX_CARDS = 0xFFFF       # count is uint16

