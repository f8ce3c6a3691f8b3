# src/carddeck/storage.py

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence, Union

from .cards import Card
from .codec import DeckFormatError, decode_deck, encode_deck
from .logging_utils import get_logger, log_io

log = get_logger("storage")


class IOErrorKind(Enum):
    NOT_FOUND = "not_found"
    UNREADABLE = "unreadable"
    UNWRITABLE = "unwritable"
    CORRUPT = "corrupt"


@dataclass(frozen=True)
class DeckIOError:
    kind: IOErrorKind
    filename: str
    message: str


class DeckStorageError(Exception):
    """Raised by Err.unwrap(); carries the DeckIOError."""

    def __init__(self, error: DeckIOError) -> None:
        super().__init__(f"{error.kind.value}: {error.filename}: {error.message}")
        self.error = error


@dataclass(frozen=True)
class Ok:
    value: Any

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Err:
    error: DeckIOError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise DeckStorageError(self.error)


Result = Union[Ok, Err]


def _fail(kind: IOErrorKind, filename: str, exc: Exception, op: str, raw: Optional[bytes] = None) -> Err:
    err = DeckIOError(kind=kind, filename=filename, message=str(exc))
    log_io(log, op, filename, raw, note=f"{kind.value}: {exc}", level=logging.WARNING)
    return Err(err)


def save(deck: Sequence[Card], filename: str) -> Result:
    """
    Encode `deck` and write it to `filename`, creating or overwriting it.
    Returns Ok(filename) or Err(DeckIOError) with kind UNWRITABLE.
    """
    try:
        raw = encode_deck(deck)
    except DeckFormatError as e:
        return _fail(IOErrorKind.UNWRITABLE, filename, e, "SAVE")

    try:
        with open(filename, "wb") as f:
            f.write(raw)
    except OSError as e:
        return _fail(IOErrorKind.UNWRITABLE, filename, e, "SAVE", raw)

    log_io(log, "SAVE", filename, raw, parsed={"cards": len(deck)}, note="deck saved")
    return Ok(filename)


def load(filename: str) -> Result:
    """
    Read and decode the deck stored at `filename`.
    Returns Ok(deck) or Err(DeckIOError) with kind NOT_FOUND, UNREADABLE or CORRUPT.
    """
    try:
        with open(filename, "rb") as f:
            raw = f.read()
    except FileNotFoundError as e:
        return _fail(IOErrorKind.NOT_FOUND, filename, e, "LOAD")
    except OSError as e:
        return _fail(IOErrorKind.UNREADABLE, filename, e, "LOAD")

    try:
        deck = decode_deck(raw)
    except DeckFormatError as e:
        return _fail(IOErrorKind.CORRUPT, filename, e, "LOAD", raw)

    log_io(log, "LOAD", filename, raw, parsed={"cards": len(deck)}, note="deck loaded")
    return Ok(deck)
