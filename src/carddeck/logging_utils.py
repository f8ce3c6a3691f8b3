# src/carddeck/logging_utils.py

import logging
import os
from typing import Any, Optional

# Environment switches:
#   LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
#   LOG_HEX=1 to include hexdumps of deck files in logs
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_HEX = os.getenv("LOG_HEX", "0") == "1"
HEXDUMP_MAX = 64  # bytes shown per dump


def setup_logging(level: Optional[str] = None) -> None:
    """Call once at program start (carddeck/main.py). level defaults to LOG_LEVEL."""
    level = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"carddeck.{name}")


def hexdump(data: bytes, max_len: int = HEXDUMP_MAX) -> str:
    """Space separated hex of the first max_len bytes, e.g. 'ca 4d de cc ... (+9 bytes)'."""
    out = data[:max_len].hex(" ")
    hidden = len(data) - max_len
    if hidden > 0:
        out += f" ... (+{hidden} bytes)"
    return out


def log_io(
    logger: logging.Logger,
    op: str,                      # "SAVE" / "LOAD"
    filename: str,
    raw: Optional[bytes] = None,
    parsed: Optional[Any] = None,
    note: str = "",
    level: int = logging.DEBUG,
) -> None:
    """
    Unified deck file log line.
    raw: the bytes written or read, None if the file was never touched.
    parsed: any summary object (dataclass or dict) to print.
    """
    size = f"len={len(raw)}" if raw is not None else "len=-"
    base = f"[{op}] {filename} {size}"
    if note:
        base += f" | {note}"

    if parsed is not None:
        base += f" | parsed={parsed}"

    if LOG_HEX and raw is not None:
        base += f" | hex={hexdump(raw)}"

    logger.log(level, base)
