# src/carddeck/main.py

import random
from typing import Any, Dict

from .cards import RngLike, as_rng, create_deck, deal, shuffle
from .logging_utils import setup_logging, get_logger
from .rules import Winner, battle_cards

log = get_logger("main")


def battle_two_cards(rng: random.Random) -> Dict[str, Any]:
    deck = shuffle(create_deck(), rng)
    [card_one], deck = deal(deck)
    [card_two], deck = deal(deck)
    winner = battle_cards(card_one, card_two)
    log.info(f"Battle: {card_one} vs {card_two} -> {winner.name}")
    return {"card_one": card_one, "card_two": card_two, "winner": winner, "rest": deck}


def deal_holdem_hands(rng: random.Random) -> Dict[str, Any]:
    deck = shuffle(create_deck(), rng)
    hand_one, deck = deal(deck, 2)
    hand_two, deck = deal(deck, 2)
    log.info(f"Hold'em hands dealt, {len(deck)} cards left")
    return {"hand_one": hand_one, "hand_two": hand_two, "rest": deck}


def run_demo(rng: RngLike = None) -> Dict[str, Any]:
    """
    Battle two cards, then deal two hold'em hands from a fresh deck.
    Pass a random.Random or an int seed for a reproducible run.
    """
    rng = as_rng(rng)
    return {"battle": battle_two_cards(rng), "holdem": deal_holdem_hands(rng)}


def _fmt(hand) -> str:
    return ", ".join(str(c) for c in hand)


def main() -> None:
    setup_logging()

    results = run_demo()
    battle = results["battle"]
    holdem = results["holdem"]

    print("Battle two cards:")
    print(f"  card one: {battle['card_one']}")
    print(f"  card two: {battle['card_two']}")
    winner = "card one" if battle["winner"] is Winner.FIRST_WINS else "card two"
    print(f"  winner:   {winner}")

    print("Deal two hold'em hands:")
    print(f"  hand one: {_fmt(holdem['hand_one'])}")
    print(f"  hand two: {_fmt(holdem['hand_two'])}")


if __name__ == "__main__":
    main()
