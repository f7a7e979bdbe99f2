"""Playing cards and the standard 52-card deck."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum

__all__ = ["Rank", "Suit", "Card", "shuffled_deck"]


class Rank(IntEnum):
    """Card rank, ordered from two up to ace."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Suit(IntEnum):
    """Card suit."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3


_RANK_CHARS = dict(zip(Rank, "23456789TJQKA"))
_SUIT_SYMBOLS = {
    Suit.CLUBS: "\u2663",
    Suit.DIAMONDS: "\u2666",
    Suit.HEARTS: "\u2665",
    Suit.SPADES: "\u2660",
}


@dataclass(frozen=True, order=True)
class Card:
    """A single playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"[ {_RANK_CHARS[self.rank]}{_SUIT_SYMBOLS[self.suit]} ]"


def shuffled_deck(rng: random.Random | None = None) -> list[Card]:
    """Return all 52 cards in random order."""
    deck = [Card(rank, suit) for suit in Suit for rank in Rank]
    if rng is None:
        random.shuffle(deck)
    else:
        rng.shuffle(deck)
    return deck