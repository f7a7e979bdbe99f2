"""Ranking of poker hands made from five to seven cards."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import IntEnum
from itertools import combinations

from poks.cards import Card, Rank

__all__ = ["HandCategory", "HandRank", "evaluate", "winners"]


class HandCategory(IntEnum):
    """Poker hand categories from weakest to strongest."""

    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8


@dataclass(frozen=True, order=True)
class HandRank:
    """Comparable strength of a hand: category first, then tie-breaking ranks."""

    category: HandCategory
    tiebreak: tuple[int, ...]


_WHEEL = [Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.ACE]


def _straight_high(counts: Counter) -> int | None:
    if len(counts) != 5:
        return None
    unique = sorted(counts)
    if unique[-1] - unique[0] == 4:
        return int(unique[-1])
    if unique == _WHEEL:
        return int(Rank.FIVE)
    return None


def _rank_five(cards: Sequence[Card]) -> HandRank:
    counts = Counter(card.rank for card in cards)
    groups = sorted(counts.items(), key=lambda item: (item[1], item[0]), reverse=True)
    tiebreak = tuple(int(rank) for rank, _ in groups)
    flush = len({card.suit for card in cards}) == 1
    straight = _straight_high(counts)
    top, second = groups[0][1], (groups[1][1] if len(groups) > 1 else 0)

    if straight is not None and flush:
        return HandRank(HandCategory.STRAIGHT_FLUSH, (straight,))
    if top == 4:
        return HandRank(HandCategory.FOUR_OF_A_KIND, tiebreak)
    if top == 3 and second == 2:
        return HandRank(HandCategory.FULL_HOUSE, tiebreak)
    if flush:
        return HandRank(HandCategory.FLUSH, tiebreak)
    if straight is not None:
        return HandRank(HandCategory.STRAIGHT, (straight,))
    if top == 3:
        return HandRank(HandCategory.THREE_OF_A_KIND, tiebreak)
    if top == 2 and second == 2:
        return HandRank(HandCategory.TWO_PAIR, tiebreak)
    if top == 2:
        return HandRank(HandCategory.PAIR, tiebreak)
    return HandRank(HandCategory.HIGH_CARD, tiebreak)


def evaluate(cards: Iterable[Card]) -> HandRank:
    """Return the rank of the best five-card hand among five to seven cards."""
    cards = tuple(cards)
    if not 5 <= len(cards) <= 7:
        raise ValueError(f"a hand needs 5 to 7 cards, got {len(cards)}")
    if len(set(cards)) != len(cards):
        raise ValueError("a hand cannot contain the same card twice")
    return max(_rank_five(combo) for combo in combinations(cards, 5))


def winners(hands: Sequence[Iterable[Card]]) -> list[int]:
    """Return the indices of the strongest hands; more than one on a tie."""
    ranks = [evaluate(hand) for hand in hands]
    if not ranks:
        raise ValueError("no hands to compare")
    best = max(ranks)
    return [index for index, rank in enumerate(ranks) if rank == best]