from __future__ import annotations

from collections import Counter
from enum import IntEnum
from typing import Sequence, Tuple

from .cards import RANKS, Card

# Category-only evaluation: no kickers, lower code is the stronger hand.


class HandCategory(IntEnum):
    STRAIGHT_FLUSH = 1
    FOUR_OF_A_KIND = 2
    FULL_HOUSE = 3
    FLUSH = 4
    STRAIGHT = 5
    THREE_OF_A_KIND = 6
    TWO_PAIR = 7
    PAIR = 8
    HIGH_CARD = 9


def evaluate(hole: Sequence[Card], community: Sequence[Card]) -> HandCategory:
    """Return the best category for hole + community cards (2 to 7 cards)."""
    rank_counts, suit_counts = frequencies(list(hole) + list(community))

    if has_straight_flush(rank_counts, suit_counts):
        return HandCategory.STRAIGHT_FLUSH
    if has_four_of_a_kind(rank_counts):
        return HandCategory.FOUR_OF_A_KIND
    if has_full_house(rank_counts):
        return HandCategory.FULL_HOUSE
    if has_flush(suit_counts):
        return HandCategory.FLUSH
    if has_straight(rank_counts):
        return HandCategory.STRAIGHT
    if has_three_of_a_kind(rank_counts):
        return HandCategory.THREE_OF_A_KIND
    if has_two_pair(rank_counts):
        return HandCategory.TWO_PAIR
    if has_pair(rank_counts):
        return HandCategory.PAIR
    return HandCategory.HIGH_CARD


def frequencies(cards: Sequence[Card]) -> Tuple[Counter, Counter]:
    rank_counts: Counter = Counter(card.rank for card in cards)
    suit_counts: Counter = Counter(card.suit for card in cards)
    return rank_counts, suit_counts


def has_pair(rank_counts: Counter) -> bool:
    return any(count == 2 for count in rank_counts.values())


def has_two_pair(rank_counts: Counter) -> bool:
    return sum(1 for count in rank_counts.values() if count == 2) >= 2


def has_three_of_a_kind(rank_counts: Counter) -> bool:
    return any(count == 3 for count in rank_counts.values())


def has_four_of_a_kind(rank_counts: Counter) -> bool:
    return any(count == 4 for count in rank_counts.values())


def has_full_house(rank_counts: Counter) -> bool:
    return has_three_of_a_kind(rank_counts) and has_pair(rank_counts)


def has_flush(suit_counts: Counter) -> bool:
    return any(count >= 5 for count in suit_counts.values())


def has_straight(rank_counts: Counter) -> bool:
    # Fixed 2..A scan, so the wheel (A-2-3-4-5) is never found.
    run = 0
    for rank in RANKS:
        run = run + 1 if rank_counts[rank] else 0
        if run == 5:
            return True
    return False


def has_straight_flush(rank_counts: Counter, suit_counts: Counter) -> bool:
    """Straight plus a flush suit.

    The per-suit rescan only checks that the suit holds five cards while the
    ranks run; it does not check that the run itself is suited. A straight in
    one suit next to an unrelated flush therefore counts.
    """
    if not (has_straight(rank_counts) and has_flush(suit_counts)):
        return False
    for suit_count in suit_counts.values():
        run = 0
        for rank in RANKS:
            run = run + 1 if rank_counts[rank] and suit_count >= 5 else 0
            if run == 5:
                return True
    return False


def describe_rank(category: HandCategory) -> str:
    return category.name.lower()
