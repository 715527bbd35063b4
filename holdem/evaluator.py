from __future__ import annotations

import itertools
from collections import Counter
from typing import Iterable, Optional, Sequence

from .cards import Card
from .models import HandCategory, Rank

RANK_ORDER = "23456789TJQKA"
RANK_VALUE = {rank: idx for idx, rank in enumerate(RANK_ORDER, start=2)}


def evaluate_best(cards: Sequence[Card]) -> Rank:
    """Return the strength of the best five-card hand in 5 to 7 cards. Higher is better."""
    if len(cards) < 5:
        raise ValueError(f"Need at least 5 cards to evaluate, got {len(cards)}")
    best: Optional[Rank] = None
    for combo in itertools.combinations(cards, 5):
        rank = _evaluate_five(combo)
        if best is None or rank > best:
            best = rank
    assert best is not None
    return best


def describe_rank(rank: Rank) -> str:
    return HandCategory(rank[0]).name.lower()


def _evaluate_five(cards: Sequence[Card]) -> Rank:
    ranks = sorted((RANK_VALUE[card.rank] for card in cards), reverse=True)
    is_flush = len({card.suit for card in cards}) == 1
    straight_high = _straight_high(ranks)

    counts = Counter(ranks)
    # Most copies first, then higher rank.
    ordered = sorted(counts.items(), key=lambda item: (item[1], item[0]), reverse=True)
    groups = [value for value, _ in ordered]
    shape = [count for _, count in ordered]

    if straight_high and is_flush:
        return (HandCategory.STRAIGHT_FLUSH, [straight_high])
    if shape[0] == 4:
        return (HandCategory.FOUR_OF_A_KIND, groups)
    if shape[:2] == [3, 2]:
        return (HandCategory.FULL_HOUSE, groups)
    if is_flush:
        return (HandCategory.FLUSH, ranks)
    if straight_high:
        return (HandCategory.STRAIGHT, [straight_high])
    if shape[0] == 3:
        return (HandCategory.THREE_OF_A_KIND, groups)
    if shape[:2] == [2, 2]:
        return (HandCategory.TWO_PAIR, groups)
    if shape[0] == 2:
        return (HandCategory.PAIR, groups)
    return (HandCategory.HIGH_CARD, ranks)


def _straight_high(values: Iterable[int]) -> Optional[int]:
    distinct = set(values)
    if len(distinct) != 5:
        return None
    if max(distinct) - min(distinct) == 4:
        return max(distinct)
    if distinct == {14, 5, 4, 3, 2}:  # wheel
        return 5
    return None
