from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, NamedTuple, Optional, Tuple

# (category, tie-break values). Plain tuple comparison orders two ranks.
Rank = Tuple[int, List[int]]


class HandCategory(IntEnum):
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8


class TrialResult(NamedTuple):
    index: int
    rank: Rank


@dataclass
class SimulationConfig:
    hands: List[str] = field(default_factory=list)
    board: List[str] = field(default_factory=list)
    trials: int = 10_000
    seed: Optional[int] = None

    def validate(self) -> None:
        if self.trials <= 0:
            raise ValueError("Trial count must be positive")
