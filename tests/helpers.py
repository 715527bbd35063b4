from __future__ import annotations

import random
from typing import List, Optional, Sequence

from holdem.cards import Card, Hand, parse_cards
from holdem.monte_carlo import MonteCarloGame


class SpyRandom(random.Random):
    """Seeded Random that counts shuffles."""

    def __init__(self, seed: int = 0) -> None:
        super().__init__(seed)
        self.shuffles = 0

    def shuffle(self, x) -> None:  # type: ignore[override]
        self.shuffles += 1
        super().shuffle(x)


def make_hands(*texts: str) -> List[Hand]:
    return [Hand.from_str(text) for text in texts]


def create_game(
    *hands: str,
    board: Sequence[str] = (),
    seed: int = 42,
    rng: Optional[random.Random] = None,
) -> MonteCarloGame:
    """Build a game from hole-card strings and an optional board."""
    return MonteCarloGame.new_with_board(
        make_hands(*hands),
        parse_cards(list(board)),
        rng=rng if rng is not None else random.Random(seed),
    )


def dealt_cards(game: MonteCarloGame) -> List[Card]:
    """Cards added to the first hand by the last simulate() beyond hole and board."""
    return list(game.hands[0].cards[2 + len(game.board) :])
