import argparse
import logging
import random
from typing import List, Optional, Sequence

from .cards import Hand, parse_cards, split_labels
from .models import SimulationConfig
from .monte_carlo import MonteCarloGame

logging.basicConfig(level=logging.INFO)

LOGGER = logging.getLogger("holdem")


def tally_wins(game: MonteCarloGame, trials: int) -> List[int]:
    """Run simulate/reset `trials` times and count wins per hand."""
    wins = [0] * len(game.hands)
    for _ in range(trials):
        index, _rank = game.simulate()
        wins[index] += 1
        game.reset()
    return wins


def build_game(config: SimulationConfig) -> MonteCarloGame:
    config.validate()
    hands = [Hand.from_str(text) for text in config.hands]
    board = parse_cards(config.board)
    return MonteCarloGame.new_with_board(hands, board, rng=random.Random(config.seed))


def parse_args(argv: Optional[Sequence[str]] = None) -> SimulationConfig:
    parser = argparse.ArgumentParser(description="Estimate hold'em win rates by Monte Carlo trials")
    parser.add_argument(
        "--hand",
        dest="hands",
        action="append",
        required=True,
        help="Two hole cards, e.g. AdAh (repeat once per player)",
    )
    parser.add_argument("--board", default="", help="Known community cards, e.g. 6sKdQh")
    parser.add_argument("--trials", type=int, default=10_000)
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible run")
    args = parser.parse_args(argv)
    return SimulationConfig(
        hands=list(args.hands),
        board=split_labels(args.board),
        trials=args.trials,
        seed=args.seed,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        config = parse_args(argv)
        game = build_game(config)
    except ValueError as exc:
        LOGGER.error("%s", exc)
        return 2

    wins = tally_wins(game, config.trials)
    for label, count in zip(config.hands, wins):
        LOGGER.info("%s  wins %d/%d (%.2f%%)", label, count, config.trials, 100.0 * count / config.trials)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
