"""Monte Carlo trial engine for Texas hold'em equity estimates."""

from .cards import Card, Deck, FlatDeck, Hand, RANKS, SUITS, full_deck, parse_cards, parse_label
from .evaluator import describe_rank, evaluate_best
from .models import HandCategory, Rank, SimulationConfig, TrialResult
from .monte_carlo import (
    BoardTooLarge,
    DuplicateCard,
    InvalidHandSize,
    MonteCarloError,
    MonteCarloGame,
    NoHands,
    NotEnoughCards,
    RankingUnavailable,
)

__all__ = [
    "Card",
    "Deck",
    "FlatDeck",
    "Hand",
    "RANKS",
    "SUITS",
    "full_deck",
    "parse_cards",
    "parse_label",
    "describe_rank",
    "evaluate_best",
    "HandCategory",
    "Rank",
    "SimulationConfig",
    "TrialResult",
    "BoardTooLarge",
    "DuplicateCard",
    "InvalidHandSize",
    "MonteCarloError",
    "MonteCarloGame",
    "NoHands",
    "NotEnoughCards",
    "RankingUnavailable",
]
