from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Set, Tuple, Union

from .models import Rank

RANKS = "AKQJT98765432"
SUITS = "hdcs"

@dataclass(frozen=True)
class Card:
    rank: str
    suit: str

    def __post_init__(self) -> None:
        if self.rank not in RANKS:
            raise ValueError(f"Invalid rank: {self.rank}")
        if self.suit not in SUITS:
            raise ValueError(f"Invalid suit: {self.suit}")

    @property
    def label(self) -> str:
        return f"{self.rank}{self.suit}"

    def __str__(self) -> str:
        return self.label


def full_deck() -> List[Card]:
    """All 52 cards in a fixed order (deuces first)."""
    return [Card(rank, suit) for rank in RANKS[::-1] for suit in SUITS]


def cards_to_labels(cards: Iterable[Card]) -> List[str]:
    return [card.label for card in cards]


def parse_label(label: str) -> Card:
    if len(label) != 2:
        raise ValueError(f"Invalid card label: {label}")
    return Card(label[0], label[1])


def parse_cards(labels: Sequence[str]) -> List[Card]:
    return [parse_label(label) for label in labels]


def split_labels(text: str) -> List[str]:
    """Split "AdAh" or "Ad Ah" into two-character labels."""
    compact = "".join(text.split())
    if len(compact) % 2 != 0:
        raise ValueError(f"Invalid card label: {text}")
    return [compact[idx : idx + 2] for idx in range(0, len(compact), 2)]


class FlatDeck:
    """Ordered, indexable snapshot of the cards left in a Deck."""

    def __init__(self, cards: Iterable[Card]) -> None:
        self._cards: List[Card] = list(cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __getitem__(self, idx: Union[int, slice]) -> Union[Card, List[Card]]:
        return self._cards[idx]

    def shuffle(self, rng: random.Random) -> None:
        # Membership never changes; only the order does.
        rng.shuffle(self._cards)


class Deck:
    """Tracks which of the 52 cards are still available."""

    def __init__(self) -> None:
        self._order = full_deck()
        self._available: Set[Card] = set(self._order)

    def __len__(self) -> int:
        return len(self._available)

    def __contains__(self, card: object) -> bool:
        return card in self._available

    def remove(self, card: Card) -> bool:
        """Take a card out of the deck. Returns False if it was already gone."""
        if card not in self._available:
            return False
        self._available.remove(card)
        return True

    def flatten(self) -> FlatDeck:
        return FlatDeck(card for card in self._order if card in self._available)


class Hand:
    """A player's cards: two hole cards, plus board/dealt cards mid-trial."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: List[Card] = list(cards)

    @classmethod
    def from_str(cls, text: str) -> "Hand":
        return cls(parse_cards(split_labels(text)))

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __getitem__(self, idx: int) -> Card:
        return self._cards[idx]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Hand):
            return self._cards == other._cards
        return NotImplemented

    def __repr__(self) -> str:
        return f"Hand({''.join(self.labels)!r})"

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    @property
    def labels(self) -> List[str]:
        return cards_to_labels(self._cards)

    def append(self, card: Card) -> None:
        self._cards.append(card)

    def extend(self, cards: Iterable[Card]) -> None:
        self._cards.extend(cards)

    def truncate(self, length: int) -> None:
        del self._cards[length:]

    def rank(self, evaluator: Optional[Callable[[Sequence[Card]], Rank]] = None) -> Rank:
        if evaluator is None:
            from .evaluator import evaluate_best

            evaluator = evaluate_best
        return evaluator(self._cards)
