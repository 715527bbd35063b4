from __future__ import annotations

import logging
import random
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from .cards import Card, Deck, FlatDeck, Hand, cards_to_labels
from .evaluator import evaluate_best
from .models import Rank, TrialResult

# MonteCarloGame finishes the board at random for a fixed set of hole cards.
# Tallying results over many trials is left to the caller.

LOGGER = logging.getLogger("holdem.monte_carlo")

HOLE_CARDS = 2
BOARD_SIZE = 5

Evaluator = Callable[[Sequence[Card]], Rank]


class MonteCarloError(ValueError):
    code = "MONTE_CARLO_ERROR"

    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg


class InvalidHandSize(MonteCarloError):
    code = "INVALID_HAND_SIZE"


class BoardTooLarge(MonteCarloError):
    code = "BOARD_TOO_LARGE"


class DuplicateCard(MonteCarloError):
    code = "DUPLICATE_CARD"

    def __init__(self, card: Card) -> None:
        super().__init__(f"Card {card.label} was already removed from the deck.")
        self.card = card


class NotEnoughCards(MonteCarloError):
    code = "NOT_ENOUGH_CARDS"


class NoHands(MonteCarloError):
    code = "NO_HANDS"


class RankingUnavailable(MonteCarloError):
    code = "RANKING_UNAVAILABLE"


class MonteCarloGame:
    """Repeatedly deals out the rest of a hold'em board and reports the winner.

    Build one with :meth:`new_with_hands` or :meth:`new_with_board`, then
    alternate :meth:`simulate` and :meth:`reset`. Cards assigned to hands or
    the board are removed from the pool for the life of the game; the rest
    are dealt from a shuffled pool, reshuffled once fewer than five undealt
    cards remain.
    """

    def __init__(
        self,
        pool: FlatDeck,
        hands: List[Hand],
        board: List[Card],
        rng: Optional[random.Random] = None,
        evaluator: Evaluator = evaluate_best,
    ) -> None:
        self._pool = pool
        self._hands = hands
        self._board = board
        self._rng = rng if rng is not None else random.Random()
        self._evaluate = evaluator
        self._cursor = 0
        # Nothing has been shuffled yet, so the first trial must shuffle.
        self._needs_shuffle = True

    # Construction ----------------------------------------------------

    @classmethod
    def new_with_hands(
        cls,
        hands: Iterable[Iterable[Card]],
        *,
        rng: Optional[random.Random] = None,
        evaluator: Evaluator = evaluate_best,
    ) -> "MonteCarloGame":
        return cls.new_with_board(hands, [], rng=rng, evaluator=evaluator)

    @classmethod
    def new_with_board(
        cls,
        hands: Iterable[Iterable[Card]],
        board: Iterable[Card],
        *,
        rng: Optional[random.Random] = None,
        evaluator: Evaluator = evaluate_best,
    ) -> "MonteCarloGame":
        owned_hands = [Hand(hand) for hand in hands]
        owned_board = list(board)
        if len(owned_board) > BOARD_SIZE:
            raise BoardTooLarge(f"Board passed in has more than {BOARD_SIZE} cards")

        deck = Deck()
        for hand in owned_hands:
            if len(hand) != HOLE_CARDS:
                raise InvalidHandSize(f"Hand passed in doesn't have {HOLE_CARDS} cards.")
            for card in hand:
                if not deck.remove(card):
                    raise DuplicateCard(card)
        for card in owned_board:
            if not deck.remove(card):
                raise DuplicateCard(card)

        pool = deck.flatten()
        needed = BOARD_SIZE - len(owned_board)
        if len(pool) < needed:
            raise NotEnoughCards(
                f"Only {len(pool)} cards left to deal but {needed} are needed to finish the board."
            )

        LOGGER.debug(
            "Created game with %d hands, board %s, pool of %d cards",
            len(owned_hands),
            "".join(cards_to_labels(owned_board)) or "-",
            len(pool),
        )
        return cls(pool, owned_hands, owned_board, rng=rng, evaluator=evaluator)

    # Read-only views -------------------------------------------------

    @property
    def hands(self) -> Tuple[Hand, ...]:
        return tuple(self._hands)

    @property
    def board(self) -> Tuple[Card, ...]:
        return tuple(self._board)

    @property
    def pool(self) -> FlatDeck:
        return self._pool

    @property
    def cursor(self) -> int:
        return self._cursor

    # Trial cycle -----------------------------------------------------

    def simulate(self) -> TrialResult:
        """Finish the board, evaluate every hand and return (index, rank) of the winner.

        When several hands tie for the best rank the one with the highest
        index wins.
        """
        if not self._hands:
            raise NoHands("There are no hands.")

        for hand in self._hands:
            hand.extend(self._board)

        needed = BOARD_SIZE - len(self._board)
        self._shuffle_if_needed()
        dealt = self._pool[self._cursor : self._cursor + needed]
        for hand in self._hands:
            hand.extend(dealt)
        self._cursor += needed

        result = self._select_winner([self._evaluate(hand.cards) for hand in self._hands])
        if LOGGER.isEnabledFor(logging.DEBUG):
            LOGGER.debug(
                "Dealt %s; hand %d wins with %s",
                "".join(cards_to_labels(dealt)) or "-",
                result.index,
                result.rank,
            )
        return result

    def reset(self) -> None:
        """Drop board and dealt cards, leaving every hand with its hole cards."""
        for hand in self._hands:
            hand.truncate(HOLE_CARDS)

    def _shuffle_if_needed(self) -> None:
        # Always reserve a full board so reshuffles happen at the same point
        # no matter how many board cards were given up front.
        if self._needs_shuffle or self._cursor + BOARD_SIZE > len(self._pool):
            self._pool.shuffle(self._rng)
            self._cursor = 0
            self._needs_shuffle = False
            LOGGER.debug("Reshuffled pool of %d cards", len(self._pool))

    @staticmethod
    def _select_winner(ranks: Sequence[Rank]) -> TrialResult:
        best: Optional[TrialResult] = None
        for idx, rank in enumerate(ranks):
            # >= so that the last of several tied hands wins.
            if best is None or rank >= best.rank:
                best = TrialResult(idx, rank)
        if best is None:
            raise RankingUnavailable("Unable to determine best rank.")
        return best
