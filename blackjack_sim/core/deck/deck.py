"""
Multi-pack card shoe.

Defines the Deck class. The deck never materialises individual cards: it
keeps a two-level count table (denomination -> suit) and samples from it, so
a ten-pack shoe costs the same as a single pack.
"""

import logging
import random
from dataclasses import dataclass
from typing import Callable, List, Mapping, Optional, Sequence

from ..exceptions import (
    CardExhaustedError,
    DenominationNotFoundError,
    InternalInconsistencyError,
    SuitNotFoundError,
)
from .card import Card
from .types import (
    OPTIONAL_TEN_BONUS,
    Suit,
    denomination_has_optional_ten,
    denomination_value,
    get_all_denominations,
    get_all_suits,
)

logger = logging.getLogger(__name__)


@dataclass
class DenominationCount:
    """
    Inventory record for one denomination.

    Attributes:
        denomination: denomination id
        remaining_count: cards of this denomination left, over all suits
        suit_counts: remaining cards per suit, indexed like the deck's suits
        value: base blackjack value of the denomination
        optional_ten: whether the denomination may count 10 higher
    """

    denomination: int
    remaining_count: int
    suit_counts: List[int]
    value: int
    optional_ten: bool


class Deck:
    """
    A shoe of one or more packs merged together.

    Every remaining physical card is equally likely on a random draw. When
    the remaining count drops to ``reset_when_remaining`` the next random
    draw reshuffles the full composition back in first.

    Attributes:
        suits: configured suits, in sampling order
        denominations: configured denomination ids, in sampling order
        number_of_packs: how many packs are merged
        reset_when_remaining: reshuffle threshold for random draws

    Examples:
        >>> deck = Deck()
        >>> deck.get_cards_remaining()
        52
        >>> card = deck.draw_card()
        >>> len(deck)
        51
    """

    def __init__(self,
                 suits: Optional[Sequence[Suit]] = None,
                 denominations: Optional[Sequence[int]] = None,
                 number_of_packs: int = 1,
                 reset_when_remaining: int = 0,
                 rng: Optional[random.Random] = None) -> None:
        """
        Initialise the deck.

        Args:
            suits: suits in the deck, defaults to the four standard suits
            denominations: denomination ids in the deck, defaults to 1-13
            number_of_packs: number of packs shuffled together
            reset_when_remaining: when this many cards (or fewer) remain the
                next random draw resets the deck
            rng: random number generator, for deterministic sampling

        Raises:
            ValueError: when the configuration is empty or inconsistent
        """
        if reset_when_remaining < 0:
            raise ValueError(f"reset_when_remaining cannot be negative: {reset_when_remaining}")

        self._rng = rng or random.Random()
        self.reset_when_remaining = reset_when_remaining
        self.suits: List[Suit] = []
        self.denominations: List[int] = []
        self.number_of_packs = 0
        self._inventory: List[DenominationCount] = []
        self._cards_remaining = 0
        self.reset_deck(
            suits if suits is not None else get_all_suits(),
            denominations if denominations is not None else get_all_denominations(),
            number_of_packs,
        )

    @staticmethod
    def _validate_configuration(suits: Sequence[Suit],
                                denominations: Sequence[int],
                                number_of_packs: int) -> None:
        if not suits:
            raise ValueError("Deck needs at least one suit")
        if not denominations:
            raise ValueError("Deck needs at least one denomination")
        if len(set(suits)) != len(suits):
            raise ValueError(f"Duplicate suits: {list(suits)}")
        if len(set(denominations)) != len(denominations):
            raise ValueError(f"Duplicate denominations: {list(denominations)}")
        for suit in suits:
            if not isinstance(suit, Suit):
                raise ValueError(f"Invalid suit: {suit!r}")
        for denomination in denominations:
            if not 1 <= int(denomination) <= 13:
                raise ValueError(f"Invalid denomination: {denomination!r}")
        if number_of_packs < 1:
            raise ValueError(f"number_of_packs must be at least 1: {number_of_packs}")

    def _build_inventory(self) -> List[DenominationCount]:
        return [
            DenominationCount(
                denomination=denomination,
                remaining_count=len(self.suits) * self.number_of_packs,
                suit_counts=[self.number_of_packs] * len(self.suits),
                value=denomination_value(denomination),
                optional_ten=denomination_has_optional_ten(denomination),
            )
            for denomination in self.denominations
        ]

    def reset_deck(self,
                   suits: Optional[Sequence[Suit]] = None,
                   denominations: Optional[Sequence[int]] = None,
                   number_of_packs: Optional[int] = None) -> None:
        """
        Rebuild the full inventory, optionally with a new composition.

        Args:
            suits: new suits, defaults to the current suits
            denominations: new denominations, defaults to the current ones
            number_of_packs: new pack count, defaults to the current count
        """
        suits = list(suits) if suits is not None else self.suits
        denominations = [int(d) for d in denominations] if denominations is not None else self.denominations
        number_of_packs = number_of_packs if number_of_packs is not None else self.number_of_packs
        self._validate_configuration(suits, denominations, number_of_packs)

        self.suits = suits
        self.denominations = denominations
        self.number_of_packs = number_of_packs
        self._inventory = self._build_inventory()
        self._cards_remaining = len(self.suits) * len(self.denominations) * self.number_of_packs
        logger.debug("Deck reset: %d packs, %d cards", self.number_of_packs, self._cards_remaining)

    def get_cards_remaining(self) -> int:
        """
        Get the number of cards left in the deck.

        Returns:
            int: cards remaining
        """
        return self._cards_remaining

    @property
    def cards_remaining(self) -> int:
        """Number of cards left in the deck."""
        return self._cards_remaining

    @property
    def is_empty(self) -> bool:
        """True when no cards remain."""
        return self._cards_remaining == 0

    def _take(self, record: DenominationCount, suit_index: int) -> Card:
        record.suit_counts[suit_index] -= 1
        record.remaining_count -= 1
        self._cards_remaining -= 1
        return Card(self.suits[suit_index], record.denomination)

    def draw_card(self) -> Card:
        """
        Draw a uniformly random card and remove it from the deck.

        Returns:
            Card: the drawn card

        Raises:
            InternalInconsistencyError: when the count table cannot resolve
                the sampled position
        """
        if self._cards_remaining <= self.reset_when_remaining:
            logger.debug("Reshuffling at %d cards remaining", self._cards_remaining)
            self.reset_deck()

        window = self._rng.randrange(self._cards_remaining)
        for record in self._inventory:
            if window >= record.remaining_count:
                window -= record.remaining_count
                continue
            for suit_index, suit_count in enumerate(record.suit_counts):
                if window < suit_count:
                    return self._take(record, suit_index)
                window -= suit_count
            raise InternalInconsistencyError(
                f"Empty section in denomination {record.denomination}: position left {window}"
            )
        raise InternalInconsistencyError(f"Empty deck: position left {window}")

    def _find_record(self, denomination: int) -> DenominationCount:
        for record in self._inventory:
            if record.denomination == denomination:
                return record
        raise DenominationNotFoundError(denomination)

    def draw_specific_card(self, suit: Suit, denomination: int) -> Card:
        """
        Remove one specific card from the deck.

        Targeted draws never trigger the automatic reshuffle.

        Args:
            suit: suit of the wanted card
            denomination: denomination of the wanted card

        Returns:
            Card: the drawn card

        Raises:
            DenominationNotFoundError: denomination not configured
            SuitNotFoundError: suit not configured
            CardExhaustedError: no copy of that card remains
        """
        record = self._find_record(denomination)
        if suit not in self.suits:
            raise SuitNotFoundError(suit)
        suit_index = self.suits.index(suit)
        if record.suit_counts[suit_index] == 0:
            raise CardExhaustedError(suit, denomination)
        return self._take(record, suit_index)

    def count_of(self, denomination: int, suit: Optional[Suit] = None) -> int:
        """
        Remaining copies of a denomination, optionally of a single suit.

        Raises:
            DenominationNotFoundError: denomination not configured
            SuitNotFoundError: suit not configured
        """
        record = self._find_record(denomination)
        if suit is None:
            return record.remaining_count
        if suit not in self.suits:
            raise SuitNotFoundError(suit)
        return record.suit_counts[self.suits.index(suit)]

    def get_weighted_sum(self,
                         weight_by_value: Optional[Mapping[int, float]] = None,
                         use_high_ace_weight: bool = False) -> float:
        """
        Weighted sum of the remaining cards.

        Args:
            weight_by_value: weight for each card value; when omitted the
                value itself is the weight, values missing from a given map
                weigh 0
            use_high_ace_weight: with a map, weigh optional-ten cards by
                their high value (value + 10) instead

        Returns:
            float: sum of weight(value) * remaining count over denominations
        """
        weighted_sum = 0
        for record in self._inventory:
            if weight_by_value is None:
                weight = record.value
            elif use_high_ace_weight and record.optional_ten:
                weight = weight_by_value.get(record.value + OPTIONAL_TEN_BONUS, 0)
            else:
                weight = weight_by_value.get(record.value, 0)
            weighted_sum += weight * record.remaining_count
        return weighted_sum

    def _values_present(self) -> List[int]:
        return sorted({record.value for record in self._inventory})

    def _weight_map(self, weight: Callable[[int], float]) -> Mapping[int, float]:
        return {value: weight(value) for value in self._values_present()}

    def _fraction_of_remaining(self, weighted_sum: float) -> float:
        # analytics on a fully drawn deck are defined as 0
        if self._cards_remaining == 0:
            return 0.0
        return weighted_sum / self._cards_remaining

    def get_expectation(self) -> float:
        """
        Expected value of the next card, aces counted low.

        Returns:
            float: mean value of the remaining cards
        """
        return self._fraction_of_remaining(self.get_weighted_sum())

    def get_hi_low_count(self) -> float:
        """
        Hi-Lo count of the remaining composition.

        Cards still in the deck score the mirror image of cards seen, so a
        fresh deck counts 0, removing a low card raises the count and
        removing a high card or an ace lowers it.

        Returns:
            float: the count
        """
        return self.get_weighted_sum(self._weight_map(_hi_low_weight))

    def get_probability_of_getting_less_than_or_equal_to(self, value: int) -> float:
        """
        Probability that the next card's base value is at most ``value``.

        Args:
            value: inclusive upper bound on the card value

        Returns:
            float: probability in [0, 1]
        """
        weights = self._weight_map(lambda card_value: 1 if card_value <= value else 0)
        return self._fraction_of_remaining(self.get_weighted_sum(weights))

    def __len__(self) -> int:
        return self._cards_remaining

    def __str__(self) -> str:
        return f"Deck({self._cards_remaining} cards remaining)"

    def __repr__(self) -> str:
        return (f"Deck(packs={self.number_of_packs}, cards_remaining={self._cards_remaining}, "
                f"reset_when_remaining={self.reset_when_remaining})")


def _hi_low_weight(value: int) -> int:
    if value <= 1:
        return 1
    if value <= 6:
        return -1
    if value <= 9:
        return 0
    return 1
