"""
Dealer participant.

Wraps the dealer's hand and its fixed drawing policy.
"""

import logging

from ..deck import Deck
from ..hand import Hand, HandStatus, DEFAULT_VALUE_LIMIT

logger = logging.getLogger(__name__)

DEFAULT_DEALER_STOP_VALUE = 17


class Dealer:
    """
    The house hand and its hit/stick policy.

    The dealer draws while below ``value_stop`` and keeps drawing on a soft
    ``value_stop`` (reached only by counting an ace high).

    Attributes:
        hand: the dealer's current hand, always staked at zero
        value_limit: bust threshold for the dealer's hands
        value_stop: value at which the dealer sticks on a hard hand
    """

    def __init__(self, deck: Deck, value_limit: int = DEFAULT_VALUE_LIMIT,
                 value_stop: int = DEFAULT_DEALER_STOP_VALUE) -> None:
        """
        Initialise the dealer and deal its first hand.

        Args:
            deck: deck to deal the opening hand from
            value_limit: the value above which the dealer busts
            value_stop: the value the dealer sticks on unless it is soft
        """
        if value_stop > value_limit:
            raise ValueError(f"value_stop ({value_stop}) cannot exceed value_limit ({value_limit})")
        self.value_limit = value_limit
        self.value_stop = value_stop
        self.hand = Hand(deck, value_limit)
        self.hand.place_bet(0)

    def reset_hand(self, deck: Deck) -> Hand:
        """
        Deal the dealer a fresh hand, already in play.

        Args:
            deck: deck to draw the new hand from

        Returns:
            Hand: the new hand
        """
        self.hand = Hand(deck, self.value_limit)
        self.hand.place_bet(0)
        return self.hand

    def resolve_hand(self, deck: Deck) -> None:
        """
        Play out the dealer's hand once the player has finished.

        Args:
            deck: deck the dealer draws from
        """
        while self.hand.status is HandStatus.IN_PLAY:
            best_value = self.hand.get_best_hand_value()
            if best_value < self.value_stop:
                self.hand.hit(deck)
            elif best_value == self.value_stop and self.hand.get_hand_min_value() < self.value_stop:
                self.hand.hit(deck)
            else:
                self.hand.stick()
        logger.debug("Dealer resolved: %s", self.hand)

    @property
    def has_blackjack(self) -> bool:
        """Whether the dealer's hand is a natural blackjack."""
        return self.hand.status is HandStatus.BLACKJACK

    def __repr__(self) -> str:
        return f"Dealer(hand={self.hand}, value_stop={self.value_stop})"
