"""
Player participant.
"""

from ..deck import Deck
from ..hand import Hand, DEFAULT_VALUE_LIMIT


class Player:
    """
    Passive holder of a player's balance, default bet and current hand.

    Attributes:
        deck: deck the player's hands are dealt from
        hand: the player's current hand
        balance: money available to the player
        current_bet: stake used whenever the player bets or doubles
        value_limit: bust threshold for the player's hands
    """

    def __init__(self, deck: Deck, starting_balance: float = 1000,
                 value_limit: int = DEFAULT_VALUE_LIMIT, current_bet: float = 5) -> None:
        """
        Initialise the player and deal the first hand.

        Raises:
            ValueError: when the balance or bet is negative
        """
        if starting_balance < 0:
            raise ValueError(f"Starting balance cannot be negative: {starting_balance}")
        if current_bet < 0:
            raise ValueError(f"Current bet cannot be negative: {current_bet}")

        self.deck = deck
        self.hand = Hand(deck, value_limit)
        self.balance = starting_balance
        self.current_bet = current_bet
        self.value_limit = value_limit

    def __repr__(self) -> str:
        return f"Player(balance={self.balance}, current_bet={self.current_bet}, hand={self.hand})"
