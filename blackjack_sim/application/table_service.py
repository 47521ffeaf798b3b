"""
Table Service - round orchestration.

Drives one player against the dealer on a shared deck. Every action the
player can take comes from ``Hand.available_states``; executing one applies
the matching balance bookkeeping:

- betting: stake is charged to the balance
- playing: the hand is played, no money moves
- winnings: the dealer plays out, the payout is credited
- finished: player and dealer get new hands
"""

import logging
import random
from typing import List, Optional, Tuple

from pydantic import Field
from pydantic.dataclasses import dataclass as pydantic_dataclass

from ..core.deck import Deck
from ..core.exceptions import BlackjackError
from ..core.hand import (
    AvailableState,
    BettingState,
    FinishedState,
    HandStatus,
    PlayingState,
    WinningsState,
)
from ..core.participants import Dealer, Player
from ..core.rules import ErrorCode, OperationResult
from .config_service import TableRulesConfig


@pydantic_dataclass(frozen=True)
class TableSnapshot:
    """Read-only view of the table.

    Validated on construction so the UI layer can rely on its ranges.
    """
    player_cards: Tuple[str, ...] = Field(..., description="player's cards, in draw order")
    player_best_value: int = Field(..., ge=0, description="player's best hand value")
    player_status: HandStatus = Field(..., description="player's hand status")
    player_bet: float = Field(..., ge=0, description="amount staked on the player's hand")
    dealer_cards: Tuple[str, ...] = Field(..., description="dealer's cards, in draw order")
    dealer_best_value: int = Field(..., ge=0, description="dealer's best hand value")
    dealer_status: HandStatus = Field(..., description="dealer's hand status")
    balance: float = Field(..., description="player's balance")
    current_bet: float = Field(..., ge=0, description="player's default stake")
    last_winnings: float = Field(..., description="balance change of the last action")
    cards_remaining: int = Field(..., ge=0, description="cards left in the deck")
    hi_low_count: float = Field(..., description="Hi-Lo count of the remaining cards")
    expectation: float = Field(..., ge=0, description="mean value of the next card")
    bust_probability: float = Field(..., ge=0, le=1, description="chance the next card busts the player")
    available_actions: Tuple[str, ...] = Field(..., description="names of the offered actions")


class TableService:
    """Blackjack table: one player, one dealer, one shared deck."""

    def __init__(self, rules: Optional[TableRulesConfig] = None,
                 rng: Optional[random.Random] = None):
        """
        Set up the deck and deal the first hands.

        Args:
            rules: table rules, defaults to TableRulesConfig()
            rng: random number generator for the deck; when omitted one is
                seeded from ``rules.random_seed``
        """
        self.logger = logging.getLogger(__name__)
        self.rules = rules or TableRulesConfig()
        self.deck = Deck(
            number_of_packs=self.rules.number_of_packs,
            reset_when_remaining=self.rules.reset_when_remaining,
            rng=rng or random.Random(self.rules.random_seed),
        )
        self.player = Player(
            self.deck,
            starting_balance=self.rules.starting_balance,
            value_limit=self.rules.value_limit,
            current_bet=self.rules.default_bet,
        )
        self.dealer = Dealer(self.deck, self.rules.value_limit, self.rules.dealer_stop_value)
        self.last_winnings: float = 0
        self.logger.info("Table opened: %d packs, balance %s, bet %s",
                         self.rules.number_of_packs, self.player.balance, self.player.current_bet)

    def available_actions(self) -> List[AvailableState]:
        """Actions currently on offer for the player's hand."""
        return self.player.hand.available_states(self.deck)

    def execute(self, state: AvailableState, amount: Optional[float] = None) -> OperationResult:
        """
        Execute one offered action and settle the balance.

        Args:
            state: an entry from ``available_actions()``
            amount: stake for betting actions, defaults to the player's
                current bet

        Returns:
            OperationResult: the action's return value on success; rule
                errors become failures and leave the balance untouched
        """
        try:
            data = self._apply(state, amount)
        except BlackjackError as e:
            self.logger.warning("Action '%s' rejected: %s", state.name, e)
            return OperationResult.from_error(e)
        except ValueError as e:
            return OperationResult.failure_result(str(e), ErrorCode.INVALID_AMOUNT)

        self.logger.info("%s -> %s (balance %s)", state.name, self.player.hand.status.value,
                         self.player.balance)
        return OperationResult.success_result(data, message=state.name)

    def _apply(self, state: AvailableState, amount: Optional[float]):
        if isinstance(state, FinishedState):
            self.player.hand = state.action()
            self.dealer.reset_hand(self.deck)
            self.last_winnings = 0
            return self.player.hand

        if isinstance(state, WinningsState):
            self.dealer.resolve_hand(self.deck)
            winnings = max(state.action(self.dealer.hand.get_best_hand_value(),
                                        self.dealer.has_blackjack), 0)
            self.player.balance += winnings
            self.last_winnings = winnings
            return winnings

        if isinstance(state, PlayingState):
            state.action()
            self.last_winnings = 0
            return None

        if isinstance(state, BettingState):
            stake = self.player.current_bet if amount is None else amount
            charged = state.action(stake)
            self.player.balance -= charged
            self.last_winnings = -charged
            return charged

        raise TypeError(f"Unknown available state: {state!r}")

    def execute_by_name(self, name: str, amount: Optional[float] = None) -> OperationResult:
        """
        Execute the offered action with the given name.

        Returns:
            OperationResult: as ``execute``; ACTION_NOT_AVAILABLE when no
                offered action has that name
        """
        for state in self.available_actions():
            if state.name.lower() == name.lower():
                return self.execute(state, amount)
        return OperationResult.failure_result(
            f"Action '{name}' is not available in status {self.player.hand.status.value}",
            ErrorCode.ACTION_NOT_AVAILABLE
        )

    def bust_probability(self) -> float:
        """Probability that the player's next card busts the hand."""
        headroom = self.player.hand.value_limit - self.player.hand.get_hand_min_value()
        return 1 - self.deck.get_probability_of_getting_less_than_or_equal_to(headroom)

    def snapshot(self) -> TableSnapshot:
        """Capture the table state for display."""
        player_hand = self.player.hand
        dealer_hand = self.dealer.hand
        return TableSnapshot(
            player_cards=tuple(str(card) for card in player_hand.cards),
            player_best_value=player_hand.get_best_hand_value(),
            player_status=player_hand.status,
            player_bet=player_hand.bet,
            dealer_cards=tuple(str(card) for card in dealer_hand.cards),
            dealer_best_value=dealer_hand.get_best_hand_value(),
            dealer_status=dealer_hand.status,
            balance=self.player.balance,
            current_bet=self.player.current_bet,
            last_winnings=self.last_winnings,
            cards_remaining=self.deck.get_cards_remaining(),
            hi_low_count=self.deck.get_hi_low_count(),
            expectation=self.deck.get_expectation(),
            bust_probability=self.bust_probability(),
            available_actions=tuple(state.name for state in self.available_actions()),
        )
