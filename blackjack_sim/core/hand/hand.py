"""
Blackjack hand state machine.

A Hand holds the cards of one participant for one round and enforces the
betting and playing transitions:

    notBetted --place_bet--> inPlay | blackjack
    inPlay --hit--> inPlay | bust
    inPlay --stick--> stuck
    inPlay --surrender--> surrendered
    inPlay --double--> stuck | bust
    notBetted | bust | stuck | surrendered | blackjack --get_winnings--> finished

A new round always gets a new Hand; a hand never moves back to an earlier
status.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..deck import Card, Deck, Suit
from ..deck.types import OPTIONAL_TEN_BONUS
from ..exceptions import (
    AlreadyBettedError,
    BlackjackError,
    NotInPlayError,
    RoundNotFinishedError,
    WinningsAlreadyCollectedError,
)
from ..rules.result import ErrorCode, OperationResult
from .types import (
    LEGAL_ACTIONS,
    RESOLVED_STATUSES,
    AvailableState,
    BettingState,
    FinishedState,
    HandAction,
    HandStatus,
    PlayingState,
    WinningsState,
)

logger = logging.getLogger(__name__)

ForcedCard = Tuple[Suit, int]

DEFAULT_VALUE_LIMIT = 21


class Hand:
    """
    Cards, stake and status of one participant's round.

    Attributes:
        cards: cards in the order they were drawn
        bet: amount currently staked on the hand
        status: current HandStatus
        value_limit: hand busts once its minimum value exceeds this
        hand_min_value: sum of card values with every ace counted as 1
        optional_tens: number of held cards that may count 10 higher

    Examples:
        >>> deck = Deck()
        >>> hand = Hand(deck, 21, (Suit.HEARTS, 13), (Suit.SPADES, 1))
        >>> hand.place_bet(10)
        10
        >>> hand.status
        <HandStatus.BLACKJACK: 'blackjack'>
        >>> hand.get_winnings(20, False)
        25.0
    """

    def __init__(self,
                 deck: Deck,
                 value_limit: int = DEFAULT_VALUE_LIMIT,
                 first_card: Optional[ForcedCard] = None,
                 second_card: Optional[ForcedCard] = None) -> None:
        """
        Deal a two-card hand from the deck.

        Args:
            deck: deck to draw the opening cards from
            value_limit: the point at which the hand busts if exceeded
            first_card: optional (suit, denomination) forced as the first card
            second_card: optional (suit, denomination) forced as the second card
        """
        self.cards: List[Card] = []
        self.bet: float = 0
        self.status = HandStatus.NOT_BETTED
        self.value_limit = value_limit
        self.hand_min_value = 0
        self.optional_tens = 0

        for forced in (first_card, second_card):
            if forced is None:
                self.draw_card(deck)
            else:
                self.draw_card(deck, *forced)

    def _set_status(self, status: HandStatus) -> None:
        if status is not self.status:
            logger.debug("Hand %s -> %s (min=%d, bet=%s)",
                         self.status.value, status.value, self.hand_min_value, self.bet)
        self.status = status

    def draw_card(self, deck: Deck, suit: Optional[Suit] = None,
                  denomination: Optional[int] = None) -> Card:
        """
        Draw a card into the hand.

        The hand busts as soon as its minimum value passes the limit, whatever
        its current status.

        Args:
            deck: deck to draw from
            suit: suit of a forced card
            denomination: denomination of a forced card (given with suit)

        Returns:
            Card: the drawn card

        Raises:
            ValueError: when only one of suit and denomination is given
        """
        if (suit is None) != (denomination is None):
            raise ValueError("A forced card needs both a suit and a denomination")

        if suit is None:
            card = deck.draw_card()
        else:
            card = deck.draw_specific_card(suit, denomination)

        self.cards.append(card)
        self.hand_min_value += card.value
        if card.optional_ten:
            self.optional_tens += 1

        if self.hand_min_value > self.value_limit:
            self._set_status(HandStatus.BUST)
        return card

    def get_hand_min_value(self) -> int:
        """
        Value of the hand with every ace counted as 1.

        Returns:
            int: minimum hand value, used for bust detection
        """
        return self.hand_min_value

    def get_best_hand_value(self) -> int:
        """
        Highest value of the hand that does not bust, if there is one.

        Each ace promoted from 1 to 11 adds exactly 10, so promote as many as
        fit under the limit.

        Returns:
            int: best hand value
        """
        promotions_without_bust = max((self.value_limit - self.hand_min_value) // OPTIONAL_TEN_BONUS, 0)
        promoted = min(self.optional_tens, promotions_without_bust)
        return self.hand_min_value + promoted * OPTIONAL_TEN_BONUS

    def is_soft(self) -> bool:
        """True when an ace is currently counted as 11."""
        return self.get_best_hand_value() != self.hand_min_value

    def place_bet(self, bet: float) -> float:
        """
        Stake the hand and start playing it.

        Args:
            bet: amount staked, already taken from the player's balance

        Returns:
            float: the amount staked

        Raises:
            AlreadyBettedError: when a bet was already placed
            ValueError: when the bet is negative
        """
        if self.status is not HandStatus.NOT_BETTED:
            raise AlreadyBettedError()
        if bet < 0:
            raise ValueError(f"Bet cannot be negative: {bet}")

        self.bet = bet
        self._set_status(HandStatus.IN_PLAY)
        if self.get_best_hand_value() == self.value_limit:
            self._set_status(HandStatus.BLACKJACK)
        return bet

    def get_winnings(self, dealer_value: int, is_dealer_blackjack: bool) -> float:
        """
        Settle the hand against the dealer.

        The stake is assumed to have been debited already, so the return
        value is the full amount to credit back. Only the first call for a
        hand succeeds.

        Args:
            dealer_value: dealer's best hand value
            is_dealer_blackjack: whether the dealer holds a blackjack, which
                beats any non-blackjack 21

        Returns:
            float: amount to credit to the player's balance

        Raises:
            RoundNotFinishedError: while the hand is still in play
            WinningsAlreadyCollectedError: when already settled
        """
        if self.status is HandStatus.IN_PLAY:
            raise RoundNotFinishedError()
        if self.status is HandStatus.FINISHED:
            raise WinningsAlreadyCollectedError()

        status = self.status
        self._set_status(HandStatus.FINISHED)

        if status is HandStatus.NOT_BETTED or status is HandStatus.BUST:
            return 0
        if status is HandStatus.SURRENDERED:
            return self.bet / 2
        if status is HandStatus.BLACKJACK:
            if is_dealer_blackjack:
                return self.bet
            return self.bet * 5 / 2

        # stuck
        if dealer_value > self.value_limit:
            return self.bet * 2
        if is_dealer_blackjack:
            return 0
        value_over_dealer = self.get_best_hand_value() - dealer_value
        if value_over_dealer > 0:
            return self.bet * 2
        if value_over_dealer < 0:
            return 0
        return self.bet

    def hit(self, deck: Deck) -> None:
        """
        Draw one more card; the hand may bust.

        Raises:
            NotInPlayError: when the hand is not in play
        """
        if self.status is not HandStatus.IN_PLAY:
            raise NotInPlayError()
        self.draw_card(deck)

    def stick(self) -> None:
        """
        Stop drawing so the hand can be settled.

        Sticking on a blackjack does nothing.

        Raises:
            NotInPlayError: when the hand is neither in play nor a blackjack
        """
        if self.status is HandStatus.IN_PLAY:
            self._set_status(HandStatus.STUCK)
        elif self.status is not HandStatus.BLACKJACK:
            raise NotInPlayError()

    def double(self, deck: Deck, extra_bet: Optional[float] = None) -> float:
        """
        Raise the stake by up to the current bet, draw one card and stick.

        Args:
            deck: deck to draw from
            extra_bet: amount to add, capped at the current bet; defaults to
                the current bet

        Returns:
            float: the extra amount staked

        Raises:
            NotInPlayError: when the hand is not in play
            ValueError: when extra_bet is negative
        """
        if self.status is not HandStatus.IN_PLAY:
            raise NotInPlayError()
        if extra_bet is not None and extra_bet < 0:
            raise ValueError(f"Extra bet cannot be negative: {extra_bet}")

        extra = min(extra_bet if extra_bet is not None else self.bet, self.bet)
        self.bet += extra
        self.hit(deck)
        try:
            self.stick()
        except NotInPlayError:
            # the hit above went bust
            if self.status is not HandStatus.BUST:
                raise
        return extra

    def surrender(self) -> None:
        """
        Give up the hand for half the stake back.

        Raises:
            NotInPlayError: when the hand is not in play
        """
        if self.status is not HandStatus.IN_PLAY:
            raise NotInPlayError()
        self._set_status(HandStatus.SURRENDERED)

    def can_perform(self, action: HandAction) -> bool:
        """Whether the transition table allows ``action`` in the current status."""
        return action in LEGAL_ACTIONS[self.status]

    def try_action(self, action: HandAction, *args: Any) -> OperationResult:
        """
        Apply an action and report the outcome as a value instead of raising.

        Args:
            action: the action to apply
            *args: the arguments of the matching method (amount for
                PLACE_BET, deck for HIT, deck and optional extra for DOUBLE,
                dealer value and dealer blackjack flag for COLLECT_WINNINGS)

        Returns:
            OperationResult: the method's return value on success, otherwise
                a failure whose error_code names the rule that was broken
                (INVALID_AMOUNT for a negative bet or extra)
        """
        handlers: Dict[HandAction, Callable[..., Any]] = {
            HandAction.PLACE_BET: self.place_bet,
            HandAction.HIT: self.hit,
            HandAction.STICK: self.stick,
            HandAction.SURRENDER: self.surrender,
            HandAction.DOUBLE: self.double,
            HandAction.COLLECT_WINNINGS: self.get_winnings,
        }
        try:
            data = handlers[action](*args)
        except BlackjackError as e:
            return OperationResult.from_error(e)
        except ValueError as e:
            return OperationResult.failure_result(str(e), ErrorCode.INVALID_AMOUNT)
        return OperationResult.success_result(data, message=f"{action.name} -> {self.status.value}")

    def available_states(self, deck: Deck) -> List[AvailableState]:
        """
        Actions on offer for the current status, bound to this hand.

        Args:
            deck: deck any drawing action should use

        Returns:
            List[AvailableState]: offered actions, tagged by category
        """
        if self.status is HandStatus.NOT_BETTED:
            return [
                BettingState("Place Bet", self.place_bet),
                WinningsState("Abstain From Betting", self.get_winnings),
            ]
        if self.status is HandStatus.IN_PLAY:
            return [
                PlayingState("Hit", lambda: self.hit(deck)),
                PlayingState("Stick", self.stick),
                PlayingState("Surrender", self.surrender),
                BettingState("Double", lambda extra_bet: self.double(deck, extra_bet)),
            ]
        if self.status in RESOLVED_STATUSES:
            return [
                WinningsState("Collect Winnings / Reset Hand", self.get_winnings),
            ]
        return [
            FinishedState("Create New Hand", lambda: Hand(deck, self.value_limit)),
        ]

    def __str__(self) -> str:
        cards = " ".join(str(card) for card in self.cards)
        return f"{cards} ({self.get_best_hand_value()}, {self.status.value})"

    def __repr__(self) -> str:
        return (f"Hand(cards={self.cards!r}, bet={self.bet}, status={self.status.name}, "
                f"value_limit={self.value_limit})")
