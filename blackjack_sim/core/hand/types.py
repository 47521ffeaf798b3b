"""
Hand state-machine type definitions.

Defines hand statuses, the legal-action table and the available-state
variants handed to whoever drives a round.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Callable, ClassVar, Dict, FrozenSet, Union

if TYPE_CHECKING:
    from .hand import Hand

__all__ = [
    'HandStatus',
    'HandAction',
    'GameStateCategory',
    'LEGAL_ACTIONS',
    'RESOLVED_STATUSES',
    'BettingState',
    'WinningsState',
    'PlayingState',
    'FinishedState',
    'AvailableState',
]


class HandStatus(Enum):
    """Status of a hand within a round."""
    NOT_BETTED = "notBetted"
    IN_PLAY = "inPlay"
    SURRENDERED = "surrendered"
    STUCK = "stuck"
    BUST = "bust"
    BLACKJACK = "blackjack"
    FINISHED = "finished"


class HandAction(Enum):
    """Actions a hand accepts."""
    PLACE_BET = auto()
    HIT = auto()
    STICK = auto()
    SURRENDER = auto()
    DOUBLE = auto()
    COLLECT_WINNINGS = auto()


class GameStateCategory(Enum):
    """Kind of callable an available state carries."""
    BETTING = "betting"
    PLAYING = "playing"
    WINNINGS = "winnings"
    FINISHED = "finished"


# statuses that are waiting for their winnings to be collected
RESOLVED_STATUSES: FrozenSet[HandStatus] = frozenset({
    HandStatus.BUST,
    HandStatus.STUCK,
    HandStatus.SURRENDERED,
    HandStatus.BLACKJACK,
})

_COLLECT_ONLY = frozenset({HandAction.COLLECT_WINNINGS})

LEGAL_ACTIONS: Dict[HandStatus, FrozenSet[HandAction]] = {
    HandStatus.NOT_BETTED: frozenset({HandAction.PLACE_BET, HandAction.COLLECT_WINNINGS}),
    HandStatus.IN_PLAY: frozenset({
        HandAction.HIT,
        HandAction.STICK,
        HandAction.SURRENDER,
        HandAction.DOUBLE,
    }),
    HandStatus.BUST: _COLLECT_ONLY,
    HandStatus.STUCK: _COLLECT_ONLY,
    HandStatus.SURRENDERED: _COLLECT_ONLY,
    # sticking on a blackjack is tolerated as a no-op
    HandStatus.BLACKJACK: frozenset({HandAction.COLLECT_WINNINGS, HandAction.STICK}),
    HandStatus.FINISHED: frozenset(),
}


@dataclass(frozen=True)
class BettingState:
    """Offer that stakes money: ``action(amount)`` returns the amount charged."""
    name: str
    action: Callable[[float], float]
    category: ClassVar[GameStateCategory] = GameStateCategory.BETTING


@dataclass(frozen=True)
class WinningsState:
    """Offer that settles the hand: ``action(dealer_value, is_dealer_blackjack)`` returns the payout."""
    name: str
    action: Callable[[int, bool], float]
    category: ClassVar[GameStateCategory] = GameStateCategory.WINNINGS


@dataclass(frozen=True)
class PlayingState:
    """Offer that plays the hand without touching the stake."""
    name: str
    action: Callable[[], None]
    category: ClassVar[GameStateCategory] = GameStateCategory.PLAYING


@dataclass(frozen=True)
class FinishedState:
    """Offer that deals a new hand once this one is settled."""
    name: str
    action: Callable[[], 'Hand']
    category: ClassVar[GameStateCategory] = GameStateCategory.FINISHED


AvailableState = Union[BettingState, WinningsState, PlayingState, FinishedState]
