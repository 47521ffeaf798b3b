"""
Hand state-machine module.

Provides the Hand class and the status, action and available-state types
that describe its transitions.
"""

from .hand import Hand, DEFAULT_VALUE_LIMIT
from .types import (
    HandStatus,
    HandAction,
    GameStateCategory,
    LEGAL_ACTIONS,
    RESOLVED_STATUSES,
    BettingState,
    WinningsState,
    PlayingState,
    FinishedState,
    AvailableState,
)

__all__ = [
    'Hand',
    'DEFAULT_VALUE_LIMIT',
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
