"""
Core module - pure blackjack rules.

This package holds the rules engine and depends on nothing outside itself.
The application and UI layers may import it; it never imports them.

Modules:
    deck: cards and the count-table shoe
    hand: per-round hand state machine and payouts
    participants: dealer policy and player wrapper
    rules: explicit operation results
    exceptions: rule error hierarchy
"""

from .deck import Card, Deck, Suit, Denomination
from .hand import Hand, HandStatus, HandAction, GameStateCategory
from .participants import Dealer, Player
from .rules import ErrorCode, OperationResult

__all__ = [
    'Card',
    'Deck',
    'Suit',
    'Denomination',
    'Hand',
    'HandStatus',
    'HandAction',
    'GameStateCategory',
    'Dealer',
    'Player',
    'ErrorCode',
    'OperationResult',
]
