"""
Card and deck module.

Provides the Card value object and the count-table Deck used by every hand.
"""

from .card import Card
from .deck import Deck, DenominationCount
from .types import Suit, Denomination, denomination_value, denomination_has_optional_ten

__all__ = [
    'Card',
    'Deck',
    'DenominationCount',
    'Suit',
    'Denomination',
    'denomination_value',
    'denomination_has_optional_ten',
]
