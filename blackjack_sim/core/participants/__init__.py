"""
Table participants built on top of Hand.
"""

from .dealer import Dealer, DEFAULT_DEALER_STOP_VALUE
from .player import Player

__all__ = ['Dealer', 'Player', 'DEFAULT_DEALER_STOP_VALUE']
