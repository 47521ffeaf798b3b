"""
Card type definitions.

Defines the suit and denomination enums together with the blackjack scoring
helpers every other module builds on.
"""

from enum import Enum, IntEnum
from typing import List


class Suit(Enum):
    """
    Playing card suit.

    Uses the Unicode suit symbols as values so cards render directly.
    """

    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"
    SPADES = "♠"


class Denomination(IntEnum):
    """
    Playing card denomination.

    Aces are 1 so that a denomination's base blackjack value is simply
    ``min(denomination, 10)``.
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13


# highest base value any card can have
MAX_CARD_VALUE = 10
# extra value gained by counting an ace high
OPTIONAL_TEN_BONUS = 10


def denomination_value(denomination: int) -> int:
    """
    Base (lowest) blackjack value of a denomination.

    Args:
        denomination: denomination id, 1-13

    Returns:
        int: the denomination for number cards, 10 for face cards
    """
    return min(int(denomination), MAX_CARD_VALUE)


def denomination_has_optional_ten(denomination: int) -> bool:
    """Whether the denomination may alternatively count 10 higher (aces)."""
    return int(denomination) == Denomination.ACE


def get_all_suits() -> List[Suit]:
    """
    Get every suit.

    Returns:
        List[Suit]: the four standard suits
    """
    return list(Suit)


def get_all_denominations() -> List[int]:
    """
    Get every denomination id.

    Returns:
        List[int]: 1 through 13
    """
    return [int(d) for d in Denomination]
