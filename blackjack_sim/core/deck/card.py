"""
Playing card data structure.

Defines the immutable Card drawn from a Deck and held by a Hand.
"""

from dataclasses import dataclass
from typing import Dict

from .types import (
    Suit,
    Denomination,
    denomination_value,
    denomination_has_optional_ten,
)


_DENOMINATION_DISPLAY: Dict[int, str] = {
    Denomination.ACE: "A",
    Denomination.JACK: "J",
    Denomination.QUEEN: "Q",
    Denomination.KING: "K",
}

_DENOMINATION_PARSE: Dict[str, int] = {
    "A": 1, "T": 10, "J": 11, "Q": 12, "K": 13,
}

_SUIT_PARSE: Dict[str, Suit] = {
    "H": Suit.HEARTS, "♥": Suit.HEARTS,
    "D": Suit.DIAMONDS, "♦": Suit.DIAMONDS,
    "C": Suit.CLUBS, "♣": Suit.CLUBS,
    "S": Suit.SPADES, "♠": Suit.SPADES,
}


@dataclass(frozen=True)
class Card:
    """
    A single drawn playing card.

    Attributes:
        suit: the card's suit
        denomination: denomination id, 1 (ace) through 13 (king)

    Examples:
        >>> card = Card(Suit.SPADES, 1)
        >>> str(card)
        'A♠'
        >>> card.value, card.optional_ten
        (1, True)
    """

    suit: Suit
    denomination: int

    def __post_init__(self) -> None:
        """
        Validate the card.

        Raises:
            TypeError: when suit or denomination has the wrong type
            ValueError: when the denomination is outside 1-13
        """
        if not isinstance(self.suit, Suit):
            raise TypeError(f"suit must be a Suit, got {type(self.suit)}")
        if isinstance(self.denomination, bool) or not isinstance(self.denomination, int):
            raise TypeError(f"denomination must be an int, got {type(self.denomination)}")
        if not Denomination.ACE <= self.denomination <= Denomination.KING:
            raise ValueError(f"denomination must be between 1 and 13, got {self.denomination}")

    @property
    def value(self) -> int:
        """Lowest value the card scores (aces count 1 here)."""
        return denomination_value(self.denomination)

    @property
    def optional_ten(self) -> bool:
        """True for aces, which may count as 11 instead of 1."""
        return denomination_has_optional_ten(self.denomination)

    @property
    def name(self) -> str:
        """Short denomination label, e.g. 'A', '7', 'Q'."""
        return _DENOMINATION_DISPLAY.get(self.denomination, str(self.denomination))

    def __str__(self) -> str:
        return f"{self.name}{self.suit.value}"

    def __repr__(self) -> str:
        return f"Card({Denomination(self.denomination).name}, {self.suit.name})"

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        Build a card from text.

        Args:
            card_str: denomination then suit, e.g. "AS", "10h", "Td", "K♠"

        Returns:
            Card: the parsed card

        Raises:
            TypeError: when card_str is not a string
            ValueError: when the text cannot be parsed
        """
        if not isinstance(card_str, str):
            raise TypeError(f"card text must be a str, got {type(card_str)}")
        if len(card_str) < 2:
            raise ValueError(f"Malformed card text: {card_str!r}")

        denomination_str, suit_str = card_str[:-1].upper(), card_str[-1].upper()
        if denomination_str in _DENOMINATION_PARSE:
            denomination = _DENOMINATION_PARSE[denomination_str]
        elif denomination_str.isdigit() and 2 <= int(denomination_str) <= 10:
            denomination = int(denomination_str)
        else:
            raise ValueError(f"Invalid denomination: {denomination_str!r}")

        if suit_str not in _SUIT_PARSE:
            raise ValueError(f"Invalid suit: {suit_str!r}")

        return cls(_SUIT_PARSE[suit_str], denomination)
