"""
Blackjack rules-engine exception definitions.

Rule errors are caller-contract violations: they are raised immediately and
never retried. The application layer turns them into failure results.
"""


class BlackjackError(Exception):
    """Base class for every rules-engine error."""
    pass


class DeckError(BlackjackError):
    """Raised when the deck cannot satisfy a draw."""
    pass


class DenominationNotFoundError(DeckError):
    """Targeted draw for a denomination the deck was not built with."""

    def __init__(self, denomination: int):
        self.denomination = denomination
        super().__init__(f"Denomination {denomination} not in deck")


class SuitNotFoundError(DeckError):
    """Targeted draw for a suit the deck was not built with."""

    def __init__(self, suit):
        self.suit = suit
        super().__init__(f"Suit {suit} is not in deck")


class CardExhaustedError(DeckError):
    """Targeted draw for a card whose remaining count is already zero."""

    def __init__(self, suit, denomination: int):
        self.suit = suit
        self.denomination = denomination
        super().__init__(f"Card {denomination} of {suit} is not in deck")


class InternalInconsistencyError(DeckError):
    """Sampling window could not be resolved against the inventory counts."""
    pass


class HandError(BlackjackError):
    """Raised when a hand action is illegal for the current status."""
    pass


class AlreadyBettedError(HandError):
    """place_bet called outside notBetted."""

    def __init__(self, message: str = "Already betted"):
        super().__init__(message)


class NotInPlayError(HandError):
    """Playing action called outside inPlay."""

    def __init__(self, message: str = "Not in play"):
        super().__init__(message)


class RoundNotFinishedError(HandError):
    """Winnings requested while the hand is still being played."""

    def __init__(self, message: str = "Please finish the go before claiming winnings"):
        super().__init__(message)


class WinningsAlreadyCollectedError(HandError):
    """Winnings requested twice for the same hand."""

    def __init__(self, message: str = "Winnings already collected"):
        super().__init__(message)


class GameConfigError(BlackjackError):
    """Invalid table or logging configuration."""
    pass
