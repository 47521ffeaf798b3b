"""
Outcome values for rule and service calls.

Callers that prefer not to handle exceptions get an OperationResult; the
error_code on a failure is always an ErrorCode member.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

from ..exceptions import BlackjackError

T = TypeVar('T')


class ErrorCode(str, Enum):
    """Failure codes.

    Rule violations use the name of the exception class that reported them;
    the remaining codes come from the application services.
    """
    # rule errors
    BLACKJACK_ERROR = "BlackjackError"
    DECK_ERROR = "DeckError"
    DENOMINATION_NOT_FOUND = "DenominationNotFoundError"
    SUIT_NOT_FOUND = "SuitNotFoundError"
    CARD_EXHAUSTED = "CardExhaustedError"
    INTERNAL_INCONSISTENCY = "InternalInconsistencyError"
    HAND_ERROR = "HandError"
    ALREADY_BETTED = "AlreadyBettedError"
    NOT_IN_PLAY = "NotInPlayError"
    ROUND_NOT_FINISHED = "RoundNotFinishedError"
    WINNINGS_ALREADY_COLLECTED = "WinningsAlreadyCollectedError"
    GAME_CONFIG_ERROR = "GameConfigError"

    # table
    INVALID_AMOUNT = "INVALID_AMOUNT"
    ACTION_NOT_AVAILABLE = "ACTION_NOT_AVAILABLE"

    # configuration
    CONFIG_TYPE_NOT_FOUND = "CONFIG_TYPE_NOT_FOUND"
    CONFIG_PROFILE_NOT_FOUND = "CONFIG_PROFILE_NOT_FOUND"
    UNKNOWN_CONFIG_FIELD = "UNKNOWN_CONFIG_FIELD"
    INVALID_CONFIG_VALUE = "INVALID_CONFIG_VALUE"
    CONFIG_FILE_UNREADABLE = "CONFIG_FILE_UNREADABLE"
    CONFIG_FILE_INVALID = "CONFIG_FILE_INVALID"

    def __str__(self) -> str:
        return self.value


_RULE_ERROR_CODES = {code.value: code for code in ErrorCode}


@dataclass
class OperationResult(Generic[T]):
    """
    Success or failure of an operation, carried as a value.

    Attributes:
        success: whether the operation succeeded
        data: payload on success (and optionally on failure)
        message: what happened, mainly for failures
        error_code: why it failed; None on success
    """
    success: bool
    data: Optional[T] = None
    message: Optional[str] = None
    error_code: Optional[ErrorCode] = None

    @staticmethod
    def success_result(data: Optional[T] = None, message: Optional[str] = None) -> 'OperationResult[T]':
        return OperationResult(success=True, data=data, message=message)

    @staticmethod
    def failure_result(message: str, error_code: ErrorCode, data: Optional[T] = None) -> 'OperationResult[T]':
        return OperationResult(success=False, data=data, message=message, error_code=error_code)

    @staticmethod
    def from_error(error: BlackjackError) -> 'OperationResult':
        """
        Failure for a caught rule error.

        The code is taken from the nearest class in the error's hierarchy that
        has one, so subclasses defined elsewhere still map to their base.
        """
        for cls in type(error).__mro__:
            code = _RULE_ERROR_CODES.get(cls.__name__)
            if code is not None:
                return OperationResult.failure_result(str(error), code)
        raise TypeError(f"Not a rule error: {error!r}")

    def is_successful(self) -> bool:
        return self.success
