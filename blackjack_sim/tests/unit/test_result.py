"""
Unit tests for OperationResult and ErrorCode.
"""

import pytest

from blackjack_sim.core.deck import Suit
from blackjack_sim.core.exceptions import CardExhaustedError, GameConfigError, NotInPlayError
from blackjack_sim.core.rules import ErrorCode, OperationResult


class _HouseRuleError(NotInPlayError):
    pass


@pytest.mark.unit
@pytest.mark.fast
class TestOperationResult:

    def test_success(self):
        result = OperationResult.success_result(3, message="ok")
        assert result.is_successful()
        assert result.data == 3
        assert result.error_code is None

    def test_failure(self):
        result = OperationResult.failure_result("no", ErrorCode.ACTION_NOT_AVAILABLE)
        assert not result.is_successful()
        assert result.error_code == "ACTION_NOT_AVAILABLE"
        assert str(result.error_code) == "ACTION_NOT_AVAILABLE"

    @pytest.mark.parametrize("error, code", [
        (NotInPlayError(), ErrorCode.NOT_IN_PLAY),
        (CardExhaustedError(Suit.HEARTS, 1), ErrorCode.CARD_EXHAUSTED),
        (GameConfigError("bad"), ErrorCode.GAME_CONFIG_ERROR),
        (_HouseRuleError(), ErrorCode.NOT_IN_PLAY),
    ])
    def test_from_error(self, error, code):
        result = OperationResult.from_error(error)
        assert not result.success
        assert result.error_code is code
        assert result.message == str(error)

    def test_from_error_rejects_other_exceptions(self):
        with pytest.raises(TypeError):
            OperationResult.from_error(ValueError("bad"))
