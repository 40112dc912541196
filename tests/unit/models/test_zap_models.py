"""Tests for zap request/response models."""

import pytest
from pydantic import ValidationError

from zap.config import ZapConfig
from zap.errors import ArithmeticOverflow, InvalidParameter
from zap.models import ZapRequest, ZapResponse, validate_uint256
from zap.optimal_swap import SwapResult
from zap.safe_int import UINT256_MAX


class TestValidateUint256:
    def test_accepts_int_and_string(self):
        assert validate_uint256(42) == "42"
        assert validate_uint256("42") == "42"
        assert validate_uint256(str(UINT256_MAX)) == str(UINT256_MAX)

    @pytest.mark.parametrize("value", [-1, "-1", UINT256_MAX + 1, "1.5", "abc", 1.5, True])
    def test_rejects_invalid(self, value):
        with pytest.raises(ValueError):
            validate_uint256(value)

    def test_overflow_message(self):
        with pytest.raises(ValueError, match="Uint256 overflow"):
            validate_uint256(UINT256_MAX + 1)


class TestZapRequest:
    def test_parse_camel_case(self):
        request = ZapRequest.model_validate(
            {"amountA": "1000", "amountB": "0", "reserveA": "1000", "reserveB": "1000"}
        )
        assert request.amount_a == "1000"
        assert request.fee == "3"
        assert request.extension == "1000"

    def test_solve(self):
        request = ZapRequest(
            amount_a=0, amount_b=1000, reserve_a=1000, reserve_b=1000, fee=0, extension=1000
        )

        response = request.solve()

        assert response.reversed is True
        assert response.swap_asset == "b"
        assert response.swap_amount == "414"

    def test_solve_propagates_solver_errors(self):
        request = ZapRequest(
            amount_a=1, amount_b=0, reserve_a=1000, reserve_b=1000, fee=1000, extension=1000
        )
        with pytest.raises(InvalidParameter):
            request.solve()

    def test_rejects_out_of_range_amount(self):
        with pytest.raises(ValidationError):
            ZapRequest(amount_a=-1, amount_b=0, reserve_a=1, reserve_b=1)

    def test_wire_values_capped_at_uint256(self):
        """A wider solver word does not lift the uint256 cap on request fields."""
        with pytest.raises(ValidationError):
            ZapRequest(amount_a=UINT256_MAX + 1, amount_b=0, reserve_a=1, reserve_b=1)

    def test_solve_with_wide_word(self):
        request = ZapRequest(
            amount_a=0, amount_b=1000, reserve_a=1000, reserve_b=1000, fee=0, extension=1000
        )
        response = request.solve(config=ZapConfig(word_bits=512))
        assert response.swap_amount == "414"

    def test_solve_with_narrow_word_checks_inputs(self):
        request = ZapRequest(amount_a=2**70, amount_b=0, reserve_a=10**18, reserve_b=10**18)
        with pytest.raises(ArithmeticOverflow, match="amount_a"):
            request.solve(config=ZapConfig(word_bits=64))

    def test_missing_field(self):
        with pytest.raises(ValidationError):
            ZapRequest.model_validate({"amountA": "1", "amountB": "0", "reserveA": "1"})


class TestZapResponse:
    def test_round_trip_result(self):
        result = SwapResult(reversed=False, swap_amount=10**40)
        response = ZapResponse.from_result(result)
        assert response.to_result() == result

    def test_serializes_by_alias(self):
        response = ZapResponse.from_result(SwapResult(reversed=True, swap_amount=7))
        assert response.model_dump(by_alias=True) == {
            "reversed": True,
            "swapAsset": "b",
            "swapAmount": "7",
        }
