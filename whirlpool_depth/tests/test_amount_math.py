"""
Amount Math / Fixed Point 테스트

토큰 수량 변화량 계산과 범위 검사 연산을 테스트합니다.
"""

import pytest
from decimal import Decimal

from ..math.amount_math import get_amount_delta_a, get_amount_delta_b
from ..math.fixed_point import (
    WhirlpoolMathError,
    AmountOverflowError,
    LiquidityOverflowError,
    LiquidityUnderflowError,
    check_u64,
    add_liquidity_net,
    sub_liquidity_net,
    to_decimal,
)
from ..math.tick_math import tick_index_to_sqrt_price_x64
from ..constants import Q64, U64_MAX, U128_MAX, I128_MAX


class TestGetAmountDeltas:
    """get_amount_delta_a, get_amount_delta_b 테스트"""

    def test_exact_values(self):
        """√P: 1 → 2, L = 1000 이면 Δa = 500, Δb = 1000"""
        for round_up in (True, False):
            assert get_amount_delta_a(Q64, 2 * Q64, 1000, round_up) == 500
            assert get_amount_delta_b(Q64, 2 * Q64, 1000, round_up) == 1000

    def test_rounding_direction(self):
        """1 단위 미만의 결과는 올림이면 1, 내림이면 0"""
        assert get_amount_delta_a(Q64, Q64 + 1, 1, True) == 1
        assert get_amount_delta_a(Q64, Q64 + 1, 1, False) == 0
        assert get_amount_delta_b(Q64, Q64 + 1, 1, True) == 1
        assert get_amount_delta_b(Q64, Q64 + 1, 1, False) == 0

    def test_same_price_is_zero(self):
        """가격이 같으면 변화량 0"""
        sqrt_price = tick_index_to_sqrt_price_x64(1000)
        for round_up in (True, False):
            assert get_amount_delta_a(sqrt_price, sqrt_price, 10**18, round_up) == 0
            assert get_amount_delta_b(sqrt_price, sqrt_price, 10**18, round_up) == 0

    def test_swap_order(self):
        """sqrt 순서가 바뀌어도 결과 동일"""
        sqrt_a = tick_index_to_sqrt_price_x64(0)
        sqrt_b = tick_index_to_sqrt_price_x64(100)
        liquidity = 10**12
        assert get_amount_delta_a(sqrt_a, sqrt_b, liquidity, True) == \
            get_amount_delta_a(sqrt_b, sqrt_a, liquidity, True)
        assert get_amount_delta_b(sqrt_a, sqrt_b, liquidity, False) == \
            get_amount_delta_b(sqrt_b, sqrt_a, liquidity, False)

    def test_zero_liquidity(self):
        """유동성 0일 때"""
        sqrt_a = tick_index_to_sqrt_price_x64(0)
        sqrt_b = tick_index_to_sqrt_price_x64(100)
        assert get_amount_delta_a(sqrt_a, sqrt_b, 0, True) == 0
        assert get_amount_delta_b(sqrt_a, sqrt_b, 0, True) == 0

    def test_overflow(self):
        """결과가 u64를 넘으면 AmountOverflowError"""
        sqrt_a = tick_index_to_sqrt_price_x64(-1000)
        sqrt_b = tick_index_to_sqrt_price_x64(1000)
        with pytest.raises(AmountOverflowError):
            get_amount_delta_a(sqrt_a, sqrt_b, U128_MAX, False)
        with pytest.raises(AmountOverflowError):
            get_amount_delta_b(sqrt_a, sqrt_b, U128_MAX, True)

    def test_zero_sqrt_price(self):
        """sqrtPrice 0은 유효하지 않음"""
        with pytest.raises(ValueError):
            get_amount_delta_a(0, Q64, 1000, True)


class TestLiquidityNet:
    """add_liquidity_net, sub_liquidity_net 테스트"""

    def test_add(self):
        assert add_liquidity_net(100, 30) == 130
        assert add_liquidity_net(100, -30) == 70

    def test_sub(self):
        assert sub_liquidity_net(100, 30) == 70
        assert sub_liquidity_net(100, -30) == 130

    def test_underflow(self):
        """유동성이 음수가 되면 예외"""
        with pytest.raises(LiquidityUnderflowError):
            add_liquidity_net(100, -101)
        with pytest.raises(LiquidityUnderflowError):
            sub_liquidity_net(10, 11)

    def test_overflow(self):
        """유동성이 u128을 넘으면 예외"""
        with pytest.raises(LiquidityOverflowError):
            add_liquidity_net(U128_MAX, 1)

    def test_net_out_of_i128(self):
        """liquidity_net이 i128 범위 밖이면 예외"""
        with pytest.raises(LiquidityOverflowError):
            add_liquidity_net(0, I128_MAX + 1)

    def test_error_hierarchy(self):
        """모든 연산 오류는 ArithmeticError"""
        assert issubclass(AmountOverflowError, WhirlpoolMathError)
        assert issubclass(LiquidityUnderflowError, WhirlpoolMathError)
        assert issubclass(WhirlpoolMathError, ArithmeticError)


class TestConversions:
    """check_u64, to_decimal 테스트"""

    def test_check_u64(self):
        assert check_u64(U64_MAX) == U64_MAX
        with pytest.raises(AmountOverflowError):
            check_u64(U64_MAX + 1)

    def test_to_decimal(self):
        assert to_decimal(1234567, 6) == Decimal("1.234567")
        assert to_decimal(0, 9) == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
