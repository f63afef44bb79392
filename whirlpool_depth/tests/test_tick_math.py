"""
Tick Math / Price Math 테스트

tick_math.py, price_math.py의 함수들을 테스트합니다.
"""

import pytest
from decimal import Decimal

from ..math.tick_math import (
    tick_index_to_sqrt_price_x64,
    get_initializable_tick_index,
    get_full_range_tick_indexes,
    TICK_BIT_LIMIT,
)
from ..math.price_math import (
    sqrt_price_x64_to_price,
    tick_index_to_price,
    fee_rate_to_percent,
    protocol_fee_rate_to_percent,
    to_fixed_decimal,
    invert_price,
)
from ..constants import Q64, MIN_TICK_INDEX, MAX_TICK_INDEX, MIN_SQRT_PRICE, MAX_SQRT_PRICE


class TestTickIndexToSqrtPrice:
    """tick_index_to_sqrt_price_x64 테스트"""

    def test_tick_0(self):
        """틱 0에서의 sqrtPrice (price = 1)"""
        assert tick_index_to_sqrt_price_x64(0) == Q64

    def test_min_tick(self):
        """최소 틱에서의 sqrtPrice"""
        assert tick_index_to_sqrt_price_x64(MIN_TICK_INDEX) == MIN_SQRT_PRICE

    def test_max_tick(self):
        """최대 틱에서의 sqrtPrice"""
        assert tick_index_to_sqrt_price_x64(MAX_TICK_INDEX) == MAX_SQRT_PRICE

    def test_monotonic(self):
        """틱이 커지면 sqrtPrice도 커짐"""
        ticks = [-50000, -1000, -1, 0, 1, 1000, 50000]
        prices = [tick_index_to_sqrt_price_x64(t) for t in ticks]
        assert prices == sorted(prices)
        assert len(set(prices)) == len(prices)

    def test_symmetric(self):
        """sqrtPrice(t) * sqrtPrice(-t) ≈ 2^128"""
        for tick in [1, 64, 1000, 100000]:
            product = tick_index_to_sqrt_price_x64(tick) * tick_index_to_sqrt_price_x64(-tick)
            assert abs(product - Q64 * Q64) / (Q64 * Q64) < 1e-12

    def test_small_ticks(self):
        """틱 ±1 (테이블 첫 항목)"""
        assert abs(tick_index_to_sqrt_price_x64(1) / Q64 - 1.0001 ** 0.5) < 1e-12
        assert tick_index_to_sqrt_price_x64(-1) == 18445821805675392311

    def test_beyond_protocol_range(self):
        """프로토콜 범위 밖 틱 배열 시작 인덱스도 계산 (범위 끝 값과 단조)"""
        assert tick_index_to_sqrt_price_x64(-444928) < MIN_SQRT_PRICE
        assert tick_index_to_sqrt_price_x64(444928) > MAX_SQRT_PRICE

    def test_invalid_tick_too_low(self):
        """계산 가능 범위를 벗어난 틱 (너무 낮음)"""
        with pytest.raises(ValueError):
            tick_index_to_sqrt_price_x64(-TICK_BIT_LIMIT)

    def test_invalid_tick_too_high(self):
        """계산 가능 범위를 벗어난 틱 (너무 높음)"""
        with pytest.raises(ValueError):
            tick_index_to_sqrt_price_x64(TICK_BIT_LIMIT)


class TestInitializableTicks:
    """get_initializable_tick_index, get_full_range_tick_indexes 테스트"""

    def test_floor_positive(self):
        assert get_initializable_tick_index(1000, 64) == 960
        assert get_initializable_tick_index(1024, 64) == 1024

    def test_floor_negative(self):
        """음수 틱은 -inf 방향으로 내림"""
        assert get_initializable_tick_index(-1, 64) == -64
        assert get_initializable_tick_index(-64, 64) == -64
        assert get_initializable_tick_index(-65, 64) == -128

    def test_full_range(self):
        """전체 범위 양 끝은 범위 안쪽의 tick_spacing 배수"""
        assert get_full_range_tick_indexes(64) == (-443584, 443584)
        assert get_full_range_tick_indexes(1) == (MIN_TICK_INDEX, MAX_TICK_INDEX)


class TestPrices:
    """sqrt_price_x64_to_price, tick_index_to_price 테스트"""

    def test_price_one_same_decimals(self):
        """sqrtPrice = 2^64, 동일 소수점 (가격 = 1)"""
        assert sqrt_price_x64_to_price(Q64, 6, 6) == 1

    def test_price_decimal_adjustment(self):
        """가격 = raw * 10^(decimals_a - decimals_b)"""
        assert sqrt_price_x64_to_price(Q64, 9, 6) == 1000
        assert sqrt_price_x64_to_price(Q64, 6, 9) == Decimal("0.001")

    def test_tick_0(self):
        """틱 0, 동일 소수점"""
        assert tick_index_to_price(0, 6, 6) == Decimal("1.000000")

    def test_positive_tick(self):
        """양수 틱 테스트"""
        result = tick_index_to_price(1000, 6, 6)
        assert abs(float(result) - 1.0001 ** 1000) < 1e-6

    def test_rounded_to_decimals_b(self):
        """가격은 token B 소수점 자릿수로 반올림"""
        result = tick_index_to_price(1000, 9, 2)
        assert result.as_tuple().exponent == -2

    def test_to_fixed_decimal_half_up(self):
        assert to_fixed_decimal(Decimal("1.23456789"), 4) == Decimal("1.2346")
        assert to_fixed_decimal(Decimal("0.125"), 2) == Decimal("0.13")

    def test_invert_price(self):
        assert invert_price(Decimal("4"), 2) == Decimal("0.25")

    def test_invert_zero_price(self):
        with pytest.raises(ZeroDivisionError):
            invert_price(Decimal("0"), 6)

    def test_fee_rates(self):
        """수수료율 → 퍼센트"""
        assert fee_rate_to_percent(3000) == Decimal("0.3")
        assert fee_rate_to_percent(0) == 0
        assert protocol_fee_rate_to_percent(1300) == Decimal("13")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
