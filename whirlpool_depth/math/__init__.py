"""
Math layer for Whirlpool depth

온체인 수준 정밀도의 수학 함수들:
- tick_math: Tick ↔ sqrtPriceX64 변환
- price_math: sqrtPriceX64 → Decimal 가격
- amount_math: 유동성 → 토큰 수량 변화량
- fixed_point: u64 / u128 범위 검사 연산

시뮬레이터는 이 함수들을 PriceMath 인터페이스를 통해 사용합니다.
"""

from decimal import Decimal
from typing import Protocol

from .tick_math import (
    tick_index_to_sqrt_price_x64,
    get_initializable_tick_index,
    get_full_range_tick_indexes,
)
from .price_math import (
    sqrt_price_x64_to_price,
    tick_index_to_price,
    to_fixed_decimal,
    invert_price,
    fee_rate_to_percent,
    protocol_fee_rate_to_percent,
)
from .amount_math import (
    get_amount_delta_a,
    get_amount_delta_b,
)
from .fixed_point import (
    WhirlpoolMathError,
    AmountOverflowError,
    LiquidityOverflowError,
    LiquidityUnderflowError,
    add_liquidity_net,
    sub_liquidity_net,
    to_decimal,
)


class PriceMath(Protocol):
    """시뮬레이터가 사용하는 고정소수점 수학 인터페이스"""

    def tick_index_to_sqrt_price(self, tick_index: int) -> int: ...

    def tick_index_to_price(self, tick_index: int, decimals_a: int, decimals_b: int) -> Decimal: ...

    def amount_delta_a(self, sqrt_price_0: int, sqrt_price_1: int, liquidity: int, round_up: bool) -> int: ...

    def amount_delta_b(self, sqrt_price_0: int, sqrt_price_1: int, liquidity: int, round_up: bool) -> int: ...


class WhirlpoolPriceMath:
    """PriceMath 기본 구현 (정수 연산 Q64.64)"""

    def tick_index_to_sqrt_price(self, tick_index: int) -> int:
        return tick_index_to_sqrt_price_x64(tick_index)

    def tick_index_to_price(self, tick_index: int, decimals_a: int, decimals_b: int) -> Decimal:
        return tick_index_to_price(tick_index, decimals_a, decimals_b)

    def amount_delta_a(self, sqrt_price_0: int, sqrt_price_1: int, liquidity: int, round_up: bool) -> int:
        return get_amount_delta_a(sqrt_price_0, sqrt_price_1, liquidity, round_up)

    def amount_delta_b(self, sqrt_price_0: int, sqrt_price_1: int, liquidity: int, round_up: bool) -> int:
        return get_amount_delta_b(sqrt_price_0, sqrt_price_1, liquidity, round_up)


DEFAULT_PRICE_MATH = WhirlpoolPriceMath()
