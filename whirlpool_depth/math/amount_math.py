"""
Amount Math - 유동성 → 토큰 수량 변화량

두 sqrtPrice 사이에서 주어진 유동성으로 거래 가능한 토큰 수량.
결과는 u64 범위를 넘으면 AmountOverflowError를 발생시킵니다.

핵심 공식 (Q64.64):
    Δa = L * (√P_upper - √P_lower) * 2^64 / (√P_lower * √P_upper)
    Δb = L * (√P_upper - √P_lower) / 2^64
"""

from ..constants import Q64
from .fixed_point import check_u64


def get_amount_delta_a(
    sqrt_price_0: int,
    sqrt_price_1: int,
    liquidity: int,
    round_up: bool
) -> int:
    """유동성에서 token A 변화량 계산

    Args:
        sqrt_price_0: sqrtPriceX64 (순서 무관)
        sqrt_price_1: sqrtPriceX64 (순서 무관)
        liquidity: 유동성
        round_up: True면 올림, False면 내림

    Returns:
        amount A (최소 단위)

    Raises:
        AmountOverflowError: 결과가 u64 범위를 초과한 경우
    """
    sqrt_price_lower, sqrt_price_upper = sorted((sqrt_price_0, sqrt_price_1))
    if sqrt_price_lower == sqrt_price_upper:
        return 0
    if sqrt_price_lower <= 0:
        raise ValueError(f"sqrtPrice는 양수여야 합니다: {sqrt_price_lower}")

    numerator = (liquidity * (sqrt_price_upper - sqrt_price_lower)) << 64
    denominator = sqrt_price_lower * sqrt_price_upper

    if round_up:
        return check_u64(_div_rounding_up(numerator, denominator))
    return check_u64(numerator // denominator)


def get_amount_delta_b(
    sqrt_price_0: int,
    sqrt_price_1: int,
    liquidity: int,
    round_up: bool
) -> int:
    """유동성에서 token B 변화량 계산

    Args:
        sqrt_price_0: sqrtPriceX64 (순서 무관)
        sqrt_price_1: sqrtPriceX64 (순서 무관)
        liquidity: 유동성
        round_up: True면 올림, False면 내림

    Returns:
        amount B (최소 단위)

    Raises:
        AmountOverflowError: 결과가 u64 범위를 초과한 경우
    """
    sqrt_price_lower, sqrt_price_upper = sorted((sqrt_price_0, sqrt_price_1))
    product = liquidity * (sqrt_price_upper - sqrt_price_lower)

    if round_up:
        return check_u64(_div_rounding_up(product, Q64))
    return check_u64(product // Q64)


def _div_rounding_up(numerator: int, denominator: int) -> int:
    """numerator / denominator 올림"""
    result = numerator // denominator
    if numerator % denominator > 0:
        result += 1
    return result
