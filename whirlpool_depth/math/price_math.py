"""
Price Math - sqrtPriceX64 → human-readable 가격

Whirlpool의 가격은 sqrtPriceX64 형식으로 저장됩니다.
sqrtPriceX64 = sqrt(price) * 2^64

표시용 가격은 float 대신 Decimal로 계산합니다.
"""

from decimal import Decimal, ROUND_HALF_UP, localcontext

from ..constants import Q64, FEE_RATE_DENOMINATOR, PROTOCOL_FEE_RATE_DENOMINATOR
from .tick_math import tick_index_to_sqrt_price_x64

# Decimal 계산 정밀도 (유효 자릿수)
PRICE_PRECISION: int = 60


def sqrt_price_x64_to_price(
    sqrt_price_x64: int,
    decimals_a: int,
    decimals_b: int
) -> Decimal:
    """sqrtPriceX64을 human-readable 가격으로 변환

    가격 = (sqrtPriceX64 / 2^64)^2 * 10^(decimals_a - decimals_b)

    Args:
        sqrt_price_x64: sqrtPriceX64 값
        decimals_a: token A 소수점 자릿수
        decimals_b: token B 소수점 자릿수

    Returns:
        가격 (token B / token A 기준)
    """
    with localcontext() as ctx:
        ctx.prec = PRICE_PRECISION
        sqrt_price = Decimal(sqrt_price_x64) / Decimal(Q64)
        return (sqrt_price * sqrt_price).scaleb(decimals_a - decimals_b)


def to_fixed_decimal(value: Decimal, decimals: int) -> Decimal:
    """소수점 decimals 자리로 반올림 (ROUND_HALF_UP)"""
    with localcontext() as ctx:
        ctx.prec = PRICE_PRECISION
        return value.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def tick_index_to_price(tick_index: int, decimals_a: int, decimals_b: int) -> Decimal:
    """틱 → 가격 (token B / token A), token B 소수점 자릿수로 반올림

    Args:
        tick_index: 틱 인덱스
        decimals_a: token A 소수점 자릿수
        decimals_b: token B 소수점 자릿수

    Returns:
        가격
    """
    price = sqrt_price_x64_to_price(
        tick_index_to_sqrt_price_x64(tick_index), decimals_a, decimals_b
    )
    return to_fixed_decimal(price, decimals_b)


def invert_price(price: Decimal, decimals: int) -> Decimal:
    """역가격 (token A / token B), decimals 자리로 반올림

    Raises:
        ZeroDivisionError: 가격이 0인 경우
    """
    if price == 0:
        raise ZeroDivisionError("가격이 0이면 역가격을 계산할 수 없습니다")
    with localcontext() as ctx:
        ctx.prec = PRICE_PRECISION
        return to_fixed_decimal(Decimal(1) / price, decimals)


def fee_rate_to_percent(fee_rate: int) -> Decimal:
    """수수료율 (1/100 bp 단위) → 퍼센트 (3000 → 0.3)"""
    return Decimal(fee_rate) * 100 / Decimal(FEE_RATE_DENOMINATOR)


def protocol_fee_rate_to_percent(protocol_fee_rate: int) -> Decimal:
    """프로토콜 수수료율 (bp 단위) → 퍼센트 (1300 → 13)"""
    return Decimal(protocol_fee_rate) * 100 / Decimal(PROTOCOL_FEE_RATE_DENOMINATOR)
