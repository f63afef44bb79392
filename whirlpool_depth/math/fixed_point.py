"""
Fixed Point - u64 / u128 범위 검사 정수 연산

온체인 타입(u64 토큰 수량, u128 유동성)의 범위를 벗어나는 값은
조용히 잘리지 않고 예외로 올라갑니다.
"""

from decimal import Decimal

from ..constants import U64_MAX, U128_MAX, I128_MIN, I128_MAX


class WhirlpoolMathError(ArithmeticError):
    """고정소수점 연산 오류"""
    pass


class AmountOverflowError(WhirlpoolMathError):
    """토큰 수량이 u64 범위를 초과"""
    pass


class LiquidityOverflowError(WhirlpoolMathError):
    """유동성이 u128 범위를 초과"""
    pass


class LiquidityUnderflowError(WhirlpoolMathError):
    """유동성이 음수가 됨"""
    pass


def check_u64(value: int) -> int:
    """u64 범위 검사

    Raises:
        AmountOverflowError: 0 미만이거나 U64_MAX 초과
    """
    if value < 0 or value > U64_MAX:
        raise AmountOverflowError(f"u64 범위를 벗어난 토큰 수량: {value}")
    return value


def add_liquidity_net(liquidity: int, liquidity_net: int) -> int:
    """왼쪽 → 오른쪽으로 틱을 넘을 때 유동성 갱신 (liquidity + liquidity_net)

    Args:
        liquidity: 현재 유동성 (u128)
        liquidity_net: 틱의 순 유동성 변화량 (i128)

    Returns:
        갱신된 유동성

    Raises:
        LiquidityOverflowError: 결과가 U128_MAX 초과
        LiquidityUnderflowError: 결과가 음수
    """
    _check_i128(liquidity_net)
    return _check_u128(liquidity + liquidity_net, f"{liquidity} + ({liquidity_net})")


def sub_liquidity_net(liquidity: int, liquidity_net: int) -> int:
    """오른쪽 → 왼쪽으로 틱을 넘을 때 유동성 갱신 (liquidity - liquidity_net)"""
    _check_i128(liquidity_net)
    return _check_u128(liquidity - liquidity_net, f"{liquidity} - ({liquidity_net})")


def to_decimal(amount: int, decimals: int) -> Decimal:
    """최소 단위 토큰 수량 → Decimal (amount / 10^decimals)"""
    return Decimal(amount).scaleb(-decimals)


def _check_i128(value: int) -> None:
    if value < I128_MIN or value > I128_MAX:
        raise LiquidityOverflowError(f"i128 범위를 벗어난 liquidity_net: {value}")


def _check_u128(value: int, expression: str) -> int:
    if value < 0:
        raise LiquidityUnderflowError(f"유동성 언더플로우: {expression}")
    if value > U128_MAX:
        raise LiquidityOverflowError(f"유동성 오버플로우: {expression}")
    return value
