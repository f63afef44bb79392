"""
Traversal policies shared by both simulators

- UnknownTickPolicy: 로드되지 않은 배열의 틱을 만났을 때의 처리
- amount_deltas: 이동 방향별 반올림 규칙
"""

from decimal import Decimal
from enum import Enum
from typing import Iterable, Optional, Tuple

from ..data.tick_arrays import lookup_tick
from ..data.types import TickArray, TickData
from ..math import PriceMath


class UnknownTickPolicy(Enum):
    """로드되지 않은 틱 처리 방식

    STOP_ON_UNKNOWN: 스텝 시뮬레이터. 틱을 알 수 없으면 순회를 멈춤
    ZERO_FILL_UNKNOWN: 배열 시뮬레이터. liquidity_net = 0인 틱으로 보고 계속 순회
    """
    STOP_ON_UNKNOWN = "stop_on_unknown"
    ZERO_FILL_UNKNOWN = "zero_fill_unknown"


def resolve_tick(
    tick_index: int,
    tick_spacing: int,
    tick_arrays: Iterable[Optional[TickArray]],
    policy: UnknownTickPolicy
) -> Optional[TickData]:
    """정책에 따라 틱 조회

    Returns:
        TickData, 또는 STOP_ON_UNKNOWN 정책에서 틱을 알 수 없으면 None
    """
    tick = lookup_tick(tick_index, tick_spacing, tick_arrays)
    if tick is None and policy is UnknownTickPolicy.ZERO_FILL_UNKNOWN:
        return TickData.empty(tick_index)
    return tick


def amount_deltas(
    sqrt_price: int,
    next_sqrt_price: int,
    liquidity: int,
    upward: bool,
    price_math: PriceMath
) -> Tuple[int, int]:
    """한 스텝의 (amount A, amount B) 변화량

    가격 상승: A 내림, B 올림
    가격 하락: A 올림, B 내림
    """
    amount_a = price_math.amount_delta_a(sqrt_price, next_sqrt_price, liquidity, not upward)
    amount_b = price_math.amount_delta_b(sqrt_price, next_sqrt_price, liquidity, upward)
    return amount_a, amount_b


def tick_array_start_price(
    start_tick_index: int,
    decimals_a: int,
    decimals_b: int,
    price_math: PriceMath
) -> Decimal:
    """틱 배열 시작 틱의 가격

    양 끝 배열의 시작 인덱스는 프로토콜 틱 범위 밖일 수 있지만 그대로 가격을 계산합니다.
    """
    return price_math.tick_index_to_price(start_tick_index, decimals_a, decimals_b)
