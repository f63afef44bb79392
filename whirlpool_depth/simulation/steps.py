"""
Per-step simulator

현재 가격에서 위/아래로 초기화 가능한 틱을 하나씩 넘으며
각 스텝까지 거래 가능한 증분 수량을 계산합니다.

틱을 알 수 없을 때 (STOP_ON_UNKNOWN):
- 위 방향: 후보 틱을 1 줄여 로드된 범위 끝까지만 계산한 기록을 남기고 멈춤
- 아래 방향: 기록 없이 바로 멈춤
"""

import logging
from typing import List, Optional, Sequence

from ..data.types import PoolState, TickArray, TradableAmount, TradableAmounts
from ..math import DEFAULT_PRICE_MATH, PriceMath, add_liquidity_net, sub_liquidity_net, to_decimal
from ..math.tick_math import get_initializable_tick_index
from .policies import UnknownTickPolicy, amount_deltas, resolve_tick

logger = logging.getLogger(__name__)

DEFAULT_MAX_STEPS = 10


def simulate_steps(
    pool: PoolState,
    tick_arrays: Sequence[Optional[TickArray]],
    decimals_a: int,
    decimals_b: int,
    max_steps: int = DEFAULT_MAX_STEPS,
    price_math: PriceMath = DEFAULT_PRICE_MATH
) -> TradableAmounts:
    """스텝별 거래 가능 수량 계산

    Args:
        pool: 풀 상태 스냅샷
        tick_arrays: 로드된 틱 배열 (None은 로드되지 않은 배열)
        decimals_a: token A 소수점 자릿수
        decimals_b: token B 소수점 자릿수
        max_steps: 방향별 최대 스텝 수
        price_math: 고정소수점 수학 구현

    Returns:
        TradableAmounts (방향별 최대 max_steps개 기록)

    Raises:
        ValueError: max_steps가 음수인 경우
        WhirlpoolMathError: 고정소수점 연산 범위 초과
    """
    if max_steps < 0:
        raise ValueError(f"max_steps는 0 이상이어야 합니다: {max_steps}")

    tick_arrays = list(tick_arrays)
    return TradableAmounts(
        upward=_walk_upward(pool, tick_arrays, decimals_a, decimals_b, max_steps, price_math),
        downward=_walk_downward(pool, tick_arrays, decimals_a, decimals_b, max_steps, price_math),
    )


def _walk_upward(
    pool: PoolState,
    tick_arrays: List[Optional[TickArray]],
    decimals_a: int,
    decimals_b: int,
    max_steps: int,
    price_math: PriceMath
) -> List[TradableAmount]:
    spacing = pool.tick_spacing
    upper_initializable = get_initializable_tick_index(pool.tick_current_index, spacing) + spacing

    tick_index = pool.tick_current_index
    sqrt_price = pool.sqrt_price
    liquidity = pool.liquidity
    amounts = []
    for i in range(max_steps):
        next_tick_index = upper_initializable + i * spacing
        next_tick = resolve_tick(next_tick_index, spacing, tick_arrays, UnknownTickPolicy.STOP_ON_UNKNOWN)
        if next_tick is None:
            # 로드된 범위의 마지막 지점까지만
            next_tick_index -= 1
        if next_tick_index <= tick_index:
            logger.debug("upward: no progress at tick %d", next_tick_index)
            break

        next_sqrt_price = price_math.tick_index_to_sqrt_price(next_tick_index)
        amounts.append(_tradable_amount(
            next_tick_index, sqrt_price, next_sqrt_price, liquidity, True,
            decimals_a, decimals_b, price_math
        ))

        if next_tick is None:
            logger.debug("upward: stopped at unloaded tick %d", next_tick_index + 1)
            break
        tick_index = next_tick_index
        sqrt_price = next_sqrt_price
        liquidity = add_liquidity_net(liquidity, next_tick.liquidity_net)
    return amounts


def _walk_downward(
    pool: PoolState,
    tick_arrays: List[Optional[TickArray]],
    decimals_a: int,
    decimals_b: int,
    max_steps: int,
    price_math: PriceMath
) -> List[TradableAmount]:
    spacing = pool.tick_spacing
    lower_initializable = get_initializable_tick_index(pool.tick_current_index, spacing)

    sqrt_price = pool.sqrt_price
    liquidity = pool.liquidity
    amounts = []
    for i in range(max_steps):
        next_tick_index = lower_initializable - i * spacing
        next_tick = resolve_tick(next_tick_index, spacing, tick_arrays, UnknownTickPolicy.STOP_ON_UNKNOWN)
        if next_tick is None:
            logger.debug("downward: stopped at unloaded tick %d", next_tick_index)
            break

        next_sqrt_price = price_math.tick_index_to_sqrt_price(next_tick_index)
        amounts.append(_tradable_amount(
            next_tick_index, sqrt_price, next_sqrt_price, liquidity, False,
            decimals_a, decimals_b, price_math
        ))

        sqrt_price = next_sqrt_price
        liquidity = sub_liquidity_net(liquidity, next_tick.liquidity_net)
    return amounts


def _tradable_amount(
    next_tick_index: int,
    sqrt_price: int,
    next_sqrt_price: int,
    liquidity: int,
    upward: bool,
    decimals_a: int,
    decimals_b: int,
    price_math: PriceMath
) -> TradableAmount:
    amount_a, amount_b = amount_deltas(sqrt_price, next_sqrt_price, liquidity, upward, price_math)
    return TradableAmount(
        tick_index=next_tick_index,
        price=price_math.tick_index_to_price(next_tick_index, decimals_a, decimals_b),
        amount_a=to_decimal(amount_a, decimals_a),
        amount_b=to_decimal(amount_b, decimals_b),
    )
