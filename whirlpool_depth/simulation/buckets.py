"""
Per-tick-array simulator

연속된 틱 배열 윈도우 전체를 틱 단위로 순회하며
틱 배열별로 거래 가능한 총 수량을 합산합니다.

현재 틱을 담은 배열부터 윈도우 끝까지가 위 방향,
현재 배열부터 윈도우 시작까지가 아래 방향입니다.
로드되지 않은 배열의 틱은 liquidity_net = 0으로 보고 계속 순회합니다 (ZERO_FILL_UNKNOWN).
"""

import logging
from typing import List, Optional, Sequence, Tuple

from ..constants import MIN_TICK_INDEX, MAX_TICK_INDEX
from ..data.tick_arrays import get_start_tick_index, ticks_per_array
from ..data.types import PoolState, TickArray, TickArrayTradableAmount, TickArrayTradableAmounts
from ..math import DEFAULT_PRICE_MATH, PriceMath, add_liquidity_net, sub_liquidity_net, to_decimal
from ..math.tick_math import get_initializable_tick_index
from .policies import UnknownTickPolicy, amount_deltas, resolve_tick, tick_array_start_price

logger = logging.getLogger(__name__)


class TickArrayWindowError(ValueError):
    """틱 배열 윈도우가 연속/오름차순이 아니거나 현재 틱을 포함하지 않음"""
    pass


def simulate_buckets(
    pool: PoolState,
    start_tick_indexes: Sequence[int],
    tick_array_refs: Sequence[str],
    tick_arrays: Sequence[Optional[TickArray]],
    decimals_a: int,
    decimals_b: int,
    min_tick_index: int = MIN_TICK_INDEX,
    max_tick_index: int = MAX_TICK_INDEX,
    price_math: PriceMath = DEFAULT_PRICE_MATH
) -> TickArrayTradableAmounts:
    """틱 배열별 거래 가능 수량 계산

    Args:
        pool: 풀 상태 스냅샷
        start_tick_indexes: 윈도우 틱 배열 시작 인덱스 (오름차순, 연속)
        tick_array_refs: 각 틱 배열의 식별자 (start_tick_indexes와 같은 순서)
        tick_arrays: 각 틱 배열 데이터, 로드되지 않았으면 None
        decimals_a: token A 소수점 자릿수
        decimals_b: token B 소수점 자릿수
        min_tick_index: 아래 방향 순회 하한
        max_tick_index: 위 방향 순회 상한
        price_math: 고정소수점 수학 구현

    Returns:
        TickArrayTradableAmounts (방향별 윈도우 배열 수만큼 기록)

    Raises:
        TickArrayWindowError: 윈도우 형식이 잘못된 경우
        WhirlpoolMathError: 고정소수점 연산 범위 초과
    """
    start_tick_indexes = list(start_tick_indexes)
    tick_array_refs = list(tick_array_refs)
    tick_arrays = list(tick_arrays)
    current = _locate_current_tick_array(pool, start_tick_indexes, tick_array_refs, tick_arrays)

    size = ticks_per_array(pool.tick_spacing)
    current_start = start_tick_indexes[current]
    upward_positions = list(range(current, len(start_tick_indexes)))
    downward_positions = list(range(current, -1, -1))

    upward_last_tick_index = min(max_tick_index, current_start + len(upward_positions) * size)
    downward_last_tick_index = max(min_tick_index, current_start - (len(downward_positions) - 1) * size)

    upward_totals = _accumulate(
        pool, tick_arrays, len(upward_positions), upward_last_tick_index, True, price_math
    )
    downward_totals = _accumulate(
        pool, tick_arrays, len(downward_positions), downward_last_tick_index, False, price_math
    )

    def build(positions: List[int], totals: List[Tuple[int, int]]) -> List[TickArrayTradableAmount]:
        records = []
        for position, (amount_a, amount_b) in zip(positions, totals):
            start = start_tick_indexes[position]
            records.append(TickArrayTradableAmount(
                tick_array_ref=tick_array_refs[position],
                start_tick_index=start,
                start_price=tick_array_start_price(
                    start, decimals_a, decimals_b, price_math
                ),
                tick_array=tick_arrays[position],
                amount_a=to_decimal(amount_a, decimals_a),
                amount_b=to_decimal(amount_b, decimals_b),
            ))
        return records

    return TickArrayTradableAmounts(
        upward=build(upward_positions, upward_totals),
        downward=build(downward_positions, downward_totals),
    )


def _accumulate(
    pool: PoolState,
    tick_arrays: List[Optional[TickArray]],
    count: int,
    last_tick_index: int,
    upward: bool,
    price_math: PriceMath
) -> List[Tuple[int, int]]:
    """한 방향으로 last_tick_index까지 순회하며 배열별 (amount A, amount B) 합산

    후보 틱이 배열 경계(ticks_per_array의 배수)이면 그 스텝까지 더한 뒤 다음 배열로 넘어갑니다.
    """
    spacing = pool.tick_spacing
    size = ticks_per_array(spacing)
    lower_initializable = get_initializable_tick_index(pool.tick_current_index, spacing)
    first_tick_index = lower_initializable + spacing if upward else lower_initializable
    step = spacing if upward else -spacing

    totals_a = [0] * count
    totals_b = [0] * count
    position = 0
    sqrt_price = pool.sqrt_price
    liquidity = pool.liquidity
    next_tick_index = first_tick_index
    while _within(next_tick_index, last_tick_index, upward):
        next_sqrt_price = price_math.tick_index_to_sqrt_price(next_tick_index)
        amount_a, amount_b = amount_deltas(sqrt_price, next_sqrt_price, liquidity, upward, price_math)
        totals_a[position] += amount_a
        totals_b[position] += amount_b

        next_tick = resolve_tick(next_tick_index, spacing, tick_arrays, UnknownTickPolicy.ZERO_FILL_UNKNOWN)
        if upward:
            liquidity = add_liquidity_net(liquidity, next_tick.liquidity_net)
        else:
            liquidity = sub_liquidity_net(liquidity, next_tick.liquidity_net)
        sqrt_price = next_sqrt_price
        if next_tick_index % size == 0:
            position += 1
        next_tick_index += step

    logger.debug(
        "%s: accumulated %d tick arrays up to tick %d",
        "upward" if upward else "downward", count, last_tick_index
    )
    return list(zip(totals_a, totals_b))


def _within(tick_index: int, last_tick_index: int, upward: bool) -> bool:
    return tick_index <= last_tick_index if upward else tick_index >= last_tick_index


def _locate_current_tick_array(
    pool: PoolState,
    start_tick_indexes: List[int],
    tick_array_refs: List[str],
    tick_arrays: List[Optional[TickArray]]
) -> int:
    """윈도우 검증 후 현재 틱을 담은 배열의 위치 반환

    Raises:
        TickArrayWindowError: 길이 불일치, 정렬/연속성 위반, 현재 배열 누락
    """
    if not start_tick_indexes:
        raise TickArrayWindowError("틱 배열 윈도우가 비어 있습니다")
    if not len(start_tick_indexes) == len(tick_array_refs) == len(tick_arrays):
        raise TickArrayWindowError(
            f"윈도우 길이 불일치: start_tick_indexes={len(start_tick_indexes)}, "
            f"tick_array_refs={len(tick_array_refs)}, tick_arrays={len(tick_arrays)}"
        )

    size = ticks_per_array(pool.tick_spacing)
    for i, start in enumerate(start_tick_indexes):
        if start % size != 0:
            raise TickArrayWindowError(f"틱 배열 시작 인덱스가 {size}의 배수가 아닙니다: {start}")
        if i > 0 and start - start_tick_indexes[i - 1] != size:
            raise TickArrayWindowError(
                f"틱 배열 윈도우가 연속된 오름차순이 아닙니다: {start_tick_indexes[i - 1]} → {start}"
            )
        tick_array = tick_arrays[i]
        if tick_array is not None and tick_array.start_tick_index != start:
            raise TickArrayWindowError(
                f"틱 배열 데이터가 시작 인덱스와 다릅니다: {tick_array.start_tick_index} != {start}"
            )

    current_start = get_start_tick_index(pool.tick_current_index, pool.tick_spacing)
    if not start_tick_indexes[0] <= current_start <= start_tick_indexes[-1]:
        raise TickArrayWindowError(
            f"현재 틱 {pool.tick_current_index}을(를) 담은 배열 {current_start}이(가) 윈도우에 없습니다"
        )
    return (current_start - start_tick_indexes[0]) // size
