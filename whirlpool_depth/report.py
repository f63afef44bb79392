"""
Tradable Report - 풀 조회 화면용 거래 가능 수량 리포트

현재 틱 주변 틱 배열 윈도우를 만들고, 틱 배열 공급자에서 배열을 받아
두 시뮬레이터를 각각 독립적으로 실행합니다.

시뮬레이터 하나가 실패해도 (오버플로우 등) 해당 섹션만 error=True로 표시하고
리포트의 나머지는 그대로 반환합니다.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from .config import Settings, settings as default_settings
from .data.source import TickArraySource
from .data.tick_arrays import (
    full_range_start_tick_indexes,
    get_start_tick_index,
    neighboring_start_tick_indexes,
)
from .data.types import (
    FullRangeTickArray,
    NeighboringTickArray,
    PoolState,
    TickArrayTradableAmounts,
    TradableAmounts,
)
from .math import DEFAULT_PRICE_MATH, PriceMath
from .math.price_math import (
    fee_rate_to_percent,
    invert_price,
    protocol_fee_rate_to_percent,
    sqrt_price_x64_to_price,
    to_fixed_decimal,
)
from .simulation import simulate_buckets, simulate_steps, tick_array_start_price

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TradableReport:
    """풀 하나의 거래 가능 수량 리포트"""
    pool: PoolState
    decimals_a: int
    decimals_b: int
    price: Decimal  # token B / token A
    inverted_price: Decimal  # token A / token B
    fee_rate: Decimal  # %
    protocol_fee_rate: Decimal  # % of fee_rate
    neighboring_tick_arrays: List[NeighboringTickArray]
    full_range_tick_arrays: List[FullRangeTickArray]
    tradable_amounts: TradableAmounts
    tick_array_tradable_amounts: TickArrayTradableAmounts


def build_tradable_report(
    pool: PoolState,
    source: TickArraySource,
    decimals_a: int,
    decimals_b: int,
    settings: Optional[Settings] = None,
    price_math: PriceMath = DEFAULT_PRICE_MATH
) -> TradableReport:
    """거래 가능 수량 리포트 생성

    Args:
        pool: 풀 상태 스냅샷
        source: 틱 배열 공급자
        decimals_a: token A 소수점 자릿수
        decimals_b: token B 소수점 자릿수
        settings: 시뮬레이션 설정 (None이면 환경변수 기본값)
        price_math: 고정소수점 수학 구현

    Returns:
        TradableReport
    """
    settings = settings or default_settings
    min_tick_index = settings.MIN_TICK_INDEX
    max_tick_index = settings.MAX_TICK_INDEX

    raw_price = sqrt_price_x64_to_price(pool.sqrt_price, decimals_a, decimals_b)

    start_tick_indexes = neighboring_start_tick_indexes(
        pool.tick_current_index,
        pool.tick_spacing,
        settings.NEIGHBORING_TICK_ARRAYS,
        min_tick_index,
        max_tick_index,
    )
    tick_arrays = source.get_tick_arrays(start_tick_indexes)
    tick_array_refs = [source.tick_array_ref(start) for start in start_tick_indexes]
    logger.info(
        "pool %s: loaded %d/%d neighboring tick arrays",
        pool.address or "<unnamed>",
        sum(1 for t in tick_arrays if t is not None),
        len(start_tick_indexes),
    )

    current_start = get_start_tick_index(pool.tick_current_index, pool.tick_spacing)
    neighboring = [
        NeighboringTickArray(
            tick_array_ref=ref,
            start_tick_index=start,
            start_price=tick_array_start_price(
                start, decimals_a, decimals_b, price_math
            ),
            is_initialized=tick_array is not None,
            has_tick_current_index=start == current_start,
        )
        for start, ref, tick_array in zip(start_tick_indexes, tick_array_refs, tick_arrays)
    ]

    full_range_starts = full_range_start_tick_indexes(pool.tick_spacing, min_tick_index, max_tick_index)
    full_range_arrays = source.get_tick_arrays(list(full_range_starts))
    full_range = [
        FullRangeTickArray(
            tick_array_ref=source.tick_array_ref(start),
            start_tick_index=start,
            is_initialized=tick_array is not None,
        )
        for start, tick_array in zip(full_range_starts, full_range_arrays)
    ]

    try:
        tradable_amounts = simulate_steps(
            pool, tick_arrays, decimals_a, decimals_b,
            max_steps=settings.MAX_STEPS,
            price_math=price_math,
        )
    except Exception:
        logger.exception("pool %s: failed to compute tradable amounts", pool.address or "<unnamed>")
        tradable_amounts = TradableAmounts.failed()

    try:
        tick_array_tradable_amounts = simulate_buckets(
            pool, start_tick_indexes, tick_array_refs, tick_arrays, decimals_a, decimals_b,
            min_tick_index=min_tick_index,
            max_tick_index=max_tick_index,
            price_math=price_math,
        )
    except Exception:
        logger.exception("pool %s: failed to compute tick array tradable amounts", pool.address or "<unnamed>")
        tick_array_tradable_amounts = TickArrayTradableAmounts.failed()

    return TradableReport(
        pool=pool,
        decimals_a=decimals_a,
        decimals_b=decimals_b,
        price=to_fixed_decimal(raw_price, decimals_b),
        inverted_price=invert_price(raw_price, decimals_a),
        fee_rate=fee_rate_to_percent(pool.fee_rate),
        protocol_fee_rate=protocol_fee_rate_to_percent(pool.protocol_fee_rate),
        neighboring_tick_arrays=neighboring,
        full_range_tick_arrays=full_range,
        tradable_amounts=tradable_amounts,
        tick_array_tradable_amounts=tick_array_tradable_amounts,
    )
