"""
Data layer for Whirlpool depth

풀 상태 / 틱 배열 데이터 타입, 틱 조회, 틱 배열 공급자, 스냅샷 스키마
"""

from .types import (
    PoolState,
    TickData,
    TickArray,
    TradableAmount,
    TradableAmounts,
    TickArrayTradableAmount,
    TickArrayTradableAmounts,
    NeighboringTickArray,
    FullRangeTickArray,
)
from .tick_arrays import (
    ticks_per_array,
    get_start_tick_index,
    lookup_tick,
    neighboring_start_tick_indexes,
    full_range_start_tick_indexes,
)
from .source import TickArraySource, SnapshotTickArraySource
from .schemas import SnapshotFile, load_snapshot
