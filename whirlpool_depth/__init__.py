"""
Whirlpool Tradable Liquidity Simulator

집중화된 유동성 풀에서 현재 가격 위/아래로 유동성이 소진되기 전까지
거래 가능한 토큰 수량을 틱 단위로 시뮬레이션하는 라이브러리.
"""

__version__ = "0.1.0"

from .constants import Q64, TICK_ARRAY_SIZE, MIN_TICK_INDEX, MAX_TICK_INDEX
from .data.types import PoolState, TickData, TickArray
from .simulation import simulate_steps, simulate_buckets, UnknownTickPolicy
from .report import TradableReport, build_tradable_report
