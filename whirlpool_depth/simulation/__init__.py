"""
Tradable-liquidity simulators

- steps: 스텝별 (방향별 최대 max_steps개) 거래 가능 수량
- buckets: 틱 배열 윈도우의 배열별 거래 가능 총 수량
"""

from .policies import UnknownTickPolicy, resolve_tick, amount_deltas, tick_array_start_price
from .steps import simulate_steps, DEFAULT_MAX_STEPS
from .buckets import simulate_buckets, TickArrayWindowError
