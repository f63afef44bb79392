"""
Tick Array 조회 - 틱 → 틱 배열 정렬, 틱 조회, 주변 배열 윈도우

틱 배열 시작 인덱스 계산(정렬 규칙)은 이 모듈의 get_start_tick_index에만 있습니다.
시뮬레이터는 모두 lookup_tick을 통해서만 틱을 조회합니다.
"""

from typing import Iterable, List, Optional, Tuple

from ..constants import TICK_ARRAY_SIZE, MIN_TICK_INDEX, MAX_TICK_INDEX
from ..math.tick_math import get_full_range_tick_indexes
from .types import TickArray, TickData


def ticks_per_array(tick_spacing: int) -> int:
    """틱 배열 하나가 덮는 틱 범위"""
    return tick_spacing * TICK_ARRAY_SIZE


def get_start_tick_index(tick_index: int, tick_spacing: int, offset: int = 0) -> int:
    """틱을 포함하는 틱 배열의 시작 인덱스

    음수 틱도 -inf 방향으로 내림하여 정렬합니다.

    Args:
        tick_index: 틱 인덱스
        tick_spacing: 틱 간격
        offset: 배열 단위 오프셋 (1이면 다음 배열, -1이면 이전 배열)

    Returns:
        tick_spacing * TICK_ARRAY_SIZE의 배수인 시작 인덱스
    """
    size = ticks_per_array(tick_spacing)
    return (tick_index // size + offset) * size


def lookup_tick(
    tick_index: int,
    tick_spacing: int,
    tick_arrays: Iterable[Optional[TickArray]]
) -> Optional[TickData]:
    """로드된 틱 배열들에서 틱 조회

    Args:
        tick_index: 틱 인덱스
        tick_spacing: 틱 간격
        tick_arrays: 로드된 틱 배열 (None은 로드되지 않은 배열)

    Returns:
        TickData (배열에 기록이 없으면 liquidity_net = 0인 틱),
        해당 배열이 로드되지 않았으면 None
    """
    start_tick_index = get_start_tick_index(tick_index, tick_spacing)
    for tick_array in tick_arrays:
        if tick_array is not None and tick_array.start_tick_index == start_tick_index:
            return tick_array.get_tick(tick_index, tick_spacing)
    return None


def neighboring_start_tick_indexes(
    tick_current_index: int,
    tick_spacing: int,
    radius: int,
    min_tick_index: int = MIN_TICK_INDEX,
    max_tick_index: int = MAX_TICK_INDEX
) -> List[int]:
    """현재 틱 주변 ±radius 개 틱 배열의 시작 인덱스 (오름차순)

    프로토콜 틱 범위 밖의 배열은 건너뜁니다.

    Args:
        tick_current_index: 현재 틱
        tick_spacing: 틱 간격
        radius: 현재 배열 기준 양쪽 배열 수
        min_tick_index: 프로토콜 최소 틱
        max_tick_index: 프로토콜 최대 틱

    Returns:
        시작 인덱스 목록
    """
    size = ticks_per_array(tick_spacing)
    start_tick_indexes = []
    for offset in range(-radius, radius + 1):
        start_tick_index = get_start_tick_index(tick_current_index, tick_spacing, offset)
        if start_tick_index + size <= min_tick_index:
            continue
        if start_tick_index > max_tick_index:
            continue
        start_tick_indexes.append(start_tick_index)
    return start_tick_indexes


def full_range_start_tick_indexes(
    tick_spacing: int,
    min_tick_index: int = MIN_TICK_INDEX,
    max_tick_index: int = MAX_TICK_INDEX
) -> Tuple[int, int]:
    """전체 범위 포지션 양 끝 틱을 담는 (최저, 최고) 틱 배열 시작 인덱스"""
    lower, upper = get_full_range_tick_indexes(tick_spacing, min_tick_index, max_tick_index)
    return (
        get_start_tick_index(lower, tick_spacing),
        get_start_tick_index(upper, tick_spacing),
    )
