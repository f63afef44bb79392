"""
Tick Math - Tick ↔ sqrtPrice 변환

Whirlpool의 틱 수학 함수들. Orca SDK와 같은 정수 연산으로 구현.

핵심 공식:
    price = 1.0001^tick
    sqrtPriceX64 = sqrt(price) * 2^64

양수 틱은 Q96 테이블 후 >> 32, 음수 틱은 Q128 테이블 후 >> 64로 계산하므로
MIN_TICK_INDEX / MAX_TICK_INDEX에서 MIN_SQRT_PRICE / MAX_SQRT_PRICE와 정확히 일치합니다.
"""

from typing import Tuple

from ..constants import Q128, MIN_TICK_INDEX, MAX_TICK_INDEX

# 비트 테이블이 다룰 수 있는 |tick| 상한 (2^19 미만)
TICK_BIT_LIMIT: int = 1 << 19

Q96: int = 2 ** 96

# 양수 틱: sqrt(1.0001^(2^i)) * 2^96
_POSITIVE_RATIOS = (
    (0x2, 79236085330515764027303304731),
    (0x4, 79244008939048815603706035061),
    (0x8, 79259858533276714757314932305),
    (0x10, 79291567232598584799939703904),
    (0x20, 79355022692464371645785046466),
    (0x40, 79482085999252804386437311141),
    (0x80, 79736823300114093921829183326),
    (0x100, 80248749790819932309965073892),
    (0x200, 81282483887344747381513967011),
    (0x400, 83390072131320151908154831281),
    (0x800, 87770609709833776024991924138),
    (0x1000, 97234110755111693312479820773),
    (0x2000, 119332217159966728226237229890),
    (0x4000, 179736315981702064433883588727),
    (0x8000, 407748233172238350107850275304),
    (0x10000, 2098478828474011932436660412517),
    (0x20000, 55581415166113811149459800483533),
    (0x40000, 38992368544603139932233054999993551),
)

# 음수 틱: 2^128 / sqrt(1.0001^(2^i))
_NEGATIVE_RATIOS = (
    (0x2, 0xfff97272373d413259a46990580e213a),
    (0x4, 0xfff2e50f5f656932ef12357cf3c7fdcc),
    (0x8, 0xffe5caca7e10e4e61c3624eaa0941cd0),
    (0x10, 0xffcb9843d60f6159c9db58835c926644),
    (0x20, 0xff973b41fa98c081472e6896dfb254c0),
    (0x40, 0xff2ea16466c96a3843ec78b326b52861),
    (0x80, 0xfe5dee046a99a2a811c461f1969c3053),
    (0x100, 0xfcbe86c7900a88aedcffc83b479aa3a4),
    (0x200, 0xf987a7253ac413176f2b074cf7815e54),
    (0x400, 0xf3392b0822b70005940c7a398e4b70f3),
    (0x800, 0xe7159475a2c29b7443b29c7fa6e889d9),
    (0x1000, 0xd097f3bdfd2022b8845ad8f792aa5825),
    (0x2000, 0xa9f746462d870fdf8a65dc1f90e061e5),
    (0x4000, 0x70d869a156d2a1b890bb3df62baf32f7),
    (0x8000, 0x31be135f97d08fd981231505542fcfa6),
    (0x10000, 0x9aa508b5b7a84e1c677de54f3e99bc9),
    (0x20000, 0x5d6af8dedb81196699c329225ee604),
    (0x40000, 0x2216e584f5fa1ea926041bedfe98),
)


def tick_index_to_sqrt_price_x64(tick_index: int) -> int:
    """틱에서 sqrtPriceX64 계산

    부동소수점 연산은 사용하지 않습니다.
    프로토콜 범위 밖이라도 |tick| < 2^19이면 계산합니다 (틱 배열 시작 인덱스 가격 등).

    Args:
        tick_index: 틱 인덱스

    Returns:
        sqrtPriceX64 (Q64.64 형식)

    Raises:
        ValueError: |tick| >= 2^19인 경우
    """
    if abs(tick_index) >= TICK_BIT_LIMIT:
        raise ValueError(
            f"틱이 계산 가능 범위를 벗어났습니다: {tick_index} (|tick| < {TICK_BIT_LIMIT})"
        )
    if tick_index >= 0:
        return _sqrt_price_positive_tick(tick_index)
    return _sqrt_price_negative_tick(-tick_index)


def _sqrt_price_positive_tick(tick: int) -> int:
    ratio = 79232123823359799118286999567 if tick & 0x1 else Q96
    for bit, multiplier in _POSITIVE_RATIOS:
        if tick & bit:
            ratio = (ratio * multiplier) >> 96
    # Q96 -> Q64
    return ratio >> 32


def _sqrt_price_negative_tick(abs_tick: int) -> int:
    ratio = 0xfffcb933bd6fad37aa2d162d1a594001 if abs_tick & 0x1 else Q128
    for bit, multiplier in _NEGATIVE_RATIOS:
        if abs_tick & bit:
            ratio = (ratio * multiplier) >> 128
    # Q128 -> Q64
    return ratio >> 64


def get_initializable_tick_index(tick_index: int, tick_spacing: int) -> int:
    """틱 이하에서 가장 가까운 초기화 가능한 틱

    음수 틱도 -inf 방향으로 내림합니다 (Python floor division).

    Args:
        tick_index: 틱 인덱스
        tick_spacing: 틱 간격

    Returns:
        tick_spacing의 배수인 틱
    """
    return (tick_index // tick_spacing) * tick_spacing


def get_full_range_tick_indexes(
    tick_spacing: int,
    min_tick_index: int = MIN_TICK_INDEX,
    max_tick_index: int = MAX_TICK_INDEX
) -> Tuple[int, int]:
    """전체 범위 포지션에 쓰이는 (최저, 최고) 초기화 가능 틱

    Args:
        tick_spacing: 틱 간격
        min_tick_index: 프로토콜 최소 틱
        max_tick_index: 프로토콜 최대 틱

    Returns:
        (min_initializable_tick, max_initializable_tick)
    """
    lower = -((-min_tick_index) // tick_spacing) * tick_spacing
    upper = (max_tick_index // tick_spacing) * tick_spacing
    return lower, upper
