"""
Tick Array 조회 테스트

틱 배열 정렬, 틱 조회, 주변/전체 범위 윈도우, 스냅샷 공급자를 테스트합니다.
"""

import pytest

from ..data.tick_arrays import (
    ticks_per_array,
    get_start_tick_index,
    lookup_tick,
    neighboring_start_tick_indexes,
    full_range_start_tick_indexes,
)
from ..data.source import SnapshotTickArraySource
from ..data.types import TickArray, TickData
from .factories import TICK_SPACING, TICKS_PER_ARRAY, WINDOW, make_tick_array, make_window


class TestGetStartTickIndex:
    """get_start_tick_index 테스트"""

    def test_ticks_per_array(self):
        assert ticks_per_array(TICK_SPACING) == TICKS_PER_ARRAY
        assert ticks_per_array(1) == 88

    def test_positive(self):
        assert get_start_tick_index(1000, TICK_SPACING) == 0
        assert get_start_tick_index(5631, TICK_SPACING) == 0
        assert get_start_tick_index(5632, TICK_SPACING) == 5632

    def test_negative_floors(self):
        """음수 틱은 -inf 방향으로 정렬"""
        assert get_start_tick_index(-1, TICK_SPACING) == -5632
        assert get_start_tick_index(-5632, TICK_SPACING) == -5632
        assert get_start_tick_index(-5633, TICK_SPACING) == -11264

    def test_offset(self):
        assert get_start_tick_index(1000, TICK_SPACING, 1) == 5632
        assert get_start_tick_index(1000, TICK_SPACING, -2) == -11264


class TestLookupTick:
    """lookup_tick, TickArray.get_tick 테스트"""

    def test_known_tick(self):
        """기록이 있는 틱은 그대로 반환"""
        tick_arrays = make_window(nets={1088: 500})
        tick = lookup_tick(1088, TICK_SPACING, tick_arrays)
        assert tick.liquidity_net == 500
        assert tick.initialized

    def test_empty_tick(self):
        """로드된 배열에 기록이 없는 틱은 liquidity_net = 0"""
        tick = lookup_tick(1024, TICK_SPACING, make_window())
        assert tick == TickData.empty(1024)

    def test_unknown_array(self):
        """배열이 로드되지 않았으면 None"""
        tick_arrays = make_window(unknown=(5632,))
        assert lookup_tick(5696, TICK_SPACING, tick_arrays) is None
        assert lookup_tick(20000, TICK_SPACING, tick_arrays) is None

    def test_no_arrays(self):
        assert lookup_tick(0, TICK_SPACING, []) is None

    def test_negative_tick(self):
        tick_arrays = make_window(nets={-64: -300})
        assert lookup_tick(-64, TICK_SPACING, tick_arrays).liquidity_net == -300

    def test_get_tick_out_of_range(self):
        """배열 범위 밖 틱은 ValueError"""
        tick_array = make_tick_array(0)
        with pytest.raises(ValueError):
            tick_array.get_tick(TICKS_PER_ARRAY, TICK_SPACING)
        with pytest.raises(ValueError):
            tick_array.get_tick(-TICK_SPACING, TICK_SPACING)


class TestWindows:
    """neighboring_start_tick_indexes, full_range_start_tick_indexes 테스트"""

    def test_neighboring(self):
        assert neighboring_start_tick_indexes(1000, TICK_SPACING, 2) == WINDOW

    def test_neighboring_radius_0(self):
        assert neighboring_start_tick_indexes(1000, TICK_SPACING, 0) == [0]

    def test_neighboring_near_min(self):
        """프로토콜 범위 밖 배열은 제외"""
        assert neighboring_start_tick_indexes(-443000, TICK_SPACING, 2) == [-444928, -439296, -433664]

    def test_neighboring_near_max(self):
        assert neighboring_start_tick_indexes(443000, TICK_SPACING, 2) == [428032, 433664, 439296]

    def test_full_range(self):
        assert full_range_start_tick_indexes(TICK_SPACING) == (-444928, 439296)


class TestSnapshotTickArraySource:
    """SnapshotTickArraySource 테스트"""

    def test_get_tick_arrays(self):
        source = SnapshotTickArraySource([make_tick_array(0), make_tick_array(5632)])
        arrays = source.get_tick_arrays([-5632, 0, 5632])
        assert arrays[0] is None
        assert arrays[1].start_tick_index == 0
        assert arrays[2].start_tick_index == 5632
        assert len(source) == 2

    def test_refs(self):
        """주소가 있으면 주소, 없으면 풀 주소:시작 인덱스"""
        source = SnapshotTickArraySource(
            [TickArray(start_tick_index=0, address="array0")],
            pool_address="pool",
        )
        assert source.tick_array_ref(0) == "array0"
        assert source.tick_array_ref(5632) == "pool:5632"

    def test_duplicate(self):
        with pytest.raises(ValueError):
            SnapshotTickArraySource([make_tick_array(0), make_tick_array(0)])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
