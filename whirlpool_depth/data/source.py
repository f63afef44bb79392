"""
Tick Array Source - 틱 배열 공급자

시뮬레이션에 필요한 틱 배열을 시작 인덱스 목록으로 요청합니다.
네트워크 조회는 이 패키지 밖의 구현이 담당하고,
여기서는 인터페이스와 스냅샷 기반 구현만 제공합니다.
"""

from typing import Dict, Iterable, List, Optional, Protocol, Sequence

from .types import TickArray


class TickArraySource(Protocol):
    """틱 배열 공급자 인터페이스"""

    def get_tick_arrays(self, start_tick_indexes: Sequence[int]) -> List[Optional[TickArray]]:
        """요청 순서대로 틱 배열 반환 (없는 배열은 None)"""
        ...

    def tick_array_ref(self, start_tick_index: int) -> str:
        """틱 배열 계정 식별자"""
        ...


class SnapshotTickArraySource:
    """메모리 스냅샷에서 틱 배열을 제공

    사용법:
        source = SnapshotTickArraySource(tick_arrays, pool_address="...")
        arrays = source.get_tick_arrays([-5632, 0, 5632])
    """

    def __init__(self, tick_arrays: Iterable[TickArray], pool_address: str = ""):
        """
        Args:
            tick_arrays: 로드된 틱 배열 목록
            pool_address: 주소가 없는 배열의 식별자 접두사
        """
        self.pool_address = pool_address
        self._tick_arrays: Dict[int, TickArray] = {}
        for tick_array in tick_arrays:
            if tick_array.start_tick_index in self._tick_arrays:
                raise ValueError(f"중복된 틱 배열: {tick_array.start_tick_index}")
            self._tick_arrays[tick_array.start_tick_index] = tick_array

    def get_tick_arrays(self, start_tick_indexes: Sequence[int]) -> List[Optional[TickArray]]:
        return [self._tick_arrays.get(start) for start in start_tick_indexes]

    def tick_array_ref(self, start_tick_index: int) -> str:
        tick_array = self._tick_arrays.get(start_tick_index)
        if tick_array is not None and tick_array.address:
            return tick_array.address
        return f"{self.pool_address}:{start_tick_index}"

    def __len__(self) -> int:
        return len(self._tick_arrays)
