"""
Whirlpool 데이터 타입 정의

풀 상태 스냅샷, 틱 배열, 시뮬레이션 결과를 Python dataclass로 정의.
모든 온체인 숫자 필드는 정밀도를 위해 int, 표시용 값은 Decimal 사용.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional

from ..constants import TICK_ARRAY_SIZE


@dataclass(frozen=True)
class PoolState:
    """Whirlpool 상태 스냅샷 (읽기 전용)

    - tick_spacing: 초기화 가능한 틱 간격
    - tick_current_index: 현재 가격 이하의 틱
    - sqrt_price: 현재 √가격 (Q64.64)
    - liquidity: 현재 가격에서 활성화된 유동성 (u128)
    - fee_rate: 스왑 수수료율 (1/100 bp 단위, 3000 = 0.3%)
    - protocol_fee_rate: 스왑 수수료 중 프로토콜 몫 (bp 단위, 300 = 3%)
    """
    tick_spacing: int
    tick_current_index: int
    sqrt_price: int
    liquidity: int
    address: str = ""
    decimals_a: Optional[int] = None
    decimals_b: Optional[int] = None
    fee_rate: int = 0
    protocol_fee_rate: int = 0


@dataclass(frozen=True)
class TickData:
    """틱 상태

    - tick_index: 틱 인덱스 (tick_spacing의 배수)
    - liquidity_net: 왼쪽 → 오른쪽으로 넘을 때 유동성 변화량 (i128)
    - liquidity_gross: 해당 틱을 경계로 하는 총 유동성
    """
    tick_index: int
    initialized: bool = False
    liquidity_net: int = 0
    liquidity_gross: int = 0

    @classmethod
    def empty(cls, tick_index: int) -> "TickData":
        """틱 배열에 기록이 없는 틱 (liquidity_net = 0)"""
        return cls(tick_index=tick_index)


@dataclass(frozen=True)
class TickArray:
    """틱 배열 (TICK_ARRAY_SIZE개의 연속된 틱)

    ticks는 기록이 있는 틱만 담는 sparse 맵입니다.
    기록이 없는 틱은 TickData.empty()로 취급합니다.
    """
    start_tick_index: int
    ticks: Dict[int, TickData] = field(default_factory=dict)
    address: Optional[str] = None

    def get_tick(self, tick_index: int, tick_spacing: int) -> TickData:
        """배열 안의 틱 조회

        Args:
            tick_index: 틱 인덱스
            tick_spacing: 틱 간격

        Returns:
            TickData (기록이 없으면 liquidity_net = 0인 틱)

        Raises:
            ValueError: 틱이 이 배열의 범위 밖인 경우
        """
        offset = (tick_index - self.start_tick_index) // tick_spacing
        if offset < 0 or offset >= TICK_ARRAY_SIZE:
            raise ValueError(
                f"틱이 배열 범위 밖입니다: start={self.start_tick_index}, tick={tick_index}, offset={offset}"
            )
        aligned = self.start_tick_index + offset * tick_spacing
        return self.ticks.get(aligned, TickData.empty(aligned))


@dataclass(frozen=True)
class TradableAmount:
    """한 스텝(틱)까지 거래 가능한 증분 수량"""
    tick_index: int
    price: Decimal
    amount_a: Decimal
    amount_b: Decimal


@dataclass(frozen=True)
class TradableAmounts:
    """스텝별 거래 가능 수량 (위/아래 방향)"""
    upward: List[TradableAmount]
    downward: List[TradableAmount]
    error: bool = False

    @classmethod
    def failed(cls) -> "TradableAmounts":
        """계산 실패 시 대체 결과"""
        return cls(upward=[], downward=[], error=True)


@dataclass(frozen=True)
class TickArrayTradableAmount:
    """틱 배열 하나를 지나는 동안 거래 가능한 총 수량"""
    tick_array_ref: str
    start_tick_index: int
    start_price: Decimal
    tick_array: Optional[TickArray]
    amount_a: Decimal
    amount_b: Decimal

    @property
    def is_known(self) -> bool:
        return self.tick_array is not None


@dataclass(frozen=True)
class TickArrayTradableAmounts:
    """틱 배열별 거래 가능 수량 (위/아래 방향)"""
    upward: List[TickArrayTradableAmount]
    downward: List[TickArrayTradableAmount]
    error: bool = False

    @classmethod
    def failed(cls) -> "TickArrayTradableAmounts":
        """계산 실패 시 대체 결과"""
        return cls(upward=[], downward=[], error=True)


@dataclass(frozen=True)
class NeighboringTickArray:
    """현재 틱 주변의 틱 배열 정보"""
    tick_array_ref: str
    start_tick_index: int
    start_price: Decimal
    is_initialized: bool
    has_tick_current_index: bool


@dataclass(frozen=True)
class FullRangeTickArray:
    """전체 범위 포지션의 양 끝 틱 배열 정보"""
    tick_array_ref: str
    start_tick_index: int
    is_initialized: bool
