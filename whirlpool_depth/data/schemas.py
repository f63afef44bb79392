"""
Snapshot File Schemas using Pydantic

JSON 스냅샷 파일(풀 상태 + 틱 배열)을 검증하고 dataclass로 변환합니다.
큰 정수(u128)는 JSON 숫자 또는 10진수 문자열 모두 허용합니다.
"""

import json
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, Field, model_validator

from ..constants import TICK_ARRAY_SIZE
from .types import PoolState, TickArray, TickData


class PoolSnapshot(BaseModel):
    """Whirlpool 계정 상태"""
    address: str = Field(default="", description="Whirlpool account address")
    tick_spacing: int = Field(..., description="Tick spacing", gt=0)
    tick_current_index: int = Field(..., description="Current tick index")
    sqrt_price: int = Field(..., description="Current sqrt price (Q64.64)", gt=0)
    liquidity: int = Field(..., description="Active liquidity", ge=0)
    decimals_a: int = Field(..., description="Token A decimals", ge=0, le=30)
    decimals_b: int = Field(..., description="Token B decimals", ge=0, le=30)
    fee_rate: int = Field(default=0, description="Fee rate (hundredths of a basis point)", ge=0, le=1_000_000)
    protocol_fee_rate: int = Field(default=0, description="Protocol fee rate (basis points)", ge=0, le=10_000)

    def to_pool_state(self) -> PoolState:
        return PoolState(
            tick_spacing=self.tick_spacing,
            tick_current_index=self.tick_current_index,
            sqrt_price=self.sqrt_price,
            liquidity=self.liquidity,
            address=self.address,
            decimals_a=self.decimals_a,
            decimals_b=self.decimals_b,
            fee_rate=self.fee_rate,
            protocol_fee_rate=self.protocol_fee_rate,
        )


class TickSnapshot(BaseModel):
    """틱 상태 (기록이 있는 틱만)"""
    tick_index: int
    initialized: bool = True
    liquidity_net: int = 0
    liquidity_gross: int = Field(default=0, ge=0)

    def to_tick_data(self) -> TickData:
        return TickData(
            tick_index=self.tick_index,
            initialized=self.initialized,
            liquidity_net=self.liquidity_net,
            liquidity_gross=self.liquidity_gross,
        )


class TickArraySnapshot(BaseModel):
    """틱 배열 계정"""
    address: Optional[str] = None
    start_tick_index: int
    ticks: List[TickSnapshot] = Field(default_factory=list)

    def to_tick_array(self) -> TickArray:
        return TickArray(
            start_tick_index=self.start_tick_index,
            ticks={t.tick_index: t.to_tick_data() for t in self.ticks},
            address=self.address,
        )


class SnapshotFile(BaseModel):
    """스냅샷 파일 전체"""
    pool: PoolSnapshot
    tick_arrays: List[TickArraySnapshot] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "pool": {
                    "address": "HJPjoWUrhoZzkNfRpHuieeFk9WcZWjwy6PBjZ81ngndJ",
                    "tick_spacing": 64,
                    "tick_current_index": -18223,
                    "sqrt_price": "7456893493342187210",
                    "liquidity": "56012383270742",
                    "decimals_a": 9,
                    "decimals_b": 6,
                    "fee_rate": 3000,
                    "protocol_fee_rate": 1300
                },
                "tick_arrays": [
                    {
                        "start_tick_index": -22528,
                        "ticks": [
                            {"tick_index": -18240, "liquidity_net": "-1200000000"}
                        ]
                    }
                ]
            }
        }

    @model_validator(mode="after")
    def check_tick_arrays(self) -> "SnapshotFile":
        """틱 배열 시작 인덱스 정렬과 틱 위치 검증"""
        spacing = self.pool.tick_spacing
        size = spacing * TICK_ARRAY_SIZE
        seen = set()
        for tick_array in self.tick_arrays:
            start = tick_array.start_tick_index
            if start % size != 0:
                raise ValueError(f"틱 배열 시작 인덱스가 {size}의 배수가 아닙니다: {start}")
            if start in seen:
                raise ValueError(f"중복된 틱 배열: {start}")
            seen.add(start)
            for tick in tick_array.ticks:
                if tick.tick_index % spacing != 0:
                    raise ValueError(f"틱이 tick_spacing의 배수가 아닙니다: {tick.tick_index}")
                if not start <= tick.tick_index < start + size:
                    raise ValueError(f"틱이 배열 범위 밖입니다: start={start}, tick={tick.tick_index}")
        return self


def load_snapshot(path: Union[str, Path]) -> SnapshotFile:
    """JSON 스냅샷 파일 로드

    Raises:
        pydantic.ValidationError: 스키마 검증 실패
    """
    with open(path, "r") as f:
        return SnapshotFile.model_validate(json.load(f))
