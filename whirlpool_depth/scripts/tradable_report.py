#!/usr/bin/env python3
"""
Tradable Report - 스냅샷 파일의 거래 가능 수량 출력

Usage:
    # 기본 (위/아래 모두, 설정 기본값)
    python -m whirlpool_depth.scripts.tradable_report --snapshot pool.json

    # 스텝 수 / 주변 틱 배열 수 지정
    python -m whirlpool_depth.scripts.tradable_report --snapshot pool.json --max-steps 20 --radius 3

    # 위 방향만
    whirlpool-report --snapshot pool.json --direction up
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from ..config import Settings, settings
from ..data.schemas import load_snapshot
from ..data.source import SnapshotTickArraySource
from ..data.types import TickArrayTradableAmount, TradableAmount
from ..report import TradableReport, build_tradable_report

logger = logging.getLogger(__name__)


def print_step_table(title: str, amounts: List[TradableAmount], error: bool) -> None:
    """스텝별 거래 가능 수량 표 출력"""
    print(f"\n{title}")
    print("-" * 80)
    if error:
        print("  error computing tradable amounts")
        return
    if not amounts:
        print("  (no tradable steps)")
        return
    print(f"  {'tick':>10}  {'price':>24}  {'amount A':>18}  {'amount B':>18}")
    for amount in amounts:
        print(f"  {amount.tick_index:>10}  {str(amount.price):>24}  "
              f"{str(amount.amount_a):>18}  {str(amount.amount_b):>18}")


def print_tick_array_table(title: str, amounts: List[TickArrayTradableAmount], error: bool) -> None:
    """틱 배열별 거래 가능 수량 표 출력"""
    print(f"\n{title}")
    print("-" * 80)
    if error:
        print("  error computing tradable amounts")
        return
    print(f"  {'start':>10}  {'start price':>24}  {'known':>5}  {'amount A':>18}  {'amount B':>18}")
    for amount in amounts:
        known = "yes" if amount.is_known else "no"
        print(f"  {amount.start_tick_index:>10}  {str(amount.start_price):>24}  {known:>5}  "
              f"{str(amount.amount_a):>18}  {str(amount.amount_b):>18}")


def print_report(report: TradableReport, direction: str = "both") -> None:
    """리포트 전체 출력"""
    pool = report.pool
    print("=" * 80)
    print(f"Pool: {pool.address or '<unnamed>'}")
    print(f"  tick spacing: {pool.tick_spacing}, current tick: {pool.tick_current_index}")
    print(f"  price: {report.price} (inverted: {report.inverted_price})")
    print(f"  liquidity: {pool.liquidity}")
    print(f"  fee rate: {report.fee_rate}% (protocol: {report.protocol_fee_rate}%)")
    print("=" * 80)

    steps = report.tradable_amounts
    arrays = report.tick_array_tradable_amounts
    if direction in ("up", "both"):
        print_step_table("Tradable amounts (upward)", steps.upward, steps.error)
    if direction in ("down", "both"):
        print_step_table("Tradable amounts (downward)", steps.downward, steps.error)
    if direction in ("up", "both"):
        print_tick_array_table("Tick array tradable amounts (upward)", arrays.upward, arrays.error)
    if direction in ("down", "both"):
        print_tick_array_table("Tick array tradable amounts (downward)", arrays.downward, arrays.error)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Print tradable liquidity around the current price')
    parser.add_argument('--snapshot', type=str, required=True, help='Pool snapshot JSON file')
    parser.add_argument('--max-steps', type=int, default=settings.MAX_STEPS, help='Steps per direction')
    parser.add_argument('--radius', type=int, default=settings.NEIGHBORING_TICK_ARRAYS,
                        help='Tick arrays on each side of the current one')
    parser.add_argument('--direction', choices=['up', 'down', 'both'], default='both')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        snapshot = load_snapshot(args.snapshot)
    except (OSError, ValueError, ValidationError) as e:
        logger.error(f"Failed to load snapshot {args.snapshot}: {e}")
        return 1

    pool = snapshot.pool.to_pool_state()
    source = SnapshotTickArraySource(
        [t.to_tick_array() for t in snapshot.tick_arrays],
        pool_address=pool.address,
    )
    report = build_tradable_report(
        pool,
        source,
        snapshot.pool.decimals_a,
        snapshot.pool.decimals_b,
        settings=Settings(MAX_STEPS=args.max_steps, NEIGHBORING_TICK_ARRAYS=args.radius),
    )
    print_report(report, args.direction)
    return 0


if __name__ == "__main__":
    sys.exit(main())
