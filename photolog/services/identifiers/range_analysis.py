"""농도 구간별 범위 차이 분석

M1~M3, Z5/S5, Z6/S6/Z7/S7 중 한 묶음이라도 모두 할당된 경우에만
저/중/고 구간별 최소/최대/차이를 계산합니다.
"""

import logging
from typing import Sequence

from photolog.models.readings import RangeResults, RangeStat, Reading

from .boundaries import calculate_boundaries
from .categorizer import Category, categorize
from .numeric import parse_numeric

logger = logging.getLogger(__name__)

TRIGGER_GROUPS: tuple[frozenset[str], ...] = (
    frozenset({"M1", "M2", "M3"}),
    frozenset({"Z5", "S5"}),
    frozenset({"Z6", "S6", "Z7", "S7"}),
)


def should_analyze(readings: Sequence[Reading]) -> bool:
    """범위 분석 대상인지 (트리거 묶음 중 하나가 모두 존재)"""
    present = {r.identifier for r in readings if r.identifier}
    return any(group <= present for group in TRIGGER_GROUPS)


def _stat(values: list[float]) -> RangeStat | None:
    if not values:
        return None
    lo, hi = min(values), max(values)
    return RangeStat(min=lo, max=hi, diff=hi - lo)


def analyze_ranges(readings: Sequence[Reading] | None) -> RangeResults | None:
    """구간별 범위 통계

    Returns:
        분석 대상이 아니면 None, 경계값이 없으면 모든 구간이 None인 RangeResults
    """
    if not readings or not should_analyze(readings):
        return None

    boundaries = calculate_boundaries(readings)
    if boundaries is None:
        return RangeResults()

    grouped: dict[Category, list[float]] = {Category.LOW: [], Category.MEDIUM: [], Category.HIGH: []}
    for reading in readings:
        number = parse_numeric(reading.value)
        if number is None:
            continue
        category = categorize(reading.value, boundaries)
        if category in grouped:
            grouped[category].append(number)

    results = RangeResults(
        low=_stat(grouped[Category.LOW]),
        medium=_stat(grouped[Category.MEDIUM]),
        high=_stat(grouped[Category.HIGH]),
    )
    logger.debug(f"범위 분석 결과: {results.model_dump()}")
    return results
