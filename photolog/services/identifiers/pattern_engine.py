"""수치 패턴 기반 식별자 할당 엔진

시간순 측정값의 저/중/고 배열에서 정해진 구조 패턴을 찾아 식별자를 붙입니다.
패턴은 아래 우선순위로 한 번씩 실행되며, 앞 패턴이 차지한 위치는 뒤 패턴이 다시 보지 않습니다.

1. six_point    저고저고저고 → Z5 S5 Z6 S6 Z7 S7 (각 고 > 직전 저)
2. four_point_a 저저고고     → Z1 Z2 S1 S2      (min(고) > max(저))
3. medium_run   중중중       → M1 M2 M3         (끝에서부터 역방향 탐색)
4. four_point_b 저저고고     → Z3 Z4 S3 S4
5. two_point    저고         → Z5 S5            (six_point가 한 번도 적용되지 않았을 때만)

순서와 medium_run의 역방향 탐색은 현장 교정 순서 관례를 따른 것이므로 바꾸지 않습니다.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from photolog.models.readings import Boundaries

from .assignment_state import AssignmentState
from .categorizer import Category, categorize
from .numeric import parse_numeric

logger = logging.getLogger(__name__)

L, M, H = Category.LOW, Category.MEDIUM, Category.HIGH


def rises_in_pairs(values: Sequence[float]) -> bool:
    """(저, 고) 쌍마다 고 > 저"""
    return all(values[i + 1] > values[i] for i in range(0, len(values) - 1, 2))


def highs_above_lows(values: Sequence[float]) -> bool:
    """저저고고 블록에서 두 고 값이 모두 두 저 값보다 큼"""
    return min(values[2], values[3]) > max(values[0], values[1])


@dataclass(frozen=True)
class BlockPattern:
    """연속 위치에 적용되는 구조 패턴"""

    name: str
    shape: tuple[Category, ...]
    codes: tuple[str, ...]
    check: Optional[Callable[[Sequence[float]], bool]] = None
    reverse: bool = False
    skip_if_fired: Optional[str] = None

    @property
    def width(self) -> int:
        return len(self.shape)


@dataclass(frozen=True)
class PatternMatch:
    """적용된 패턴과 시작 위치"""

    name: str
    start: int
    codes: tuple[str, ...]


SIX_POINT = BlockPattern(
    name="six_point",
    shape=(L, H, L, H, L, H),
    codes=("Z5", "S5", "Z6", "S6", "Z7", "S7"),
    check=rises_in_pairs,
)
FOUR_POINT_A = BlockPattern(
    name="four_point_a",
    shape=(L, L, H, H),
    codes=("Z1", "Z2", "S1", "S2"),
    check=highs_above_lows,
)
MEDIUM_RUN = BlockPattern(
    name="medium_run",
    shape=(M, M, M),
    codes=("M1", "M2", "M3"),
    reverse=True,
)
FOUR_POINT_B = BlockPattern(
    name="four_point_b",
    shape=(L, L, H, H),
    codes=("Z3", "Z4", "S3", "S4"),
    check=highs_above_lows,
)
TWO_POINT = BlockPattern(
    name="two_point",
    shape=(L, H),
    codes=("Z5", "S5"),
    check=rises_in_pairs,
    skip_if_fired=SIX_POINT.name,
)

DEFAULT_PATTERNS: tuple[BlockPattern, ...] = (
    SIX_POINT,
    FOUR_POINT_A,
    MEDIUM_RUN,
    FOUR_POINT_B,
    TWO_POINT,
)


class PatternAssignmentEngine:
    """구조 패턴을 우선순위대로 적용하는 엔진"""

    def __init__(self, patterns: Sequence[BlockPattern] = DEFAULT_PATTERNS):
        self.patterns = tuple(patterns)

    def run(
        self,
        values: Sequence[str],
        boundaries: Boundaries | None,
        state: AssignmentState,
    ) -> tuple[AssignmentState, list[PatternMatch]]:
        """모든 패턴을 순서대로 적용

        Args:
            values: 위치별 측정값 원문 (주 항목)
            boundaries: 농도 경계값 (None이면 텍스트 힌트가 없는 한 모든 위치가 unknown)
            state: 시작 상태 (변경하지 않음)

        Returns:
            (최종 상태, 적용된 패턴 리스트)
        """
        categories = [categorize(v, boundaries) for v in values]
        numbers = [parse_numeric(v) for v in values]
        matches: list[PatternMatch] = []

        for pattern in self.patterns:
            if pattern.skip_if_fired and any(m.name == pattern.skip_if_fired for m in matches):
                logger.debug(f"[{pattern.name}] {pattern.skip_if_fired} 적용됨, 건너뜀")
                continue

            found = self._apply(pattern, categories, numbers, state)
            if found is None:
                logger.debug(f"[{pattern.name}] 적용 가능한 위치 없음")
                continue

            start, state = found
            matches.append(PatternMatch(pattern.name, start, pattern.codes))
            logger.info(f"[{pattern.name}] {'-'.join(pattern.codes)} 할당 (시작 위치 {start})")

        return state, matches

    @staticmethod
    def _apply(
        pattern: BlockPattern,
        categories: Sequence[Category],
        numbers: Sequence[float | None],
        state: AssignmentState,
    ) -> tuple[int, AssignmentState] | None:
        """첫 번째로 성립하는 창에 패턴을 적용한 (시작 위치, 새 상태)"""
        last_start = len(categories) - pattern.width
        if last_start < 0:
            return None

        starts = range(last_start, -1, -1) if pattern.reverse else range(0, last_start + 1)
        for start in starts:
            window = range(start, start + pattern.width)
            if any(state.consumed[j] for j in window):
                continue
            if any(categories[j] != expected for j, expected in zip(window, pattern.shape)):
                continue

            if pattern.check is not None:
                block = numbers[start:start + pattern.width]
                if any(v is None for v in block) or not pattern.check(block):
                    logger.debug(f"[{pattern.name}] 위치 {start}: 수치 검증 실패")
                    continue

            trial = state.try_block(start, pattern.codes)
            if trial is not None:
                return start, trial
        return None
