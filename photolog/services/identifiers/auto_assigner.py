"""식별자 자동 할당 오케스트레이션

측정값 → 경계값 계산 → 패턴 엔진 → 접수번호 후보 채우기 → 새 측정값 리스트 순서로 실행합니다.
입력 리스트는 변경하지 않고, 같은 입력에는 항상 같은 결과를 냅니다.
"""

import logging
from typing import Sequence

from photolog.models.envelopes import AssignmentData, AssignmentEnvelope, AssignmentMeta
from photolog.models.readings import Reading
from photolog.settings import settings

from .assignment_state import AssignmentState
from .boundaries import calculate_boundaries
from .candidates import CandidateSource, ReceiptPatternSource
from .fallback_filler import fill_from_candidates
from .pattern_engine import PatternAssignmentEngine
from .vocabulary import TN_TP_ITEM, to_secondary

logger = logging.getLogger(__name__)


class IdentifierAutoAssigner:
    """측정값 식별자 자동 할당기

    Args:
        candidate_source: 접수번호 → 후보 시퀀스 전략 (기본: ReceiptPatternSource)
        item: 분석 항목 (예: "TOC", "TN/TP")
        engine: 패턴 엔진 (기본 우선순위 사용)
        mirror_secondary: TN/TP 모드에서 빈 TP 식별자를 TN 식별자로 채울지 (None이면 설정값)
    """

    def __init__(
        self,
        candidate_source: CandidateSource | None = None,
        item: str | None = None,
        engine: PatternAssignmentEngine | None = None,
        mirror_secondary: bool | None = None,
    ):
        self.candidate_source = candidate_source or ReceiptPatternSource()
        self.item = item if item is not None else settings.default_item
        self.engine = engine or PatternAssignmentEngine()
        self.mirror_secondary = (
            settings.mirror_secondary_identifiers if mirror_secondary is None else mirror_secondary
        )

    def run(self, readings: Sequence[Reading], receipt_number: str) -> AssignmentEnvelope:
        """할당 실행 후 결과와 메타데이터를 Envelope로 반환"""
        readings = list(readings)
        if not readings:
            return AssignmentEnvelope(stage='assign', data=AssignmentData(), meta=AssignmentMeta())

        receipt_number = (receipt_number or "").strip()
        if not receipt_number:
            logger.warning("접수번호가 비어 있어 접수번호 공식 후보 없이 할당합니다.")

        boundaries = calculate_boundaries(readings)
        if boundaries is None:
            logger.warning("농도 경계값을 계산할 수 없습니다 (숫자 값 없음). 텍스트 힌트만 사용합니다.")

        state = AssignmentState.from_readings(readings)
        state, matches = self.engine.run([r.value for r in readings], boundaries, state)

        candidates = self.candidate_source.candidates(receipt_number)
        filled = fill_from_candidates(state, candidates, self.item)

        updated = [self._merge(r, state, idx) for idx, r in enumerate(readings)]

        meta = AssignmentMeta(
            boundaries=boundaries,
            patterns=[m.name for m in matches],
            positions={m.name: m.start for m in matches},
            rule_matched=sum(state.rule_flags),
            fallback_filled=filled,
            unassigned=sum(1 for code in state.assignments if code is None),
        )
        logger.info(
            f"식별자 자동 할당 완료: 패턴 {meta.patterns}, 규칙 {meta.rule_matched}개, "
            f"후보 {meta.fallback_filled}개, 미할당 {meta.unassigned}개"
        )
        return AssignmentEnvelope(stage='assign', data=AssignmentData(readings=updated), meta=meta)

    def assign(self, readings: Sequence[Reading], receipt_number: str) -> list[Reading]:
        """할당된 새 측정값 리스트만 반환"""
        return self.run(readings, receipt_number).data.readings

    def _merge(self, reading: Reading, state: AssignmentState, idx: int) -> Reading:
        update = {
            "identifier": state.assignments[idx],
            "is_rule_matched": state.rule_flags[idx],
        }
        if self._follows_primary(reading):
            update["identifier_secondary"] = to_secondary(state.assignments[idx])
        return reading.model_copy(update=update)

    def _follows_primary(self, reading: Reading) -> bool:
        """TP 식별자가 TN 식별자를 따라가야 하는지

        비어 있거나 이전 TN 식별자를 복사한 값이면 새 TN 식별자로 다시 맞춥니다 (TN이 비워지면 함께 삭제).
        사용자가 따로 지정한 TP 식별자는 유지합니다.
        """
        if not (self.mirror_secondary and self.item == TN_TP_ITEM and reading.value_secondary):
            return False
        current = reading.identifier_secondary
        return current is None or current == to_secondary(reading.identifier)


def auto_assign_identifiers(
    readings: Sequence[Reading],
    receipt_number: str,
    item: str | None = None,
    candidate_source: CandidateSource | None = None,
) -> list[Reading]:
    """IdentifierAutoAssigner 단축 함수"""
    assigner = IdentifierAutoAssigner(candidate_source=candidate_source, item=item)
    return assigner.assign(readings, receipt_number)
