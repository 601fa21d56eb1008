"""식별자 할당 작업 상태

위치(인덱스)별 병렬 리스트로 할당 결과를 관리합니다.

- assignments: 위치별 식별자 (없으면 None)
- rule_flags: 위치별 규칙 기반 할당 여부
- consumed: 이번 실행에서 패턴이 차지한 위치

패턴 시도는 copy()로 만든 사본에 적용하고, 모든 칸이 성공했을 때만 원본을 교체합니다.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from photolog.models.readings import Reading

from .vocabulary import is_placeholder, is_valid_identifier


@dataclass
class AssignmentState:
    """식별자 할당 작업 상태"""

    assignments: list[str | None] = field(default_factory=list)
    rule_flags: list[bool] = field(default_factory=list)
    consumed: list[bool] = field(default_factory=list)

    @classmethod
    def from_readings(cls, readings: Sequence[Reading]) -> AssignmentState:
        """현재 측정값의 식별자/규칙 플래그로 초기 상태 생성"""
        return cls(
            assignments=[r.identifier for r in readings],
            rule_flags=[bool(r.is_rule_matched) for r in readings],
            consumed=[False] * len(readings),
        )

    def __len__(self) -> int:
        return len(self.assignments)

    def copy(self) -> AssignmentState:
        return AssignmentState(
            assignments=list(self.assignments),
            rule_flags=list(self.rule_flags),
            consumed=list(self.consumed),
        )

    def index_of(self, code: str, exclude: int | None = None) -> int:
        """code를 가진 위치 (exclude 제외), 없으면 -1"""
        for idx, assigned in enumerate(self.assignments):
            if assigned == code and idx != exclude:
                return idx
        return -1

    def attempt_assign(self, position: int, code: str, rule_based: bool) -> bool:
        """위치에 식별자 할당 시도

        규칙 기반(rule_based=True) 시도:
            - 이번 실행에서 이미 다른 값으로 차지된 위치면 거부
            - 같은 코드를 가진 다른 위치가 규칙 기반이면 거부, 아니면 그 위치를 비움
            - 대상에 같은 코드가 있으면 성공 (규칙/차지 표시만 갱신)
            - 대상에 다른 규칙 기반 값이 있으면 거부, 아니면 덮어씀

        접수번호 패턴(rule_based=False) 시도:
            - 대상에 값이 있거나 코드가 어디서든 이미 쓰였으면 거부

        Returns:
            할당 성공 여부 (예외는 던지지 않음)
        """
        if not is_valid_identifier(code):
            return False
        if rule_based and is_placeholder(code):
            return False

        current = self.assignments[position]

        if not rule_based:
            if current is not None:
                return False
            if self.index_of(code) != -1:
                return False
            self.assignments[position] = code
            self.rule_flags[position] = False
            return True

        if self.consumed[position] and current is not None and current != code:
            return False

        conflict = self.index_of(code, exclude=position)
        if conflict != -1 and self.rule_flags[conflict]:
            return False

        if current is not None:
            if current == code:
                self.rule_flags[position] = True
                self.consumed[position] = True
                return True
            if self.rule_flags[position]:
                return False

        if conflict != -1:
            self.assignments[conflict] = None
            self.rule_flags[conflict] = False

        self.assignments[position] = code
        self.rule_flags[position] = True
        self.consumed[position] = True
        return True

    def try_block(self, start: int, codes: Sequence[str]) -> AssignmentState | None:
        """start부터 codes를 연속 할당한 사본 반환, 하나라도 실패하면 None"""
        trial = self.copy()
        for offset, code in enumerate(codes):
            if not trial.attempt_assign(start + offset, code, rule_based=True):
                return None
        return trial
