"""접수번호 기반 식별자 후보 시퀀스

패턴 엔진이 채우지 못한 위치는 접수번호에서 유도한 후보 시퀀스로 채웁니다.
후보 생성기는 주입 가능한 전략(CandidateSource)으로, 테스트에서는 StaticCandidateSource로 대체합니다.

ReceiptPatternSource는 접수번호 문자열의 z/s/m 배열 표기를 19개 위치 공식으로 해석합니다.

- 1~4번 위치: 앞 4~5글자 (예: "zszz", "MMMZS")
- 5~13번 위치: 5번째부터 9글자 (예: "sszzssmmm")
- 14~19번 위치: 마지막 6글자 ("zszszs" 또는 "szszsz")
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

Candidate = Optional[str]

SEQUENCE_LENGTH = 19


class CandidateSource(ABC):
    """식별자 후보 시퀀스 생성기 기본 인터페이스"""

    @abstractmethod
    def candidates(self, receipt_number: str) -> list[Candidate]:
        """우선순위 순서의 후보 코드 리스트 (None은 '후보 없음')"""
        pass


class StaticCandidateSource(CandidateSource):
    """접수번호와 무관하게 고정 후보를 반환 (테스트/수동 지정용)"""

    def __init__(self, sequence: Sequence[Candidate]):
        self.sequence = list(sequence)

    def candidates(self, receipt_number: str) -> list[Candidate]:
        return list(self.sequence)


# (비교 길이, 표기, 코드) 규칙 목록 → 기본값
_HEAD_RULES: tuple[tuple[tuple[tuple[int, str, str], ...], str], ...] = (
    (((4, "zszz", "Z5"), (4, "szss", "S5"), (4, "zzss", "Z1"), (4, "sszz", "S1"),
      (4, "MMMZ", "M1"), (4, "ZSMM", "Z5"), (4, "SZMM", "S5")), "M1"),
    (((4, "zszz", "S5"), (4, "szss", "Z5"), (4, "zzss", "Z2"), (4, "sszz", "S2"),
      (4, "MMMZ", "M2"), (4, "ZSMM", "S5"), (4, "SZMM", "Z5")), "M2"),
    (((4, "zszz", "Z1"), (4, "szss", "S1"), (4, "zzss", "S1"), (4, "sszz", "Z1"),
      (4, "MMMZ", "M3"), (4, "ZSMM", "M1"), (4, "SZMM", "M1")), "M3"),
    (((4, "zszz", "Z2"), (4, "szss", "S2"), (4, "zzss", "S2"), (4, "sszz", "Z2"),
      (5, "MMMZS", "Z5"), (5, "MMMZZ", "Z1"), (4, "ZSMM", "M2"), (4, "SZMM", "M2"),
      (5, "MMMSS", "S1")), "Z5"),
)

# 5번째부터 9글자 표기 → 5~13번 위치 코드
_BODY_TABLE: dict[str, str] = {
    "sszzssmmm": "S1 S2 Z3 Z4 S3 S4 M1 M2 M3",
    "ssmmmzzss": "S1 S2 M1 M2 M3 Z3 Z4 S3 S4",
    "zzsszzmmm": "Z1 Z2 S3 S4 Z3 Z4 M1 M2 M3",
    "zzmmmsszz": "Z1 Z2 M1 M2 M3 S3 S4 Z3 Z4",
    "zzsszsmmm": "Z3 Z4 S3 S4 Z5 S5 M1 M2 M3",
    "mmmzzsszs": "M1 M2 M3 Z3 Z4 S3 S4 Z5 S5",
    "mmmzszzss": "M1 M2 M3 Z5 S5 Z3 Z4 S3 S4",
    "sszzszmmm": "S3 S4 Z3 Z4 S5 Z5 M1 M2 M3",
    "mmmszsszz": "M1 M2 M3 S5 Z5 S3 S4 Z3 Z4",
    "mmmsszzsz": "M1 M2 M3 S3 S4 Z3 Z4 S5 Z5",
    "szzsszzss": "S5 Z1 Z2 S1 S2 Z3 Z4 S3 S4",
    "zsszzsszs": "Z2 S1 S2 Z3 Z4 S3 S4 Z5 S5",
    "mzzsszzss": "M3 Z1 Z2 S1 S2 Z3 Z4 S3 S4",
    "msszzsszz": "M3 S1 S2 Z1 Z2 S3 S4 Z3 Z4",
    "zsmmmzzss": "Z5 S5 M1 M2 M3 Z3 Z4 S3 S4",
    "szmmmsszz": "S5 Z5 M1 M2 M3 S3 S4 Z3 Z4",
    "zszzssmmm": "Z5 S5 Z3 Z4 S3 S4 M1 M2 M3",
    "szsszzmmm": "S5 Z5 S3 S4 Z3 Z4 M1 M2 M3",
    "zsszszzss": "Z2 S1 S2 Z5 S5 Z3 Z4 S3 S4",
    "szzszsszz": "S2 Z1 Z2 S5 Z5 S3 S4 Z3 Z4",
}
_BODY_DEFAULT = "S5 Z1 Z2 S1 S2 Z3 Z4 S3 S4"

# 마지막 6글자 표기 → 14~19번 위치 코드 (해당 없으면 None)
_TAIL_TABLE: dict[str, str] = {
    "zszszs": "Z6 S6 Z7 S7 현장1 현장2",
    "szszsz": "S6 Z6 S7 Z7 현장2 현장1",
}
_TAIL_LENGTH = 6


class ReceiptPatternSource(CandidateSource):
    """접수번호 표기 공식 기반 후보 생성기"""

    def candidates(self, receipt_number: str) -> list[Candidate]:
        if not isinstance(receipt_number, str) or not receipt_number.strip():
            return [None] * SEQUENCE_LENGTH
        return self._head(receipt_number) + self._body(receipt_number) + self._tail(receipt_number)

    @staticmethod
    def _head(receipt_number: str) -> list[Candidate]:
        result: list[Candidate] = []
        for rules, default in _HEAD_RULES:
            code = next(
                (code for length, marker, code in rules if receipt_number[:length] == marker),
                default,
            )
            result.append(code)
        return result

    @staticmethod
    def _body(receipt_number: str) -> list[Candidate]:
        row = _BODY_TABLE.get(receipt_number[4:13], _BODY_DEFAULT)
        return list(row.split())

    @staticmethod
    def _tail(receipt_number: str) -> list[Candidate]:
        row = _TAIL_TABLE.get(receipt_number[-_TAIL_LENGTH:])
        if row is None:
            return [None] * _TAIL_LENGTH
        return list(row.split())
