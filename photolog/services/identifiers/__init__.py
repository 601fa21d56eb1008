"""식별자 자동 할당 패키지

분석기 측정값의 수치 패턴으로 교정/검증 지점 식별자(Z1, S5, M2 등)를 붙입니다.

주요 모듈:
- numeric: 측정값 문자열의 선행 숫자 추출
- boundaries: 저/중/고 구간 경계값 계산
- categorizer: 측정값 구간 분류 (텍스트 힌트 우선)
- assignment_state: 위치별 할당 상태와 충돌 처리 (attempt_assign)
- pattern_engine: 우선순위 구조 패턴 매칭
- candidates: 접수번호 기반 후보 시퀀스 전략
- fallback_filler: 남은 위치를 후보로 채우기
- auto_assigner: 전체 실행 오케스트레이션
- sequence_summary: 식별자 요약 문자열
- range_analysis: 구간별 범위 차이 통계
- editing: 수동 편집
"""

from .assignment_state import AssignmentState
from .auto_assigner import IdentifierAutoAssigner, auto_assign_identifiers
from .boundaries import boundaries_from_values, calculate_boundaries
from .candidates import CandidateSource, ReceiptPatternSource, StaticCandidateSource
from .categorizer import Category, categorize
from .editing import append_blank_reading, set_identifier
from .fallback_filler import fill_from_candidates
from .numeric import parse_numeric, split_numeric
from .pattern_engine import PatternAssignmentEngine, PatternMatch
from .range_analysis import analyze_ranges
from .sequence_summary import summarize_identifiers

__all__ = [
    # numeric / boundaries / categorizer
    "parse_numeric",
    "split_numeric",
    "calculate_boundaries",
    "boundaries_from_values",
    "Category",
    "categorize",
    # 할당
    "AssignmentState",
    "PatternAssignmentEngine",
    "PatternMatch",
    "CandidateSource",
    "ReceiptPatternSource",
    "StaticCandidateSource",
    "fill_from_candidates",
    "IdentifierAutoAssigner",
    "auto_assign_identifiers",
    # 후처리
    "summarize_identifiers",
    "analyze_ranges",
    "set_identifier",
    "append_blank_reading",
]
