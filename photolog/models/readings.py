"""측정값(Reading) 관련 Pydantic 모델

분석기 화면에서 추출한 시간/값 쌍과 그에 붙는 식별자(Z1, S5, M2 등)를 표현합니다.
"""
from __future__ import annotations

import uuid
from typing import List, Optional

from pydantic import BaseModel, Field


def _new_id() -> str:
    return str(uuid.uuid4())


class Reading(BaseModel):
    """시간순으로 정렬된 단일 측정값

    value는 주 항목 값 (TN/TP 모드에서는 TN 값), value_secondary는 TP 값입니다.
    is_rule_matched는 수치 패턴 규칙으로 할당된 식별자인지 여부입니다.
    """
    id: str = Field(default_factory=_new_id, description="측정값 고유 ID")
    time: str = Field(default="", description="측정 시각 문자열")
    value: str = Field(default="", description="주 항목 값 (숫자 + 부가 텍스트)")
    value_secondary: Optional[str] = Field(default=None, description="보조 항목 값 (TP)")
    identifier: Optional[str] = Field(default=None, description="주 항목 식별자")
    identifier_secondary: Optional[str] = Field(default=None, description="보조 항목 식별자")
    is_rule_matched: bool = Field(default=False, description="규칙 기반 할당 여부")


class Boundaries(BaseModel):
    """저/중/고 농도 구간 경계값

    boundary1: 'low' 상한, boundary2: 'medium' 상한 (boundary2 초과는 'high')
    """
    overall_min: float
    overall_max: float
    span: float
    boundary1: float
    boundary2: float


class RawEntry(BaseModel):
    """비전 서비스가 반환한 원시 레코드

    단일 항목 모드에서는 value, TN/TP 모드에서는 value_tn/value_tp를 사용합니다.
    """
    time: str
    value: Optional[str] = None
    value_tn: Optional[str] = None
    value_tp: Optional[str] = None


class RangeStat(BaseModel):
    """단일 농도 구간의 최소/최대/차이"""
    min: float
    max: float
    diff: float


class RangeResults(BaseModel):
    """저/중/고 구간별 범위 통계"""
    low: Optional[RangeStat] = None
    medium: Optional[RangeStat] = None
    high: Optional[RangeStat] = None


ReadingList = List[Reading]


__all__ = [
    'Reading',
    'ReadingList',
    'Boundaries',
    'RawEntry',
    'RangeStat',
    'RangeResults',
]
