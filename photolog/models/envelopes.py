"""파이프라인 Envelope 모델

파이프라인 각 단계(추출/파싱/병합/식별자 할당)별 데이터와 메타데이터를
일관되고 타입 안전하게 관리하는 Pydantic 모델 정의.
"""
from __future__ import annotations

from typing import Dict, Generic, List, Literal, Optional, TypeVar
from typing_extensions import TypeAlias

from pydantic import BaseModel, Field

from .readings import Boundaries, RawEntry, Reading


# =============================================================================
# 기본 타입 정의
# =============================================================================

Stage: TypeAlias = Literal['extract', 'parse', 'merge', 'assign']
"""파이프라인 처리 단계"""

TData = TypeVar('TData')
TMeta = TypeVar('TMeta')


class Envelope(BaseModel, Generic[TData, TMeta]):
    """파이프라인 단계별 데이터와 메타데이터를 감싸는 공통 Envelope 모델"""
    stage: Stage
    data: TData
    meta: TMeta
    version: str = '1.0'


# =============================================================================
# 추출 단계 모델 (이미지 → Reading 리스트)
# =============================================================================

class ExtractionData(BaseModel):
    """추출 단계 결과 데이터"""
    readings: List[Reading] = Field(default_factory=list, description="시간순 측정값 리스트")
    raw_entries: List[RawEntry] = Field(default_factory=list, description="병합 전 원시 레코드")


class ExtractionMeta(BaseModel):
    """추출 단계 결과 메타데이터"""
    images: int = Field(default=0, description="처리 요청된 이미지 수")
    failed_images: List[str] = Field(default_factory=list, description="처리 실패한 이미지 이름")
    before_dedup: int = Field(default=0, description="중복 제거 전 레코드 수")
    after_dedup: int = Field(default=0, description="중복 제거 후 레코드 수")
    item: Optional[str] = Field(default=None, description="분석 항목")
    engine: Optional[str] = Field(default=None, description="사용된 비전 서비스명")


# =============================================================================
# 식별자 할당 단계 모델
# =============================================================================

class AssignmentData(BaseModel):
    """식별자 할당 결과 데이터"""
    readings: List[Reading] = Field(default_factory=list, description="식별자가 반영된 측정값")


class AssignmentMeta(BaseModel):
    """식별자 할당 결과 메타데이터"""
    boundaries: Optional[Boundaries] = Field(default=None, description="사용된 농도 경계값")
    patterns: List[str] = Field(default_factory=list, description="적용된 패턴 이름 (적용 순)")
    rule_matched: int = Field(default=0, description="규칙 기반 할당 수")
    fallback_filled: int = Field(default=0, description="접수번호 패턴으로 채운 수")
    unassigned: int = Field(default=0, description="미할당 위치 수")
    positions: Dict[str, int] = Field(default_factory=dict, description="패턴별 시작 위치")


# =============================================================================
# 타입 별칭 (Type Aliases)
# =============================================================================

ExtractionEnvelope = Envelope[ExtractionData, ExtractionMeta]
AssignmentEnvelope = Envelope[AssignmentData, AssignmentMeta]


__all__ = [
    'Stage',
    'Envelope',
    'ExtractionData',
    'ExtractionMeta',
    'ExtractionEnvelope',
    'AssignmentData',
    'AssignmentMeta',
    'AssignmentEnvelope',
]
