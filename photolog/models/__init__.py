"""데이터 모델 패키지"""

from .readings import Boundaries, RangeResults, RangeStat, RawEntry, Reading
from .envelopes import (
    AssignmentData,
    AssignmentEnvelope,
    AssignmentMeta,
    Envelope,
    ExtractionData,
    ExtractionEnvelope,
    ExtractionMeta,
)

__all__ = [
    "Reading",
    "Boundaries",
    "RawEntry",
    "RangeStat",
    "RangeResults",
    "Envelope",
    "ExtractionData",
    "ExtractionMeta",
    "ExtractionEnvelope",
    "AssignmentData",
    "AssignmentMeta",
    "AssignmentEnvelope",
]
