"""식별자 시퀀스 요약

최종 식별자를 파일명 등에 쓰는 짧은 문자열로 줄입니다.
숫자와 TP 접미사 'P'를 제거하고 '현장' 코드는 제외합니다. (Z1, Z2, S1, S2, M1 → "ZZSSM")
"""

import re
from typing import Iterable

from photolog.models.readings import Reading

from .vocabulary import PLACEHOLDER_PREFIX, TN_TP_ITEM

_DIGITS_RE = re.compile(r"[0-9]")
EXCLUDED_BASES = (PLACEHOLDER_PREFIX,)


def identifier_base(code: str | None) -> str | None:
    """식별자에서 숫자/'P' 접미사를 뗀 기본형, 제외 대상이면 None"""
    if not code:
        return None
    base = _DIGITS_RE.sub("", code)
    if base.endswith("P"):
        base = base[:-1]
    if base in EXCLUDED_BASES:
        return None
    return base or None


def summarize_identifiers(
    readings: Iterable[Reading] | None,
    item: str | None = None,
    include_secondary: bool | None = None,
) -> str:
    """측정값 식별자를 순서대로 이어 붙인 요약 문자열

    Args:
        readings: 측정값 리스트
        item: 분석 항목 (TN/TP이면 보조 식별자도 포함)
        include_secondary: 명시하면 item과 무관하게 보조 식별자 포함 여부를 지정
    """
    if not readings:
        return ""
    if include_secondary is None:
        include_secondary = item == TN_TP_ITEM

    parts = []
    for reading in readings:
        codes = [reading.identifier]
        if include_secondary:
            codes.append(reading.identifier_secondary)
        parts.extend(b for b in map(identifier_base, codes) if b)
    return "".join(parts)
