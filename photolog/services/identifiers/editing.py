"""측정값 수동 편집"""

from typing import Sequence

from photolog.models.readings import Reading


def set_identifier(
    readings: Sequence[Reading],
    reading_id: str,
    code: str | None,
    secondary: bool = False,
) -> list[Reading]:
    """사용자가 선택한 식별자를 반영한 새 리스트 반환

    빈 문자열은 식별자 삭제로 처리합니다. 주 식별자를 바꾸면 규칙 기반 표시가 해제됩니다.

    Raises:
        KeyError: reading_id가 리스트에 없을 때
    """
    value = code or None
    if not any(r.id == reading_id for r in readings):
        raise KeyError(reading_id)

    updated = []
    for reading in readings:
        if reading.id != reading_id:
            updated.append(reading)
        elif secondary:
            updated.append(reading.model_copy(update={"identifier_secondary": value}))
        else:
            updated.append(
                reading.model_copy(update={"identifier": value, "is_rule_matched": False})
            )
    return updated


def append_blank_reading(readings: Sequence[Reading], with_secondary: bool = False) -> list[Reading]:
    """빈 측정값 행 추가 (TN/TP 모드에서는 보조 값 칸 포함)"""
    blank = Reading(value_secondary="" if with_secondary else None)
    return [*readings, blank]
