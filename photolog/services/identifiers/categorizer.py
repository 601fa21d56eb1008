"""측정값 농도 구간 분류"""

from enum import Enum

from photolog.models.readings import Boundaries

from .numeric import parse_numeric, split_numeric


class Category(Enum):
    """농도 구간"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    UNKNOWN = "unknown"


# 화면 표시 텍스트 힌트 (검사 순서 유지: 고 → 중 → 저)
TEXT_HINTS: tuple[tuple[str, Category], ...] = (
    ("고", Category.HIGH),
    ("중", Category.MEDIUM),
    ("저", Category.LOW),
)


def categorize(value: str | None, boundaries: Boundaries | None) -> Category:
    """측정값 하나를 저/중/고/unknown으로 분류

    숫자 뒤에 붙은 텍스트 힌트("고", "중", "저")가 있으면 수치 구간보다 우선합니다.

    Args:
        value: 측정값 원문 (예: "5.388 저")
        boundaries: 현재 경계값 (None이면 힌트가 없는 한 unknown)

    Returns:
        Category
    """
    _, text_part = split_numeric(value)
    for hint, category in TEXT_HINTS:
        if hint in text_part:
            return category

    if boundaries is None:
        return Category.UNKNOWN
    number = parse_numeric(value)
    if number is None:
        return Category.UNKNOWN

    if number <= boundaries.boundary1:
        return Category.LOW
    if number <= boundaries.boundary2:
        return Category.MEDIUM
    return Category.HIGH
