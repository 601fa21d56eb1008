"""측정값 문자열에서 선행 숫자 추출"""

import re

LEADING_NUMBER_RE = re.compile(r"^-?\d+(?:\.\d+)?")


def split_numeric(value: str | None) -> tuple[str | None, str]:
    """(선행 숫자 문자열, 나머지 텍스트)로 분리

    >>> split_numeric("5.388 저")
    ('5.388', '저')
    """
    text = str(value).strip() if value is not None else ""
    match = LEADING_NUMBER_RE.match(text)
    if not match:
        return None, text
    return match.group(0), text[match.end():].strip()


def parse_numeric(value: str | None) -> float | None:
    """선행 부호 있는 소수를 float로 변환, 없으면 None"""
    number, _ = split_numeric(value)
    if number is None:
        return None
    try:
        return float(number)
    except ValueError:
        return None
