"""식별자 코드 사전

교정/검증 지점 코드의 닫힌 집합과 항목(스트림)별 허용 부분집합을 정의합니다.
"""

PLACEHOLDER_PREFIX = "현장"
TN_TP_ITEM = "TN/TP"

TN_IDENTIFIERS: tuple[str, ...] = (
    "M1", "M2", "M3", "Z1", "Z2", "S1", "S2", "Z3", "Z4", "S3", "S4",
    "Z5", "S5", "Z6", "S6", "Z7", "S7", "현장1", "현장2",
)

# TP 식별자는 TN 식별자에 'P' 접미사를 붙인 형태
TP_IDENTIFIERS: tuple[str, ...] = tuple(f"{code}P" for code in TN_IDENTIFIERS)

# 순서를 유지한 합집합
IDENTIFIER_OPTIONS: tuple[str, ...] = tuple(dict.fromkeys(TN_IDENTIFIERS + TP_IDENTIFIERS))

_VALID = frozenset(IDENTIFIER_OPTIONS)
_TN = frozenset(TN_IDENTIFIERS)


def is_valid_identifier(code: str | None) -> bool:
    """사전에 포함된 코드인지"""
    return code is not None and code in _VALID


def is_placeholder(code: str) -> bool:
    """'현장N' 같은 수동 입력용 자리표시 코드인지"""
    return code.startswith(PLACEHOLDER_PREFIX)


def allowed_identifiers(item: str | None) -> frozenset[str]:
    """분석 항목의 주 스트림에서 허용되는 코드 집합

    TN/TP 모드의 주 스트림은 TN 값이므로 TN 코드만 허용합니다.
    """
    if item == TN_TP_ITEM:
        return _TN
    return _VALID


def is_valid_for_stream(code: str | None, item: str | None) -> bool:
    return bool(code) and code in allowed_identifiers(item)


def to_secondary(code: str | None) -> str | None:
    """TN 코드를 대응되는 TP 코드로 변환 (Z1 → Z1P)"""
    if code is None or code not in _TN:
        return None
    return f"{code}P"
