"""
비전 응답 정리/파싱 모듈

비전 모델이 돌려준 원문을 JSON 배열로 정리하고, 원시 레코드(RawEntry)를 측정값(Reading)으로 변환합니다.

정리 단계:
1. 마크다운 코드 펜스(```json ... ```) 제거
2. JSON 문자가 없는 설명 줄 제거
3. 객체/값 사이에 빠진 쉼표 보완, 닫는 괄호 앞 여분 쉼표 제거
4. "reactors_input"/"reactors_output" 블록 제거
"""

import json
import logging
import re
from typing import Any, Iterable, Sequence

from photolog.errors import ResponseParseError
from photolog.models.readings import RawEntry, Reading
from photolog.services.identifiers.vocabulary import TN_TP_ITEM

logger = logging.getLogger(__name__)

FENCE_RE = re.compile(r"^```(\w*)?\s*\n?(.*?)\n?\s*```$", re.DOTALL)
JSON_CHARS_RE = re.compile(r'[{}\[\]":]')
JSON_VALUE_RE = re.compile(r'^\s*(".*"|-?\d+(\.\d+)?([eE][+-]?\d+)?|true|false|null)\s*,?\s*$')
REACTOR_KEYWORDS = ("reactors_input", "reactors_output")


# =============================================================================
# 원문 정리
# =============================================================================

def strip_code_fence(text: str) -> str:
    """마크다운 코드 펜스 제거"""
    stripped = text.strip()
    match = FENCE_RE.match(stripped)
    if match and match.group(2):
        return match.group(2).strip()
    return stripped


def drop_junk_lines(text: str) -> str:
    """JSON 구성 요소가 없는 줄(설명 문장 등) 제거"""
    kept = []
    for line in text.split("\n"):
        trimmed = line.strip()
        if not trimmed or JSON_CHARS_RE.search(trimmed) or JSON_VALUE_RE.match(trimmed):
            kept.append(line)
        else:
            logger.debug(f"불필요한 줄 제거: {trimmed!r}")
    return "\n".join(kept).strip()


def repair_commas(text: str) -> str:
    """배열 본문의 줄 단위 쉼표 보정

    다음 줄이 '{' 또는 '"'로 시작하는데 쉼표가 없으면 추가하고,
    다음 줄이 '}' 또는 ']'로 시작하는데 쉼표로 끝나면 제거합니다. (마지막 줄 다음은 ']')
    """
    if not (text.startswith("[") and text.endswith("]")):
        return text

    lines = [line.strip() for line in text[1:-1].split("\n")]
    lines = [line for line in lines if line]
    repaired = []
    for i, line in enumerate(lines):
        following = lines[i + 1] if i + 1 < len(lines) else "]"
        if line.endswith(","):
            if following.startswith(("}", "]")):
                line = line[:-1]
        elif following.startswith(("{", '"')):
            if line.endswith(("}", "]")) or JSON_VALUE_RE.match(line):
                line += ","
        repaired.append(line)
    return "[" + "\n".join(repaired) + "]"


def remove_reactor_blocks(text: str) -> str:
    """응답에 섞여 들어온 reactors_input/reactors_output 블록 제거"""
    for keyword in REACTOR_KEYWORDS:
        text = re.sub(
            rf'("\s*:\s*"[^"]*"\s*)\s*"?{keyword}"?\s*:\s*\{{[\s\S]*?\}}', r"\1", text
        )
        text = re.sub(rf',\s*"?{keyword}"?\s*:\s*\{{[\s\S]*?\}}\s*(?=[,}}])', "", text)
        text = re.sub(rf'"?{keyword}"?\s*:\s*\{{[\s\S]*?\}}', "", text)
    return text


def clean_response_text(text: str | None) -> str:
    """비전 응답 원문을 JSON 파싱 가능한 문자열로 정리"""
    if not text:
        return ""
    cleaned = strip_code_fence(text)
    cleaned = drop_junk_lines(cleaned)
    cleaned = repair_commas(cleaned)
    return remove_reactor_blocks(cleaned).strip()


# =============================================================================
# 파싱/변환
# =============================================================================

def _coerce_value(val: Any) -> str | None:
    """문자열 값 유지, 숫자는 문자열로 변환, 그 외는 None"""
    if isinstance(val, str):
        return val
    if isinstance(val, (int, float)) and not isinstance(val, bool):
        return str(val)
    return None


def to_raw_entry(data: Any, item: str | None) -> RawEntry | None:
    """dict 하나를 RawEntry로 변환, 필수 필드가 없으면 None"""
    if not isinstance(data, dict) or not isinstance(data.get("time"), str):
        return None

    entry = RawEntry(
        time=data["time"],
        value=_coerce_value(data.get("value")),
        value_tn=_coerce_value(data.get("value_tn")),
        value_tp=_coerce_value(data.get("value_tp")),
    )
    if item == TN_TP_ITEM:
        valid = entry.value_tn is not None or entry.value_tp is not None
    else:
        valid = entry.value is not None
    return entry if valid else None


def parse_raw_entries(text: str | None, item: str | None = None) -> list[RawEntry]:
    """비전 응답 원문 → RawEntry 리스트

    빈 응답은 빈 리스트입니다. 필수 필드가 빠진 항목은 경고 후 건너뜁니다.

    Raises:
        ResponseParseError: JSON으로 해석할 수 없거나 배열이 아닐 때
    """
    cleaned = clean_response_text(text)
    if not cleaned:
        return []

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"JSON 파싱 실패: {e}", raw_text=cleaned) from e

    if not isinstance(data, list):
        raise ResponseParseError("응답이 JSON 배열이 아닙니다.", raw_text=cleaned)

    entries = []
    for raw in data:
        entry = to_raw_entry(raw, item)
        if entry is None:
            logger.warning(f"유효하지 않은 항목 건너뜀: {raw!r}")
            continue
        entries.append(entry)
    return entries


def merge_raw_entries(entries: Iterable[RawEntry], item: str | None = None) -> list[RawEntry]:
    """시간 기준 정렬 후 중복 제거

    같은 시간이 여러 번 나오면 처음 항목을 유지하고, TN/TP 모드에서는 빠진 TN/TP 값을 뒤 항목에서 채웁니다.
    """
    merged: dict[str, RawEntry] = {}
    for entry in sorted(entries, key=lambda e: e.time):
        existing = merged.get(entry.time)
        if existing is None:
            merged[entry.time] = entry.model_copy()
            continue
        if item == TN_TP_ITEM:
            if entry.value_tn and not existing.value_tn:
                existing.value_tn = entry.value_tn
            if entry.value_tp and not existing.value_tp:
                existing.value_tp = entry.value_tp
        logger.debug(f"중복 시간 병합: {entry.time}")
    return list(merged.values())


def to_readings(entries: Sequence[RawEntry], item: str | None = None) -> list[Reading]:
    """RawEntry → 시간순 Reading 리스트"""
    readings = []
    for entry in entries:
        if item == TN_TP_ITEM:
            readings.append(
                Reading(time=entry.time, value=entry.value_tn or "", value_secondary=entry.value_tp)
            )
        else:
            readings.append(Reading(time=entry.time, value=entry.value or ""))
    readings.sort(key=lambda r: r.time)
    return readings


def format_readings_json(readings: Sequence[Reading], item: str | None = None) -> str:
    """화면 표시/미리보기용 JSON 문자열"""
    if item == TN_TP_ITEM:
        rows = [
            {"time": r.time, "value_tn": r.value, "value_tp": r.value_secondary} for r in readings
        ]
    else:
        rows = [{"time": r.time, "value": r.value} for r in readings]
    return json.dumps(rows, ensure_ascii=False, indent=2)
