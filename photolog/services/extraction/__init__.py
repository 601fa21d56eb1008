"""측정값 추출 패키지

비전 응답 정리/파싱과 사진 배치 → Reading 리스트 파이프라인을 제공합니다.
"""

from .reading_extractor import ReadingExtractor
from .response_parser import (
    clean_response_text,
    format_readings_json,
    merge_raw_entries,
    parse_raw_entries,
    to_readings,
)

__all__ = [
    "ReadingExtractor",
    "clean_response_text",
    "format_readings_json",
    "merge_raw_entries",
    "parse_raw_entries",
    "to_readings",
]
