#!/usr/bin/env python
"""
분석기 화면 사진에서 측정값을 추출하고 식별자를 자동 할당하는 스크립트.
앱과 동일한 경로(프롬프트 → 비전 서비스 → 응답 파싱 → 패턴 엔진 → 접수번호 후보)로 수행합니다.

Usage:
  python scripts/extract_and_assign.py <접수번호> <항목> <이미지> [<이미지> ...]
  VISION_PROVIDER=dummy python scripts/extract_and_assign.py 2025-0001 TOC screen.jpg
"""
from __future__ import annotations

import sys

from photolog.errors import PhotologError
from photolog.services.extraction import ReadingExtractor
from photolog.services.identifiers import (
    IdentifierAutoAssigner,
    analyze_ranges,
    summarize_identifiers,
)
from photolog.settings import configure_logging, validate_settings


def main() -> int:
    if len(sys.argv) < 4:
        print(__doc__)
        return 2

    receipt_number, item, *images = sys.argv[1:]
    configure_logging()

    for key, message in validate_settings().items():
        print(f"WARNING [{key}]: {message}")

    try:
        extracted = ReadingExtractor().extract(images, receipt_number=receipt_number, item=item)
    except PhotologError as e:
        print(f"ERROR: {e}")
        return 1

    if extracted.meta.failed_images:
        print(f"실패한 이미지: {', '.join(extracted.meta.failed_images)}")

    assigned = IdentifierAutoAssigner(item=item).run(extracted.data.readings, receipt_number)
    readings = assigned.data.readings

    for reading in readings:
        mark = "*" if reading.is_rule_matched else " "
        secondary = ""
        if reading.value_secondary is not None:
            secondary = f"  {reading.value_secondary} [{reading.identifier_secondary or '-'}]"
        print(f"{mark} {reading.time:<18} {reading.value:>10} [{reading.identifier or '-'}]{secondary}")

    print(f"요약: {summarize_identifiers(readings, item=item) or '-'}")

    ranges = analyze_ranges(readings)
    if ranges is not None:
        for band in ("low", "medium", "high"):
            stat = getattr(ranges, band)
            if stat is not None:
                print(f"{band:>6}: min={stat.min} max={stat.max} diff={stat.diff:.3f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
