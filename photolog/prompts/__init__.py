"""
Reading extraction prompts module.

이 패키지는 분석기 화면 사진에서 측정값을 추출할 때 사용하는 프롬프트를 중앙 관리합니다.
"""

from .reading_extraction import (
    READING_PROMPT_INSTRUCTIONS,
    build_reading_prompt,
)

__all__ = [
    "READING_PROMPT_INSTRUCTIONS",
    "build_reading_prompt",
]
