"""비전(텍스트 추출) 서비스 패키지

분석기 화면 사진과 프롬프트를 받아 원문 응답을 돌려주는 서비스를 통일된 인터페이스로 제공합니다.

주요 모듈:
- base: 기본 인터페이스 (BaseVisionService, VisionResponse)
- openai_vision: OpenAI 구현체 (OpenAIVision)
- anthropic_vision: Anthropic 구현체 (AnthropicVision)
- dummy_vision: 테스트용 더미 구현체 (DummyVision)
- factory: 서비스 팩토리 함수
"""

from .base import BaseVisionService, VisionResponse
from .dummy_vision import DummyVision
from .factory import get_vision_service

__all__ = [
    # 기본 인터페이스
    "BaseVisionService",
    "VisionResponse",
    # 서비스
    "DummyVision",
    # 팩토리
    "get_vision_service",
]
