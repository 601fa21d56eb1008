"""비전 서비스 팩토리"""

from photolog.settings import settings

from .anthropic_vision import AnthropicVision
from .base import BaseVisionService
from .dummy_vision import DummyVision
from .openai_vision import OpenAIVision


def get_vision_service() -> BaseVisionService:
    """설정에 따라 적절한 비전 서비스 반환

    Returns:
        BaseVisionService 인스턴스
    """
    if settings.vision_provider == "openai":
        return OpenAIVision()
    elif settings.vision_provider == "anthropic":
        return AnthropicVision()
    elif settings.vision_provider == "dummy":
        return DummyVision()
    else:
        raise ValueError(f"지원하지 않는 비전 제공자: {settings.vision_provider}")
