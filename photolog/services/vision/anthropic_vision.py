"""Anthropic API 비전 구현"""

import anthropic
from anthropic import Anthropic
from PIL import Image

from photolog.errors import VisionServiceError
from photolog.settings import settings
from photolog.utils.images import image_to_base64

from .base import BaseVisionService, VisionResponse


class AnthropicVision(BaseVisionService):
    """Anthropic API를 사용한 비전 서비스"""

    name = "anthropic"

    def __init__(self, api_key: str | None = None, model: str | None = None):
        """Anthropic 클라이언트 초기화

        Args:
            api_key: Anthropic API 키 (None이면 환경변수 사용)
            model: 모델명 (None이면 설정값 사용)
        """
        self.api_key = api_key or settings.anthropic_api_key
        if not self.api_key:
            raise VisionServiceError(
                "Anthropic API 키가 설정되지 않았습니다. ANTHROPIC_API_KEY를 확인해주세요."
            )
        self.model = model or settings.anthropic_model
        self.client = Anthropic(api_key=self.api_key)

    def extract_text(self, image: Image.Image, prompt: str, **kwargs) -> VisionResponse:
        """이미지 + 프롬프트로 응답 생성"""
        encoded = image_to_base64(image, max_edge=settings.max_image_edge)
        content = [
            {
                "type": "image",
                "source": {"type": "base64", "media_type": "image/png", "data": encoded},
            },
            {"type": "text", "text": prompt},
        ]

        try:
            response = self.client.messages.create(
                model=self.model,
                max_tokens=kwargs.pop("max_tokens", settings.vision_max_tokens),
                messages=[{"role": "user", "content": content}],
                **kwargs,
            )
        except anthropic.APIError as e:
            raise VisionServiceError(f"Anthropic API 오류: {e}") from e

        text = "".join(block.text for block in response.content if block.type == "text")
        return VisionResponse(
            content=text,
            model=response.model,
            usage={
                "input_tokens": response.usage.input_tokens,
                "output_tokens": response.usage.output_tokens,
            },
            metadata={"provider": "anthropic", "stop_reason": response.stop_reason},
        )
