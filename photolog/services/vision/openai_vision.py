"""OpenAI API 비전 구현"""

import openai
from openai import OpenAI
from PIL import Image

from photolog.errors import VisionServiceError
from photolog.settings import settings
from photolog.utils.images import image_to_base64

from .base import BaseVisionService, VisionResponse


class OpenAIVision(BaseVisionService):
    """OpenAI API를 사용한 비전 서비스"""

    name = "openai"

    def __init__(self, api_key: str | None = None, model: str | None = None):
        """OpenAI 클라이언트 초기화

        Args:
            api_key: OpenAI API 키 (None이면 환경변수 사용)
            model: 모델명 (None이면 설정값 사용)
        """
        self.api_key = api_key or settings.openai_api_key
        if not self.api_key:
            raise VisionServiceError("OpenAI API 키가 설정되지 않았습니다. OPENAI_API_KEY를 확인해주세요.")
        self.model = model or settings.openai_model
        self.client = OpenAI(api_key=self.api_key)

    def extract_text(self, image: Image.Image, prompt: str, **kwargs) -> VisionResponse:
        """이미지 + 프롬프트로 응답 생성

        Args:
            image: PIL Image 객체
            prompt: 추출 지시 프롬프트
            **kwargs: 추가 파라미터 (temperature, max_tokens 등)

        Returns:
            VisionResponse 객체
        """
        encoded = image_to_base64(image, max_edge=settings.max_image_edge)
        messages = [
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": prompt},
                    {"type": "image_url", "image_url": {"url": f"data:image/png;base64,{encoded}"}},
                ],
            }
        ]
        kwargs.setdefault("max_tokens", settings.vision_max_tokens)

        try:
            response = self.client.chat.completions.create(
                model=self.model, messages=messages, **kwargs
            )
        except openai.APIError as e:
            raise VisionServiceError(f"OpenAI API 오류: {e}") from e

        return VisionResponse(
            content=response.choices[0].message.content or "",
            model=response.model,
            usage={
                "prompt_tokens": response.usage.prompt_tokens,
                "completion_tokens": response.usage.completion_tokens,
                "total_tokens": response.usage.total_tokens,
            },
            metadata={"provider": "openai"},
        )
