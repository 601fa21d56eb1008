"""비전(텍스트 추출) 서비스 기본 인터페이스

이미지와 프롬프트를 받아 원문 텍스트(대개 JSON 배열)를 반환하는 외부 서비스 추상화.
"""
from __future__ import annotations

import base64
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from PIL import Image

from photolog.utils.images import load_image, load_image_from_bytes, strip_data_url


@dataclass
class VisionResponse:
    """비전 서비스 응답 데이터 클래스"""

    content: str
    model: str | None = None
    usage: dict | None = None
    metadata: dict | None = None


class BaseVisionService(ABC):
    """비전 서비스 기본 추상 클래스

    필수 구현:
        - extract_text(Image.Image, str): 핵심 추상 메서드

    기본 구현 제공:
        - extract_from_path(str | Path, str)
        - extract_from_bytes(bytes, str)
        - run(Union[...], str): 입력 타입 자동 감지 (PIL Image, bytes, data URL, 파일 경로)
    """

    name: str = "base"

    @abstractmethod
    def extract_text(self, image: Image.Image, prompt: str, **kwargs) -> VisionResponse:
        """이미지에서 프롬프트에 따라 텍스트 추출

        Args:
            image: PIL Image 객체
            prompt: 추출 지시 프롬프트
            **kwargs: 추가 파라미터 (temperature, max_tokens 등)

        Returns:
            VisionResponse 객체
        """
        pass

    def extract_from_path(self, file_path: str | Path, prompt: str, **kwargs) -> VisionResponse:
        """파일 경로에서 추출"""
        with load_image(file_path) as image:
            image.load()
            return self.extract_text(image, prompt, **kwargs)

    def extract_from_bytes(self, image_bytes: bytes, prompt: str, **kwargs) -> VisionResponse:
        """바이트 데이터에서 추출"""
        return self.extract_text(load_image_from_bytes(image_bytes), prompt, **kwargs)

    def run(
        self, image: Union[str, Path, bytes, Image.Image], prompt: str, **kwargs
    ) -> VisionResponse:
        """통합 실행 메서드 (입력 타입 자동 감지)"""
        if isinstance(image, Image.Image):
            return self.extract_text(image, prompt, **kwargs)
        if isinstance(image, bytes):
            return self.extract_from_bytes(image, prompt, **kwargs)
        if isinstance(image, str) and image.startswith("data:"):
            return self.extract_from_bytes(base64.b64decode(strip_data_url(image)), prompt, **kwargs)
        if isinstance(image, (str, Path)):
            return self.extract_from_path(image, prompt, **kwargs)
        raise TypeError(f"지원하지 않는 이미지 입력 타입: {type(image).__name__}")
