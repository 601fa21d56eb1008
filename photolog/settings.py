"""애플리케이션 설정 관리"""

import logging
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

# .env 파일 로드
load_dotenv()


LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 비전(텍스트 추출) 설정
    vision_provider: Literal["openai", "anthropic", "dummy"] = Field(
        default="openai", description="비전 모델 제공자 (openai | anthropic | dummy)"
    )
    openai_api_key: str | None = Field(default=None, description="OpenAI API 키")
    anthropic_api_key: str | None = Field(default=None, description="Anthropic API 키")

    # 모델 설정
    openai_model: str = Field(default="gpt-4o", description="OpenAI 모델명")
    anthropic_model: str = Field(
        default="claude-3-5-sonnet-20241022", description="Anthropic 모델명"
    )
    vision_max_tokens: int = Field(default=4096, description="비전 응답 최대 토큰 수")

    # 이미지 설정
    max_image_edge: int = Field(default=2048, description="전송 전 이미지 최대 변 길이 (px)")

    # 식별자 할당 설정
    default_item: str = Field(default="TOC", description="기본 분석 항목")
    mirror_secondary_identifiers: bool = Field(
        default=True, description="TN/TP 모드에서 TN 식별자를 TP 식별자로 복사"
    )

    # 앱 설정
    app_debug: bool = Field(default=False, description="디버그 모드")
    log_level: str = Field(default="INFO", description="로그 레벨")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# 전역 설정 인스턴스
settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """로그 레벨/포맷 적용 (settings.log_level 기본)"""
    name = (level or settings.log_level).upper()
    logging.basicConfig(level=getattr(logging, name, logging.INFO), format=LOG_FORMAT)


def validate_settings() -> dict[str, str]:
    """설정 유효성 검사 및 경고 메시지 반환"""
    warnings = {}

    if settings.vision_provider == "openai":
        if not settings.openai_api_key:
            warnings["vision"] = "OpenAI API 사용을 위해서는 OPENAI_API_KEY가 필요합니다."
    elif settings.vision_provider == "anthropic":
        if not settings.anthropic_api_key:
            warnings["vision"] = (
                "Anthropic API 사용을 위해서는 ANTHROPIC_API_KEY가 필요합니다."
            )

    if settings.max_image_edge < 256:
        warnings["image"] = (
            f"max_image_edge 값이 너무 작습니다: {settings.max_image_edge} (최소 256 권장)"
        )

    return warnings
