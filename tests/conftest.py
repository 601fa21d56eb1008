"""테스트 픽스처 및 설정"""

from pathlib import Path

import pytest
from dotenv import load_dotenv
from PIL import Image

from photolog.models.readings import Reading
from photolog.services.vision.dummy_vision import DummyVision

# 프로젝트 루트의 .env 파일 로드
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)


@pytest.fixture
def dummy_vision_service():
    """더미 비전 서비스 픽스처"""
    return DummyVision()


@pytest.fixture
def sample_image():
    """샘플 이미지 픽스처"""
    return Image.new("RGB", (100, 100), color="white")


@pytest.fixture
def make_readings():
    """값 리스트 → 시간순 Reading 리스트 팩토리"""

    def _make(values, identifiers=None, secondary=None):
        readings = []
        for idx, value in enumerate(values):
            readings.append(
                Reading(
                    time=f"2025/05/21 {9 + idx // 60:02d}:{idx % 60:02d}",
                    value=value,
                    value_secondary=secondary[idx] if secondary else None,
                    identifier=identifiers[idx] if identifiers else None,
                )
            )
        return readings

    return _make
