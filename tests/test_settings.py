"""설정 및 유틸리티 테스트"""

import base64
import io
import logging

import pytest
from PIL import Image
from unittest.mock import patch

from photolog.settings import Settings, configure_logging, validate_settings
from photolog.utils.images import (
    EXIF_ORIENTATION,
    image_to_base64,
    image_to_bytes,
    load_image_from_bytes,
    resize_image,
    strip_data_url,
    validate_image_format,
)


class TestSettings:
    """Settings 테스트"""

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("VISION_PROVIDER", "dummy")
        monkeypatch.setenv("MIRROR_SECONDARY_IDENTIFIERS", "false")
        config = Settings()
        assert config.vision_provider == "dummy"
        assert config.mirror_secondary_identifiers is False

    def test_validate_missing_key(self):
        with patch('photolog.settings.settings') as mock_settings:
            mock_settings.vision_provider = "openai"
            mock_settings.openai_api_key = None
            mock_settings.max_image_edge = 2048
            warnings = validate_settings()
        assert "vision" in warnings
        assert "image" not in warnings

    def test_validate_small_image_edge(self):
        with patch('photolog.settings.settings') as mock_settings:
            mock_settings.vision_provider = "dummy"
            mock_settings.max_image_edge = 100
            warnings = validate_settings()
        assert set(warnings) == {"image"}

    def test_configure_logging(self):
        with patch('photolog.settings.logging.basicConfig') as basic_config:
            configure_logging("debug")
        assert basic_config.call_args.kwargs["level"] == logging.DEBUG


class TestImageUtils:
    """이미지 유틸리티 테스트"""

    def test_resize_keeps_ratio(self):
        image = Image.new("RGB", (4000, 2000))
        resized = resize_image(image, max_edge=1000)
        assert resized.size == (1000, 500)

    def test_resize_small_image_untouched(self, sample_image):
        assert resize_image(sample_image) is sample_image

    def test_image_to_base64_jpeg_from_rgba(self):
        image = Image.new("RGBA", (10, 10))
        assert image_to_base64(image, format="JPEG")

    def test_strip_data_url(self):
        assert strip_data_url("data:image/png;base64,QUJD") == "QUJD"
        assert strip_data_url("QUJD") == "QUJD"
        with pytest.raises(ValueError):
            strip_data_url("data:image/png;base64")

    def test_validate_image_format(self):
        assert validate_image_format("screen.PNG")
        assert not validate_image_format("notes.txt")

    def test_exif_rotation_applied_without_resize(self):
        """축소가 필요 없는 작은 사진도 EXIF 회전 반영"""
        image = Image.new("RGB", (20, 10))
        exif = image.getexif()
        exif[EXIF_ORIENTATION] = 6
        buffer = io.BytesIO()
        image.save(buffer, format="JPEG", exif=exif.tobytes())
        photo = load_image_from_bytes(buffer.getvalue())
        assert photo.size == (20, 10)

        assert resize_image(photo).size == (10, 20)
        encoded = image_to_base64(photo)
        assert load_image_from_bytes(base64.b64decode(encoded)).size == (10, 20)

    def test_cmyk_to_png(self):
        """CMYK 사진도 PNG로 저장 가능"""
        data = image_to_bytes(Image.new("CMYK", (10, 10)), format="PNG")
        assert load_image_from_bytes(data).mode == "RGB"
