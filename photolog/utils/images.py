"""분석기 화면 사진 처리 유틸리티

비전 API로 보내기 전에 사진을 열고, 긴 변 기준으로 줄이고, base64로 인코딩합니다.
"""

import base64
import io
from pathlib import Path

from PIL import Image, ImageOps

SUPPORTED_FORMATS = {".jpg", ".jpeg", ".png", ".webp", ".bmp", ".tiff"}

# JPEG로 저장할 수 없는 모드
_NEEDS_RGB = ("RGBA", "LA", "P", "CMYK", "I;16")

EXIF_ORIENTATION = 0x0112


def load_image(file_path: str | Path) -> Image.Image:
    """사진 파일 열기"""
    return Image.open(file_path)


def load_image_from_bytes(data: bytes) -> Image.Image:
    """업로드/카메라 바이트에서 사진 열기"""
    return Image.open(io.BytesIO(data))


def image_to_bytes(image: Image.Image, format: str = "PNG") -> bytes:
    buffer = io.BytesIO()
    if format.upper() in ("JPEG", "JPG"):
        if image.mode in _NEEDS_RGB:
            image = image.convert("RGB")
    elif image.mode == "CMYK":
        # PNG/WebP 등은 CMYK를 저장하지 못함
        image = image.convert("RGB")
    image.save(buffer, format=format)
    return buffer.getvalue()


def upright_image(image: Image.Image) -> Image.Image:
    """휴대폰 사진의 EXIF 회전 반영 (회전 정보가 없으면 그대로 반환)"""
    if image.getexif().get(EXIF_ORIENTATION, 1) == 1:
        return image
    return ImageOps.exif_transpose(image)


def resize_image(image: Image.Image, max_edge: int = 2048) -> Image.Image:
    """EXIF 회전 반영 후 긴 변이 max_edge를 넘으면 비율을 유지해 축소"""
    image = upright_image(image)
    if max(image.size) <= max_edge:
        return image
    scale = max_edge / max(image.size)
    width, height = (max(1, round(side * scale)) for side in image.size)
    return image.resize((width, height), Image.Resampling.LANCZOS)


def image_to_base64(image: Image.Image, max_edge: int | None = None, format: str = "PNG") -> str:
    """비전 API 전송용 base64 문자열 (max_edge가 있으면 먼저 축소)"""
    image = resize_image(image, max_edge=max_edge) if max_edge else upright_image(image)
    return base64.b64encode(image_to_bytes(image, format=format)).decode("ascii")


def strip_data_url(data: str) -> str:
    """data URL이면 base64 본문만 반환"""
    if not data.startswith("data:"):
        return data
    header, sep, body = data.partition(",")
    if not sep:
        raise ValueError(f"잘못된 data URL 형식입니다: {header[:40]}")
    return body


def validate_image_format(file_path: str | Path) -> bool:
    return Path(file_path).suffix.lower() in SUPPORTED_FORMATS
