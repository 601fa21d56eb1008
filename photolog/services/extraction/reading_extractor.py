"""측정값 추출기 (ReadingExtractor)

분석기 화면 사진 여러 장을 비전 서비스로 읽어 시간순 Reading 리스트로 만듭니다.
이미지는 순서대로 처리하며, 응답을 해석할 수 없는 이미지는 건너뛰고 실패 목록에 남깁니다.
API 키 누락 등 VisionServiceError는 배치 전체를 중단합니다.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Sequence, Union

from PIL import Image

from photolog.errors import ResponseParseError
from photolog.models.envelopes import ExtractionData, ExtractionEnvelope, ExtractionMeta
from photolog.models.readings import RawEntry
from photolog.prompts import build_reading_prompt
from photolog.utils.images import validate_image_format

from .response_parser import merge_raw_entries, parse_raw_entries, to_readings

if TYPE_CHECKING:
    from photolog.services.vision.base import BaseVisionService

logger = logging.getLogger(__name__)

ImageInput = Union[str, Path, bytes, Image.Image]


def _is_file_path(image: ImageInput) -> bool:
    return isinstance(image, Path) or (isinstance(image, str) and not image.startswith("data:"))


def _image_name(image: ImageInput, index: int) -> str:
    if _is_file_path(image):
        return Path(image).name
    return f"image_{index + 1}"


class ReadingExtractor:
    """사진 → 측정값 추출 파이프라인"""

    def __init__(self, vision_service: "BaseVisionService | None" = None):
        """
        Args:
            vision_service: 비전 서비스 인스턴스 (None이면 설정에 따라 생성)
        """
        if vision_service is None:
            from photolog.services.vision.factory import get_vision_service

            vision_service = get_vision_service()
        self.vision_service = vision_service

    def extract(
        self,
        images: Sequence[ImageInput],
        receipt_number: str | None = None,
        site_location: str | None = None,
        item: str | None = None,
        names: Sequence[str] | None = None,
    ) -> ExtractionEnvelope:
        """이미지들에서 측정값 추출

        Args:
            images: 이미지 입력 리스트 (PIL Image, bytes, data URL, 파일 경로)
            receipt_number: 접수번호 (프롬프트 컨텍스트)
            site_location: 현장/위치 (프롬프트 컨텍스트)
            item: 분석 항목 ("TN/TP"이면 TN/TP 두 값 추출)
            names: 이미지 표시 이름 (없으면 파일명 또는 image_N)

        Returns:
            ExtractionEnvelope (stage='extract')

        Raises:
            VisionServiceError: 비전 서비스 설정/호출 실패
        """
        prompt = build_reading_prompt(receipt_number, site_location, item)
        collected: list[RawEntry] = []
        failed: list[str] = []

        for index, image in enumerate(images):
            name = names[index] if names and index < len(names) else _image_name(image, index)
            if _is_file_path(image) and not validate_image_format(image):
                logger.warning(f"[{name}] 지원하지 않는 이미지 형식")
                failed.append(name)
                continue

            response = self.vision_service.run(image, prompt)
            try:
                entries = parse_raw_entries(response.content, item)
            except ResponseParseError as e:
                logger.warning(f"[{name}] 응답 파싱 실패: {e}")
                logger.debug(f"[{name}] 정리된 응답: {e.raw_text[:500]}")
                failed.append(name)
                continue

            logger.info(f"[{name}] {len(entries)}개 레코드 추출")
            collected.extend(entries)

        merged = merge_raw_entries(collected, item)
        readings = to_readings(merged, item)

        if failed:
            logger.warning(f"{len(images)}개 중 {len(failed)}개 이미지 처리 실패: {failed}")

        return ExtractionEnvelope(
            stage="extract",
            data=ExtractionData(readings=readings, raw_entries=merged),
            meta=ExtractionMeta(
                images=len(images),
                failed_images=failed,
                before_dedup=len(collected),
                after_dedup=len(merged),
                item=item,
                engine=self.vision_service.name,
            ),
        )
