"""더미 비전 구현 (테스트용)"""

import json

from PIL import Image

from .base import BaseVisionService, VisionResponse

DEFAULT_ENTRIES = [
    {"time": "2025/05/21 09:00", "value": "1.012"},
    {"time": "2025/05/21 09:30", "value": "1.104"},
    {"time": "2025/05/21 10:00", "value": "19.87"},
    {"time": "2025/05/21 10:30", "value": "20.11"},
]

TN_TP_MARKER = "항목/파라미터: TN 및 TP"

DEFAULT_TN_TP_ENTRIES = [
    {"time": "2025/04/23 05:00", "value_tn": "46.2", "value_tp": "1.2"},
    {"time": "2025/04/23 06:00", "value_tn": "5.388", "value_tp": "0.1"},
    {"time": "2025/05/21 09:38", "value_tn": "89.629"},
]


class DummyVision(BaseVisionService):
    """테스트용 더미 비전 서비스

    responses를 주면 호출 순서대로 반환하고, 다 쓰면 마지막 응답을 반복합니다.
    주지 않으면 프롬프트에 TN/TP 지시가 있는지에 따라 예시 JSON을 반환합니다.
    """

    name = "dummy"

    def __init__(self, responses: list[str] | None = None):
        self.responses = list(responses or [])
        self.calls: list[str] = []

    def extract_text(self, image: Image.Image, prompt: str, **kwargs) -> VisionResponse:
        self.calls.append(prompt)

        if self.responses:
            index = min(len(self.calls), len(self.responses)) - 1
            content = self.responses[index]
        elif TN_TP_MARKER in prompt:
            content = json.dumps(DEFAULT_TN_TP_ENTRIES, ensure_ascii=False)
        else:
            content = json.dumps(DEFAULT_ENTRIES, ensure_ascii=False)

        return VisionResponse(
            content=content,
            model="dummy-model",
            usage={"prompt_tokens": 0, "completion_tokens": 0, "total_tokens": 0},
            metadata={"provider": "dummy", "image_size": list(image.size)},
        )
