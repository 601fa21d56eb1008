"""photolog 예외 정의

식별자 엔진 자체는 예외를 던지지 않습니다 (정책 판단은 bool 반환).
예외는 추출 파이프라인(비전 서비스, 응답 파싱)에서만 사용합니다.
"""


class PhotologError(Exception):
    """photolog 기본 예외"""


class VisionServiceError(PhotologError):
    """비전 서비스 호출/설정 실패 (API 키 누락, 할당량 초과 등)"""


class ResponseParseError(PhotologError):
    """비전 응답을 JSON 배열로 해석할 수 없음"""

    def __init__(self, message: str, raw_text: str = ""):
        super().__init__(message)
        self.raw_text = raw_text
