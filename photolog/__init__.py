"""photolog: 분석기 화면 사진 측정값 추출 및 시료 식별자 자동 할당"""

__version__ = "0.1.0"
