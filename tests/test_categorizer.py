"""측정값 구간 분류 테스트"""

from photolog.models.readings import Boundaries
from photolog.services.identifiers.boundaries import boundaries_from_values
from photolog.services.identifiers.categorizer import Category, categorize

BOUNDS = Boundaries(overall_min=1, overall_max=22, span=21, boundary1=8, boundary2=15)


class TestCategorize:
    """categorize 테스트"""

    def test_numeric_bands(self):
        """경계값 포함 규칙 (<= boundary1 저, <= boundary2 중, 그 외 고)"""
        assert categorize("1", BOUNDS) == Category.LOW
        assert categorize("8", BOUNDS) == Category.LOW
        assert categorize("8.01", BOUNDS) == Category.MEDIUM
        assert categorize("15", BOUNDS) == Category.MEDIUM
        assert categorize("15.5", BOUNDS) == Category.HIGH

    def test_text_hint_overrides_number(self):
        """텍스트 힌트는 수치 구간보다 우선"""
        assert categorize("5.2 고", BOUNDS) == Category.HIGH
        assert categorize("20 저", BOUNDS) == Category.LOW
        assert categorize("1 중", BOUNDS) == Category.MEDIUM

    def test_text_hint_without_boundaries(self):
        """경계값이 없어도 텍스트 힌트는 적용"""
        assert categorize("5.2 고", None) == Category.HIGH
        assert categorize("고", None) == Category.HIGH

    def test_unknown(self):
        """경계값이 없거나 숫자가 아니면 unknown"""
        assert categorize("5.2", None) == Category.UNKNOWN
        assert categorize("", BOUNDS) == Category.UNKNOWN
        assert categorize("N/A", BOUNDS) == Category.UNKNOWN

    def test_hint_in_number_prefix_ignored(self):
        """힌트는 숫자 뒤 텍스트에서만 찾음"""
        assert categorize("20 mg/L", BOUNDS) == Category.HIGH

    def test_two_distinct_smaller_is_low(self):
        """고유값 2개일 때 작은 값은 항상 저, 큰 값은 고"""
        b = boundaries_from_values([3.0, 7.0])
        assert categorize("3.0", b) == Category.LOW
        assert categorize("7.0", b) == Category.HIGH

    def test_pure(self):
        """같은 입력은 같은 결과"""
        assert categorize("9.5", BOUNDS) == categorize("9.5", BOUNDS)
