"""농도 구간 경계값 테스트"""

import pytest

from photolog.models.readings import Reading
from photolog.services.identifiers.boundaries import (
    boundaries_from_values,
    calculate_boundaries,
)


class TestBoundariesFromValues:
    """boundaries_from_values 테스트"""

    def test_no_values(self):
        """값이 없으면 None"""
        assert boundaries_from_values([]) is None

    def test_single_distinct_value(self):
        """고유값 1개: 두 경계 모두 그 값"""
        b = boundaries_from_values([3.0, 3.0, 3.0])
        assert b.boundary1 == b.boundary2 == 3.0
        assert b.overall_min == b.overall_max == 3.0
        assert b.span == 0

    def test_two_distinct_values_collapse(self):
        """고유값 2개: 두 경계 모두 작은 값"""
        b = boundaries_from_values([5.0, 1.0, 5.0, 1.0])
        assert b.boundary1 == b.boundary2 == 1.0
        assert b.overall_max == 5.0

    def test_three_distinct_values(self):
        """고유값 3개: 최솟값/중간값"""
        b = boundaries_from_values([9.0, 1.0, 4.0])
        assert b.boundary1 == 1.0
        assert b.boundary2 == 4.0

    def test_continuous_tertile(self):
        """고유값 4개 이상: 연속 3등분"""
        b = boundaries_from_values([1, 2, 20, 22])
        assert b.overall_min == 1
        assert b.overall_max == 22
        assert b.span == 21
        assert b.boundary1 == pytest.approx(8.0)
        assert b.boundary2 == pytest.approx(15.0)

    @pytest.mark.parametrize(
        "values",
        [
            [1, 10, 2, 12, 3, 15],
            [0.1, 0.1001, 0.1002, 0.1003, 50.0],
            [1, 2, 3, 4, 5, 6, 7, 8, 9, 10],
            [-5, -1, 0, 0.5, 100],
        ],
    )
    def test_order_and_range(self, values):
        """고유값 4개 이상이면 boundary1 <= boundary2, 모두 [min, max] 안"""
        b = boundaries_from_values(values)
        assert b.boundary1 <= b.boundary2
        assert b.overall_min <= b.boundary1 <= b.overall_max
        assert b.overall_min <= b.boundary2 <= b.overall_max


class TestCalculateBoundaries:
    """calculate_boundaries 테스트"""

    def test_ignores_non_numeric(self):
        """숫자가 아닌 값은 제외"""
        readings = [Reading(value="1.0"), Reading(value="오류"), Reading(value="")]
        b = calculate_boundaries(readings)
        assert b.overall_min == b.overall_max == 1.0

    def test_no_numeric_values(self):
        """숫자 값이 없으면 None"""
        assert calculate_boundaries([Reading(value="고"), Reading(value="")]) is None

    def test_empty(self):
        assert calculate_boundaries([]) is None
        assert calculate_boundaries(None) is None

    def test_uses_primary_value_only(self):
        """보조 값(TP)은 경계 계산에 쓰지 않음"""
        readings = [
            Reading(value="1.0", value_secondary="100"),
            Reading(value="2.0", value_secondary="200"),
        ]
        b = calculate_boundaries(readings)
        assert b.overall_max == 2.0
