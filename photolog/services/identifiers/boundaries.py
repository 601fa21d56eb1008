"""농도 구간 경계값 계산

측정값의 서로 다른 숫자 값들을 정렬한 뒤 저/중/고 3구간으로 나누는 두 경계값을 구합니다.

분석기 측정값은 교정 지점 근처에 몰리는 경향이 있어서 연속 3등분만으로는
표본이 적을 때 쉽게 무너집니다. 그래서 다음 순서로 점점 단순한 방법으로 물러섭니다.

- 서로 다른 값 0개: None
- 1개: boundary1 = boundary2 = 그 값
- 2개: boundary1 = boundary2 = 작은 값 (작은 값은 low, 나머지는 high, medium 없음)
- 3개: boundary1 = 최솟값, boundary2 = 중간값
- 4개 이상: 연속 3등분 → 인덱스 기반 3등분 → 최솟값/중간점
"""

from typing import Iterable, Sequence

from photolog.models.readings import Boundaries, Reading

from .numeric import parse_numeric


def _index_tertile(values: Sequence[float]) -> tuple[float, float]:
    """정렬된 고유값 배열에서 인덱스 기반 3등분"""
    n = len(values)
    idx1 = max(0, n // 3 - 1)
    idx2 = max(idx1 + 1, (2 * n) // 3 - 1)
    idx2 = min(n - 2, idx2)
    idx1 = min(idx1, max(0, idx2 - 1))

    if 0 <= idx1 < idx2 < n and values[idx1] < values[idx2]:
        return values[idx1], values[idx2]
    return values[0], (values[0] + values[-1]) / 2


def boundaries_from_values(numbers: Iterable[float]) -> Boundaries | None:
    """숫자 값 목록에서 경계값 계산"""
    values = sorted(set(numbers))
    n = len(values)
    if n == 0:
        return None

    overall_min = values[0]
    overall_max = values[-1]
    span = overall_max - overall_min

    if n == 1:
        b1, b2 = overall_min, overall_max
    elif n == 2:
        b1 = b2 = values[0]
    elif n == 3:
        b1, b2 = values[0], values[1]
    else:
        b1 = overall_min + span / 3
        b2 = overall_min + (2 * span) / 3
        if b1 >= b2:
            b1, b2 = _index_tertile(values)

    if b1 > b2 and overall_max > overall_min:
        b1, b2 = b2, b1

    # 경계가 겹치면 인접한 고유값으로 벌려준다 (2개인 경우는 의도적으로 겹친 상태 유지)
    if n != 2 and b1 == b2 and n > 1 and overall_min < overall_max and b2 < overall_max:
        next_value = next((v for v in values if v > b2), None)
        if next_value is not None:
            b2 = next_value
        if b1 == b2 and b1 > overall_min:
            prev_value = next((v for v in reversed(values) if v < b1), None)
            if prev_value is not None:
                b1 = prev_value

    if n == 2:
        b1 = b2 = values[0]
    elif b1 >= b2 and n > 2:
        b1 = overall_min
        b2 = (overall_min + overall_max) / 2
        if b1 >= b2 and overall_min < overall_max:
            b2 = overall_max

    return Boundaries(
        overall_min=overall_min,
        overall_max=overall_max,
        span=span,
        boundary1=b1,
        boundary2=b2,
    )


def calculate_boundaries(readings: Sequence[Reading] | None) -> Boundaries | None:
    """측정값 리스트(주 항목 값 기준)에서 경계값 계산

    숫자로 해석되지 않는 값은 제외합니다. 숫자 값이 하나도 없으면 None.
    """
    if not readings:
        return None
    numbers = (parse_numeric(r.value) for r in readings)
    return boundaries_from_values(v for v in numbers if v is not None)
