"""접수번호 후보로 남은 위치 채우기"""

import logging
from typing import Sequence

from .assignment_state import AssignmentState
from .candidates import Candidate
from .vocabulary import is_valid_for_stream

logger = logging.getLogger(__name__)


def fill_from_candidates(
    state: AssignmentState,
    candidates: Sequence[Candidate],
    item: str | None = None,
) -> int:
    """패턴 엔진이 비워 둔 위치를 후보 시퀀스 순서대로 채움 (state를 직접 변경)

    후보 커서는 모든 위치가 공유합니다. 할당에 성공하면 사용한 후보 다음으로 이동하고,
    끝까지 찾지 못하면 커서는 끝에 머무릅니다 (이후 위치는 채워지지 않음).
    빈 후보, 현재 스트림에서 허용되지 않는 후보, attempt_assign이 거부한 후보는 건너뜁니다.

    Returns:
        채운 위치 수
    """
    cursor = 0
    filled = 0

    for position in range(len(state)):
        if state.assignments[position] is not None or state.consumed[position]:
            continue

        search = cursor
        while search < len(candidates):
            code = candidates[search]
            if code and is_valid_for_stream(code, item) and state.attempt_assign(
                position, code, rule_based=False
            ):
                logger.debug(f"[fallback] 위치 {position} ← {code} (후보 {search})")
                cursor = search + 1
                filled += 1
                break
            search += 1
        else:
            cursor = search

    return filled
