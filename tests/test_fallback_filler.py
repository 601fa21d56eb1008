"""후보 시퀀스 채우기 테스트"""

from photolog.services.identifiers.assignment_state import AssignmentState
from photolog.services.identifiers.fallback_filler import fill_from_candidates


def _state(assignments, consumed=None):
    n = len(assignments)
    return AssignmentState(
        assignments=list(assignments),
        rule_flags=[False] * n,
        consumed=list(consumed or [False] * n),
    )


class TestFillFromCandidates:
    """fill_from_candidates 테스트"""

    def test_fills_in_order(self):
        """빈 위치를 후보 순서대로 채움"""
        state = _state([None, None])
        assert fill_from_candidates(state, ["Z1", "Z2"]) == 2
        assert state.assignments == ["Z1", "Z2"]
        assert state.rule_flags == [False, False]

    def test_skips_used_candidate(self):
        """다른 위치에서 이미 쓰인 후보는 건너뜀"""
        state = _state([None, "Z1", None])
        assert fill_from_candidates(state, ["Z1", "Z2", "S1"]) == 2
        assert state.assignments == ["Z2", "Z1", "S1"]

    def test_skips_empty_candidates(self):
        state = _state([None, None])
        fill_from_candidates(state, [None, "Z1", "", "M1"])
        assert state.assignments == ["Z1", "M1"]

    def test_cursor_is_shared(self):
        """커서는 위치 사이에서 되돌아가지 않음"""
        state = _state([None, "S1", None])
        fill_from_candidates(state, ["Z1", "S1", "Z2"])
        assert state.assignments == ["Z1", "S1", "Z2"]

    def test_exhausted_cursor_stays_at_end(self):
        """후보를 다 쓰면 이후 위치는 비워 둠"""
        state = _state(["Z2", None, None])
        assert fill_from_candidates(state, ["Z2"]) == 0
        assert state.assignments == ["Z2", None, None]

    def test_skips_consumed_positions(self):
        """패턴이 차지한 위치는 채우지 않음"""
        state = _state([None, None], consumed=[True, False])
        fill_from_candidates(state, ["Z1", "Z2"])
        assert state.assignments == [None, "Z1"]

    def test_stream_filter_tn_tp(self):
        """TN/TP 주 스트림에는 TP 코드를 넣지 않음"""
        state = _state([None])
        fill_from_candidates(state, ["Z1P", "Z1"], item="TN/TP")
        assert state.assignments == ["Z1"]

    def test_placeholder_codes(self):
        """'현장' 코드도 후보로는 할당 가능"""
        state = _state([None])
        fill_from_candidates(state, ["현장1"])
        assert state.assignments == ["현장1"]
