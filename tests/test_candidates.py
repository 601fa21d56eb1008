"""접수번호 후보 시퀀스 테스트"""

from photolog.services.identifiers.candidates import (
    SEQUENCE_LENGTH,
    ReceiptPatternSource,
    StaticCandidateSource,
)


class TestStaticCandidateSource:
    """고정 후보"""

    def test_returns_copy(self):
        source = StaticCandidateSource(["Z1", None, "Z2"])
        result = source.candidates("아무거나")
        assert result == ["Z1", None, "Z2"]
        result.append("S1")
        assert source.candidates("") == ["Z1", None, "Z2"]


class TestReceiptPatternSource:
    """접수번호 표기 공식"""

    def setup_method(self):
        self.source = ReceiptPatternSource()

    def test_empty_receipt_number(self):
        """빈 접수번호는 후보 없음 19개"""
        assert self.source.candidates("") == [None] * SEQUENCE_LENGTH
        assert self.source.candidates("   ") == [None] * SEQUENCE_LENGTH

    def test_full_formula(self):
        """앞 4글자 / 5번째부터 9글자 / 마지막 6글자"""
        result = self.source.candidates("zzss" + "zzsszzmmm" + "zszszs")
        assert len(result) == SEQUENCE_LENGTH
        assert result[:4] == ["Z1", "Z2", "S1", "S2"]
        assert result[4:13] == ["Z1", "Z2", "S3", "S4", "Z3", "Z4", "M1", "M2", "M3"]
        assert result[13:] == ["Z6", "S6", "Z7", "S7", "현장1", "현장2"]

    def test_reversed_tail(self):
        result = self.source.candidates("szss" + "sszzssmmm" + "szszsz")
        assert result[:4] == ["S5", "Z5", "S1", "S2"]
        assert result[13:] == ["S6", "Z6", "S7", "Z7", "현장2", "현장1"]

    def test_five_char_head_marker(self):
        """4번 위치는 앞 5글자까지 비교"""
        result = self.source.candidates("MMMZS" + "x" * 14)
        assert result[:4] == ["M1", "M2", "M3", "Z5"]
        result = self.source.candidates("MMMZZ" + "x" * 14)
        assert result[3] == "Z1"

    def test_plain_receipt_number_defaults(self):
        """표기가 없는 일반 접수번호는 기본 순서, 끝 6칸은 후보 없음"""
        result = self.source.candidates("2025-0001")
        assert result[:4] == ["M1", "M2", "M3", "Z5"]
        assert result[4:13] == ["S5", "Z1", "Z2", "S1", "S2", "Z3", "Z4", "S3", "S4"]
        assert result[13:] == [None] * 6
