"""식별자 코드 사전 테스트"""

from photolog.services.identifiers.vocabulary import (
    IDENTIFIER_OPTIONS,
    TN_IDENTIFIERS,
    TP_IDENTIFIERS,
    allowed_identifiers,
    is_placeholder,
    is_valid_for_stream,
    is_valid_identifier,
    to_secondary,
)


class TestVocabulary:
    """코드 집합"""

    def test_sizes(self):
        assert len(TN_IDENTIFIERS) == 19
        assert len(TP_IDENTIFIERS) == 19
        assert len(IDENTIFIER_OPTIONS) == 38
        assert IDENTIFIER_OPTIONS[0] == "M1"

    def test_valid(self):
        assert is_valid_identifier("Z1")
        assert is_valid_identifier("현장2P")
        assert not is_valid_identifier("Z8")
        assert not is_valid_identifier(None)

    def test_placeholder(self):
        assert is_placeholder("현장1")
        assert not is_placeholder("Z1")

    def test_stream_subset(self):
        """TN/TP 주 스트림은 TN 코드만"""
        assert "Z1P" not in allowed_identifiers("TN/TP")
        assert "Z1P" in allowed_identifiers("TOC")
        assert is_valid_for_stream("Z1", "TN/TP")
        assert not is_valid_for_stream("Z1P", "TN/TP")
        assert not is_valid_for_stream("", "TOC")

    def test_to_secondary(self):
        assert to_secondary("Z1") == "Z1P"
        assert to_secondary("Z1P") is None
        assert to_secondary(None) is None
