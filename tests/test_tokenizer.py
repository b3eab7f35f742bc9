"""Tests for the sentinel tokenizer."""

from asc100.engine.strategy import Strategy
from asc100.engine.tokenizer import Sentinel, tokenize

L = Sentinel.literal
M = Sentinel.marker


class TestTokenizeExtensions:
    def setup_method(self):
        self.s = Strategy.extensions_strict()

    def test_empty(self):
        assert tokenize("", self.s) == []

    def test_plain_text(self):
        assert tokenize("no markers here", self.s) == [L("no markers here")]

    def test_single_marker(self):
        assert tokenize("#V#", self.s) == [M(103)]

    def test_text_around_marker(self):
        assert tokenize("a#V#b", self.s) == [L("a"), M(103), L("b")]

    def test_adjacent_markers(self):
        assert tokenize("#V##EOF#", self.s) == [M(103), M(101)]

    def test_markers_with_space(self):
        assert tokenize("#V# #EOF#", self.s) == [M(103), L(" "), M(101)]

    def test_fake_marker_is_literal(self):
        assert tokenize("#FAKE#", self.s) == [L("#FAKE#")]

    def test_lowercase_is_literal(self):
        assert tokenize("#v#", self.s) == [L("#v#")]

    def test_lone_hash(self):
        assert tokenize("#", self.s) == [L("#")]

    def test_unterminated(self):
        assert tokenize("x #V incomplete", self.s) == [L("x #V incomplete")]

    def test_double_hashes(self):
        assert tokenize("##V##", self.s) == [L("##V##")]

    def test_candidate_consumes_closing_hash(self):
        """'#a#' eats the '#' that would have opened '#V#'."""
        assert tokenize("#a#V#", self.s) == [L("#a#V#")]

    def test_fake_then_real(self):
        assert tokenize("#FAKE##V#", self.s) == [L("#FAKE#"), M(103)]

    def test_literal_runs_never_empty(self):
        for sentinel in tokenize("#V##V#x#V#", self.s):
            assert sentinel.is_marker or sentinel.text


class TestTokenizeCore:
    def setup_method(self):
        self.s = Strategy.core_strict()

    def test_marker_is_literal(self):
        assert tokenize("#V#", self.s) == [L("#V#")]

    def test_mixed(self):
        assert tokenize("Hello #V#name#V# #EOF#", self.s) == [L("Hello #V#name#V# #EOF#")]


class TestSentinel:
    def test_literal(self):
        s = Sentinel.literal("abc")
        assert not s.is_marker
        assert s.text == "abc"

    def test_marker(self):
        s = Sentinel.marker(118)
        assert s.is_marker
        assert s.code == 118
