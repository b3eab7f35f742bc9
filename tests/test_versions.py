"""Tests for charset versions."""

import pytest

from asc100.core.charset import ABSENT, is_permutation_of_base
from asc100.core.versions import (
    VERSIONS,
    V1_STANDARD,
    V2_NUMBERS,
    V3_LOWERCASE,
    V4_URL,
    Version,
    describe_charset,
    get_version,
)
from asc100.engine.strategy import Strategy


ALL_VERSIONS = [V1_STANDARD, V2_NUMBERS, V3_LOWERCASE, V4_URL]


class TestRegistry:
    def test_four_versions(self):
        assert list(VERSIONS) == [
            "v1_standard", "v2_numbers_first",
            "v3_lowercase_first", "v4_url_optimized",
        ]

    def test_get_version(self):
        assert get_version("v3_lowercase_first") is V3_LOWERCASE

    def test_unknown_version(self):
        with pytest.raises(KeyError, match="Unknown version"):
            get_version("v9")

    def test_frozen(self):
        with pytest.raises(AttributeError):
            V1_STANDARD.name = "other"


class TestBijection:
    @pytest.mark.parametrize("version", ALL_VERSIONS, ids=lambda v: v.name)
    def test_lookup_inverts_charset(self, version):
        for index in range(100):
            assert version.lookup[ord(version.charset[index])] == index

    @pytest.mark.parametrize("version", ALL_VERSIONS, ids=lambda v: v.name)
    def test_permutation_of_base(self, version):
        assert is_permutation_of_base(version.charset)

    @pytest.mark.parametrize("version", ALL_VERSIONS, ids=lambda v: v.name)
    def test_absent_count(self, version):
        assert len(version.lookup) == 128
        assert version.lookup.count(ABSENT) == 28

    def test_versions_differ(self):
        charsets = {v.charset for v in ALL_VERSIONS}
        assert len(charsets) == 4


class TestLayouts:
    def test_v1_space_tilde_swap(self):
        assert V1_STANDARD.charset[0] == "~"
        assert V1_STANDARD.charset[94] == " "
        assert V1_STANDARD.index_of("A") == 33

    def test_v2_numbers_first(self):
        assert V2_NUMBERS.charset[:10] == "0123456789"

    def test_v3_lowercase_first(self):
        assert V3_LOWERCASE.charset[:26] == "abcdefghijklmnopqrstuvwxyz"
        assert V3_LOWERCASE.charset[65:91] == " !\"#$%&'()*+,-./0123456789"

    def test_v4_layout(self):
        assert V4_URL.charset[:26] == "abcdefghijklmnopqrstuvwxyz"
        assert V4_URL.charset[26:36] == "JKLMNOPQRS"
        assert V4_URL.charset[42:52] == ":;<=>?@ABC"

    def test_control_tail_shared(self):
        for version in ALL_VERSIONS:
            assert version.charset[95:] == "\t\n\r\x00\x01"


class TestVersionMethods:
    def test_encode_decode(self):
        strategy = Strategy.core_strict()
        packed = V2_NUMBERS.encode("order 66", strategy)
        assert V2_NUMBERS.decode(packed, strategy) == "order 66"

    def test_default_strategy(self):
        packed = V1_STANDARD.encode("Start #SSX# end")
        assert V1_STANDARD.decode(packed) == "Start #SSX# end"

    def test_same_text_different_wire(self):
        strategy = Strategy.core_strict()
        assert V1_STANDARD.encode("abc", strategy) != V3_LOWERCASE.encode("abc", strategy)

    def test_from_charset_builds_lookup(self):
        version = Version.from_charset("custom", V1_STANDARD.charset)
        assert version.lookup == V1_STANDARD.lookup


class TestDescribeCharset:
    def test_header(self):
        lines = describe_charset(V1_STANDARD).splitlines()
        assert lines[0] == "Version: v1_standard"
        assert lines[1] == "Charset mapping (first 20):"
        assert lines[2] == "  [0]: '~'"
        assert lines[-1] == "  ..."

    def test_escapes_controls(self):
        text = describe_charset(V1_STANDARD, count=100)
        assert "  [95]: '\\t'" in text
        assert "  [98]: '\\0'" in text
        assert "  [99]: '\\x01'" in text
        assert not text.endswith("...")
