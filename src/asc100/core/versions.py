"""Charset versions.

A version is a fixed permutation of the base charset, tuned so the most
frequent characters of a kind of text land on low indices. All versions
share the marker table and the packing alphabet; only the index <-> char
mapping differs, so packed text must be decoded with the version that
produced it.

    v1_standard         space (0) <-> tilde (94)
    v2_numbers_first    [0,10) <-> [16,26)
    v3_lowercase_first  [0,26) <-> [65,91)
    v4_url_optimized    [0,26) <-> [65,91), then [26,36) <-> [42,52)
"""

from dataclasses import dataclass, field

from .charset import BASE_CHARSET, build_lookup_table, swap_chars, swap_ranges


@dataclass(frozen=True)
class Version:
    name: str
    charset: str
    lookup: tuple[int, ...] = field(repr=False)
    description: str = ""

    @classmethod
    def from_charset(cls, name: str, charset: str, description: str = "") -> "Version":
        return cls(name, charset, build_lookup_table(charset), description)

    def index_of(self, ch: str) -> int:
        """Charset index of ch, or ABSENT."""
        return self.lookup[ord(ch)]

    def encode(self, text: str, strategy=None) -> str:
        """Encode text with this version (default strategy if none given)."""
        from ..engine.codec import encode
        return encode(text, self, strategy)

    def decode(self, packed: str, strategy=None) -> str:
        """Decode packed text produced with this version."""
        from ..engine.codec import decode
        return decode(packed, self, strategy)


def create_v1_standard() -> str:
    return swap_chars(BASE_CHARSET, 0, 94)


def create_v2_numbers_first() -> str:
    # Digits live at 16-25 in the base charset
    return swap_ranges(BASE_CHARSET, 0, 10, 16, 10)


def create_v3_lowercase_first() -> str:
    # Lowercase letters live at 65-90
    return swap_ranges(BASE_CHARSET, 0, 26, 65, 26)


def create_v4_url_optimized() -> str:
    charset = swap_ranges(BASE_CHARSET, 0, 26, 65, 26)
    return swap_ranges(charset, 26, 10, 42, 10)


V1_STANDARD = Version.from_charset(
    "v1_standard", create_v1_standard(), "General text")
V2_NUMBERS = Version.from_charset(
    "v2_numbers_first", create_v2_numbers_first(), "Numeric-heavy text")
V3_LOWERCASE = Version.from_charset(
    "v3_lowercase_first", create_v3_lowercase_first(), "Lowercase-heavy text")
V4_URL = Version.from_charset(
    "v4_url_optimized", create_v4_url_optimized(), "URL-like text")

VERSIONS = {v.name: v for v in (V1_STANDARD, V2_NUMBERS, V3_LOWERCASE, V4_URL)}


def get_version(name: str) -> Version:
    """Look up a version by name."""
    try:
        return VERSIONS[name]
    except KeyError:
        known = ", ".join(VERSIONS)
        raise KeyError(f"Unknown version {name!r} (known: {known})") from None


_ESCAPES = {"\0": "\\0", "\t": "\\t", "\n": "\\n", "\r": "\\r", "\x01": "\\x01"}


def describe_charset(version: Version, count: int = 20) -> str:
    """Human-readable listing of the first count charset entries."""
    lines = [f"Version: {version.name}",
             f"Charset mapping (first {count}):"]
    for i, ch in enumerate(version.charset[:count]):
        lines.append(f"  [{i}]: '{_ESCAPES.get(ch, ch)}'")
    if count < len(version.charset):
        lines.append("  ...")
    return "\n".join(lines)
