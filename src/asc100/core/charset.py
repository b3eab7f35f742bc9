"""Base charset construction and permutation primitives.

The base charset is 100 characters:
    0-94   printable ASCII, space (0x20) through tilde (0x7E)
    95-99  TAB, LF, CR, NUL, and 0x01 (reserved)

Versions are built from the base by swapping single indices or equal-length
index ranges. Every charset carries a 128-entry inverse lookup table.
"""

CHARSET_SIZE = 100
LOOKUP_SIZE = 128

# Lookup value for ASCII code points not present in a charset
ABSENT = 255

# Indices 95-99
_CONTROL_TAIL = "\t\n\r\x00\x01"


def create_base_charset() -> str:
    """Return the unpermuted 100-character base charset."""
    printable = "".join(chr(v) for v in range(0x20, 0x7F))
    return printable + _CONTROL_TAIL


BASE_CHARSET = create_base_charset()


def swap_chars(charset: str, idx1: int, idx2: int) -> str:
    """Return a copy of charset with two indices exchanged."""
    chars = list(charset)
    chars[idx1], chars[idx2] = chars[idx2], chars[idx1]
    return "".join(chars)


def swap_ranges(charset: str, r1_start: int, r1_len: int,
                r2_start: int, r2_len: int) -> str:
    """Return a copy of charset with two contiguous ranges exchanged.

    Positions are swapped pairwise, so r1_start+i trades places with
    r2_start+i for every i below the range length.
    """
    if r1_len != r2_len:
        raise ValueError(f"Range lengths must match, got {r1_len} and {r2_len}")
    chars = list(charset)
    for i in range(r1_len):
        a, b = r1_start + i, r2_start + i
        chars[a], chars[b] = chars[b], chars[a]
    return "".join(chars)


def build_lookup_table(charset: str) -> tuple[int, ...]:
    """Build the ASCII code point -> charset index table.

    Code points with no entry in the charset map to ABSENT.
    """
    table = [ABSENT] * LOOKUP_SIZE
    for index, ch in enumerate(charset):
        code = ord(ch)
        if code < LOOKUP_SIZE:
            table[code] = index
    return tuple(table)


def is_permutation_of_base(charset: str) -> bool:
    """True if charset holds exactly the base characters, each once."""
    return len(charset) == CHARSET_SIZE and sorted(charset) == sorted(BASE_CHARSET)


# Base range accepted by the filter stage: printable ASCII plus the
# five control characters of the charset tail.
BASE_CHARACTERS = frozenset(BASE_CHARSET)


def in_base_range(ch: str) -> bool:
    """True if ch is one of the 100 charset characters."""
    return ch in BASE_CHARACTERS
