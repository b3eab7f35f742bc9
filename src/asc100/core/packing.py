"""7-bit index stream <-> 64-symbol packed text.

Each index (0-127) is written as 7 bits, most significant bit first. The
concatenated bit string is zero-padded on the right to a multiple of 6 and
read back as 6-bit groups, each mapped through PACKING_ALPHABET. There is
no '=' padding and no length header: n indices always pack to
ceil(7n/6) symbols.

Unpacking reverses this and drops any trailing group shorter than 7 bits,
which is exactly the zero padding added on the way in.
"""

from bitarray import bitarray
from bitarray.util import ba2int, int2ba, zeros

from .errors import InvalidIndexError, InvalidPackedCharacterError

INDEX_BITS = 7
SYMBOL_BITS = 6
MAX_INDEX = (1 << INDEX_BITS) - 1  # 127

# Standard layout: uppercase, lowercase, digits, '+', '/'.
# Independent of any charset ordering.
PACKING_ALPHABET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789+/"
)

# Reverse lookup: symbol -> 6-bit value
SYMBOL_TO_VALUE = {c: i for i, c in enumerate(PACKING_ALPHABET)}


def packed_length(count: int) -> int:
    """Number of symbols produced for count indices."""
    return -(-count * INDEX_BITS // SYMBOL_BITS)


def indices_to_bits(indices) -> bitarray:
    """Concatenate indices as 7-bit big-endian groups."""
    bits = bitarray(endian="big")
    for index in indices:
        if not 0 <= index <= MAX_INDEX:
            raise InvalidIndexError(index)
        bits.extend(int2ba(index, length=INDEX_BITS, endian="big"))
    return bits


def pack_indices(indices) -> str:
    """Pack a sequence of indices 0-127 into packing-alphabet text."""
    bits = indices_to_bits(indices)
    remainder = len(bits) % SYMBOL_BITS
    if remainder:
        bits.extend(zeros(SYMBOL_BITS - remainder, endian="big"))

    return "".join(
        PACKING_ALPHABET[ba2int(bits[i:i + SYMBOL_BITS])]
        for i in range(0, len(bits), SYMBOL_BITS)
    )


def unpack_indices(packed: str) -> list[int]:
    """Unpack packing-alphabet text into the original index sequence."""
    bits = bitarray(endian="big")
    for position, ch in enumerate(packed):
        value = SYMBOL_TO_VALUE.get(ch)
        if value is None:
            raise InvalidPackedCharacterError(ch, position)
        bits.extend(int2ba(value, length=SYMBOL_BITS, endian="big"))

    # Trailing short group is padding, not data
    usable = len(bits) - len(bits) % INDEX_BITS
    return [ba2int(bits[i:i + INDEX_BITS]) for i in range(0, usable, INDEX_BITS)]
