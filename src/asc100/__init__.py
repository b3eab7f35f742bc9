"""
ASC100 - 7-bit text codec with a printable 64-symbol wire format.

Usage:
    from asc100 import encode, decode, Strategy, V1_STANDARD

    packed = encode("Hello #V#name#V#", V1_STANDARD, Strategy.extensions_strict())
    text = decode(packed, V1_STANDARD, Strategy.extensions_strict())

    # Or through a version
    packed = V1_STANDARD.encode("Hello, World!", Strategy.core_strict())
"""

from .core.errors import (
    Asc100Error,
    InvalidCharacterError,
    InvalidPackedCharacterError,
    InvalidIndexError,
    NonAsciiInputError,
)

from .core.markers import (
    MARKERS,
    marker_code,
    marker_name,
    is_extension_marker,
)

from .core.packing import (
    PACKING_ALPHABET,
    pack_indices,
    unpack_indices,
)

from .core.versions import (
    Version,
    V1_STANDARD,
    V2_NUMBERS,
    V3_LOWERCASE,
    V4_URL,
    VERSIONS,
    get_version,
    describe_charset,
)

from .engine.strategy import (
    FilterAction,
    FilterPolicy,
    EncodingPolicy,
    Strategy,
)

from .engine.tokenizer import Sentinel, tokenize

from .engine.codec import (
    encode,
    decode,
    encode_indices,
    decode_indices,
)

__all__ = [
    # Errors
    "Asc100Error",
    "InvalidCharacterError",
    "InvalidPackedCharacterError",
    "InvalidIndexError",
    "NonAsciiInputError",
    # Markers
    "MARKERS",
    "marker_code",
    "marker_name",
    "is_extension_marker",
    # Packing
    "PACKING_ALPHABET",
    "pack_indices",
    "unpack_indices",
    # Versions
    "Version",
    "V1_STANDARD",
    "V2_NUMBERS",
    "V3_LOWERCASE",
    "V4_URL",
    "VERSIONS",
    "get_version",
    "describe_charset",
    # Strategy
    "FilterAction",
    "FilterPolicy",
    "EncodingPolicy",
    "Strategy",
    # Pipeline
    "Sentinel",
    "tokenize",
    "encode",
    "decode",
    "encode_indices",
    "decode_indices",
]
