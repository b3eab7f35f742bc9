"""ASC100 encode/decode.

Encoding:
  1. Filter policy rewrites or rejects out-of-alphabet characters
  2. Tokenizer splits the result into literal runs and markers
  3. Each literal character resolves to its charset index (0-99),
     each marker to its code (100-127)
  4. Indices are bit-packed into the 64-symbol alphabet

Decoding unpacks the indices and maps them back: 0-99 through the
version's charset, 100-127 to the #NAME# marker text. Marker codes are
only accepted when the strategy's encoding policy allows them, and codes
with no assigned marker (119-127) are rejected rather than dropped.
"""

import logging

from ..config import default_strategy, default_version
from ..core.charset import ABSENT, CHARSET_SIZE, LOOKUP_SIZE
from ..core.errors import InvalidCharacterError, InvalidIndexError, NonAsciiInputError
from ..core.markers import is_extension_marker, marker_name
from ..core.packing import pack_indices, unpack_indices
from .tokenizer import tokenize

_LOGGER = logging.getLogger(__name__)


def encode_indices(text, version, strategy) -> list[int]:
    """Filter, tokenize and resolve text to its index sequence."""
    filtered = strategy.filter_input(text)

    indices = []
    for sentinel in tokenize(filtered, strategy):
        if sentinel.is_marker:
            indices.append(sentinel.code)
            continue
        for ch in sentinel.text:
            code = ord(ch)
            if code >= LOOKUP_SIZE:
                raise NonAsciiInputError(ch)
            index = version.lookup[code]
            if index == ABSENT:
                raise InvalidCharacterError(ch)
            indices.append(index)
    return indices


def decode_indices(indices, version, strategy) -> str:
    """Map an index sequence back to text."""
    out = []
    for index in indices:
        if 0 <= index < CHARSET_SIZE:
            out.append(version.charset[index])
            continue
        if not (is_extension_marker(index) and strategy.supports_index(index)):
            raise InvalidIndexError(index)
        name = marker_name(index)
        if name is None:
            # Reserved code with no marker assigned
            raise InvalidIndexError(index)
        out.append(name)
    return "".join(out)


def encode(text, version=None, strategy=None) -> str:
    """Encode text to packed ASC100.

    Args:
        text: Source text
        version: Version to encode with (configured default if None)
        strategy: Strategy to apply (configured default if None)

    Returns:
        String over the 64-symbol packing alphabet.

    Raises:
        InvalidCharacterError: strict filter rejected a character, or a
            character has no charset index
        NonAsciiInputError: a character >= 128 reached index resolution
    """
    version = version or default_version()
    strategy = strategy or default_strategy()

    packed = pack_indices(encode_indices(text, version, strategy))
    _LOGGER.debug("encode %s/%s: %d chars -> %d symbols",
                  version.name, strategy.name, len(text), len(packed))
    return packed


def decode(packed, version=None, strategy=None) -> str:
    """Decode packed ASC100 back to text.

    Raises:
        InvalidPackedCharacterError: input symbol outside the alphabet
        InvalidIndexError: a marker code the strategy does not allow, or
            a reserved code with no marker
    """
    version = version or default_version()
    strategy = strategy or default_strategy()

    text = decode_indices(unpack_indices(packed), version, strategy)
    _LOGGER.debug("decode %s/%s: %d symbols -> %d chars",
                  version.name, strategy.name, len(packed), len(text))
    return text
