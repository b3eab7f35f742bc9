"""Filter and encoding policies.

Two independent axes decide how text is encoded:

  FilterPolicy    what happens to characters outside the base alphabet
                  (runs first, over the raw input)
      STRICT      abort with InvalidCharacterError
      SANITIZE    replace with the #INV# marker text
      STRIP       drop silently

  EncodingPolicy  which index range the tokenizer and packer may use
      CORE        0-99 only; marker syntax is plain text
      EXTENSIONS  0-127; #NAME# markers are recognized

A Strategy pairs one of each. Both axes are enums and Strategy is frozen,
so a strategy can be built once and shared freely.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from ..core.charset import CHARSET_SIZE, in_base_range
from ..core.errors import InvalidCharacterError
from ..core.markers import INVALID_MARKER, MARKER_MAX

_LOGGER = logging.getLogger(__name__)


class FilterAction(Enum):
    KEEP = "keep"
    REPLACE = "replace"
    SKIP = "skip"
    ERROR = "error"


class FilterPolicy(Enum):
    STRICT = "strict"
    SANITIZE = "sanitize"
    STRIP = "strip"

    @property
    def replacement(self) -> str:
        return INVALID_MARKER

    def handle_char(self, ch: str) -> FilterAction:
        """Classify one input character."""
        if in_base_range(ch):
            return FilterAction.KEEP
        return _OUT_OF_RANGE[self]

    def filter_input(self, text: str) -> str:
        """Apply the policy to a whole string.

        Raises InvalidCharacterError on the first rejected character.
        """
        out = []
        dropped = 0
        for position, ch in enumerate(text):
            action = self.handle_char(ch)
            if action is FilterAction.KEEP:
                out.append(ch)
            elif action is FilterAction.REPLACE:
                out.append(self.replacement)
                dropped += 1
            elif action is FilterAction.SKIP:
                dropped += 1
            else:
                raise InvalidCharacterError(ch, position)

        if dropped:
            _LOGGER.debug("%s filter rewrote %d of %d characters",
                          self.value, dropped, len(text))
        return "".join(out)


_OUT_OF_RANGE = {
    FilterPolicy.STRICT: FilterAction.ERROR,
    FilterPolicy.SANITIZE: FilterAction.REPLACE,
    FilterPolicy.STRIP: FilterAction.SKIP,
}


class EncodingPolicy(Enum):
    CORE = "core"
    EXTENSIONS = "extensions"

    @property
    def max_index(self) -> int:
        if self is EncodingPolicy.CORE:
            return CHARSET_SIZE - 1
        return MARKER_MAX

    @property
    def recognizes_markers(self) -> bool:
        return self is EncodingPolicy.EXTENSIONS

    def supports_index(self, index: int) -> bool:
        return 0 <= index <= self.max_index


@dataclass(frozen=True)
class Strategy:
    filter_policy: FilterPolicy = FilterPolicy.STRICT
    encoding_policy: EncodingPolicy = EncodingPolicy.EXTENSIONS

    @property
    def name(self) -> str:
        return f"{self.encoding_policy.value}_{self.filter_policy.value}"

    def filter_input(self, text: str) -> str:
        return self.filter_policy.filter_input(text)

    def supports_index(self, index: int) -> bool:
        return self.encoding_policy.supports_index(index)

    @classmethod
    def from_names(cls, filter_name: str, encoding_name: str) -> "Strategy":
        """Build a strategy from policy names, e.g. ("strip", "core")."""
        try:
            filter_policy = FilterPolicy(filter_name.lower())
        except ValueError:
            raise ValueError(f"Unknown filter policy: {filter_name!r}") from None
        try:
            encoding_policy = EncodingPolicy(encoding_name.lower())
        except ValueError:
            raise ValueError(f"Unknown encoding policy: {encoding_name!r}") from None
        return cls(filter_policy, encoding_policy)

    @classmethod
    def core_strict(cls) -> "Strategy":
        return cls(FilterPolicy.STRICT, EncodingPolicy.CORE)

    @classmethod
    def core_sanitize(cls) -> "Strategy":
        return cls(FilterPolicy.SANITIZE, EncodingPolicy.CORE)

    @classmethod
    def core_strip(cls) -> "Strategy":
        return cls(FilterPolicy.STRIP, EncodingPolicy.CORE)

    @classmethod
    def extensions_strict(cls) -> "Strategy":
        return cls(FilterPolicy.STRICT, EncodingPolicy.EXTENSIONS)

    @classmethod
    def extensions_sanitize(cls) -> "Strategy":
        return cls(FilterPolicy.SANITIZE, EncodingPolicy.EXTENSIONS)

    @classmethod
    def extensions_strip(cls) -> "Strategy":
        return cls(FilterPolicy.STRIP, EncodingPolicy.EXTENSIONS)
