"""Sentinel tokenizer: filtered text -> literal runs and marker codes.

A '#' opens a candidate that runs through the next '#' (inclusive), or to
the end of input if there is none. The candidate becomes a marker only if
it is an exact marker name and the strategy's encoding policy accepts the
code. Anything else, including #FAKE#, a lone '#', or a real marker under
the core policy, stays in the literal run character for character.

Adjacent markers (#V##EOF#) split cleanly because each candidate stops at
its own closing '#'.
"""

from dataclasses import dataclass

from ..core.markers import MARKER_DELIMITER, marker_code


@dataclass(frozen=True)
class Sentinel:
    """A literal text run, or a single marker code."""
    text: str = ""
    code: int | None = None

    @property
    def is_marker(self) -> bool:
        return self.code is not None

    @classmethod
    def literal(cls, text: str) -> "Sentinel":
        return cls(text=text)

    @classmethod
    def marker(cls, code: int) -> "Sentinel":
        return cls(code=code)


def tokenize(text, strategy):
    """Split text into sentinels.

    Args:
        text: Input already passed through the strategy's filter
        strategy: Strategy (or anything with supports_index and
            encoding_policy.recognizes_markers)

    Returns:
        List of Sentinel, in input order. Literal runs are never empty.
    """
    sentinels = []
    current = []
    recognize = strategy.encoding_policy.recognizes_markers

    i = 0
    while i < len(text):
        ch = text[i]

        if ch != MARKER_DELIMITER:
            current.append(ch)
            i += 1
            continue

        close = text.find(MARKER_DELIMITER, i + 1)
        end = close + 1 if close != -1 else len(text)
        candidate = text[i:end]

        code = marker_code(candidate) if recognize else None
        if code is not None and strategy.supports_index(code):
            if current:
                sentinels.append(Sentinel.literal("".join(current)))
                current = []
            sentinels.append(Sentinel.marker(code))
        else:
            current.append(candidate)
        i = end

    if current:
        sentinels.append(Sentinel.literal("".join(current)))

    return sentinels
