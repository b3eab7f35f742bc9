"""Codec errors.

All four error kinds are siblings; Asc100Error only exists so callers can
catch any codec failure in one clause. Each error carries the offending
value. Encode and decode never return partial output.
"""


class Asc100Error(ValueError):
    pass


class InvalidCharacterError(Asc100Error):
    """Source character outside the base alphabet and not a marker."""

    def __init__(self, char: str, position: int | None = None):
        self.char = char
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid character {char!r} (U+{ord(char):04X}){where}")


class InvalidPackedCharacterError(Asc100Error):
    """Encoded input character outside the 64-symbol packing alphabet."""

    def __init__(self, char: str, position: int | None = None):
        self.char = char
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid packed character {char!r}{where}")


class InvalidIndexError(Asc100Error):
    """Index not usable under the active strategy, or out of 0-127."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Invalid index: {index}")


class NonAsciiInputError(Asc100Error):
    """Character >= 128 reached index resolution."""

    def __init__(self, char: str, position: int | None = None):
        self.char = char
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Input contains non-ASCII character {char!r}{where}")
