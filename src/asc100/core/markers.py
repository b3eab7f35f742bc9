"""Extension marker table.

Markers are written in source text as #NAME# and occupy the reserved
index range 100-127, above the 100 charset indices.

    100-106  INV EOF NL V Q E X   (priority)
    107-108  SSX ESX              (stream)
    109-115  MEM CTX FX ARG TR DNT BRK  (content)
    116-118  HSO HSI ACK          (protocol)
    119-127  reserved
"""

MARKER_MIN = 100
MARKER_MAX = 127

MARKER_INV = 100   # invalid character placeholder
MARKER_EOF = 101   # end of file
MARKER_NL = 102    # newline hint
MARKER_V = 103     # variable placeholder
MARKER_Q = 104     # double quote
MARKER_E = 105     # escape / single quote
MARKER_X = 106     # control / validation

MARKER_SSX = 107   # start stream
MARKER_ESX = 108   # end stream

MARKER_MEM = 109   # encoding / transmission metadata
MARKER_CTX = 110   # content / payload context
MARKER_FX = 111    # function / code block
MARKER_ARG = 112   # arguments
MARKER_TR = 113    # trusted content
MARKER_DNT = 114   # do not trust
MARKER_BRK = 115   # break / separator

MARKER_HSO = 116   # handshake out
MARKER_HSI = 117   # handshake in
MARKER_ACK = 118   # acknowledge

MARKERS = (
    ("#INV#", MARKER_INV),
    ("#EOF#", MARKER_EOF),
    ("#NL#", MARKER_NL),
    ("#V#", MARKER_V),
    ("#Q#", MARKER_Q),
    ("#E#", MARKER_E),
    ("#X#", MARKER_X),
    ("#SSX#", MARKER_SSX),
    ("#ESX#", MARKER_ESX),
    ("#MEM#", MARKER_MEM),
    ("#CTX#", MARKER_CTX),
    ("#FX#", MARKER_FX),
    ("#ARG#", MARKER_ARG),
    ("#TR#", MARKER_TR),
    ("#DNT#", MARKER_DNT),
    ("#BRK#", MARKER_BRK),
    ("#HSO#", MARKER_HSO),
    ("#HSI#", MARKER_HSI),
    ("#ACK#", MARKER_ACK),
)

# Replacement text used by the sanitize filter
INVALID_MARKER = "#INV#"

MARKER_DELIMITER = "#"


def marker_code(name: str) -> int | None:
    """Return the code for a bracketed marker name, or None."""
    for marker, code in MARKERS:
        if marker == name:
            return code
    return None


def marker_name(code: int) -> str | None:
    """Return the bracketed name for a marker code, or None."""
    for marker, marker_index in MARKERS:
        if marker_index == code:
            return marker
    return None


def is_extension_marker(index: int) -> bool:
    """True for indices in the reserved marker range."""
    return MARKER_MIN <= index <= MARKER_MAX
